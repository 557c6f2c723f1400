"""CLI helpers for kuetix-container.

Click callbacks that parse NAME=LEVEL logger overrides and KEY=VALUE
parameters, and a loader for ``module:attribute`` boot targets.
"""

from .boot_targets import load_boot_target
from .log_level_parser import parse_log_level
from .parameters import parse_parameters

__all__ = ["load_boot_target", "parse_log_level", "parse_parameters"]
