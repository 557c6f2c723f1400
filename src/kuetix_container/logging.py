"""Logging helpers used by the kuetix-container CLI.

Library modules only ever call `logging.getLogger(__name__)`; handlers are
attached by the CLI (or by the host application). The CLI's Rich console
handler tags records from foreign packages with ``[pkg]`` so they stand out
from kuetix-container's own output and from the application being
inspected, which `mark_first_party` adds to the untagged set.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from collections.abc import Iterable
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "kuetix_container"


class ThirdPartyPrefixFilter(logging.Filter):
    """Tag records from loggers outside the first-party packages.

    A record from ``myapp.services.db`` gets ``record.prefix = "[myapp] "``.
    Records from a first-party logger, or any of its descendants, get an empty
    prefix. The filter never drops a record.

    Args:
        first_party: Top-level logger names treated as first-party.
    """

    def __init__(self, first_party: Iterable[str] = (PROJECT_PREFIX,)) -> None:
        super().__init__()
        self.first_party: tuple[str, ...] = tuple(first_party)

    def add_first_party(self, *names: str) -> None:
        # Rebind rather than mutate; filter() may be running on another thread.
        self.first_party = (
            *self.first_party,
            *(name for name in names if name not in self.first_party),
        )

    def is_first_party(self, name: str) -> bool:
        return any(
            name == root or name.startswith(f"{root}.") for root in self.first_party
        )

    def filter(self, record: logging.LogRecord) -> bool:
        if self.is_first_party(record.name):
            record.prefix = ""
        else:
            record.prefix = f"[{record.name.split('.')[0]}] "
        return True


def mark_first_party(*names: str, logger: Logger | None = None) -> None:
    """Stop prefixing records from *names* on the console handlers of *logger*.

    *logger* defaults to the root logger, which is where the CLI installs its
    handler. Handlers without a `ThirdPartyPrefixFilter` are left alone.
    """
    target = logger or logging.getLogger()
    for handler in target.handlers:
        for flt in handler.filters:
            if isinstance(flt, ThirdPartyPrefixFilter):
                flt.add_first_party(*names)


CONSOLE_FORMAT = "%(prefix)s%(message)s"
DEBUG_FORMAT = "%(asctime)s %(name)s: %(message)s"

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


def config_console_handler(
    level: int = logging.INFO,
    debug_mode: bool = False,
    color: bool = True,
    first_party: Iterable[str] = (),
) -> RichHandler:
    """Build the stderr RichHandler the CLI installs on the root logger.

    Outside debug mode records are formatted as ``[pkg] message``, with no
    tag for `PROJECT_PREFIX` or any *first_party* logger. In debug mode the
    handler always runs at DEBUG, shows the logger name and the source
    location, and tags nothing.

    Args:
        level: Minimum level for console output (ignored in debug mode).
        debug_mode: Switch to the diagnostic format described above.
        color: ``False`` mirrors click-extra's ``--no-color``.
        first_party: Extra top-level logger names to leave untagged.
    """
    color_system: ColorSystem | None = "auto" if color else None
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )

    if debug_mode:
        handler.setFormatter(logging.Formatter(fmt=DEBUG_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(fmt=CONSOLE_FORMAT))
        handler.addFilter(ThirdPartyPrefixFilter((PROJECT_PREFIX, *first_party)))
    return handler


def log_startup(
    logger: Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    logger_levels: dict[str, int],
) -> None:
    """Log a one-line startup summary plus DEBUG diagnostics.

    Args:
        logger: Logger used to emit startup messages.
        app_version: Application version string to display.
        level: Effective console logging level (numeric).
        handlers: Active logging handlers attached to the root logger.
        logger_levels: Mapping of logger names to their configured numeric levels.
    """

    logger.info(
        "kuetix-container %s (console=%s)",
        app_version,
        logging.getLevelName(level),
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if logger_levels:
        logger.debug(
            "Per-logger overrides: %s",
            {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()},
        )
    else:
        logger.debug("Per-logger overrides: <none>")
