"""Resolve ``module:attribute`` strings into boot callables.

A boot target is any callable accepting an `AppContainer`. It registers
parameters, singletons, factories and bootstrap callbacks on the container
it is given, e.g.:

    # myapp/wiring.py
    def wire(container):
        container.registry.set_factory("session", Session)
        container.gate.callbacks["cache"] = lambda name: warm_cache()

    $ kuetix-container inspect --boot myapp.wiring:wire
"""

from __future__ import annotations

import importlib
from collections.abc import Callable
from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from kuetix_container.bootstrap import AppContainer

BootTarget = Callable[["AppContainer"], object]


def load_boot_target(spec: str) -> BootTarget:
    """Import ``module:attribute`` and return the attribute.

    Dotted attribute paths (``module:obj.method``) are followed.

    Raises:
        click.BadParameter: If *spec* is not of the form ``module:attribute``.
        click.ClickException: If the module cannot be imported, the attribute
            does not exist, or it is not callable.
    """
    module_name, sep, attr_path = spec.partition(":")
    if not sep or not module_name or not attr_path:
        raise click.BadParameter(f"Expected MODULE:ATTRIBUTE, got {spec!r}")

    try:
        target: object = importlib.import_module(module_name)
    except ImportError as e:
        raise click.ClickException(f"Cannot import module {module_name!r}: {e}") from e

    for part in attr_path.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as e:
            raise click.ClickException(
                f"Module {module_name!r} has no attribute {attr_path!r}"
            ) from e

    if not callable(target):
        raise click.ClickException(f"Boot target {spec!r} is not callable")
    return target
