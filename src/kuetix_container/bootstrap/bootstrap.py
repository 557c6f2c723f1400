"""Bootstrap an application container with parameters and a bootstrap gate."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from kuetix_container import config
from kuetix_container.errors import StoreKind
from kuetix_container.registry import Registry

from .gate import BootstrapGate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContainer:
    """The registry and bootstrap gate shared by the whole application.

    Built once at startup and passed by reference to every consumer, in place
    of module-level globals.
    """

    registry: Registry
    gate: BootstrapGate


def build_registry(
    parameters: Mapping[str, object] | None = None,
    *,
    environ: Mapping[str, str] | None = None,
    load_env: bool = True,
) -> Registry:
    """Build a new registry seeded with configuration parameters.

    Parameters found in the environment are set first, so explicit
    *parameters* override them.
    """
    registry = Registry()
    seeded: dict[str, object] = {}
    if load_env:
        seeded.update(config.parameters_from_env(environ))
    if parameters:
        seeded.update(parameters)
    for key, value in seeded.items():
        registry.set_parameter(key, value)
    return registry


def bootstrap(
    parameters: Mapping[str, object] | None = None,
    *,
    environ: Mapping[str, str] | None = None,
    load_env: bool = True,
) -> AppContainer:
    """Build a registry and an initialized bootstrap gate.

    Args:
        parameters: Parameters to seed the registry with. These win over
            values read from the environment.
        environ: Environment to read `KUETIX_PARAM_*` variables from.
            Defaults to `os.environ`.
        load_env: When False, the environment is not consulted at all.

    Returns:
        A new `AppContainer`; callbacks can be registered into
        `container.gate.callbacks` straight away.
    """
    registry = build_registry(parameters, environ=environ, load_env=load_env)
    gate = BootstrapGate()
    gate.initialize()
    logger.debug(
        "Bootstrapped container with %d parameter(s)",
        len(registry.keys(StoreKind.PARAMETER)),
    )
    return AppContainer(registry=registry, gate=gate)


def boot(container: AppContainer) -> None:
    """Run every bootstrap callback registered on the container's gate."""
    container.gate.run_registered_callbacks()
