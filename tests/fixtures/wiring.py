"""Boot targets used by the CLI tests (``tests.fixtures.wiring:<name>``)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kuetix_container.bootstrap import AppContainer

logger = logging.getLogger(__name__)


class Clock:  # pylint: disable=too-few-public-methods
    """Stand-in service."""

    def now(self) -> int:
        """Always midnight."""
        return 0


def wire(container: AppContainer) -> None:
    """Register one of each kind of entry plus a bootstrap callback."""
    registry = container.registry
    registry.set_singleton("clock", Clock())
    registry.set_factory("session", object)
    registry.set_parameter("app.name", "demo")

    def _warm_cache(name: str) -> None:
        registry.set_singleton(f"{name}.warmed", True)

    container.gate.callbacks["cache"] = _warm_cache


def failing_callback(container: AppContainer) -> None:
    """Register a bootstrap callback that always fails."""

    def _explode(name: str) -> None:
        raise RuntimeError(f"{name} failed")

    container.gate.callbacks["explode"] = _explode


def logging_wire(container: AppContainer) -> None:
    """Log a warning from this package and from a foreign one, then wire."""
    logger.warning("Wiring demo services")
    logging.getLogger("some.thirdparty").warning("Foreign warning during wiring")
    wire(container)


NOT_CALLABLE = 42
