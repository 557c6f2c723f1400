"""Global pytest fixtures for kuetix-container."""

from __future__ import annotations

import logging

import pytest

from kuetix_container.bootstrap import AppContainer, BootstrapGate, bootstrap
from kuetix_container.registry import Registry


@pytest.fixture
def registry() -> Registry:
    """A fresh, empty registry."""
    return Registry()


@pytest.fixture
def gate() -> BootstrapGate:
    """A fresh, uninitialized bootstrap gate."""
    return BootstrapGate()


@pytest.fixture
def container() -> AppContainer:
    """A bootstrapped container that ignores the process environment."""
    return bootstrap(load_env=False)


@pytest.fixture
def isolated_logging():
    """Undo the root-logger and per-logger configuration a CLI run applies."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    manager_loggers = {
        name: logger.level
        for name, logger in logging.Logger.manager.loggerDict.items()
        if isinstance(logger, logging.Logger)
    }
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    for name, lvl in manager_loggers.items():
        logging.getLogger(name).setLevel(lvl)
