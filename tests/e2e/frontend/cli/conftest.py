"""Fixtures and test helpers for end-to-end CLI logging tests.

Provides a test-only `log-demo` Click command that emits log messages on a
project logger and a third-party logger, plus fixtures to register that
command and obtain a CliRunner.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from kuetix_container.entrypoints.cli.main import kuetix_container

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Emit one message per level on 'kuetix_container.demo' and 'some.thirdparty'."""
    logger = logging.getLogger("kuetix_container.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    third_party_logger.warning("This is a warning-level third-party test message.")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and any internal sections."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo(isolated_logging):  # pylint: disable=unused-argument
    """Register 'log-demo' on the top-level group for the duration of a test."""
    kuetix_container.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(kuetix_container, "log-demo")


@pytest.fixture
def runner(monkeypatch):
    """Return a Click CliRunner with a console wide enough for whole lines."""
    monkeypatch.setenv("COLUMNS", "200")
    return CliRunner()
