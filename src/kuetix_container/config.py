"""Configuration utilities for kuetix-container.

This module centralizes small helpers and constants for turning environment
variables and ``KEY=VALUE`` strings into registry parameters.
"""

import os
from collections.abc import Mapping

PARAMETER_ENV_PREFIX = "KUETIX_PARAM_"  # pragma: no mutate
NESTING_SEPARATOR = "__"  # pragma: no mutate


class InvalidAssignmentError(ValueError):
    """Raised when a ``KEY=VALUE`` string cannot be parsed."""


def env_name_to_key(name: str, prefix: str = PARAMETER_ENV_PREFIX) -> str:
    """Convert an environment variable name into a parameter key.

    The prefix is stripped, the remainder lower-cased, and every ``__``
    becomes a ``.``: ``KUETIX_PARAM_DB__URL`` -> ``db.url``.
    """
    return name[len(prefix) :].lower().replace(NESTING_SEPARATOR, ".")


def parameters_from_env(
    environ: Mapping[str, str] | None = None, prefix: str = PARAMETER_ENV_PREFIX
) -> dict[str, str]:
    """Collect registry parameters from prefixed environment variables.

    Args:
        environ: The environment to read. Defaults to `os.environ`.
        prefix: Only variables starting with this prefix are considered.

    Returns:
        A mapping of parameter keys to their (string) values. Variables equal
        to the bare prefix are ignored.
    """
    env = os.environ if environ is None else environ
    return {
        env_name_to_key(name, prefix): value
        for name, value in env.items()
        if name.startswith(prefix) and len(name) > len(prefix)
    }


def parse_assignment(item: str) -> tuple[str, str]:
    """Split a ``KEY=VALUE`` string into its key and value.

    Surrounding whitespace is stripped from the key only; the value is kept
    verbatim and may itself contain ``=``.

    Raises:
        InvalidAssignmentError: If there is no ``=`` or the key is empty.
    """
    key, sep, value = item.partition("=")
    key = key.strip()
    if not sep or not key:
        raise InvalidAssignmentError(f"Expected KEY=VALUE, got {item!r}")
    return key, value
