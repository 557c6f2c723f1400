"""Typed registry keys.

A `Key[T]` names an entry and carries the type of the value stored under it,
so static type checkers can infer what `Registry.lookup(key)` returns.
It is a naming convenience only: values are never checked at runtime, and a
`Key` addresses the same entry as its plain string name.

Example:
    ```py
    DB_URL: Key[str] = Key("db.url")
    registry.set_parameter(DB_URL, "sqlite:///:memory:")
    url = registry.get_parameter(DB_URL)  # inferred as str
    registry.get_parameter("db.url")      # same entry
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Key(Generic[T]):
    """Name of a registry entry, parameterized by the type stored under it."""

    name: str

    def __str__(self) -> str:
        return self.name


def key_name(key: str | Key) -> str:
    """Return the plain string name for *key*."""
    return key.name if isinstance(key, Key) else key
