"""Thread-safe service registry.

The registry holds three independent key/value stores:

- **parameters**: static configuration values; never invoked.
- **singletons**: already-constructed instances returned as-is on every lookup.
- **factories**: zero-argument constructors; every resolve calls the
  constructor again and returns its fresh result (no memoization).

Each store is guarded by its own `ReadWriteLock`, so reads of one store never
wait on writes to another. The same key may live in more than one store at
once; `lookup()` prefers the singleton over the factory, which lets a caller
override a computed default (e.g. with a test double) without removing the
factory registration.

Constructors run **outside** every store lock. A constructor may therefore
read other registry entries; it must not block on a lock held by its caller.

Typical usage
-------------
    registry = Registry()
    registry.set_parameter("db.url", "sqlite:///:memory:")
    registry.set_factory("session", lambda: Session(registry.get_parameter("db.url")))
    registry.set_singleton_from_factory("clock", SystemClock)

    session = registry.lookup("session")  # new Session each call
    clock = registry.lookup("clock")      # same SystemClock every call
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, overload

from .errors import NotFound, StoreKind
from .keys import Key, key_name
from .locks import ReadWriteLock

__all__ = ["Registry", "RegistrySnapshot"]

logger = logging.getLogger(__name__)

T = TypeVar("T")
V = TypeVar("V")

Factory = Callable[[], Any]

MISSING = object()  # absent-key sentinel; None is a storable value


class _Store(Generic[V]):
    """One namespace of the registry with its own reader-writer lock."""

    def __init__(self, kind: StoreKind) -> None:
        self.kind = kind
        self._entries: dict[str, V] = {}
        self._lock = ReadWriteLock()

    def set(self, key: str, value: V) -> None:
        with self._lock.write_locked():
            self._entries[key] = value

    def get(self, key: str) -> V:
        with self._lock.read_locked():
            try:
                return self._entries[key]
            except KeyError as e:
                raise NotFound(key, self.kind) from e

    def find(self, key: str) -> V | object:
        """Return the stored value, or `MISSING` when *key* is absent."""
        with self._lock.read_locked():
            return self._entries.get(key, MISSING)

    def contains(self, key: str) -> bool:
        with self._lock.read_locked():
            return key in self._entries

    def keys(self) -> tuple[str, ...]:
        with self._lock.read_locked():
            return tuple(sorted(self._entries))

    def reset(self) -> None:
        # A new dict (not clear()) so references to the old one are detached.
        with self._lock.write_locked():
            self._entries = {}


@dataclass(frozen=True)
class RegistrySnapshot:
    """Sorted keys present in each store at the time of the snapshot."""

    parameters: tuple[str, ...]
    singletons: tuple[str, ...]
    factories: tuple[str, ...]

    def rows(self) -> list[tuple[StoreKind, str]]:
        """Flatten into ``(store, key)`` rows: singletons, factories, parameters."""
        return [
            *((StoreKind.SINGLETON, key) for key in self.singletons),
            *((StoreKind.FACTORY, key) for key in self.factories),
            *((StoreKind.PARAMETER, key) for key in self.parameters),
        ]


class Registry:
    """Container of parameters, singletons and factories.

    Keys are strings, or `Key[T]` wrappers that address the same entry as
    their name. Setting an existing key overwrites it silently (last write
    wins). Lookups of absent keys raise `NotFound`.
    """

    def __init__(self) -> None:
        self._parameters: _Store[Any] = _Store(StoreKind.PARAMETER)
        self._singletons: _Store[Any] = _Store(StoreKind.SINGLETON)
        self._factories: _Store[Factory] = _Store(StoreKind.FACTORY)

    # ---- parameters ----

    def set_parameter(self, key: str | Key[T], value: T) -> None:
        """Insert or replace a configuration parameter."""
        name = key_name(key)
        self._parameters.set(name, value)
        logger.debug("Set parameter %s", name)

    @overload
    def get_parameter(self, key: Key[T]) -> T: ...

    @overload
    def get_parameter(self, key: str) -> Any: ...

    def get_parameter(self, key: str | Key[Any]) -> Any:
        """Return the parameter stored under *key*.

        Raises:
            NotFound: If no parameter is stored under *key*.
        """
        return self._parameters.get(key_name(key))

    def has_parameter(self, key: str | Key[Any]) -> bool:
        """Return True if a parameter is stored under *key*."""
        return self._parameters.contains(key_name(key))

    # ---- singletons ----

    def set_singleton(self, key: str | Key[T], value: T) -> None:
        """Insert or replace a singleton instance."""
        name = key_name(key)
        self._singletons.set(name, value)
        logger.debug("Set singleton %s", name)

    def set_singleton_from_factory(
        self, key: str | Key[T], constructor: Callable[[], T]
    ) -> T:
        """Call *constructor* once, now, and store its result as a singleton.

        Exceptions raised by *constructor* propagate unchanged and nothing is
        stored.

        Returns:
            The constructed instance.
        """
        name = key_name(key)
        instance = constructor()
        self._singletons.set(name, instance)
        logger.debug("Set singleton %s from factory", name)
        return instance

    @overload
    def get_singleton(self, key: Key[T]) -> T: ...

    @overload
    def get_singleton(self, key: str) -> Any: ...

    def get_singleton(self, key: str | Key[Any]) -> Any:
        """Return the singleton stored under *key*.

        Raises:
            NotFound: If no singleton is stored under *key*.
        """
        return self._singletons.get(key_name(key))

    def has_singleton(self, key: str | Key[Any]) -> bool:
        """Return True if a singleton is stored under *key*."""
        return self._singletons.contains(key_name(key))

    # ---- factories ----

    def set_factory(self, key: str | Key[T], constructor: Callable[[], T]) -> None:
        """Insert or replace a factory. The constructor is not called here."""
        name = key_name(key)
        self._factories.set(name, constructor)
        logger.debug("Set factory %s", name)

    @overload
    def invoke_factory(self, key: Key[T]) -> T: ...

    @overload
    def invoke_factory(self, key: str) -> Any: ...

    def invoke_factory(self, key: str | Key[Any]) -> Any:
        """Call the factory stored under *key* and return its fresh result.

        The result is never cached; use `set_singleton_from_factory` for that.

        Raises:
            NotFound: If no factory is stored under *key*.
        """
        constructor = self._factories.get(key_name(key))
        return constructor()

    def has_factory(self, key: str | Key[Any]) -> bool:
        """Return True if a factory is stored under *key*."""
        return self._factories.contains(key_name(key))

    # ---- combined ----

    @overload
    def lookup(self, key: Key[T]) -> T: ...

    @overload
    def lookup(self, key: str) -> Any: ...

    def lookup(self, key: str | Key[Any]) -> Any:
        """Resolve *key* from the singleton store, falling back to factories.

        Raises:
            NotFound: If *key* is in neither the singleton nor the factory store.
        """
        name = key_name(key)
        instance = self._singletons.find(name)
        if instance is not MISSING:
            return instance
        constructor = self._factories.find(name)
        if constructor is not MISSING:
            return constructor()  # type: ignore[operator]
        logger.debug("Lookup of %s missed singleton and factory stores", name)
        raise NotFound(name, StoreKind.SINGLETON, StoreKind.FACTORY)

    def has_any(self, key: str | Key[Any]) -> bool:
        """Return True if *key* is a singleton, a factory or a parameter."""
        name = key_name(key)
        return (
            self._singletons.contains(name)
            or self._factories.contains(name)
            or self._parameters.contains(name)
        )

    # ---- introspection & lifecycle ----

    def keys(self, store: StoreKind) -> tuple[str, ...]:
        """Return the sorted keys currently present in *store*."""
        return self._store(store).keys()

    def snapshot(self) -> RegistrySnapshot:
        """Return the sorted keys of every store."""
        return RegistrySnapshot(
            parameters=self._parameters.keys(),
            singletons=self._singletons.keys(),
            factories=self._factories.keys(),
        )

    def reset_all(self) -> None:
        """Discard every entry of all three stores (intended for tests)."""
        self._parameters.reset()
        self._singletons.reset()
        self._factories.reset()
        logger.debug("Reset all registry stores")

    def _store(self, kind: StoreKind) -> _Store[Any]:
        match kind:
            case StoreKind.PARAMETER:
                return self._parameters
            case StoreKind.SINGLETON:
                return self._singletons
            case StoreKind.FACTORY:
                return self._factories
            case _:
                raise ValueError(f"unknown store kind: {kind!r}")
