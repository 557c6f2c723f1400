"""One-shot bootstrap gate.

The gate owns a flag and a map of named initializer callbacks. Startup code
calls `initialize()` once; any code holding the gate then registers callbacks
by plain mapping assignment (``gate.callbacks["db"] = init_db``); a later call
to `run_registered_callbacks()` invokes each of them with its own name.

`initialize()` is a guarded check-then-act: concurrent first calls allocate
exactly one callback map, and repeated calls keep the map (and its
registrations) intact.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterator, MutableMapping

from ..errors import GateNotInitialized
from ..locks import ReadWriteLock

__all__ = ["BootstrapCallback", "BootstrapGate", "CallbackMap"]

logger = logging.getLogger(__name__)

BootstrapCallback = Callable[[str], None]


class CallbackMap(MutableMapping[str, BootstrapCallback]):
    """Name -> callback mapping guarded by a reader-writer lock.

    Behaves like a ``dict``. Item access, ``setdefault`` and ``pop`` are
    atomic; ``update`` and ``popitem`` are sequences of atomic steps.
    Iteration runs over a snapshot of the keys, so the map may be mutated
    while it is being iterated.
    """

    def __init__(self) -> None:
        self._callbacks: dict[str, BootstrapCallback] = {}
        self._lock = ReadWriteLock()

    def __getitem__(self, name: str) -> BootstrapCallback:
        with self._lock.read_locked():
            return self._callbacks[name]

    def __setitem__(self, name: str, callback: BootstrapCallback) -> None:
        with self._lock.write_locked():
            self._callbacks[name] = callback

    def __delitem__(self, name: str) -> None:
        with self._lock.write_locked():
            del self._callbacks[name]

    def __iter__(self) -> Iterator[str]:
        with self._lock.read_locked():
            names = list(self._callbacks)
        return iter(names)

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._callbacks)

    def __contains__(self, name: object) -> bool:
        with self._lock.read_locked():
            return name in self._callbacks

    def setdefault(  # type: ignore[override]
        self, name: str, default: BootstrapCallback
    ) -> BootstrapCallback:
        with self._lock.write_locked():
            return self._callbacks.setdefault(name, default)

    def pop(self, name: str, *default: BootstrapCallback) -> BootstrapCallback:  # type: ignore[override]
        with self._lock.write_locked():
            return self._callbacks.pop(name, *default)

    def sorted_items(self) -> list[tuple[str, BootstrapCallback]]:
        """Return a consistent snapshot of ``(name, callback)`` pairs sorted by name."""
        with self._lock.read_locked():
            return sorted(self._callbacks.items(), key=lambda item: item[0])


class BootstrapGate:
    """Process-wide initialization flag plus named initializer callbacks.

    Callbacks run in **sorted name order**. If a callback raises, the error is
    logged and re-raised unchanged, and callbacks sorting after it are skipped
    for that pass. The map is never cleared by a run, so every run re-invokes
    every registered callback.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._initialized = False
        self._callbacks: CallbackMap | None = None

    @property
    def is_initialized(self) -> bool:
        """Whether `initialize()` has run since construction or the last reset."""
        with self._lock:
            return self._initialized

    @property
    def callbacks(self) -> CallbackMap:
        """The shared callback map; register callbacks by assigning into it.

        Raises:
            GateNotInitialized: If `initialize()` has not run yet.
        """
        with self._lock:
            if self._callbacks is None:
                raise GateNotInitialized()
            return self._callbacks

    def initialize(self) -> bool:
        """Allocate an empty callback map and set the flag, once.

        Returns:
            True for the call that performed the initialization; False when
            the gate was already initialized (the existing map is kept).
        """
        with self._lock:
            if self._initialized:
                return False
            self._callbacks = CallbackMap()
            self._initialized = True
        logger.debug("Bootstrap gate initialized")
        return True

    def run_registered_callbacks(self) -> None:
        """Invoke every registered callback with its own registration name.

        Raises:
            Exception: Whatever a callback raises, unchanged.
        """
        with self._lock:
            callbacks = self._callbacks
        if callbacks is None:
            logger.debug("Bootstrap gate not initialized; no callbacks to run")
            return

        for name, callback in callbacks.sorted_items():
            logger.debug("Running bootstrap callback %s", name)
            try:
                callback(name)
            except Exception:  # pylint: disable=broad-except
                logger.exception("Exception running bootstrap callback %s", name)
                raise

    def reset_for_testing(self) -> None:
        """Clear the flag and drop the callback map (intended for tests)."""
        with self._lock:
            self._initialized = False
            self._callbacks = None
        logger.debug("Bootstrap gate reset")
