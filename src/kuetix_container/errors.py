"""Exceptions raised by the container and its bootstrap gate."""

from __future__ import annotations

from enum import Enum


class StoreKind(str, Enum):
    """The three independent namespaces held by a registry."""

    PARAMETER = "parameter"
    SINGLETON = "singleton"
    FACTORY = "factory"


class ContainerError(Exception):
    """Base class for container errors."""


class NotFound(ContainerError, LookupError):
    """A get/invoke/lookup targeted a key absent from the relevant store(s).

    Attributes:
        key (str): The key that was requested.
        stores (tuple[StoreKind, ...]): The stores that were searched, in the
            order they were searched.
    """

    def __init__(self, key: str, *stores: StoreKind) -> None:
        if len(stores) == 1:
            message = f"{stores[0].value} '{key}' not found"
        else:
            searched = " or ".join(store.value for store in stores)
            message = f"key '{key}' not found in {searched} store"
        super().__init__(message)
        self.key = key
        self.stores = stores


class BootstrapError(ContainerError):
    """Base class for bootstrap gate errors."""


class GateNotInitialized(BootstrapError):
    """The callback map was requested before the gate was initialized."""

    def __init__(self) -> None:
        super().__init__(
            "Bootstrap gate is not initialized; call initialize() before "
            "registering callbacks."
        )
