"""kuetix-container

A small, thread-safe service registry for Python applications. It stores
configuration parameters, lazily-invoked factories and cached singletons,
and offers a one-shot bootstrap gate for running named initializers at
startup. Build one per application with `kuetix_container.bootstrap.bootstrap()`.
"""

from .bootstrap import AppContainer, BootstrapGate
from .errors import BootstrapError, ContainerError, GateNotInitialized, NotFound, StoreKind
from .keys import Key
from .registry import Registry, RegistrySnapshot

__all__ = [
    "__version__",
    "AppContainer",
    "BootstrapError",
    "BootstrapGate",
    "ContainerError",
    "GateNotInitialized",
    "Key",
    "NotFound",
    "Registry",
    "RegistrySnapshot",
    "StoreKind",
]
__version__ = "0.1.0"
