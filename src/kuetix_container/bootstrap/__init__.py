"""Bootstrap (composition root) for kuetix-container.

Assembles an application container at runtime: builds a `Registry`, seeds it
with configuration parameters (environment first, explicit values last),
and initializes a `BootstrapGate` so initializers can be registered and later
drained with `boot()`.

Import rules:
- Entry points import *this* package to obtain an `AppContainer`.
- `kuetix_container.registry` and `kuetix_container.errors` must not import
  `kuetix_container.bootstrap`.

Public surface:
- `AppContainer`, `bootstrap()`, `boot()` and the `BootstrapGate` itself.
"""

from .bootstrap import AppContainer, boot, bootstrap
from .gate import BootstrapCallback, BootstrapGate, CallbackMap

__all__ = [
    "AppContainer",
    "BootstrapCallback",
    "BootstrapGate",
    "CallbackMap",
    "boot",
    "bootstrap",
]
