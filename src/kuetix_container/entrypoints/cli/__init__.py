"""kuetix-container command-line interface."""

from .main import kuetix_container

__all__ = ["kuetix_container"]
