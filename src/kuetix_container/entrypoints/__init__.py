"""Entrypoints (inbound adapters) for kuetix-container.

Expose the container to the outside world: currently a developer CLI for
inspecting what a set of bootstrap modules registers.

Dependency rule: may import `kuetix_container.bootstrap`; library modules
must not import entrypoints.
"""
