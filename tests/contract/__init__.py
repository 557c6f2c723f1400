"""Contract tests.

Purpose
- Pin the observable guarantees of the registry and the bootstrap gate:
  linearizable per-key reads/writes, no lost writes, and a single
  initialization under concurrent first calls.

Guidelines
- Use real threads (`threading.Barrier`, `ThreadPoolExecutor`) and join with timeouts.
- Assert only the public contract, not lock internals.
"""
