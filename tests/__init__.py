"""kuetix-container test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- contract/     : Behavioral invariants of the registry and gate, including
                  concurrency contracts exercised with real threads.
- fixtures/     : Importable helpers used by tests (no tests here).

General guidance
- Build a fresh `Registry`/`BootstrapGate` per test; never share process-wide state.
- Keep unit fast and deterministic; concurrency belongs in contract/.
- Suggested markers: unit, contract
"""
