"""Concurrency contracts for `BootstrapGate`."""

from __future__ import annotations

import threading

from kuetix_container.bootstrap import BootstrapGate, CallbackMap

N_THREADS = 16


def test_concurrent_initialize_allocates_exactly_one_map() -> None:
    """Only one of many simultaneous first calls performs the initialization."""
    gate = BootstrapGate()
    barrier = threading.Barrier(N_THREADS)
    results: list[tuple[bool, CallbackMap]] = []
    lock = threading.Lock()  # protect results append

    def worker() -> None:
        barrier.wait(timeout=5)
        performed = gate.initialize()
        callbacks = gate.callbacks
        with lock:
            results.append((performed, callbacks))

    threads = [threading.Thread(target=worker) for _ in range(N_THREADS)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=5)

    assert len(results) == N_THREADS
    assert sum(performed for performed, _ in results) == 1
    maps = {id(callbacks) for _, callbacks in results}
    assert maps == {id(gate.callbacks)}


def test_concurrent_registration_loses_nothing() -> None:
    """Callbacks registered from many threads are all present and all run."""
    gate = BootstrapGate()
    gate.initialize()
    barrier = threading.Barrier(N_THREADS)
    called: list[str] = []
    lock = threading.Lock()  # protect called append

    def record(name: str) -> None:
        with lock:
            called.append(name)

    def worker(n: int) -> None:
        barrier.wait(timeout=5)
        for i in range(100):
            gate.callbacks[f"t{n:02d}-{i:03d}"] = record

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(N_THREADS)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=5)

    assert len(gate.callbacks) == N_THREADS * 100
    gate.run_registered_callbacks()
    assert called == sorted(gate.callbacks)


def test_concurrent_setdefault_has_one_winner() -> None:
    """Racing setdefault calls all receive the single callback that was stored."""
    callbacks = CallbackMap()
    barrier = threading.Barrier(N_THREADS)
    returned: list[object] = []
    lock = threading.Lock()  # protect returned append

    def worker() -> None:
        def mine(name: str) -> None:
            """Callback unique to this thread."""

        barrier.wait(timeout=5)
        result = callbacks.setdefault("db", mine)
        with lock:
            returned.append(result)

    threads = [threading.Thread(target=worker) for _ in range(N_THREADS)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=5)

    assert len(returned) == N_THREADS
    assert {id(cb) for cb in returned} == {id(callbacks["db"])}


def test_concurrent_pop_removes_once() -> None:
    """Exactly one of many racing pops gets the callback; the rest get the default."""
    callbacks = CallbackMap()
    callbacks["db"] = print
    barrier = threading.Barrier(N_THREADS)
    popped: list[object] = []
    lock = threading.Lock()  # protect popped append

    def worker() -> None:
        barrier.wait(timeout=5)
        result = callbacks.pop("db", None)
        with lock:
            popped.append(result)

    threads = [threading.Thread(target=worker) for _ in range(N_THREADS)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=5)

    assert popped.count(print) == 1
    assert popped.count(None) == N_THREADS - 1
    assert "db" not in callbacks
