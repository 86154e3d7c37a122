"""Unit tests for the shared rejected-submission log."""

from __future__ import annotations

import threading

from datastore.error_log import ErrorLog


def test_push_preserves_order_and_duplicates() -> None:
    log = ErrorLog()

    log.push("a")
    log.push("b")
    log.push("a")

    assert log.snapshot() == ["a", "b", "a"]
    assert len(log) == 3


def test_snapshot_is_isolated_from_later_pushes() -> None:
    log = ErrorLog()
    log.push("first")

    snapshot = log.snapshot()
    log.push("second")

    assert snapshot == ["first"]
    snapshot.append("mutated")
    assert log.snapshot() == ["first", "second"]


def test_clear_returns_removed_count() -> None:
    log = ErrorLog()
    assert log.clear() == 0

    log.push("x")
    log.push("y")

    assert log.clear() == 2
    assert log.snapshot() == []
    assert len(log) == 0


def test_concurrent_pushes_are_all_counted() -> None:
    log = ErrorLog()
    threads_count, per_thread = 8, 250

    def worker(index: int) -> None:
        for n in range(per_thread):
            log.push(f"{index}-{n}")

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(threads_count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert log.clear() == threads_count * per_thread
    assert log.snapshot() == []


def test_clear_during_pushes_never_drops_entries() -> None:
    log = ErrorLog()
    threads_count, per_thread = 4, 500
    cleared: list[int] = []
    done = threading.Event()

    def pusher() -> None:
        for n in range(per_thread):
            log.push(str(n))

    def clearer() -> None:
        while not done.is_set():
            cleared.append(log.clear())

    clear_thread = threading.Thread(target=clearer)
    clear_thread.start()
    pushers = [threading.Thread(target=pusher) for _ in range(threads_count)]
    for thread in pushers:
        thread.start()
    for thread in pushers:
        thread.join()
    done.set()
    clear_thread.join()

    assert sum(cleared) + log.clear() == threads_count * per_thread


def test_snapshots_during_pushes_are_prefixes_of_final_contents() -> None:
    log = ErrorLog()
    threads_count, per_thread = 4, 500
    snapshots: list[list[str]] = []
    done = threading.Event()

    def pusher(index: int) -> None:
        for n in range(per_thread):
            log.push(f"{index}-{n}")

    def reader() -> None:
        while not done.is_set():
            snapshots.append(log.snapshot())

    reader_thread = threading.Thread(target=reader)
    reader_thread.start()
    pushers = [threading.Thread(target=pusher, args=(i,)) for i in range(threads_count)]
    for thread in pushers:
        thread.start()
    for thread in pushers:
        thread.join()
    done.set()
    reader_thread.join()

    final = log.snapshot()
    assert len(final) == threads_count * per_thread
    assert len(set(final)) == len(final)
    lengths = [len(snapshot) for snapshot in snapshots]
    assert lengths == sorted(lengths)
    for snapshot in snapshots:
        assert snapshot == final[: len(snapshot)]
