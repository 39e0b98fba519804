"""Concurrency demonstrations: Dekker's lock, readers-writers and a threaded DFS."""

from __future__ import annotations

import threading
import time
from typing import Hashable, Sequence

_PARTIES = (1, 2)


class DekkerLock:
    """Mutual exclusion for exactly two parties, numbered 1 and 2."""

    def __init__(self) -> None:
        self._want = {1: False, 2: False}
        self._turn = 1

    @staticmethod
    def _check(party: int) -> int:
        if party not in _PARTIES:
            raise ValueError(f"party must be 1 or 2: {party}")
        return 2 if party == 1 else 1

    def acquire(self, party: int) -> None:
        """Wait until the given party may enter its critical section."""
        other = self._check(party)
        self._want[party] = True
        while self._want[other]:
            if self._turn != party:
                self._want[party] = False
                while self._turn != party:
                    time.sleep(0)
                self._want[party] = True
            else:
                time.sleep(0)

    def release(self, party: int) -> None:
        """Leave the critical section and hand the turn to the other party."""
        other = self._check(party)
        self._turn = other
        self._want[party] = False


def run_dekker_demo(iterations: int = 5) -> list[str]:
    """Run two threads that each enter a shared critical section repeatedly.

    Returns the messages written from inside the critical section, in order.
    """
    if iterations < 0:
        raise ValueError(f"iterations must not be negative: {iterations}")
    lock = DekkerLock()
    log: list[str] = []

    def worker(party: int) -> None:
        for _ in range(iterations):
            lock.acquire(party)
            try:
                log.append(f"Thread {party} is in the critical section.")
            finally:
                lock.release(party)

    threads = [threading.Thread(target=worker, args=(party,)) for party in _PARTIES]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return log


class _SharedData:
    def __init__(self) -> None:
        self.value = 0
        self.read_count = 0
        self.data_access = threading.Semaphore(1)
        self.count_access = threading.Semaphore(1)
        self.log: list[str] = []


def run_readers_writers(
    readers: int = 5, writers: int = 2, iterations: int = 5, delay: float = 0.1
) -> list[str]:
    """Run readers and writers over one shared counter, readers taking priority.

    Returns the log of entries, reads, leaves and writes in the order they happened.
    """
    for name, count in (("readers", readers), ("writers", writers), ("iterations", iterations)):
        if count < 0:
            raise ValueError(f"{name} must not be negative: {count}")
    if delay < 0:
        raise ValueError(f"delay must not be negative: {delay}")

    shared = _SharedData()

    def reader(ident: int) -> None:
        for _ in range(iterations):
            with shared.count_access:
                shared.read_count += 1
                if shared.read_count == 1:
                    shared.data_access.acquire()
                shared.log.append(
                    f"Reader {ident} enters. Read count = {shared.read_count}."
                )

            shared.log.append(f"Reader {ident} reads data = {shared.value}")

            with shared.count_access:
                shared.log.append(
                    f"Reader {ident} leaves. Read count = {shared.read_count}."
                )
                shared.read_count -= 1
                if shared.read_count == 0:
                    shared.data_access.release()

            time.sleep(delay)

    def writer(ident: int) -> None:
        for _ in range(iterations):
            with shared.data_access, shared.count_access:
                shared.value += 1
                shared.log.append(
                    f"Writer {ident} writes data = {shared.value}. "
                    f"Read count is {shared.read_count}."
                )
            time.sleep(delay)

    threads = [threading.Thread(target=reader, args=(i,)) for i in range(readers)]
    threads += [threading.Thread(target=writer, args=(i,)) for i in range(writers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return shared.log


def binary_tree_children(size: int) -> list[tuple[int, ...]]:
    """Children of each node of a complete binary tree stored level by level."""
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    return [
        tuple(child for child in (2 * node + 1, 2 * node + 2) if child < size)
        for node in range(size)
    ]


def threaded_dfs(
    values: Sequence[Hashable],
    children: Sequence[Sequence[int]],
    target: Hashable,
    root: int = 0,
) -> int | None:
    """Search the tree for a node holding target, one thread per child subtree.

    Returns the index of the node found, or None. Once any thread finds the
    target the remaining searches stop early.
    """
    found = threading.Event()

    def visit(node: int) -> int | None:
        if found.is_set():
            return None
        if values[node] == target:
            found.set()
            return node
        kids = children[node] if node < len(children) else ()
        if not kids:
            return None

        results: list[int | None] = [None] * len(kids)

        def search(slot: int, child: int) -> None:
            results[slot] = visit(child)

        threads = [
            threading.Thread(target=search, args=(slot, child))
            for slot, child in enumerate(kids)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        return next((result for result in results if result is not None), None)

    return visit(root)