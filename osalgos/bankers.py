"""Banker's algorithm for deadlock avoidance."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class Process:
    """Resources a process holds and the most it may ever request."""

    allocation: tuple[int, ...]
    max_demand: tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "allocation", tuple(self.allocation))
        object.__setattr__(self, "max_demand", tuple(self.max_demand))
        if len(self.allocation) != len(self.max_demand):
            raise ValueError("allocation and max demand differ in length")

    def need(self) -> tuple[int, ...]:
        """Resources the process may still request."""
        return tuple(m - a for m, a in zip(self.max_demand, self.allocation))


def find_safe_sequence(
    processes: Sequence[Process], available: Sequence[int]
) -> list[int] | None:
    """Return process indices in a safe order, or None if the state is unsafe."""
    for index, process in enumerate(processes):
        if len(process.allocation) != len(available):
            raise ValueError(
                f"process {index} has {len(process.allocation)} resources, "
                f"expected {len(available)}"
            )

    work = list(available)
    needs = [process.need() for process in processes]
    finished = [False] * len(processes)
    sequence: list[int] = []

    progress = True
    while progress:
        progress = False
        for index, process in enumerate(processes):
            if finished[index]:
                continue
            if all(n <= w for n, w in zip(needs[index], work)):
                work = [w + a for w, a in zip(work, process.allocation)]
                finished[index] = True
                sequence.append(index)
                progress = True

    return sequence if all(finished) else None


def is_safe(processes: Sequence[Process], available: Sequence[int]) -> bool:
    """Whether every process can run to completion in some order."""
    return find_safe_sequence(processes, available) is not None