"""CPU scheduling simulations: FCFS, priority, SJF, SRTF and round robin."""

from __future__ import annotations

import heapq
import math
from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Iterable, Sequence

_SEPARATOR = "\n\n--------------------\n"


@dataclass(frozen=True)
class Task:
    """A process to schedule: arrival time, burst time and optional priority.

    A lower priority value means a higher priority.
    """

    arrival: int
    burst: int
    priority: int = 0

    def __post_init__(self) -> None:
        if self.arrival < 0:
            raise ValueError(f"arrival time must not be negative: {self.arrival}")
        if self.burst < 0:
            raise ValueError(f"burst time must not be negative: {self.burst}")


@dataclass(frozen=True)
class Tick:
    """One unit of time: either idle (pid is None) or running a process."""

    time: int
    pid: int | None = None
    remaining: int | None = None

    @property
    def idle(self) -> bool:
        return self.pid is None


@dataclass(frozen=True)
class TaskReport:
    """Completion figures for one process."""

    pid: int
    arrival: int
    burst: int
    priority: int
    completion: int
    turnaround: int
    waiting: int


@dataclass(frozen=True)
class Schedule:
    """A finished simulation: the tick-by-tick timeline and per-process reports."""

    ticks: tuple[Tick, ...] = ()
    reports: tuple[TaskReport, ...] = ()

    def average_turnaround(self) -> float:
        return _mean(report.turnaround for report in self.reports)

    def average_waiting(self) -> float:
        return _mean(report.waiting for report in self.reports)


def _mean(values: Iterable[int]) -> float:
    items = list(values)
    if not items:
        return math.nan
    return sum(items) / len(items)


@dataclass
class _Job:
    pid: int
    task: Task
    remaining: int = field(init=False)
    completion: int = 0

    def __post_init__(self) -> None:
        self.remaining = self.task.burst

    @property
    def arrival(self) -> int:
        return self.task.arrival

    def report(self) -> TaskReport:
        turnaround = self.completion - self.task.arrival
        return TaskReport(
            pid=self.pid,
            arrival=self.task.arrival,
            burst=self.task.burst,
            priority=self.task.priority,
            completion=self.completion,
            turnaround=turnaround,
            waiting=turnaround - self.task.burst,
        )


class _Timeline:
    def __init__(self) -> None:
        self.time = 0
        self.ticks: list[Tick] = []

    def idle(self) -> None:
        self.ticks.append(Tick(self.time))
        self.time += 1

    def run(self, pid: int, remaining: int | None = None) -> None:
        self.ticks.append(Tick(self.time, pid, remaining))
        self.time += 1


def _arrival_order(tasks: Sequence[Task]) -> tuple[list[_Job], list[_Job]]:
    jobs = [_Job(pid, task) for pid, task in enumerate(tasks)]
    ordered = sorted(jobs, key=lambda job: (job.arrival, job.pid))
    return jobs, ordered


def _finish(timeline: _Timeline, jobs: Iterable[_Job]) -> Schedule:
    return Schedule(tuple(timeline.ticks), tuple(job.report() for job in jobs))


def fcfs(tasks: Sequence[Task]) -> Schedule:
    """First come, first served. Reports are listed in arrival order."""
    _, ordered = _arrival_order(tasks)
    timeline = _Timeline()
    for job in ordered:
        while timeline.time < job.arrival:
            timeline.idle()
        for _ in range(job.task.burst):
            timeline.run(job.pid)
        job.completion = timeline.time
    return _finish(timeline, ordered)


def _ready_queue_schedule(
    tasks: Sequence[Task],
    rank: Callable[[_Job], int],
    preemptive: bool,
) -> Schedule:
    jobs, ordered = _arrival_order(tasks)
    timeline = _Timeline()
    heap: list[tuple[int, int, int]] = []
    pending = deque(ordered)

    # Ties on rank go to the later arrival, then to the higher pid.
    def push(job: _Job) -> None:
        heapq.heappush(heap, (rank(job), -job.arrival, -job.pid))

    while pending or heap:
        if pending and pending[0].arrival == timeline.time:
            push(pending.popleft())

        if not heap:
            timeline.idle()
            continue

        current = jobs[-heap[0][2]]
        if preemptive:
            current.remaining -= 1
            timeline.run(current.pid, current.remaining)
            heapq.heappop(heap)
            if current.remaining == 0:
                current.completion = timeline.time
            else:
                push(current)
        else:
            while current.remaining > 0:
                current.remaining -= 1
                timeline.run(current.pid)
            heapq.heappop(heap)
            current.completion = timeline.time

        while pending and pending[0].arrival <= timeline.time:
            push(pending.popleft())

    return _finish(timeline, jobs)


def priority(tasks: Sequence[Task]) -> Schedule:
    """Non-preemptive priority scheduling; lower value runs first."""
    return _ready_queue_schedule(tasks, lambda job: job.task.priority, preemptive=False)


def sjf(tasks: Sequence[Task]) -> Schedule:
    """Non-preemptive shortest job first."""
    return _ready_queue_schedule(tasks, lambda job: job.remaining, preemptive=False)


def srtf(tasks: Sequence[Task]) -> Schedule:
    """Preemptive shortest remaining time first.

    Every task must have a positive burst time.
    """
    for pid, task in enumerate(tasks):
        if task.burst == 0:
            raise ValueError(f"task {pid} has a zero burst time")
    return _ready_queue_schedule(tasks, lambda job: job.remaining, preemptive=True)


def round_robin(tasks: Sequence[Task], quantum: int) -> Schedule:
    """Round robin with the given time quantum (at least 1).

    Reports are listed in arrival order.
    """
    quantum = max(1, quantum)
    _, ordered = _arrival_order(tasks)
    timeline = _Timeline()
    if not ordered:
        return Schedule()

    pending = deque(ordered)
    queue: deque[_Job] = deque([pending.popleft()])

    def admit() -> None:
        while pending and pending[0].arrival <= timeline.time:
            queue.append(pending.popleft())

    while queue or pending:
        if not queue:
            queue.append(pending.popleft())

        current = queue[0]
        if current.arrival > timeline.time:
            timeline.idle()
            continue

        queue.popleft()
        for _ in range(quantum):
            if current.remaining <= 0:
                break
            admit()
            timeline.run(current.pid)
            admit()
            current.remaining -= 1

        if current.remaining <= 0:
            current.completion = timeline.time
        else:
            queue.append(current)

    return _finish(timeline, ordered)


def format_task_list(tasks: Sequence[Task]) -> str:
    """List the tasks as "pid: arrival burst", pid being the position."""
    lines = [f"{pid}: {task.arrival} {task.burst}\n" for pid, task in enumerate(tasks)]
    return f"{_SEPARATOR}List of processes\n\n" + "".join(lines)


def format_timeline(schedule: Schedule) -> str:
    """Render the tick-by-tick schedule."""
    lines = []
    for tick in schedule.ticks:
        if tick.idle:
            lines.append(f"Tick {tick.time}\t: IDLE\n")
        elif tick.remaining is None:
            lines.append(f"Tick {tick.time}\t: EXEC PID {tick.pid}\n")
        else:
            lines.append(
                f"Tick {tick.time}\t: EXEC PID {tick.pid} [RT: {tick.remaining}]\n"
            )
    return f"{_SEPARATOR}Tickwise schedule:\n\n" + "".join(lines)


def format_report(schedule: Schedule, show_priority: bool = False) -> str:
    """Render waiting and turnaround times for each process."""
    parts = []
    for report in schedule.reports:
        text = f"PID {report.pid}:\n"
        if show_priority:
            text += f" - Priority:        {report.priority}\n"
        text += (
            f" - Waiting time:    {report.waiting}\n"
            f" - Turnaround time: {report.turnaround}\n\n"
        )
        parts.append(text)
    return f"{_SEPARATOR}Process-wise Report:\n\n" + "".join(parts)


def format_statistics(schedule: Schedule) -> str:
    """Render the process count and the average times."""
    return (
        f"{_SEPARATOR}Statistics Report:\n\n"
        f" - Processes executed:      {len(schedule.reports)}\n"
        f" - Average turnaround time: {schedule.average_turnaround():g}\n"
        f" - Average waiting time:    {schedule.average_waiting():g}\n"
        "\n\n\n"
    )