"""Command-line front end for the simulations."""

from __future__ import annotations

import argparse
import sys
from typing import Iterator, Sequence, TextIO

from osalgos.bankers import Process, find_safe_sequence
from osalgos.concurrency import (
    binary_tree_children,
    run_dekker_demo,
    run_readers_writers,
    threaded_dfs,
)
from osalgos.graphs import Edge, kruskal_mst, prims_mst
from osalgos.paging import (
    FifoMemory,
    LruMemory,
    format_contents,
    format_events,
    optimal_replacement,
)
from osalgos.scheduling import (
    Task,
    fcfs,
    format_report,
    format_statistics,
    format_task_list,
    format_timeline,
    priority,
    round_robin,
    sjf,
    srtf,
)

_DEMO_PAGES = [1, 2, 3, 4, 5, 2]
_OPTIMAL_PAGES = [1, 2, 3, 4, 1, 2, 5, 1, 2, 3, 4, 5]
_PRIORITY_NOTE = "Please note tasks with lower 'priority' value have higher priority.\n"


class _Numbers:
    """Whitespace-separated integers read from a stream."""

    def __init__(self, stream: TextIO) -> None:
        self._tokens: Iterator[str] = iter(stream.read().split())

    def take(self) -> int:
        try:
            token = next(self._tokens)
        except StopIteration:
            raise ValueError("unexpected end of input") from None
        return int(token)

    def take_many(self, count: int) -> list[int]:
        return [self.take() for _ in range(count)]


def _read_count(numbers: _Numbers, what: str) -> int:
    count = numbers.take()
    if count < 0:
        raise ValueError(f"number of {what} must not be negative: {count}")
    return count


def _read_tasks(numbers: _Numbers, with_priority: bool) -> list[Task]:
    count = _read_count(numbers, "tasks")
    tasks = []
    for _ in range(count):
        arrival, burst = numbers.take(), numbers.take()
        rank = numbers.take() if with_priority else 0
        tasks.append(Task(arrival, burst, rank))
    return tasks


def _schedule(args: argparse.Namespace, out: TextIO) -> None:
    with_priority = args.command == "priority"
    tasks = _read_tasks(_Numbers(sys.stdin), with_priority)
    if with_priority:
        out.write(_PRIORITY_NOTE)
    algorithms = {"fcfs": fcfs, "priority": priority, "sjf": sjf, "srtf": srtf}
    if args.command == "round-robin":
        schedule = round_robin(tasks, args.quantum)
    else:
        schedule = algorithms[args.command](tasks)
    out.write(format_task_list(tasks))
    out.write(format_timeline(schedule))
    out.write(format_report(schedule, show_priority=with_priority))
    out.write(format_statistics(schedule))


def _bankers(args: argparse.Namespace, out: TextIO) -> None:
    numbers = _Numbers(sys.stdin)
    process_count = _read_count(numbers, "processes")
    resource_count = _read_count(numbers, "resources")
    available = numbers.take_many(resource_count)
    processes = [
        Process(tuple(numbers.take_many(resource_count)), tuple(numbers.take_many(resource_count)))
        for _ in range(process_count)
    ]
    sequence = find_safe_sequence(processes, available)
    if sequence is None:
        out.write("No safe sequence found. The system is not in a safe state.\n")
        return
    out.write("The system is in a safe state.\n")
    out.write("Safe sequence is: " + " ".join(f"P{index}" for index in sequence) + "\n")


def _read_graph(numbers: _Numbers) -> tuple[int, list[Edge]]:
    vertex_count = _read_count(numbers, "vertices")
    edge_count = _read_count(numbers, "edges")
    edges = [
        Edge(numbers.take(), numbers.take(), numbers.take()) for _ in range(edge_count)
    ]
    return vertex_count, edges


def _kruskal(args: argparse.Namespace, out: TextIO) -> None:
    vertex_count, edges = _read_graph(_Numbers(sys.stdin))
    tree = kruskal_mst(vertex_count, edges)
    out.write("Edges in MST:\n")
    for edge in tree:
        out.write(f"{edge.source} <---{edge.weight}---> {edge.target}\n")


def _prims(args: argparse.Namespace, out: TextIO) -> None:
    vertex_count, edges = _read_graph(_Numbers(sys.stdin))
    tree = prims_mst(vertex_count, edges)
    out.write("Edges in MST:\n")
    for parent, vertex in tree:
        out.write(f"{-1 if parent is None else parent} -- {vertex}\n")


def _paging(args: argparse.Namespace, out: TextIO) -> None:
    memory = FifoMemory(args.capacity) if args.command == "fifo" else LruMemory(args.capacity)
    for page in args.pages or _DEMO_PAGES:
        out.write(format_events(memory.access(page)))
        out.write(format_contents(memory.contents()) + "\n")


def _optimal(args: argparse.Namespace, out: TextIO) -> None:
    result = optimal_replacement(args.pages or _OPTIMAL_PAGES, args.capacity)
    out.write(format_events(result.events))
    out.write(f"Total page faults: {result.faults}\n")


def _dekker(args: argparse.Namespace, out: TextIO) -> None:
    for line in run_dekker_demo(args.iterations):
        out.write(line + "\n")


def _readers_writers(args: argparse.Namespace, out: TextIO) -> None:
    log = run_readers_writers(args.readers, args.writers, args.iterations, args.delay)
    for line in log:
        out.write(line + "\n")


def _dfs(args: argparse.Namespace, out: TextIO) -> None:
    children = binary_tree_children(args.size)
    values = [node + 1 for node in range(args.size)]
    for node, kids in enumerate(children):
        if kids:
            out.write(f"{node} has children " + " and ".join(map(str, kids)) + "\n")
    out.write("Searching for all values with threaded-DFS...\n")
    for value in values:
        found = threaded_dfs(values, children, value, 0)
        out.write(f"Value {value} at node {-1 if found is None else found}\n")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="osalgos", description="Operating-system algorithm simulations."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    for name, text in (
        ("fcfs", "first come, first served scheduling"),
        ("priority", "non-preemptive priority scheduling"),
        ("sjf", "non-preemptive shortest job first"),
        ("srtf", "preemptive shortest remaining time first"),
    ):
        commands.add_parser(name, help=f"{text}; tasks are read from stdin").set_defaults(
            handler=_schedule
        )
    rr = commands.add_parser("round-robin", help="round robin scheduling; tasks from stdin")
    rr.add_argument("--quantum", type=int, default=1)
    rr.set_defaults(handler=_schedule)

    commands.add_parser("bankers", help="banker's safety check; state from stdin").set_defaults(
        handler=_bankers
    )
    commands.add_parser("kruskal", help="Kruskal's MST; graph from stdin").set_defaults(
        handler=_kruskal
    )
    commands.add_parser("prims", help="Prim's MST; graph from stdin").set_defaults(
        handler=_prims
    )

    for name in ("fifo", "lru"):
        paging = commands.add_parser(name, help=f"{name.upper()} page replacement")
        paging.add_argument("pages", nargs="*", type=int)
        paging.add_argument("--capacity", type=int, default=4)
        paging.set_defaults(handler=_paging)
    optimal = commands.add_parser("optimal", help="optimal page replacement")
    optimal.add_argument("pages", nargs="*", type=int)
    optimal.add_argument("--capacity", type=int, default=3)
    optimal.set_defaults(handler=_optimal)

    dekker = commands.add_parser("dekker", help="Dekker's algorithm demonstration")
    dekker.add_argument("--iterations", type=int, default=5)
    dekker.set_defaults(handler=_dekker)

    rw = commands.add_parser("readers-writers", help="readers-writers demonstration")
    rw.add_argument("--readers", type=int, default=5)
    rw.add_argument("--writers", type=int, default=2)
    rw.add_argument("--iterations", type=int, default=5)
    rw.add_argument("--delay", type=float, default=0.1)
    rw.set_defaults(handler=_readers_writers)

    dfs = commands.add_parser("dfs", help="threaded depth-first search demonstration")
    dfs.add_argument("--size", type=int, default=10)
    dfs.set_defaults(handler=_dfs)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run a command; return the exit status."""
    args = _build_parser().parse_args(argv)
    try:
        args.handler(args, sys.stdout)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())