# osalgos

Textbook operating-system and graph algorithms as plain Python you can
import, step through and test. No dependencies beyond the standard library.

## Modules

- **`osalgos.scheduling`**: CPU scheduling. `fcfs`, `priority`
  (non-preemptive, lower value runs first), `sjf` (non-preemptive),
  `srtf` (preemptive; every burst must be positive) and
  `round_robin(tasks, quantum)` (quantum raised to at least 1).
  Each takes a sequence of `Task(arrival, burst, priority=0)`; a task's pid
  is its position in the sequence. Each returns a `Schedule` holding
  `ticks` (one `Tick` per time unit, idle or running a pid) and `reports`
  (one `TaskReport` per task with completion, turnaround and waiting time),
  plus `average_turnaround()` and `average_waiting()` (NaN when there are
  no tasks). `fcfs` and `round_robin` list reports in arrival order, the
  others by pid. `format_task_list`, `format_timeline`,
  `format_report(schedule, show_priority=False)` and `format_statistics`
  render text reports.
- **`osalgos.paging`**: page replacement. `FifoMemory(capacity)` and
  `LruMemory(capacity)` have `access(page)`, which returns a list of
  `PageEvent`s, and `contents()`. FIFO reports a hit when the page is
  already resident; LRU moves it to most recently used. `contents()` is
  oldest first for FIFO and most recently used first for LRU.
  `optimal_replacement(requests, capacity)` returns an `OptimalResult` with
  the events, the fault count and the resident pages. `format_events` and
  `format_contents` render them. A capacity below 1 raises `ValueError`.
- **`osalgos.bankers`**: the banker's algorithm. `Process(allocation,
  max_demand)` with `need()`; `find_safe_sequence(processes, available)`
  returns process indices in a safe order or `None`; `is_safe` returns a bool.
- **`osalgos.graphs`**: minimum spanning trees over `Edge(source, target,
  weight)`. `kruskal_mst(vertex_count, edges)` returns the chosen edges by
  increasing weight, using the union-find `DisjointSet`.
  `prims_mst(vertex_count, edges)` grows a tree from vertex 0 and returns
  `(parent, vertex)` for every other vertex, with `parent` `None` when the
  vertex is unreachable.
- **`osalgos.concurrency`**: `DekkerLock` with `acquire(party)` and
  `release(party)` for parties 1 and 2; `run_dekker_demo(iterations=5)`;
  `run_readers_writers(readers=5, writers=2, iterations=5, delay=0.1)`,
  which returns the log of reads and writes; `binary_tree_children(size)`
  and `threaded_dfs(values, children, target, root=0)`, which searches each
  child subtree in its own thread and returns the node index or `None`.

## Installation

```
pip install .
```

## Library use

```python
from osalgos.paging import FifoMemory, LruMemory, optimal_replacement, format_events

memory = FifoMemory(4)
for page in (1, 2, 3, 4, 5, 2):
    print(format_events(memory.access(page)), end="")
print(memory.contents())        # [2, 3, 4, 5]

lru = LruMemory(4)
for page in (1, 2, 3, 4, 5, 2):
    lru.access(page)
print(lru.contents())           # [2, 5, 4, 3]

result = optimal_replacement([1, 2, 3, 4, 1, 2, 5, 1, 2, 3, 4, 5], 3)
print(result.faults)
```

```python
from osalgos import scheduling
from osalgos.scheduling import Task

tasks = [Task(0, 5), Task(1, 3), Task(2, 1)]
schedule = scheduling.round_robin(tasks, 2)
print(scheduling.format_timeline(schedule))
print(scheduling.format_statistics(schedule))
```

```python
from osalgos.concurrency import binary_tree_children, threaded_dfs

values = list(range(1, 11))
children = binary_tree_children(10)
print(threaded_dfs(values, children, 7, 0))   # 6
```

## Command line

The `osalgos` command runs one simulation per subcommand:

```
osalgos --help
```

- `fcfs`, `priority`, `sjf`, `srtf`, `round-robin [--quantum N]` read
  whitespace-separated integers from standard input: the number of tasks,
  then arrival and burst for each task (arrival, burst and priority for
  `priority`). They print the task list, the tick-by-tick schedule, the
  per-process report and the statistics.
- `bankers` reads the number of processes, the number of resources, the
  available vector, then each process's allocation and maximum demand, and
  prints a safe sequence such as `P1 P3 P4 P0 P2` or reports that none exists.
- `kruskal` and `prims` read the number of vertices, the number of edges,
  then `source target weight` for each edge, and print the tree's edges.
- `fifo` and `lru` take page numbers as arguments (default `1 2 3 4 5 2`)
  and `--capacity` (default 4); `optimal` likewise, with default pages
  `1 2 3 4 1 2 5 1 2 3 4 5` and capacity 3, and prints the fault count.
- `dekker [--iterations N]`, `readers-writers [--readers N] [--writers N]
  [--iterations N] [--delay SECONDS]` and `dfs [--size N]` run the
  concurrency demonstrations.

Invalid input prints `error: ...` to standard error and exits with status 1.

```
echo "3  0 5  1 3  2 1" | osalgos round-robin --quantum 2
osalgos lru 1 2 3 4 5 2 --capacity 4
```

## What it does not do

The command does not prompt for input: the scheduling, banker's and
spanning-tree commands read all their numbers from standard input at once.
Nothing is stored between runs.

## Running the tests

```
pip install .[test]
pytest
```