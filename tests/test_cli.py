import io

import pytest

from osalgos.bankers import Process, find_safe_sequence
from osalgos.cli import main
from osalgos.paging import optimal_replacement
from osalgos.scheduling import (
    Task,
    fcfs,
    format_report,
    format_statistics,
    format_task_list,
    format_timeline,
    round_robin,
)


def _run(monkeypatch, capsys, argv, stdin=""):
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin))
    status = main(argv)
    captured = capsys.readouterr()
    return status, captured.out, captured.err


def test_fcfs_output_matches_library(monkeypatch, capsys):
    status, out, _ = _run(monkeypatch, capsys, ["fcfs"], "3\n0 4\n1 3\n2 1\n")
    tasks = [Task(0, 4), Task(1, 3), Task(2, 1)]
    schedule = fcfs(tasks)
    expected = (
        format_task_list(tasks)
        + format_timeline(schedule)
        + format_report(schedule)
        + format_statistics(schedule)
    )
    assert status == 0
    assert out == expected


def test_priority_prints_note_and_priorities(monkeypatch, capsys):
    status, out, _ = _run(monkeypatch, capsys, ["priority"], "2\n0 2 3\n0 1 1\n")
    assert status == 0
    assert out.startswith("Please note tasks with lower 'priority' value have higher priority.\n")
    assert " - Priority:        3\n" in out


def test_round_robin_uses_quantum(monkeypatch, capsys):
    status, out, _ = _run(
        monkeypatch, capsys, ["round-robin", "--quantum", "2"], "2\n0 5\n1 3\n"
    )
    tasks = [Task(0, 5), Task(1, 3)]
    assert status == 0
    assert format_timeline(round_robin(tasks, 2)) in out


def test_truncated_input_is_an_error(monkeypatch, capsys):
    status, out, err = _run(monkeypatch, capsys, ["fcfs"], "2\n0 4\n")
    assert status == 1
    assert "error" in err


def test_bankers_safe_state(monkeypatch, capsys):
    stdin = "5 3\n3 3 2\n0 1 0 7 5 3\n2 0 0 3 2 2\n3 0 2 9 0 2\n2 1 1 2 2 2\n0 0 2 4 3 3\n"
    status, out, _ = _run(monkeypatch, capsys, ["bankers"], stdin)
    processes = [
        Process((0, 1, 0), (7, 5, 3)),
        Process((2, 0, 0), (3, 2, 2)),
        Process((3, 0, 2), (9, 0, 2)),
        Process((2, 1, 1), (2, 2, 2)),
        Process((0, 0, 2), (4, 3, 3)),
    ]
    sequence = find_safe_sequence(processes, [3, 3, 2])
    assert status == 0
    assert out.splitlines()[0] == "The system is in a safe state."
    assert out.splitlines()[1] == "Safe sequence is: " + " ".join(f"P{i}" for i in sequence)


def test_bankers_unsafe_state(monkeypatch, capsys):
    status, out, _ = _run(monkeypatch, capsys, ["bankers"], "1 1\n0\n0 1\n")
    assert status == 0
    assert out == "No safe sequence found. The system is not in a safe state.\n"


def test_kruskal_output(monkeypatch, capsys):
    status, out, _ = _run(monkeypatch, capsys, ["kruskal"], "3 3\n0 1 1\n1 2 2\n0 2 5\n")
    lines = out.splitlines()
    assert status == 0
    assert lines[0] == "Edges in MST:"
    assert len(lines) == 3
    assert "0 <---1---> 1" in lines


def test_kruskal_rejects_out_of_range_vertex(monkeypatch, capsys):
    status, _, err = _run(monkeypatch, capsys, ["kruskal"], "2 1\n0 7 1\n")
    assert status == 1
    assert "error" in err


def test_prims_output(monkeypatch, capsys):
    status, out, _ = _run(monkeypatch, capsys, ["prims"], "3 2\n0 1 4\n1 2 6\n")
    assert status == 0
    assert out.splitlines() == ["Edges in MST:", "0 -- 1", "1 -- 2"]


def test_fifo_demo(monkeypatch, capsys):
    status, out, _ = _run(monkeypatch, capsys, ["fifo"])
    assert status == 0
    assert "Removed page 1 from memory." in out
    assert "Page 2 already in memory." in out
    assert out.splitlines()[-1] == "Memory contents: Page 2, Page 3, Page 4, Page 5"


def test_lru_rejects_zero_capacity(monkeypatch, capsys):
    status, _, err = _run(monkeypatch, capsys, ["lru", "--capacity", "0", "1"])
    assert status == 1
    assert "capacity" in err


def test_optimal_default_fault_count(monkeypatch, capsys):
    status, out, _ = _run(monkeypatch, capsys, ["optimal"])
    pages = [1, 2, 3, 4, 1, 2, 5, 1, 2, 3, 4, 5]
    faults = optimal_replacement(pages, 3).faults
    assert status == 0
    assert out.splitlines()[-1] == f"Total page faults: {faults}"


def test_dekker_command(monkeypatch, capsys):
    status, out, _ = _run(monkeypatch, capsys, ["dekker", "--iterations", "3"])
    lines = out.splitlines()
    assert status == 0
    assert len(lines) == 6
    assert lines.count("Thread 2 is in the critical section.") == 3


def test_readers_writers_command(monkeypatch, capsys):
    argv = ["readers-writers", "--readers", "2", "--writers", "1", "--iterations", "2", "--delay", "0"]
    status, out, _ = _run(monkeypatch, capsys, argv)
    lines = out.splitlines()
    assert status == 0
    assert sum(line.startswith("Writer 0 writes") for line in lines) == 2
    assert sum(" reads data = " in line for line in lines) == 4


def test_dfs_command(monkeypatch, capsys):
    status, out, _ = _run(monkeypatch, capsys, ["dfs", "--size", "7"])
    lines = out.splitlines()
    assert status == 0
    assert lines[0] == "0 has children 1 and 2"
    assert "Searching for all values with threaded-DFS..." in lines
    for value in range(1, 8):
        assert f"Value {value} at node {value - 1}" in lines


def test_unknown_command_exits():
    with pytest.raises(SystemExit):
        main(["no-such-command"])