import pytest

from osalgos.bankers import Process, find_safe_sequence, is_safe

TEXTBOOK = [
    Process([0, 1, 0], [7, 5, 3]),
    Process([2, 0, 0], [3, 2, 2]),
    Process([3, 0, 2], [9, 0, 2]),
    Process([2, 1, 1], [2, 2, 2]),
    Process([0, 0, 2], [4, 3, 3]),
]


def _replay(processes, available, sequence):
    work = list(available)
    for index in sequence:
        need = processes[index].need()
        if any(n > w for n, w in zip(need, work)):
            return False
        work = [w + a for w, a in zip(work, processes[index].allocation)]
    return True


def test_need_is_max_minus_allocation():
    process = Process([1, 2], [4, 2])
    assert process.need() == (3, 0)


def test_textbook_safe_sequence():
    assert find_safe_sequence(TEXTBOOK, [3, 3, 2]) == [1, 3, 4, 0, 2]


def test_sequence_is_permutation_and_replays():
    sequence = find_safe_sequence(TEXTBOOK, [3, 3, 2])
    assert sorted(sequence) == list(range(len(TEXTBOOK)))
    assert _replay(TEXTBOOK, [3, 3, 2], sequence)


def test_unsafe_state():
    processes = [Process([1], [3]), Process([1], [3])]
    assert find_safe_sequence(processes, [0]) is None
    assert is_safe(processes, [0]) is False


def test_safe_state_flag():
    assert is_safe(TEXTBOOK, [3, 3, 2]) is True


def test_no_processes_is_safe():
    assert find_safe_sequence([], [1, 2]) == []


def test_mismatched_process_lengths():
    with pytest.raises(ValueError):
        Process([1, 2], [1])


def test_mismatched_available_length():
    with pytest.raises(ValueError):
        find_safe_sequence([Process([1, 0], [1, 1])], [1])