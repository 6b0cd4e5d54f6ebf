import pytest

from oslab.bankers import check_safety, format_report

AVAILABLE = [3, 3, 2]
ALLOCATION = [[0, 1, 0], [2, 0, 0], [3, 0, 2], [2, 1, 1], [0, 0, 2]]
NEED = [[7, 4, 3], [1, 2, 2], [6, 0, 0], [0, 1, 1], [4, 3, 1]]


def test_textbook_example_is_safe():
    result = check_safety(AVAILABLE, ALLOCATION, NEED)
    assert result.safe
    assert result.sequence == (1, 3, 4, 0, 2)


def test_sequence_is_permutation_and_work_grows():
    result = check_safety(AVAILABLE, ALLOCATION, NEED)
    assert sorted(result.sequence) == list(range(len(ALLOCATION)))
    final = result.steps[-1][1]
    totals = tuple(a + sum(col) for a, col in zip(AVAILABLE, zip(*ALLOCATION)))
    assert final == totals


def test_each_step_fits_before_running():
    result = check_safety(AVAILABLE, ALLOCATION, NEED)
    before = tuple(AVAILABLE)
    for index, after in result.steps:
        assert all(n <= w for n, w in zip(NEED[index], before))
        assert after == tuple(w + a for w, a in zip(before, ALLOCATION[index]))
        before = after


def test_unsafe_state():
    result = check_safety([0, 0], [[1, 0], [0, 1]], [[1, 1], [1, 1]])
    assert not result.safe
    assert result.sequence == ()


def test_partial_progress_then_unsafe():
    result = check_safety([1], [[1], [0]], [[1], [5]])
    assert not result.safe
    assert result.sequence == (0,)


def test_mismatched_rows_rejected():
    with pytest.raises(ValueError):
        check_safety([1, 1], [[0, 0]], [[0, 0], [1, 1]])


def test_wrong_width_rejected():
    with pytest.raises(ValueError):
        check_safety([1, 1], [[0]], [[0, 0]])


def test_report_safe():
    result = check_safety(AVAILABLE, ALLOCATION, NEED)
    report = format_report(result)
    assert "System is in safe state" in report
    assert report.splitlines()[0] == f"Process {result.sequence[0] + 1} is satisfied"
    expected_seq = " ".join(str(i + 1) for i in result.sequence)
    assert report.splitlines()[-1] == f"Safe Sequence {expected_seq}"


def test_report_unsafe():
    report = format_report(check_safety([0], [[0]], [[1]]))
    assert report == "System is in unsafe state"