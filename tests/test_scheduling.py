import pytest

from oslab.scheduling import (
    Policy,
    Process,
    fcfs,
    format_gantt,
    format_report,
    priority_schedule,
    round_robin,
    sjf,
)


@pytest.fixture
def procs():
    return [
        Process(1, 5, priority=3),
        Process(2, 3, priority=1),
        Process(3, 8, priority=2),
        Process(4, 3, priority=1),
    ]


def _check_back_to_back(result):
    timings = result.timings
    assert timings[0].waiting_time == 0
    for prev, cur in zip(timings, timings[1:]):
        assert cur.waiting_time == prev.turnaround_time
    for t in timings:
        assert t.turnaround_time - t.waiting_time == t.process.burst_time


def test_fcfs_keeps_input_order(procs):
    result = fcfs(procs)
    assert [t.process for t in result.timings] == procs
    assert result.policy is Policy.FCFS
    _check_back_to_back(result)


def test_fcfs_totals_match_timings(procs):
    result = fcfs(procs)
    assert result.total_waiting() == sum(t.waiting_time for t in result.timings)
    assert result.average_waiting() == result.total_waiting() / len(procs)
    assert result.average_turnaround() == result.total_turnaround() / len(procs)
    assert result.timings[-1].turnaround_time == sum(p.burst_time for p in procs)


def test_sjf_sorts_by_burst_stably(procs):
    result = sjf(procs)
    assert [t.process.name for t in result.timings] == [2, 4, 1, 3]
    _check_back_to_back(result)


def test_sjf_never_waits_more_than_fcfs(procs):
    assert sjf(procs).total_waiting() <= fcfs(procs).total_waiting()


def test_priority_orders_by_priority_stably(procs):
    result = priority_schedule(procs)
    prios = [t.process.priority for t in result.timings]
    assert prios == sorted(prios)
    names = [t.process.name for t in result.timings]
    assert names.index(2) < names.index(4)
    _check_back_to_back(result)


def test_round_robin_sequence():
    result = round_robin([Process(1, 5), Process(2, 3)], 2)
    assert [s[0] for s in result.gantt] == [1, 2, 1, 2, 1]
    assert result.quantum == 2


def test_round_robin_invariants(procs):
    quantum = 3
    result = round_robin(procs, quantum)
    for name, start, end in result.gantt:
        assert 0 < end - start <= quantum
    for a, b in zip(result.gantt, result.gantt[1:]):
        assert a[2] == b[1]
    for timing in result.timings:
        proc = timing.process
        ran = sum(e - s for n, s, e in result.gantt if n == proc.name)
        assert ran == proc.burst_time
        assert timing.turnaround_time - timing.waiting_time == proc.burst_time
        last_end = max(e for n, s, e in result.gantt if n == proc.name)
        assert timing.turnaround_time == last_end
    assert [t.process for t in result.timings] == procs


def test_round_robin_large_quantum_equals_fcfs(procs):
    rr = round_robin(procs, 100)
    assert [t.waiting_time for t in rr.timings] == [
        t.waiting_time for t in fcfs(procs).timings
    ]


def test_round_robin_rejects_bad_quantum(procs):
    with pytest.raises(ValueError):
        round_robin(procs, 0)


def test_round_robin_rejects_zero_burst():
    with pytest.raises(ValueError):
        round_robin([Process(1, 0)], 2)


@pytest.mark.parametrize("func", [fcfs, sjf, priority_schedule])
def test_empty_process_list_rejected(func):
    with pytest.raises(ValueError):
        func([])


def test_format_report_fcfs(procs):
    result = fcfs(procs)
    report = format_report(result)
    assert "Process\tBurst Time\tWaiting Time\tTurnaround Time" in report
    assert f"Total waiting time is {result.total_waiting()}" in report
    assert f"Average waiting time is {result.average_waiting():.2f}" in report
    assert f"Total Turn Around Time is {result.total_turnaround()}" in report
    assert "Priority" not in report


def test_format_report_priority_has_column(procs):
    report = format_report(priority_schedule(procs))
    assert "Process\tBurst Time\tPriority\tWaiting Time\tTurnaround Time" in report


def test_format_gantt(procs):
    result = fcfs(procs)
    lines = format_gantt(result).split("\n")
    assert lines[0] == "Gantt Chart"
    assert lines[1] == lines[3]
    for proc in procs:
        assert f"P{proc.name}" in lines[2]
    assert lines[4].startswith("0")
    assert lines[4].endswith(str(sum(p.burst_time for p in procs)))
    assert len(lines[2]) == len(lines[4])