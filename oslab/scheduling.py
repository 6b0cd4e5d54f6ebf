"""CPU scheduling policies: FCFS, SJF, priority and round robin."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable


class Policy(Enum):
    """Scheduling policy that produced a result."""

    FCFS = "First Come First Served"
    SJF = "Shortest Job First"
    PRIORITY = "Priority"
    ROUND_ROBIN = "Round Robin"


@dataclass(frozen=True)
class Process:
    """A process to schedule; all processes arrive at time 0."""

    name: int
    burst_time: int
    priority: int = 0


@dataclass(frozen=True)
class ProcessTiming:
    """Waiting and turnaround time of one process."""

    process: Process
    waiting_time: int
    turnaround_time: int


@dataclass(frozen=True)
class ScheduleResult:
    """Outcome of a scheduling run.

    ``timings`` is in table order; ``gantt`` holds ``(name, start, end)``
    slices in execution order.
    """

    policy: Policy
    timings: tuple[ProcessTiming, ...]
    gantt: tuple[tuple[int, int, int], ...]
    quantum: int | None = None

    def total_waiting(self) -> int:
        return sum(t.waiting_time for t in self.timings)

    def total_turnaround(self) -> int:
        return sum(t.turnaround_time for t in self.timings)

    def average_waiting(self) -> float:
        return self.total_waiting() / len(self.timings)

    def average_turnaround(self) -> float:
        return self.total_turnaround() / len(self.timings)


def _as_list(processes: Iterable[Process]) -> list[Process]:
    procs = list(processes)
    if not procs:
        raise ValueError("at least one process is required")
    return procs


def _run_in_order(order: list[Process], policy: Policy) -> ScheduleResult:
    clock = 0
    timings = []
    gantt = []
    for proc in order:
        end = clock + proc.burst_time
        timings.append(ProcessTiming(proc, clock, end))
        gantt.append((proc.name, clock, end))
        clock = end
    return ScheduleResult(policy, tuple(timings), tuple(gantt))


def fcfs(processes: Iterable[Process]) -> ScheduleResult:
    """Run processes in the order given."""
    return _run_in_order(_as_list(processes), Policy.FCFS)


def sjf(processes: Iterable[Process]) -> ScheduleResult:
    """Run the shortest burst first; ties keep their input order."""
    order = sorted(_as_list(processes), key=lambda p: p.burst_time)
    return _run_in_order(order, Policy.SJF)


def priority_schedule(processes: Iterable[Process]) -> ScheduleResult:
    """Run the lowest priority number first; ties keep their input order."""
    order = sorted(_as_list(processes), key=lambda p: p.priority)
    return _run_in_order(order, Policy.PRIORITY)


def round_robin(processes: Iterable[Process], quantum: int) -> ScheduleResult:
    """Cycle through processes giving each at most ``quantum`` units per turn."""
    procs = _as_list(processes)
    if quantum <= 0:
        raise ValueError("time quantum must be positive")
    if any(p.burst_time <= 0 for p in procs):
        raise ValueError("burst times must be positive for round robin")

    remaining = [p.burst_time for p in procs]
    finish = [0] * len(procs)
    gantt = []
    clock = 0
    while any(remaining):
        for index, proc in enumerate(procs):
            if not remaining[index]:
                continue
            run = min(remaining[index], quantum)
            gantt.append((proc.name, clock, clock + run))
            clock += run
            remaining[index] -= run
            if not remaining[index]:
                finish[index] = clock

    timings = tuple(
        ProcessTiming(proc, done - proc.burst_time, done)
        for proc, done in zip(procs, finish)
    )
    return ScheduleResult(Policy.ROUND_ROBIN, timings, tuple(gantt), quantum)


def format_report(result: ScheduleResult) -> str:
    """Render the per-process table and the totals."""
    with_priority = result.policy is Policy.PRIORITY
    if with_priority:
        header = "Process\tBurst Time\tPriority\tWaiting Time\tTurnaround Time"
    else:
        header = "Process\tBurst Time\tWaiting Time\tTurnaround Time"
    lines = ["", header]
    for timing in result.timings:
        proc = timing.process
        cells = [str(proc.name), str(proc.burst_time)]
        if with_priority:
            cells.append(str(proc.priority))
        cells += [str(timing.waiting_time), str(timing.turnaround_time)]
        lines.append(cells[0] + "\t" + "\t\t".join(cells[1:]))
    lines += [
        "",
        f"Total waiting time is {result.total_waiting()}",
        f"Average waiting time is {result.average_waiting():.2f}",
        f"Total Turn Around Time is {result.total_turnaround()}",
        f"Average Turn Around Time is {result.average_turnaround():.2f}",
    ]
    return "\n".join(lines)


def format_gantt(result: ScheduleResult) -> str:
    """Render a text Gantt chart of the execution slices."""
    border = " "
    labels = "|"
    times = "0"
    for name, start, end in result.gantt:
        length = end - start
        pad = " " * max(length - 1, 0)
        segment = f"{pad}P{name}{pad}|"
        border += "--" * length + " "
        labels += segment
        times += f"{end:>{len(segment)}}"
    return "\n".join(["Gantt Chart", border, labels, border, times])