"""Banker's algorithm safety check."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class SafetyResult:
    """Outcome of a safety check.

    ``sequence`` holds zero-based process indices in the order they can
    finish; ``steps`` pairs each with the work vector after it releases.
    """

    safe: bool
    sequence: tuple[int, ...]
    steps: tuple[tuple[int, tuple[int, ...]], ...]


def check_safety(
    available: Sequence[int],
    allocation: Sequence[Sequence[int]],
    need: Sequence[Sequence[int]],
) -> SafetyResult:
    """Find a safe sequence, scanning processes in index order each pass."""
    work = tuple(available)
    alloc_rows = [tuple(row) for row in allocation]
    need_rows = [tuple(row) for row in need]
    if len(alloc_rows) != len(need_rows):
        raise ValueError("allocation and need must list the same processes")
    if any(len(row) != len(work) for row in alloc_rows + need_rows):
        raise ValueError("every row must have one entry per resource class")

    finished = [False] * len(alloc_rows)
    sequence: list[int] = []
    steps: list[tuple[int, tuple[int, ...]]] = []
    while not all(finished):
        progressed = False
        for index, (held, wanted) in enumerate(zip(alloc_rows, need_rows)):
            if finished[index] or any(w > f for w, f in zip(wanted, work)):
                continue
            work = tuple(f + h for f, h in zip(work, held))
            finished[index] = True
            sequence.append(index)
            steps.append((index, work))
            progressed = True
        if not progressed:
            return SafetyResult(False, tuple(sequence), tuple(steps))
    return SafetyResult(True, tuple(sequence), tuple(steps))


def format_report(result: SafetyResult) -> str:
    """Render the satisfied processes and the final verdict."""
    lines = []
    for index, work in result.steps:
        lines.append(f"Process {index + 1} is satisfied")
        lines.extend(f"a[{j}] = {value}" for j, value in enumerate(work))
    if result.safe:
        lines.append("System is in safe state")
        lines.append("Safe Sequence " + " ".join(str(i + 1) for i in result.sequence))
    else:
        lines.append("System is in unsafe state")
    return "\n".join(lines)