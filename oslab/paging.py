"""Page replacement policies: FIFO, LRU and LFU."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable


class Policy(Enum):
    """Page replacement policy that produced a result."""

    FIFO = "FIFO"
    LRU = "LRU"
    LFU = "LFU"


@dataclass(frozen=True)
class PageStep:
    """State of the frames after one page reference.

    ``frames`` holds ``None`` for an empty frame; ``frequencies`` is only
    set for LFU.
    """

    page: int
    frames: tuple[int | None, ...]
    fault: bool
    frequencies: tuple[int, ...] | None = None


@dataclass(frozen=True)
class PagingResult:
    """Outcome of running a reference string through a policy."""

    policy: Policy
    pages: tuple[int, ...]
    num_frames: int
    steps: tuple[PageStep, ...]

    def page_faults(self) -> int:
        return sum(step.fault for step in self.steps)

    def fault_rate(self) -> float:
        """Page faults as a percentage of references."""
        return self.page_faults() / len(self.pages) * 100


def _validate(pages: Iterable[int], num_frames: int) -> tuple[int, ...]:
    refs = tuple(pages)
    if not refs:
        raise ValueError("the reference string must not be empty")
    if num_frames <= 0:
        raise ValueError("the number of frames must be positive")
    return refs


def fifo(pages: Iterable[int], num_frames: int) -> PagingResult:
    """Replace the page that was loaded earliest."""
    refs = _validate(pages, num_frames)
    frames: list[int | None] = [None] * num_frames
    next_victim = 0
    steps = []
    for page in refs:
        fault = page not in frames
        if fault:
            frames[next_victim] = page
            next_victim = (next_victim + 1) % num_frames
        steps.append(PageStep(page, tuple(frames), fault))
    return PagingResult(Policy.FIFO, refs, num_frames, tuple(steps))


def lru(pages: Iterable[int], num_frames: int) -> PagingResult:
    """Replace the page whose last use is oldest."""
    refs = _validate(pages, num_frames)
    frames: list[int | None] = [None] * num_frames
    stamps = [0] * num_frames
    counter = 0
    steps = []
    for page in refs:
        fault = page not in frames
        if fault:
            if counter < num_frames:
                pos = counter
            else:
                pos = stamps.index(min(stamps))
            frames[pos] = page
        else:
            pos = frames.index(page)
        counter += 1
        stamps[pos] = counter
        steps.append(PageStep(page, tuple(frames), fault))
    return PagingResult(Policy.LRU, refs, num_frames, tuple(steps))


def lfu(pages: Iterable[int], num_frames: int) -> PagingResult:
    """Replace the least used page; ties go to the one touched longest ago."""
    refs = _validate(pages, num_frames)
    frames: list[int | None] = [None] * num_frames
    freq = [0] * num_frames
    stamps = [0] * num_frames
    counter = 0
    steps = []
    for page in refs:
        fault = page not in frames
        if fault:
            if counter < num_frames:
                pos = counter
            else:
                pos = min(range(num_frames), key=lambda i: (freq[i], stamps[i]))
            frames[pos] = page
            freq[pos] = 1
        else:
            pos = frames.index(page)
            freq[pos] += 1
        counter += 1
        stamps[pos] = counter
        steps.append(PageStep(page, tuple(frames), fault, tuple(freq)))
    return PagingResult(Policy.LFU, refs, num_frames, tuple(steps))


def _frames_text(frames: tuple[int | None, ...]) -> str:
    return "".join("- " if frame is None else f"{frame} " for frame in frames)


def format_report(result: PagingResult) -> str:
    """Render the step table and the fault totals."""
    with_freq = result.policy is Policy.LFU
    lines = [
        "Page Reference String " + " ".join(str(p) for p in result.pages),
        "",
    ]
    if with_freq:
        lines.append("Step\tPage\tFrames\t\tFrequencies\tPage Fault")
        lines.append("-" * 56)
    else:
        lines.append("Step\tPage\tFrames\t\tPage Fault")
        lines.append("-" * 40)
    for number, step in enumerate(result.steps, start=1):
        row = f"{number}\t{step.page}\t{_frames_text(step.frames)}"
        if with_freq and step.frequencies is not None:
            row += "\t" + "".join(f"{f} " for f in step.frequencies)
        row += "\t\t" + ("Yes" if step.fault else "No")
        lines.append(row)
    lines += [
        "",
        f"Total Page Faults {result.page_faults()}",
        f"Page Fault Rate {result.fault_rate():.2f}%",
    ]
    return "\n".join(lines)