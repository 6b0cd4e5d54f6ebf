"""Contiguous memory allocation: first, best and worst fit."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable


class Strategy(Enum):
    """Placement strategy that produced a result."""

    FIRST_FIT = "First Fit"
    BEST_FIT = "Best Fit"
    WORST_FIT = "Worst Fit"


@dataclass(frozen=True)
class Placement:
    """Where one process went; ``block`` is ``None`` if it did not fit."""

    process: int
    size: int
    block: int | None
    block_size: int | None


@dataclass(frozen=True)
class FitResult:
    """Outcome of placing processes into blocks.

    ``blocks`` is the block list the indices refer to; best and worst
    fit sort it first.
    """

    strategy: Strategy
    blocks: tuple[int, ...]
    placements: tuple[Placement, ...]


def _place(
    strategy: Strategy,
    process_sizes: Iterable[int],
    blocks: tuple[int, ...],
    choose: Callable[[list[int]], int],
) -> FitResult:
    occupied = [False] * len(blocks)
    placements = []
    for index, size in enumerate(process_sizes):
        candidates = [
            j for j, block in enumerate(blocks) if not occupied[j] and block >= size
        ]
        if candidates:
            chosen = choose(candidates)
            occupied[chosen] = True
            placements.append(Placement(index, size, chosen, blocks[chosen]))
        else:
            placements.append(Placement(index, size, None, None))
    return FitResult(strategy, blocks, tuple(placements))


def first_fit(process_sizes: Iterable[int], block_sizes: Iterable[int]) -> FitResult:
    """Put each process in the first free block large enough."""
    return _place(Strategy.FIRST_FIT, process_sizes, tuple(block_sizes), lambda c: c[0])


def best_fit(process_sizes: Iterable[int], block_sizes: Iterable[int]) -> FitResult:
    """Put each process in the smallest free block large enough."""
    blocks = tuple(sorted(block_sizes))
    return _place(
        Strategy.BEST_FIT,
        process_sizes,
        blocks,
        lambda c: min(c, key=lambda j: blocks[j]),
    )


def worst_fit(process_sizes: Iterable[int], block_sizes: Iterable[int]) -> FitResult:
    """Put each process in the largest free block large enough."""
    blocks = tuple(sorted(block_sizes, reverse=True))
    return _place(
        Strategy.WORST_FIT,
        process_sizes,
        blocks,
        lambda c: max(c, key=lambda j: (blocks[j], -j)),
    )


def format_report(result: FitResult) -> str:
    """Render the sorted blocks (if any) and every placement."""
    lines = [result.strategy.value]
    if result.strategy is not Strategy.FIRST_FIT:
        separator = ":" if result.strategy is Strategy.BEST_FIT else " "
        lines.append("After sorting block sizes are ")
        lines.extend(
            f"Block {i}{separator}{size}" for i, size in enumerate(result.blocks)
        )
    for placement in result.placements:
        lines.append(f"Alloc[{placement.size}]")
        if placement.block is None:
            lines.append(
                f"Process {placement.process} of size {placement.size} is not allocated"
            )
        else:
            lines.append(
                f"Process {placement.process} of size {placement.size} is allocated "
                f"in block {placement.block} of size {placement.block_size}"
            )
    return "\n".join(lines)