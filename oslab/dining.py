"""Dining philosophers: one or two eating at a time."""

from __future__ import annotations

import threading
import time
from typing import Iterable

Round = tuple[tuple[int, ...], tuple[int, ...]]


def _check(total: int, positions: tuple[int, ...]) -> None:
    if total <= 0:
        raise ValueError("there must be at least one philosopher")
    for seat in positions:
        if not 0 <= seat < total:
            raise ValueError(f"position {seat} is not between 0 and {total - 1}")


def _index_pairs(total: int, positions: tuple[int, ...]) -> list[tuple[int, int]]:
    pairs = []
    for i, first in enumerate(positions):
        for j in range(i + 1, len(positions)):
            second = positions[j]
            if (first + 1) % total != second and (second + 1) % total != first:
                pairs.append((i, j))
    return pairs


def compatible_pairs(total: int, positions: Iterable[int]) -> list[tuple[int, int]]:
    """Pairs of hungry philosophers that do not sit next to each other."""
    seats = tuple(positions)
    _check(total, seats)
    return [(seats[i], seats[j]) for i, j in _index_pairs(total, seats)]


class DiningTable:
    """A round table of ``total`` philosophers, some of them hungry."""

    def __init__(self, total: int, positions: Iterable[int], eat_seconds: float = 1.0):
        seats = tuple(positions)
        _check(total, seats)
        if eat_seconds < 0:
            raise ValueError("the eating time must not be negative")
        self.total = total
        self.positions = seats
        self.eat_seconds = eat_seconds
        self._mutex = threading.Lock()
        self._chopsticks = [threading.Lock() for _ in range(total)]

    def _eat_alone(self, seat: int) -> None:
        sticks = [self._chopsticks[i] for i in dict.fromkeys((seat, (seat + 1) % self.total))]
        with self._mutex:
            for stick in sticks:
                stick.acquire()
        try:
            time.sleep(self.eat_seconds)
        finally:
            for stick in reversed(sticks):
                stick.release()

    def _waiting(self, *eating: int) -> tuple[int, ...]:
        return tuple(seat for k, seat in enumerate(self.positions) if k not in eating)

    def one_at_a_time(self) -> list[Round]:
        """Let each hungry philosopher eat alone; return ``(eaters, waiting)`` rounds."""
        rounds = []
        for index, seat in enumerate(self.positions):
            self._eat_alone(seat)
            rounds.append(((seat,), self._waiting(index)))
        return rounds

    def two_at_a_time(self) -> list[Round]:
        """Let every non-adjacent pair eat together; return ``(eaters, waiting)`` rounds."""
        rounds = []
        for i, j in _index_pairs(self.total, self.positions):
            time.sleep(self.eat_seconds)
            rounds.append(((self.positions[i], self.positions[j]), self._waiting(i, j)))
        return rounds