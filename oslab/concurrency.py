"""Thread synchronisation demos: port limits, counting threads, bounded buffer."""

from __future__ import annotations

import threading
import time
from typing import Callable, Iterable

Emit = Callable[[str], None]

OPEN = "OPEN"
CLOSED = "CLOSED"


def _check_ports(total_ports: int, max_ports: int, hold_seconds: float) -> None:
    if total_ports < 0:
        raise ValueError("the number of ports must not be negative")
    if max_ports <= 0:
        raise ValueError("at least one port must be allowed open")
    if hold_seconds < 0:
        raise ValueError("the hold time must not be negative")


def run_ports_monitor(
    total_ports: int = 5,
    max_ports: int = 3,
    hold_seconds: float = 2.0,
    emit: Emit | None = None,
) -> list[tuple[int, str]]:
    """Open ports from separate threads, limited by a condition-variable monitor.

    Threads start half a hold time apart. Returns ``(port, OPEN|CLOSED)``
    events in the order they happened.
    """
    _check_ports(total_ports, max_ports, hold_seconds)
    out = emit or print
    condition = threading.Condition()
    open_count = 0
    events: list[tuple[int, str]] = []

    def worker(port: int) -> None:
        nonlocal open_count
        with condition:
            condition.wait_for(lambda: open_count < max_ports)
            open_count += 1
            events.append((port, OPEN))
            out(f"Port {port} is now {OPEN}")
        time.sleep(hold_seconds)
        with condition:
            open_count -= 1
            events.append((port, CLOSED))
            out(f"Port {port} is now {CLOSED}")
            condition.notify()

    threads = []
    for port in range(1, total_ports + 1):
        thread = threading.Thread(target=worker, args=(port,))
        thread.start()
        threads.append(thread)
        time.sleep(hold_seconds / 2)
    for thread in threads:
        thread.join()
    return events


def run_ports_semaphore(
    total_ports: int = 5,
    max_ports: int = 3,
    hold_seconds: float = 2.0,
    emit: Emit | None = None,
) -> list[tuple[int, str]]:
    """Open ports from separate threads, limited by a counting semaphore.

    Returns ``(port, OPEN|CLOSED)`` events in the order they happened.
    """
    _check_ports(total_ports, max_ports, hold_seconds)
    out = emit or print
    semaphore = threading.Semaphore(max_ports)
    record_lock = threading.Lock()
    events: list[tuple[int, str]] = []

    def record(port: int, state: str) -> None:
        with record_lock:
            events.append((port, state))
            out(f"Port {port} is now {state}")

    def worker(port: int) -> None:
        with semaphore:
            record(port, OPEN)
            time.sleep(hold_seconds)
            record(port, CLOSED)

    threads = [
        threading.Thread(target=worker, args=(port,))
        for port in range(1, total_ports + 1)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return events


def run_counter_threads(emit: Emit | None = None) -> list[str]:
    """Run two counting threads side by side and return every line they emit."""
    out = emit or print
    lock = threading.Lock()
    lines: list[str] = []

    def say(text: str) -> None:
        with lock:
            lines.append(text)
            out(text)

    def first() -> None:
        say("Thread1")
        for i in range(11):
            say(f"i = {i}")
        say("Exit from thread")

    def second() -> None:
        say("Thread2")
        for j in range(1, 11):
            say(f"j = {j}")
        say("Exit from thread")

    say("before thread")
    threads = [threading.Thread(target=first), threading.Thread(target=second)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return lines


def produce_consume(items: Iterable[int], capacity: int = 10) -> list[int]:
    """Pass items through a bounded ring buffer between a producer and a consumer.

    Returns the items in the order the consumer took them.
    """
    values = list(items)
    if capacity <= 0:
        raise ValueError("the buffer capacity must be positive")
    if not 1 <= len(values) <= capacity:
        raise ValueError(f"the number of items must be between 1 and {capacity}")

    buffer: list[int | None] = [None] * capacity
    empty = threading.Semaphore(capacity)
    full = threading.Semaphore(0)
    mutex = threading.Lock()
    consumed: list[int] = []

    def producer() -> None:
        slot = 0
        for value in values:
            empty.acquire()
            with mutex:
                buffer[slot] = value
                slot = (slot + 1) % capacity
            full.release()

    def consumer() -> None:
        slot = 0
        for _ in values:
            full.acquire()
            with mutex:
                item = buffer[slot]
                slot = (slot + 1) % capacity
                consumed.append(item)  # type: ignore[arg-type]
            empty.release()

    threads = [threading.Thread(target=producer), threading.Thread(target=consumer)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return consumed