"""Command line front end for the operating-system algorithm demos."""

from __future__ import annotations

import argparse
import sys

from . import bankers, concurrency, memory, paging, scheduling
from .dining import DiningTable


def _row(text: str) -> tuple[int, ...]:
    try:
        return tuple(int(cell) for cell in text.replace(",", " ").split())
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a row of integers: {text!r}") from None


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="oslab", description=__doc__)
    commands = parser.add_subparsers(dest="command", required=True)

    sched = commands.add_parser("schedule", help="CPU scheduling")
    sched.add_argument("policy", choices=["fcfs", "sjf", "priority", "rr"])
    sched.add_argument("--burst", type=int, nargs="+", required=True)
    sched.add_argument("--names", type=int, nargs="+")
    sched.add_argument("--priority", type=int, nargs="+")
    sched.add_argument("--quantum", type=int)

    bank = commands.add_parser("bankers", help="Banker's algorithm safety check")
    bank.add_argument("--available", type=int, nargs="+", required=True)
    bank.add_argument("--allocation", type=_row, action="append", required=True)
    bank.add_argument("--need", type=_row, action="append", required=True)

    page = commands.add_parser("paging", help="page replacement")
    page.add_argument("policy", choices=["fifo", "lru", "lfu"])
    page.add_argument("--frames", type=int, required=True)
    page.add_argument("pages", type=int, nargs="+")

    mem = commands.add_parser("memory", help="contiguous memory allocation")
    mem.add_argument("strategy", choices=["first", "best", "worst"])
    mem.add_argument("--processes", type=int, nargs="+", required=True)
    mem.add_argument("--blocks", type=int, nargs="+", required=True)

    dine = commands.add_parser("dining", help="dining philosophers")
    dine.add_argument("mode", choices=["one", "two"])
    dine.add_argument("--total", type=int, required=True)
    dine.add_argument("--hungry", type=int, nargs="+", required=True)
    dine.add_argument("--eat", type=float, default=1.0)

    ports = commands.add_parser("ports", help="limit open ports across threads")
    ports.add_argument("mechanism", choices=["monitor", "semaphore"])
    ports.add_argument("--total", type=int, default=5)
    ports.add_argument("--max", type=int, default=3)
    ports.add_argument("--hold", type=float, default=2.0)

    commands.add_parser("threads", help="two counting threads")

    prod = commands.add_parser("prodcons", help="producer and consumer")
    prod.add_argument("items", type=int, nargs="+")
    prod.add_argument("--capacity", type=int, default=10)
    return parser


def _schedule(args: argparse.Namespace, parser: argparse.ArgumentParser) -> str:
    count = len(args.burst)
    names = args.names or list(range(1, count + 1))
    priorities = args.priority or [0] * count
    if len(names) != count or len(priorities) != count:
        parser.error("--names and --priority must match the number of bursts")
    if args.policy == "priority" and args.priority is None:
        parser.error("the priority policy needs --priority")
    if args.policy == "rr" and args.quantum is None:
        parser.error("round robin needs --quantum")
    procs = [
        scheduling.Process(name, burst, prio)
        for name, burst, prio in zip(names, args.burst, priorities)
    ]
    if args.policy == "rr":
        result = scheduling.round_robin(procs, args.quantum)
    else:
        run = {
            "fcfs": scheduling.fcfs,
            "sjf": scheduling.sjf,
            "priority": scheduling.priority_schedule,
        }[args.policy]
        result = run(procs)
    return scheduling.format_report(result) + "\n" + scheduling.format_gantt(result)


def _dining(args: argparse.Namespace) -> str:
    table = DiningTable(args.total, args.hungry, args.eat)
    lines = []
    if args.mode == "one":
        lines.append("Allow one philosopher to eat at any time")
        for eaters, waiting in table.one_at_a_time():
            lines.append(f"P {eaters[0]} is granted to eat")
            lines.append("".join(f"P {seat} is waiting " for seat in waiting))
    else:
        lines.append("Allow two philosophers to eat at same time")
        rounds = table.two_at_a_time()
        for number, ((first, second), waiting) in enumerate(rounds, start=1):
            lines.append(f"combination {number}")
            lines.append(f"P {first} and P {second} are granted to eat")
            lines.append("".join(f"P {seat} is waiting " for seat in waiting))
        if not rounds:
            lines.append("No valid combinations - all philosophers are adjacent")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, run the chosen demo and print its report."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        if args.command == "schedule":
            print(_schedule(args, parser))
        elif args.command == "bankers":
            result = bankers.check_safety(args.available, args.allocation, args.need)
            print(bankers.format_report(result))
        elif args.command == "paging":
            run = {"fifo": paging.fifo, "lru": paging.lru, "lfu": paging.lfu}[args.policy]
            print(paging.format_report(run(args.pages, args.frames)))
        elif args.command == "memory":
            fit = {
                "first": memory.first_fit,
                "best": memory.best_fit,
                "worst": memory.worst_fit,
            }[args.strategy]
            print(memory.format_report(fit(args.processes, args.blocks)))
        elif args.command == "dining":
            print(_dining(args))
        elif args.command == "ports":
            runner = (
                concurrency.run_ports_monitor
                if args.mechanism == "monitor"
                else concurrency.run_ports_semaphore
            )
            runner(args.total, args.max, args.hold, print)
        elif args.command == "threads":
            concurrency.run_counter_threads(print)
        elif args.command == "prodcons":
            for item in concurrency.produce_consume(args.items, args.capacity):
                print(f"consumed item={item}")
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())