# oslab

A small collection of the classic algorithms from an operating-systems
course. Each one is a plain Python function that returns a result object,
and each has a formatter that renders the tables and Gantt charts a lab
report expects.

## Modules

- `oslab.scheduling`: CPU scheduling with `fcfs`, `sjf`, `priority_schedule`
  and `round_robin(processes, quantum)`. They take `Process(name,
  burst_time, priority=0)` records and return a `ScheduleResult` whose
  `timings`, `gantt`, `total_waiting()`, `average_waiting()`,
  `total_turnaround()` and `average_turnaround()` give the figures.
  `format_report` renders the table and `format_gantt` the chart. All
  processes arrive at time 0. SJF and priority sorting keep the input
  order for ties, and the lowest priority number runs first.
- `oslab.bankers`: `check_safety(available, allocation, need)` returns a
  `SafetyResult` with `safe`, the zero-based `sequence` of processes that
  can finish, and `steps` holding the work vector after each one releases
  its resources. `format_report` renders it.
- `oslab.paging`: page replacement with `fifo`, `lru` and `lfu`, each taking
  `(pages, num_frames)`. They return a `PagingResult` of `PageStep`s, with
  `page_faults()` and `fault_rate()`, which is a percentage. LFU breaks ties
  in favour of the page touched longest ago. `format_report` renders the
  step table.
- `oslab.memory`: contiguous placement with `first_fit`, `best_fit` and
  `worst_fit`, each taking `(process_sizes, block_sizes)`. Best fit and
  worst fit sort the blocks first, and the block indices in the returned
  `FitResult` refer to that sorted list. Each `Placement` has `block` set to
  `None` when the process did not fit.
- `oslab.concurrency`: threading demos.
  - `run_ports_monitor` and `run_ports_semaphore` cap the number of ports
    open at once, the first with a condition variable and the second with a
    semaphore.
  - `run_counter_threads` runs two counting threads.
  - `produce_consume(items, capacity=10)` passes the items through a bounded
    ring buffer and returns them in the order they were consumed.
  - The port and counter demos return their events or lines and also pass
    each one to an `emit` callback, which defaults to `print`.
- `oslab.dining`: `DiningTable(total, positions, eat_seconds=1.0)` has
  `one_at_a_time()` and `two_at_a_time()`. Both return a list of
  `(eaters, waiting)` rounds. `compatible_pairs(total, positions)` lists
  the hungry philosophers who do not sit next to each other.

Invalid input raises `ValueError`. Examples are an empty process list, a
non-positive quantum or frame count, and mismatched matrix rows.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

The `oslab` command has one subcommand per demo. All input is given as
arguments. Results print in the same form as the `format_report`
functions. When an input is invalid, the command prints `error: ...` to
stderr and exits with status 1.

```
oslab schedule fcfs --burst 5 3 8
oslab schedule priority --burst 10 1 2 --priority 3 1 2 --names 1 2 3
oslab schedule rr --burst 5 3 8 --quantum 2
oslab bankers --available 3 3 2 --allocation "0 1 0" --allocation "2 0 0" --need "7 4 3" --need "1 2 2"
oslab paging lru --frames 3 7 0 1 2 0 3 0 4
oslab memory best --processes 212 417 112 426 --blocks 100 500 200 300 600
oslab dining two --total 5 --hungry 0 2 3 --eat 0
oslab ports semaphore --total 5 --max 3 --hold 2
oslab threads
oslab prodcons 4 8 15 --capacity 10
```

Arguments by subcommand:

- `schedule`: the process names default to 1, 2, 3 and so on. The
  `priority` policy requires `--priority`, and `rr` requires `--quantum`.
- `bankers`: repeat `--allocation` and `--need` once per process. Each one
  takes a row of integers separated by spaces or commas.

## Using the library

```python
from oslab.paging import fifo, lru, format_report

result = lru([7, 0, 1, 2, 0, 3, 0, 4], num_frames=3)
print(result.page_faults(), result.fault_rate())
print(format_report(fifo([7, 0, 1, 2, 0, 3, 0, 4], num_frames=3)))
```

```python
from oslab.scheduling import Process, round_robin, format_report, format_gantt

result = round_robin([Process(1, 5), Process(2, 3), Process(3, 8)], quantum=2)
print(format_report(result))
print(format_gantt(result))
```

```python
from oslab.bankers import check_safety, format_report

result = check_safety(
    available=[3, 3, 2],
    allocation=[[0, 1, 0], [2, 0, 0], [3, 0, 2]],
    need=[[7, 4, 3], [1, 2, 2], [6, 0, 0]],
)
print(format_report(result))
```

```python
from oslab.dining import compatible_pairs

print(compatible_pairs(5, [0, 2, 3]))  # [(0, 2), (0, 3)]
```

## What it does not do

- There is no interactive mode: the command does not prompt for input or
  offer a menu. Every run takes its input from the command line.
- The scheduling policies have no arrival times and no preemption beyond
  the round-robin quantum.