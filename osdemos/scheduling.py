"""CPU scheduling simulations: FCFS, SJF, priority and round robin."""

from __future__ import annotations

import argparse
import re
import sys
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Callable, Iterable

MAX_TASKS = 100
DEFAULT_SCHEDULE = "schedule.txt"
DEFAULT_TIME_QUANTUM = 4

_LINE = re.compile(r"\s*([^,]+),\s*([+-]?\d+)\s*,\s*([+-]?\d+)\s*$")
_BORDER = "+------+-----------+------------+----------------+----------------+"
_HEADER = "| Task | CPU Burst | Completion | Waiting Time   | Turnaround Time |"


class ScheduleError(Exception):
    """Raised for invalid task lists or scheduling parameters."""


@dataclass
class Task:
    """A task with its scheduling inputs and computed timings."""

    name: str
    priority: int
    cpu_burst: int
    completion_time: int = 0
    waiting_time: int = 0
    turnaround_time: int = 0

    def _finished_at(self, time: int) -> Task:
        return replace(
            self,
            completion_time=time,
            turnaround_time=time,
            waiting_time=time - self.cpu_burst,
        )


def parse_tasks(lines: Iterable[str]) -> list[Task]:
    """Parse ``name, priority, burst`` lines, stopping at the first malformed one."""
    tasks: list[Task] = []
    for line in lines:
        if not line.strip():
            continue
        match = _LINE.match(line)
        if match is None:
            break
        if len(tasks) >= MAX_TASKS:
            raise ScheduleError(f"too many tasks (at most {MAX_TASKS})")
        name, priority, burst = match.groups()
        tasks.append(Task(name.strip(), int(priority), int(burst)))
    return tasks


def load_tasks(path: str | Path) -> list[Task]:
    """Read tasks from a schedule file."""
    with open(path, encoding="utf-8") as handle:
        return parse_tasks(handle)


def _run_in_order(tasks: list[Task], order: list[int]) -> tuple[list[Task], list[str]]:
    results = list(tasks)
    current = 0
    for index in order:
        current += tasks[index].cpu_burst
        results[index] = tasks[index]._finished_at(current)
    return results, [tasks[index].name for index in order]


def fcfs(tasks: list[Task]) -> tuple[list[Task], list[str]]:
    """First-come-first-served: run tasks in the given order."""
    return _run_in_order(tasks, list(range(len(tasks))))


def sjf(tasks: list[Task]) -> tuple[list[Task], list[str]]:
    """Shortest job first; ties go to the earlier task."""
    order = sorted(range(len(tasks)), key=lambda i: tasks[i].cpu_burst)
    return _run_in_order(tasks, order)


def priority_scheduling(tasks: list[Task]) -> tuple[list[Task], list[str]]:
    """Lowest priority number first; ties go to the earlier task."""
    order = sorted(range(len(tasks)), key=lambda i: tasks[i].priority)
    return _run_in_order(tasks, order)


def round_robin(tasks: list[Task], time_quantum: int) -> tuple[list[Task], list[str]]:
    """Cycle through the tasks, giving each at most ``time_quantum`` per turn."""
    if time_quantum <= 0:
        raise ScheduleError("time quantum must be positive")
    if any(task.cpu_burst <= 0 for task in tasks):
        raise ScheduleError("round robin needs positive CPU bursts")
    results = list(tasks)
    remaining = [task.cpu_burst for task in tasks]
    order: list[str] = []
    current = 0
    while any(remaining):
        for index, task in enumerate(tasks):
            if remaining[index] <= 0:
                continue
            slice_time = min(remaining[index], time_quantum)
            remaining[index] -= slice_time
            current += slice_time
            order.append(task.name)
            if remaining[index] == 0:
                results[index] = task._finished_at(current)
    return results, order


def priority_with_round_robin(
    tasks: list[Task], time_quantum: int
) -> tuple[list[Task], list[str]]:
    """Round robin over the tasks stably sorted by priority."""
    ordered = sorted(tasks, key=lambda task: task.priority)
    return round_robin(ordered, time_quantum)


def format_gantt(order: Iterable[str]) -> str:
    """Render the execution order line."""
    return "Execution Order (Gantt Chart): " + " -> ".join(order)


def average_times(tasks: list[Task]) -> tuple[float, float]:
    """Return the average waiting and turnaround times."""
    if not tasks:
        raise ScheduleError("no tasks to average")
    count = len(tasks)
    waiting = sum(task.waiting_time for task in tasks) / count
    turnaround = sum(task.turnaround_time for task in tasks) / count
    return waiting, turnaround


def format_results(tasks: list[Task]) -> str:
    """Render the results table followed by the averages."""
    lines = [_BORDER, _HEADER, _BORDER]
    lines.extend(
        f"| {t.name:<4} | {t.cpu_burst:<9d} | {t.completion_time:<10d} "
        f"| {t.waiting_time:<14d} | {t.turnaround_time:<15d} |"
        for t in tasks
    )
    lines.append(_BORDER)
    waiting, turnaround = average_times(tasks)
    lines.append(f"Average Waiting Time: {waiting:.2f} ms")
    lines.append(f"Average Turnaround Time: {turnaround:.2f} ms")
    return "\n".join(lines)


_Algorithm = Callable[..., "tuple[list[Task], list[str]]"]

_MENU: dict[int, tuple[str, _Algorithm, bool]] = {
    1: ("First-Come-First-Served (FCFS)", fcfs, False),
    2: ("Shortest Job First (SJF)", sjf, False),
    3: ("Priority Scheduling", priority_scheduling, False),
    4: ("Round Robin (RR)", round_robin, True),
    5: ("Priority with Round Robin", priority_with_round_robin, True),
}

_MENU_TEXT = """
--- CPU Scheduling Menu ---
1. First-Come-First-Served (FCFS)
2. Shortest Job First (SJF)
3. Priority Scheduling
4. Round Robin (RR)
5. Priority with Round Robin
6. Exit"""


def _read_int(prompt: str) -> int | None:
    text = input(prompt)
    try:
        return int(text.strip())
    except ValueError:
        return None


def main(argv: list[str] | None = None) -> int:
    """Load a schedule file and run the interactive scheduling menu."""
    parser = argparse.ArgumentParser(description="Simulate CPU scheduling algorithms.")
    parser.add_argument("path", nargs="?", default=DEFAULT_SCHEDULE)
    args = parser.parse_args(argv)

    try:
        tasks = load_tasks(args.path)
    except OSError as exc:
        print(f"Failed to open {args.path}: {exc.strerror}", file=sys.stderr)
        return 1
    except ScheduleError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    if not tasks:
        print(f"No tasks found in {args.path}.")
        return 1
    print(f"Loaded {len(tasks)} tasks from {args.path}.")

    while True:
        print(_MENU_TEXT)
        try:
            choice = _read_int("Enter your choice: ")
            if choice == 6:
                print("Exiting program.")
                return 0
            if choice not in _MENU:
                print("Invalid choice! Please try again.")
                continue
            title, algorithm, needs_quantum = _MENU[choice]
            extra: tuple[int, ...] = ()
            if needs_quantum:
                quantum = _read_int("Enter time quantum: ")
                extra = (DEFAULT_TIME_QUANTUM if quantum is None else quantum,)
        except EOFError:
            print()
            return 0
        try:
            tasks, order = algorithm(tasks, *extra)
        except ScheduleError as exc:
            print(f"Error: {exc}")
            continue
        print("\n" + format_gantt(order))
        print(f"\n\t--- {title} Results ---")
        print(format_results(tasks))


if __name__ == "__main__":
    sys.exit(main())