# osdemos

Two small operating-systems demos:

- a CPU scheduling simulator covering First-Come-First-Served, Shortest Job First,
  Priority, Round Robin and Priority with Round Robin
- a threaded TCP chat server, with a matching line-based client

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## CPU scheduling

The simulator reads tasks from a schedule file, one task per line, in the form
`name, priority, burst`:

```
T1, 4, 20
T2, 2, 25
T3, 3, 25
```

Blank lines are skipped, reading stops at the first line that does not have this
form, and a file may hold at most 100 tasks.

Start it with:

```
osdemos-schedule [path]
```

`path` defaults to `schedule.txt` in the current directory. A menu lets you choose
an algorithm (1 to 5) or exit (6). The Round Robin choices also ask for a time
quantum; an answer that is not a number uses 4. For the chosen algorithm you get
the execution order as a Gantt-style sequence, then a table of completion, waiting
and turnaround times, then the average waiting and turnaround times. All tasks are
taken to arrive at time 0. Priority with Round Robin keeps the tasks in priority
order for the choices that follow.

The same functions can be used from Python. Each algorithm returns the tasks with
their timings filled in and the execution order as a list of task names:

```python
from osdemos.scheduling import (
    parse_tasks, round_robin, format_gantt, format_results, average_times,
)

tasks = parse_tasks(["T1, 4, 20", "T2, 2, 25"])
tasks, order = round_robin(tasks, 10)
print(format_gantt(order))
print(format_results(tasks))
print(average_times(tasks))
```

Available functions in `osdemos.scheduling`:

- `parse_tasks(lines)` and `load_tasks(path)` build a list of `Task` objects
  (`name`, `priority`, `cpu_burst`, `completion_time`, `waiting_time`,
  `turnaround_time`)
- `fcfs(tasks)`, `sjf(tasks)`, `priority_scheduling(tasks)`,
  `round_robin(tasks, time_quantum)`, `priority_with_round_robin(tasks, time_quantum)`
- `format_gantt(order)`, `format_results(tasks)`, `average_times(tasks)`

A lower priority number runs first; ties keep the order of the input. `ScheduleError`
is raised for more than 100 tasks, a time quantum that is not positive, a CPU burst
that is not positive under Round Robin, and averaging an empty task list.

## Chat

Start the server. By default it listens on port 9090 on all interfaces and accepts
up to 10 clients at once; further connections are closed straight away:

```
osdemos-server [--host HOST] [--port PORT] [--max-clients N]
```

Then connect one or more clients:

```
osdemos-client localhost 9090
```

Each message a client sends goes to every other connected client, with `Server: `
in front of it. A line that starts with `Bye` ends that client's session.

From Python, `ChatServer` can be used as a context manager; `serve_forever()` runs
until `close()` is called, and `client_count()` reports the connected clients.

## Limitations

- The client waits for one message from the server after each line it sends and
  does not show messages that arrive at other times. A client that sends a line
  while no other client is talking to it will wait until someone else writes.
- Messages carry no user names; the server does not remember or replay history.
- The scheduling simulator has no arrival times: every task is ready at time 0.