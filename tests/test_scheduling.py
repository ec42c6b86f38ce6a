import io

import pytest

from osdemos.scheduling import (
    ScheduleError,
    Task,
    average_times,
    fcfs,
    format_gantt,
    format_results,
    load_tasks,
    main,
    parse_tasks,
    priority_scheduling,
    priority_with_round_robin,
    round_robin,
    sjf,
)


def _tasks():
    return [Task("A", 3, 6), Task("B", 1, 2), Task("C", 2, 4)]


def _check_invariants(tasks):
    for task in tasks:
        assert task.turnaround_time == task.completion_time
        assert task.waiting_time == task.completion_time - task.cpu_burst
    assert max(t.completion_time for t in tasks) == sum(t.cpu_burst for t in tasks)


def test_parse_tasks_reads_fields():
    tasks = parse_tasks(["T1, 2, 5\n", "\n", "T2, 1, 3\n"])
    assert tasks == [Task("T1", 2, 5), Task("T2", 1, 3)]


def test_parse_tasks_stops_at_malformed_line():
    tasks = parse_tasks(["A, 1, 5", "garbage", "B, 2, 3"])
    assert [t.name for t in tasks] == ["A"]


def test_parse_tasks_rejects_too_many():
    with pytest.raises(ScheduleError):
        parse_tasks([f"T{i}, 1, 1" for i in range(101)])


def test_load_tasks(tmp_path):
    path = tmp_path / "schedule.txt"
    path.write_text("A, 1, 5\nB, 2, 3\n")
    assert [t.name for t in load_tasks(path)] == ["A", "B"]


def test_fcfs_keeps_order():
    results, order = fcfs(_tasks())
    assert order == ["A", "B", "C"]
    assert results[0].waiting_time == 0
    _check_invariants(results)


def test_sjf_orders_by_burst():
    results, order = sjf(_tasks())
    assert order == ["B", "C", "A"]
    assert [t.name for t in results] == ["A", "B", "C"]
    _check_invariants(results)


def test_sjf_ties_prefer_first():
    _, order = sjf([Task("X", 1, 2), Task("Y", 1, 2)])
    assert order == ["X", "Y"]


def test_priority_scheduling_orders_by_priority():
    results, order = priority_scheduling(_tasks())
    assert order == ["B", "C", "A"]
    _check_invariants(results)


def test_round_robin_slices():
    results, order = round_robin([Task("A", 1, 3), Task("B", 1, 2)], 2)
    assert order == ["A", "B", "A"]
    _check_invariants(results)
    assert results[1].completion_time < results[0].completion_time


def test_round_robin_rejects_bad_quantum():
    with pytest.raises(ScheduleError):
        round_robin(_tasks(), 0)


def test_priority_with_round_robin_sorts():
    results, order = priority_with_round_robin(_tasks(), 100)
    assert [t.name for t in results] == ["B", "C", "A"]
    assert order == ["B", "C", "A"]
    _check_invariants(results)


def test_format_gantt():
    assert format_gantt(["A", "B"]) == "Execution Order (Gantt Chart): A -> B"


def test_average_times_single_task():
    results, _ = fcfs([Task("A", 1, 4)])
    assert average_times(results) == (0.0, 4.0)


def test_average_times_empty():
    with pytest.raises(ScheduleError):
        average_times([])


def test_format_results_table():
    results, _ = fcfs([Task("A", 1, 4)])
    text = format_results(results)
    lines = text.splitlines()
    assert lines[1] == "| Task | CPU Burst | Completion | Waiting Time   | Turnaround Time |"
    assert lines[3].startswith("| A    | 4 ")
    assert lines[-1] == "Average Turnaround Time: 4.00 ms"


def test_main_runs_menu(tmp_path, monkeypatch, capsys):
    path = tmp_path / "schedule.txt"
    path.write_text("A, 1, 5\nB, 2, 3\n")
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n9\n6\n"))
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "Loaded 2 tasks" in out
    assert "First-Come-First-Served (FCFS) Results" in out
    assert "Invalid choice! Please try again." in out


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "missing.txt")]) == 1


def test_main_empty_file(tmp_path, capsys):
    path = tmp_path / "schedule.txt"
    path.write_text("")
    assert main([str(path)]) == 1
    assert "No tasks found" in capsys.readouterr().out