"""
Tests for the metrics functions.

Tasks are built by hand so every number below can be checked on paper.
"""

import pytest

from models.enums import SchedulingPolicy, TaskStatus, TieBreak
from models.task import Task
from scheduler import metrics
from scheduler.engine import SchedulingEngine


def _task(task_id=1, exec_time=4, arrival=0, start=-1, end=-1, remaining=None, status=TaskStatus.WAITING):
    return Task(
        id=task_id,
        name=f"task-{task_id}",
        execution_time=exec_time,
        priority=1,
        arrival_time=arrival,
        start_time=start,
        end_time=end,
        remaining_time=exec_time if remaining is None else remaining,
        status=status,
    )


def test_unstarted_task_has_zero_metrics():
    task = _task()
    assert metrics.waiting_time(task) == 0
    assert metrics.turnaround_time(task) == 0
    assert metrics.response_time(task) == 0


def test_completed_task_metrics():
    task = _task(arrival=2, start=5, end=9, remaining=0, status=TaskStatus.COMPLETED)

    assert metrics.waiting_time(task) == 3
    assert metrics.response_time(task) == 3
    assert metrics.turnaround_time(task) == 7


def test_running_task_has_waiting_but_no_turnaround():
    task = _task(arrival=1, start=4, remaining=2, status=TaskStatus.RUNNING)

    assert metrics.waiting_time(task) == 3
    assert metrics.turnaround_time(task) == 0


def test_averages_over_completed_tasks():
    done = [
        _task(1, exec_time=1, arrival=0, start=1, end=2, remaining=0, status=TaskStatus.COMPLETED),
        _task(2, exec_time=3, arrival=0, start=2, end=5, remaining=0, status=TaskStatus.COMPLETED),
    ]

    assert metrics.average_waiting_time(done) == pytest.approx(1.5)
    assert metrics.average_response_time(done) == pytest.approx(1.5)
    assert metrics.average_turnaround_time(done) == pytest.approx(3.5)


def test_averages_of_nothing_are_zero():
    assert metrics.average_waiting_time([]) == 0
    assert metrics.average_turnaround_time([]) == 0
    assert metrics.average_response_time([]) == 0


def test_cpu_utilization_zero_at_time_zero():
    assert metrics.cpu_utilization([], None, 0) == 0


def test_cpu_utilization_counts_running_progress():
    done = [_task(1, exec_time=3, start=1, end=4, remaining=0, status=TaskStatus.COMPLETED)]
    running = _task(2, exec_time=5, start=4, remaining=3, status=TaskStatus.RUNNING)

    # busy = 3 completed + 2 elapsed on the running task, over 8 units
    assert metrics.cpu_utilization(done, running, 8) == pytest.approx(62.5)


def test_task_metrics_row():
    task = _task(7, arrival=1, start=3, end=7, remaining=0, status=TaskStatus.COMPLETED)

    assert metrics.task_metrics(task) == {
        "task_id": 7,
        "name": "task-7",
        "status": "completed",
        "waiting_time": 2,
        "turnaround_time": 6,
        "response_time": 2,
    }


def test_compute_stats_from_engine_snapshot():
    engine = SchedulingEngine(policy=SchedulingPolicy.SJF, tie_break=TieBreak.ARRIVAL)
    engine.submit_task("A", 3, 1)
    engine.submit_task("B", 1, 1)
    engine.submit_task("C", 4, 1)
    engine.advance(5)

    stats = metrics.compute_stats(engine.snapshot())

    # B: wait 1, turnaround 2. A: wait 2, turnaround 5. C is waiting.
    assert stats.current_time == 5
    assert stats.total_tasks == 3
    assert (stats.waiting, stats.running, stats.completed) == (0, 1, 2)
    assert stats.avg_waiting_time == pytest.approx(1.5)
    assert stats.avg_turnaround_time == pytest.approx(3.5)
    assert stats.avg_response_time == pytest.approx(1.5)
    assert stats.cpu_utilization == pytest.approx(80.0)
    assert stats.throughput == pytest.approx(0.4)


def test_compute_stats_on_fresh_engine():
    stats = metrics.compute_stats(SchedulingEngine().snapshot())

    assert stats.current_time == 0
    assert stats.cpu_utilization == 0
    assert stats.throughput == 0
    assert stats.avg_waiting_time == 0
