"""Tests for the in-process policy comparison benchmark."""

from benchmarks.policy_comparison import PolicyComparison, WorkloadTask, generate_workload
from config.settings import settings


def test_generate_workload_is_reproducible_and_in_range():
    first = generate_workload(50, seed=3)
    second = generate_workload(50, seed=3)

    assert first == second
    assert len(first) == 50
    for task in first:
        assert settings.MIN_EXECUTION_TIME <= task.execution_time <= settings.MAX_EXECUTION_TIME
        assert settings.MIN_PRIORITY <= task.priority <= settings.MAX_PRIORITY


def test_every_policy_runs_the_workload_to_completion():
    workload = generate_workload(30, seed=11)
    total = sum(t.execution_time for t in workload)

    results = PolicyComparison(workload).run_all_policies()

    assert [r["policy"] for r in results] == ["sjf", "priority", "fcfs"]
    for r in results:
        assert r["num_tasks"] == 30
        assert r["makespan"] == total + 1
        assert 0 < r["cpu_utilization"] <= 100


def test_sjf_minimizes_average_waiting_time():
    workload = [
        WorkloadTask("long", 12, 9),
        WorkloadTask("mid", 5, 5),
        WorkloadTask("short", 1, 1),
    ]
    results = {r["policy"]: r for r in PolicyComparison(workload).run_all_policies()}

    # SJF: short(1), mid(2), long(7) → 10/3; FCFS & Priority: long(1), mid(13), short(18) → 32/3
    assert results["sjf"]["avg_waiting_time"] == round(10 / 3, 2)
    assert results["fcfs"]["avg_waiting_time"] == round(32 / 3, 2)
    assert results["priority"]["avg_waiting_time"] == round(32 / 3, 2)
