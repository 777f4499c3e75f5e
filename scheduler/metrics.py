"""
Performance metrics over simulated tasks.

Pure functions: they only read Task fields and never mutate anything, so they
can be fed live tasks or the detached copies inside an EngineSnapshot.

Definitions (all in simulated time units):
- waiting time    = start_time - arrival_time     (0 until dispatched)
- turnaround time = end_time   - arrival_time     (0 until completed)
- response time   = start_time - arrival_time     (0 until dispatched)

Waiting and response time share a formula here: scheduling is non-preemptive,
so a task is never put back in the ready set after its first dispatch.

Averages are taken over the COMPLETED tasks only and are 0 when none exist.

CPU utilization = busy time / elapsed time × 100, where busy time is the
execution_time of every completed task plus what the running task has
consumed so far.
"""

from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from models.enums import TaskStatus
from models.snapshot import EngineSnapshot
from models.task import UNSET, Task


def waiting_time(task: Task) -> int:
    if task.start_time == UNSET:
        return 0
    return task.start_time - task.arrival_time


def turnaround_time(task: Task) -> int:
    if task.end_time == UNSET:
        return 0
    return task.end_time - task.arrival_time


def response_time(task: Task) -> int:
    if task.start_time == UNSET:
        return 0
    return task.start_time - task.arrival_time


def _average(tasks: Iterable[Task], metric: Callable[[Task], int]) -> float:
    values = [metric(t) for t in tasks]
    if not values:
        return 0.0
    return sum(values) / len(values)


def average_waiting_time(completed: Iterable[Task]) -> float:
    return _average(completed, waiting_time)


def average_turnaround_time(completed: Iterable[Task]) -> float:
    return _average(completed, turnaround_time)


def average_response_time(completed: Iterable[Task]) -> float:
    return _average(completed, response_time)


def cpu_utilization(
    completed: Iterable[Task], running: Optional[Task], current_time: int
) -> float:
    """Percentage of elapsed simulated time the CPU spent executing tasks."""
    if current_time <= 0:
        return 0.0
    busy = sum(t.execution_time for t in completed)
    if running is not None:
        busy += running.elapsed
    return busy / current_time * 100


def task_metrics(task: Task) -> dict:
    """One row of the per-task statistics table."""
    return {
        "task_id": task.id,
        "name": task.name,
        "status": task.status.value,
        "waiting_time": waiting_time(task),
        "turnaround_time": turnaround_time(task),
        "response_time": response_time(task),
    }


@dataclass(frozen=True)
class SimulationStats:
    current_time: int
    total_tasks: int
    waiting: int
    running: int
    completed: int
    avg_waiting_time: float
    avg_turnaround_time: float
    avg_response_time: float
    cpu_utilization: float
    throughput: float          # completed tasks per simulated time unit


def compute_stats(snapshot: EngineSnapshot) -> SimulationStats:
    """Aggregate statistics for everything the snapshot knows about."""
    completed = snapshot.completed_tasks
    now = snapshot.current_time

    return SimulationStats(
        current_time=now,
        total_tasks=len(snapshot.tasks),
        waiting=len(snapshot.by_status(TaskStatus.WAITING)),
        running=len(snapshot.by_status(TaskStatus.RUNNING)),
        completed=len(completed),
        avg_waiting_time=average_waiting_time(completed),
        avg_turnaround_time=average_turnaround_time(completed),
        avg_response_time=average_response_time(completed),
        cpu_utilization=cpu_utilization(completed, snapshot.current_task, now),
        throughput=len(completed) / now if now > 0 else 0.0,
    )
