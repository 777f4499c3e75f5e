"""
Pydantic schemas for the /scheduler endpoints.

SchedulerConfig: request body for changing the active scheduling policy.
SchedulerStatus: response showing current scheduler state.
SnapshotResponse: everything a display layer needs to draw one frame.
StatsResponse: aggregate metrics (averages, CPU utilization).
"""

from typing import Optional

from pydantic import BaseModel

from api.schemas.task import TaskResponse
from models.enums import SchedulingPolicy, TieBreak
from models.snapshot import EngineSnapshot
from scheduler.metrics import SimulationStats


class SchedulerConfig(BaseModel):
    """Request body for PUT /scheduler/policy."""

    policy: SchedulingPolicy  # must be one of: sjf, priority, fcfs


class SchedulerStatus(BaseModel):
    """Response body for GET /scheduler/status."""

    current_policy: SchedulingPolicy
    tie_break: TieBreak
    current_time: int
    running: bool              # is the real-time ticker advancing the clock?
    current_task_id: Optional[int] = None
    ready_queue_depth: int     # how many tasks are waiting
    completed_count: int

    @classmethod
    def from_snapshot(cls, snapshot: EngineSnapshot, running: bool) -> "SchedulerStatus":
        return cls(
            current_policy=snapshot.policy,
            tie_break=snapshot.tie_break,
            current_time=snapshot.current_time,
            running=running,
            current_task_id=snapshot.current_task.id if snapshot.current_task else None,
            ready_queue_depth=len(snapshot.ready_queue),
            completed_count=len(snapshot.completed_tasks),
        )


class SnapshotResponse(BaseModel):
    """Response body for GET /scheduler/snapshot."""

    current_time: int
    policy: SchedulingPolicy
    tie_break: TieBreak
    running: bool
    tasks: list[TaskResponse]
    completed_tasks: list[TaskResponse]
    current_task: Optional[TaskResponse] = None
    ready_queue: list[TaskResponse]

    @classmethod
    def from_snapshot(cls, snapshot: EngineSnapshot) -> "SnapshotResponse":
        return cls(
            current_time=snapshot.current_time,
            policy=snapshot.policy,
            tie_break=snapshot.tie_break,
            running=snapshot.auto_advancing,
            tasks=[TaskResponse.from_task(t) for t in snapshot.tasks],
            completed_tasks=[TaskResponse.from_task(t) for t in snapshot.completed_tasks],
            current_task=(
                TaskResponse.from_task(snapshot.current_task) if snapshot.current_task else None
            ),
            ready_queue=[TaskResponse.from_task(t) for t in snapshot.ready_queue],
        )


class StatsResponse(BaseModel):
    """Response body for GET /scheduler/stats. Averages are over completed tasks."""

    current_time: int
    total_tasks: int
    waiting: int
    running: int
    completed: int
    avg_waiting_time: float
    avg_turnaround_time: float
    avg_response_time: float
    cpu_utilization: float     # percent, 0-100
    throughput: float          # completed tasks per time unit

    @classmethod
    def from_stats(cls, stats: SimulationStats) -> "StatsResponse":
        return cls(
            current_time=stats.current_time,
            total_tasks=stats.total_tasks,
            waiting=stats.waiting,
            running=stats.running,
            completed=stats.completed,
            avg_waiting_time=round(stats.avg_waiting_time, 2),
            avg_turnaround_time=round(stats.avg_turnaround_time, 2),
            avg_response_time=round(stats.avg_response_time, 2),
            cpu_utilization=round(stats.cpu_utilization, 2),
            throughput=round(stats.throughput, 4),
        )
