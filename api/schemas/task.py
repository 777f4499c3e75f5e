"""
Pydantic schemas for the /tasks endpoints.

These are NOT the domain model — they define the HTTP API contract:
- TaskCreate: what the user sends when submitting a task (request body)
- TaskResponse: what we send back for a single task (response body)
- TaskListResponse: list of tasks with a total count

FastAPI validates the basic shape automatically (types, >= 1). The configured
upper bounds (MAX_EXECUTION_TIME, MAX_PRIORITY) are enforced by the engine,
whose InvalidTaskParameters the router turns into a 422 as well.
"""

from pydantic import BaseModel, Field

from models.enums import TaskStatus
from models.task import Task
from scheduler.metrics import response_time, turnaround_time, waiting_time


class TaskCreate(BaseModel):
    """Request body for POST /tasks/ — what the user provides to submit a task."""

    name: str = Field(
        ...,  # ... means required, no default
        min_length=1,
        max_length=255,
        examples=["Compile kernel"],
    )
    execution_time: int = Field(
        default=5,
        ge=1,
        description="Simulated time units of CPU the task needs (used by SJF)",
    )
    priority: int = Field(
        default=1,
        ge=1,
        description="Higher = more urgent (used by the Priority scheduler)",
    )


class TaskResponse(BaseModel):
    """Response body for a single task — returned by GET /tasks/{id} and POST /tasks/."""

    id: int
    name: str
    execution_time: int
    priority: int
    arrival_time: int
    start_time: int           # -1 until first dispatch
    end_time: int             # -1 until completion
    remaining_time: int
    status: TaskStatus
    waiting_time: int
    turnaround_time: int
    response_time: int

    @classmethod
    def from_task(cls, task: Task) -> "TaskResponse":
        return cls(
            id=task.id,
            name=task.name,
            execution_time=task.execution_time,
            priority=task.priority,
            arrival_time=task.arrival_time,
            start_time=task.start_time,
            end_time=task.end_time,
            remaining_time=task.remaining_time,
            status=task.status,
            waiting_time=waiting_time(task),
            turnaround_time=turnaround_time(task),
            response_time=response_time(task),
        )


class TaskListResponse(BaseModel):
    """List of tasks — returned by GET /tasks/."""

    tasks: list[TaskResponse]
    total: int
