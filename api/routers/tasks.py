"""
Task endpoints.

POST   /tasks/           → Submit a new task (arrives at the current simulated time)
GET    /tasks/           → List tasks, optionally filtered by status
GET    /tasks/{task_id}  → Get a single task by ID
DELETE /tasks/{task_id}  → Remove a task that is still waiting

The API layer is intentionally thin:
- Validate input (Pydantic does the basic shape automatically)
- Call the engine
- Translate engine errors into HTTP status codes

It does NOT schedule anything — that's the engine's job. Handlers are plain
`def` so the engine lock is waited on in the threadpool, not the event loop.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from api.dependencies import get_engine
from api.schemas.task import TaskCreate, TaskListResponse, TaskResponse
from models.enums import TaskStatus
from scheduler.engine import SchedulingEngine
from scheduler.errors import InvalidTaskParameters, TaskNotFound, TaskNotRemovable

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.post("/", response_model=TaskResponse, status_code=201)
def create_task(
    task_in: TaskCreate,
    engine: SchedulingEngine = Depends(get_engine),
) -> TaskResponse:
    """
    Submit a new task.

    The task starts WAITING with arrival_time = current simulated time and is
    placed straight into the active policy's ready queue.
    """
    try:
        task_id = engine.submit_task(task_in.name, task_in.execution_time, task_in.priority)
    except InvalidTaskParameters as e:
        raise HTTPException(status_code=422, detail=str(e))
    return TaskResponse.from_task(engine.get_task(task_id))


@router.get("/", response_model=TaskListResponse)
def list_tasks(
    status: Optional[TaskStatus] = Query(None, description="Filter by task status"),
    engine: SchedulingEngine = Depends(get_engine),
) -> TaskListResponse:
    """List tasks in submission order."""
    snapshot = engine.snapshot()
    tasks = snapshot.by_status(status) if status else snapshot.tasks
    return TaskListResponse(
        tasks=[TaskResponse.from_task(t) for t in tasks],
        total=len(tasks),
    )


@router.get("/{task_id}", response_model=TaskResponse)
def get_task(
    task_id: int,
    engine: SchedulingEngine = Depends(get_engine),
) -> TaskResponse:
    """Get a single task by its id."""
    try:
        return TaskResponse.from_task(engine.get_task(task_id))
    except TaskNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{task_id}", status_code=204)
def remove_task(
    task_id: int,
    engine: SchedulingEngine = Depends(get_engine),
) -> None:
    """
    Remove a task.

    Only WAITING tasks can be removed — once a task has been dispatched it is
    part of the schedule's history (Gantt chart, statistics).
    """
    try:
        engine.remove_task(task_id)
    except TaskNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except TaskNotRemovable as e:
        raise HTTPException(status_code=409, detail=str(e))
