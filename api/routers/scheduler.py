"""
Scheduler control endpoints.

GET  /scheduler/status          → Current policy, clock, running task, queue depth
PUT  /scheduler/policy          → Switch scheduling policy (only while paused)
POST /scheduler/step            → Advance the clock by one (or ?ticks=N) units
POST /scheduler/run-until-idle  → Fast-forward until every task is completed
POST /scheduler/start           → Start real-time replay (one tick per TICK_INTERVAL)
POST /scheduler/pause           → Stop real-time replay
POST /scheduler/reset           → Back to t=0, every task waiting again
GET  /scheduler/snapshot        → Full read-only state for display layers
GET  /scheduler/stats           → Average waiting/turnaround/response time, CPU utilization
GET  /scheduler/ready-queue     → Waiting tasks as a given policy's container stores them

Handlers are plain `def`: engine calls take a threading lock shared with the
ticker thread and a fast-forward can run thousands of ticks, so FastAPI runs
them in its threadpool instead of on the event loop.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from api.dependencies import get_engine, get_ticker
from api.schemas.scheduler import (
    SchedulerConfig,
    SchedulerStatus,
    SnapshotResponse,
    StatsResponse,
)
from api.schemas.task import TaskResponse
from driver.ticker import SimulationTicker
from models.enums import SchedulingPolicy
from scheduler.engine import SchedulingEngine
from scheduler.errors import PolicyChangeDuringTick
from scheduler.metrics import compute_stats

router = APIRouter(prefix="/scheduler", tags=["scheduler"])


def _status(engine: SchedulingEngine, ticker: SimulationTicker) -> SchedulerStatus:
    return SchedulerStatus.from_snapshot(engine.snapshot(), running=ticker.is_running)


@router.get("/status", response_model=SchedulerStatus)
def get_scheduler_status(
    engine: SchedulingEngine = Depends(get_engine),
    ticker: SimulationTicker = Depends(get_ticker),
) -> SchedulerStatus:
    """Get current scheduler state."""
    return _status(engine, ticker)


@router.put("/policy", response_model=SchedulerStatus)
def set_scheduling_policy(
    config: SchedulerConfig,
    engine: SchedulingEngine = Depends(get_engine),
    ticker: SimulationTicker = Depends(get_ticker),
) -> SchedulerStatus:
    """
    Switch the active scheduling policy.

    The waiting tasks are re-ordered under the new policy straight away. The
    switch is refused with 409 while real-time replay is running: pause first.
    """
    try:
        engine.set_policy(config.policy)
    except PolicyChangeDuringTick as e:
        raise HTTPException(status_code=409, detail=str(e))
    return _status(engine, ticker)


@router.post("/step", response_model=SchedulerStatus)
def step_simulation(
    ticks: int = Query(1, ge=1, le=10_000, description="Number of time units to advance"),
    engine: SchedulingEngine = Depends(get_engine),
    ticker: SimulationTicker = Depends(get_ticker),
) -> SchedulerStatus:
    """Advance the simulation manually, one tick at a time by default."""
    engine.advance(ticks)
    return _status(engine, ticker)


@router.post("/run-until-idle", response_model=SchedulerStatus)
def run_until_idle(
    engine: SchedulingEngine = Depends(get_engine),
    ticker: SimulationTicker = Depends(get_ticker),
) -> SchedulerStatus:
    """Fast-forward until nothing is running or waiting."""
    engine.run_until_idle()
    return _status(engine, ticker)


@router.post("/start", response_model=SchedulerStatus)
def start_simulation(
    engine: SchedulingEngine = Depends(get_engine),
    ticker: SimulationTicker = Depends(get_ticker),
) -> SchedulerStatus:
    """Start real-time replay. Calling it while already running is a no-op."""
    ticker.start()
    return _status(engine, ticker)


@router.post("/pause", response_model=SchedulerStatus)
def pause_simulation(
    engine: SchedulingEngine = Depends(get_engine),
    ticker: SimulationTicker = Depends(get_ticker),
) -> SchedulerStatus:
    """Stop real-time replay after the current tick."""
    ticker.stop()
    return _status(engine, ticker)


@router.post("/reset", response_model=SchedulerStatus)
def reset_simulation(
    engine: SchedulingEngine = Depends(get_engine),
    ticker: SimulationTicker = Depends(get_ticker),
) -> SchedulerStatus:
    """Pause replay, rewind the clock to 0 and put every task back to waiting."""
    ticker.stop()
    engine.reset()
    return _status(engine, ticker)


@router.get("/snapshot", response_model=SnapshotResponse)
def get_snapshot(
    engine: SchedulingEngine = Depends(get_engine),
) -> SnapshotResponse:
    """Everything a Gantt chart or heap visualiser needs, in one consistent read."""
    return SnapshotResponse.from_snapshot(engine.snapshot())


@router.get("/stats", response_model=StatsResponse)
def get_stats(
    engine: SchedulingEngine = Depends(get_engine),
) -> StatsResponse:
    """Aggregate metrics over the completed tasks."""
    return StatsResponse.from_stats(compute_stats(engine.snapshot()))


@router.get("/ready-queue", response_model=list[TaskResponse])
def get_ready_queue(
    policy: Optional[SchedulingPolicy] = Query(
        None, description="Container to show (defaults to the active policy)"
    ),
    engine: SchedulingEngine = Depends(get_engine),
) -> list[TaskResponse]:
    """
    Waiting tasks in container storage order.

    For sjf/priority this is the heap array (index 0 = root, children of i at
    2i+1 and 2i+2), which is what a tree visualiser draws. For fcfs it is
    arrival order.
    """
    return [TaskResponse.from_task(t) for t in engine.ready_queue(policy)]
