"""
Scheduling Engine — the core simulation loop.

The engine owns the simulated clock, the task registry and the container of
the active policy. It advances time in whole units, one step() per tick:

    1. clock += 1
    2. Running task? → remaining_time -= 1, at 0 it is COMPLETED (end_time = clock)
    3. CPU idle (possibly just freed by step 2)? → dequeue the next task from
       the active policy's container, mark it RUNNING, record start_time once

A task only enters the container once the clock has reached its arrival_time.
That only matters after reset(): the clock rewinds to 0 but tasks keep the
arrival_time they were submitted with, so late arrivals are held back until
their arrival tick comes round again.

         submit_task()            active container            running slot
    ┌──────────────────┐       ┌──────────────────┐      ┌──────────────────┐
    │ TaskRegistry     │──────>│ SJF / Priority / │─────>│ current task     │──> completed
    │ (source of truth)│enqueue│ FCFS             │ step │                  │
    └──────────────────┘       └──────────────────┘      └──────────────────┘

Only the ACTIVE container exists. The other policies' containers are built
on demand from the waiting set (ready_queue(policy=...)) whenever something
wants to read them, so they can never drift out of sync.

The engine never sleeps and owns no timer: the pacing belongs to whoever calls
step() — a test, a batch fast-forward (advance / run_until_idle) or the
real-time SimulationTicker in driver/ticker.py. A single re-entrant lock
serialises ticks with submissions, removals and policy switches coming in from
other threads (API handlers vs the ticker thread).
"""

import logging
import threading
from typing import Optional, Union

from config.settings import settings
from models.enums import SchedulingPolicy, TaskStatus, TieBreak
from models.snapshot import EngineSnapshot, TickResult
from models.task import UNSET, Task
from scheduler.base import AbstractScheduler
from scheduler.errors import InvalidTaskParameters, PolicyChangeDuringTick, SchedulerError
from scheduler.registry import create_scheduler
from scheduler.task_registry import TaskRegistry

logger = logging.getLogger(__name__)


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class SchedulingEngine:
    """
    Single-CPU, non-preemptive scheduling simulator.

    Not a thread owner: every public method runs synchronously in the caller's
    thread and holds the engine lock for its whole duration, so a tick is
    atomic from the outside.
    """

    def __init__(
        self,
        policy: Union[SchedulingPolicy, str, None] = None,
        tie_break: Union[TieBreak, str, None] = None,
        execution_time_range: Optional[tuple[int, int]] = None,
        priority_range: Optional[tuple[int, int]] = None,
    ):
        self._policy = self._coerce_policy(policy or settings.DEFAULT_SCHEDULING_POLICY)
        self._tie_break = TieBreak(tie_break or settings.TIE_BREAK)
        self._execution_time_range = execution_time_range or (
            settings.MIN_EXECUTION_TIME, settings.MAX_EXECUTION_TIME
        )
        self._priority_range = priority_range or (settings.MIN_PRIORITY, settings.MAX_PRIORITY)

        self._registry = TaskRegistry()
        self._scheduler: AbstractScheduler = create_scheduler(self._policy, self._tie_break)
        self._current_time: int = 0
        self._current_task: Optional[Task] = None
        self._completed: list[Task] = []
        self._not_arrived: list[Task] = []     # WAITING, arrival_time > current_time

        self._lock = threading.RLock()
        self._in_tick = False
        self._auto_advancing = False

    # ── Read-only properties ────────────────────────────────────

    @property
    def current_time(self) -> int:
        return self._current_time

    @property
    def policy(self) -> SchedulingPolicy:
        return self._policy

    @property
    def tie_break(self) -> TieBreak:
        return self._tie_break

    @property
    def is_ticking(self) -> bool:
        return self._in_tick

    @property
    def auto_advancing(self) -> bool:
        return self._auto_advancing

    # ── Task submission / removal ───────────────────────────────

    def submit_task(self, name: str, execution_time: int, priority: int) -> int:
        """
        Register a new WAITING task arriving at the current simulated time.

        Validation happens before anything is touched, so a rejected task
        leaves no trace in the registry or the container.
        """
        self._validate(name, execution_time, priority)

        with self._lock:
            task = self._registry.add(
                name=name.strip(),
                execution_time=execution_time,
                priority=priority,
                arrival_time=self._current_time,
            )
            self._scheduler.enqueue(task)

        logger.info(
            f"Submitted task {task.id} '{task.name}' "
            f"(exec={execution_time}, priority={priority}) at t={task.arrival_time}"
        )
        return task.id

    def remove_task(self, task_id: int) -> None:
        """
        Remove a WAITING task.

        Raises TaskNotFound for unknown ids and TaskNotRemovable for tasks that
        are running or completed; either way nothing changes.
        """
        with self._lock:
            try:
                task = self._registry.remove(task_id)
            except SchedulerError as e:
                logger.warning(f"Rejected removal of task {task_id}: {e}")
                raise
            self._rebuild_active_container()

        logger.info(f"Removed task {task.id} '{task.name}'")

    def get_task(self, task_id: int) -> Task:
        with self._lock:
            return self._registry.get(task_id).copy()

    # ── Policy ──────────────────────────────────────────────────

    def set_policy(self, policy: Union[SchedulingPolicy, str]) -> None:
        """
        Switch the active scheduling policy between ticks.

        Rejected with PolicyChangeDuringTick while a tick is executing or the
        periodic driver is auto-advancing the clock. The new container is
        rebuilt from the current waiting set; the running task (if any) keeps
        the CPU because scheduling is non-preemptive.
        """
        new_policy = self._coerce_policy(policy)

        with self._lock:
            if self._in_tick or self._auto_advancing:
                logger.warning(f"Rejected policy change to {new_policy.value}: simulation is running")
                raise PolicyChangeDuringTick(
                    "Cannot change the scheduling policy while the simulation is running. "
                    "Pause it first."
                )
            if new_policy == self._policy:
                return
            old_policy = self._policy
            self._policy = new_policy
            self._rebuild_active_container()

        logger.info(
            f"Policy changed: {old_policy.value} → {new_policy.value} "
            f"({self._scheduler.size()} waiting tasks re-ordered)"
        )

    def set_auto_advancing(self, active: bool) -> None:
        """Called by the periodic driver when it starts/stops ticking."""
        with self._lock:
            self._auto_advancing = active

    # ── Simulation ──────────────────────────────────────────────

    def step(self) -> TickResult:
        """Advance the simulation by exactly one time unit."""
        with self._lock:
            self._in_tick = True
            try:
                return self._tick()
            finally:
                self._in_tick = False

    def advance(self, ticks: int) -> list[TickResult]:
        """Batch fast-forward: run `ticks` steps back to back."""
        if not _is_int(ticks) or ticks < 0:
            raise ValueError(f"ticks must be a non-negative integer, got {ticks!r}")
        with self._lock:
            return [self.step() for _ in range(ticks)]

    def run_until_idle(self, max_ticks: Optional[int] = None) -> int:
        """
        Step until nothing is running and nothing is waiting.

        Returns the number of ticks consumed. Stops early (with a warning)
        after max_ticks so a runaway loop can't hang the caller.
        """
        limit = settings.MAX_FAST_FORWARD_TICKS if max_ticks is None else max_ticks
        ticks = 0
        with self._lock:
            while (
                self._current_task is not None
                or not self._scheduler.is_empty()
                or self._not_arrived
            ):
                if ticks >= limit:
                    logger.warning(f"run_until_idle stopped after {limit} ticks at t={self._current_time}")
                    break
                self.step()
                ticks += 1
        return ticks

    def reset(self) -> None:
        """
        Back to t=0 with every task WAITING again.

        Task definitions (name, execution_time, priority, arrival_time) are
        kept; only the runtime fields are cleared. Tasks submitted after t=0
        become ready again when the clock reaches their arrival_time. Calling
        it twice is the same as calling it once.
        """
        with self._lock:
            self._current_time = 0
            self._current_task = None
            self._completed = []
            self._registry.reset_all()
            self._rebuild_active_container()

        logger.info(f"Simulation reset ({len(self._registry)} tasks waiting)")

    # ── Read models ─────────────────────────────────────────────

    def snapshot(self) -> EngineSnapshot:
        with self._lock:
            return EngineSnapshot(
                current_time=self._current_time,
                policy=self._policy,
                tie_break=self._tie_break,
                tasks=[t.copy() for t in self._registry.all()],
                completed_tasks=[t.copy() for t in self._completed],
                current_task=self._current_task.copy() if self._current_task else None,
                ready_queue=[t.copy() for t in self._scheduler.items()],
                auto_advancing=self._auto_advancing,
            )

    def ready_queue(self, policy: Union[SchedulingPolicy, str, None] = None) -> list[Task]:
        """
        Arrived waiting tasks as `policy`'s container stores them (heap layout
        for SJF/Priority, arrival order for FCFS). Defaults to the active policy.
        """
        with self._lock:
            if policy is None or self._coerce_policy(policy) == self._policy:
                return [t.copy() for t in self._scheduler.items()]
            container = create_scheduler(self._coerce_policy(policy), self._tie_break)
            container.extend(self._arrived_waiting())
            return [t.copy() for t in container.items()]

    # ── Internals ───────────────────────────────────────────────

    def _tick(self) -> TickResult:
        self._current_time += 1
        now = self._current_time
        completed_id = None
        dispatched_id = None

        if self._not_arrived:
            arrived = [t for t in self._not_arrived if t.arrival_time <= now]
            if arrived:
                self._not_arrived = [t for t in self._not_arrived if t.arrival_time > now]
                self._scheduler.extend(arrived)
                logger.debug(f"t={now}: {len(arrived)} task(s) arrived")

        task = self._current_task
        if task is not None:
            task.remaining_time -= 1
            if task.remaining_time <= 0:
                task.remaining_time = 0
                task.status = TaskStatus.COMPLETED
                task.end_time = now
                self._completed.append(task)
                self._current_task = None
                completed_id = task.id
                logger.info(f"t={now}: task {task.id} '{task.name}' completed")

        if self._current_task is None:
            nxt = self._scheduler.dequeue()
            if nxt is not None:
                nxt.status = TaskStatus.RUNNING
                if nxt.start_time == UNSET:
                    nxt.start_time = now
                self._current_task = nxt
                dispatched_id = nxt.id
                logger.info(f"t={now}: dispatched task {nxt.id} '{nxt.name}' ({self._policy.value})")
            else:
                logger.debug(f"t={now}: CPU idle")

        return TickResult(
            time=now,
            completed_id=completed_id,
            dispatched_id=dispatched_id,
            running_id=self._current_task.id if self._current_task else None,
        )

    def _arrived_waiting(self) -> list[Task]:
        return [t for t in self._registry.waiting() if t.arrival_time <= self._current_time]

    def _rebuild_active_container(self) -> None:
        self._not_arrived = [
            t for t in self._registry.waiting() if t.arrival_time > self._current_time
        ]
        self._scheduler = create_scheduler(self._policy, self._tie_break)
        self._scheduler.extend(self._arrived_waiting())

    def _validate(self, name, execution_time, priority) -> None:
        if not isinstance(name, str) or not name.strip():
            raise InvalidTaskParameters("Task name must be a non-empty string")

        lo, hi = self._execution_time_range
        if not _is_int(execution_time) or not lo <= execution_time <= hi:
            raise InvalidTaskParameters(
                f"execution_time must be an integer in [{lo}, {hi}], got {execution_time!r}"
            )

        lo, hi = self._priority_range
        if not _is_int(priority) or not lo <= priority <= hi:
            raise InvalidTaskParameters(
                f"priority must be an integer in [{lo}, {hi}], got {priority!r}"
            )

    @staticmethod
    def _coerce_policy(policy: Union[SchedulingPolicy, str]) -> SchedulingPolicy:
        try:
            return SchedulingPolicy(policy)
        except ValueError:
            raise ValueError(f"Unknown scheduling policy: {policy}") from None
