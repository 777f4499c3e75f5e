"""
Read-only views handed out by the engine.

Everything here holds detached Task copies: a display layer, the metrics
functions or an API response can keep a snapshot around while the engine
keeps ticking, without ever seeing a half-updated task.
"""

from dataclasses import dataclass, field
from typing import Optional

from models.enums import SchedulingPolicy, TaskStatus, TieBreak
from models.task import Task


@dataclass(frozen=True)
class TickResult:
    """What happened during one call to SchedulingEngine.step()."""
    time: int
    completed_id: Optional[int] = None
    dispatched_id: Optional[int] = None
    running_id: Optional[int] = None

    @property
    def idle(self) -> bool:
        return self.running_id is None


@dataclass(frozen=True)
class EngineSnapshot:
    current_time: int
    policy: SchedulingPolicy
    tie_break: TieBreak
    tasks: list[Task] = field(default_factory=list)            # every task, submission order
    completed_tasks: list[Task] = field(default_factory=list)  # completion order
    current_task: Optional[Task] = None
    ready_queue: list[Task] = field(default_factory=list)      # active container, storage order
    auto_advancing: bool = False

    def by_status(self, status: TaskStatus) -> list[Task]:
        return [t for t in self.tasks if t.status == status]

    @property
    def waiting_tasks(self) -> list[Task]:
        return self.by_status(TaskStatus.WAITING)

    @property
    def is_idle(self) -> bool:
        """Nothing running and nothing left to dispatch."""
        return self.current_task is None and not self.waiting_tasks
