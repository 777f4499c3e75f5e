"""
Task model — the unit of schedulable work.

Key design decisions:
- Integer ids handed out in creation order: they double as the stable
  tie-break key when TieBreak.ARRIVAL is configured
- Timing fields are whole simulated time units, never wall-clock timestamps
- start_time / end_time use UNSET (-1) until the engine assigns them, and each
  is assigned exactly once per run
- Containers hold references to the very same Task objects the registry owns,
  so a mutation made by the engine is visible everywhere immediately
"""

from dataclasses import dataclass, field, replace

from models.enums import TaskStatus

UNSET = -1


@dataclass
class Task:
    id: int
    name: str

    # ── Fixed at creation ───────────────────────────────────────
    execution_time: int        # total CPU time required (>= 1)
    priority: int              # higher number = more urgent
    arrival_time: int          # simulated clock value at submission

    # ── Runtime fields (mutated only by the engine) ─────────────
    start_time: int = UNSET
    end_time: int = UNSET
    remaining_time: int = field(default=-1)
    status: TaskStatus = TaskStatus.WAITING

    def __post_init__(self) -> None:
        if self.remaining_time < 0:
            self.remaining_time = self.execution_time

    @property
    def elapsed(self) -> int:
        """CPU time consumed so far."""
        return self.execution_time - self.remaining_time

    def reset(self) -> None:
        """Restore the runtime fields to their just-submitted values."""
        self.start_time = UNSET
        self.end_time = UNSET
        self.remaining_time = self.execution_time
        self.status = TaskStatus.WAITING

    def copy(self) -> "Task":
        """Detached copy for read-only consumers (snapshots, API responses)."""
        return replace(self)

    def __repr__(self) -> str:
        return f"<Task {self.id} {self.name!r} [{self.status.value}] rem={self.remaining_time}>"
