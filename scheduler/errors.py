"""
Exceptions raised by the scheduling core.

Every failure is raised synchronously, before any state is touched, so callers
never have to roll anything back. The API layer translates them into HTTP
status codes (see api/routers/).

An empty container is NOT an error: dequeue()/peek() return None and the
engine treats that as "CPU stays idle this tick".
"""


class SchedulerError(Exception):
    """Base class for every error the scheduling core raises."""


class InvalidTaskParameters(SchedulerError, ValueError):
    """execution_time, priority or name outside the accepted domain."""


class TaskNotFound(SchedulerError, KeyError):
    """No task with the given id is registered."""

    def __str__(self) -> str:
        # KeyError quotes its argument, which reads badly in API error details
        return str(self.args[0]) if self.args else ""


class TaskNotRemovable(SchedulerError):
    """Removal requested for a task that is no longer waiting."""


class PolicyChangeDuringTick(SchedulerError):
    """Policy switch requested while the engine is actively stepping."""
