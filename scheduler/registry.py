"""
Scheduler factory — maps policy names to scheduler classes.

This is the Factory pattern: instead of writing if/elif chains everywhere,
you have ONE place that knows how to create schedulers.

Adding a new scheduling policy: create the class, add one line to this registry.
"""

from models.enums import SchedulingPolicy, TieBreak
from scheduler.base import AbstractScheduler
from scheduler.fcfs import FCFSScheduler
from scheduler.sjf import SJFScheduler
from scheduler.priority import PriorityScheduler


_REGISTRY: dict[SchedulingPolicy, type[AbstractScheduler]] = {
    SchedulingPolicy.SJF: SJFScheduler,
    SchedulingPolicy.PRIORITY: PriorityScheduler,
    SchedulingPolicy.FCFS: FCFSScheduler,
}


def create_scheduler(
    policy: SchedulingPolicy, tie_break: TieBreak = TieBreak.HEAP
) -> AbstractScheduler:
    """
    Create an empty scheduler instance for the given policy.

    tie_break only matters for the heap-backed policies; FCFS is always
    strictly ordered by arrival.
    """
    try:
        policy = SchedulingPolicy(policy)
    except ValueError:
        raise ValueError(f"Unknown scheduling policy: {policy}") from None

    cls = _REGISTRY.get(policy)
    if cls is None:
        raise ValueError(f"Unknown scheduling policy: {policy}")

    if policy == SchedulingPolicy.FCFS:
        return cls()
    return cls(tie_break=TieBreak(tie_break))


def available_policies() -> list[str]:
    return [policy.value for policy in _REGISTRY]
