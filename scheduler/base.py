"""
Abstract base class for all scheduling policies (Strategy pattern).

The Strategy pattern lets you swap algorithms at runtime without changing
the code that uses them. The SchedulingEngine only knows about AbstractScheduler —
it calls enqueue() and dequeue() without caring whether it's FCFS, SJF, etc.

To add a new scheduling policy:
1. Create a new class that inherits AbstractScheduler
2. Implement the abstract methods
3. Register it in scheduler/registry.py

Schedulers store references to the registry's Task objects, never copies.
They are pure ready-set containers: they don't change task state, the engine does.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from models.task import Task


class AbstractScheduler(ABC):
    """
    Interface that all scheduling policies implement.

    - enqueue: add a waiting task
    - dequeue: remove and return the next task (according to this policy's rules)
    - peek: look at the next task without removing it
    - size: how many tasks are queued
    - items: the queued tasks in storage order, for visualisation
    """

    @abstractmethod
    def enqueue(self, task: Task) -> None:
        """Add a task to this scheduler's internal queue."""
        ...

    @abstractmethod
    def dequeue(self) -> Optional[Task]:
        """Remove and return the next task to dispatch, or None if empty."""
        ...

    @abstractmethod
    def peek(self) -> Optional[Task]:
        """View the next task without removing it. Returns None if empty."""
        ...

    @abstractmethod
    def size(self) -> int:
        """Return the number of tasks currently in the queue."""
        ...

    @abstractmethod
    def items(self) -> list[Task]:
        """Queued tasks in storage order (heap layout or FIFO order)."""
        ...

    @property
    @abstractmethod
    def policy_name(self) -> str:
        """Unique name for this policy (e.g., 'fcfs', 'sjf')."""
        ...

    def is_empty(self) -> bool:
        return self.size() == 0

    def extend(self, tasks: Iterable[Task]) -> None:
        """Enqueue several tasks in the given order (used for rebuilds)."""
        for task in tasks:
            self.enqueue(task)
