"""
First Come First Served (FCFS) scheduler.

The simplest scheduling policy: tasks run in the order they arrive.
Internally, this is just a FIFO queue (first in, first out).

Data structure: collections.deque
- enqueue: append to right  → O(1)
- dequeue: pop from left    → O(1)

When to use: when fairness matters more than efficiency.
Every task gets served in arrival order — no task gets starved.

Downside: a long-running task blocks everything behind it
(the "convoy effect").
"""

from collections import deque
from typing import Optional

from models.task import Task
from scheduler.base import AbstractScheduler


class FCFSScheduler(AbstractScheduler):

    def __init__(self):
        self._queue: deque[Task] = deque()

    def enqueue(self, task: Task) -> None:
        self._queue.append(task)

    def dequeue(self) -> Optional[Task]:
        return self._queue.popleft() if self._queue else None

    def peek(self) -> Optional[Task]:
        return self._queue[0] if self._queue else None

    def size(self) -> int:
        return len(self._queue)

    def items(self) -> list[Task]:
        return list(self._queue)

    @property
    def policy_name(self) -> str:
        return "fcfs"
