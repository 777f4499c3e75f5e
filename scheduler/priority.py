"""
Priority-based scheduler.

Tasks with the HIGHEST priority number run first (10 = most urgent, 1 = least).
Static priorities: a task's priority never changes while it waits.

Data structure: MaxHeap (scheduler/heap.py) keyed on priority
- enqueue: insert  → O(log n)
- dequeue: extract → O(log n)

The MaxHeap is the MinHeap's sift logic with the comparison inverted, so
there is exactly one heap implementation to get right.

Downside: same starvation problem as SJF — low-priority tasks
might wait forever if high-priority tasks keep arriving. There is no
aging here: waiting does not raise a task's priority.
"""

from typing import Optional

from models.enums import TieBreak
from models.task import Task
from scheduler.base import AbstractScheduler
from scheduler.heap import MaxHeap
from scheduler.ordering import by_priority


class PriorityScheduler(AbstractScheduler):

    def __init__(self, tie_break: TieBreak = TieBreak.HEAP):
        self.tie_break = tie_break
        self._heap: MaxHeap[Task] = MaxHeap(by_priority(tie_break))

    def enqueue(self, task: Task) -> None:
        self._heap.insert(task)

    def dequeue(self) -> Optional[Task]:
        return self._heap.extract()

    def peek(self) -> Optional[Task]:
        return self._heap.peek()

    def size(self) -> int:
        return self._heap.size()

    def items(self) -> list[Task]:
        return self._heap.items()

    def is_valid(self) -> bool:
        return self._heap.is_valid()

    @property
    def policy_name(self) -> str:
        return "priority"
