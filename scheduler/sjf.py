"""
Shortest Job First (SJF) scheduler.

Tasks with the smallest execution_time get dispatched first.
This minimizes average waiting time across a batch of tasks — it's provably
optimal for that metric when every task is known up front.

Data structure: MinHeap (scheduler/heap.py) keyed on execution_time
- enqueue: insert  → O(log n)
- dequeue: extract → O(log n)

Ties: with the default TieBreak.HEAP, two tasks of equal length come out in
whatever order the sift operations leave them; this is NOT insertion order.
Configure TieBreak.ARRIVAL to break ties by task id instead.

Non-preemptive: once dispatched, a long task keeps the CPU even if a shorter
one arrives in the meantime.

Downside: starvation — a task with execution_time=20 might never run if
short tasks keep arriving.
"""

from typing import Optional

from models.enums import TieBreak
from models.task import Task
from scheduler.base import AbstractScheduler
from scheduler.heap import MinHeap
from scheduler.ordering import by_execution_time


class SJFScheduler(AbstractScheduler):

    def __init__(self, tie_break: TieBreak = TieBreak.HEAP):
        self.tie_break = tie_break
        self._heap: MinHeap[Task] = MinHeap(by_execution_time(tie_break))

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
        return "sjf"
