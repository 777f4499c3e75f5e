"""
Task registry — the single source of truth for every submitted task.

Tasks live here in submission order (a dict preserves insertion order), keyed
by their integer id. Schedulers only ever hold references to these objects,
so the registry never has to push updates anywhere.

Removal is the one operation that can invalidate a container: a heap cannot
drop an arbitrary element without a linear scan, so the engine rebuilds its
active container from waiting() after every removal.
"""

import itertools
from typing import Iterator, Optional

from models.enums import TaskStatus
from models.task import Task
from scheduler.errors import TaskNotFound, TaskNotRemovable


class TaskRegistry:

    def __init__(self):
        self._tasks: dict[int, Task] = {}
        self._ids = itertools.count(1)

    def add(self, name: str, execution_time: int, priority: int, arrival_time: int) -> Task:
        task = Task(
            id=next(self._ids),
            name=name,
            execution_time=execution_time,
            priority=priority,
            arrival_time=arrival_time,
        )
        self._tasks[task.id] = task
        return task

    def get(self, task_id: int) -> Task:
        task = self._tasks.get(task_id)
        if task is None:
            raise TaskNotFound(f"Task {task_id} not found")
        return task

    def remove(self, task_id: int) -> Task:
        """Drop a waiting task. Running or completed tasks are part of history and stay."""
        task = self.get(task_id)
        if task.status != TaskStatus.WAITING:
            raise TaskNotRemovable(
                f"Cannot remove task {task_id} in {task.status.value} state. "
                f"Only waiting tasks can be removed."
            )
        del self._tasks[task_id]
        return task

    def all(self) -> list[Task]:
        return list(self._tasks.values())

    def waiting(self) -> list[Task]:
        """The ready set, in submission (= arrival) order."""
        return [t for t in self._tasks.values() if t.status == TaskStatus.WAITING]

    def running(self) -> Optional[Task]:
        return next(
            (t for t in self._tasks.values() if t.status == TaskStatus.RUNNING), None
        )

    def reset_all(self) -> None:
        for task in self._tasks.values():
            task.reset()

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, task_id: object) -> bool:
        return task_id in self._tasks

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks.values()))
