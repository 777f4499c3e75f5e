"""
Tests for FCFS (First Come First Served) scheduler.

FCFS is a FIFO queue — tasks come out in the same order they went in.
These tests verify that guarantee and edge cases.
"""

from models.task import Task
from scheduler.fcfs import FCFSScheduler


def _make_task(task_id: int, **kwargs) -> Task:
    """Helper to create a Task with sensible defaults."""
    return Task(
        id=task_id,
        name=kwargs.get("name", f"task-{task_id}"),
        execution_time=kwargs.get("execution_time", 1),
        priority=kwargs.get("priority", 5),
        arrival_time=kwargs.get("arrival_time", 0),
    )


def test_dequeue_order_matches_enqueue_order():
    """Core FCFS guarantee: first in, first out."""
    scheduler = FCFSScheduler()
    scheduler.enqueue(_make_task(1, name="A"))
    scheduler.enqueue(_make_task(2, name="B"))
    scheduler.enqueue(_make_task(3, name="C"))

    assert scheduler.dequeue().name == "A"
    assert scheduler.dequeue().name == "B"
    assert scheduler.dequeue().name == "C"


def test_dequeue_from_empty_returns_none():
    scheduler = FCFSScheduler()
    assert scheduler.dequeue() is None


def test_peek_returns_next_without_removing():
    scheduler = FCFSScheduler()
    scheduler.enqueue(_make_task(1))
    scheduler.enqueue(_make_task(2))

    assert scheduler.peek().id == 1
    assert scheduler.peek().id == 1  # still 1, not consumed
    assert scheduler.size() == 2


def test_size_tracks_enqueue_and_dequeue():
    scheduler = FCFSScheduler()
    assert scheduler.size() == 0
    assert scheduler.is_empty()

    scheduler.enqueue(_make_task(1))
    assert scheduler.size() == 1

    scheduler.enqueue(_make_task(2))
    assert scheduler.size() == 2

    scheduler.dequeue()
    assert scheduler.size() == 1


def test_items_in_arrival_order():
    scheduler = FCFSScheduler()
    scheduler.extend([_make_task(3), _make_task(1), _make_task(2)])

    assert [t.id for t in scheduler.items()] == [3, 1, 2]


def test_policy_name():
    assert FCFSScheduler().policy_name == "fcfs"


def test_ignores_priority_and_duration():
    """FCFS doesn't care about priority or duration — only arrival order."""
    scheduler = FCFSScheduler()
    scheduler.enqueue(_make_task(1, priority=1, execution_time=20))
    scheduler.enqueue(_make_task(2, priority=10))
    scheduler.enqueue(_make_task(3, execution_time=1))

    assert scheduler.dequeue().id == 1
    assert scheduler.dequeue().id == 2
    assert scheduler.dequeue().id == 3
