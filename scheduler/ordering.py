"""
Comparison functions used by the heap-backed schedulers.

Each builder returns compare(a, b) in the "ascending" sense expected by
MinHeap / MaxHeap. With TieBreak.ARRIVAL, equal primary keys fall back to the
task id so the earlier-submitted task always wins. With TieBreak.HEAP there is
no secondary key and the order of equal tasks is whatever the heap swaps
produce — deliberately unstable, mirroring a bare binary heap.
"""

from models.enums import TieBreak
from scheduler.heap import Compare


def _cmp(a: int, b: int) -> int:
    return (a > b) - (a < b)


def by_execution_time(tie_break: TieBreak = TieBreak.HEAP) -> Compare:
    """Ascending execution_time — feed to a MinHeap for SJF."""
    if tie_break == TieBreak.ARRIVAL:
        return lambda a, b: _cmp(a.execution_time, b.execution_time) or _cmp(a.id, b.id)
    return lambda a, b: _cmp(a.execution_time, b.execution_time)


def by_priority(tie_break: TieBreak = TieBreak.HEAP) -> Compare:
    """
    Ascending priority — feed to a MaxHeap for Priority scheduling.

    The MaxHeap negates the whole result, so the secondary id key is reversed
    here up front: after negation the smaller id still wins.
    """
    if tie_break == TieBreak.ARRIVAL:
        return lambda a, b: _cmp(a.priority, b.priority) or _cmp(b.id, a.id)
    return lambda a, b: _cmp(a.priority, b.priority)
