"""
Binary heap over a dense Python list, ordered by a caller-supplied comparison.

Why not heapq like the rest of the codebase used to?
heapq only knows how to compare the stored items themselves, so every entry
has to be wrapped in a (key, counter, item) tuple. Here the ordering is a
plain function, which lets the same class serve as the SJF min-heap and the
Priority max-heap (the max-heap just inverts the function), and lets the
tie-break rule be swapped by configuration.

Layout: index i has parent (i - 1) // 2 and children 2i + 1, 2i + 2.

    compare(a, b) < 0   → a should come out before b
    compare(a, b) == 0  → equal keys; which one comes out first depends on
                          the swap pattern, NOT on insertion order
    compare(a, b) > 0   → b should come out before a

Complexity:
- insert:  O(log n)  append + sift up
- extract: O(log n)  move last to root + sift down
- peek / size / is_empty: O(1)
"""

from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")

Compare = Callable[[T, T], int]


class BinaryHeap(Generic[T]):

    def __init__(self, compare: Compare):
        self._heap: list[T] = []
        self._compare = compare

    # ── Public API ──────────────────────────────────────────────

    def insert(self, item: T) -> None:
        self._heap.append(item)
        self._sift_up(len(self._heap) - 1)

    def extract(self) -> Optional[T]:
        """Remove and return the top element, or None if the heap is empty."""
        if not self._heap:
            return None

        top = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sift_down(0)
        return top

    def peek(self) -> Optional[T]:
        return self._heap[0] if self._heap else None

    def size(self) -> int:
        return len(self._heap)

    def is_empty(self) -> bool:
        return not self._heap

    def items(self) -> list[T]:
        """Copy of the backing array in heap layout (index 0 = root)."""
        return list(self._heap)

    def is_valid(self) -> bool:
        """True if no child is preferred over its parent anywhere in the heap."""
        for i in range(len(self._heap) // 2):
            for child in (2 * i + 1, 2 * i + 2):
                if child < len(self._heap) and self._compare(self._heap[i], self._heap[child]) > 0:
                    return False
        return True

    def __len__(self) -> int:
        return len(self._heap)

    # ── Internals ───────────────────────────────────────────────

    def _swap(self, i: int, j: int) -> None:
        self._heap[i], self._heap[j] = self._heap[j], self._heap[i]

    def _sift_up(self, index: int) -> None:
        while index > 0:
            parent = (index - 1) // 2
            if self._compare(self._heap[parent], self._heap[index]) <= 0:
                break
            self._swap(parent, index)
            index = parent

    def _sift_down(self, index: int) -> None:
        size = len(self._heap)
        while True:
            best = index
            left = 2 * index + 1
            right = 2 * index + 2

            if left < size and self._compare(self._heap[best], self._heap[left]) > 0:
                best = left
            if right < size and self._compare(self._heap[best], self._heap[right]) > 0:
                best = right

            if best == index:
                return
            self._swap(index, best)
            index = best


class MinHeap(BinaryHeap[T]):
    """Smallest element (per compare) comes out first."""


class MaxHeap(BinaryHeap[T]):
    """Largest element (per compare) comes out first — same sift logic, inverted compare."""

    def __init__(self, compare: Compare):
        super().__init__(lambda a, b: -compare(a, b))
