from __future__ import annotations
from typing import Any, Generic, Iterable, Iterator, List, Optional, Protocol, TypeVar


class Comparable(Protocol):
    """Anything with a consistent ``<`` over its own kind."""

    def __lt__(self, other: Any) -> bool: ...


T = TypeVar("T", bound=Comparable)


class MinHeap(Generic[T]):
    """A binary min-heap priority queue stored in a flat list.

    The children of index ``i`` live at ``2i + 1`` and ``2i + 2``; its parent
    lives at ``(i - 1) // 2``. Reads from an empty heap return ``None``, so
    ``None`` itself is not a supported element.
    Not thread-safe: wrap every call in an external lock if shared.
    """

    __slots__ = ("_data",)

    def __init__(self, it: Optional[Iterable[T]] = None) -> None:
        self._data: List[T] = []
        if it:
            self._data = list(it)
            self._heapify()  # Bulk build in O(n) instead of repeated inserts

    # -----------------------------
    # Internal helpers
    # -----------------------------
    def _sift_up(self, idx: int) -> None:
        data = self._data
        while idx > 0:
            parent = (idx - 1) // 2
            if not data[idx] < data[parent]:
                break
            data[parent], data[idx] = data[idx], data[parent]
            idx = parent

    def _sift_down(self, idx: int) -> None:
        data = self._data
        n = len(data)
        while 2 * idx + 1 < n:
            left = 2 * idx + 1
            right = left + 1
            smaller = left
            # Left child wins ties
            if right < n and data[right] < data[left]:
                smaller = right
            if not data[smaller] < data[idx]:
                break
            data[idx], data[smaller] = data[smaller], data[idx]
            idx = smaller

    def _heapify(self) -> None:
        """Transform the current list into a heap in-place in O(n) time."""
        for i in reversed(range(len(self._data) // 2)):
            self._sift_down(i)

    # -----------------------------
    # Public API
    # -----------------------------
    def insert(self, value: T) -> None:
        """Add *value* to the heap (O(log n))."""
        self._data.append(value)
        self._sift_up(len(self._data) - 1)

    def extract_min(self) -> Optional[T]:
        """Remove and return the smallest value, or None if empty (O(log n))."""
        data = self._data
        if not data:
            return None
        if len(data) == 1:
            return data.pop()
        top = data[0]
        data[0] = data.pop()
        self._sift_down(0)
        return top

    def peek_min(self) -> Optional[T]:
        """Return the smallest value without removing it (O(1))."""
        return self._data[0] if self._data else None

    def is_empty(self) -> bool:
        return not self._data

    def size(self) -> int:
        return len(self._data)

    # Queue-style names
    offer = insert
    poll = extract_min
    peek = peek_min

    def replace(self, value: T) -> Optional[T]:
        """Pop the smallest value, then add *value*, in one O(log n) pass.

        On an empty heap *value* is simply inserted and None is returned.
        """
        if not self._data:
            self._data.append(value)
            return None
        top = self._data[0]
        self._data[0] = value
        self._sift_down(0)
        return top

    def pushpop(self, value: T) -> T:
        """Add *value* then pop the smallest value in a single O(log n) pass."""
        if self._data and self._data[0] < value:
            value, self._data[0] = self._data[0], value
            self._sift_down(0)
        return value

    def drain(self) -> Iterator[T]:
        """Yield values in non-decreasing order, emptying the heap."""
        while self._data:
            yield self.extract_min()  # type: ignore[misc]

    def clear(self) -> None:
        self._data.clear()

    def is_valid(self) -> bool:
        """Check the heap property over the whole backing store (O(n))."""
        data = self._data
        return all(not data[i] < data[(i - 1) // 2] for i in range(1, len(data)))

    def snapshot(self) -> List[T]:
        """Copy of the backing store in array order (not sorted order)."""
        return list(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return bool(self._data)

    def __contains__(self, value: object) -> bool:
        return value in self._data

    def __iter__(self) -> Iterator[T]:
        # Iterate over the internal array (heap order, not sorted order)
        return iter(self._data)

    def __repr__(self) -> str:
        return f"MinHeap({self._data!r})"

    def __str__(self) -> str:
        return str(self._data)
