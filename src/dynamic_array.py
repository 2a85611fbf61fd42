"""Growable array with manual capacity management.

Elements live in a fixed-length backing block; unused slots hold ``None``.
The block is reallocated by hand when it fills up and can be shrunk with
``trim_to_size``. Not safe for concurrent mutation.
"""

import logging
from typing import Any, Callable, Generic, List, Optional, TypeVar

T = TypeVar('T')

DEFAULT_CAPACITY = 10

logger = logging.getLogger(__name__)


def _natural_compare(a: Any, b: Any) -> int:
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


class DynamicArray(Generic[T]):
    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise ValueError("DynamicArray.__init__: capacity must be a positive integer")
        self._data: List[Optional[T]] = [None] * capacity
        self._size = 0

    def add(self, value: T) -> None:
        if self._size >= len(self._data) - 1:
            self._grow()
        self._data[self._size] = value
        self._size += 1

    def insert(self, index: int, value: T) -> None:
        if index < 0 or index > self._size:
            raise IndexError(
                f"DynamicArray.insert: index {index} out of range for size {self._size}"
            )
        if self._size >= len(self._data) - 1:
            self._grow()
        for i in range(self._size, index, -1):
            self._data[i] = self._data[i - 1]
        self._data[index] = value
        self._size += 1

    def get(self, index: int) -> Optional[T]:
        """Return the element at ``index``.

        ``index == size()`` is accepted and yields the empty slot (``None``).
        """
        if index < 0 or index > self._size:
            raise IndexError(
                f"DynamicArray.get: index {index} out of range for size {self._size}"
            )
        if index == len(self._data):
            raise IndexError(f"DynamicArray.get: no slot at index {index} after trim")
        return self._data[index]

    def index_of(self, value: Any) -> int:
        for i in range(self._size):
            if self._data[i] is None:
                break
            if self._data[i] == value:
                return i
        return -1

    def contains(self, value: Any) -> bool:
        return self.index_of(value) >= 0

    def remove(self, value: Any) -> bool:
        pos = self.index_of(value)
        if pos < 0:
            return False
        self._remove_at(pos)
        return True

    def remove_all(self, other) -> bool:
        """Remove every element that is also contained in ``other``.

        ``other`` may be another DynamicArray or any container supporting
        ``in``. Returns True if at least one element was removed.
        """
        removed = 0
        i = 0
        while i < self._size:
            if self._data[i] in other:
                self._remove_at(i)
                removed += 1
            else:
                i += 1
        return removed > 0

    def size(self) -> int:
        return self._size

    def capacity(self) -> int:
        return len(self._data)

    def empty(self) -> bool:
        return self._size == 0

    def trim_to_size(self) -> None:
        if self._size < len(self._data):
            logger.debug("trimming capacity %d -> %d", len(self._data), self._size)
            self._data = self._data[:self._size]

    def clear(self) -> None:
        for i in range(self._size):
            self._data[i] = None
        self._size = 0

    def sort(self, comparator: Optional[Callable[[T, T], int]] = None) -> None:
        """Sort elements in place with quicksort.

        Without a comparator elements are ordered by ``<``/``>`` and must be
        mutually comparable (``TypeError`` otherwise). A comparator takes two
        elements and returns a negative, zero or positive int. Not stable.
        """
        compare = comparator if comparator is not None else _natural_compare
        self._quick_sort(0, self._size - 1, compare)

    def _quick_sort(self, first: int, last: int, compare: Callable[[Any, Any], int]) -> None:
        if first >= last:
            return
        data = self._data
        pivot = data[first + (last - first) // 2]
        i, j = first, last
        while i <= j:
            while compare(data[i], pivot) < 0:
                i += 1
            while compare(data[j], pivot) > 0:
                j -= 1
            if i <= j:
                data[i], data[j] = data[j], data[i]
                i += 1
                j -= 1
        if first < j:
            self._quick_sort(first, j, compare)
        if last > i:
            self._quick_sort(i, last, compare)

    def _remove_at(self, index: int) -> None:
        for i in range(index, self._size - 1):
            self._data[i] = self._data[i + 1]
        self._size -= 1
        self._data[self._size] = None

    def _grow(self) -> None:
        old_cap = len(self._data)
        new_cap = old_cap + self._size // 2
        # the incoming element needs a slot at index size
        if new_cap <= self._size:
            new_cap = self._size + 1
        logger.debug("growing capacity %d -> %d (size %d)", old_cap, new_cap, self._size)
        new_data: List[Optional[T]] = [None] * new_cap
        for i in range(self._size):
            new_data[i] = self._data[i]
        self._data = new_data

    def __getitem__(self, index: int) -> Optional[T]:
        return self.get(index)

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __str__(self) -> str:
        return "[" + ", ".join(str(self._data[i]) for i in range(self._size)) + "]"

    def __repr__(self) -> str:
        return "DynamicArray([" + ", ".join(repr(self._data[i]) for i in range(self._size)) + "])"
