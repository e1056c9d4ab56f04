"""A binary max-heap kept in a flat list."""

from __future__ import annotations

from typing import Iterable, Iterator


class MaxHeap:
    """A max-heap of comparable values; the largest value is always at the root."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: list[int] = []
        for value in values:
            self.push(value)

    def push(self, value: int) -> None:
        """Add a value and restore the heap order by sifting it up."""
        items = self._items
        items.append(value)
        child = len(items) - 1
        while child > 0:
            parent = (child - 1) // 2
            if items[child] <= items[parent]:
                break
            items[child], items[parent] = items[parent], items[child]
            child = parent

    def pop(self) -> int:
        """Remove and return the largest value."""
        items = self._items
        if not items:
            raise IndexError("pop from an empty heap")
        items[0], items[-1] = items[-1], items[0]
        top = items.pop()
        self._sift_down()
        return top

    def _sift_down(self) -> None:
        items = self._items
        size = len(items)
        parent = 0
        while True:
            largest = parent
            for child in (2 * parent + 1, 2 * parent + 2):
                if child < size and items[child] > items[largest]:
                    largest = child
            if largest == parent:
                return
            items[parent], items[largest] = items[largest], items[parent]
            parent = largest

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        """Yield the values in their stored (heap array) order."""
        return iter(list(self._items))