"""Array-backed binary max-heap and min-heap."""

import operator
from collections.abc import Callable, Iterable
from typing import Any


class _BinaryHeap:
    """Shared storage and sifting for a binary heap ranked by ``_higher``."""

    _higher: Callable[[Any, Any], bool]

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items: list[Any] = []
        for value in values:
            self._push(value)

    def _sift_up(self, index: int) -> None:
        items = self._items
        while index > 0:
            parent = (index - 1) // 2
            if not self._higher(items[index], items[parent]):
                break
            items[index], items[parent] = items[parent], items[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            best = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and self._higher(items[child], items[best]):
                    best = child
            if best == index:
                return
            items[index], items[best] = items[best], items[index]
            index = best

    def _push(self, value: Any) -> None:
        self._items.append(value)
        self._sift_up(len(self._items) - 1)

    def _pop(self) -> Any:
        if not self._items:
            raise IndexError("pop from an empty heap")
        last = self._items.pop()
        if not self._items:
            return last
        top = self._items[0]
        self._items[0] = last
        self._sift_down(0)
        return top

    def _top(self) -> Any:
        if not self._items:
            raise IndexError("top of an empty heap")
        return self._items[0]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"


class MaxHeap(_BinaryHeap):
    """A heap whose top is its largest value."""

    _higher = staticmethod(operator.gt)

    def push(self, value: Any) -> None:
        """Insert a value into the heap."""
        self._push(value)

    def pop(self) -> Any:
        """Remove and return the largest value; raises IndexError when empty."""
        return self._pop()

    def top(self) -> Any:
        """Return the largest value without removing it; raises IndexError when empty."""
        return self._top()

    def __len__(self) -> int:
        return len(self._items)


class MinHeap(_BinaryHeap):
    """A heap whose top is its smallest value."""

    _higher = staticmethod(operator.lt)

    def push(self, value: Any) -> None:
        """Insert a value into the heap."""
        self._push(value)

    def pop(self) -> Any:
        """Remove and return the smallest value; raises IndexError when empty."""
        return self._pop()

    def top(self) -> Any:
        """Return the smallest value without removing it; raises IndexError when empty."""
        return self._top()

    def __len__(self) -> int:
        return len(self._items)