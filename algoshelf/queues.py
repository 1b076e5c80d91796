"""A first-in, first-out queue."""

from collections import deque
from collections.abc import Iterable, Iterator
from typing import Any


class Queue:
    """An unbounded FIFO queue."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items: deque[Any] = deque(values)

    def enqueue(self, value: Any) -> None:
        """Add a value at the rear."""
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the front value; raises IndexError when empty."""
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        return self._items.popleft()

    def __iter__(self) -> Iterator[Any]:
        """Iterate from front to rear."""
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Queue({list(self._items)!r})"