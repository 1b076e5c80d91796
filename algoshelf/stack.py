"""A bounded stack with positional update from the top."""

from collections.abc import Iterator
from typing import Any

DEFAULT_CAPACITY = 100


class ArrayStack:
    """A stack holding at most ``capacity`` values."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Put a value on top; raises OverflowError when the stack is full."""
        if len(self._items) >= self.capacity:
            raise OverflowError("stack is full")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value; raises IndexError when empty."""
        if not self._items:
            raise IndexError("stack is empty")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it; raises IndexError when empty."""
        if not self._items:
            raise IndexError("stack is empty")
        return self._items[-1]

    def update(self, position: int, value: Any) -> None:
        """Replace the value ``position`` places from the top, the top being 1.

        Raises IndexError unless 1 <= position <= len(self).
        """
        if not 1 <= position <= len(self._items):
            raise IndexError(f"position {position} is outside 1..{len(self._items)}")
        self._items[-position] = value

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack to the bottom."""
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)