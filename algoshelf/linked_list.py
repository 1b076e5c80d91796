"""A singly linked list of values, with the list operations of a classic menu program."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """One cell of a singly linked list."""

    value: Any
    next: Node | None = None


class LinkedList:
    """A singly linked list; positions are counted from 1."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def _nodes(self) -> Iterator[Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, position: int) -> Node:
        for index, node in enumerate(self._nodes(), start=1):
            if index == position:
                return node
        raise IndexError(f"position {position} is outside 1..{self._size}")

    def push_front(self, value: Any) -> None:
        """Add a value at the beginning of the list."""
        self._head = Node(value, self._head)
        self._size += 1

    def append(self, value: Any) -> None:
        """Add a value at the end of the list."""
        new = Node(value)
        if self._head is None:
            self._head = new
        else:
            last = self._head
            while last.next is not None:
                last = last.next
            last.next = new
        self._size += 1

    def insert_after(self, position: int, value: Any) -> None:
        """Insert a value after the node at ``position``.

        In an empty list the value becomes the only node whatever the position.
        Otherwise raises IndexError unless 1 <= position <= len(self).
        """
        if self._head is None:
            self._head = Node(value)
            self._size = 1
            return
        if not 1 <= position <= self._size:
            raise IndexError(f"position {position} is outside 1..{self._size}")
        node = self._node_at(position)
        node.next = Node(value, node.next)
        self._size += 1

    def pop_front(self) -> Any:
        """Remove and return the first value; raises IndexError when empty."""
        if self._head is None:
            raise IndexError("pop from an empty list")
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.value

    def pop_back(self) -> Any:
        """Remove and return the last value; raises IndexError when empty."""
        if self._head is None:
            raise IndexError("pop from an empty list")
        if self._head.next is None:
            value = self._head.value
            self._head = None
            self._size = 0
            return value
        previous = self._head
        while previous.next is not None and previous.next.next is not None:
            previous = previous.next
        last = previous.next
        previous.next = None
        self._size -= 1
        return last.value

    def remove_after(self, position: int) -> Any:
        """Remove and return the value following the node at ``position``.

        Raises IndexError unless 1 <= position < len(self).
        """
        if not 1 <= position < self._size:
            raise IndexError(f"no node follows position {position}")
        node = self._node_at(position)
        removed = node.next
        node.next = removed.next
        self._size -= 1
        return removed.value

    def position(self, value: Any) -> int | None:
        """Return the 1-based position of the first occurrence of ``value``, or None."""
        for index, node_value in enumerate(self, start=1):
            if node_value == value:
                return index
        return None

    def sort(self) -> None:
        """Sort the values in ascending order by exchanging them between nodes."""
        for node in self._nodes():
            later = node.next
            while later is not None:
                if node.value > later.value:
                    node.value, later.value = later.value, node.value
                later = later.next

    def middle(self) -> Any:
        """Return the middle value; of two middles, the second.

        Raises IndexError when the list is empty.
        """
        if self._head is None:
            raise IndexError("middle of an empty list")
        slow = fast = self._head
        while fast is not None and fast.next is not None:
            fast = fast.next.next
            slow = slow.next
        return slow.value

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"


def interleave(first: LinkedList, second: LinkedList) -> LinkedList:
    """Splice the nodes of ``second`` alternately between those of ``first``.

    Nodes left over in the longer list stay at the end. ``first`` receives
    every node and is returned; ``second`` is left empty.
    """
    if first._head is None:
        first._head = second._head
    else:
        a, b = first._head, second._head
        while a is not None and b is not None:
            a_next = a.next
            a.next = b
            if a_next is None:
                break
            b_next = b.next
            b.next = a_next
            a, b = a_next, b_next
    first._size += second._size
    second._head = None
    second._size = 0
    return first