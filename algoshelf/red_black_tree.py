"""A red-black tree of ordered values, duplicates allowed."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class Color(IntEnum):
    """Colour of a red-black tree node."""

    BLACK = 0
    RED = 1


@dataclass(eq=False)
class RBNode:
    """One node of a red-black tree."""

    value: Any
    color: Color = Color.RED
    parent: RBNode | None = field(default=None, repr=False)
    left: RBNode | None = field(default=None, repr=False)
    right: RBNode | None = field(default=None, repr=False)


def _is_red(node: RBNode | None) -> bool:
    return node is not None and node.color is Color.RED


class RedBlackTree:
    """A self-balancing binary search tree; equal values go to the right."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: RBNode | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def _rotate_left(self, node: RBNode) -> None:
        pivot = node.right
        assert pivot is not None
        node.right = pivot.left
        if pivot.left is not None:
            pivot.left.parent = node
        self._replace(node, pivot)
        pivot.left = node
        node.parent = pivot

    def _rotate_right(self, node: RBNode) -> None:
        pivot = node.left
        assert pivot is not None
        node.left = pivot.right
        if pivot.right is not None:
            pivot.right.parent = node
        self._replace(node, pivot)
        pivot.right = node
        node.parent = pivot

    def _replace(self, old: RBNode, new: RBNode | None) -> None:
        """Put ``new`` where ``old`` hangs from its parent."""
        parent = old.parent
        if parent is None:
            self.root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new
        if new is not None:
            new.parent = parent

    def insert(self, value: Any) -> None:
        """Add a value, rebalancing the tree."""
        node = RBNode(value)
        self._size += 1
        if self.root is None:
            node.color = Color.BLACK
            self.root = node
            return
        current = self.root
        while True:
            if value < current.value:
                if current.left is None:
                    current.left = node
                    break
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    break
                current = current.right
        node.parent = current
        self._fix_insert(node)

    def _fix_insert(self, node: RBNode) -> None:
        while _is_red(node.parent):
            parent = node.parent
            grand = parent.parent
            assert grand is not None
            if parent is grand.left:
                uncle = grand.right
                if _is_red(uncle):
                    parent.color = uncle.color = Color.BLACK
                    grand.color = Color.RED
                    node = grand
                    continue
                if node is parent.right:
                    self._rotate_left(parent)
                    node, parent = parent, node
                parent.color = Color.BLACK
                grand.color = Color.RED
                self._rotate_right(grand)
            else:
                uncle = grand.left
                if _is_red(uncle):
                    parent.color = uncle.color = Color.BLACK
                    grand.color = Color.RED
                    node = grand
                    continue
                if node is parent.left:
                    self._rotate_right(parent)
                    node, parent = parent, node
                parent.color = Color.BLACK
                grand.color = Color.RED
                self._rotate_left(grand)
        assert self.root is not None
        self.root.color = Color.BLACK

    def _find(self, value: Any) -> RBNode | None:
        node = self.root
        while node is not None:
            if value == node.value:
                return node
            node = node.right if value > node.value else node.left
        return None

    def delete(self, value: Any) -> None:
        """Remove one occurrence of ``value``; raises KeyError when it is absent.

        A node with a left subtree takes the value of its in-order predecessor,
        otherwise of its successor, and that node is then unlinked.
        """
        found = self._find(value)
        if found is None:
            raise KeyError(value)
        target = found
        if found.left is not None:
            target = found.left
            while target.right is not None:
                target = target.right
        elif found.right is not None:
            target = found.right
            while target.left is not None:
                target = target.left
        found.value = target.value

        child = target.left if target.left is not None else target.right
        parent = target.parent
        self._replace(target, child)
        self._size -= 1
        if target.color is Color.BLACK:
            if _is_red(child):
                child.color = Color.BLACK
            else:
                self._fix_delete(child, parent)

    def _fix_delete(self, node: RBNode | None, parent: RBNode | None) -> None:
        while node is not self.root and not _is_red(node):
            assert parent is not None
            if node is parent.left:
                sibling = parent.right
                assert sibling is not None
                if _is_red(sibling):
                    sibling.color = Color.BLACK
                    parent.color = Color.RED
                    self._rotate_left(parent)
                    sibling = parent.right
                    assert sibling is not None
                if not _is_red(sibling.left) and not _is_red(sibling.right):
                    sibling.color = Color.RED
                    node, parent = parent, parent.parent
                    continue
                if not _is_red(sibling.right):
                    sibling.left.color = Color.BLACK
                    sibling.color = Color.RED
                    self._rotate_right(sibling)
                    sibling = parent.right
                    assert sibling is not None
                sibling.color = parent.color
                parent.color = Color.BLACK
                sibling.right.color = Color.BLACK
                self._rotate_left(parent)
            else:
                sibling = parent.left
                assert sibling is not None
                if _is_red(sibling):
                    sibling.color = Color.BLACK
                    parent.color = Color.RED
                    self._rotate_right(parent)
                    sibling = parent.left
                    assert sibling is not None
                if not _is_red(sibling.left) and not _is_red(sibling.right):
                    sibling.color = Color.RED
                    node, parent = parent, parent.parent
                    continue
                if not _is_red(sibling.left):
                    sibling.right.color = Color.BLACK
                    sibling.color = Color.RED
                    self._rotate_left(sibling)
                    sibling = parent.left
                    assert sibling is not None
                sibling.color = parent.color
                parent.color = Color.BLACK
                sibling.left.color = Color.BLACK
                self._rotate_right(parent)
            node = self.root
            break
        if node is not None:
            node.color = Color.BLACK

    def _nodes(self) -> Iterator[RBNode]:
        pending: list[RBNode] = []
        node = self.root
        while pending or node is not None:
            while node is not None:
                pending.append(node)
                node = node.left
            node = pending.pop()
            yield node
            node = node.right

    def inorder(self) -> list[tuple[Any, Color]]:
        """Return ``(value, color)`` pairs in ascending order of value."""
        return [(node.value, node.color) for node in self._nodes()]

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __contains__(self, value: object) -> bool:
        try:
            return self._find(value) is not None
        except TypeError:
            return False

    def __len__(self) -> int:
        return self._size

    def black_heights(self) -> list[int]:
        """Return the number of black nodes on each path from the root to an empty subtree.

        Paths are listed from left to right; in a valid tree all counts are equal.
        """
        heights: list[int] = []
        pending: list[tuple[RBNode | None, int]] = [(self.root, 0)]
        while pending:
            node, count = pending.pop()
            if node is None:
                heights.append(count)
                continue
            if node.color is Color.BLACK:
                count += 1
            pending.append((node.right, count))
            pending.append((node.left, count))
        return heights

    def __repr__(self) -> str:
        return f"RedBlackTree({list(self)!r})"