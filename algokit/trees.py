"""Binary search trees and array-backed binary trees."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class Node:
    """A binary tree node."""

    value: Any
    left: Node | None = None
    right: Node | None = None


class BinarySearchTree:
    """An unbalanced binary search tree.

    Values greater than a node go to its right subtree; all others,
    duplicates included, go to its left.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: Node | None = None
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Add ``value`` to the tree."""
        new = Node(value)
        if self.root is None:
            self.root = new
            return
        node = self.root
        while True:
            if value > node.value:
                if node.right is None:
                    node.right = new
                    return
                node = node.right
            else:
                if node.left is None:
                    node.left = new
                    return
                node = node.left

    def inorder(self) -> Iterator[Any]:
        """Yield values in ascending order."""
        pending: list[Node] = []
        node = self.root
        while pending or node is not None:
            while node is not None:
                pending.append(node)
                node = node.left
            node = pending.pop()
            yield node.value
            node = node.right

    def preorder(self) -> Iterator[Any]:
        """Yield each node's value before those of its subtrees."""
        pending = [self.root] if self.root is not None else []
        while pending:
            node = pending.pop()
            yield node.value
            if node.right is not None:
                pending.append(node.right)
            if node.left is not None:
                pending.append(node.left)

    def __iter__(self) -> Iterator[Any]:
        return self.inorder()


class ArrayTree:
    """A binary tree stored level by level in a sequence.

    The children of slot ``i`` are slots ``2*i + 1`` and ``2*i + 2``, and a
    child exists only where its index does not exceed ``complete_node``.
    A slot holding ``0`` or ``None``, or lying past the end of the values,
    is empty.
    """

    def __init__(self, values: Iterable[Any], complete_node: int | None = None) -> None:
        self.values = list(values)
        self.complete_node = len(self.values) if complete_node is None else complete_node

    def _occupied(self, index: int | None) -> bool:
        if index is None or not 0 <= index < len(self.values):
            return False
        value = self.values[index]
        return value is not None and value != 0

    def _child(self, index: int, child: int) -> int | None:
        if self._occupied(index) and child <= self.complete_node:
            return child
        return None

    def left_child(self, index: int) -> int | None:
        """Return the index of the left child of ``index``, or None."""
        return self._child(index, 2 * index + 1)

    def right_child(self, index: int) -> int | None:
        """Return the index of the right child of ``index``, or None."""
        return self._child(index, 2 * index + 2)

    def _preorder(self, index: int | None) -> Iterator[Any]:
        if self._occupied(index):
            yield self.values[index]
            yield from self._preorder(self.left_child(index))
            yield from self._preorder(self.right_child(index))

    def _inorder(self, index: int | None) -> Iterator[Any]:
        if self._occupied(index):
            yield from self._inorder(self.left_child(index))
            yield self.values[index]
            yield from self._inorder(self.right_child(index))

    def _postorder(self, index: int | None) -> Iterator[Any]:
        if self._occupied(index):
            yield from self._postorder(self.left_child(index))
            yield from self._postorder(self.right_child(index))
            yield self.values[index]

    def preorder(self) -> Iterator[Any]:
        """Yield values root first, then left and right subtrees."""
        return self._preorder(0)

    def inorder(self) -> Iterator[Any]:
        """Yield values left subtree first, then root, then right subtree."""
        return self._inorder(0)

    def postorder(self) -> Iterator[Any]:
        """Yield values of both subtrees before the root."""
        return self._postorder(0)