"""Binary search tree with subtree sizes and k-th element selection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass(eq=False)
class BSTNode:
    """A node of a binary search tree; ``size`` counts the nodes of its subtree."""

    data: int
    left: BSTNode | None = None
    right: BSTNode | None = None
    size: int = 1


class BinarySearchTree:
    """An unbalanced binary search tree; equal keys go to the right."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: BSTNode | None = None
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> None:
        """Add ``value`` as a new leaf."""
        node = BSTNode(value)
        if self.root is None:
            self.root = node
            return
        current = self.root
        while True:
            if value < current.data:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def find(self, value: int) -> BSTNode | None:
        """Return the node holding ``value``, or None."""
        current = self.root
        while current is not None and current.data != value:
            current = current.left if value < current.data else current.right
        return current

    def _preorder(self) -> Iterator[tuple[BSTNode, int]]:
        pending = [(self.root, 1)] if self.root is not None else []
        while pending:
            node, level = pending.pop()
            yield node, level
            if node.right is not None:
                pending.append((node.right, level + 1))
            if node.left is not None:
                pending.append((node.left, level + 1))

    def traverse(self) -> str:
        """Pre-order listing, one node per line, indented by depth."""
        return "".join(
            f"{'-' * (2 * level)}{node.data} | s = {node.size}\n"
            for node, level in self._preorder()
        )

    def ascending(self) -> list[int]:
        """All keys in ascending order."""
        result: list[int] = []
        pending: list[BSTNode] = []
        node = self.root
        while pending or node is not None:
            while node is not None:
                pending.append(node)
                node = node.left
            node = pending.pop()
            result.append(node.data)
            node = node.right
        return result

    def update_sizes(self) -> None:
        """Recompute the subtree size stored in every node."""
        for node in reversed([node for node, _ in self._preorder()]):
            left = node.left.size if node.left is not None else 0
            right = node.right.size if node.right is not None else 0
            node.size = left + right + 1

    def kth(self, k: int) -> BSTNode | None:
        """Node at 1-based ascending position ``k``, using the stored sizes."""
        node = self.root
        while node is not None:
            position = (node.left.size if node.left is not None else 0) + 1
            if k == position:
                return node
            if k > position:
                k -= position
                node = node.right
            else:
                node = node.left
        return None