"""General (n-ary) tree whose nodes keep an ordered list of children."""

from __future__ import annotations

from typing import Iterator


class TreeNode:
    """A tree node; new children are placed at the front of ``children``."""

    def __init__(self, data: int = -1, parent: TreeNode | None = None) -> None:
        self.data = data
        self.parent = parent
        self.children: list[TreeNode] = []

    def add_child(self, child: TreeNode) -> None:
        """Insert ``child`` as the first child of this node."""
        child.parent = self
        self.children.insert(0, child)

    def remove_child(self, value: int) -> None:
        """Remove every child whose data equals ``value``."""
        self.children = [child for child in self.children if child.data != value]

    def find_child(self, value: int) -> TreeNode | None:
        """Return the first child holding ``value``, or None."""
        return next((child for child in self.children if child.data == value), None)

    def __repr__(self) -> str:
        return f"TreeNode({self.data!r})"


class Tree:
    """A rooted tree of :class:`TreeNode` objects searched in pre-order."""

    def __init__(self) -> None:
        self.root: TreeNode | None = None

    def set_root(self, node: TreeNode) -> None:
        """Set the root; a tree that already has one keeps it."""
        if self.root is None:
            self.root = node

    def insert(self, value: int, parent_value: int) -> TreeNode | None:
        """Add ``value`` as the first child of the node holding ``parent_value``.

        Returns the new node, or None when no such parent exists.
        """
        parent = self.find(parent_value)
        if parent is None:
            return None
        child = TreeNode(value)
        parent.add_child(child)
        return child

    def _preorder(self) -> Iterator[tuple[TreeNode, int]]:
        pending = [(self.root, 1)] if self.root is not None else []
        while pending:
            node, level = pending.pop()
            yield node, level
            pending.extend((child, level + 1) for child in reversed(node.children))

    def find(self, value: int) -> TreeNode | None:
        """Return the first node in pre-order holding ``value``, or None."""
        return next((node for node, _ in self._preorder() if node.data == value), None)

    def traverse(self) -> str:
        """Pre-order listing, one node per line, indented by depth."""
        return "".join(
            f"{'-' * (2 * level)}{node.data} at level {level}\n"
            for node, level in self._preorder()
        )