"""Self-balancing AVL tree with explicit child heights and parent links."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Iterator


class RotationType(Enum):
    LEFT_ROTATION = 10
    RIGHT_ROTATION = 20
    LEFT_RIGHT_ROTATION = 30
    RIGHT_LEFT_ROTATION = 40


class Side(Enum):
    LEFT = 10
    RIGHT = 20

    @property
    def symbol(self) -> str:
        return "L" if self is Side.LEFT else "R"


class AVLNode:
    """A node storing the heights of its left and right subtrees."""

    def __init__(self, data: int, parent: AVLNode | None = None) -> None:
        self.data = data
        self.parent = parent
        self._left: AVLNode | None = None
        self._right: AVLNode | None = None
        self.left_height = 0
        self.right_height = 0
        self.side = Side.LEFT

    @property
    def left(self) -> AVLNode | None:
        return self._left

    @left.setter
    def left(self, node: AVLNode | None) -> None:
        self._left = node
        if node is not None:
            node.parent = self
            node.side = Side.LEFT

    @property
    def right(self) -> AVLNode | None:
        return self._right

    @right.setter
    def right(self, node: AVLNode | None) -> None:
        self._right = node
        if node is not None:
            node.parent = self
            node.side = Side.RIGHT

    @property
    def height(self) -> int:
        return max(self.left_height, self.right_height)

    @property
    def balance_score(self) -> int:
        return abs(self.left_height - self.right_height)

    def update_heights(self) -> None:
        """Refresh the stored child heights from the children."""
        self.left_height = self._left.height + 1 if self._left is not None else 0
        self.right_height = self._right.height + 1 if self._right is not None else 0


class AVLTree:
    """An AVL tree; ``rotations`` records every rebalancing performed."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: AVLNode | None = None
        self.rotations: list[RotationType] = []
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> None:
        """Add ``value``, rebalancing along the path back to the root."""
        if self.root is None:
            self.root = AVLNode(value)
            return
        path: list[AVLNode] = []
        current = self.root
        while True:
            path.append(current)
            if value < current.data:
                if current.left is None:
                    current.left = AVLNode(value, current)
                    break
                current = current.left
            else:
                if current.right is None:
                    current.right = AVLNode(value, current)
                    break
                current = current.right
        for node in reversed(path):
            node.update_heights()
            if node.balance_score > 1:
                self._balance(node)

    def _rotation_type(self, node: AVLNode) -> RotationType:
        if node.left_height > node.right_height:
            child = node.left
            if child.left_height > child.right_height:
                return RotationType.RIGHT_ROTATION
            return RotationType.LEFT_RIGHT_ROTATION
        child = node.right
        if child.left_height > child.right_height:
            return RotationType.RIGHT_LEFT_ROTATION
        return RotationType.LEFT_ROTATION

    def _balance(self, node: AVLNode) -> None:
        kind = self._rotation_type(node)
        self.rotations.append(kind)
        if kind is RotationType.LEFT_ROTATION:
            self._rotate_left(node)
        elif kind is RotationType.RIGHT_ROTATION:
            self._rotate_right(node)
        elif kind is RotationType.LEFT_RIGHT_ROTATION:
            self._rotate_left(node.left)
            self._rotate_right(node)
        else:
            self._rotate_right(node.right)
            self._rotate_left(node)

    def _replace(self, node: AVLNode, child: AVLNode, parent: AVLNode | None, was_left: bool) -> None:
        if node is self.root:
            self.root = child
            child.parent = None
        else:
            if was_left:
                parent.left = child
            else:
                parent.right = child
            parent.update_heights()

    def _rotate_left(self, node: AVLNode) -> None:
        child = node.right
        parent = node.parent
        was_left = node.side is Side.LEFT
        node.right = child.left
        child.left = node
        node.update_heights()
        child.update_heights()
        self._replace(node, child, parent, was_left)

    def _rotate_right(self, node: AVLNode) -> None:
        child = node.left
        parent = node.parent
        was_left = node.side is Side.LEFT
        node.left = child.right
        child.right = node
        node.update_heights()
        child.update_heights()
        self._replace(node, child, parent, was_left)

    def find(self, value: int) -> AVLNode | None:
        """Return the node holding ``value``, or None."""
        current = self.root
        while current is not None and current.data != value:
            current = current.left if value < current.data else current.right
        return current

    def traverse(self) -> str:
        """Pre-order listing: depth stars, key and side of each node."""
        lines: list[str] = []
        pending = [(self.root, 1)] if self.root is not None else []
        while pending:
            node, level = pending.pop()
            lines.append(f"{'*' * level}{node.data}  {node.side.symbol}\n")
            if node.right is not None:
                pending.append((node.right, level + 1))
            if node.left is not None:
                pending.append((node.left, level + 1))
        return "".join(lines)

    def __iter__(self) -> Iterator[int]:
        pending: list[AVLNode] = []
        node = self.root
        while pending or node is not None:
            while node is not None:
                pending.append(node)
                node = node.left
            node = pending.pop()
            yield node.data
            node = node.right