"""Red-black tree skeleton: colored nodes with plain search-tree insertion."""

from __future__ import annotations

import struct
from enum import Enum
from pathlib import Path
from typing import Iterable


class NodeColor(Enum):
    RED = 10
    BLACK = 20

    @property
    def symbol(self) -> str:
        return "R" if self is NodeColor.RED else "B"


class NodeSide(Enum):
    LEFT = 10
    RIGHT = 20

    @property
    def symbol(self) -> str:
        return "L" if self is NodeSide.LEFT else "R"


class RBNode:
    """A tree node with a color, a parent link and the side it hangs on."""

    def __init__(self, data: int, parent: RBNode | None = None) -> None:
        self.data = data
        self.parent = parent
        self._left: RBNode | None = None
        self._right: RBNode | None = None
        self.color = NodeColor.RED
        self.side = NodeSide.LEFT

    @property
    def left(self) -> RBNode | None:
        return self._left

    @left.setter
    def left(self, node: RBNode | None) -> None:
        self._left = node
        if node is not None:
            node.parent = self
            node.side = NodeSide.LEFT

    @property
    def right(self) -> RBNode | None:
        return self._right

    @right.setter
    def right(self, node: RBNode | None) -> None:
        self._right = node
        if node is not None:
            node.parent = self
            node.side = NodeSide.RIGHT


class RBTree:
    """A tree of red-black nodes; insertion does not rebalance."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: RBNode | None = None
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> None:
        """Add ``value`` as a new red leaf; equal keys go to the right."""
        if self.root is None:
            self.root = RBNode(value)
            return
        current = self.root
        while True:
            if value < current.data:
                if current.left is None:
                    current.left = RBNode(value, current)
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = RBNode(value, current)
                    return
                current = current.right

    def find(self, value: int) -> RBNode | None:
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


def read_keys(path: str | Path) -> list[int]:
    """Read consecutive little-endian 32-bit signed integers from a file.

    Trailing bytes that do not make up a whole integer are ignored.
    """
    data = Path(path).read_bytes()
    whole = len(data) - len(data) % 4
    return [value for (value,) in struct.iter_unpack("<i", data[:whole])]