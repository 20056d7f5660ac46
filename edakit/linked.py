"""Singly linked list, stack and queue, plus a balanced-parentheses checker."""

from __future__ import annotations

import sys
from collections import deque
from dataclasses import dataclass
from typing import Any, Iterable, Iterator


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    data: Any
    next: ListNode | None = None


class LinkedList:
    """A singly linked list that keeps only a reference to its head."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: ListNode | None = None
        for value in values:
            self.insert_last(value)

    def insert_first(self, value: Any) -> None:
        """Put ``value`` at the front of the list."""
        self.head = ListNode(value, self.head)

    def insert_last(self, value: Any) -> None:
        """Append ``value`` at the end of the list."""
        node = ListNode(value)
        if self.head is None:
            self.head = node
            return
        last = self.head
        while last.next is not None:
            last = last.next
        last.next = node

    def remove_first(self) -> None:
        """Drop the first node; an empty list is left unchanged."""
        if self.head is not None:
            self.head = self.head.next

    def remove(self, value: Any) -> None:
        """Remove every node whose data equals ``value``."""
        while self.head is not None and self.head.data == value:
            self.head = self.head.next
        previous = self.head
        while previous is not None and previous.next is not None:
            if previous.next.data == value:
                previous.next = previous.next.next
            else:
                previous = previous.next

    def clear(self) -> None:
        """Remove all nodes."""
        self.head = None

    def find(self, value: Any) -> ListNode | None:
        """Return the first node holding ``value``, or None."""
        node = self.head
        while node is not None and node.data != value:
            node = node.next
        return node

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __str__(self) -> str:
        return "".join(f"{value} -> " for value in self)


class Stack:
    """A last-in, first-out container."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def top(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)


class Queue:
    """A first-in, first-out container."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def push(self, value: Any) -> None:
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the front value."""
        if not self._items:
            raise IndexError("pop from an empty queue")
        return self._items.popleft()

    def top(self) -> Any:
        """Return the front value without removing it."""
        if not self._items:
            raise IndexError("top of an empty queue")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)


def validate_parentheses(text: str) -> tuple[bool, int]:
    """Check that parentheses in ``text`` are balanced.

    Returns ``(valid, position)``: the position of an unmatched ``)``, or the
    index of the last character when the whole text was scanned.
    """
    stack = Stack()
    for position, char in enumerate(text):
        if char == "(":
            stack.push(char)
        elif char == ")":
            if stack.is_empty():
                return False, position
            stack.pop()
    return stack.is_empty(), len(text) - 1


def main(argv: list[str] | None = None) -> int:
    """Validate an expression given as arguments or read from standard input."""
    args = sys.argv[1:] if argv is None else argv
    text = " ".join(args) if args else input("Enter expression: ")
    valid, position = validate_parentheses(text)
    if valid:
        print("Valid expression")
    else:
        print("Invalid expression")
        print(f"Error position: {position}")
    return 0