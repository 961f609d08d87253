"""Doubly linked list of short strings with a movable cursor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

__all__ = ["EmptyListError", "LinkedList"]

_MAX_DATA = 255


class EmptyListError(IndexError):
    """Raised when an operation needs an element but the list is empty."""


@dataclass(eq=False)
class _Node:
    data: str
    back: Optional["_Node"] = None
    next: Optional["_Node"] = None


def _checked(data: str) -> str:
    if len(data) > _MAX_DATA:
        raise ValueError(f"data longer than {_MAX_DATA} characters")
    return data


class LinkedList:
    """List running from the tail (first) to the head (last), with a cursor
    that the navigation and editing operations act on."""

    def __init__(self) -> None:
        self._target: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._head: Optional[_Node] = None
        self._total = 0

    def _require(self) -> _Node:
        if self._target is None:
            raise EmptyListError("linked list is empty")
        return self._target

    def _start(self, data: str) -> None:
        node = _Node(data)
        self._target = self._tail = self._head = node
        self._total = 1

    def _append(self, data: str) -> None:
        node = _Node(data, back=self._head)
        self._head.next = node
        self._head = self._target = node
        self._total += 1

    def play(self) -> str:
        """Data at the cursor."""
        return self._require().data

    def forward(self) -> None:
        """Move the cursor one step towards the head, stopping there."""
        node = self._require()
        if node.next is not None:
            self._target = node.next

    def reverse(self) -> None:
        """Move the cursor one step towards the tail, stopping there."""
        node = self._require()
        if node.back is not None:
            self._target = node.back

    def record(self, data: str) -> None:
        """Append ``data``; allowed only while the cursor is on the head."""
        data = _checked(data)
        if self._target is None:
            self._start(data)
        elif self._target is not self._head:
            raise ValueError("record is only permitted at the end of the list")
        else:
            self._append(data)

    def remove(self) -> None:
        """Delete the element at the cursor.

        The cursor moves to the previous element, or to the next one when
        the first element was removed.
        """
        node = self._require()
        if node.back is None and node.next is None:
            self._target = self._tail = self._head = None
        elif node.back is None:
            node.next.back = None
            self._tail = self._target = node.next
        elif node.next is None:
            node.back.next = None
            self._head = self._target = node.back
        else:
            node.next.back = node.back
            node.back.next = node.next
            self._target = node.back
        self._total -= 1

    def clear(self) -> None:
        """Remove every element."""
        while self._target is not None:
            self.remove()

    def quant(self) -> int:
        """Number of elements."""
        return self._total

    def insert(self, data: str) -> None:
        """Insert ``data`` right after the cursor and move the cursor onto it."""
        data = _checked(data)
        if self._target is None:
            self._start(data)
            return
        node = _Node(data, back=self._target, next=self._target.next)
        if self._target.next is None:
            self._head = node
        else:
            self._target.next.back = node
        self._target.next = node
        self._target = node
        self._total += 1

    def replace(self, data: str) -> None:
        """Overwrite the data at the cursor."""
        data = _checked(data)
        self._require().data = data

    def push(self, data: str) -> None:
        """Append ``data`` at the head wherever the cursor is; the cursor follows."""
        data = _checked(data)
        if self._target is None:
            self._start(data)
        else:
            self._append(data)

    def pop(self) -> str:
        """Remove and return the head element; the cursor moves to the new head."""
        self._require()
        self._target = self._head
        data = self._head.data
        self.remove()
        return data

    def __len__(self) -> int:
        return self._total

    def __iter__(self) -> Iterator[str]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.next