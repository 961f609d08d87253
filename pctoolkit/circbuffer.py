"""Byte ring buffers: a terminator-writing one and a bounded one."""

from __future__ import annotations

from typing import Union

Byte = Union[int, str]


def _byte(data: Byte) -> int:
    if isinstance(data, str):
        if len(data) != 1:
            raise ValueError("a single character is required")
        data = ord(data)
    return data & 0xFF


class CircularBuffer:
    """Ring of ``size`` bytes whose writer always leaves a zero after the
    last byte written; reading an empty buffer yields that zero."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("size must be at least 1")
        self._size = size
        # One extra cell receives the terminator written just past the ring.
        self._cells = bytearray(size + 1)
        self._tail = 0
        self._head = 0

    def get(self) -> int:
        """Take the next byte, or return the byte under the write position if empty."""
        value = self._cells[self._head]
        if self._tail != self._head:
            value = self._cells[self._tail]
            self._tail += 1
            if self._tail == self._size:
                self._tail = 0
        return value

    def put(self, data: Byte) -> None:
        """Write one byte and a zero after it, overwriting unread data if needed."""
        if self._head == self._size:
            self._head = 0
        self._cells[self._head] = _byte(data)
        self._head += 1
        self._cells[self._head] = 0

    def gets(self) -> str:
        """Read characters up to a zero byte (at most one lap of the ring)."""
        chars = []
        for _ in range(self._size):
            value = self.get()
            if not value:
                break
            chars.append(chr(value))
        return "".join(chars)

    def puts(self, text: str) -> None:
        """Write each character of ``text`` followed by a zero byte."""
        for ch in text:
            self.put(ch)
        self.put(0)


class BoundedCircularBuffer:
    """Ring of ``size`` bytes holding at most ``size - 1``; writes to a full
    buffer are dropped."""

    def __init__(self, size: int) -> None:
        if not 1 <= size <= 255:
            raise ValueError("size must be between 1 and 255")
        self._cells = bytearray(size)
        self._tail = 0
        self._head = 0

    def get(self) -> int:
        """Take the oldest byte, or 0 when empty."""
        if self._tail == self._head:
            return 0
        value = self._cells[self._tail]
        self._tail = (self._tail + 1) % len(self._cells)
        return value

    def put(self, data: Byte) -> bool:
        """Append one byte; return False when the buffer was full and it was dropped."""
        following = (self._head + 1) % len(self._cells)
        if following == self._tail:
            return False
        self._cells[self._head] = _byte(data)
        self._head = following
        return True

    def put_string(self, text: str) -> int:
        """Append each character of ``text``; return how many were stored."""
        return sum(self.put(ch) for ch in text)