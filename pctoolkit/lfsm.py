"""Learning finite state machine driven by bit-pattern transitions.

Each memory entry maps an input transition (falling and rising bits) to an
output transition. Entries on page 1 are global and match whatever the
current output is. Entries on higher pages are local and match only when the
output they were learned from is the current output. Page 0 marks a free slot.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

__all__ = [
    "EMPTY",
    "GLOBAL_PAGE",
    "LearnStatus",
    "RemoveStatus",
    "LfsmEntry",
    "Lfsm",
    "lh",
    "hl",
    "diff",
    "output_calc",
]

_log = logging.getLogger(__name__)

_UINT_MASK = 0xFFFFFFFF
_VALIDATE_LAST_BIT = 8

EMPTY = 0
GLOBAL_PAGE = 1


class LearnStatus(IntEnum):
    """Outcome of :meth:`Lfsm.learn`."""

    NO_OPERATION = 0
    NOT_PERMITTED = 1
    ADDED = 3
    MEMORY_FULL = 4


class RemoveStatus(IntEnum):
    """Outcome of :meth:`Lfsm.remove`."""

    NO_OPERATION = 0
    REMOVED = 1
    NOT_FOUND = 2


def lh(xi: int, xf: int) -> int:
    """Bits that rose from low to high between ``xi`` and ``xf``."""
    return ((xf ^ xi) & xf) & _UINT_MASK


def hl(xi: int, xf: int) -> int:
    """Bits that fell from high to low between ``xi`` and ``xf``."""
    return ((xf ^ xi) & xi) & _UINT_MASK


def diff(xi: int, xf: int) -> int:
    """Bits that changed between ``xi`` and ``xf``."""
    return (xi ^ xf) & _UINT_MASK


def output_calc(feedback: int, hl: int, lh: int) -> int:
    """Apply a transition to ``feedback``: raise the ``lh`` bits, clear the ``hl`` bits."""
    return ((feedback | lh) & ~hl) & _UINT_MASK


@dataclass
class LfsmEntry:
    """One learned transition; ``page == EMPTY`` marks a free slot."""

    page: int = EMPTY
    feedback: int = 0
    inhl: int = 0
    inlh: int = 0
    outhl: int = 0
    outlh: int = 0

    @property
    def is_empty(self) -> bool:
        return self.page == EMPTY

    def matches(self, falling: int, rising: int, output: int) -> bool:
        """Whether this stored entry applies to the given input transition."""
        if self.is_empty or self.inhl != falling or self.inlh != rising:
            return False
        return self.page == GLOBAL_PAGE or self.feedback == output


class Lfsm:
    """State machine with a fixed-size memory of learned transitions."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.memory: list[LfsmEntry] = [LfsmEntry() for _ in range(size)]
        self.page = 0
        self.input = 0
        self.output = 0
        self._bit = 0

    def _transition(self, value: int) -> tuple[int, int]:
        value &= _UINT_MASK
        return hl(self.input, value), lh(self.input, value)

    def _find(self, falling: int, rising: int) -> Optional[LfsmEntry]:
        return next(
            (e for e in self.memory if e.matches(falling, rising, self.output)),
            None,
        )

    def read(self, value: int) -> int:
        """Feed a new input pattern and return the resulting output."""
        value &= _UINT_MASK
        falling, rising = self._transition(value)
        if not (falling or rising):
            _log.debug("read: no change on input")
            return self.output
        entry = self._find(falling, rising)
        self.input = value
        if entry is None:
            _log.debug("read: transition not recognised")
            return self.output
        _log.debug(
            "read: %s logic", "global" if entry.page == GLOBAL_PAGE else "local"
        )
        self.page = entry.page
        self.output = output_calc(entry.feedback, entry.outhl, entry.outlh)
        return self.output

    def learn(self, value: int, next_state: int, page: int) -> LearnStatus:
        """Store that moving the input to ``value`` should lead to ``next_state``."""
        if page < 0:
            raise ValueError("page must not be negative")
        falling, rising = self._transition(value)
        if page == EMPTY or not (falling or rising) or not self.memory:
            return LearnStatus.NO_OPERATION
        if self._find(falling, rising) is not None:
            return LearnStatus.NOT_PERMITTED
        next_state &= _UINT_MASK
        entry = LfsmEntry(
            page=page,
            feedback=self.output,
            inhl=falling,
            inlh=rising,
            outhl=hl(self.output, next_state),
            outlh=lh(self.output, next_state),
        )
        for index, slot in enumerate(self.memory):
            if slot.is_empty:
                self.memory[index] = entry
                _log.debug("learn: added %s at slot %d", entry, index)
                return LearnStatus.ADDED
        return LearnStatus.MEMORY_FULL

    def quant(self) -> int:
        """Number of programmed entries."""
        return sum(1 for entry in self.memory if not entry.is_empty)

    def remove(self, value: int) -> RemoveStatus:
        """Forget the entry that would handle moving the input to ``value``."""
        falling, rising = self._transition(value)
        seen_empty = False
        for entry in self.memory:
            if entry.is_empty:
                seen_empty = True
            elif entry.matches(falling, rising, self.output):
                entry.page = EMPTY
                return RemoveStatus.REMOVED
        return RemoveStatus.NOT_FOUND if seen_empty else RemoveStatus.NO_OPERATION

    def delete_all(self) -> bool:
        """Free every slot and reset the output; True if anything was freed."""
        deleted = False
        for entry in self.memory:
            if not entry.is_empty:
                entry.page = EMPTY
                deleted = True
        self.output = 0
        return deleted

    def validate(self, n: int) -> int:
        """Merge the next scanned bit of ``n`` into the current input."""
        result = (self.input | (n & (1 << self._bit))) & _UINT_MASK
        if self._bit >= _VALIDATE_LAST_BIT:
            self._bit = 0
        self._bit += 1
        return result