"""Edge analysis of successive bit patterns."""

from __future__ import annotations

from dataclasses import dataclass, replace

_UINT_MASK = 0xFFFFFFFF


@dataclass
class Explode:
    """Keeps the previous and current pattern and their per-bit transitions.

    ``hl`` marks bits that fell, ``lh`` bits that rose, ``hh`` bits high in
    both and ``ll`` bits low in both (32-bit unsigned).
    """

    xi: int = 0
    xf: int = 0
    hl: int = 0
    lh: int = 0
    hh: int = 0
    ll: int = 0

    def update(self, x: int) -> None:
        """Shift in a new pattern and recompute the transitions."""
        self.xi = self.xf
        self.xf = x & _UINT_MASK
        self.hl = (self.xf ^ self.xi) & self.xi
        self.lh = (self.xi ^ self.xf) & self.xf
        self.hh = self.xi & self.xf
        self.ll = ~(self.xi | self.xf) & _UINT_MASK

    def mayia(self, nbits: int) -> int:
        """Mask both patterns to ``nbits`` and pack rising bits above changed bits."""
        if nbits < 0:
            raise ValueError("nbits must not be negative")
        mask = ((1 << nbits) - 1) & _UINT_MASK
        self.xi &= mask
        self.xf &= mask
        changed = self.xf ^ self.xi
        rising = changed & self.xf
        return ((rising << nbits) | changed) & _UINT_MASK

    def read(self) -> "Explode":
        """A copy of the current state."""
        return replace(self)