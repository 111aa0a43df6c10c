"""Pin-transition analysis between two consecutive samples."""

from __future__ import annotations

from dataclasses import dataclass

_UINT_MASK = 0xFFFFFFFF


@dataclass(frozen=True)
class ExplodeState:
    """Snapshot of the analyser: samples and their transition masks."""

    xi: int = 0
    xf: int = 0
    hl: int = 0
    lh: int = 0
    hh: int = 0
    ll: int = 0


class Explode:
    """Track the previous and current sample and classify each bit."""

    def __init__(self) -> None:
        self.xi = 0
        self.xf = 0
        self.hl = 0
        self.lh = 0
        self.hh = 0
        self.ll = 0

    def update(self, x: int) -> None:
        """Shift in a new sample and recompute the transition masks."""
        self.xi = self.xf
        self.xf = x & _UINT_MASK
        changed = self.xi ^ self.xf
        self.hl = changed & self.xi
        self.lh = changed & self.xf
        self.hh = self.xi & self.xf
        self.ll = ~(self.xi | self.xf) & _UINT_MASK

    def mayia(self, nbits: int) -> int:
        """Mask both samples to ``nbits`` and pack rising edges above changed bits."""
        mask = (1 << nbits) - 1
        self.xi &= mask
        self.xf &= mask
        changed = self.xf ^ self.xi
        rising = changed & self.xf
        return ((rising << nbits) | changed) & _UINT_MASK

    def read(self) -> ExplodeState:
        """Return an immutable snapshot of the current state."""
        return ExplodeState(self.xi, self.xf, self.hl, self.lh, self.hh, self.ll)