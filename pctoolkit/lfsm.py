"""Learning finite-state machine driven by input pin transitions.

Each stored program maps an input transition (bits that fell, bits that
rose) to an output transition. Page 1 holds global logic that applies
whatever the current output is; pages above 1 hold local logic that only
applies when the output equals the feedback recorded at learning time.
Page 0 marks an empty memory slot.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from .functions import hl as _hl
from .functions import lh as _lh

_UINT_MASK = 0xFFFFFFFF
EMPTY = 0
GLOBAL_PAGE = 1


@dataclass(frozen=True)
class LfsmEntry:
    """One stored program slot."""

    page: int = EMPTY
    feedback: int = 0
    inhl: int = 0
    inlh: int = 0
    outhl: int = 0
    outlh: int = 0

    @property
    def is_empty(self) -> bool:
        return self.page == EMPTY


class ReadStatus(IntEnum):
    NO_ENTRY = 0
    GLOBAL = 1
    LOCAL = 2
    NOT_RECOGNIZED = 3


class LearnStatus(IntEnum):
    NO_OPERATION = 0
    NOT_PERMITTED = 1
    TRY_ADD = 2
    ADDED = 3
    MEMORY_FULL = 4


class RemoveStatus(IntEnum):
    NO_OPERATION = 0
    REMOVED = 1
    NOT_FOUND = 2


def output_calc(feedback: int, hl: int, lh: int) -> int:
    """Apply rising bits ``lh`` and falling bits ``hl`` to ``feedback``."""
    return ((feedback | lh) & ~hl) & _UINT_MASK


class Lfsm:
    """State machine with a fixed number of program slots."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.size = size
        self.mem: list[LfsmEntry] = [LfsmEntry() for _ in range(size)]
        self.page = 0
        self.input = 0
        self.output = 0
        self.last_read_status = ReadStatus.NO_ENTRY
        self._bit = 0

    def _transition(self, value: int) -> tuple[int, int]:
        value &= _UINT_MASK
        return _hl(self.input, value), _lh(self.input, value)

    def _matches(self, entry: LfsmEntry, hl: int, lh: int) -> bool:
        return entry.inhl == hl and entry.inlh == lh

    def read(self, input: int) -> int:
        """Feed an input sample and return the resulting output."""
        input &= _UINT_MASK
        hl, lh = self._transition(input)
        status = ReadStatus.NO_ENTRY
        found: Optional[LfsmEntry] = None
        if hl or lh:
            status = ReadStatus.NOT_RECOGNIZED
            for entry in self.mem:
                if entry.page == EMPTY:
                    continue
                if entry.page == GLOBAL_PAGE:
                    if self._matches(entry, hl, lh):
                        status, found = ReadStatus.GLOBAL, entry
                        break
                elif entry.feedback == self.output and self._matches(entry, hl, lh):
                    status, found = ReadStatus.LOCAL, entry
                    break
        if found is not None:
            self.page = found.page
            self.input = input
            self.output = output_calc(found.feedback, found.outhl, found.outlh)
        elif status == ReadStatus.NOT_RECOGNIZED:
            self.input = input
        self.last_read_status = status
        return self.output

    def learn(self, input: int, next: int, page: int) -> LearnStatus:
        """Store a program taking the current output to ``next`` on ``input``."""
        hl, lh = self._transition(input)
        status = LearnStatus.NO_OPERATION
        if page > 0 and (hl or lh):
            for entry in self.mem:
                if entry.page != EMPTY and self._matches(entry, hl, lh) and (
                    entry.page == GLOBAL_PAGE or entry.feedback == self.output
                ):
                    status = LearnStatus.NOT_PERMITTED
                    break
                status = LearnStatus.TRY_ADD
        if status != LearnStatus.TRY_ADD:
            return status
        next &= _UINT_MASK
        program = LfsmEntry(
            page=page,
            feedback=self.output,
            inhl=hl,
            inlh=lh,
            outhl=_hl(self.output, next),
            outlh=_lh(self.output, next),
        )
        for index, entry in enumerate(self.mem):
            if entry.page == EMPTY:
                self.mem[index] = program
                return LearnStatus.ADDED
            status = LearnStatus.MEMORY_FULL
        return status

    def quant(self) -> int:
        """Number of occupied slots."""
        return sum(1 for entry in self.mem if entry.page != EMPTY)

    def remove(self, input: int) -> RemoveStatus:
        """Empty the slot holding the program reached by ``input``."""
        hl, lh = self._transition(input)
        status = RemoveStatus.NO_OPERATION
        for index, entry in enumerate(self.mem):
            if entry.page == EMPTY:
                status = RemoveStatus.NOT_FOUND
                continue
            if self._matches(entry, hl, lh) and (
                entry.page == GLOBAL_PAGE or entry.feedback == self.output
            ):
                self.mem[index] = dataclasses.replace(entry, page=EMPTY)
                return RemoveStatus.REMOVED
        return status

    def delete_all(self) -> bool:
        """Empty every slot and reset the output; True if anything was stored."""
        deleted = False
        for index, entry in enumerate(self.mem):
            if entry.page != EMPTY:
                self.mem[index] = dataclasses.replace(entry, page=EMPTY)
                deleted = True
        self.output = 0
        return deleted

    def validate(self, n: int) -> int:
        """Merge one bit of ``n``, cycling through bit positions, into the input."""
        result = (self.input | (n & (1 << self._bit))) & _UINT_MASK
        if self._bit > 7:
            self._bit = 0
        self._bit += 1
        return result