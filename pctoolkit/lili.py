"""Doubly linked list of strings with a movable cursor.

The list runs from its tail (oldest entry) to its head (newest entry).
A cursor, the target, points at one entry; most operations act on it.
"""

from __future__ import annotations

from typing import Iterator, Optional

EMPTY_VALUE = "empty"


class RecordError(Exception):
    """Raised when recording while the cursor is not at the head."""


class LinkedList:
    """Append-oriented list of strings navigated through a cursor."""

    def __init__(self) -> None:
        self._items: list[str] = []
        self._pos: Optional[int] = None

    def play(self) -> str:
        """Return the entry under the cursor, or ``"empty"`` when the list is empty."""
        if self._pos is None:
            return EMPTY_VALUE
        return self._items[self._pos]

    def forward(self) -> None:
        """Move the cursor one step towards the head, stopping at the head."""
        if self._pos is not None and self._pos < len(self._items) - 1:
            self._pos += 1

    def reverse(self) -> None:
        """Move the cursor one step towards the tail, stopping at the tail."""
        if self._pos is not None and self._pos > 0:
            self._pos -= 1

    def record(self, data: str) -> None:
        """Append ``data`` after the head; only allowed with the cursor at the head."""
        if self._pos is None:
            self._items = [data]
            self._pos = 0
        elif self._pos == len(self._items) - 1:
            self._items.append(data)
            self._pos += 1
        else:
            raise RecordError("record only permitted at end of list, append only")

    def remove(self) -> Optional[str]:
        """Delete the entry under the cursor and return it; None when empty.

        Removing the tail leaves the cursor on the new tail; any other removal
        moves the cursor one step towards the tail.
        """
        if self._pos is None:
            return None
        removed = self._items.pop(self._pos)
        if not self._items:
            self._pos = None
        elif self._pos > 0:
            self._pos -= 1
        return removed

    def clear(self) -> None:
        """Remove every entry."""
        while self._pos is not None:
            self.remove()

    def quant(self) -> int:
        """Number of entries."""
        return len(self._items)

    def replace(self, data: str) -> None:
        """Overwrite the entry under the cursor; nothing happens when empty."""
        if self._pos is not None:
            self._items[self._pos] = data

    def push(self, data: str) -> None:
        """Append ``data`` at the head and move the cursor onto it."""
        self._items.append(data)
        self._pos = len(self._items) - 1

    def pop(self) -> str:
        """Remove and return the head entry, or ``"empty"`` when the list is empty.

        The cursor ends on the new head.
        """
        if self._pos is None:
            return EMPTY_VALUE
        data = self._items.pop()
        self._pos = len(self._items) - 1 if self._items else None
        return data

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._items))