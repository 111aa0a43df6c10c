"""Fixed-size byte ring buffer that keeps one slot free to tell full from empty."""

from __future__ import annotations


class RingBuffer:
    """FIFO of bytes holding at most ``size - 1`` items."""

    def __init__(self, size: int) -> None:
        if size < 2:
            raise ValueError("size must be at least 2")
        self._size = size
        self._slots = [0] * size
        self._head = 0
        self._tail = 0

    def put(self, data: int) -> bool:
        """Store a byte; return False and drop it when the buffer is full."""
        next_head = (self._head + 1) % self._size
        if next_head == self._tail:
            return False
        self._slots[self._head] = data & 0xFF
        self._head = next_head
        return True

    def get(self) -> int:
        """Remove and return the oldest byte, or 0 when the buffer is empty."""
        if self._head == self._tail:
            return 0
        data = self._slots[self._tail]
        self._tail = (self._tail + 1) % self._size
        return data

    def is_empty(self) -> bool:
        return self._head == self._tail

    def is_full(self) -> bool:
        return (self._head + 1) % self._size == self._tail

    def __len__(self) -> int:
        return (self._head - self._tail) % self._size