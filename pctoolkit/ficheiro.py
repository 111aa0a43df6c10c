"""Single-file wrapper with C stdio-like operations on a binary stream."""

from __future__ import annotations

import os
from typing import BinaryIO, Optional

DEFAULT_PERMISSION = "a+"


def _binary_mode(permission: str) -> str:
    return permission if "b" in permission else permission + "b"


class Ficheiro:
    """One open file at a time, addressed by name and stdio-style permission.

    When the file cannot be opened with the requested permission, it is
    first created with ``"a+"`` and then opened again with the requested one.
    """

    def __init__(self) -> None:
        self.filename: Optional[str] = None
        self.permission: Optional[str] = None
        self._fp: Optional[BinaryIO] = None

    @property
    def closed(self) -> bool:
        return self._fp is None

    def _file(self) -> BinaryIO:
        if self._fp is None:
            raise ValueError("no file is open")
        return self._fp

    def open(self, filename: str | os.PathLike[str], permission: str = DEFAULT_PERMISSION) -> "Ficheiro":
        """Open ``filename`` with a stdio permission such as ``"r"``, ``"w+"`` or ``"a+"``."""
        if self._fp is not None:
            self.close()
        name = os.fspath(filename)
        mode = _binary_mode(permission)
        try:
            fp = open(name, mode)
        except OSError:
            # Create the file with the default permission, then retry once.
            with open(name, _binary_mode(DEFAULT_PERMISSION)):
                pass
            fp = open(name, mode)
        self._fp = fp
        self.filename = name
        self.permission = permission
        return self

    def close(self) -> None:
        """Close the open file."""
        fp = self._file()
        self._fp = None
        fp.close()

    def putc(self, c: int) -> int:
        """Write one byte and return it as an unsigned value."""
        byte = c & 0xFF
        self._file().write(bytes([byte]))
        return byte

    def puts(self, s: str) -> int:
        """Write a string encoded as UTF-8; return the number of bytes written."""
        return self._file().write(s.encode("utf-8"))

    def read(self, size: int, nmemb: int) -> bytes:
        """Read up to ``nmemb`` items of ``size`` bytes; only whole items are returned."""
        if size < 0 or nmemb < 0:
            raise ValueError("size and nmemb must not be negative")
        if size == 0 or nmemb == 0:
            return b""
        fp = self._file()
        data = fp.read(size * nmemb)
        whole = len(data) - len(data) % size
        if whole != len(data):
            fp.seek(whole - len(data), os.SEEK_CUR)
        return data[:whole]

    def write(self, data: bytes) -> int:
        """Write raw bytes; return how many were written."""
        return self._file().write(data)

    def rewind(self) -> None:
        """Move back to the start of the file."""
        self._file().seek(0, os.SEEK_SET)

    def fileno(self) -> int:
        """Operating-system file descriptor of the open file."""
        return self._file().fileno()

    def seek(self, offset: int, whence: int = os.SEEK_SET) -> int:
        """Move the file position and return the new position."""
        fp = self._file()
        fp.flush()
        return fp.seek(offset, whence)

    def tell(self) -> int:
        """Current file position."""
        return self._file().tell()

    def __enter__(self) -> "Ficheiro":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._fp is not None:
            self.close()