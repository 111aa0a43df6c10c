"""General-purpose helpers: text conversion, stream reading and bit arithmetic."""

from __future__ import annotations

import re
import sys
from typing import IO, Optional

_UINT_MASK = 0xFFFFFFFF
_INT_PATTERN = re.compile(r"\s*([+-]?\d+)")
_ANY_INT = re.compile(r"[+-]?\d+")


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def reverse(s: str) -> str:
    """Return ``s`` with its characters in reverse order."""
    return s[::-1]


def ftoa(n: float, afterpoint: int) -> str:
    """Format ``n`` with a leading sign slot ('-' or ' ') and ``afterpoint`` decimals.

    The fractional digits are truncated, not rounded.
    """
    sign = "-" if n < 0 else " "
    n = abs(n)
    ipart = _to_int32(int(n))
    text = f"{sign}{ipart}"
    if afterpoint > 0:
        fpart = n - ipart
        digits = int(fpart * 10**afterpoint)
        text += "." + str(digits).zfill(afterpoint)
    return text


def read_line(stream: IO[str]) -> Optional[str]:
    """Read one line without its newline; return None at end of stream."""
    line = stream.readline()
    if not line:
        return None
    return line[:-1] if line.endswith("\n") else line


def read_all(stream: IO[str]) -> str:
    """Read everything left in ``stream``."""
    return stream.read()


def tokenize(line: str, delimiters: str) -> list[str]:
    """Split ``line`` on any of the ``delimiters`` characters, dropping empty tokens."""
    tokens: list[str] = []
    current: list[str] = []
    for ch in line:
        if ch in delimiters:
            if current:
                tokens.append("".join(current))
                current = []
        else:
            current.append(ch)
    if current:
        tokens.append("".join(current))
    return tokens


def _scan_int(text: Optional[str]) -> Optional[int]:
    if text is None:
        return None
    match = _INT_PATTERN.match(text)
    return int(match.group(1)) if match else None


def getnum(text: Optional[str]) -> int:
    """Parse a leading signed decimal integer; 0 when there is none."""
    value = _scan_int(text)
    return 0 if value is None else _to_int32(value)


def getnum_unsigned(text: Optional[str]) -> int:
    """Parse a leading decimal integer as a 32-bit unsigned value; 0 when there is none."""
    value = _scan_int(text)
    return 0 if value is None else value & _UINT_MASK


def readint(nmin: int, nmax: int, stream: Optional[IO[str]] = None) -> int:
    """Read integers from ``stream`` until one lies within [nmin, nmax].

    Characters that do not form a number are skipped. Raises EOFError when
    the stream ends first.
    """
    source = sys.stdin if stream is None else stream
    for line in source:
        for match in _ANY_INT.finditer(line):
            num = _to_int32(int(match.group()))
            if nmin <= num <= nmax:
                return num
    raise EOFError("no integer in range before end of input")


def mayia(xi: int, xf: int, nbits: int) -> int:
    """Pack the rising edges above the changed bits of two ``nbits``-wide samples."""
    mask = (1 << nbits) - 1
    xi &= mask
    xf &= mask
    changed = xf ^ xi
    rising = changed & xf
    return ((rising << nbits) | changed) & _UINT_MASK


def pinmatch(match: int, pin: int, hl: int) -> int:
    """Return ``match`` when all its pins are high (hl true) or all low (hl false), else 0."""
    result = match & pin
    if hl:
        return result if result == match else 0
    return 0 if result else match


def lh(xi: int, xf: int) -> int:
    """Bits that went from low to high."""
    return ((xf ^ xi) & xf) & _UINT_MASK


def hl(xi: int, xf: int) -> int:
    """Bits that went from high to low."""
    return ((xf ^ xi) & xi) & _UINT_MASK


def diff(xi: int, xf: int) -> int:
    """Bits that changed."""
    return (xi ^ xf) & _UINT_MASK


def print_binary(n_bits: int, number: int) -> str:
    """Render the low ``n_bits`` bits of ``number``, most significant first."""
    if n_bits < 1:
        raise ValueError("n_bits must be at least 1")
    return format(number & ((1 << n_bits) - 1), f"0{n_bits}b")


def decimal_binary(n: int) -> int:
    """Return the integer whose decimal digits spell the binary form of ``n``."""
    n &= _UINT_MASK
    if n == 0:
        return 0
    return int(format(n, "b")) & _UINT_MASK


def binary_decimal(n: int) -> int:
    """Interpret the decimal digits of ``n`` as binary positional weights."""
    n &= _UINT_MASK
    return sum(int(d) << i for i, d in enumerate(reversed(str(n)))) & _UINT_MASK


def sprintf(fmt: str, *args: object) -> str:
    """Format ``args`` with a printf-style format string."""
    return fmt % args