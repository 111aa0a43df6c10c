"""Interactive command loop for exercising the linked list."""

from __future__ import annotations

import argparse
import sys
from typing import IO, Optional, Sequence

from .functions import read_line
from .lili import LinkedList, RecordError

HELP_TEXT = (
    "Available commands:\n 1-quit\n 2-play\n 3-help\n 4-forward\n 5-reverse\n"
    " 6-record\n 7-remove\n 8-quant\n 9-status\n 10-replace\n 11-push\n"
    " 12-pop\n 13-non\n 14-free\n\n"
    "This program is a simple linked list testing sample\n"
)
_EMPTY_NOTICE = "Linked List EMPTY\n"


def _show(lst: LinkedList, out: IO[str]) -> None:
    if not lst:
        out.write(_EMPTY_NOTICE)
    out.write(f"data:\n{lst.play()}\n")


def run(stream: IO[str], out: IO[str]) -> int:
    """Read commands from ``stream`` until ``quit`` or end of input."""
    lst = LinkedList()
    while True:
        out.write("->->\twrite string:\n")
        cmd = read_line(stream)
        if cmd is None or cmd == "quit":
            break
        if cmd in ("play", "p"):
            _show(lst, out)
        elif cmd in ("help", "h"):
            out.write(HELP_TEXT)
        elif cmd in ("forward", "f"):
            lst.forward()
            _show(lst, out)
        elif cmd in ("reverse", "r"):
            lst.reverse()
            _show(lst, out)
        elif cmd in ("record", "rec"):
            out.write("enter input to record\n")
            data = read_line(stream)
            if data is None:
                break
            try:
                lst.record(data)
            except RecordError:
                out.write("Record only permitted at end of list, append only\n")
        elif cmd in ("remove", "rm"):
            if not lst:
                out.write(_EMPTY_NOTICE)
            lst.remove()
            _show(lst, out)
        elif cmd == "free":
            lst.clear()
        elif cmd in ("quant", "qt"):
            out.write(f"N:\n{lst.quant()}\n")
        elif cmd in ("replace", "subs"):
            out.write("enter input to substitute\n")
            data = read_line(stream)
            if data is None:
                break
            if not lst:
                out.write(_EMPTY_NOTICE)
            lst.replace(data)
        elif cmd == "push":
            out.write("enter input to push to list\n")
            data = read_line(stream)
            if data is None:
                break
            lst.push(data)
        elif cmd == "pop":
            if not lst:
                out.write(_EMPTY_NOTICE)
            out.write(f"data:\n{lst.pop()}\n")
    lst.clear()
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point: run the command loop on standard input and output."""
    parser = argparse.ArgumentParser(description="Linked list testing sample")
    parser.parse_args(argv)
    return run(sys.stdin, sys.stdout)