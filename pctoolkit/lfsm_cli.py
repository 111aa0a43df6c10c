"""Interactive command loop for teaching and running the learning state machine."""

from __future__ import annotations

import argparse
import random
import sys
from typing import IO, Optional, Sequence

from .ficheiro import Ficheiro
from .functions import getnum, getnum_unsigned, mayia, print_binary, read_line
from .lfsm import LearnStatus, Lfsm, ReadStatus, RemoveStatus

DEFAULT_SIZE = 128
DEFAULT_FILE = "file.txt"
_UINT_MASK = 0xFFFFFFFF

HELP_TEXT = (
    "Possible commands:\n"
    "\tquit - q\n"
    "\tlearn - l\n"
    "\thelp - h\n"
    "\thow many - n\n"
    "\tdelete all - d\n"
    "\tremove\n"
    "\toptions\n"
    "Page setting:\n"
    "\t1 is for global logic\n"
    "\tAbove 1 is for local logic\n"
    "Input procedure:\n"
    "\tProgram sequence is first desired input\n"
    "\tsecond is desired ouput\n"
    "\tthen select what page to store in refered as above.\n"
)
OPTIONS_TEXT = "learn or l\nquit or q\nhow many or n\ndelete all or d\nremove or r\noptions\n"

_READ_MESSAGES = {
    ReadStatus.NO_ENTRY: "LFSMread: [0] No entry\n",
    ReadStatus.GLOBAL: "LFSMread: [1] Global logic\n",
    ReadStatus.LOCAL: "LFSMread: [2] Local logic\n",
    ReadStatus.NOT_RECOGNIZED: "LFSMread: [3] Entry Not recognized\n",
}
_LEARN_MESSAGES = {
    LearnStatus.NO_OPERATION: "LFSMlearn: [0] No Operation.\n",
    LearnStatus.NOT_PERMITTED: "LFSMlearn: [1] Not permitted.\n",
    LearnStatus.ADDED: (
        "LFSMlearn: [2] Going to try add new program.\n"
        "LFSMlearn: [3] succesfully added.\n"
    ),
    LearnStatus.MEMORY_FULL: (
        "LFSMlearn: [2] Going to try add new program.\n"
        "LFSMlearn: [4] Memmory full.\n"
    ),
}
_REMOVE_MESSAGES = {
    RemoveStatus.NO_OPERATION: "LFSMremove: [0] No operation\n",
    RemoveStatus.REMOVED: "LFSMremove: [1] Removed: 1\n",
    RemoveStatus.NOT_FOUND: "LFSMremove: [2] Not existent: 2\n",
}


def _ask_number(prompt: str, stream: IO[str], out: IO[str]) -> Optional[int]:
    out.write(prompt)
    line = read_line(stream)
    if line is None:
        return None
    return getnum(line)


def _learn(machine: Lfsm, stream: IO[str], out: IO[str]) -> bool:
    values = []
    for prompt in ("enter input\n", "enter output data\n", "enter page\n"):
        value = _ask_number(prompt, stream, out)
        if value is None:
            return False
        values.append(value)
    number1, number2, number3 = values
    out.write(f"Entered values {number1} {number2} {number3}\n")
    status = machine.learn(number1 & _UINT_MASK, number2 & _UINT_MASK, number3 & _UINT_MASK)
    out.write(_LEARN_MESSAGES[status])
    return True


def _show_programs(machine: Lfsm, out: IO[str]) -> None:
    for entry in machine.mem:
        if not entry.is_empty:
            out.write(
                f"page:{entry.page} feedback:{entry.feedback} : "
                f"[ inhl:{entry.inhl} inlh:{entry.inlh} ] -- "
                f"[ outhl:{entry.outhl}  outlh:{entry.outlh} ]\n"
            )
    out.write(f"------ {machine.quant()} ------\n")


def _command_loop(machine: Lfsm, stream: IO[str], out: IO[str]) -> int:
    while True:
        out.write("write string with number or instruction : ")
        cmd = read_line(stream)
        if cmd is None:
            break
        number = getnum_unsigned(cmd)
        out.write(f"[Input ->  {print_binary(8, number)}  ]\n")
        if cmd in ("quit", "q"):
            break
        if cmd in ("learn", "l"):
            if not _learn(machine, stream, out):
                break
        elif cmd in ("how many", "n"):
            _show_programs(machine, out)
        elif cmd in ("delete all", "d"):
            machine.delete_all()
            out.write("LFSMdeleteall: Done\n")
        elif cmd in ("remove", "r"):
            value = _ask_number("enter input to remove\n", stream, out)
            if value is None:
                break
            out.write(_REMOVE_MESSAGES[machine.remove(value & _UINT_MASK)])
        elif cmd in ("help", "h"):
            out.write(HELP_TEXT)
        elif cmd in ("options", "o"):
            out.write(OPTIONS_TEXT)
        else:
            value = machine.read(number)
            out.write(_READ_MESSAGES[machine.last_read_status])
            out.write(f"\t\t\t\t\t[Output ->  {print_binary(8, value)}  ]\n")
    return 0


def run(stream: IO[str], out: IO[str]) -> int:
    """Read commands from ``stream`` until ``quit`` or end of input."""
    return _command_loop(Lfsm(DEFAULT_SIZE), stream, out)


def _file_demo(path: str, out: IO[str]) -> None:
    with Ficheiro() as f:
        f.open(path, "a+")
        out.write(f"Opening file {path}\n")
        f.putc(ord("A"))
        f.puts(" qualquer coisa\n")
        f.rewind()
        chunks = []
        while chunk := f.read(1, 4096):
            chunks.append(chunk)
    text = b"".join(chunks).decode("utf-8", errors="replace")
    out.write(f"string in file:\n{text}\n\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point: run a short demonstration, then the command loop on stdin."""
    parser = argparse.ArgumentParser(description="Learning finite-state machine console")
    parser.add_argument("--size", type=int, default=DEFAULT_SIZE, help="number of program slots")
    parser.add_argument("--file", default=DEFAULT_FILE, help="file used by the start-up demonstration")
    args = parser.parse_args(argv)
    out = sys.stdout
    out.write(f"Running program - {parser.prog} with - {len(argv or ()) + 1} arguments\n")
    machine = Lfsm(args.size)
    _file_demo(args.file, out)
    out.write("putstringtest: hello world\n")
    out.write("MAYIA\n")
    out.write(f"num1: 1 num2: 1 magic: {mayia(0, 1, 4)}\n")
    out.write(f"sizeeeprom: {machine.size}\n")
    out.write(f"randomize {random.randrange(2**31)}\n")
    return _command_loop(machine, sys.stdin, out)