# pctoolkit

A set of small utilities with no third-party dependencies.

- `pctoolkit.functions`: bit-transition helpers (`lh`, `hl`, `diff`, `mayia`,
  `pinmatch`), number and string conversions (`print_binary`, `decimal_binary`,
  `binary_decimal`, `ftoa`, `reverse`, `sprintf`), and input helpers (`read_line`,
  `read_all`, `tokenize`, `getnum`, `getnum_unsigned`, `readint`). Results of the
  bit helpers are kept to 32-bit unsigned values.
- `pctoolkit.explode`: `Explode` keeps the previous and current value of a pin
  word. It works out which bits went high-to-low, which went low-to-high, which
  stayed high and which stayed low. `read()` returns an immutable `ExplodeState`
  snapshot.
- `pctoolkit.ringbuffer`: `RingBuffer(size)` is a fixed-size byte FIFO that holds
  at most `size - 1` items. `put()` returns `False` and drops the byte when the
  buffer is full. `get()` returns 0 when it is empty.
- `pctoolkit.lfsm`: `Lfsm(size)` is a learning finite-state machine with `size`
  program slots. Each program is keyed on an input edge. Page 1 holds global
  logic. Pages 2 and up hold local logic, which applies only when the current
  output equals the output recorded at learning time. `learn()`, `remove()` and
  the last `read()` report `LearnStatus`, `RemoveStatus` and `ReadStatus` values.
- `pctoolkit.lili`: `LinkedList` is a list of strings with a cursor.
  - `record()` appends only while the cursor is at the newest entry. Otherwise it
    raises `RecordError`.
  - `push()` always appends and moves the cursor onto the new entry.
  - `pop()` removes the newest entry.
  - `play()` returns the entry under the cursor, or `"empty"` when the list is
    empty.
- `pctoolkit.ficheiro`: `Ficheiro` wraps one open binary file and offers
  stdio-style calls: `putc`, `puts`, `read(size, nmemb)`, `write`, `rewind`,
  `seek`, `tell` and `fileno`. It can be used as a context manager. If the file
  cannot be opened with the requested permission, it is first created with `"a+"`
  and then opened again with the requested permission.

## Installation

```
pip install .
```

## Examples

```python
from pctoolkit.functions import lh, hl, print_binary
from pctoolkit.lfsm import Lfsm

print(print_binary(8, 5))      # 00000101
print(lh(0b0011, 0b0110))      # bits that rose: 4
print(hl(0b0011, 0b0110))      # bits that fell: 1

machine = Lfsm(128)
machine.learn(1, 2, 1)         # on input edge 0 -> 1, move output to 2 (global page)
print(machine.read(1))         # 2
```

```python
from pctoolkit.lili import LinkedList

items = LinkedList()
items.record("first")
items.record("second")
items.reverse()
print(items.play())            # first
print(len(items))              # 2
```

```python
from pctoolkit.ringbuffer import RingBuffer

buf = RingBuffer(4)
for byte in (1, 2, 3, 4):
    buf.put(byte)              # the fourth put returns False
print(len(buf), buf.get())     # 3 1
```

## Command line

There are two interactive programs. Each reads commands from standard input, one
per line, and stops on `quit` or at the end of input.

```
pctoolkit-lili
pctoolkit-lfsm
```

`pctoolkit-lili` works on a linked list. It accepts these commands:

- `play` (`p`), `forward` (`f`), `reverse` (`r`)
- `record` (`rec`), `remove` (`rm`), `free`, `quant` (`qt`)
- `replace` (`subs`), `push`, `pop`
- `help` (`h`), `quit`

`pctoolkit-lfsm` trains and queries the state machine. It accepts these commands:

- `learn` (`l`): asks for an input, an output and a page.
- `how many` (`n`), `delete all` (`d`), `remove` (`r`)
- `options` (`o`), `help` (`h`), `quit` (`q`)

Any other line is read as a number and fed to the machine as input. The new
output is then printed in binary.

Before the command loop starts, `pctoolkit-lfsm` runs a short demonstration: it
appends `A qualquer coisa` to a file and prints the file back. It also takes two
options:

- `--file`: the file the demonstration uses. The default is `file.txt` in the
  current directory.
- `--size`: the number of program slots. The default is 128.

## Limitations

Learned programs live only in memory. `Lfsm` and `pctoolkit-lfsm` neither save
the program slots nor load them from disk, so they are lost when the process ends.

## Tests

```
pip install .[test]
pytest
```