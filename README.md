# pctoolkit

Small, dependency-free helpers for working with bit patterns and simple data
structures. Every module uses only the standard library.

## Modules

- `pctoolkit.functions`: string and number helpers.
  - Strings: `string_length`, `reverse`, `strflip`, `tokenize`, and `ftoa`.
    `ftoa` renders a single-precision float as a sign character (`' '` or
    `'-'`), the integer part and truncated fractional digits.
  - Parsing: `getnum` and `getnumv2` return the leading integer of a string,
    or 0 when there is none. `getnum` returns it as a signed 32-bit value and
    `getnumv2` as an unsigned 32-bit value.
  - Streams: `read_line` and `read_all` return `None` once the stream is
    exhausted. `read_int(nmin, nmax, stream)` keeps reading until it finds an
    integer in range, and raises `EOFError` if the stream ends first.
  - Bits: `lh`, `hl` and `diff` give the bits that rose, fell and changed.
    `pinmatch` tests a set of bits for high or low. `print_binary`,
    `decimal_binary` and `binary_decimal` convert between forms.
  - Formatting: `format_c` applies printf-style formatting and raises
    `ValueError` on a bad format.
- `pctoolkit.explode`: the `Explode` dataclass keeps the previous (`xi`) and
  current (`xf`) pattern and their transitions `hl`, `lh`, `hh` and `ll`.
  - `update(x)` shifts in a new pattern.
  - `mayia(nbits)` packs the rising bits above the changed bits.
  - `read()` returns a copy of the state.
- `pctoolkit.circbuffer`: two byte ring buffers.
  - `CircularBuffer` overwrites unread data and always writes a zero after the
    last byte. It offers `get`, `put`, `gets` and `puts`.
  - `BoundedCircularBuffer` holds at most `size - 1` bytes. `put` returns
    `False` when the buffer is full, and `put_string` returns how many
    characters were stored. `get` returns 0 when the buffer is empty.
- `pctoolkit.lfsm`: `Lfsm`, a learning finite state machine. It keeps a
  fixed-size memory of `LfsmEntry` records, each mapping an input transition
  to an output transition.
  - Entries on page 1 (`GLOBAL_PAGE`) are global. Entries on higher pages are
    local: they apply only when the output they were learned from is the
    current output.
  - Methods: `read`, `learn` (returns a `LearnStatus`), `remove` (returns a
    `RemoveStatus`), `quant`, `delete_all` and `validate`.
  - Module-level helpers: `lh`, `hl`, `diff` and `output_calc`.
- `pctoolkit.lili`: `LinkedList`, a doubly linked list of strings of at most
  255 characters, with a cursor.
  - Methods: `play`, `forward`, `reverse`, `record`, `insert`, `replace`,
    `push`, `pop`, `remove`, `clear`, `quant`, plus `len()` and iteration.
  - `record` appends only while the cursor is on the last element; otherwise
    it raises `ValueError`.
  - Operations that need an element raise `EmptyListError` on an empty list.
- `pctoolkit.ficheiro`: `FileHandle`, a binary file wrapper with stdio-style
  permissions (`"r"`, `"w+"`, `"ab"`, ...).
  - Methods: `open`, `close`, `putc`, `puts`, `read(size, nmemb)`, `write`,
    `rewind`, `seek(whence, offset)` and `fileno`.
  - If the file cannot be opened with the requested permission, it is created
    with `"a+"` and opened again.
  - It works as a context manager and closes the file on exit.

## Examples

```python
from pctoolkit.functions import print_binary, ftoa, tokenize, lh, hl

print(print_binary(8, 5))              # '00000101'
print(ftoa(3.75, 2))                   # ' 3.75'
print(tokenize("a, b,,c", ", "))       # ['a', 'b', 'c']
print(lh(0b0101, 0b0110), hl(0b0101, 0b0110))   # 2 1
```

```python
from pctoolkit.explode import Explode

ex = Explode()
ex.update(0b0011)
ex.update(0b0110)
state = ex.read()
print(state.lh, state.hl, state.hh)    # 4 1 2
```

```python
from pctoolkit.circbuffer import BoundedCircularBuffer, CircularBuffer

bounded = BoundedCircularBuffer(4)
print(bounded.put_string("abcd"))      # 3 (the fourth does not fit)
print(bounded.get())                   # 97

ring = CircularBuffer(8)
ring.puts("hi")
print(ring.gets())                     # 'hi'
```

```python
from pctoolkit.lfsm import Lfsm, LearnStatus

machine = Lfsm(8)
assert machine.learn(0b1, 0b10, 1) is LearnStatus.ADDED
print(machine.read(0b1))               # 2
print(machine.quant())                 # 1
```

```python
from pctoolkit.lili import LinkedList

items = LinkedList()
items.record("first")
items.record("second")
items.reverse()
print(items.play())    # 'first'
print(list(items))     # ['first', 'second']
```

```python
from pctoolkit.ficheiro import FileHandle

with FileHandle() as fh:
    fh.open("notes.bin", "w+")
    fh.puts("hello")
    fh.rewind()
    print(fh.read(1, 5))   # b'hello'
```

## What it does not do

This is a library only. It has no command-line program and no interactive
prompt. The state machine memory and the linked list live in memory and are
not saved anywhere.

## Running the tests

```
pip install .[test]
pytest
```