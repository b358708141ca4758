# rawmem

`rawmem` provides the classic C memory routines over Python `bytearray`
buffers. It also has shift-and-add integer multiplication and deterministic
generators for integer and floating-point test inputs.

It is a library only. It has no command-line tool. It works on Python
buffers, never on the memory of a process.

## Installation

```
pip install .
```

To install the test dependencies and run the tests:

```
pip install ".[test]"
pytest
```

## Memory routines (`rawmem.memory`)

A `Pointer` is a position (`offset`) inside a `buffer`. It raises
`IndexError` if the offset falls outside the buffer. Adding or subtracting an
integer gives a new `Pointer` into the same buffer. `read(n)` returns the `n`
bytes that start at the pointer. `write(data)` overwrites bytes starting at
the pointer. Any access that runs past the end of the buffer raises
`IndexError`, and a negative length raises `ValueError`. Two pointers are
equal when they refer to the same buffer object at the same offset.

```python
from rawmem.memory import Pointer, memcpy, memmove, memset, memcmp, strlen

buf = bytearray(range(12))
base = Pointer(buf)

memmove(base + 3, base + 6, 5)   # overlapping ranges are handled
memset(base + 5, 0x2000, 2)      # only the low byte of c is used
memcmp(Pointer(bytearray(b"abc")), Pointer(bytearray(b"abd")), 3)   # -1
strlen(Pointer(bytearray(b"hello\0world")))                         # 5
```

- `memcpy(dest, src, n)`, `memmove(dest, src, n)` and `memset(s, c, n)`
  return the destination pointer.
- `memcmp(s1, s2, n)` and `bcmp(s1, s2, n)` return the difference between
  the first pair of bytes that differ, or `0` if all `n` bytes match.
- `strlen(s)` counts the bytes before the first NUL byte. It raises
  `ValueError` if the buffer has no NUL byte after `s`.

The element-wise routines copy, move or fill one element at a time:
`memcpy_element_unordered_atomic(dest, src, nbytes, size)`,
`memmove_element_unordered_atomic(dest, src, nbytes, size)` and
`memset_element_unordered_atomic(s, c, nbytes, size)`. The element `size`
must be one of `ELEMENT_SIZES` (1, 2, 4, 8 or 16), and `nbytes` must be a
whole multiple of it. Otherwise they raise `ValueError`. The fill byte `c`
must be between 0 and 255. These routines return `None`.

## Software multiplication (`rawmem.arith`)

`mulsi3(a, b)` and `muldi3(a, b)` multiply two unsigned integers using only
doubling, halving, parity tests and addition. The product wraps at 32 and 64
bits respectively. An operand outside the unsigned range raises
`ValueError`.

## Fuzzing helpers (`rawmem.fuzz`)

Integers are unsigned bit patterns of a given width. Floats are the bit
patterns of their IEEE 754 form. Every random sequence comes from a
`Xoshiro128StarStar` generator seeded with `0`, so each run gives the same
values. `N` (10 000) is a suggested number of random iterations.

- `fuzz(n, bits, lengths)` yields zero, then the edge cases from
  `edge_cases(bits, lengths)`, then `n` random values made by `fuzz_step`.
  The edge cases are runs of ones trimmed from both ends by the given
  lengths.
- `fuzz_2(n, bits, lengths)` yields pairs. It starts with edge cases paired
  with zero on either side, then every pair of edge cases, then `n` random
  pairs.
- `fuzz_shift(bits, lengths)` yields `(value, 0)` and `(value, length)` for
  each length, with a new random value for each length.
- `FloatFormat` describes a binary float layout. `F32` and `F64` are
  predefined. `from_parts(sign, exponent, significand)` builds a bit pattern
  from its parts, and `to_float` and `to_bits` convert between bit patterns
  and Python floats.
- `fuzz_float(n, fmt)` yields the boundary patterns from
  `float_edge_cases(fmt)`, then `n` random patterns made by
  `fuzz_float_step`. `fuzz_float_2(n, fmt)` yields pairs in the same way.

```python
from rawmem.fuzz import F32, fuzz, fuzz_float

values = list(fuzz(10, 16, [0, 1, 2, 7, 8, 9, 13, 14, 15]))
floats = [F32.to_float(bits) for bits in fuzz_float(100, F32)]
```