"""Byte-buffer memory primitives: copy, move, fill, compare and string length."""

from __future__ import annotations

from dataclasses import dataclass

ELEMENT_SIZES = (1, 2, 4, 8, 16)


@dataclass(frozen=True, eq=False)
class Pointer:
    """A position inside a mutable byte buffer."""

    buffer: bytearray
    offset: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.offset <= len(self.buffer):
            raise IndexError(f"offset {self.offset} outside buffer of {len(self.buffer)} bytes")

    def __add__(self, offset: int) -> Pointer:
        return Pointer(self.buffer, self.offset + offset)

    def __sub__(self, offset: int) -> Pointer:
        return Pointer(self.buffer, self.offset - offset)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pointer):
            return NotImplemented
        return self.buffer is other.buffer and self.offset == other.offset

    def __hash__(self) -> int:
        return hash((id(self.buffer), self.offset))

    def _span(self, n: int) -> slice:
        if n < 0:
            raise ValueError(f"negative length {n}")
        end = self.offset + n
        if end > len(self.buffer):
            raise IndexError(
                f"access of {n} bytes at {self.offset} overruns buffer of {len(self.buffer)} bytes"
            )
        return slice(self.offset, end)

    def read(self, n: int) -> bytes:
        """Return the ``n`` bytes starting here."""
        return bytes(self.buffer[self._span(n)])

    def write(self, data: bytes) -> None:
        """Overwrite bytes starting here with ``data``."""
        self.buffer[self._span(len(data))] = data


def memcpy(dest: Pointer, src: Pointer, n: int) -> Pointer:
    """Copy ``n`` bytes from ``src`` to ``dest`` and return ``dest``."""
    dest.write(src.read(n))
    return dest


def memmove(dest: Pointer, src: Pointer, n: int) -> Pointer:
    """Copy ``n`` bytes that may overlap and return ``dest``."""
    # The source bytes are taken in full before any are written, so overlap is safe.
    dest.write(src.read(n))
    return dest


def memset(s: Pointer, c: int, n: int) -> Pointer:
    """Fill ``n`` bytes with the low byte of ``c`` and return ``s``."""
    s.write(bytes([c & 0xFF]) * n)
    return s


def memcmp(s1: Pointer, s2: Pointer, n: int) -> int:
    """Difference of the first unequal bytes, or 0 when the ranges match."""
    a, b = s1.read(n), s2.read(n)
    if a == b:
        return 0
    return next(x - y for x, y in zip(a, b) if x != y)


def bcmp(s1: Pointer, s2: Pointer, n: int) -> int:
    """Zero when the ranges match, non-zero otherwise."""
    return memcmp(s1, s2, n)


def strlen(s: Pointer) -> int:
    """Number of bytes before the first NUL byte."""
    end = s.buffer.find(0, s.offset)
    if end < 0:
        raise ValueError("no terminating NUL byte before end of buffer")
    return end - s.offset


def _element_count(nbytes: int, size: int) -> int:
    if size not in ELEMENT_SIZES:
        raise ValueError(f"element size {size} not one of {ELEMENT_SIZES}")
    count, rest = divmod(nbytes, size)
    if nbytes < 0 or rest:
        raise ValueError(f"{nbytes} bytes is not a whole number of {size}-byte elements")
    return count


def _copy_elements(dest: Pointer, src: Pointer, indices, size: int) -> None:
    for i in indices:
        (dest + i * size).write((src + i * size).read(size))


def memcpy_element_unordered_atomic(dest: Pointer, src: Pointer, nbytes: int, size: int) -> None:
    """Copy ``nbytes`` one ``size``-byte element at a time."""
    _copy_elements(dest, src, range(_element_count(nbytes, size)), size)


def memmove_element_unordered_atomic(dest: Pointer, src: Pointer, nbytes: int, size: int) -> None:
    """Move ``nbytes`` one element at a time, in the order overlap requires."""
    indices = range(_element_count(nbytes, size))
    if dest.buffer is src.buffer and src.offset < dest.offset:
        indices = reversed(indices)
    _copy_elements(dest, src, indices, size)


def memset_element_unordered_atomic(s: Pointer, c: int, nbytes: int, size: int) -> None:
    """Fill ``nbytes`` with byte ``c``, one ``size``-byte element at a time."""
    if not 0 <= c <= 0xFF:
        raise ValueError(f"fill byte {c} out of range")
    element = bytes([c]) * size
    for i in range(_element_count(nbytes, size)):
        (s + i * size).write(element)