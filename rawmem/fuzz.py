"""Deterministic edge-case and random input generators for integer and float routines.

Integers are handled as unsigned bit patterns of a given width; floats as the
unsigned bit pattern of their IEEE 754 representation.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Iterator, Sequence

N = 10_000
"""Default number of random fuzz iterations."""

_U32 = (1 << 32) - 1
_U64 = (1 << 64) - 1


def _mask(bits: int) -> int:
    return (1 << bits) - 1


def _wrapping_shl(value: int, shift: int, bits: int) -> int:
    return (value << (shift % bits)) & _mask(bits)


def _wrapping_shr(value: int, shift: int, bits: int) -> int:
    return (value & _mask(bits)) >> (shift % bits)


def _rotate_left(value: int, shift: int, bits: int) -> int:
    shift %= bits
    value &= _mask(bits)
    if shift == 0:
        return value
    return ((value << shift) | (value >> (bits - shift))) & _mask(bits)


class _SplitMix64:
    """SplitMix64 generator, used only to expand a 64-bit seed."""

    def __init__(self, seed: int) -> None:
        self._state = seed & _U64

    def next_u64(self) -> int:
        self._state = (self._state + 0x9E3779B97F4A7C15) & _U64
        z = self._state
        z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & _U64
        z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & _U64
        return z ^ (z >> 31)


class Xoshiro128StarStar:
    """The xoshiro128** generator, seeded from a 64-bit integer through SplitMix64."""

    def __init__(self, seed: int) -> None:
        if not 0 <= seed <= _U64:
            raise ValueError(f"seed {seed} is not an unsigned 64-bit integer")
        expander = _SplitMix64(seed)
        seed_bytes = b"".join(expander.next_u64().to_bytes(8, "little") for _ in range(2))
        state = list(struct.unpack("<4I", seed_bytes))
        if not any(state):
            raise ValueError("seed expanded to an all-zero state")
        self._s = state

    def next_u32(self) -> int:
        """Return the next 32-bit output and advance the state."""
        s = self._s
        result = (_rotate_left((s[1] * 5) & _U32, 7, 32) * 9) & _U32
        t = (s[1] << 9) & _U32
        s[2] ^= s[0]
        s[3] ^= s[1]
        s[1] ^= s[2]
        s[0] ^= s[3]
        s[2] ^= t
        s[3] = _rotate_left(s[3], 11, 32)
        return result


@dataclass(frozen=True)
class FloatFormat:
    """Layout of a binary IEEE 754 floating-point format."""

    bits: int
    significand_bits: int
    struct_code: str = ""

    @property
    def exponent_bits(self) -> int:
        return self.bits - self.significand_bits - 1

    @property
    def significand_mask(self) -> int:
        return _mask(self.significand_bits)

    @property
    def exponent_mask(self) -> int:
        return _mask(self.exponent_bits) << self.significand_bits

    @property
    def sign_mask(self) -> int:
        return 1 << (self.bits - 1)

    def from_parts(self, sign: bool, exponent: int, significand: int) -> int:
        """Assemble a bit pattern from sign, biased exponent and significand."""
        return (
            (int(bool(sign)) << (self.bits - 1))
            | ((exponent << self.significand_bits) & self.exponent_mask)
            | (significand & self.significand_mask)
        )

    def to_float(self, repr_bits: int) -> float:
        """Interpret a bit pattern of this format as a Python float."""
        if not self.struct_code:
            raise ValueError(f"no native float for a {self.bits}-bit format")
        raw = (repr_bits & _mask(self.bits)).to_bytes(self.bits // 8, "little")
        return struct.unpack("<" + self.struct_code, raw)[0]

    def to_bits(self, value: float) -> int:
        """Bit pattern of ``value`` rounded to this format."""
        if not self.struct_code:
            raise ValueError(f"no native float for a {self.bits}-bit format")
        raw = struct.pack("<" + self.struct_code, value)
        return int.from_bytes(raw, "little")


F32 = FloatFormat(32, 23, "f")
F64 = FloatFormat(64, 52, "d")


def fuzz_step(rng: Xoshiro128StarStar, x: int, bits: int) -> int:
    """Return ``x`` mutated by randomly placed runs of ones and alternating bits."""
    ones = _mask(bits)
    index_mask = bits - 1
    rng32 = rng.next_u32()

    r0 = index_mask & rng32
    r1 = index_mask & (rng32 >> 7)
    mask = _rotate_left(_wrapping_shl(ones, r0, bits), r1, bits)
    selector = (rng32 >> 14) % 4
    if selector == 0:
        x |= mask
    elif selector == 1:
        x &= mask
    else:
        x ^= mask

    alt_ones = 1
    for _ in range(bits // 2):
        alt_ones = ((alt_ones << 2) | 1) & ones
    r0 = index_mask & (rng32 >> 16)
    r1 = index_mask & (rng32 >> 23)
    mask = _rotate_left(_wrapping_shl(alt_ones, r0, bits), r1, bits)
    selector = rng32 >> 30
    if selector == 0:
        x |= mask
    elif selector == 1:
        x &= mask
    else:
        x ^= mask
    return x & ones


def edge_cases(bits: int, lengths: Sequence[int]) -> Iterator[int]:
    """Yield contiguous runs of ones trimmed from both ends by the given lengths."""
    ones = _mask(bits)
    count = len(lengths)
    for i0 in range(count):
        mask_lo = _wrapping_shr(ones, lengths[i0], bits)
        for i1 in range(i0, count):
            mask_hi = _wrapping_shl(ones, lengths[i1 - i0], bits)
            yield mask_lo & mask_hi


def fuzz(n: int, bits: int, lengths: Sequence[int]) -> Iterator[int]:
    """Yield zero, the edge cases, then ``n`` random values."""
    yield 0
    yield from edge_cases(bits, lengths)
    rng = Xoshiro128StarStar(0)
    x = 0
    for _ in range(n):
        x = fuzz_step(rng, x, bits)
        yield x


def fuzz_2(n: int, bits: int, lengths: Sequence[int]) -> Iterator[tuple[int, int]]:
    """Yield pairs: edge cases against zero, all edge-case pairs, then ``n`` random pairs."""
    for case in edge_cases(bits, lengths):
        yield 0, case
    for case in edge_cases(bits, lengths):
        yield case, 0
    for case0 in edge_cases(bits, lengths):
        for case1 in edge_cases(bits, lengths):
            yield case0, case1
    rng = Xoshiro128StarStar(0)
    x = y = 0
    for _ in range(n):
        x = fuzz_step(rng, x, bits)
        y = fuzz_step(rng, y, bits)
        yield x, y


def fuzz_shift(bits: int, lengths: Sequence[int]) -> Iterator[tuple[int, int]]:
    """Yield (value, shift) pairs: each random value with shift 0 and with a fuzz length."""
    rng = Xoshiro128StarStar(0)
    x = 0
    for length in lengths:
        x = fuzz_step(rng, x, bits)
        yield x, 0
        yield x, length


def fuzz_float_step(rng: Xoshiro128StarStar, x: int, fmt: FloatFormat) -> int:
    """Return the bit pattern ``x`` with sign, exponent and significand fuzzed separately."""
    rng32 = rng.next_u32()
    sign = (rng32 & 1) != 0

    exp_bits = fmt.exponent_bits
    ones = _mask(exp_bits)
    r0 = (rng32 >> 1) % exp_bits
    r1 = (rng32 >> 5) % exp_bits
    tmp = _wrapping_shr(ones, r0, fmt.bits)
    if r1 == 0:
        mask = tmp
    else:
        mask = (
            _wrapping_shl(tmp, r1, fmt.bits) | _wrapping_shr(tmp, exp_bits - r1, fmt.bits)
        ) & ones
    exponent = (x & fmt.exponent_mask) >> fmt.significand_bits
    selector = (rng32 >> 9) % 4
    if selector == 0:
        exponent |= mask
    elif selector == 1:
        exponent &= mask
    else:
        exponent ^= mask

    significand = x & fmt.significand_mask
    significand = fuzz_step(rng, significand, fmt.bits) & fmt.significand_mask

    return fmt.from_parts(sign, exponent, significand)


def float_edge_cases(fmt: FloatFormat) -> Iterator[int]:
    """Yield bit patterns combining boundary exponents, significands and both signs."""
    eb = fmt.exponent_bits
    sb = fmt.significand_bits
    exponents = (
        0,
        1,
        1 << (eb // 2),
        (1 << (eb - 1)) - 1,
        1 << (eb - 1),
        (1 << (eb - 1)) + 1,
        (1 << eb) - 1,
    )
    significands = (
        0,
        1,
        1 << (sb // 2),
        (1 << (sb - 1)) - 1,
        1 << (sb - 1),
        (1 << (sb - 1)) + 1,
        (1 << sb) - 1,
    )
    for exponent in exponents:
        for significand in significands:
            for sign in (False, True):
                yield fmt.from_parts(sign, exponent, significand)


def fuzz_float(n: int, fmt: FloatFormat) -> Iterator[int]:
    """Yield float edge cases, then ``n`` random bit patterns."""
    yield from float_edge_cases(fmt)
    rng = Xoshiro128StarStar(0)
    x = 0
    for _ in range(n):
        x = fuzz_float_step(rng, x, fmt)
        yield x


def fuzz_float_2(n: int, fmt: FloatFormat) -> Iterator[tuple[int, int]]:
    """Yield all pairs of float edge cases, then ``n`` random pairs."""
    for case0 in float_edge_cases(fmt):
        for case1 in float_edge_cases(fmt):
            yield case0, case1
    rng = Xoshiro128StarStar(0)
    x = y = 0
    for _ in range(n):
        x = fuzz_float_step(rng, x, fmt)
        y = fuzz_float_step(rng, y, fmt)
        yield x, y