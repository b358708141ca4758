import pytest

from rawmem.fuzz import (
    F32,
    F64,
    FloatFormat,
    Xoshiro128StarStar,
    edge_cases,
    float_edge_cases,
    fuzz,
    fuzz_2,
    fuzz_float,
    fuzz_float_2,
    fuzz_float_step,
    fuzz_shift,
    fuzz_step,
)

U16_LENGTHS = (0, 1, 2, 7, 8, 13, 14, 15)

EXPECTED_U16 = [
    0x0000,
    0xFFFF, 0xFFFE, 0xFFFC, 0xFF80, 0xFF00, 0xE000, 0xC000, 0x8000,
    0x7FFF, 0x7FFE, 0x7FFC, 0x7F80, 0x7F00, 0x6000, 0x4000,
    0x3FFF, 0x3FFE, 0x3FFC, 0x3F80, 0x3F00, 0x2000,
    0x01FF, 0x01FE, 0x01FC, 0x0180, 0x0100,
    0x00FF, 0x00FE, 0x00FC, 0x0080,
    0x0007, 0x0006, 0x0004,
    0x0003, 0x0002,
    0x0001,
    0x15A0, 0xC65A, 0x994F, 0xD51A, 0x0111, 0x8000, 0xC005, 0xCF55, 0xC5FF,
]


def test_fuzz_values_u16():
    values = list(fuzz(10, 16, U16_LENGTHS))
    assert len(values) == 47
    assert values[: len(EXPECTED_U16)] == EXPECTED_U16
    assert 0 <= values[-1] <= 0xFFFF


def test_edge_cases_count_and_first_row():
    cases = list(edge_cases(16, U16_LENGTHS))
    assert len(cases) == 36
    assert cases[:8] == [0xFFFF, 0xFFFE, 0xFFFC, 0xFF80, 0xFF00, 0xE000, 0xC000, 0x8000]
    assert cases[-1] == 1


def test_rng_is_deterministic():
    a = Xoshiro128StarStar(0)
    b = Xoshiro128StarStar(0)
    seq_a = [a.next_u32() for _ in range(20)]
    seq_b = [b.next_u32() for _ in range(20)]
    assert seq_a == seq_b
    assert all(0 <= v < 2**32 for v in seq_a)


def test_rng_seed_changes_sequence():
    a = Xoshiro128StarStar(0)
    b = Xoshiro128StarStar(1)
    assert [a.next_u32() for _ in range(8)] != [b.next_u32() for _ in range(8)]


@pytest.mark.parametrize("seed", [-1, 2**64])
def test_rng_rejects_bad_seed(seed):
    with pytest.raises(ValueError):
        Xoshiro128StarStar(seed)


@pytest.mark.parametrize("bits", [8, 16, 32, 64, 128])
def test_fuzz_step_stays_in_width(bits):
    rng = Xoshiro128StarStar(0)
    x = 0
    for _ in range(200):
        x = fuzz_step(rng, x, bits)
        assert 0 <= x < 2**bits


def test_fuzz_2_structure():
    pairs = list(fuzz_2(5, 16, U16_LENGTHS))
    assert len(pairs) == 36 + 36 + 36 * 36 + 5
    cases = list(edge_cases(16, U16_LENGTHS))
    assert pairs[:36] == [(0, c) for c in cases]
    assert pairs[36:72] == [(c, 0) for c in cases]
    assert pairs[72] == (cases[0], cases[0])


def test_fuzz_shift_pairs():
    pairs = list(fuzz_shift(16, U16_LENGTHS))
    assert len(pairs) == 2 * len(U16_LENGTHS)
    assert [s for _, s in pairs[0::2]] == [0] * len(U16_LENGTHS)
    assert [s for _, s in pairs[1::2]] == list(U16_LENGTHS)
    assert [x for x, _ in pairs[0::2]] == [x for x, _ in pairs[1::2]]
    assert pairs[0][0] == 0x15A0


def test_from_parts_known_patterns():
    assert F32.from_parts(False, 127, 0) == 0x3F800000
    assert F32.from_parts(True, 127, 0) == 0xBF800000
    assert F64.from_parts(False, 1023, 0) == 0x3FF0000000000000
    assert F32.to_float(F32.from_parts(False, 128, 0)) == 2.0


def test_from_parts_masks_fields():
    assert F32.from_parts(False, 0x1FF, 0) == 0x7F800000
    assert F32.from_parts(False, 0, 0xFFFFFFFF) == 0x007FFFFF


def test_float_format_round_trip():
    assert F32.to_float(F32.to_bits(1.5)) == 1.5
    assert F64.to_bits(F64.to_float(0x4009_21FB_5444_2D18)) == 0x400921FB54442D18


def test_format_without_native_float():
    half = FloatFormat(16, 10)
    assert half.exponent_bits == 5
    with pytest.raises(ValueError):
        half.to_float(0)


def test_float_edge_cases_f32():
    cases = list(float_edge_cases(F32))
    assert len(cases) == 98
    assert cases[0] == 0x00000000
    assert cases[1] == 0x80000000
    assert 0x3F800000 in cases
    assert 0x7F800000 in cases
    assert cases[-1] == 0xFFFFFFFF


def test_fuzz_float_step_stays_in_width():
    rng = Xoshiro128StarStar(0)
    x = 0
    for _ in range(200):
        x = fuzz_float_step(rng, x, F64)
        assert 0 <= x < 2**64


def test_fuzz_float_counts_and_determinism():
    first = list(fuzz_float(20, F32))
    second = list(fuzz_float(20, F32))
    assert len(first) == 98 + 20
    assert first == second
    assert first[:98] == list(float_edge_cases(F32))


def test_fuzz_float_2_counts():
    pairs = list(fuzz_float_2(3, F32))
    assert len(pairs) == 98 * 98 + 3
    assert pairs[0] == (0, 0)
    assert pairs[1] == (0, 0x80000000)