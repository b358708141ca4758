import pytest

from rawmem.arith import U32_MAX, U64_MAX, muldi3, mulsi3


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (0, 0, 0),
        (0, 12345, 0),
        (1, 12345, 12345),
        (3, 7, 21),
        (12345, 6789, 83810205),
        (0x10000, 0x10000, 0),
        (U32_MAX, 2, 0xFFFFFFFE),
        (U32_MAX, U32_MAX, 1),
        (0x80000000, 2, 0),
    ],
)
def test_mulsi3_values(a, b, expected):
    assert mulsi3(a, b) == expected


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (0, U64_MAX, 0),
        (6, 7, 42),
        (12345, 6789, 83810205),
        (0x100000000, 0x100000000, 0),
        (0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFE00000001),
        (U64_MAX, U64_MAX, 1),
        (1 << 63, 2, 0),
        (U64_MAX, 3, 0xFFFFFFFFFFFFFFFD),
    ],
)
def test_muldi3_values(a, b, expected):
    assert muldi3(a, b) == expected


@pytest.mark.parametrize(
    "a, b",
    [(3, 5), (0xDEAD, 0xBEEF), (0x12345678, 0x9ABCDEF0), (U32_MAX, 0x55555555)],
)
def test_mulsi3_commutes(a, b):
    assert mulsi3(a, b) == mulsi3(b, a)


def test_muldi3_distributes_over_small_sum():
    a, b, c = 0x0123456789ABCDEF, 1000, 24
    assert muldi3(a, b + c) == (muldi3(a, b) + muldi3(a, c)) & U64_MAX


@pytest.mark.parametrize("a, b", [(-1, 2), (2, -1), (1 << 32, 1)])
def test_mulsi3_rejects_out_of_range(a, b):
    with pytest.raises(ValueError):
        mulsi3(a, b)


def test_muldi3_rejects_out_of_range():
    with pytest.raises(ValueError):
        muldi3(1 << 64, 1)