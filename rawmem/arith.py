"""Integer multiplication built from shifts, additions and parity tests."""

U32_MAX = (1 << 32) - 1
U64_MAX = (1 << 64) - 1


def _shift_add_multiply(a: int, b: int, bits: int) -> int:
    """Multiply two unsigned ``bits``-wide integers, wrapping on overflow."""
    mask = (1 << bits) - 1
    for name, value in (("a", a), ("b", b)):
        if not 0 <= value <= mask:
            raise ValueError(f"{name}={value} is not an unsigned {bits}-bit integer")
    result = 0
    while a:
        if a & 1:
            result = (result + b) & mask
        a >>= 1
        b = (b << 1) & mask
    return result


def mulsi3(a: int, b: int) -> int:
    """Wrapping product of two unsigned 32-bit integers."""
    return _shift_add_multiply(a, b, 32)


def muldi3(a: int, b: int) -> int:
    """Wrapping product of two unsigned 64-bit integers."""
    return _shift_add_multiply(a, b, 64)