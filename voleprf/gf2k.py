"""Carry-less multiplication of 128-bit values over GF(2).

A 128-bit value is an integer ``(high << 64) | low``. The full product of two
such values has 256 bits and is returned as a ``(low, high)`` pair of 128-bit
halves. The pair is not reduced modulo any field polynomial.
"""

from __future__ import annotations

from collections.abc import Iterable

_MASK64 = (1 << 64) - 1
_MASK128 = (1 << 128) - 1


def _check(value: int, bits: int, name: str) -> int:
    if not 0 <= value < (1 << bits):
        raise ValueError(f"{name} must be an unsigned {bits}-bit integer, got {value!r}")
    return value


def clmul64(a: int, b: int) -> int:
    """Carry-less product of two 64-bit values, a value below 2**127."""
    _check(a, 64, "a")
    _check(b, 64, "b")
    result = 0
    while b:
        if b & 1:
            result ^= a
        a <<= 1
        b >>= 1
    return result


def mul128(a: int, b: int) -> tuple[int, int]:
    """Carry-less product of two 128-bit values as ``(low, high)`` halves."""
    _check(a, 128, "a")
    _check(b, 128, "b")
    a_low, a_high = a & _MASK64, a >> 64
    b_low, b_high = b & _MASK64, b >> 64

    low = clmul64(a_low, b_low)
    cross = clmul64(a_low, b_high) ^ clmul64(a_high, b_low)
    high = clmul64(a_high, b_high)

    low ^= (cross << 64) & _MASK128
    high ^= cross >> 64
    return low, high


def mul128_batch(pairs: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Carry-less products of several ``(a, b)`` pairs, in order."""
    return [mul128(a, b) for a, b in pairs]