"""Arithmetic modulo the Mersenne prime 2**61 - 1.

Scalars are unsigned 64-bit integers. A "block" is a 128-bit integer made of
two 64-bit lanes, ``(high << 64) | low``, and block operations work on each
lane separately. Lane arithmetic wraps at 64 bits. The final conditional
subtraction on blocks compares lanes as signed 64-bit values.
"""

from __future__ import annotations

from collections.abc import Sequence

MERSENNE_PRIME_EXP = 61
PR = (1 << MERSENNE_PRIME_EXP) - 1

_MASK64 = (1 << 64) - 1
_SIGN64 = 1 << 63


def _check(value: int, bits: int, name: str) -> int:
    if not 0 <= value < (1 << bits):
        raise ValueError(f"{name} must be an unsigned {bits}-bit integer, got {value!r}")
    return value


def _lanes(block: int) -> tuple[int, int]:
    _check(block, 128, "block")
    return block >> 64, block & _MASK64


def _join(high: int, low: int) -> int:
    return (high << 64) | low


def _partial_mod_lane(lane: int) -> int:
    signed = lane - (1 << 64) if lane & _SIGN64 else lane
    return (lane - PR) & _MASK64 if signed >= PR else lane


def _fold(low: int, high: int) -> int:
    """Combine the halves of a 128-bit product into a value below 2**64."""
    return ((low & PR) + ((low >> MERSENNE_PRIME_EXP) ^ ((high << (64 - MERSENNE_PRIME_EXP)) & _MASK64))) & _MASK64


def mul64(a: int, b: int) -> tuple[int, int]:
    """Multiply two 64-bit values; return the (low, high) 64-bit halves."""
    _check(a, 64, "a")
    _check(b, 64, "b")
    product = a * b
    return product & _MASK64, product >> 64


def mod_pre(x: int) -> int:
    """One folding step of a 128-bit value, truncated to 64 bits."""
    _check(x, 128, "x")
    return ((x & PR) + (x >> MERSENNE_PRIME_EXP)) & _MASK64


def mod(x: int) -> int:
    """Fold ``x`` once and subtract the prime if needed.

    For any 64-bit ``x`` the result is ``x`` reduced modulo the prime.
    """
    _check(x, 128, "x")
    folded = (x & PR) + (x >> MERSENNE_PRIME_EXP)
    return folded - PR if folded >= PR else folded


def mult_mod(a: int, b: int) -> int:
    """Product of two field elements modulo the prime."""
    low, high = mul64(a, b)
    res = _fold(low, high)
    return res - PR if res >= PR else res


def add_mod(a: int, b: int) -> int:
    """Sum of two field elements modulo the prime."""
    _check(a, 64, "a")
    _check(b, 64, "b")
    res = (a + b) & _MASK64
    return res - PR if res >= PR else res


def block_mult_mod(block: int, b: int) -> int:
    """Multiply both lanes of ``block`` by the scalar ``b`` modulo the prime."""
    _check(b, 64, "b")
    lanes = _lanes(block)
    result = []
    for lane in lanes:
        low, high = mul64(lane, b)
        result.append(_partial_mod_lane(_fold(low, high)))
    return _join(*result)


def block_add_mod(a: int, b: int) -> int:
    """Lane-wise sum of two blocks modulo the prime.

    To add one scalar ``s`` to both lanes pass ``(s << 64) | s`` as ``b``.
    """
    a_lanes = _lanes(a)
    b_lanes = _lanes(b)
    return _join(
        *(_partial_mod_lane((x + y) & _MASK64) for x, y in zip(a_lanes, b_lanes))
    )


def block_mod(block: int) -> int:
    """Lane-wise folding reduction of a block."""
    return _join(
        *(
            _partial_mod_lane(((lane & PR) + (lane >> MERSENNE_PRIME_EXP)) & _MASK64)
            for lane in _lanes(block)
        )
    )


def extract_fp(x: int) -> int:
    """Reduce the low 64-bit lane of a 128-bit value."""
    _check(x, 128, "x")
    return mod(x & _MASK64)


def uni_hash_coeff_gen(seed: int, size: int) -> list[int]:
    """Return the powers ``seed, seed**2, ..., seed**size`` modulo the prime."""
    _check(seed, 64, "seed")
    if size < 1:
        raise ValueError(f"size must be at least 1, got {size}")
    coeffs = [seed]
    for _ in range(size - 1):
        coeffs.append(mult_mod(coeffs[-1], seed))
    return coeffs


def vector_inn_prdt_sum_red(a: Sequence[int], b: Sequence[int]) -> int:
    """Inner product of two vectors of field elements modulo the prime."""
    if len(a) != len(b):
        raise ValueError(f"vectors differ in length: {len(a)} and {len(b)}")
    total = 0
    for x, y in zip(a, b):
        total = add_mod(total, mult_mod(x, y))
    return total