"""Elements of the 384-bit prime field used by the OPRF.

An element is stored as three 128-bit limbs, most significant first.
"""

from __future__ import annotations

from dataclasses import dataclass

_MASK64 = (1 << 64) - 1
_MASK128 = (1 << 128) - 1

MODULUS_HIGH = (18446744073709551615 << 64) | 18446744073709551615
MODULUS_MIDDLE = (18446744073709551615 << 64) | 18446744073709518241
MODULUS_LOW = (0 << 64) | 1
MODULUS = (MODULUS_HIGH << 256) | (MODULUS_MIDDLE << 128) | MODULUS_LOW


def _check_limb(value: int, name: str) -> None:
    if not 0 <= value <= _MASK128:
        raise ValueError(f"{name} limb must be an unsigned 128-bit integer, got {value!r}")


@dataclass
class OprfFp:
    """A 384-bit value held as high, middle and low 128-bit limbs."""

    high: int
    middle: int
    low: int

    def __post_init__(self) -> None:
        _check_limb(self.high, "high")
        _check_limb(self.middle, "middle")
        _check_limb(self.low, "low")

    @classmethod
    def from_blocks(
        cls, a: tuple[int, int], b: tuple[int, int], c: tuple[int, int]
    ) -> OprfFp:
        """Build from three (high64, low64) pairs, most significant first."""
        limbs = []
        for pair in (a, b, c):
            high, low = pair
            if not (0 <= high <= _MASK64 and 0 <= low <= _MASK64):
                raise ValueError(f"block halves must be unsigned 64-bit integers: {pair!r}")
            limbs.append((high << 64) | low)
        return cls(*limbs)

    def bound(self) -> bool:
        """Tell whether the value lies below the modulus."""
        below_high = self.high < MODULUS_HIGH
        below_middle = self.middle < MODULUS_MIDDLE
        below_low = self.low < MODULUS_LOW
        equal_middle = self.middle == MODULUS_MIDDLE
        return below_high or below_middle or (equal_middle and below_low)

    def reduce_mod(self) -> None:
        """Subtract the modulus once, wrapping at 384 bits."""
        borrow = self.low < MODULUS_LOW
        self.low = (self.low - MODULUS_LOW) & _MASK128
        if borrow:
            if self.middle != 0:
                borrow = False
            self.middle = (self.middle - 1) & _MASK128
        if self.middle < MODULUS_MIDDLE:
            borrow = True
        self.middle = (self.middle - MODULUS_MIDDLE) & _MASK128
        if borrow:
            self.high = (self.high - 1) & _MASK128
        self.high = (self.high - MODULUS_HIGH) & _MASK128

    def to_int(self) -> int:
        """The value as one integer."""
        return (self.high << 256) | (self.middle << 128) | self.low

    def __str__(self) -> str:
        return " ".join(
            str(part)
            for limb in (self.high, self.middle, self.low)
            for part in (limb >> 64, limb & _MASK64)
        )


def oprf_fp_add_mod(left: OprfFp, right: OprfFp) -> OprfFp:
    """Sum of two field elements modulo the 384-bit prime."""
    low = (left.low + right.low) & _MASK128
    carry_low = low < max(left.low, right.low)

    middle = (left.middle + right.middle) & _MASK128
    carry_middle = middle < max(left.middle, right.middle)
    if carry_low:
        middle = (middle + 1) & _MASK128
        if middle == 0:
            carry_middle = True

    high = (left.high + right.high) & _MASK128
    carry_high = high < max(left.high, right.high)
    if carry_middle:
        high = (high + 1) & _MASK128
        if high == 0:
            carry_high = True

    result = OprfFp(high, middle, low)
    if carry_high or not result.bound():
        result.reduce_mod()
    return result