import pytest
from hypothesis import given
from hypothesis import strategies as st

from voleprf.oprf_fp import (
    MODULUS,
    MODULUS_HIGH,
    MODULUS_LOW,
    MODULUS_MIDDLE,
    OprfFp,
    oprf_fp_add_mod,
)

MASK128 = (1 << 128) - 1
elements = st.integers(0, MODULUS - 1)


def split(value):
    return OprfFp(value >> 256, (value >> 128) & MASK128, value & MASK128)


def test_modulus_from_source_blocks():
    m = OprfFp.from_blocks(
        (18446744073709551615, 18446744073709551615),
        (18446744073709551615, 18446744073709518241),
        (0, 1),
    )
    assert m.to_int() == MODULUS
    assert m == OprfFp(MODULUS_HIGH, MODULUS_MIDDLE, MODULUS_LOW)


def test_modulus_str():
    m = OprfFp(MODULUS_HIGH, MODULUS_MIDDLE, MODULUS_LOW)
    assert str(m) == (
        "18446744073709551615 18446744073709551615 18446744073709551615 "
        "18446744073709518241 0 1"
    )


@given(st.integers(0, (1 << 384) - 1))
def test_to_int_round_trip(value):
    assert split(value).to_int() == value


@given(st.integers(0, MASK128), st.integers(0, MASK128), st.integers(0, MASK128))
def test_str_lists_halves(a, b, c):
    parts = [int(p) for p in str(OprfFp(a, b, c)).split()]
    assert len(parts) == 6
    assert parts[0] << 64 | parts[1] == a
    assert parts[2] << 64 | parts[3] == b
    assert parts[4] << 64 | parts[5] == c


def test_bound_at_modulus():
    assert split(MODULUS).bound() is False
    assert split(MODULUS - 1).bound() is True
    assert split(0).bound() is True


def test_reduce_modulus_gives_zero():
    m = split(MODULUS)
    m.reduce_mod()
    assert m.to_int() == 0


@given(elements)
def test_reduce_subtracts_modulus(value):
    x = split(value + MODULUS) if value + MODULUS < (1 << 384) else None
    if x is None:
        x = split((value + MODULUS) % (1 << 384))
    x.reduce_mod()
    assert x.to_int() == value


@given(elements, elements)
def test_add_mod_matches_field_sum(a, b):
    result = oprf_fp_add_mod(split(a), split(b))
    assert result.to_int() == (a + b) % MODULUS


@given(elements, elements)
def test_add_mod_commutes(a, b):
    assert oprf_fp_add_mod(split(a), split(b)) == oprf_fp_add_mod(split(b), split(a))


def test_add_wraps_to_zero():
    assert oprf_fp_add_mod(split(MODULUS - 1), split(1)).to_int() == 0


@given(elements)
def test_add_zero_is_identity(a):
    assert oprf_fp_add_mod(split(a), split(0)).to_int() == a


def test_add_leaves_operands_unchanged():
    left = split(MODULUS - 5)
    right = split(9)
    oprf_fp_add_mod(left, right)
    assert left.to_int() == MODULUS - 5
    assert right.to_int() == 9


@pytest.mark.parametrize("limbs", [(-1, 0, 0), (0, 1 << 128, 0), (0, 0, -3)])
def test_rejects_out_of_range_limbs(limbs):
    with pytest.raises(ValueError):
        OprfFp(*limbs)


def test_from_blocks_rejects_wide_half():
    with pytest.raises(ValueError):
        OprfFp.from_blocks((1 << 64, 0), (0, 0), (0, 0))