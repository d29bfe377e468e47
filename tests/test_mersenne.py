import pytest
from hypothesis import given
from hypothesis import strategies as st

from voleprf.mersenne import (
    PR,
    add_mod,
    block_add_mod,
    block_mod,
    block_mult_mod,
    extract_fp,
    mod,
    mod_pre,
    mul64,
    mult_mod,
    uni_hash_coeff_gen,
    vector_inn_prdt_sum_red,
)

MASK64 = (1 << 64) - 1
field = st.integers(0, PR - 1)
u64 = st.integers(0, MASK64)


def join(high, low):
    return (high << 64) | low


@given(u64, u64)
def test_mul64_halves_recombine(a, b):
    low, high = mul64(a, b)
    assert low + (high << 64) == a * b
    assert 0 <= low <= MASK64 and 0 <= high <= MASK64


@given(u64)
def test_mod_matches_remainder(x):
    assert mod(x) == x % PR


def test_mod_of_prime_and_max():
    assert mod(PR) == 0
    assert mod(MASK64) == 7


@given(st.integers(0, (1 << 122) - 1))
def test_mod_pre_is_congruent(x):
    res = mod_pre(x)
    assert res % PR == x % PR
    assert res < (1 << 62)


@given(field, field)
def test_mult_mod_is_field_product(a, b):
    assert mult_mod(a, b) == (a * b) % PR


@given(field, field)
def test_add_mod_is_field_sum(a, b):
    assert add_mod(a, b) == (a + b) % PR


@given(field, field, field)
def test_mult_mod_distributes(a, b, c):
    assert mult_mod(a, add_mod(b, c)) == add_mod(mult_mod(a, b), mult_mod(a, c))


@given(field, field, field)
def test_block_mult_mod_lanewise(x, y, b):
    assert block_mult_mod(join(x, y), b) == join(mult_mod(x, b), mult_mod(y, b))


@given(field, field, field, field)
def test_block_add_mod_lanewise(x1, y1, x2, y2):
    assert block_add_mod(join(x1, y1), join(x2, y2)) == join(
        add_mod(x1, x2), add_mod(y1, y2)
    )


@given(st.integers(0, (1 << 63) - 1), st.integers(0, (1 << 63) - 1))
def test_block_mod_reduces_lanes(x, y):
    assert block_mod(join(x, y)) == join(x % PR, y % PR)


def test_block_mod_prime_lane_becomes_zero():
    assert block_mod(join(PR, 5)) == join(0, 5)


@given(st.integers(0, (1 << 128) - 1))
def test_extract_fp_uses_low_lane(x):
    assert extract_fp(x) == (x & MASK64) % PR


@given(field, st.integers(1, 20))
def test_uni_hash_coeff_gen_powers(seed, size):
    coeffs = uni_hash_coeff_gen(seed, size)
    assert len(coeffs) == size
    assert coeffs == [pow(seed, i + 1, PR) for i in range(size)]


@given(st.lists(st.tuples(field, field), max_size=10))
def test_inner_product(pairs):
    a = [x for x, _ in pairs]
    b = [y for _, y in pairs]
    assert vector_inn_prdt_sum_red(a, b) == sum(x * y for x, y in pairs) % PR


def test_inner_product_of_empty_is_zero():
    assert vector_inn_prdt_sum_red([], []) == 0


def test_inner_product_length_mismatch():
    with pytest.raises(ValueError):
        vector_inn_prdt_sum_red([1, 2], [3])


def test_coeff_gen_rejects_empty():
    with pytest.raises(ValueError):
        uni_hash_coeff_gen(3, 0)


@pytest.mark.parametrize("a,b", [(-1, 2), (1 << 64, 1), (1, -5)])
def test_mult_mod_rejects_out_of_range(a, b):
    with pytest.raises(ValueError):
        mult_mod(a, b)


def test_block_rejects_oversized():
    with pytest.raises(ValueError):
        block_mod(1 << 128)