# voleprf

Arithmetic and permutation primitives used by VOLE-based oblivious PRF and
zero-knowledge protocols, in plain Python with no third-party dependencies.

## Installation

```
pip install .
```

Install with `pip install .[test]` to get the test requirements, then run the
suite with `pytest`.

## What is inside

### `voleprf.keccak_permutation`

The Keccak-p[1600] permutation over a state of 25 little-endian 64-bit lanes,
lane `x + 5 * y` holding column `x`, row `y`.

- `rol64(value, shift)`: rotates a 64-bit word left.
- `keccak_round(lanes, round_index)`: applies round `round_index` (0 to 23):
  theta, rho, pi, chi, iota. Returns the new state.
- `keccak_p1600(lanes, rounds=24)`: applies the last `rounds` rounds (0 to 24)
  of Keccak-f[1600] and returns the new state.

Both raise `ValueError` for a state that is not 25 lanes of 64 bits, or for a
round number out of range. `ROUND_CONSTANTS` and `RHO_OFFSETS` hold the round
constants and rotation offsets.

```python
from voleprf.keccak_permutation import keccak_p1600

state = keccak_p1600([0] * 25, 24)
```

### `voleprf.keccak_times4`

`KeccakP1600Times4` holds four independent 200-byte Keccak states.

- Per instance: `add_bytes`, `overwrite_bytes`, `overwrite_with_zeroes`,
  `extract_bytes`, `extract_and_add_bytes`.
- All four at once: `add_lanes_all`, `overwrite_lanes_all`,
  `extract_lanes_all`, `extract_and_add_lanes_all`. In their buffers the lanes
  of instance `i` start `i * lane_offset` lanes in.
- `initialize_all`, `permute_all_24rounds`, `permute_all_12rounds`.
- `fast_loop_absorb` and `fast_loop_absorb_12rounds` absorb whole blocks of
  interleaved data, permuting after each, and return the number of bytes
  consumed.

Out-of-range instances, offsets and lengths raise `ValueError`.

```python
from voleprf.keccak_times4 import KeccakP1600Times4

states = KeccakP1600Times4()
states.add_bytes(0, b"\x06", 0)
states.permute_all_24rounds()
digest = states.extract_bytes(0, 0, 32)
```

### `voleprf.mersenne`

Arithmetic modulo the Mersenne prime `PR = 2**61 - 1`:

- `mul64(a, b)` returns the `(low, high)` halves of a 64-bit product.
- `mod_pre`, `mod`: folding reductions; `mult_mod`, `add_mod`: field product
  and sum.
- Two-lane "block" forms on 128-bit integers `(high << 64) | low`:
  `block_mult_mod(block, b)`, `block_add_mod(a, b)`, `block_mod(block)`.
- `extract_fp(x)` reduces the low 64-bit lane.
- `uni_hash_coeff_gen(seed, size)` returns `seed, seed**2, ..., seed**size`
  modulo the prime.
- `vector_inn_prdt_sum_red(a, b)` returns the reduced inner product.

### `voleprf.oprf_fp`

`OprfFp(high, middle, low)` is a 384-bit value held as three 128-bit limbs,
most significant first. `OprfFp.from_blocks(a, b, c)` builds one from three
`(high64, low64)` pairs. `bound()` tells whether the value lies below the
modulus, `reduce_mod()` subtracts the modulus once in place (wrapping at 384
bits), `to_int()` returns the value as one integer, and `str()` prints the six
64-bit halves. `oprf_fp_add_mod(left, right)` adds two elements modulo the
prime `MODULUS`.

### `voleprf.gf2k`

Carry-less multiplication over GF(2). `clmul64(a, b)` multiplies two 64-bit
words. `mul128(a, b)` multiplies two 128-bit values and returns the full
256-bit product as `(low, high)` 128-bit halves; it is not reduced modulo any
field polynomial. `mul128_batch(pairs)` does the same for a sequence of pairs.

### `voleprf.ram_pack`

Row packing for memory-access records. `pack_row(index, values, step, op)`
puts `index << 32 | step << 1 | op` and the 64-bit values into
`len(values) // 2 + 1` 128-bit words. `unpack_row(row, value_count,
index_bits, step_bits)` recovers `(index, step, op, values)`, and
`sort_rows(rows)` orders rows by their first word.

## What it does not do

The package offers primitives only. It does not run any two-party protocol:
there is no networking, no oblivious transfer, no VOLE generation, no OPRF
evaluation and no zero-knowledge proof checking, and no command-line program.