"""The Keccak-p[1600] permutation on a state of 25 little-endian 64-bit lanes.

Lane ``x + 5 * y`` holds the lane at column ``x`` and row ``y``.
"""

from __future__ import annotations

from collections.abc import Sequence

LANE_COUNT = 25
MAX_ROUNDS = 24
_MASK64 = (1 << 64) - 1


def rol64(value: int, shift: int) -> int:
    """Rotate a 64-bit value left by ``shift`` bits."""
    value &= _MASK64
    shift %= 64
    return ((value << shift) | (value >> (64 - shift))) & _MASK64


def _rc_bit(t: int) -> int:
    """Output bit ``t`` of the LFSR that defines the round constants."""
    state = 1
    for _ in range(t % 255):
        state <<= 1
        if state & 0x100:
            state ^= 0x171
    return state & 1


def _round_constants() -> tuple[int, ...]:
    constants = []
    for round_index in range(MAX_ROUNDS):
        constant = 0
        for j in range(7):
            if _rc_bit(j + 7 * round_index):
                constant |= 1 << ((1 << j) - 1)
        constants.append(constant)
    return tuple(constants)


def _rho_offsets() -> tuple[int, ...]:
    offsets = [0] * LANE_COUNT
    x, y = 1, 0
    for t in range(24):
        offsets[x + 5 * y] = ((t + 1) * (t + 2) // 2) % 64
        x, y = y, (2 * x + 3 * y) % 5
    return tuple(offsets)


ROUND_CONSTANTS: tuple[int, ...] = _round_constants()
RHO_OFFSETS: tuple[int, ...] = _rho_offsets()


def _check_lanes(lanes: Sequence[int]) -> list[int]:
    if len(lanes) != LANE_COUNT:
        raise ValueError(f"state must hold {LANE_COUNT} lanes, got {len(lanes)}")
    state = []
    for lane in lanes:
        if not 0 <= lane <= _MASK64:
            raise ValueError(f"lane value out of 64-bit range: {lane!r}")
        state.append(lane)
    return state


def _round(state: list[int], round_index: int) -> list[int]:
    columns = [
        state[x] ^ state[x + 5] ^ state[x + 10] ^ state[x + 15] ^ state[x + 20]
        for x in range(5)
    ]
    d = [columns[(x - 1) % 5] ^ rol64(columns[(x + 1) % 5], 1) for x in range(5)]

    b = [0] * LANE_COUNT
    for y in range(5):
        for x in range(5):
            position = x + 5 * y
            b[y + 5 * ((2 * x + 3 * y) % 5)] = rol64(
                state[position] ^ d[x], RHO_OFFSETS[position]
            )

    result = [
        b[x + 5 * y] ^ (~b[(x + 1) % 5 + 5 * y] & _MASK64 & b[(x + 2) % 5 + 5 * y])
        for y in range(5)
        for x in range(5)
    ]
    result[0] ^= ROUND_CONSTANTS[round_index]
    return result


def keccak_round(lanes: Sequence[int], round_index: int) -> list[int]:
    """Apply round ``round_index`` (theta, rho, pi, chi, iota) and return the new state."""
    if not 0 <= round_index < MAX_ROUNDS:
        raise ValueError(f"round index must be in 0..{MAX_ROUNDS - 1}, got {round_index}")
    return _round(_check_lanes(lanes), round_index)


def keccak_p1600(lanes: Sequence[int], rounds: int = MAX_ROUNDS) -> list[int]:
    """Apply the last ``rounds`` rounds of Keccak-f[1600] and return the new state."""
    if not 0 <= rounds <= MAX_ROUNDS:
        raise ValueError(f"rounds must be in 0..{MAX_ROUNDS}, got {rounds}")
    state = _check_lanes(lanes)
    for round_index in range(MAX_ROUNDS - rounds, MAX_ROUNDS):
        state = _round(state, round_index)
    return state