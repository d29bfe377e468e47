"""Packing of memory-access records into rows of 128-bit words.

A record is ``(index, step, op, values)`` with 64-bit values. The first word
holds ``index << 32 | step << 1 | op`` (truncated to 64 bits) in its upper
half and ``values[0]`` in its lower half. The remaining values fill further
words two at a time, upper half first; an unpaired last value leaves the
lower half zero.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

INDEX_BIT_SIZE = 32
STEP_BIT_SIZE = 31
VALUE_BIT_SIZE = 64

_MASK64 = (1 << 64) - 1


def _check_u64(value: int, name: str) -> int:
    if not 0 <= value <= _MASK64:
        raise ValueError(f"{name} must be an unsigned 64-bit integer, got {value!r}")
    return value


def pack_row(index: int, values: Sequence[int], step: int, op: int) -> list[int]:
    """Pack one access record into ``len(values) // 2 + 1`` 128-bit words."""
    if not values:
        raise ValueError("a record needs at least one value")
    _check_u64(index, "index")
    _check_u64(step, "step")
    _check_u64(op, "op")
    for value in values:
        _check_u64(value, "value")

    head = ((index << (STEP_BIT_SIZE + 1)) | (step << 1) | (op & 1)) & _MASK64
    row = [(head << VALUE_BIT_SIZE) | values[0]]
    rest = list(values[1:])
    for pos in range(0, len(rest), 2):
        upper = rest[pos]
        lower = rest[pos + 1] if pos + 1 < len(rest) else 0
        row.append((upper << VALUE_BIT_SIZE) | lower)
    return row


def unpack_row(
    row: Sequence[int], value_count: int, index_bits: int, step_bits: int
) -> tuple[int, int, int, list[int]]:
    """Recover ``(index, step, op, values)`` from a packed row."""
    if value_count < 1:
        raise ValueError(f"value count must be at least 1, got {value_count}")
    expected = value_count // 2 + 1
    if len(row) != expected:
        raise ValueError(f"row holds {len(row)} words, {expected} expected")
    for word in row:
        if not 0 <= word < (1 << 128):
            raise ValueError(f"row word must be an unsigned 128-bit integer, got {word!r}")

    high = row[0] >> VALUE_BIT_SIZE
    op = high & 1
    high >>= 1
    step = high & ((1 << step_bits) - 1)
    high >>= STEP_BIT_SIZE
    index = high & ((1 << index_bits) - 1)

    values = [row[0] & _MASK64]
    for word in row[1:]:
        values.append(word >> VALUE_BIT_SIZE)
        values.append(word & _MASK64)
    return index, step, op, values[:value_count]


def sort_rows(rows: Iterable[Sequence[int]]) -> list[list[int]]:
    """Sort packed rows by their first word: by index, then step, then op."""
    return [list(row) for row in sorted(rows, key=lambda row: row[0])]