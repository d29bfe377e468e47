"""Four independent Keccak-p[1600] states handled side by side.

Each instance is a 200-byte state made of 25 little-endian 64-bit lanes.
Byte-oriented operations address one instance; lane-oriented operations
address all four at once. In their data buffers, the lanes of instance ``i``
start ``i * lane_offset`` lanes into the buffer.
"""

from __future__ import annotations

from .keccak_permutation import LANE_COUNT, keccak_p1600

INSTANCES = 4
LANE_BYTES = 8
STATE_BYTES = LANE_COUNT * LANE_BYTES


def _xor_bytes(left: bytes, right: bytes) -> bytes:
    return bytes(a ^ b for a, b in zip(left, right))


class KeccakP1600Times4:
    """Four parallel Keccak-p[1600] states."""

    def __init__(self) -> None:
        self._states: list[list[int]] = []
        self.initialize_all()

    # ------------------------------------------------------------------ helpers

    @staticmethod
    def _check_instance(instance: int) -> None:
        if not 0 <= instance < INSTANCES:
            raise ValueError(f"instance must be in 0..{INSTANCES - 1}, got {instance}")

    @staticmethod
    def _check_range(offset: int, length: int) -> None:
        if offset < 0 or length < 0 or offset + length > STATE_BYTES:
            raise ValueError(
                f"byte range [{offset}, {offset + length}) exceeds the "
                f"{STATE_BYTES}-byte state"
            )

    @staticmethod
    def _check_lanes(data_length: int, lane_count: int, lane_offset: int) -> int:
        if not 0 <= lane_count <= LANE_COUNT:
            raise ValueError(f"lane count must be in 0..{LANE_COUNT}, got {lane_count}")
        if lane_offset < 0:
            raise ValueError(f"lane offset must not be negative, got {lane_offset}")
        needed = (3 * lane_offset + lane_count) * LANE_BYTES
        if data_length < needed:
            raise ValueError(f"data holds {data_length} bytes, {needed} needed")
        return needed

    def _state_bytes(self, instance: int) -> bytearray:
        return bytearray(
            b"".join(lane.to_bytes(LANE_BYTES, "little") for lane in self._states[instance])
        )

    def _store(self, instance: int, raw: bytes) -> None:
        self._states[instance] = [
            int.from_bytes(raw[pos : pos + LANE_BYTES], "little")
            for pos in range(0, STATE_BYTES, LANE_BYTES)
        ]

    # ------------------------------------------------------------- operations

    def initialize_all(self) -> None:
        """Reset all four states to zero."""
        self._states = [[0] * LANE_COUNT for _ in range(INSTANCES)]

    def add_bytes(self, instance: int, data: bytes, offset: int) -> None:
        """XOR ``data`` into one state starting at byte ``offset``."""
        self._check_instance(instance)
        self._check_range(offset, len(data))
        raw = self._state_bytes(instance)
        end = offset + len(data)
        raw[offset:end] = _xor_bytes(raw[offset:end], data)
        self._store(instance, raw)

    def add_lanes_all(self, data: bytes, lane_count: int, lane_offset: int) -> None:
        """XOR the first ``lane_count`` lanes of each instance from ``data``."""
        self._check_lanes(len(data), lane_count, lane_offset)
        for instance in range(INSTANCES):
            start = instance * lane_offset * LANE_BYTES
            self.add_bytes(instance, data[start : start + lane_count * LANE_BYTES], 0)

    def overwrite_bytes(self, instance: int, data: bytes, offset: int) -> None:
        """Replace state bytes of one instance starting at ``offset`` with ``data``."""
        self._check_instance(instance)
        self._check_range(offset, len(data))
        raw = self._state_bytes(instance)
        raw[offset : offset + len(data)] = data
        self._store(instance, raw)

    def overwrite_lanes_all(self, data: bytes, lane_count: int, lane_offset: int) -> None:
        """Replace the first ``lane_count`` lanes of each instance from ``data``."""
        self._check_lanes(len(data), lane_count, lane_offset)
        for instance in range(INSTANCES):
            start = instance * lane_offset * LANE_BYTES
            self.overwrite_bytes(
                instance, data[start : start + lane_count * LANE_BYTES], 0
            )

    def overwrite_with_zeroes(self, instance: int, byte_count: int) -> None:
        """Zero the first ``byte_count`` bytes of one state."""
        self._check_instance(instance)
        self._check_range(0, byte_count)
        self.overwrite_bytes(instance, bytes(byte_count), 0)

    def extract_bytes(self, instance: int, offset: int, length: int) -> bytes:
        """Return ``length`` state bytes of one instance starting at ``offset``."""
        self._check_instance(instance)
        self._check_range(offset, length)
        return bytes(self._state_bytes(instance)[offset : offset + length])

    def extract_lanes_all(self, lane_count: int, lane_offset: int) -> bytes:
        """Return the first ``lane_count`` lanes of each instance in one buffer.

        The buffer has room for all four instances; bytes between their lane
        ranges are zero.
        """
        if lane_offset < 0:
            raise ValueError(f"lane offset must not be negative, got {lane_offset}")
        size = (3 * lane_offset + lane_count) * LANE_BYTES
        self._check_lanes(size, lane_count, lane_offset)
        out = bytearray(size)
        for instance in range(INSTANCES):
            start = instance * lane_offset * LANE_BYTES
            out[start : start + lane_count * LANE_BYTES] = self.extract_bytes(
                instance, 0, lane_count * LANE_BYTES
            )
        return bytes(out)

    def extract_and_add_bytes(self, instance: int, data: bytes, offset: int) -> bytes:
        """Return ``data`` XOR the state bytes of one instance from ``offset``."""
        return _xor_bytes(data, self.extract_bytes(instance, offset, len(data)))

    def extract_and_add_lanes_all(
        self, data: bytes, lane_count: int, lane_offset: int
    ) -> bytes:
        """Return ``data`` with each instance's lane range XORed with its state.

        Bytes outside the four lane ranges are passed through unchanged.
        """
        self._check_lanes(len(data), lane_count, lane_offset)
        out = bytearray(data)
        span = lane_count * LANE_BYTES
        for instance in range(INSTANCES):
            start = instance * lane_offset * LANE_BYTES
            out[start : start + span] = self.extract_and_add_bytes(
                instance, bytes(out[start : start + span]), 0
            )
        return bytes(out)

    def permute_all_24rounds(self) -> None:
        """Apply Keccak-p[1600] with 24 rounds to every state."""
        self._states = [keccak_p1600(state, 24) for state in self._states]

    def permute_all_12rounds(self) -> None:
        """Apply Keccak-p[1600] with the last 12 rounds to every state."""
        self._states = [keccak_p1600(state, 12) for state in self._states]

    def _absorb(
        self,
        lane_count: int,
        lane_offset_parallel: int,
        lane_offset_serial: int,
        data: bytes,
        permute,
    ) -> int:
        if not 0 <= lane_count <= LANE_COUNT:
            raise ValueError(f"lane count must be in 0..{LANE_COUNT}, got {lane_count}")
        if lane_offset_parallel < 0:
            raise ValueError("parallel lane offset must not be negative")
        if lane_offset_serial <= 0:
            raise ValueError("serial lane offset must be positive")
        block = (lane_offset_parallel * 3 + lane_count) * LANE_BYTES
        step = lane_offset_serial * LANE_BYTES
        position = 0
        while len(data) - position >= block:
            self.add_lanes_all(
                data[position : position + block], lane_count, lane_offset_parallel
            )
            permute()
            position += step
        return position

    def fast_loop_absorb(
        self,
        lane_count: int,
        lane_offset_parallel: int,
        lane_offset_serial: int,
        data: bytes,
    ) -> int:
        """Absorb whole blocks of ``data`` with 24-round permutations.

        Returns the number of bytes consumed.
        """
        return self._absorb(
            lane_count,
            lane_offset_parallel,
            lane_offset_serial,
            data,
            self.permute_all_24rounds,
        )

    def fast_loop_absorb_12rounds(
        self,
        lane_count: int,
        lane_offset_parallel: int,
        lane_offset_serial: int,
        data: bytes,
    ) -> int:
        """Absorb whole blocks of ``data`` with 12-round permutations.

        Returns the number of bytes consumed.
        """
        return self._absorb(
            lane_count,
            lane_offset_parallel,
            lane_offset_serial,
            data,
            self.permute_all_12rounds,
        )