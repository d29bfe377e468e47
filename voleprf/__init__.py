"""Keccak-p[1600], Mersenne-61 and 384-bit field arithmetic, carry-less multiplication and RAM row packing."""

__version__ = "0.1.0"