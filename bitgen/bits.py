# bitgen/bits.py

"""
Fixed-width integer helpers shared by the bit-generators.

Python ints are unbounded, so every 64-bit (or 32-bit) operation that
can overflow is followed by an explicit mask.
"""

from __future__ import annotations

from core_types import MASK32, MASK64


def rotl64(x: int, k: int) -> int:
    """Rotate a 64-bit word left by k bits."""
    return ((x << k) | (x >> (64 - k))) & MASK64


def rotr32(x: int, k: int) -> int:
    """Rotate a 32-bit word right by k bits (k in 0..31)."""
    return ((x >> k) | (x << (-k & 31))) & MASK32


def mix64(z: int) -> int:
    """
    Three-round multiply-xor-shift avalanche (the SplitMix64 finalizer).

    Applied repeatedly to turn one 64-bit seed into several well-mixed,
    distinguishable state words. Note that mix64(0) == 0.
    """
    z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & MASK64
    z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & MASK64
    return z ^ (z >> 31)
