# bitgen/pcg.py

"""
PCG32: the 64-bit linear-congruential-plus-permutation generator.

The LCG runs on a 64-bit state; each step emits 32 bits through an
xorshift-high / random-rotate output permutation computed from the
*pre-update* state.

Seeding is deliberately simple and deterministic:

    state = seed
    inc   = (seed << 1) | 1      (always odd)

The increment is fixed per instance; there is no separate stream selector.
"""

from __future__ import annotations

from core_types import MASK32, MASK64, UInt32, UInt64

from .bits import rotr32


PCG_MULTIPLIER: int = 6364136223846793005


class Pcg32:
    """
    Mutable PCG32 state (64-bit state + 64-bit odd increment).
    """

    __slots__ = ("state", "inc")

    def __init__(self, seed: UInt64) -> None:
        seed &= MASK64
        self.state: UInt64 = seed
        self.inc: UInt64 = ((seed << 1) | 1) & MASK64

    def next(self) -> UInt32:
        """Advance one step and return the 32-bit output."""
        old = self.state
        self.state = (old * PCG_MULTIPLIER + self.inc) & MASK64
        xorshifted = (((old >> 18) ^ old) >> 27) & MASK32
        rot = old >> 59
        return rotr32(xorshifted, rot)
