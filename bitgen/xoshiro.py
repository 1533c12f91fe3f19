# bitgen/xoshiro.py

"""
xoshiro256++: the 256-bit rotate-shift generator.

This is the workhorse variant: it is the only kind that supports
jump-ahead, and every distribution sampler owns one as its entropy source.

Seed expansion runs the 64-bit seed through `mix64` four times in a row,
keeping each intermediate value as one state word:

    z = seed
    s[i] = z = mix64(z)   for i in 0..3

Output and update follow the reference xoshiro256++ step bit-for-bit.
"""

from __future__ import annotations

from typing import List, Tuple

from core_types import MASK64, UInt64

from .bits import mix64, rotl64


# 256-bit jump polynomial: equivalent to 2**128 calls to next().
JUMP: Tuple[int, int, int, int] = (
    0x180EC6D33CFD0ABA,
    0xD5A61266F0C9392C,
    0xA9582618E03FC9AA,
    0x39ABDC4529B1661C,
)


def expand_seed(seed: UInt64) -> List[UInt64]:
    """
    Expand a 64-bit seed into the 4-word xoshiro state.
    """
    state: List[UInt64] = []
    z = seed & MASK64
    for _ in range(4):
        z = mix64(z)
        state.append(z)
    return state


class Xoshiro256PlusPlus:
    """
    Mutable xoshiro256++ state (4 x 64-bit words).
    """

    __slots__ = ("s",)

    def __init__(self, seed: UInt64) -> None:
        self.s: List[UInt64] = expand_seed(seed)

    def next(self) -> UInt64:
        """Advance one step and return the 64-bit output."""
        s = self.s
        result = (rotl64((s[0] + s[3]) & MASK64, 23) + s[0]) & MASK64
        t = (s[1] << 17) & MASK64

        s[2] ^= s[0]
        s[3] ^= s[1]
        s[1] ^= s[2]
        s[0] ^= s[3]

        s[2] ^= t
        s[3] = rotl64(s[3], 45)

        return result

    def jump(self) -> None:
        """
        Advance the state as if 2**128 draws had been made.

        Scans the 256 bits of JUMP (word 0 first, least significant bit
        first). For every set bit the current state is XORed into the
        accumulators; the generator steps once per bit either way.
        """
        s0 = s1 = s2 = s3 = 0
        for word in JUMP:
            for b in range(64):
                if word & (1 << b):
                    s0 ^= self.s[0]
                    s1 ^= self.s[1]
                    s2 ^= self.s[2]
                    s3 ^= self.s[3]
                self.next()
        self.s[:] = [s0, s1, s2, s3]
