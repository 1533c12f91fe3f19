# bitgen/mt19937.py

"""
MT19937: the classic 624-word Mersenne Twister.

Only the low 32 bits of the seed are used (init_genrand seeding).
The whole block of 624 words is regenerated lazily: a fresh instance
starts with `index == N`, so the first draw triggers the first twist.
"""

from __future__ import annotations

from typing import List

from core_types import MASK32, UInt32, UInt64


N: int = 624
M: int = 397
MATRIX_A: int = 0x9908B0DF
UPPER_MASK: int = 0x80000000
LOWER_MASK: int = 0x7FFFFFFF


def init_genrand(seed: int) -> List[UInt32]:
    """
    Expand a 32-bit seed into the 624-word state via the standard
    linear recurrence mt[i] = 1812433253 * (mt[i-1] ^ (mt[i-1] >> 30)) + i.
    """
    mt = [0] * N
    mt[0] = seed & MASK32
    for i in range(1, N):
        prev = mt[i - 1]
        mt[i] = (1812433253 * (prev ^ (prev >> 30)) + i) & MASK32
    return mt


class MersenneTwister:
    """
    Mutable MT19937 state (624 x 32-bit words + read index).
    """

    __slots__ = ("mt", "index")

    def __init__(self, seed: UInt64) -> None:
        self.mt: List[UInt32] = init_genrand(seed)
        self.index: int = N

    def _twist(self) -> None:
        mt = self.mt
        for i in range(N):
            y = (mt[i] & UPPER_MASK) | (mt[(i + 1) % N] & LOWER_MASK)
            value = mt[(i + M) % N] ^ (y >> 1)
            if y & 1:
                value ^= MATRIX_A
            mt[i] = value
        self.index = 0

    def next(self) -> UInt32:
        """Return the next tempered 32-bit output."""
        if self.index >= N:
            self._twist()

        y = self.mt[self.index]
        self.index += 1

        # Tempering
        y ^= y >> 11
        y ^= (y << 7) & 0x9D2C5680
        y ^= (y << 15) & 0xEFC60000
        y ^= y >> 18
        return y & MASK32
