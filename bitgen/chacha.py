# bitgen/chacha.py

"""
Cipher-stream generator: a simplified ChaCha20 *placeholder*.

WARNING: this is NOT a cryptographically secure generator and it does not
compute the ChaCha20 block function. It exists so that the CHACHA20 kind
keeps the exact output stream of the existing reference vectors:

    - the 16-word buffer is filled straight from the seed
      (even words = low 32 bits, odd words = high 32 bits),
    - "regeneration" only rewinds the read position, so the same 16 words
      repeat forever (period 16 draws).

Use it only where a deterministic stand-in is acceptable. Anything that
needs unpredictability must use a real cryptographic source instead.
"""

from __future__ import annotations

from typing import List

from core_types import MASK32, UInt32, UInt64


WORDS: int = 16


class ChaChaPlaceholder:
    """
    Mutable cipher-stream state (16 x 32-bit words + read position).
    """

    __slots__ = ("words", "pos")

    def __init__(self, seed: UInt64) -> None:
        low = seed & MASK32
        high = (seed >> 32) & MASK32
        self.words: List[UInt32] = [high if i % 2 else low for i in range(WORDS)]
        self.pos: int = WORDS

    def _regenerate(self) -> None:
        # Rewind only; no new keystream is derived.
        self.pos = 0

    def next(self) -> UInt32:
        """Return the next buffered 32-bit word."""
        if self.pos >= WORDS:
            self._regenerate()
        value = self.words[self.pos]
        self.pos += 1
        return value
