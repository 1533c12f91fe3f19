# samplers/gamma.py

"""
Gamma sampler.

Two acceptance-rejection branches, chosen by shape:

    shape < 1:
        Ahrens-Dieter (GS). With b = 1 + shape/e and p = b*u, the region
        p <= 1 proposes x = p**(1/shape) and accepts against exp(-x); the
        region p > 1 proposes x = -ln((b - p) / shape) and accepts against
        x**(shape - 1).

    shape >= 1:
        Marsaglia-Tsang. With d = shape - 1/3 and c = 1/sqrt(9d), draw a
        normal x until v = (1 + c*x) > 0, cube it, then accept on either
        the squeeze  u < 1 - 0.0331 x**4
        or the exact  ln(u) < x**2/2 + d*(1 - v + ln(v)).

Normals come from an inline polar Box-Muller step on the *same* base
generator (second value discarded), so the sampler holds no state of its
own beyond the base.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from core_types import GammaParams

from .gaussian import polar_pair

if TYPE_CHECKING:
    from generator import Generator


class GammaSampler:
    """
    Gamma(shape, scale) sampler driving an owned rotate-shift generator.
    """

    def __init__(self, base: "Generator", params: GammaParams) -> None:
        self.base = base
        self.params = params

    def _sample_small_shape(self, shape: float) -> float:
        base = self.base
        b = 1.0 + shape / math.e
        while True:
            p = b * base.next_double()
            v = base.next_double()
            if p <= 1.0:
                x = p ** (1.0 / shape)
                if v <= math.exp(-x):
                    return x
            else:
                x = -math.log((b - p) / shape)
                if v <= x ** (shape - 1.0):
                    return x

    def _sample_marsaglia_tsang(self, shape: float) -> float:
        base = self.base
        d = shape - 1.0 / 3.0
        c = 1.0 / math.sqrt(9.0 * d)
        while True:
            while True:
                x, _ = polar_pair(base)
                v = 1.0 + c * x
                if v > 0.0:
                    break

            v = v * v * v
            u = base.next_double()
            x2 = x * x
            if u < 1.0 - 0.0331 * x2 * x2:
                return d * v
            # ln(0) is -inf, which always accepts
            if u == 0.0 or math.log(u) < 0.5 * x2 + d * (1.0 - v + math.log(v)):
                return d * v

    def sample(self) -> float:
        shape, scale = self.params.shape, self.params.scale
        if shape < 1.0:
            return self._sample_small_shape(shape) * scale
        return self._sample_marsaglia_tsang(shape) * scale
