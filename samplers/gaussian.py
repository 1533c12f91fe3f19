# samplers/gaussian.py

"""
Gaussian sampler (polar Box-Muller with one-sample look-ahead).

Each accepted polar trial yields two independent standard normals. The
first is returned immediately; the second is cached and handed out on the
next call without touching the base generator.

`polar_pair` is also used inline by the Gamma sampler, which needs
standard normals from its own base generator but keeps no cache.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Tuple

from core_types import GaussianParams

if TYPE_CHECKING:
    from generator import Generator


def polar_pair(base: "Generator") -> Tuple[float, float]:
    """
    Draw two independent N(0, 1) values from `base`.

    Uniforms in [-1, 1) are drawn in pairs until the point falls strictly
    inside the unit circle and is not the origin.
    """
    while True:
        u1 = 2.0 * base.next_double() - 1.0
        u2 = 2.0 * base.next_double() - 1.0
        r = u1 * u1 + u2 * u2
        if 0.0 < r < 1.0:
            break

    scale = math.sqrt(-2.0 * math.log(r) / r)
    return u1 * scale, u2 * scale


class GaussianSampler:
    """
    N(mean, stddev**2) sampler driving an owned rotate-shift generator.
    """

    def __init__(self, base: "Generator", params: GaussianParams) -> None:
        self.base = base
        self.params = params
        self.has_cache: bool = False
        self.cache: float = 0.0

    def clear_cache(self) -> None:
        self.has_cache = False
        self.cache = 0.0

    def sample(self) -> float:
        if self.has_cache:
            self.has_cache = False
            return self.cache

        z0, z1 = polar_pair(self.base)
        mean, stddev = self.params.mean, self.params.stddev

        self.cache = mean + stddev * z1
        self.has_cache = True
        return mean + stddev * z0
