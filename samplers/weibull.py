# samplers/weibull.py

"""
Weibull sampler via the inverse CDF:

    x = scale * (-ln(1 - u)) ** (1 / shape),   u ~ U[0, 1)

One uniform per sample, no rejection loop.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from core_types import WeibullParams

if TYPE_CHECKING:
    from generator import Generator


class WeibullSampler:
    def __init__(self, base: "Generator", params: WeibullParams) -> None:
        self.base = base
        self.params = params

    def sample(self) -> float:
        u = self.base.next_double()
        return self.params.scale * (-math.log(1.0 - u)) ** (1.0 / self.params.shape)
