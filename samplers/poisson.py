# samplers/poisson.py

"""
Poisson sampler using Knuth's multiplicative method.

    L = exp(-lam); p = 1; k = 0
    while p > L: k += 1; p *= U[0, 1)
    return k - 1

Expected cost is lam + 1 uniforms per sample and there is no iteration
cap. For large lam (roughly > 700) exp(-lam) underflows to 0.0 and the
loop only ends once p itself underflows; this is a known limitation of the
method, not something the sampler tries to paper over.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from core_types import PoissonParams

if TYPE_CHECKING:
    from generator import Generator


class PoissonSampler:
    def __init__(self, base: "Generator", params: PoissonParams) -> None:
        self.base = base
        self.params = params

    def sample(self) -> float:
        limit = math.exp(-self.params.lam)
        p = 1.0
        count = 0
        while p > limit:
            count += 1
            p *= self.base.next_double()
        return float(count - 1)
