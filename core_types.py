# core_types.py

"""
Shared type definitions and core dataclasses for the prng-core project.

This module is intentionally small and dependency-free so it can be imported
from anywhere (bitgen/, samplers/, generator.py, utils/) without risk
of circular imports.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Union


# ---------- Basic aliases ----------

UInt32 = int
UInt64 = int
Seed = int

MASK32: int = 0xFFFFFFFF
MASK64: int = 0xFFFFFFFFFFFFFFFF


# ---------- Generator kinds ----------


class GeneratorKind(Enum):
    """
    The closed set of generator variants.

    The first four are uniform bit-generators; the last four are
    distribution samplers that each own a XOSHIRO256PP generator.
    """

    XOSHIRO256PP = "xoshiro256pp"  # fast, 256-bit rotate-shift
    PCG32 = "pcg32"                # small LCG + output permutation
    CHACHA20 = "chacha20"          # cipher-stream placeholder, NOT secure
    MT19937 = "mt19937"            # classic 624-word twister
    GAUSSIAN = "gaussian"
    GAMMA = "gamma"
    WEIBULL = "weibull"
    POISSON = "poisson"


UNIFORM_KINDS: FrozenSet[GeneratorKind] = frozenset({
    GeneratorKind.XOSHIRO256PP,
    GeneratorKind.PCG32,
    GeneratorKind.CHACHA20,
    GeneratorKind.MT19937,
})

DISTRIBUTION_KINDS: FrozenSet[GeneratorKind] = frozenset({
    GeneratorKind.GAUSSIAN,
    GeneratorKind.GAMMA,
    GeneratorKind.WEIBULL,
    GeneratorKind.POISSON,
})


# ---------- Distribution parameters ----------


def _check_finite(name: str, value: float) -> None:
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value}")


def _check_positive(name: str, value: float) -> None:
    # NaN fails every comparison, so test for the valid range
    if not (value > 0.0) or not math.isfinite(value):
        raise ValueError(f"{name} must be positive and finite, got {value}")


@dataclass(frozen=True)
class GaussianParams:
    """
    Normal distribution N(mean, stddev**2).
    """

    mean: float = 0.0
    stddev: float = 1.0

    def __post_init__(self) -> None:
        _check_finite("mean", self.mean)
        if not (self.stddev >= 0.0) or not math.isfinite(self.stddev):
            raise ValueError(f"stddev must be non-negative and finite, got {self.stddev}")


@dataclass(frozen=True)
class GammaParams:
    """
    Gamma distribution with shape k and scale theta (mean = k * theta).
    """

    shape: float = 1.0
    scale: float = 1.0

    def __post_init__(self) -> None:
        _check_positive("shape", self.shape)
        _check_positive("scale", self.scale)


@dataclass(frozen=True)
class WeibullParams:
    """
    Weibull distribution with shape k and scale lambda.
    """

    shape: float = 1.0
    scale: float = 1.0

    def __post_init__(self) -> None:
        _check_positive("shape", self.shape)
        _check_positive("scale", self.scale)


@dataclass(frozen=True)
class PoissonParams:
    """
    Poisson distribution with rate `lam` (``lambda`` is a keyword).
    """

    lam: float = 1.0

    def __post_init__(self) -> None:
        _check_positive("lam", self.lam)


DistributionParams = Union[GaussianParams, GammaParams, WeibullParams, PoissonParams]
