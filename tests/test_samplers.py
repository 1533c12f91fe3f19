# tests/test_samplers.py

"""
Distribution samplers: exact first draws against the base generator and
empirical moments over large batches.
"""

from __future__ import annotations

import math

import numpy as np
import pytest

from core_types import GammaParams, GaussianParams, GeneratorKind, PoissonParams, WeibullParams
from generator import create_generator
from samplers.gaussian import polar_pair


def _gen(kind, seed, params):
    gen = create_generator(kind, seed, params)
    assert gen is not None
    return gen


# -------------------------------------------------------------------
# Gaussian
# -------------------------------------------------------------------


def test_polar_pair_matches_manual_polar_step():
    base = _gen(GeneratorKind.XOSHIRO256PP, 42, None)
    ref = _gen(GeneratorKind.XOSHIRO256PP, 42, None)

    z0, z1 = polar_pair(base)

    while True:
        u1 = 2.0 * ref.next_double() - 1.0
        u2 = 2.0 * ref.next_double() - 1.0
        r = u1 * u1 + u2 * u2
        if 0.0 < r < 1.0:
            break
    scale = math.sqrt(-2.0 * math.log(r) / r)
    assert (z0, z1) == (u1 * scale, u2 * scale)
    assert base.next_uint64() == ref.next_uint64()


def test_gaussian_returns_cached_second_value_without_drawing():
    params = GaussianParams(mean=5.0, stddev=2.0)
    gen = _gen(GeneratorKind.GAUSSIAN, 9, params)
    probe = _gen(GeneratorKind.XOSHIRO256PP, 9, None)

    z0, z1 = polar_pair(probe)
    assert gen.next_distribution_sample() == 5.0 + 2.0 * z0
    # second value comes from the cache; the base does not move
    assert gen.next_distribution_sample() == 5.0 + 2.0 * z1
    assert gen._base.next_uint64() == probe.next_uint64()


def test_gaussian_moments():
    gen = _gen(GeneratorKind.GAUSSIAN, 42, GaussianParams(0.0, 1.0))
    samples = gen.sample_array(100_000)
    assert abs(samples.mean()) < 0.02
    assert abs(samples.var(ddof=1) - 1.0) < 0.05


def test_gaussian_zero_stddev_is_constant():
    gen = _gen(GeneratorKind.GAUSSIAN, 1, GaussianParams(3.0, 0.0))
    assert set(gen.sample_array(10).tolist()) == {3.0}


# -------------------------------------------------------------------
# Gamma
# -------------------------------------------------------------------


@pytest.mark.parametrize(
    "shape, scale",
    [
        (0.5, 2.0),   # Ahrens-Dieter branch
        (2.0, 3.0),   # Marsaglia-Tsang branch
        (1.0, 1.0),   # boundary: Marsaglia-Tsang
    ],
)
def test_gamma_moments(shape, scale):
    gen = _gen(GeneratorKind.GAMMA, 2718, GammaParams(shape, scale))
    samples = gen.sample_array(100_000)
    mean = shape * scale
    var = shape * scale * scale
    assert samples.min() >= 0.0
    assert abs(samples.mean() - mean) < 0.05 * max(1.0, mean)
    assert abs(samples.var(ddof=1) - var) < 0.1 * max(1.0, var)


# -------------------------------------------------------------------
# Weibull
# -------------------------------------------------------------------


def test_weibull_first_draw_is_inverse_cdf():
    params = WeibullParams(shape=1.5, scale=2.0)
    gen = _gen(GeneratorKind.WEIBULL, 42, params)
    probe = _gen(GeneratorKind.XOSHIRO256PP, 42, None)
    u = probe.next_double()
    assert gen.next_distribution_sample() == 2.0 * (-math.log(1.0 - u)) ** (1.0 / 1.5)


def test_weibull_moments():
    gen = _gen(GeneratorKind.WEIBULL, 7, WeibullParams(shape=2.0, scale=1.0))
    samples = gen.sample_array(50_000)
    assert abs(samples.mean() - math.gamma(1.5)) < 0.01
    assert abs(samples.var(ddof=1) - (1.0 - math.pi / 4.0)) < 0.01


def test_weibull_shape_one_is_exponential():
    gen = _gen(GeneratorKind.WEIBULL, 8, WeibullParams(shape=1.0, scale=3.0))
    samples = gen.sample_array(50_000)
    assert abs(samples.mean() - 3.0) < 0.1


# -------------------------------------------------------------------
# Poisson
# -------------------------------------------------------------------


def test_poisson_mean_lambda_4():
    gen = _gen(GeneratorKind.POISSON, 42, PoissonParams(lam=4.0))
    samples = gen.sample_array(100_000)
    assert abs(samples.mean() - 4.0) < 0.05


def test_poisson_samples_are_non_negative_integers():
    gen = _gen(GeneratorKind.POISSON, 3, PoissonParams(lam=0.7))
    samples = gen.sample_array(5_000)
    assert samples.min() >= 0.0
    assert np.all(samples == np.floor(samples))


# -------------------------------------------------------------------
# Parameter validation
# -------------------------------------------------------------------


@pytest.mark.parametrize(
    "factory",
    [
        lambda: GaussianParams(0.0, -1.0),
        lambda: GammaParams(0.0, 1.0),
        lambda: GammaParams(1.0, -2.0),
        lambda: WeibullParams(-1.0, 1.0),
        lambda: WeibullParams(1.0, 0.0),
        lambda: PoissonParams(0.0),
        lambda: GaussianParams(math.nan, 1.0),
        lambda: GaussianParams(0.0, math.nan),
        lambda: GaussianParams(0.0, math.inf),
        lambda: GammaParams(math.nan, 1.0),
        lambda: GammaParams(1.0, math.inf),
        lambda: WeibullParams(math.inf, 1.0),
        lambda: WeibullParams(1.0, math.nan),
        lambda: PoissonParams(math.nan),
        lambda: PoissonParams(math.inf),
    ],
)
def test_invalid_params_raise_value_error(factory):
    with pytest.raises(ValueError):
        factory()


def test_nan_shape_never_reaches_gamma_sampler():
    with pytest.raises(ValueError):
        create_generator(GeneratorKind.GAMMA, 1, GammaParams(math.nan, 1.0))
