# generator.py

"""
Generator facade: one object, one operation set, eight algorithms.

A `Generator` wraps exactly one algorithm state, chosen by its
`GeneratorKind`:

    - uniform kinds (XOSHIRO256PP, PCG32, CHACHA20, MT19937) compute
      output directly from their bit-generator in bitgen/,
    - distribution kinds (GAUSSIAN, GAMMA, WEIBULL, POISSON) own a private
      XOSHIRO256PP Generator and apply a sampler from samplers/ on top.

Typical usage:

    from core_types import GeneratorKind, GaussianParams
    from generator import create_generator

    rng = create_generator(GeneratorKind.XOSHIRO256PP, seed=42)
    x = rng.next_double()

    normal = create_generator(GeneratorKind.GAUSSIAN, 42, GaussianParams(0.0, 1.0))
    z = normal.next_distribution_sample()
    normal.close()

Error reporting is by return value, never by raising:

    - construction failure       -> create_generator returns None,
    - invalid argument           -> False (fill_bytes, reseed on a closed generator),
    - unsupported operation      -> False (jump on a non-xoshiro kind, analyze).

Every failure is also logged at WARNING level.

A Generator is not thread-safe. Give each thread its own instance (see
utils.rng.spawn_streams for deterministic non-overlapping streams).
"""

from __future__ import annotations

import time
from typing import Callable, Dict, Optional, Tuple, Union

import numpy as np

from bitgen.chacha import ChaChaPlaceholder
from bitgen.mt19937 import MersenneTwister
from bitgen.pcg import Pcg32
from bitgen.xoshiro import Xoshiro256PlusPlus
from config import DEFAULT_GAMMA, DEFAULT_GAUSSIAN, DEFAULT_POISSON, DEFAULT_WEIBULL
from core_types import (
    DISTRIBUTION_KINDS,
    MASK32,
    MASK64,
    UNIFORM_KINDS,
    DistributionParams,
    GammaParams,
    GaussianParams,
    GeneratorKind,
    PoissonParams,
    Seed,
    UInt32,
    UInt64,
    WeibullParams,
)
from samplers.gamma import GammaSampler
from samplers.gaussian import GaussianSampler
from samplers.poisson import PoissonSampler
from samplers.weibull import WeibullSampler
from utils.logging_utils import get_logger


logger = get_logger(__name__)

Clock = Callable[[], int]

# 2**-53: maps the top 53 bits of a uint64 onto [0, 1)
DOUBLE_UNIT: float = 1.0 / 9007199254740992.0


_UNIFORM_FACTORIES = {
    GeneratorKind.XOSHIRO256PP: Xoshiro256PlusPlus,
    GeneratorKind.PCG32: Pcg32,
    GeneratorKind.CHACHA20: ChaChaPlaceholder,
    GeneratorKind.MT19937: MersenneTwister,
}

# kind -> (sampler class, expected params type, default params)
_SAMPLER_SPECS: Dict[GeneratorKind, Tuple[type, type, DistributionParams]] = {
    GeneratorKind.GAUSSIAN: (GaussianSampler, GaussianParams, DEFAULT_GAUSSIAN),
    GeneratorKind.GAMMA: (GammaSampler, GammaParams, DEFAULT_GAMMA),
    GeneratorKind.WEIBULL: (WeibullSampler, WeibullParams, DEFAULT_WEIBULL),
    GeneratorKind.POISSON: (PoissonSampler, PoissonParams, DEFAULT_POISSON),
}


# -------------------------------------------------------------------
# Seeding helpers
# -------------------------------------------------------------------


def seed_from_clock(clock: Optional[Clock] = None) -> Seed:
    """
    Derive a non-zero 64-bit seed from a clock.

    Args:
        clock:
            Zero-argument callable returning an integer timestamp.
            Defaults to time.time_ns. Inject a fixed clock in tests.

    Returns:
        A seed in 1..2**64-1.
    """
    now = (clock or time.time_ns)()
    return (int(now) & MASK64) or 1


def _resolve_seed(seed: Seed, clock: Optional[Clock]) -> Seed:
    seed = int(seed) & MASK64
    if seed == 0:
        seed = seed_from_clock(clock)
        logger.debug("Seed 0 replaced by clock-derived seed %d", seed)
    return seed


# -------------------------------------------------------------------
# Facade
# -------------------------------------------------------------------


class Generator:
    """
    Polymorphic pseudo-random generator.

    Do not call the constructor directly; use `create_generator`, which
    validates the kind and parameters and returns None on failure.

    Attributes:
        kind:
            Which algorithm this generator runs. Never changes.
        params:
            Distribution parameters (None for uniform kinds).
    """

    def __init__(
        self,
        kind: GeneratorKind,
        params: Optional[DistributionParams],
        clock: Optional[Clock] = None,
    ) -> None:
        self.kind = kind
        self.params = params
        self._clock = clock
        self._state = None
        # owned XOSHIRO256PP generator (distribution kinds only); never handed out
        self._base: Optional[Generator] = None

    def __repr__(self) -> str:
        status = "closed" if self.closed else "open"
        return f"Generator(kind={self.kind.value}, params={self.params!r}, {status})"

    @property
    def closed(self) -> bool:
        return self._state is None

    # ---------------------------------------------------------------
    # Uniform output
    # ---------------------------------------------------------------

    def next_uint32(self) -> UInt32:
        """
        Next 32-bit value.

        XOSHIRO256PP keeps the low half of one 64-bit step; the 32-bit
        kinds return one native step; distribution kinds delegate to
        their base generator. A closed generator returns 0.
        """
        if self._state is None:
            return 0
        if self.kind is GeneratorKind.XOSHIRO256PP:
            return self._state.next() & MASK32
        if self.kind in DISTRIBUTION_KINDS:
            return self._base.next_uint32()
        return self._state.next()

    def next_uint64(self) -> UInt64:
        """
        Next 64-bit value.

        The 32-bit kinds (PCG32, CHACHA20, MT19937) take two steps and pack
        them high word first. A closed generator returns 0.
        """
        if self._state is None:
            return 0
        if self.kind is GeneratorKind.XOSHIRO256PP:
            return self._state.next()
        if self.kind in DISTRIBUTION_KINDS:
            return self._base.next_uint64()
        hi = self._state.next()
        lo = self._state.next()
        return (hi << 32) | lo

    def next_double(self) -> float:
        """Uniform double in [0, 1) built from the top 53 bits of next_uint64()."""
        if self._state is None:
            return 0.0
        return (self.next_uint64() >> 11) * DOUBLE_UNIT

    def next_distribution_sample(self) -> float:
        """
        One sample from the configured distribution.

        Uniform kinds fall back to next_double().
        """
        if self._state is None:
            return 0.0
        if self.kind in DISTRIBUTION_KINDS:
            return self._state.sample()
        return self.next_double()

    # ---------------------------------------------------------------
    # Bulk output
    # ---------------------------------------------------------------

    def fill_bytes(
        self,
        buffer: Union[bytearray, memoryview, np.ndarray, None],
        length: Optional[int] = None,
    ) -> bool:
        """
        Fill the first `length` bytes of a writable buffer with random bytes.

        Each full 8-byte chunk is one next_uint64() in little-endian order.
        A trailing partial chunk costs one whole extra draw, of which only
        the low-order bytes are written.

        Args:
            buffer:
                Any writable object supporting the buffer protocol
                (bytearray, memoryview, numpy array, ...).
            length:
                Number of bytes to write. Defaults to the buffer size.

        Returns:
            True on success; False for a closed generator, a missing or
            read-only buffer, a zero length, or a length past the end.
        """
        if self._state is None or buffer is None:
            logger.warning("fill_bytes: generator closed or buffer missing")
            return False

        try:
            view = memoryview(buffer).cast("B")
        except (TypeError, ValueError) as exc:
            logger.warning("fill_bytes: unusable buffer (%s)", exc)
            return False

        if length is None:
            length = view.nbytes
        if view.readonly or length <= 0 or length > view.nbytes:
            logger.warning(
                "fill_bytes: invalid request (length=%s, size=%d, readonly=%s)",
                length, view.nbytes, view.readonly,
            )
            return False

        offset = 0
        while offset + 8 <= length:
            view[offset:offset + 8] = self.next_uint64().to_bytes(8, "little")
            offset += 8

        if offset < length:
            tail = self.next_uint64().to_bytes(8, "little")
            view[offset:length] = tail[:length - offset]

        return True

    def random_bytes(self, n: int) -> bytes:
        """Return n random bytes (empty bytes for n <= 0 or a closed generator)."""
        if n <= 0:
            return b""
        buf = bytearray(n)
        if not self.fill_bytes(buf, n):
            return b""
        return bytes(buf)

    def uint64_array(self, n: int) -> np.ndarray:
        """n sequential next_uint64() draws as a uint64 array."""
        return np.fromiter((self.next_uint64() for _ in range(n)), dtype=np.uint64, count=n)

    def double_array(self, n: int) -> np.ndarray:
        """n sequential next_double() draws as a float64 array."""
        return np.fromiter((self.next_double() for _ in range(n)), dtype=np.float64, count=n)

    def sample_array(self, n: int) -> np.ndarray:
        """n sequential next_distribution_sample() draws as a float64 array."""
        return np.fromiter(
            (self.next_distribution_sample() for _ in range(n)),
            dtype=np.float64,
            count=n,
        )

    # ---------------------------------------------------------------
    # State control
    # ---------------------------------------------------------------

    def _seed_state(self, seed: Seed) -> bool:
        """
        (Re)build the algorithm state from an already-resolved seed.

        Uniform kinds get a fresh state object. Distribution kinds keep
        their sampler and base generator: the base is reseeded in place and
        the Gaussian look-ahead cache is dropped.
        """
        kind = self.kind

        if kind in UNIFORM_KINDS:
            self._state = _UNIFORM_FACTORIES[kind](seed)
            return True

        if kind in DISTRIBUTION_KINDS:
            if self._base is None:
                base = create_generator(GeneratorKind.XOSHIRO256PP, seed, clock=self._clock)
                if base is None:
                    return False
                sampler_cls = _SAMPLER_SPECS[kind][0]
                self._base = base
                self._state = sampler_cls(base, self.params)
                return True

            if not self._base.reseed(seed):
                return False
            if kind is GeneratorKind.GAUSSIAN:
                self._state.clear_cache()
            return True

        return False

    def reseed(self, seed: Seed) -> bool:
        """
        Reset to the state a fresh generator of the same kind and params
        would have with `seed`. Seed 0 means "derive from the clock".
        """
        if self._state is None:
            logger.warning("reseed: generator is closed")
            return False

        seed = _resolve_seed(seed, self._clock)
        if not self._seed_state(seed):
            logger.warning("reseed: failed for kind %s", self.kind)
            return False

        logger.debug("Reseeded %s generator with seed %d", self.kind.value, seed)
        return True

    def jump(self) -> bool:
        """
        Advance an XOSHIRO256PP generator by 2**128 draws.

        Returns False, leaving the state untouched, for every other kind.
        """
        if self._state is None or self.kind is not GeneratorKind.XOSHIRO256PP:
            logger.warning("jump: unsupported for %s generator", self.kind.value)
            return False
        self._state.jump()
        return True

    def analyze(self, sample_size: int, results: Optional[dict] = None) -> bool:
        """
        Statistical-quality analysis hook. Not implemented.

        No test battery is defined for this project, so this always
        reports failure instead of pretending the stream was checked.
        """
        logger.warning(
            "analyze: not implemented (kind=%s, sample_size=%s)",
            self.kind.value, sample_size,
        )
        return False

    def close(self) -> None:
        """Release the algorithm state, closing any owned base generator first."""
        if self._base is not None:
            self._base.close()
            self._base = None
        self._state = None


# -------------------------------------------------------------------
# Lifecycle
# -------------------------------------------------------------------


def create_generator(
    kind: Union[GeneratorKind, str],
    seed: Seed,
    params: Optional[DistributionParams] = None,
    clock: Optional[Clock] = None,
) -> Optional[Generator]:
    """
    Construct a Generator.

    Args:
        kind:
            A GeneratorKind or its string value (e.g. "pcg32").
        seed:
            64-bit seed. 0 means "derive from the clock" and is replaced
            before any state expansion.
        params:
            Distribution parameters for distribution kinds; config defaults
            are used when omitted. Ignored for uniform kinds.
        clock:
            Optional clock for seed-0 substitution (see seed_from_clock).
            Inherited by the owned base generator.

    Returns:
        The new Generator, or None if the kind is unknown, the parameters
        do not match the kind, or the owned base generator could not be
        built.
    """
    try:
        kind = GeneratorKind(kind)
    except ValueError:
        logger.warning("create_generator: unknown kind %r", kind)
        return None

    if kind in UNIFORM_KINDS:
        params = None
    else:
        _, params_type, default = _SAMPLER_SPECS[kind]
        if params is None:
            params = default
        elif not isinstance(params, params_type):
            logger.warning(
                "create_generator: %s needs %s, got %s",
                kind.value, params_type.__name__, type(params).__name__,
            )
            return None

    gen = Generator(kind, params, clock=clock)
    resolved = _resolve_seed(seed, clock)
    if not gen._seed_state(resolved):
        logger.warning("create_generator: could not build %s state", kind.value)
        return None

    logger.debug("Created %s generator with seed %d", kind.value, resolved)
    return gen


def destroy_generator(gen: Optional[Generator]) -> None:
    """Close `gen` (and its owned base). Passing None is a no-op."""
    if gen is not None:
        gen.close()
