# config.py

"""
Global configuration for the prng-core project.

This module centralizes:
  - filesystem paths (where log files go),
  - the default seed used by demos and tests,
  - default parameters for the distribution samplers,
  - logging knobs.

Other modules *can* import from here, but they don't have to – the
generator facade only reaches for the distribution defaults when a caller
constructs a distribution generator without explicit parameters.
"""

from __future__ import annotations

import logging
from pathlib import Path

from core_types import GammaParams, GaussianParams, PoissonParams, WeibullParams


# -------------------------------------------------------------------
# Core paths
# -------------------------------------------------------------------

# Root of the project (directory containing generator.py, config.py, etc.)
PROJECT_ROOT: Path = Path(__file__).resolve().parent

# Directory for logs (if you want to write logs to disk)
LOGS_DIR: Path = PROJECT_ROOT / "logs"


# -------------------------------------------------------------------
# Seeding
# -------------------------------------------------------------------

# Global RNG seed for reproducibility.
# Never 0: seed 0 is reserved for "derive from the clock".
RANDOM_SEED: int = 42


# -------------------------------------------------------------------
# Distribution defaults (used when no parameters are passed)
# -------------------------------------------------------------------

DEFAULT_GAUSSIAN: GaussianParams = GaussianParams(mean=0.0, stddev=1.0)
DEFAULT_GAMMA: GammaParams = GammaParams(shape=1.0, scale=1.0)
DEFAULT_WEIBULL: WeibullParams = WeibullParams(shape=1.0, scale=1.0)
DEFAULT_POISSON: PoissonParams = PoissonParams(lam=1.0)


# -------------------------------------------------------------------
# Logging
# -------------------------------------------------------------------

LOG_LEVEL: int = logging.INFO
LOG_FILENAME: str = "prng_core.log"
