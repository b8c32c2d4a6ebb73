"""
Library configuration.

Two knobs, both optional:
- fuzzy_epsilon: default tolerance for Vector3.fuzzy_equal
- random_seed: seed for the process-wide random source (None = OS entropy)

Values come from the environment on first use:
    VEC3_FUZZY_EPSILON=1e-6
    VEC3_RANDOM_SEED=42
"""

from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

ENV_FUZZY_EPSILON = "VEC3_FUZZY_EPSILON"
ENV_RANDOM_SEED = "VEC3_RANDOM_SEED"


@dataclass
class Vec3Config:
    """Configuration shared by every Vector3 in the process."""
    fuzzy_epsilon: float = 1e-9         # Per-axis tolerance for fuzzy_equal
    random_seed: Optional[int] = None   # None = seed from OS entropy

    def __post_init__(self):
        if self.fuzzy_epsilon < 0:
            raise ValueError(f"fuzzy_epsilon must be non-negative, got {self.fuzzy_epsilon}")

    @classmethod
    def from_env(cls) -> "Vec3Config":
        """Build a config from VEC3_* environment variables."""
        config = cls()

        raw_epsilon = os.getenv(ENV_FUZZY_EPSILON)
        if raw_epsilon is not None:
            try:
                epsilon = float(raw_epsilon)
            except ValueError:
                epsilon = -1.0
            if epsilon >= 0:
                config.fuzzy_epsilon = epsilon
            else:
                logger.warning(
                    f"Ignoring {ENV_FUZZY_EPSILON}={raw_epsilon!r}: "
                    f"expected a non-negative number, using {config.fuzzy_epsilon}"
                )

        raw_seed = os.getenv(ENV_RANDOM_SEED)
        if raw_seed is not None:
            try:
                config.random_seed = int(raw_seed)
            except ValueError:
                logger.warning(f"Ignoring {ENV_RANDOM_SEED}={raw_seed!r}: expected an integer")

        return config


_config: Optional[Vec3Config] = None


def get_config() -> Vec3Config:
    """Process-wide config, read from the environment on first use."""
    global _config
    if _config is None:
        _config = Vec3Config.from_env()
    return _config


def set_config(config: Optional[Vec3Config]) -> None:
    """
    Replace the process-wide config.

    Passing None drops the current config so the next get_config() re-reads
    the environment. Either way the random source is reset so a new seed
    takes effect.
    """
    global _config
    _config = config

    from .rng import reset_random
    reset_random()
