"""
Random source for Vector3.random().

KEY CONCEPT: one NumPy Generator per thread

A numpy.random.Generator is not safe to share between threads, so each
thread lazily gets its own handle. All handles descend from one root
SeedSequence:

    root = SeedSequence(config.random_seed)
    thread N  ->  default_rng(root.spawn(1)[0])

With a configured seed the first thread to draw always gets the same
stream, so seeded runs are reproducible. Without one the root is seeded
from OS entropy.
"""

from __future__ import annotations
import logging
import threading
from typing import Optional, Tuple

import numpy as np

from .config import get_config

logger = logging.getLogger(__name__)

_lock = threading.Lock()
_local = threading.local()
_root: Optional[np.random.SeedSequence] = None
_generation = 0     # Bumped by reset_random(); stale thread handles are rebuilt


def _spawn_generator() -> np.random.Generator:
    global _root
    with _lock:
        if _root is None:
            _root = np.random.SeedSequence(get_config().random_seed)
        child = _root.spawn(1)[0]
        generation = _generation

    _local.generator = np.random.default_rng(child)
    _local.generation = generation
    logger.info(
        f"Created random source for thread {threading.current_thread().name} "
        f"(spawn key {child.spawn_key})"
    )
    return _local.generator


def get_generator() -> np.random.Generator:
    """The calling thread's random generator, created on first use."""
    generator = getattr(_local, "generator", None)
    if generator is None or _local.generation != _generation:
        return _spawn_generator()
    return generator


def seed_random(seed: Optional[int]) -> None:
    """Reseed the calling thread's generator. Other threads are unaffected."""
    _local.generator = np.random.default_rng(seed)
    _local.generation = _generation
    logger.info(f"Reseeded random source for thread {threading.current_thread().name} with {seed}")


def reset_random() -> None:
    """Drop every thread's generator; the next draw re-reads the config seed."""
    global _root, _generation
    with _lock:
        _root = None
        _generation += 1


def uniform3() -> Tuple[float, float, float]:
    """Three independent draws from U[0.0, 1.0)."""
    x, y, z = get_generator().random(3)
    return float(x), float(y), float(z)
