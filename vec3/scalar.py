"""Scalar helpers shared by the Vector3 operations."""

from __future__ import annotations
import math


def lerp(start: float, goal: float, alpha: float) -> float:
    """
    Linear interpolation: start + (goal - start) * alpha.

    alpha = 0.0 gives start, alpha = 1.0 gives goal. Values outside [0, 1]
    extrapolate along the same line; nothing is clamped.
    """
    return start + (goal - start) * alpha


def has_nan(*values: float) -> bool:
    return any(math.isnan(v) for v in values)
