"""
vec3 - a 3D vector value type.

This package provides:
- Vector3: arithmetic, dot/cross, normalization, lerp, angles, fuzzy equality
- Conversions to and from tuples, numpy arrays, sequences and text
- Named constants: X_AXIS, Y_AXIS, Z_AXIS, VECTOR3_ZERO, VECTOR3_ONE
"""

from .vector import Vector3, parse_vector3
from .consts import X_AXIS, Y_AXIS, Z_AXIS, VECTOR3_ZERO, VECTOR3_ONE
from .config import Vec3Config, get_config, set_config
from .rng import seed_random
from .errors import (
    Vector3Error,
    NaNCoordinateError,
    FrozenVectorError,
    ParseVector3Error,
    InvalidFormatError,
    NumberParseError,
    InvalidSequenceError,
)

__all__ = [
    "Vector3",
    "parse_vector3",
    "X_AXIS",
    "Y_AXIS",
    "Z_AXIS",
    "VECTOR3_ZERO",
    "VECTOR3_ONE",
    "Vec3Config",
    "get_config",
    "set_config",
    "seed_random",
    "Vector3Error",
    "NaNCoordinateError",
    "FrozenVectorError",
    "ParseVector3Error",
    "InvalidFormatError",
    "NumberParseError",
    "InvalidSequenceError",
]
