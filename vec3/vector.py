"""
Vector3 - a 3D vector of double-precision floats

KEY INVARIANT: a Vector3 never holds NaN.

Every way of putting a value into a vector goes through one check
(_coordinate): the constructor, field assignment and the in-place
operators. Anything that would store NaN raises NaNCoordinateError.

DIVISION is the one place NaN shows up in normal use (0 / 0, x / nan),
so it has two contracts:

    a / b     soft: returns None instead of a NaN-bearing vector
    a /= b    hard: raises NaNCoordinateError, a is left unchanged

Division by zero on its own is fine and follows IEEE-754:
    Vector3(1, 1, -1) / 0.0  ->  Vector3(inf, inf, -inf)
    Vector3(1, 0, 0) / 0.0   ->  None   (0 / 0 in y and z)
"""

from __future__ import annotations
import itertools
import math
import numbers
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple

import numpy as np

from . import rng
from .config import get_config
from .errors import FrozenVectorError, InvalidSequenceError, NaNCoordinateError
from .scalar import has_nan, lerp
from .text import format_vector3, parse_coordinates

_FIELDS = ("x", "y", "z")


def _coordinate(value, message: str) -> float:
    """Widen a real number to float, rejecting NaN."""
    if not isinstance(value, numbers.Real):
        raise TypeError(f"Vector3 coordinates must be real numbers, got {type(value).__name__}")
    value = float(value)
    if math.isnan(value):
        raise NaNCoordinateError(message)
    return value


def _divide(numerator: np.ndarray, divisor) -> np.ndarray:
    # IEEE-754 semantics: x/0 -> +-inf, 0/0 -> nan, no warnings
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.true_divide(numerator, divisor)


@dataclass(repr=False, order=True)
class Vector3:
    """
    A point or direction in 3D space.

    Equality is exact and component-wise; ordering is lexicographic over
    (x, y, z). Use fuzzy_equal() for tolerance comparisons.
    """
    x: float
    y: float
    z: float

    _frozen = False     # Set on the shared constants in vec3.consts
    __array_ufunc__ = None  # numpy scalars defer to __rmul__ instead of broadcasting

    def __setattr__(self, name, value):
        if name in _FIELDS:
            if self._frozen:
                raise FrozenVectorError(f"cannot assign to {name!r} of a constant vector")
            value = _coordinate(value, f"Vector3.{name} cannot be NaN")
        super().__setattr__(name, value)

    def _assign(self, x, y, z, message: str) -> None:
        # Validate all three first so a failed operation leaves self untouched
        if self._frozen:
            raise FrozenVectorError("cannot modify a constant vector in place")
        x, y, z = (_coordinate(v, message) for v in (x, y, z))
        self.x, self.y, self.z = x, y, z

    def _freeze(self) -> Vector3:
        object.__setattr__(self, "_frozen", True)
        return self

    # ============================================================
    # Constructors
    # ============================================================

    @classmethod
    def new(cls, x: float, y: float, z: float) -> Vector3:
        return cls(x, y, z)

    @classmethod
    def default(cls) -> Vector3:
        """The zero vector."""
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def random(cls) -> Vector3:
        """Each component drawn independently from U[0.0, 1.0)."""
        return cls(*rng.uniform3())

    @classmethod
    def _from_integers(cls, dtype, x: int, y: int, z: int) -> Vector3:
        bounds = np.iinfo(dtype)
        for value in (x, y, z):
            if not isinstance(value, numbers.Integral):
                raise TypeError(f"expected an integer, got {type(value).__name__}")
            if not bounds.min <= int(value) <= bounds.max:
                raise OverflowError(f"{value} is out of range for {bounds.dtype}")
        return cls(float(x), float(y), float(z))

    @classmethod
    def from_i32(cls, x: int, y: int, z: int) -> Vector3:
        return cls._from_integers(np.int32, x, y, z)

    @classmethod
    def from_u32(cls, x: int, y: int, z: int) -> Vector3:
        return cls._from_integers(np.uint32, x, y, z)

    @classmethod
    def from_i64(cls, x: int, y: int, z: int) -> Vector3:
        return cls._from_integers(np.int64, x, y, z)

    @classmethod
    def from_u64(cls, x: int, y: int, z: int) -> Vector3:
        return cls._from_integers(np.uint64, x, y, z)

    def copy(self) -> Vector3:
        """An independent, mutable copy (also of a constant)."""
        return Vector3(self.x, self.y, self.z)

    def __copy__(self) -> Vector3:
        return self.copy()

    def __deepcopy__(self, memo) -> Vector3:
        return self.copy()

    # ============================================================
    # Accessors
    # ============================================================

    def get_x(self) -> float:
        return self.x

    def get_y(self) -> float:
        return self.y

    def get_z(self) -> float:
        return self.z

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __len__(self) -> int:
        return 3

    def __getitem__(self, index: int) -> float:
        if index in (0, 1, 2):
            return getattr(self, _FIELDS[index])
        raise IndexError(f"Vector3 does not have an element at index {index}")

    # ============================================================
    # Arithmetic
    # ============================================================

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other) -> Vector3:
        """Scalar: uniform scale. Vector3: component-wise (Hadamard) product."""
        if isinstance(other, Vector3):
            return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, numbers.Real):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, scalar: float) -> Vector3:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self * scalar

    def __truediv__(self, other) -> Optional[Vector3]:
        """
        Component-wise division by a scalar or another Vector3.

        Returns None when the divisor is NaN or any result component is NaN.
        """
        if isinstance(other, Vector3):
            result = _divide(self.to_array(), other.to_array())
        elif isinstance(other, numbers.Real):
            if math.isnan(other):
                return None
            result = _divide(self.to_array(), float(other))
        else:
            return NotImplemented

        if np.isnan(result).any():
            return None
        return Vector3.from_array(result)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __iadd__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        self._assign(self.x + other.x, self.y + other.y, self.z + other.z,
                     "Addition assignment resulted in NaN!")
        return self

    def __isub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        self._assign(self.x - other.x, self.y - other.y, self.z - other.z,
                     "Subtraction assignment resulted in NaN!")
        return self

    def __imul__(self, other) -> Vector3:
        if isinstance(other, Vector3):
            self._assign(self.x * other.x, self.y * other.y, self.z * other.z,
                         "Multiplication assignment resulted in NaN!")
        elif isinstance(other, numbers.Real):
            self._assign(self.x * other, self.y * other, self.z * other,
                         "Multiplication assignment resulted in NaN!")
        else:
            return NotImplemented
        return self

    def __itruediv__(self, other) -> Vector3:
        """
        In-place division.

        Raises:
            NaNCoordinateError: the divisor vector holds NaN, or the result
                would. self is unchanged.
        """
        if isinstance(other, Vector3):
            if has_nan(*other):
                raise NaNCoordinateError("Cannot divide vector by a non-normal-vector!")
            result = _divide(self.to_array(), other.to_array())
        elif isinstance(other, numbers.Real):
            result = _divide(self.to_array(), float(other))
        else:
            return NotImplemented

        self._assign(*result, "Division assignment resulted in NaN!")
        return self

    # ============================================================
    # Geometry
    # ============================================================

    def magnitude(self) -> float:
        """Length of the vector (Euclidean norm)."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> None:
        """
        Scale in place so the magnitude becomes 1.

        A zero vector has no direction: 0 / 0 is NaN, so this raises
        NaNCoordinateError. Check magnitude() first if that can happen.
        """
        self /= self.magnitude()

    def normalized(self) -> Vector3:
        """Unit vector (same direction, length = 1). Raises like normalize()."""
        result = self.copy()
        result.normalize()
        return result

    def dot(self, other: Vector3) -> float:
        """Dot product: measures how aligned two vectors are."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        """Cross product (right-hand rule): perpendicular to both inputs."""
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def max(self, other: Vector3) -> Vector3:
        """Component-wise maximum (not a magnitude comparison)."""
        return Vector3(
            self.x if self.x > other.x else other.x,
            self.y if self.y > other.y else other.y,
            self.z if self.z > other.z else other.z,
        )

    def min(self, other: Vector3) -> Vector3:
        """Component-wise minimum (not a magnitude comparison)."""
        return Vector3(
            self.x if self.x < other.x else other.x,
            self.y if self.y < other.y else other.y,
            self.z if self.z < other.z else other.z,
        )

    def angle(self, other: Vector3) -> float:
        """
        Angle between the two vectors in radians, in [0, pi].

        NaN if either vector has zero magnitude.
        """
        with np.errstate(divide="ignore", invalid="ignore"):
            cosine = np.float64(self.dot(other)) / (self.magnitude() * other.magnitude())
            # Rounding can push parallel vectors just past +-1
            return float(np.arccos(np.clip(cosine, -1.0, 1.0)))

    def angle_deg(self, other: Vector3) -> float:
        """Angle between the two vectors in degrees."""
        return self.angle(other) * (180.0 / math.pi)

    def lerp(self, other: Vector3, alpha: float) -> Vector3:
        """
        Linear interpolation toward other.

        alpha = 0 gives self, alpha = 1 gives other; values outside [0, 1]
        extrapolate.
        """
        return Vector3(
            lerp(self.x, other.x, alpha),
            lerp(self.y, other.y, alpha),
            lerp(self.z, other.z, alpha),
        )

    def fuzzy_equal(self, other: Vector3, epsilon: Optional[float] = None) -> bool:
        """
        True if every component differs by at most epsilon.

        Each axis is checked on its own; this is not a distance check.
        epsilon defaults to Vec3Config.fuzzy_epsilon.
        """
        if epsilon is None:
            epsilon = get_config().fuzzy_epsilon
        return (
            abs(self.x - other.x) <= epsilon
            and abs(self.y - other.y) <= epsilon
            and abs(self.z - other.z) <= epsilon
        )

    def distance_to(self, other: Vector3) -> float:
        """Distance between two points."""
        return (self - other).magnitude()

    # ============================================================
    # Conversions
    # ============================================================

    @classmethod
    def from_tuple(cls, value: Tuple[float, float, float]) -> Vector3:
        value = tuple(value)
        if len(value) != 3:
            raise InvalidSequenceError(f"invalid sequence length: expected 3 values, got {len(value)}")
        return cls(*value)

    def to_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    @classmethod
    def from_array(cls, arr) -> Vector3:
        """Create from a 3-element numpy array (anything np.asarray accepts)."""
        arr = np.asarray(arr, dtype=np.float64)
        if arr.shape != (3,):
            raise InvalidSequenceError(f"invalid sequence length: expected shape (3,), got {arr.shape}")
        return cls(float(arr[0]), float(arr[1]), float(arr[2]))

    def to_array(self) -> np.ndarray:
        """Convert to a float64 numpy array of shape (3,)."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    @classmethod
    def from_sequence(cls, values: Iterable[float]) -> Vector3:
        """
        Create from the first three items of a sequence.

        Extra items are ignored. Fewer than three raises InvalidSequenceError.
        """
        values = list(itertools.islice(values, 3))
        if len(values) < 3:
            raise InvalidSequenceError(
                f"invalid sequence length: expected at least 3 values, got {len(values)}"
            )
        return cls(values[0], values[1], values[2])

    def to_list(self) -> list:
        return [self.x, self.y, self.z]

    @classmethod
    def from_str(cls, text: str) -> Vector3:
        """Parse the "Vector3(x, y, z)" format produced by str()."""
        return cls(*parse_coordinates(text))

    def __str__(self) -> str:
        return format_vector3(self.x, self.y, self.z)

    def __repr__(self) -> str:
        return format_vector3(self.x, self.y, self.z)


def parse_vector3(text: str) -> Vector3:
    """Module-level alias for Vector3.from_str."""
    return Vector3.from_str(text)
