"""
Text format for Vector3.

    Vector3(<x>, <y>, <z>)

The same format is produced by str(vector) and accepted by
Vector3.from_str(), so every vector survives a round trip:

    Vector3.from_str(str(v)) == v

Coordinates are written with Python's shortest round-trip float text,
minus the trailing ".0" on integral values: Vector3(1.3, 0, -5.355).
"""

from __future__ import annotations
import logging
import math
import re
from typing import Tuple

from .errors import InvalidFormatError, NumberParseError

logger = logging.getLogger(__name__)

PREFIX = "Vector3("
SUFFIX = ")"
MIN_LENGTH = len("Vector3(0,0,0)")

# Signed decimal with optional fraction and exponent, or inf/infinity/nan
_NUMBER = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE | re.ASCII,
)


def format_coordinate(value: float) -> str:
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


def format_vector3(x: float, y: float, z: float) -> str:
    return f"{PREFIX}{format_coordinate(x)}, {format_coordinate(y)}, {format_coordinate(z)}{SUFFIX}"


def _parse_number(field: str) -> float:
    literal = field.strip()
    if not _NUMBER.fullmatch(literal):
        logger.debug(f"Rejected coordinate {field!r}: not a number")
        raise NumberParseError(f"failed to parse numbers: {literal!r} is not a number")

    value = float(literal)
    if math.isnan(value):
        logger.debug(f"Rejected coordinate {field!r}: NaN")
        raise NumberParseError("failed to parse numbers: NaN is not a valid coordinate")
    return value


def parse_coordinates(text: str) -> Tuple[float, float, float]:
    """
    Parse "Vector3(x, y, z)" into its three coordinates.

    Raises:
        InvalidFormatError: too short, wrong prefix/suffix, or not exactly
            three comma-separated fields
        NumberParseError: a field is not a float literal, or is NaN
    """
    if len(text) < MIN_LENGTH or not text.startswith(PREFIX) or not text.endswith(SUFFIX):
        logger.debug(f"Rejected {text!r}: expected {PREFIX}x, y, z{SUFFIX}")
        raise InvalidFormatError()

    fields = text[len(PREFIX):-len(SUFFIX)].split(",")
    if len(fields) != 3:
        logger.debug(f"Rejected {text!r}: {len(fields)} fields")
        raise InvalidFormatError(f"invalid format: expected 3 coordinates, got {len(fields)}")

    x, y, z = (_parse_number(field) for field in fields)
    return x, y, z
