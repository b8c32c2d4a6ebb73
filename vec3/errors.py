"""
Errors raised by vec3.

Two kinds of failure exist:

1. CONTRACT VIOLATIONS (NaNCoordinateError, FrozenVectorError)
   - The caller broke an invariant: a NaN coordinate, or a write to a constant
   - Not meant to be handled; validate inputs before calling instead

2. CONVERSION FAILURES (ParseVector3Error and subclasses)
   - Bad text or a short sequence handed to a conversion
   - Recoverable, the caller decides what to do
"""


class Vector3Error(Exception):
    """Base class for every error raised by vec3."""


class NaNCoordinateError(Vector3Error, ArithmeticError):
    """A Vector3 would have held a NaN coordinate."""


class FrozenVectorError(Vector3Error, AttributeError):
    """Attempted to mutate one of the shared constant vectors."""


class ParseVector3Error(Vector3Error, ValueError):
    """A value could not be converted into a Vector3."""


class InvalidFormatError(ParseVector3Error):
    def __init__(self, message: str = "invalid format"):
        super().__init__(message)


class NumberParseError(ParseVector3Error):
    def __init__(self, message: str = "failed to parse numbers"):
        super().__init__(message)


class InvalidSequenceError(ParseVector3Error):
    def __init__(self, message: str = "invalid sequence length"):
        super().__init__(message)
