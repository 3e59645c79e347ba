"""
Error kinds raised by the range engine.

All errors derive from ValueError so callers that already guard input
parsing with ``except ValueError`` keep working.
"""

from typing import Optional


class RangeError(ValueError):
    """Base class for range engine errors."""

    def __init__(self, message: str, token: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.token = token


class InvalidHandNotation(RangeError):
    """Malformed or unrecognized rank/suit token."""


class InvalidRangeExpression(RangeError):
    """Dash- or plus-range whose endpoints do not fit together."""


class InvalidWeight(RangeError):
    """Weight that is not a number or lies outside [0, 1]."""


class UnsupportedFormat(RangeError):
    """Conversion format name outside the supported set."""


class OutOfRange(RangeError):
    """Grid coordinate or hand lookup outside the 13x13 grid."""


class HrcFormatError(RangeError):
    """HRC scenario document that cannot be imported."""
