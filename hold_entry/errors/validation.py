"""
Validation error classifications for holding-pattern value types.

These exceptions are raised eagerly when a heading, leg measure or hold
record fails validation at construction time. Nothing is clamped or
defaulted silently.
"""

from typing import Any, Optional, Dict


class HoldValidationError(Exception):
    """Base class for rejected holding-pattern input."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class InvalidHeading(HoldValidationError):
    """Heading is not an integer in (0, 360]."""

    NOT_INTEGER = "not-integer"
    OUT_OF_RANGE = "out-of-range"

    def __init__(self, message: str, reason: str, value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.reason = reason
        self.value = value


class InvalidDuration(HoldValidationError):
    """Leg duration is negative or not a whole number of seconds."""

    def __init__(self, message: str, reason: str, value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.reason = reason
        self.value = value


class InvalidDistance(HoldValidationError):
    """Leg distance is negative or not a whole number of decimiles."""

    def __init__(self, message: str, reason: str, value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.reason = reason
        self.value = value


class InvalidHold(HoldValidationError):
    """Structural failure decoding a hold: bad tag, missing or invalid field."""

    def __init__(self, message: str, field: Optional[str] = None,
                 reason: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field
        self.reason = reason
