"""
Error classification for the hold entry trainer.

This module provides the exception hierarchy for rejected input values and
for configuration loading failures.
"""

from .validation import (
    HoldValidationError,
    InvalidHeading,
    InvalidDuration,
    InvalidDistance,
    InvalidHold,
)
from .configuration import ConfigurationError

__all__ = [
    # Validation Errors
    "HoldValidationError",
    "InvalidHeading",
    "InvalidDuration",
    "InvalidDistance",
    "InvalidHold",
    # Configuration
    "ConfigurationError",
]
