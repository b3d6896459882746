"""
Hold module.

Hold definitions, entry procedures, record decoding and entry
classification.
"""

from .classifier import EntryBoundaries, classify, compute_entry_boundaries
from .decoder import HoldDecoder, HoldDecodeResult, decode_hold, encode_hold
from .models import (
    DistanceBasedLeg,
    DistanceDecimiles,
    DurationSeconds,
    Hold,
    HoldEntry,
    TimeBasedLeg,
)

__all__ = [
    "DistanceBasedLeg",
    "DistanceDecimiles",
    "DurationSeconds",
    "EntryBoundaries",
    "Hold",
    "HoldDecodeResult",
    "HoldDecoder",
    "HoldEntry",
    "TimeBasedLeg",
    "classify",
    "compute_entry_boundaries",
    "decode_hold",
    "encode_hold",
]
