"""Pytest configuration and shared fixtures."""

import pytest
from typing import Any, Dict

from hold_entry.geometry import Direction, Heading
from hold_entry.hold import DistanceBasedLeg, DistanceDecimiles, DurationSeconds, TimeBasedLeg


@pytest.fixture
def left_hold_270() -> TimeBasedLeg:
    """Left-turn, one minute hold with inbound course 270."""
    return TimeBasedLeg(
        fix="RDU",
        inbound_course=Heading(270),
        direction=Direction.LEFT,
        efc_minutes=11,
        duration_seconds=DurationSeconds(60),
    )


@pytest.fixture
def right_hold_030() -> DistanceBasedLeg:
    """Right-turn, four mile hold with inbound course 030."""
    return DistanceBasedLeg(
        fix="GSO",
        inbound_course=Heading(30),
        direction=Direction.RIGHT,
        efc_minutes=18,
        distance_decimiles=DistanceDecimiles(40),
    )


@pytest.fixture
def time_based_record() -> Dict[str, Any]:
    """Time-based hold record in wire format."""
    return {
        "_tag": "TimeBasedLeg",
        "fix": "RDU",
        "inboundCourse": 180,
        "durationSeconds": 5,
        "direction": "Left",
        "efcMinutes": 33,
    }


@pytest.fixture
def distance_based_record() -> Dict[str, Any]:
    """Distance-based hold record in wire format."""
    return {
        "_tag": "DistanceBasedLeg",
        "distanceDecimiles": 15,
        "fix": "GSO",
        "inboundCourse": 360,
        "direction": "Right",
        "efcMinutes": 18,
    }
