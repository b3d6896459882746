"""
Holding pattern data models.

This module defines the immutable, validated structures describing a
published hold and the entry procedures used to join it. Holds come in two
variants that differ only in how the outbound leg is measured.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Union

from hold_entry.errors import InvalidDistance, InvalidDuration, InvalidHold
from hold_entry.geometry import Direction, Heading


def _whole_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, float):
        return value.is_integer()
    return isinstance(value, int)


@dataclass(frozen=True, order=True)
class DurationSeconds:
    """Outbound leg timing in whole, non-negative seconds."""
    value: int

    def __post_init__(self) -> None:
        if not _whole_number(self.value):
            raise InvalidDuration(
                f"Duration must be a whole number of seconds, got {self.value!r}",
                reason="not-integer",
                value=self.value,
            )
        if self.value < 0:
            raise InvalidDuration(
                f"Duration must be non-negative, got {self.value}",
                reason="negative",
                value=self.value,
            )
        object.__setattr__(self, "value", int(self.value))

    @property
    def minutes(self) -> float:
        return self.value / 60


@dataclass(frozen=True, order=True)
class DistanceDecimiles:
    """Outbound leg length in tenths of a nautical mile."""
    value: int

    def __post_init__(self) -> None:
        if not _whole_number(self.value):
            raise InvalidDistance(
                f"Distance must be a whole number of decimiles, got {self.value!r}",
                reason="not-integer",
                value=self.value,
            )
        if self.value < 0:
            raise InvalidDistance(
                f"Distance must be non-negative, got {self.value}",
                reason="negative",
                value=self.value,
            )
        object.__setattr__(self, "value", int(self.value))

    @property
    def nautical_miles(self) -> float:
        return self.value / 10


@dataclass(frozen=True)
class _HoldFields:
    """Fields shared by both hold variants."""
    fix: str
    inbound_course: Heading
    direction: Direction
    efc_minutes: int

    def _check_common(self) -> None:
        if not isinstance(self.fix, str):
            raise InvalidHold(f"Fix must be a string, got {self.fix!r}",
                              field="fix", reason="wrong-type")
        if not isinstance(self.inbound_course, Heading):
            raise InvalidHold(f"Inbound course must be a Heading, got {self.inbound_course!r}",
                              field="inbound_course", reason="wrong-type")
        if not isinstance(self.direction, Direction):
            raise InvalidHold(f"Direction must be Left or Right, got {self.direction!r}",
                              field="direction", reason="wrong-type")
        if not _whole_number(self.efc_minutes) or self.efc_minutes < 0:
            raise InvalidHold(f"EFC must be non-negative whole minutes, got {self.efc_minutes!r}",
                              field="efc_minutes", reason="invalid-value")
        object.__setattr__(self, "efc_minutes", int(self.efc_minutes))


@dataclass(frozen=True)
class TimeBasedLeg(_HoldFields):
    """Hold whose outbound leg is flown for a fixed time."""
    duration_seconds: DurationSeconds

    tag: ClassVar[str] = "TimeBasedLeg"

    def __post_init__(self) -> None:
        self._check_common()
        if not isinstance(self.duration_seconds, DurationSeconds):
            raise InvalidHold(f"Duration must be DurationSeconds, got {self.duration_seconds!r}",
                              field="duration_seconds", reason="wrong-type")


@dataclass(frozen=True)
class DistanceBasedLeg(_HoldFields):
    """Hold whose outbound leg is flown for a fixed distance."""
    distance_decimiles: DistanceDecimiles

    tag: ClassVar[str] = "DistanceBasedLeg"

    def __post_init__(self) -> None:
        self._check_common()
        if not isinstance(self.distance_decimiles, DistanceDecimiles):
            raise InvalidHold(f"Distance must be DistanceDecimiles, got {self.distance_decimiles!r}",
                              field="distance_decimiles", reason="wrong-type")


Hold = Union[TimeBasedLeg, DistanceBasedLeg]

HOLD_VARIANTS: dict[str, type] = {
    TimeBasedLeg.tag: TimeBasedLeg,
    DistanceBasedLeg.tag: DistanceBasedLeg,
}


class HoldEntry(str, Enum):
    """Standard holding pattern entry procedures."""
    DIRECT = "DirectEntry"
    TEARDROP = "TeardropEntry"
    PARALLEL = "ParallelEntry"

    @property
    def label(self) -> str:
        """Readable name, e.g. "Teardrop Entry"."""
        return self.value.replace("Entry", " Entry")
