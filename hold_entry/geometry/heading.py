"""
Circular heading arithmetic over the (0, 360] degree domain.

Headings are whole degrees where 360 is due north and 0 is never produced.
Every operation here returns a new validated Heading, so wraparound across
north is handled in one place instead of at each call site.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from hold_entry.errors import InvalidHeading


class Direction(str, Enum):
    """Turn sense of a holding pattern or a heading change."""
    LEFT = "Left"
    RIGHT = "Right"


class CardinalDirection(str, Enum):
    """Eight-point compass rose, in clockwise order from north."""
    NORTH = "North"
    NORTHEAST = "Northeast"
    EAST = "East"
    SOUTHEAST = "Southeast"
    SOUTH = "South"
    SOUTHWEST = "Southwest"
    WEST = "West"
    NORTHWEST = "Northwest"


@dataclass(frozen=True, order=True)
class Heading:
    """A validated heading in whole degrees, 0 < degrees <= 360."""
    degrees: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "degrees", _checked_degrees(self.degrees))

    def __int__(self) -> int:
        return self.degrees

    def __str__(self) -> str:
        return f"{self.degrees}°"


def _checked_degrees(value: Any) -> int:
    if isinstance(value, bool):
        raise InvalidHeading(
            f"Heading must be an integer, got {value!r}",
            reason=InvalidHeading.NOT_INTEGER,
            value=value,
        )
    if isinstance(value, float):
        if not value.is_integer():
            raise InvalidHeading(
                f"Heading must be an integer, got {value!r}",
                reason=InvalidHeading.NOT_INTEGER,
                value=value,
            )
        value = int(value)
    if not isinstance(value, int):
        raise InvalidHeading(
            f"Heading must be an integer, got {type(value).__name__}",
            reason=InvalidHeading.NOT_INTEGER,
            value=value,
        )
    if not 0 < value <= 360:
        raise InvalidHeading(
            f"Heading {value} outside (0, 360]",
            reason=InvalidHeading.OUT_OF_RANGE,
            value=value,
        )
    return value


def validate_heading(value: Any) -> Heading:
    """
    Build a Heading from a raw value.

    Args:
        value: Candidate degree value

    Returns:
        Validated Heading

    Raises:
        InvalidHeading: If value is not an integer or is outside (0, 360]
    """
    if isinstance(value, Heading):
        return value
    return Heading(value)


def _wrap(raw: int) -> Heading:
    wrapped = raw % 360
    return Heading(360 if wrapped == 0 else wrapped)


def add_headings(a: Heading, b: Heading) -> Heading:
    """Sum of two headings, wrapped into (0, 360]."""
    return _wrap(a.degrees + b.degrees)


def subtract_headings(a: Heading, b: Heading) -> Heading:
    """
    Clockwise angular distance walking from b to a.

    This is not arithmetic a - b: subtract_headings(10, 350) is 20 and
    subtract_headings(350, 10) is 340. Equal headings give 360, never 0.
    """
    return _wrap(a.degrees - b.degrees + 360)


RECIPROCAL = Heading(180)


def reverse_course(heading: Heading) -> Heading:
    """Reciprocal of a heading."""
    return add_headings(heading, RECIPROCAL)


def direction_for_turn(from_heading: Heading, to_heading: Heading) -> Optional[Direction]:
    """
    Shorter turn direction from one heading onto another.

    Returns None for an exact course reversal, where either turn is
    equally short.
    """
    if from_heading == reverse_course(to_heading):
        return None
    if subtract_headings(from_heading, to_heading).degrees > 180:
        return Direction.RIGHT
    return Direction.LEFT


def heading_change_amount(from_heading: Heading, to_heading: Heading) -> int:
    """
    Degrees turned by the shorter turn between two headings, 0 to 180.

    This is not subtract_headings(from, to) taken mod 180. That agrees only
    while the wrapped difference is at most 180; 30 to 60 gives a difference
    of 330, which mod 180 is 150, where the shorter turn is 30.
    """
    raw = subtract_headings(from_heading, to_heading).degrees
    if raw == 360:
        return 0
    return min(raw, 360 - raw)


@dataclass(frozen=True)
class HeadingRange:
    """
    Circular arc swept from start to end in the given direction.

    The arc is half-open: end is inside it and start is not, except when
    start equals end, which is the whole circle.
    """
    start: Heading
    end: Heading
    direction: Direction

    def contains(self, candidate: Heading) -> bool:
        """Check whether candidate lies on the arc."""
        if self.direction is Direction.RIGHT:
            return (subtract_headings(candidate, self.start).degrees
                    <= subtract_headings(self.end, self.start).degrees)
        return (subtract_headings(self.start, candidate).degrees
                <= subtract_headings(self.start, self.end).degrees)


def heading_range_contains(heading_range: HeadingRange, candidate: Heading) -> bool:
    """Functional form of HeadingRange.contains."""
    return heading_range.contains(candidate)


_ROSE = tuple(CardinalDirection)
_SECTOR_WIDTH = 45.0


def get_cardinal_direction(heading: Heading) -> CardinalDirection:
    """
    Eight-point compass direction for a heading.

    Each sector is 45 degrees wide, centred on its point, with the upper
    bound inclusive: Northeast covers (22.5, 67.5].
    """
    index = math.ceil((heading.degrees - _SECTOR_WIDTH / 2) / _SECTOR_WIDTH) % len(_ROSE)
    return _ROSE[index]
