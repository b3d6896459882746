"""
Heading geometry module.

Validated circular headings and the wraparound-safe arithmetic, turn and
sector queries built on them.
"""

from .heading import (
    CardinalDirection,
    Direction,
    Heading,
    HeadingRange,
    add_headings,
    direction_for_turn,
    get_cardinal_direction,
    heading_change_amount,
    heading_range_contains,
    reverse_course,
    subtract_headings,
    validate_heading,
)

__all__ = [
    "CardinalDirection",
    "Direction",
    "Heading",
    "HeadingRange",
    "add_headings",
    "direction_for_turn",
    "get_cardinal_direction",
    "heading_change_amount",
    "heading_range_contains",
    "reverse_course",
    "subtract_headings",
    "validate_heading",
]
