"""ATC holding clearance text and answer formatting."""

from typing import Any, Iterable

from hold_entry.geometry import get_cardinal_direction, reverse_course
from hold_entry.hold import DistanceBasedLeg, Hold, HoldEntry, TimeBasedLeg, encode_hold

from .generator import HoldingScenario

ENTRY_ORDER = (HoldEntry.DIRECT, HoldEntry.TEARDROP, HoldEntry.PARALLEL)

ASSUMPTION_TEXT = (
    "Assume you are direct to the fix on the heading indicated by the heading indicator."
)


def _number(value: float) -> str:
    return f"{value:g}"


def format_leg_length(hold: Hold) -> str:
    """Leg length phrase, e.g. "1.5 minute" or "4 mile"."""
    if isinstance(hold, TimeBasedLeg):
        return f"{_number(hold.duration_seconds.minutes)} minute"
    if isinstance(hold, DistanceBasedLeg):
        return f"{_number(hold.distance_decimiles.nautical_miles)} mile"
    raise TypeError(f"Unsupported hold variant: {type(hold).__name__}")


def format_holding_instructions(hold: Hold) -> str:
    """
    Phrase a hold as an ATC holding clearance.

    The aircraft holds on the radial opposite the inbound course, on the
    side of the fix that radial points to.
    """
    radial = reverse_course(hold.inbound_course)
    return (
        f"Hold {get_cardinal_direction(radial).value} of {hold.fix} "
        f"on the {radial.degrees}° radial, "
        f"{hold.direction.value} turns, "
        f"{format_leg_length(hold)} legs, "
        f"expect further clearance in {hold.efc_minutes} minutes."
    )


def format_solution(entries: Iterable[HoldEntry]) -> list[str]:
    """Entry labels in Direct, Teardrop, Parallel order."""
    selected = set(entries)
    return [entry.label for entry in ENTRY_ORDER if entry in selected]


def scenario_to_dict(scenario: HoldingScenario) -> dict[str, Any]:
    """JSON-ready record of a scenario."""
    return {
        "hold": encode_hold(scenario.hold),
        "courseToFix": scenario.course_to_fix.degrees,
        "solution": [entry.value for entry in ENTRY_ORDER if entry in scenario.solution],
    }
