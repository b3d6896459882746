"""
Holding pattern entry classification.

Splits the compass around the holding fix into the Direct, Teardrop and
Parallel sectors for a given hold, then reports which sector the aircraft's
course to the fix falls in.

    Direct    parallel_direct   -> teardrop_direct    (180°)
    Teardrop  teardrop_direct   -> teardrop_parallel  (70°)
    Parallel  teardrop_parallel -> parallel_direct    (110°)

All three arcs are swept in the hold's turn direction. Arcs are half-open,
so a course lying exactly on a boundary belongs to the sector that boundary
closes.
"""

from dataclasses import dataclass

from hold_entry.geometry import (
    Direction,
    Heading,
    HeadingRange,
    add_headings,
    reverse_course,
    subtract_headings,
)
from hold_entry.logging.config import get_classifier_logger, log_entry_decision

from .models import Hold, HoldEntry

classifier_logger = get_classifier_logger(__name__)

# Angle between the inbound course and the Direct/Parallel boundary
DIRECT_SECTOR_OFFSET = Heading(70)


@dataclass(frozen=True)
class EntryBoundaries:
    """Headings that divide the compass into the three entry sectors."""
    parallel_direct: Heading
    teardrop_direct: Heading
    teardrop_parallel: Heading

    def sectors(self, direction: Direction) -> dict[HoldEntry, HeadingRange]:
        """Arc covered by each entry, swept in the hold's turn direction."""
        return {
            HoldEntry.DIRECT: HeadingRange(self.parallel_direct, self.teardrop_direct, direction),
            HoldEntry.TEARDROP: HeadingRange(self.teardrop_direct, self.teardrop_parallel, direction),
            HoldEntry.PARALLEL: HeadingRange(self.teardrop_parallel, self.parallel_direct, direction),
        }


def compute_entry_boundaries(hold: Hold) -> EntryBoundaries:
    """
    Compute the sector boundary headings for a hold.

    1. parallel_direct is the inbound course offset 70° away from the
       holding side: minus for right turns, plus for left turns.
    2. teardrop_direct is the reciprocal of parallel_direct.
    3. teardrop_parallel is the reciprocal of the inbound course.

    Args:
        hold: Time- or distance-based hold

    Returns:
        The three boundary headings
    """
    if hold.direction is Direction.RIGHT:
        parallel_direct = subtract_headings(hold.inbound_course, DIRECT_SECTOR_OFFSET)
    else:
        parallel_direct = add_headings(hold.inbound_course, DIRECT_SECTOR_OFFSET)

    return EntryBoundaries(
        parallel_direct=parallel_direct,
        teardrop_direct=reverse_course(parallel_direct),
        teardrop_parallel=reverse_course(hold.inbound_course),
    )


def classify(hold: Hold, course_to_fix: Heading) -> frozenset[HoldEntry]:
    """
    Determine which entry procedures apply for an aircraft approaching a hold.

    Args:
        hold: Time- or distance-based hold
        course_to_fix: Aircraft's course to the holding fix

    Returns:
        Set of applicable entries. The sectors tile the compass, so this
        holds exactly one entry.

    Usage:
        entries = classify(hold, Heading(140))
    """
    boundaries = compute_entry_boundaries(hold)
    entries = frozenset(
        entry
        for entry, sector in boundaries.sectors(hold.direction).items()
        if sector.contains(course_to_fix)
    )

    log_entry_decision(
        classifier_logger,
        fix=hold.fix,
        course_to_fix=course_to_fix.degrees,
        entries=entries,
        boundaries=boundaries,
        context={"inbound_course": hold.inbound_course.degrees, "turns": hold.direction.value},
    )
    return entries
