"""
Random holding scenario generation.

A scenario is a hold clearance plus the aircraft's course to the fix, with
the correct entry precomputed. All randomness comes from the Random instance
passed in, so a seeded generator reproduces the same quiz.
"""

import random
from dataclasses import dataclass
from typing import Optional

import structlog

from hold_entry.config.defaults import ScenarioParams
from hold_entry.geometry import Direction, Heading
from hold_entry.hold import (
    DistanceBasedLeg,
    DistanceDecimiles,
    DurationSeconds,
    Hold,
    HoldEntry,
    TimeBasedLeg,
    classify,
)

logger = structlog.get_logger(__name__)

INTERSECTION_NAME_LENGTH = 5


@dataclass(frozen=True)
class HoldingScenario:
    """A practice problem: the hold, the course to the fix and its answer."""
    hold: Hold
    course_to_fix: Heading
    solution: frozenset[HoldEntry]


def random_heading(rng: random.Random) -> Heading:
    """Uniformly random heading from 1 to 360."""
    return Heading(rng.randint(1, 360))


def random_fix_name(rng: random.Random, params: ScenarioParams) -> str:
    """Either a five-letter intersection like "MAPLE" or a VOR like "Heron VOR"."""
    if rng.random() < params.vor_probability:
        return f"{rng.choice(params.fix_words).title()} VOR"

    intersections = [word for word in params.fix_words if len(word) == INTERSECTION_NAME_LENGTH]
    return rng.choice(intersections).upper()


def random_hold(rng: random.Random, params: ScenarioParams) -> Hold:
    """Random time- or distance-based hold, each variant equally likely."""
    fix = random_fix_name(rng, params)
    inbound_course = random_heading(rng)
    direction = rng.choice((Direction.LEFT, Direction.RIGHT))
    efc_minutes = rng.randint(params.efc_min_minutes, params.efc_max_minutes)

    if rng.random() < 0.5:
        return TimeBasedLeg(
            fix=fix,
            inbound_course=inbound_course,
            direction=direction,
            efc_minutes=efc_minutes,
            duration_seconds=DurationSeconds(rng.choice(params.time_choices_seconds)),
        )
    return DistanceBasedLeg(
        fix=fix,
        inbound_course=inbound_course,
        direction=direction,
        efc_minutes=efc_minutes,
        distance_decimiles=DistanceDecimiles(rng.choice(params.distance_choices_decimiles)),
    )


def generate_scenario(rng: random.Random, params: Optional[ScenarioParams] = None) -> HoldingScenario:
    """
    Generate one practice scenario.

    Args:
        rng: Source of randomness
        params: Scenario parameters, defaults when omitted

    Returns:
        HoldingScenario with the classified solution
    """
    params = params or ScenarioParams()

    hold = random_hold(rng, params)
    course_to_fix = random_heading(rng)
    solution = classify(hold, course_to_fix)

    logger.debug(
        "Generated holding scenario",
        fix=hold.fix,
        hold_type=hold.tag,
        inbound_course=hold.inbound_course.degrees,
        course_to_fix=course_to_fix.degrees,
    )
    return HoldingScenario(hold=hold, course_to_fix=course_to_fix, solution=solution)
