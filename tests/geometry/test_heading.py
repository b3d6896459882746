"""Tests for circular heading arithmetic."""

import pytest

from hold_entry.errors import HoldValidationError, InvalidHeading
from hold_entry.geometry import (
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

SAMPLE_DEGREES = list(range(1, 361, 7)) + [90, 180, 270, 359, 360]


def h(degrees: int) -> Heading:
    return Heading(degrees)


class TestHeadingValidation:
    """Test suite for Heading construction."""

    def test_valid_heading(self) -> None:
        """Test that an in-range integer builds a Heading."""
        assert validate_heading(350).degrees == 350
        assert Heading(360).degrees == 360
        assert Heading(1).degrees == 1

    @pytest.mark.parametrize("value", [365, -1, 0, 361])
    def test_out_of_range(self, value) -> None:
        """Test that values outside (0, 360] are rejected."""
        with pytest.raises(InvalidHeading) as exc_info:
            validate_heading(value)
        assert exc_info.value.reason == InvalidHeading.OUT_OF_RANGE
        assert exc_info.value.value == value

    @pytest.mark.parametrize("value", [100.1, "90", None, True])
    def test_not_integer(self, value) -> None:
        """Test that non-integer values are rejected."""
        with pytest.raises(InvalidHeading) as exc_info:
            validate_heading(value)
        assert exc_info.value.reason == InvalidHeading.NOT_INTEGER

    def test_integral_float_is_accepted(self) -> None:
        """Test that 180.0 from a JSON or YAML source is stored as int 180."""
        heading = validate_heading(180.0)
        assert heading == Heading(180)
        assert isinstance(heading.degrees, int)

    def test_validate_passes_heading_through(self) -> None:
        """Test that an existing Heading is returned unchanged."""
        heading = Heading(45)
        assert validate_heading(heading) is heading

    def test_invalid_heading_is_validation_error(self) -> None:
        """Test error hierarchy for invalid headings."""
        with pytest.raises(HoldValidationError):
            Heading(400)

    def test_heading_is_immutable(self) -> None:
        """Test that a Heading cannot be changed after construction."""
        heading = Heading(90)
        with pytest.raises(AttributeError):
            heading.degrees = 0  # type: ignore[misc]

    def test_str_and_int(self) -> None:
        """Test display and integer conversion."""
        assert str(Heading(90)) == "90°"
        assert int(Heading(90)) == 90


class TestAddHeadings:
    """Test suite for add_headings."""

    def test_no_wrap(self) -> None:
        assert add_headings(h(180), h(100)) == h(280)

    def test_wraps_past_north(self) -> None:
        assert add_headings(h(300), h(90)) == h(30)

    def test_360_plus_360(self) -> None:
        """Test that a sum of 720 normalizes to 360, never 0."""
        assert add_headings(h(360), h(360)) == h(360)

    def test_sum_to_north(self) -> None:
        assert add_headings(h(270), h(90)) == h(360)

    def test_always_in_domain(self) -> None:
        """Test totality over a spread of heading pairs."""
        for a in SAMPLE_DEGREES:
            for b in SAMPLE_DEGREES:
                assert 0 < add_headings(h(a), h(b)).degrees <= 360


class TestSubtractHeadings:
    """Test suite for subtract_headings."""

    def test_no_wrap(self) -> None:
        assert subtract_headings(h(180), h(100)) == h(80)

    def test_wraps(self) -> None:
        assert subtract_headings(h(90), h(300)) == h(150)

    def test_from_north(self) -> None:
        assert subtract_headings(h(360), h(90)) == h(270)

    def test_self_is_360(self) -> None:
        """Test that subtracting a heading from itself gives 360, not 0."""
        assert subtract_headings(h(90), h(90)) == h(360)

    def test_is_clockwise_distance(self) -> None:
        """Test argument order: clockwise distance from second to first."""
        assert subtract_headings(h(10), h(350)) == h(20)
        assert subtract_headings(h(350), h(10)) == h(340)

    def test_always_in_domain(self) -> None:
        for a in SAMPLE_DEGREES:
            for b in SAMPLE_DEGREES:
                assert 0 < subtract_headings(h(a), h(b)).degrees <= 360


class TestReverseCourse:
    """Test suite for reverse_course."""

    @pytest.mark.parametrize("degrees,expected", [(90, 270), (270, 90), (180, 360), (360, 180), (10, 190)])
    def test_reciprocal(self, degrees, expected) -> None:
        assert reverse_course(h(degrees)) == h(expected)

    def test_involution(self) -> None:
        """Test that reversing twice returns the original heading."""
        for degrees in range(1, 361):
            assert reverse_course(reverse_course(h(degrees))) == h(degrees)


class TestDirectionForTurn:
    """Test suite for direction_for_turn."""

    def test_right_turn_not_through_north(self) -> None:
        assert direction_for_turn(h(30), h(60)) is Direction.RIGHT

    def test_right_turn_through_north(self) -> None:
        assert direction_for_turn(h(330), h(20)) is Direction.RIGHT

    def test_left_turn_through_north(self) -> None:
        assert direction_for_turn(h(70), h(350)) is Direction.LEFT

    def test_left_turn_not_through_north(self) -> None:
        assert direction_for_turn(h(250), h(230)) is Direction.LEFT

    def test_right_turn_from_west_to_north(self) -> None:
        assert direction_for_turn(h(270), h(10)) is Direction.RIGHT

    def test_course_reversal_is_ambiguous(self) -> None:
        """Test that an exact 180° reversal has no preferred direction."""
        assert direction_for_turn(h(270), h(90)) is None
        assert direction_for_turn(h(360), h(180)) is None

    def test_same_heading(self) -> None:
        """Test that no turn reports the full-circle clockwise distance."""
        assert direction_for_turn(h(90), h(90)) is Direction.RIGHT


class TestHeadingChangeAmount:
    """Test suite for heading_change_amount."""

    def test_normal_turn(self) -> None:
        assert heading_change_amount(h(250), h(230)) == 20

    def test_course_reversal(self) -> None:
        assert heading_change_amount(h(260), h(80)) == 180

    def test_right_turn_uses_shorter_arc(self) -> None:
        assert heading_change_amount(h(30), h(60)) == 30

    def test_through_north(self) -> None:
        assert heading_change_amount(h(350), h(10)) == 20
        assert heading_change_amount(h(10), h(350)) == 20

    def test_no_change(self) -> None:
        assert heading_change_amount(h(90), h(90)) == 0

    def test_bounds(self) -> None:
        for a in SAMPLE_DEGREES:
            for b in SAMPLE_DEGREES:
                assert 0 <= heading_change_amount(h(a), h(b)) <= 180


class TestHeadingRangeContains:
    """Test suite for heading range containment."""

    def test_right_range_crossing_north(self) -> None:
        """Test a 350° to 10° right arc across the 360/0 seam."""
        seam = HeadingRange(h(350), h(10), Direction.RIGHT)
        assert heading_range_contains(seam, h(359))
        assert heading_range_contains(seam, h(5))
        assert heading_range_contains(seam, h(360))
        assert not heading_range_contains(seam, h(180))

    def test_left_range_not_crossing_north(self) -> None:
        left = HeadingRange(h(100), h(70), Direction.LEFT)
        assert left.contains(h(90))
        assert not left.contains(h(50))

    def test_acute_right_range(self) -> None:
        acute = HeadingRange(h(30), h(60), Direction.RIGHT)
        assert acute.contains(h(45))
        assert not acute.contains(h(25))

    def test_obtuse_right_range(self) -> None:
        obtuse = HeadingRange(h(30), h(150), Direction.RIGHT)
        assert obtuse.contains(h(90))
        assert not obtuse.contains(h(200))

    def test_range_larger_than_180(self) -> None:
        large = HeadingRange(h(100), h(300), Direction.RIGHT)
        assert large.contains(h(200))
        assert not large.contains(h(80))

    def test_left_sweep_from_90_to_340_goes_through_north(self) -> None:
        """Test that the left arc 90 -> 340 covers north, not west."""
        sweep = HeadingRange(h(90), h(340), Direction.LEFT)
        assert not sweep.contains(h(270))
        assert sweep.contains(h(20))
        assert sweep.contains(h(360))

    def test_end_is_inside_start_is_outside(self) -> None:
        """Test that arcs are half-open."""
        arc = HeadingRange(h(30), h(60), Direction.RIGHT)
        assert arc.contains(h(60))
        assert not arc.contains(h(30))

        arc = HeadingRange(h(100), h(70), Direction.LEFT)
        assert arc.contains(h(70))
        assert not arc.contains(h(100))


class TestHeadingRangeBoundaries:
    """Zero-length and 180° wide arcs."""

    @pytest.mark.parametrize("direction", [Direction.RIGHT, Direction.LEFT])
    def test_equal_ends_contain_start(self, direction) -> None:
        """Test that start == end is the full circle and includes the start."""
        assert HeadingRange(h(90), h(90), direction).contains(h(90))

    @pytest.mark.parametrize("direction", [Direction.RIGHT, Direction.LEFT])
    def test_equal_ends_contain_opposite(self, direction) -> None:
        assert HeadingRange(h(90), h(90), direction).contains(h(270))

    @pytest.mark.parametrize("direction", [Direction.RIGHT, Direction.LEFT])
    def test_equal_ends_at_north_contain_everything(self, direction) -> None:
        full = HeadingRange(h(360), h(360), direction)
        assert all(full.contains(h(degrees)) for degrees in range(1, 361))

    def test_half_circle_right(self) -> None:
        """Test exactly 180° apart, where direction_for_turn has no answer."""
        half = HeadingRange(h(100), h(280), Direction.RIGHT)
        assert half.contains(h(190))
        assert half.contains(h(280))
        assert not half.contains(h(100))
        assert not half.contains(h(10))

    def test_half_circle_left(self) -> None:
        half = HeadingRange(h(100), h(280), Direction.LEFT)
        assert half.contains(h(10))
        assert half.contains(h(280))
        assert not half.contains(h(100))
        assert not half.contains(h(190))

    def test_opposite_half_circles_partition_the_compass(self) -> None:
        """Test that the right and left 180° arcs overlap only at the end."""
        right = HeadingRange(h(100), h(280), Direction.RIGHT)
        left = HeadingRange(h(100), h(280), Direction.LEFT)
        for degrees in range(1, 361):
            inside = right.contains(h(degrees)) + left.contains(h(degrees))
            if degrees == 280:
                assert inside == 2
            elif degrees == 100:
                assert inside == 0
            else:
                assert inside == 1


class TestCardinalDirection:
    """Test suite for get_cardinal_direction."""

    def test_north(self) -> None:
        assert get_cardinal_direction(h(360)) is CardinalDirection.NORTH
        assert get_cardinal_direction(h(1)) is CardinalDirection.NORTH
        assert get_cardinal_direction(h(22)) is CardinalDirection.NORTH
        assert get_cardinal_direction(h(338)) is CardinalDirection.NORTH

    @pytest.mark.parametrize("degrees,expected", [
        (23, CardinalDirection.NORTHEAST),
        (30, CardinalDirection.NORTHEAST),
        (45, CardinalDirection.NORTHEAST),
        (67, CardinalDirection.NORTHEAST),
        (68, CardinalDirection.EAST),
        (80, CardinalDirection.EAST),
        (90, CardinalDirection.EAST),
        (110, CardinalDirection.EAST),
        (120, CardinalDirection.SOUTHEAST),
        (135, CardinalDirection.SOUTHEAST),
        (150, CardinalDirection.SOUTHEAST),
        (170, CardinalDirection.SOUTH),
        (180, CardinalDirection.SOUTH),
        (200, CardinalDirection.SOUTH),
        (220, CardinalDirection.SOUTHWEST),
        (225, CardinalDirection.SOUTHWEST),
        (240, CardinalDirection.SOUTHWEST),
        (260, CardinalDirection.WEST),
        (270, CardinalDirection.WEST),
        (290, CardinalDirection.WEST),
        (300, CardinalDirection.NORTHWEST),
        (315, CardinalDirection.NORTHWEST),
        (330, CardinalDirection.NORTHWEST),
        (337, CardinalDirection.NORTHWEST),
    ])
    def test_rose(self, degrees, expected) -> None:
        assert get_cardinal_direction(h(degrees)) is expected

    def test_labels(self) -> None:
        assert get_cardinal_direction(h(45)).value == "Northeast"
