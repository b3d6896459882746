"""
Hold record decoding for converting external records to Hold values.

Accepts the camelCase wire names used by scenario files as well as Python
snake_case names, standardizes them, then validates each field in a fixed
order and reports the first one that fails.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional

import structlog

from hold_entry.errors import HoldValidationError, InvalidHold
from hold_entry.geometry import Direction, validate_heading

from .models import (
    HOLD_VARIANTS,
    DistanceBasedLeg,
    DistanceDecimiles,
    DurationSeconds,
    Hold,
    TimeBasedLeg,
)

logger = structlog.get_logger(__name__)

TAG_FIELD = "_tag"

FIELD_ALIASES = {
    "tag": TAG_FIELD,
    "inboundCourse": "inbound_course",
    "efcMinutes": "efc_minutes",
    "durationSeconds": "duration_seconds",
    "distanceDecimiles": "distance_decimiles",
}

LEG_MEASURE_FIELDS = {
    TimeBasedLeg.tag: ("duration_seconds", DurationSeconds),
    DistanceBasedLeg.tag: ("distance_decimiles", DistanceDecimiles),
}


@dataclass
class HoldDecodeResult:
    """Result of decoding a hold record."""
    # Decoded hold (None if invalid)
    hold: Optional[Hold] = None
    # Processing metadata
    success: bool = True
    error: Optional[InvalidHold] = None

    @property
    def error_msg(self) -> Optional[str]:
        return str(self.error) if self.error is not None else None

    @classmethod
    def ok(cls, hold: Hold) -> "HoldDecodeResult":
        """Create successful result with decoded hold."""
        return cls(hold=hold, success=True)

    @classmethod
    def failed(cls, error: InvalidHold) -> "HoldDecodeResult":
        """Create error result."""
        return cls(success=False, error=error)


def standardize_field_names(record: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of record with wire aliases mapped to snake_case names."""
    return {FIELD_ALIASES.get(key, key): value for key, value in record.items()}


def _decode_direction(value: Any) -> Direction:
    try:
        return Direction(value)
    except ValueError as e:
        raise InvalidHold(f"Direction must be Left or Right, got {value!r}",
                          field="direction", reason="invalid-value") from e


def _decode_fix(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidHold(f"Fix must be a non-empty string, got {value!r}",
                          field="fix", reason="invalid-value")
    return value


def _decode_efc(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)) \
            or (isinstance(value, float) and not value.is_integer()) or value < 0:
        raise InvalidHold(f"EFC must be non-negative whole minutes, got {value!r}",
                          field="efc_minutes", reason="invalid-value")
    return int(value)


def _decode_field(record: dict[str, Any], field: str, decode: Callable[[Any], Any]) -> Any:
    if field not in record or record[field] is None:
        raise InvalidHold(f"Missing required field: {field}", field=field, reason="missing")
    try:
        return decode(record[field])
    except InvalidHold:
        raise
    except HoldValidationError as e:
        raise InvalidHold(f"Invalid {field}: {e}", field=field, reason="invalid-value") from e


def decode_hold(record: Any) -> Hold:
    """
    Decode an external record into a Hold.

    Args:
        record: Mapping with a "_tag" of TimeBasedLeg or DistanceBasedLeg and
            the fields of that variant

    Returns:
        Validated TimeBasedLeg or DistanceBasedLeg

    Raises:
        InvalidHold: On the first missing or invalid field; nested heading,
            duration and distance errors are chained as the cause
    """
    if not isinstance(record, dict):
        raise InvalidHold(f"Hold record must be a mapping, got {type(record).__name__}",
                          reason="wrong-type")

    fields = standardize_field_names(record)

    tag = fields.get(TAG_FIELD)
    if not isinstance(tag, str) or tag not in HOLD_VARIANTS:
        raise InvalidHold(f"Unknown hold type: {tag!r}", field=TAG_FIELD, reason="unknown-tag")

    fix = _decode_field(fields, "fix", _decode_fix)
    inbound_course = _decode_field(fields, "inbound_course", validate_heading)
    direction = _decode_field(fields, "direction", _decode_direction)
    efc_minutes = _decode_field(fields, "efc_minutes", _decode_efc)

    measure_field, measure_type = LEG_MEASURE_FIELDS[tag]
    measure = _decode_field(fields, measure_field, measure_type)

    # A hold has exactly one leg measure
    for other_field, _ in LEG_MEASURE_FIELDS.values():
        if other_field != measure_field and fields.get(other_field) is not None:
            raise InvalidHold(f"{tag} does not take {other_field}",
                              field=other_field, reason="unexpected")

    return HOLD_VARIANTS[tag](
        fix=fix,
        inbound_course=inbound_course,
        direction=direction,
        efc_minutes=efc_minutes,
        **{measure_field: measure},
    )


def encode_hold(hold: Hold) -> dict[str, Any]:
    """Encode a Hold as the camelCase record accepted by decode_hold."""
    record: dict[str, Any] = {
        TAG_FIELD: hold.tag,
        "fix": hold.fix,
        "inboundCourse": hold.inbound_course.degrees,
        "direction": hold.direction.value,
        "efcMinutes": hold.efc_minutes,
    }
    if isinstance(hold, TimeBasedLeg):
        record["durationSeconds"] = hold.duration_seconds.value
    elif isinstance(hold, DistanceBasedLeg):
        record["distanceDecimiles"] = hold.distance_decimiles.value
    else:
        raise TypeError(f"Unsupported hold variant: {type(hold).__name__}")
    return record


class HoldDecoder:
    """
    Hold decoding pipeline that reports failures as results.

    Used where a batch of records is read and bad ones are skipped rather
    than aborting the whole load.
    """

    def __init__(self) -> None:
        self.logger = logger

    def decode(self, record: Any) -> HoldDecodeResult:
        """
        Decode one record.

        Args:
            record: Raw hold record

        Returns:
            HoldDecodeResult with the hold or the InvalidHold error
        """
        try:
            return HoldDecodeResult.ok(decode_hold(record))
        except InvalidHold as e:
            self.logger.warning(
                "Hold record rejected",
                field=e.field,
                reason=e.reason,
                error=str(e),
            )
            return HoldDecodeResult.failed(e)

    def decode_many(self, records: list[Any]) -> list[HoldDecodeResult]:
        """Decode each record independently."""
        return [self.decode(record) for record in records]
