"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_scenario_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate scenario generation parameters."""
        errors = []

        for field in ("time_choices_seconds", "distance_choices_decimiles"):
            if field in params:
                value = params[field]
                if not isinstance(value, (list, tuple)) or not value \
                        or not all(_is_int(choice) and choice > 0 for choice in value):
                    errors.append(ValidationError(
                        field=field,
                        message="Must be a non-empty list of positive integers",
                        value=value
                    ))

        for field in ("efc_min_minutes", "efc_max_minutes"):
            if field in params:
                value = params[field]
                if not _is_int(value) or value < 0:
                    errors.append(ValidationError(
                        field=field,
                        message="Must be a non-negative integer",
                        value=value
                    ))

        # Validate EFC window ordering once both ends are individually valid
        low = params.get("efc_min_minutes")
        high = params.get("efc_max_minutes")
        if _is_int(low) and _is_int(high) and 0 <= high < low:
            errors.append(ValidationError(
                field="efc_max_minutes",
                message="Must be greater than or equal to efc_min_minutes",
                value=high
            ))

        if "vor_probability" in params:
            value = params["vor_probability"]
            if isinstance(value, bool) or not isinstance(value, (int, float)) \
                    or value < 0 or value > 1:
                errors.append(ValidationError(
                    field="vor_probability",
                    message="Must be a number between 0 and 1",
                    value=value
                ))

        if "fix_words" in params:
            value = params["fix_words"]
            if not isinstance(value, (list, tuple)) \
                    or not all(isinstance(word, str) and word.isalpha() for word in value):
                errors.append(ValidationError(
                    field="fix_words",
                    message="Must be a list of alphabetic words",
                    value=value
                ))
            elif not any(len(word) == 5 for word in value):
                errors.append(ValidationError(
                    field="fix_words",
                    message="Must contain at least one five-letter word for intersection names",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {', '.join(LOG_LEVELS)}",
                    value=value
                ))

        if "format_json" in params:
            value = params["format_json"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="format_json",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []
        section_validators = {
            "scenario": ConfigValidator.validate_scenario_params,
            "logging": ConfigValidator.validate_logging_params,
        }

        for name, validate_section in section_validators.items():
            if name not in config:
                continue
            section = config[name]
            if not isinstance(section, dict):
                errors.append(ValidationError(
                    field=name,
                    message="Must be a mapping",
                    value=section
                ))
                continue
            errors.extend(validate_section(section))

        return errors
