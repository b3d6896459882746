"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import structlog
import yaml

from hold_entry.errors import ConfigurationError

from .defaults import DefaultConfig, LoggingParams, ScenarioParams, get_default_config
from .validation import ConfigValidator

logger = structlog.get_logger(__name__)

CONFIG_FILENAME = "trainer.yaml"


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_file_config(self) -> dict[str, Any]:
        """Load overrides from the trainer configuration file, if present."""
        config_file = self.config_dir / CONFIG_FILENAME

        if not config_file.exists():
            return {}

        try:
            with open(config_file) as f:
                file_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Could not parse {config_file}: {e}", config_file=config_file
            ) from e

        if file_config is None:
            return {}
        if not isinstance(file_config, dict):
            raise ConfigurationError(
                f"{config_file} must contain a mapping, got {type(file_config).__name__}",
                config_file=config_file,
            )

        logger.debug("Loaded configuration file", config_file=str(config_file))
        return file_config

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Explicit overrides (highest priority)
        2. trainer.yaml in the config directory
        3. Built-in defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)
        config = self._deep_merge(config, self.load_file_config())

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def scenario_params(self, overrides: Optional[dict[str, Any]] = None) -> ScenarioParams:
        """Build validated scenario parameters from the merged configuration."""
        section = self._validated_section("scenario", overrides)
        for key in ("time_choices_seconds", "distance_choices_decimiles", "fix_words"):
            section[key] = tuple(section[key])
        return ScenarioParams(**section)

    def logging_params(self, overrides: Optional[dict[str, Any]] = None) -> LoggingParams:
        """Build validated logging parameters from the merged configuration."""
        return LoggingParams(**self._validated_section("logging", overrides))

    def _validated_section(self, name: str, overrides: Optional[dict[str, Any]]) -> dict[str, Any]:
        config = self.merge_config(overrides)
        errors = ConfigValidator.validate_config({name: config[name]})
        if errors:
            details = "; ".join(f"{err.field}: {err.message} (got: {err.value!r})" for err in errors)
            raise ConfigurationError(
                f"Invalid {name} configuration: {details}",
                config_file=self.config_dir / CONFIG_FILENAME,
                context={"errors": errors},
            )

        known = self._dataclass_to_dict(getattr(self.defaults, name)).keys()
        unknown = set(config[name]) - set(known)
        if unknown:
            raise ConfigurationError(
                f"Unknown {name} settings: {', '.join(sorted(map(str, unknown)))}",
                config_file=self.config_dir / CONFIG_FILENAME,
            )
        return dict(config[name])

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
