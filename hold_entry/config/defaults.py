"""Default configuration parameters for the hold entry trainer."""

from dataclasses import asdict, dataclass

from hold_entry.errors import ConfigurationError

from .validation import ConfigValidator


# Nouns used to build fix names. Five-letter words double as intersection
# names; any word can become a VOR name.
DEFAULT_FIX_WORDS: tuple[str, ...] = (
    "acorn", "anvil", "arrow", "badge", "baker", "beach", "birch", "blaze",
    "brook", "cabin", "cedar", "chalk", "cliff", "comet", "coral", "crane",
    "delta", "ember", "falcon", "fjord", "flint", "forge", "frost", "glade",
    "grove", "harbor", "hazel", "heron", "island", "ivory", "jewel", "lemon",
    "maple", "marsh", "meadow", "otter", "pearl", "pilot", "plume", "quartz",
    "raven", "ridge", "river", "robin", "sable", "shore", "spruce", "stone",
    "summit", "tiger", "topaz", "trout", "valley", "willow", "wren", "yacht",
)


@dataclass(frozen=True)
class ScenarioParams:
    """Random holding scenario parameters."""
    # Weighted by repetition: a standard 1 minute leg is the common case
    time_choices_seconds: tuple[int, ...] = (60, 60, 60, 60, 60, 60, 90, 90, 120)
    distance_choices_decimiles: tuple[int, ...] = (40, 40, 40, 40, 40, 50, 100)

    # Expect further clearance window
    efc_min_minutes: int = 5
    efc_max_minutes: int = 60

    # Chance a fix is a VOR rather than an intersection
    vor_probability: float = 0.5

    fix_words: tuple[str, ...] = DEFAULT_FIX_WORDS

    def __post_init__(self) -> None:
        errors = ConfigValidator.validate_scenario_params(asdict(self))
        if errors:
            details = "; ".join(f"{err.field}: {err.message}" for err in errors)
            raise ConfigurationError(
                f"Invalid scenario parameters: {details}", context={"errors": errors}
            )


@dataclass(frozen=True)
class LoggingParams:
    """Logging output parameters."""
    level: str = "INFO"
    format_json: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    scenario: ScenarioParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        scenario=ScenarioParams(),
        logging=LoggingParams(),
    )
