"""
Configuration module.

Built-in defaults, YAML overrides and validation for scenario generation
and logging.
"""

from .defaults import DefaultConfig, LoggingParams, ScenarioParams, get_default_config
from .loader import ConfigLoader
from .validation import ConfigValidator, ValidationError

__all__ = [
    "ConfigLoader",
    "ConfigValidator",
    "DefaultConfig",
    "LoggingParams",
    "ScenarioParams",
    "ValidationError",
    "get_default_config",
]
