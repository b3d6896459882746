#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List, Optional

from hold_entry.config.loader import ConfigLoader
from hold_entry.config.validation import ConfigValidator, ValidationError
from hold_entry.errors import ConfigurationError
from hold_entry.logging.config import configure_logging


def validate_config_dir(config_dir: Optional[Path] = None) -> List[ValidationError]:
    """Validate the merged configuration for a config directory."""
    loader = ConfigLoader.create(config_dir)
    config = loader.merge_config()
    return ConfigValidator.validate_config(config)


def main(argv=None) -> int:
    """Main validation function."""
    argv = sys.argv[1:] if argv is None else argv
    config_dir = Path(argv[0]) if argv else None

    configure_logging()

    print("🔍 Validating hold entry trainer configuration...")

    try:
        errors = validate_config_dir(config_dir)
    except ConfigurationError as e:
        print(f"❌ Could not load configuration: {e}")
        return 1

    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        return 1

    print("✅ Configuration is valid")
    return 0


if __name__ == "__main__":
    sys.exit(main())
