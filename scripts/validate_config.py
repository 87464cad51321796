#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from solid_app.config.loader import ConfigLoader
from solid_app.config.validation import ConfigValidator
from solid_app.errors import ConfigurationError


def main() -> int:
    """Validate the settings file, optionally from a directory given as argv[1]."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    loader = ConfigLoader.create(config_dir)

    print(f"Validating {loader.settings_file}...")
    if not loader.settings_file.exists():
        print("No settings file found, defaults will be used")

    try:
        errors = ConfigValidator.validate_config(loader.merge_config())
    except ConfigurationError as e:
        print(f"Cannot read configuration: {e}")
        return 1

    if errors:
        print(f"Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  - {error.field}: {error.message} (value: {error.value!r})")
        return 1

    print("Configuration is valid")
    return 0


if __name__ == "__main__":
    sys.exit(main())
