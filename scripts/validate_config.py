#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from oven_ctl.config.loader import ConfigLoader
from oven_ctl.errors import ConfigurationError


def main():
    """Validate oven.yaml in the given directory (default: ./config)."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    loader = ConfigLoader.create(config_dir)

    print(f"Validating {loader.config_dir / 'oven.yaml'}...")

    try:
        config = loader.merge_config()
    except ConfigurationError as e:
        print(f"Found {len(e.errors)} validation errors:")
        for error in e.errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        sys.exit(1)

    for section, values in config.items():
        print(f"[{section}]")
        for key, value in values.items():
            print(f"  {key} = {value}")

    print("Configuration is valid")


if __name__ == "__main__":
    main()
