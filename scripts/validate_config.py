#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List, Optional

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from fxcalc_app.config.loader import ConfigLoader
from fxcalc_app.config.validation import ConfigValidator, ValidationError
from fxcalc_app.errors import InvalidInputError


def validate_config_dir(config_dir: Optional[Path] = None) -> List[ValidationError]:
    """Validate the merged configuration for a config directory."""
    loader = ConfigLoader.create(config_dir)
    return ConfigValidator.validate_config(loader.merge_config())


def main():
    """Main validation function."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    loader = ConfigLoader.create(config_dir)
    print(f"🔍 Validating FXCalc configuration in {loader.config_dir}...")

    all_valid = True

    errors = validate_config_dir(config_dir)
    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        all_valid = False
    else:
        print("✅ Calculator configuration is valid")

    print("\n💱 Loading rate table...")
    try:
        rates = loader.load_rate_table()
        print(f"✅ Loaded {len(rates)} reference prices (missing symbols use {rates.default})")
    except InvalidInputError as e:
        print(f"❌ Invalid rate table: {e}")
        all_valid = False

    if all_valid:
        print("\n🎉 All configuration validation passed!")
        sys.exit(0)
    else:
        print("\n❌ Configuration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
