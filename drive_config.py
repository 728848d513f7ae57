#!/usr/bin/env python3
"""
Drivebase Environment Configuration Helper

Provides easy access to .env configuration for the drivebase tools.
Automatically loads .env file and provides defaults.
"""

import math
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from drivebase.types import DrivetrainConfig


_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


class DriveConfig:
    """Configuration manager for the drivebase"""

    def __init__(self, env_file: Optional[str] = None):
        """
        Initialize configuration

        Args:
            env_file: Path to .env file (default: .env in current directory)
        """
        self._loaded = False

        if env_file is None:
            env_file = Path(".env")
        else:
            env_file = Path(env_file)

        if env_file.exists():
            load_dotenv(env_file)
            self._loaded = True

    @property
    def range_min(self) -> float:
        """Lower input clip bound (default: -1.0)"""
        return float(os.getenv("MECANUM_RANGE_MIN", "-1.0"))

    @property
    def range_max(self) -> float:
        """Upper input clip bound (default: 1.0)"""
        return float(os.getenv("MECANUM_RANGE_MAX", "1.0"))

    @property
    def max_speed(self) -> float:
        """Output multiplier (default: 1.0)"""
        return float(os.getenv("MECANUM_MAX_SPEED", "1.0"))

    @property
    def auto_invert(self) -> bool:
        """Invert right side motors (default: true)"""
        return self._get_bool("MECANUM_AUTO_INVERT", True)

    @property
    def square_inputs(self) -> bool:
        """Square speed inputs (default: false)"""
        return self._get_bool("MECANUM_SQUARE_INPUTS", False)

    def validate(self) -> tuple[bool, list[str]]:
        """
        Validate configuration

        Returns:
            (is_valid, list_of_errors)
        """
        errors = []

        bounds = {}
        for name in ("MECANUM_RANGE_MIN", "MECANUM_RANGE_MAX", "MECANUM_MAX_SPEED"):
            raw = os.getenv(name)
            if raw is None:
                continue
            try:
                value = float(raw)
            except ValueError:
                errors.append(f"{name} is not a number: {raw!r}")
                continue
            if not math.isfinite(value):
                errors.append(f"{name} must be finite")
                continue
            bounds[name] = value

        range_min = bounds.get("MECANUM_RANGE_MIN", -1.0)
        range_max = bounds.get("MECANUM_RANGE_MAX", 1.0)
        if range_min > range_max:
            errors.append("MECANUM_RANGE_MIN is greater than MECANUM_RANGE_MAX")

        if bounds.get("MECANUM_MAX_SPEED", 1.0) < 0:
            errors.append("MECANUM_MAX_SPEED must not be negative")

        for name in ("MECANUM_AUTO_INVERT", "MECANUM_SQUARE_INPUTS"):
            raw = os.getenv(name)
            if raw is not None and raw.strip().lower() not in _TRUE_VALUES + _FALSE_VALUES:
                errors.append(f"{name} has invalid format (expected true/false)")

        return len(errors) == 0, errors

    def to_drivetrain_config(self) -> DrivetrainConfig:
        """
        Build a DrivetrainConfig from the environment

        Raises:
            ValueError: If the configuration is invalid
        """
        is_valid, errors = self.validate()
        if not is_valid:
            raise ValueError("Invalid drivebase configuration: " + "; ".join(errors))

        return DrivetrainConfig(
            range_min=self.range_min,
            range_max=self.range_max,
            max_speed=self.max_speed,
            auto_invert=self.auto_invert,
            square_inputs=self.square_inputs,
        )

    @staticmethod
    def _get_bool(name: str, default: bool) -> bool:
        """Read a boolean variable, falling back to default when unset or unknown"""
        raw = os.getenv(name)
        if raw is None:
            return default
        value = raw.strip().lower()
        if value in _TRUE_VALUES:
            return True
        if value in _FALSE_VALUES:
            return False
        return default

    def print_status(self):
        """Print configuration status"""
        print("Drivebase Configuration Status:")
        print(f"  .env loaded:   {'Yes' if self._loaded else 'No'}")

        is_valid, errors = self.validate()
        if is_valid:
            print(f"  Range:         [{self.range_min}, {self.range_max}]")
            print(f"  Max speed:     {self.max_speed}")
            print(f"  Auto invert:   {self.auto_invert}")
            print(f"  Square inputs: {self.square_inputs}")
            print("\n  Status: Configuration is valid")
        else:
            print("\n  Status: Configuration has errors:")
            for error in errors:
                print(f"    - {error}")


# Global config instance
_config = None

def get_config(reload: bool = False) -> DriveConfig:
    """
    Get the global configuration instance

    Args:
        reload: Force reload of .env file

    Returns:
        DriveConfig instance
    """
    global _config
    if _config is None or reload:
        _config = DriveConfig()
    return _config


def main():
    """Command-line utility to check configuration"""
    import argparse

    parser = argparse.ArgumentParser(
        description="Drivebase Configuration Utility",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Check current configuration:
    python drive_config.py

  Validate configuration:
    python drive_config.py --validate

  Use custom .env file:
    python drive_config.py --env-file /path/to/.env
        """
    )

    parser.add_argument("--env-file", help="Path to .env file")
    parser.add_argument("--validate", action="store_true",
                       help="Validate configuration and exit with error if invalid")

    args = parser.parse_args()

    # Load config
    config = DriveConfig(args.env_file)

    # Print status
    config.print_status()

    # Validate if requested
    if args.validate:
        is_valid, errors = config.validate()
        if not is_valid:
            print("\nValidation failed!")
            import sys
            sys.exit(1)
        else:
            print("\nValidation passed!")


if __name__ == "__main__":
    main()
