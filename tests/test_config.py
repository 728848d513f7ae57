"""Tests for environment configuration"""

import os

import pytest

from drive_config import DriveConfig, get_config
from drivebase import DrivetrainConfig


MISSING_ENV = "does-not-exist.env"


def test_defaults(clean_env):
    """Test defaults with nothing set"""
    config = DriveConfig(MISSING_ENV)

    assert config.range_min == -1.0
    assert config.range_max == 1.0
    assert config.max_speed == 1.0
    assert config.auto_invert is True
    assert config.square_inputs is False
    assert config.validate() == (True, [])
    assert config.to_drivetrain_config() == DrivetrainConfig()


def test_environment_values(clean_env):
    """Test values are read from the environment"""
    clean_env.setenv("MECANUM_RANGE_MIN", "-0.5")
    clean_env.setenv("MECANUM_RANGE_MAX", "0.75")
    clean_env.setenv("MECANUM_MAX_SPEED", "0.6")
    clean_env.setenv("MECANUM_AUTO_INVERT", "no")
    clean_env.setenv("MECANUM_SQUARE_INPUTS", "True")

    drivetrain = DriveConfig(MISSING_ENV).to_drivetrain_config()

    assert drivetrain == DrivetrainConfig(
        range_min=-0.5,
        range_max=0.75,
        max_speed=0.6,
        auto_invert=False,
        square_inputs=True,
    )


def test_env_file_loaded(clean_env, tmp_path):
    """Test values are loaded from a .env file"""
    env_file = tmp_path / "robot.env"
    env_file.write_text("MECANUM_MAX_SPEED=0.4\nMECANUM_AUTO_INVERT=false\n")

    config = DriveConfig(str(env_file))

    assert config._loaded is True
    assert config.max_speed == 0.4
    assert config.auto_invert is False
    assert os.getenv("MECANUM_MAX_SPEED") == "0.4"


def test_missing_env_file(clean_env):
    """Test a missing .env file is not an error"""
    config = DriveConfig(MISSING_ENV)
    assert config._loaded is False


def test_validate_inverted_range(clean_env):
    """Test min above max is reported"""
    clean_env.setenv("MECANUM_RANGE_MIN", "1.0")
    clean_env.setenv("MECANUM_RANGE_MAX", "-1.0")

    config = DriveConfig(MISSING_ENV)
    is_valid, errors = config.validate()

    assert is_valid is False
    assert any("MECANUM_RANGE_MIN" in e for e in errors)
    with pytest.raises(ValueError):
        config.to_drivetrain_config()


def test_validate_bad_values(clean_env):
    """Test malformed values are reported"""
    clean_env.setenv("MECANUM_MAX_SPEED", "fast")
    clean_env.setenv("MECANUM_RANGE_MAX", "inf")
    clean_env.setenv("MECANUM_AUTO_INVERT", "maybe")

    is_valid, errors = DriveConfig(MISSING_ENV).validate()

    assert is_valid is False
    assert len(errors) == 3


def test_validate_negative_max_speed(clean_env):
    """Test negative max speed is reported"""
    clean_env.setenv("MECANUM_MAX_SPEED", "-1")

    is_valid, errors = DriveConfig(MISSING_ENV).validate()

    assert is_valid is False
    assert errors == ["MECANUM_MAX_SPEED must not be negative"]


def test_get_config_cached(clean_env):
    """Test the global config is cached until reloaded"""
    first = get_config()
    assert get_config() is first
    assert get_config(reload=True) is not first
