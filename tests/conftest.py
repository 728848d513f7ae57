"""Shared fixtures"""

import pytest

from drivebase import MecanumDrive, MotorSlot
from drivebase.motors import MockMotor


ENV_VARS = (
    "MECANUM_RANGE_MIN",
    "MECANUM_RANGE_MAX",
    "MECANUM_MAX_SPEED",
    "MECANUM_AUTO_INVERT",
    "MECANUM_SQUARE_INPUTS",
)


@pytest.fixture
def motors():
    """Four mock motors in MotorSlot order"""
    return [MockMotor(name=slot.name) for slot in MotorSlot]


@pytest.fixture
def drive(motors):
    """Mecanum drive with default config (right side inverted)"""
    return MecanumDrive(*motors)


@pytest.fixture
def plain_drive(motors):
    """Mecanum drive with no side inversion"""
    return MecanumDrive(*motors, auto_invert=False)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove drivebase variables and restore them after the test"""
    for name in ENV_VARS:
        # setenv first so the original state is recorded and restored
        monkeypatch.setenv(name, "unset")
        monkeypatch.delenv(name)
    return monkeypatch
