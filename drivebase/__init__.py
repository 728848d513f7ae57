"""
Drivebase - Typed, testable mecanum drivetrain control.

This package turns drive commands into wheel powers:
- Types: Motor slots, wheel powers, drive commands, configuration
- Interfaces: Protocol for the motor handles the drive consumes
- Geometry: 2-D vector rotation into the robot frame
- Kinematics: Pure mecanum kinematics and power scaling
- Drive: MecanumDrive, which owns the motors and writes to them
"""

from .types import (
    MotorSlot,
    WheelPowers,
    DriveCommand,
    DrivetrainConfig,
)
from .interfaces import (
    Motor,
)
from .geometry import Vector2d
from .drive import RobotDrive, MecanumDrive

__all__ = [
    "MotorSlot",
    "WheelPowers",
    "DriveCommand",
    "DrivetrainConfig",
    "Motor",
    "Vector2d",
    "RobotDrive",
    "MecanumDrive",
]
