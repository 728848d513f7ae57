"""
Core data types for the mecanum drivebase.

All the data structures that flow through the drivebase, fully typed.
"""

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, List, Optional, Union


class MotorSlot(IntEnum):
    """Fixed wheel index shared by every four-value array"""
    FRONT_LEFT = 0
    FRONT_RIGHT = 1
    BACK_LEFT = 2
    BACK_RIGHT = 3


@dataclass(frozen=True)
class WheelPowers:
    """
    Fractional duty for each of the four wheels.

    Values are nominally -1.0 to 1.0 after scaling. Recomputed on every
    drive call, never stored by the drivetrain.
    """
    front_left: float = 0.0
    front_right: float = 0.0
    back_left: float = 0.0
    back_right: float = 0.0

    @classmethod
    def from_list(cls, values: Iterable[float]) -> "WheelPowers":
        """Build from four values in MotorSlot order"""
        values = list(values)
        if len(values) != len(MotorSlot):
            raise ValueError(f"expected {len(MotorSlot)} wheel values, got {len(values)}")
        return cls(*(float(v) for v in values))

    def to_list(self) -> List[float]:
        """Values in MotorSlot order"""
        return [self.front_left, self.front_right, self.back_left, self.back_right]

    def __getitem__(self, slot: Union[MotorSlot, int]) -> float:
        return self.to_list()[MotorSlot(slot)]

    def __iter__(self):
        return iter(self.to_list())

    def __len__(self) -> int:
        return len(MotorSlot)

    @property
    def max_abs(self) -> float:
        """Largest absolute wheel value"""
        return max(abs(v) for v in self.to_list())

    @property
    def is_zero(self) -> bool:
        """Check if every wheel is at zero power"""
        return all(v == 0.0 for v in self.to_list())


@dataclass
class DriveCommand:
    """
    One control-cycle worth of drive input.

    Speeds are nominally -1.0 to 1.0 but are not validated here: the
    drivetrain clips them to its configured range.
    """
    strafe: float                    # Right is positive
    forward: float                   # Away from the driver is positive
    turn: float                      # Turn speed
    heading: Optional[float] = None  # Robot heading (radians), None = robot-centric
    square_inputs: bool = False      # Square speeds for finer low-speed control

    @property
    def is_field_centric(self) -> bool:
        """Check if the command carries a heading"""
        return self.heading is not None


def check_range(range_min: float, range_max: float) -> None:
    """Raise ValueError for a non-finite or inverted output range"""
    if not (math.isfinite(range_min) and math.isfinite(range_max)):
        raise ValueError(f"range bounds must be finite: [{range_min}, {range_max}]")
    if range_min > range_max:
        raise ValueError(f"range min {range_min} is greater than max {range_max}")


def check_max_speed(value: float) -> None:
    """Raise ValueError for a non-finite or negative max speed"""
    if not math.isfinite(value):
        raise ValueError(f"max speed must be finite: {value}")
    if value < 0.0:
        raise ValueError(f"max speed must not be negative: {value}")


@dataclass
class DrivetrainConfig:
    """Configuration for the MecanumDrive"""
    range_min: float = -1.0        # Lower clip bound for speed inputs
    range_max: float = 1.0         # Upper clip bound for speed inputs
    max_speed: float = 1.0         # Multiplier applied to every wheel output
    auto_invert: bool = True       # Invert the right side motors
    square_inputs: bool = False    # Default for commands built from this config

    def __post_init__(self) -> None:
        """Validate ranges"""
        check_range(self.range_min, self.range_max)
        check_max_speed(self.max_speed)
