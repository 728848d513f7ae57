"""
Drivetrain controllers.

RobotDrive holds the configuration every drivebase shares (input range
and max output). MecanumDrive owns four motors and turns drive commands
into motor writes, once per iteration of the caller's control loop.

Not thread-safe: configuration and drive calls are expected to come from
a single control loop.
"""

import logging
from abc import ABC, abstractmethod
from typing import Tuple, Union

from . import kinematics
from .interfaces import Motor
from .types import (
    DriveCommand,
    DrivetrainConfig,
    MotorSlot,
    WheelPowers,
    check_max_speed,
    check_range,
)


logger = logging.getLogger(__name__)


class RobotDrive(ABC):
    """
    Base class for drivebases.

    Clips speed inputs to a configurable range and scales every output
    by a max speed.
    """

    DEFAULT_RANGE_MIN = -1.0
    DEFAULT_RANGE_MAX = 1.0
    DEFAULT_MAX_SPEED = 1.0

    def __init__(self) -> None:
        self._range_min = self.DEFAULT_RANGE_MIN
        self._range_max = self.DEFAULT_RANGE_MAX
        self._max_output = self.DEFAULT_MAX_SPEED

    @property
    def range(self) -> Tuple[float, float]:
        """Current (min, max) input range"""
        return self._range_min, self._range_max

    @property
    def max_output(self) -> float:
        """Multiplier applied to every motor output"""
        return self._max_output

    def set_range(self, range_min: float, range_max: float) -> None:
        """
        Set the range inputs are clipped to.

        Args:
            range_min: Lower bound
            range_max: Upper bound

        Raises:
            ValueError: If a bound is not finite or min > max
        """
        check_range(range_min, range_max)
        self._range_min = range_min
        self._range_max = range_max
        logger.debug(f"Input range set to [{range_min}, {range_max}]")

    def set_max_speed(self, value: float) -> None:
        """
        Set the max output of the drivebase.

        Args:
            value: Multiplier for every motor output (>= 0)

        Raises:
            ValueError: If value is not finite or negative
        """
        check_max_speed(value)
        self._max_output = value
        logger.debug(f"Max speed set to {value}")

    def clip_range(self, value: float) -> float:
        """Clamp value to the configured range"""
        return kinematics.clip_range(value, self._range_min, self._range_max)

    def square_input(self, value: float) -> float:
        """Square value while keeping its sign"""
        return kinematics.square_input(value)

    def _condition(self, value: float, square: bool) -> float:
        return kinematics.condition_input(value, square, self._range_min, self._range_max)

    @abstractmethod
    def stop(self) -> None:
        """Stop all motors"""


class MecanumDrive(RobotDrive):
    """
    Kinematics and motor control for a four-wheel mecanum drivetrain.

    The drive methods are meant to be called once per control cycle.
    Motors are held in MotorSlot order for the lifetime of the drive and
    must not be written to by anything else.
    """

    def __init__(
        self,
        front_left: Motor,
        front_right: Motor,
        back_left: Motor,
        back_right: Motor,
        auto_invert: bool = True,
    ) -> None:
        """
        Initialize the mecanum drive.

        Args:
            front_left: Front left motor
            front_right: Front right motor
            back_left: Back left motor
            back_right: Back right motor
            auto_invert: Invert the right side motors
        """
        super().__init__()

        motors = (front_left, front_right, back_left, back_right)
        for slot, motor in zip(MotorSlot, motors):
            if not isinstance(motor, Motor):
                raise TypeError(
                    f"{slot.name} motor must provide set() and stop_motor(), "
                    f"got {type(motor).__name__}"
                )

        self._motors: Tuple[Motor, ...] = motors
        self._right_side_multiplier = 1.0
        self.set_right_side_inverted(auto_invert)

        logger.info(f"MecanumDrive created (right side inverted: {auto_invert})")

    @classmethod
    def from_config(
        cls,
        front_left: Motor,
        front_right: Motor,
        back_left: Motor,
        back_right: Motor,
        config: DrivetrainConfig,
    ) -> "MecanumDrive":
        """Create a drive with range, max speed and inversion from config"""
        drive = cls(front_left, front_right, back_left, back_right,
                    auto_invert=config.auto_invert)
        drive.set_range(config.range_min, config.range_max)
        drive.set_max_speed(config.max_speed)
        return drive

    @property
    def motors(self) -> Tuple[Motor, ...]:
        """Motors in MotorSlot order"""
        return self._motors

    def motor(self, slot: Union[MotorSlot, int]) -> Motor:
        """Motor for a wheel slot"""
        return self._motors[MotorSlot(slot)]

    def is_right_side_inverted(self) -> bool:
        """Check if the right side multiplier is -1"""
        return self._right_side_multiplier == -1.0

    def set_right_side_inverted(self, is_inverted: bool) -> None:
        """Set the right side multiplier to -1 if inverted, 1 otherwise"""
        self._right_side_multiplier = -1.0 if is_inverted else 1.0

    def stop(self) -> None:
        """
        Stop every motor.

        A motor that fails to stop is logged and the remaining motors
        are still stopped.
        """
        for slot, motor in zip(MotorSlot, self._motors):
            try:
                motor.stop_motor()
            except Exception:
                logger.exception(f"Failed to stop {slot.name} motor")

    def drive(self, command: DriveCommand) -> WheelPowers:
        """
        Drive from a DriveCommand.

        Commands with a heading are driven field-centric, others
        robot-centric.
        """
        if command.is_field_centric:
            return self.drive_field_centric(
                command.strafe, command.forward, command.turn,
                command.heading, square_inputs=command.square_inputs,
            )
        return self.drive_robot_centric(
            command.strafe, command.forward, command.turn,
            square_inputs=command.square_inputs,
        )

    def drive_robot_centric(self, strafe: float, forward: float, turn: float,
                            square_inputs: bool = False) -> WheelPowers:
        """
        Drive from the perspective of the robot rather than the driver.

        Args:
            strafe: Horizontal speed
            forward: Vertical speed
            turn: Turn speed
            square_inputs: Square inputs for finer control

        Returns:
            Powers written to the motors
        """
        return self.drive_field_centric(strafe, forward, turn, 0.0,
                                        square_inputs=square_inputs)

    def drive_field_centric(self, strafe: float, forward: float, turn: float,
                            gyro_angle: float, square_inputs: bool = False) -> WheelPowers:
        """
        Drive from the perspective of the driver.

        No matter the orientation of the robot, pushing forward drives
        the robot away from the driver.

        Args:
            strafe: Horizontal speed
            forward: Vertical speed
            turn: Turn speed
            gyro_angle: Robot heading in radians
            square_inputs: Square inputs for finer control

        Returns:
            Powers written to the motors
        """
        if square_inputs:
            strafe = self._condition(strafe, True)
            forward = self._condition(forward, True)
            turn = self._condition(turn, True)

        strafe = self.clip_range(strafe)
        forward = self.clip_range(forward)
        turn = self.clip_range(turn)

        speeds = kinematics.mecanum_wheel_speeds(strafe, forward, turn, gyro_angle)

        powers = WheelPowers(
            front_left=speeds.front_left * self._max_output,
            front_right=speeds.front_right * self._right_side_multiplier * self._max_output,
            back_left=speeds.back_left * self._max_output,
            back_right=speeds.back_right * self._right_side_multiplier * self._max_output,
        )
        self._write(powers)
        return powers

    def drive_field_centric_heading(self, joystick_x: float, joystick_y: float,
                                    turn: float, heading: float) -> WheelPowers:
        """
        Drive from the perspective of the driver using the heading form.

        Powers are scaled and written directly. Unlike drive_field_centric,
        the right side multiplier and max speed are not applied and inputs
        are not clipped.

        Args:
            joystick_x: Joystick X value
            joystick_y: Joystick Y value
            turn: Turn speed
            heading: Robot heading in degrees

        Returns:
            Powers written to the motors
        """
        powers = kinematics.mecanum_heading_speeds(joystick_x, joystick_y, turn, heading)
        self._write(powers)
        return powers

    def _write(self, powers: WheelPowers) -> None:
        for motor, power in zip(self._motors, powers.to_list()):
            motor.set(power)

        logger.debug(
            f"FL={powers.front_left:+.3f} FR={powers.front_right:+.3f} "
            f"BL={powers.back_left:+.3f} BR={powers.back_right:+.3f}"
        )
