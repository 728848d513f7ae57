"""
Kinematics - Transforms drive commands into mecanum wheel powers.

Pure functions only, no state. The MecanumDrive owns the motors and
configuration; everything it computes goes through here:
- Input conditioning (clip, square)
- Normalization and scaling of four wheel values
- Two field-centric formulations that are kept side by side:
  the rotated-vector form and the heading/angle form. Their scaling
  and inversion behaviour differ on purpose, so they are not unified.
"""

import math
from typing import List, Optional, Sequence, Tuple

from .geometry import Vector2d
from .types import MotorSlot, WheelPowers


# Values at or below this are treated as "no contribution"
EPSILON = 1e-12

# Scale-up factor used by scale() when the powers are under-saturated
SCALE_UP_FACTOR = 1.0 / math.sin(math.radians(135))


def clip_range(value: float, range_min: float = -1.0, range_max: float = 1.0) -> float:
    """Clamp value to range [range_min, range_max]"""
    if value <= range_min:
        return range_min
    if value >= range_max:
        return range_max
    return value


def square_input(value: float) -> float:
    """
    Square an input while keeping its sign.

    Reduces sensitivity near zero for finer low-speed control
    without capping full-stick output.
    """
    return value * abs(value)


def condition_input(value: float, square: bool,
                    range_min: float = -1.0, range_max: float = 1.0) -> float:
    """Optionally square, then clip to range"""
    if square:
        value = square_input(value)
    return clip_range(value, range_min, range_max)


def normalize(values: Sequence[float], magnitude: Optional[float] = None) -> List[float]:
    """
    Normalize wheel values.

    With a magnitude, the largest absolute value is rescaled to exactly
    that magnitude. Without one, values are only ever scaled down so the
    largest absolute value is at most 1.

    Args:
        values: Wheel values
        magnitude: Target for the largest absolute value

    Returns:
        New list of normalized values
    """
    max_magnitude = max(abs(v) for v in values)

    if magnitude is not None:
        if max_magnitude <= EPSILON:
            return list(values)
        return [v / max_magnitude * magnitude for v in values]

    if max_magnitude > 1.0:
        return [v / max_magnitude for v in values]
    return list(values)


def scale(values: Sequence[float]) -> List[float]:
    """
    Scale powers for the heading drive formulation.

    - All zero: unchanged
    - Largest absolute value above 1: scale down to 1
    - Otherwise: multiply by 1/sin(135 deg), which can push values up
      to sqrt(2). A result that was just scaled down to 1 is scaled up
      again on a second pass.

    Args:
        values: Raw wheel powers

    Returns:
        New list of scaled powers
    """
    max_power = max(abs(v) for v in values)

    if max_power == 0:
        return list(values)
    if max_power > 1:
        return [v / max_power for v in values]
    return [SCALE_UP_FACTOR * v for v in values]


def mecanum_wheel_speeds(strafe: float, forward: float, turn: float,
                         gyro_angle: float = 0.0) -> WheelPowers:
    """
    Wheel speeds from the rotated-vector formulation.

    The (strafe, forward) vector is rotated by -gyro_angle into the robot
    frame. A gyro_angle of 0 is robot-centric drive.

    Args:
        strafe: Horizontal speed (-1.0 to 1.0, right positive)
        forward: Vertical speed (-1.0 to 1.0, forward positive)
        turn: Turn speed (-1.0 to 1.0)
        gyro_angle: Robot heading in radians

    Returns:
        WheelPowers before side inversion and max output
    """
    drive = Vector2d(strafe, forward).rotate_by(-gyro_angle)

    theta = drive.angle()
    wheels = [0.0] * len(MotorSlot)
    wheels[MotorSlot.FRONT_LEFT] = math.sin(theta + math.pi / 4)
    wheels[MotorSlot.FRONT_RIGHT] = math.sin(theta - math.pi / 4)
    wheels[MotorSlot.BACK_LEFT] = math.sin(theta - math.pi / 4)
    wheels[MotorSlot.BACK_RIGHT] = math.sin(theta + math.pi / 4)

    wheels = normalize(wheels, drive.magnitude())

    wheels[MotorSlot.FRONT_LEFT] += turn
    wheels[MotorSlot.FRONT_RIGHT] -= turn
    wheels[MotorSlot.BACK_LEFT] += turn
    wheels[MotorSlot.BACK_RIGHT] -= turn

    return WheelPowers.from_list(normalize(wheels))


def heading_vector(joystick_x: float, joystick_y: float) -> Tuple[float, float]:
    """
    Joystick angle and magnitude for the heading formulation.

    The angle is shifted by 180 deg so the conventional "away from the
    driver" direction lines up with this formulation's reference.

    Returns:
        (angle in degrees, magnitude)
    """
    angle = math.degrees(math.atan2(joystick_y, joystick_x)) + 180
    magnitude = math.sqrt(joystick_x ** 2 + joystick_y ** 2)
    return angle, magnitude


def mecanum_heading_speeds(joystick_x: float, joystick_y: float, turn: float,
                           heading: float) -> WheelPowers:
    """
    Wheel powers from the heading/angle formulation.

    Uses degrees throughout. The result is already scaled and is meant
    to be written to the motors as-is: no side inversion and no max
    output apply.

    Args:
        joystick_x: Joystick X value
        joystick_y: Joystick Y value
        turn: Turn speed
        heading: Robot heading in degrees

    Returns:
        WheelPowers in MotorSlot order
    """
    angle, magnitude = heading_vector(joystick_x, joystick_y)
    absolute = angle - heading

    # One value per diagonal wheel pair: FL/BR and BL/FR
    v1 = magnitude * math.sin(math.radians(absolute + 45))
    v2 = magnitude * math.sin(math.radians(absolute - 45))

    # Pair order here is FL, BL, FR, BR
    front_left, back_left, front_right, back_right = scale([
        v1 + turn,
        v2 + turn,
        v2 - turn,
        v1 - turn,
    ])

    return WheelPowers(
        front_left=front_left,
        front_right=front_right,
        back_left=back_left,
        back_right=back_right,
    )
