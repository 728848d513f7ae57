#!/usr/bin/env python3
"""
Drivebase Demo - Simple example application.

Drives a MecanumDrive built on mock motors through a scripted
sequence of commands and logs the wheel powers.
"""

import logging
import math
import sys
import time
from typing import List, Optional

from drive_config import DriveConfig
from drivebase import DriveCommand, MecanumDrive, MotorSlot
from drivebase.motors import MockMotor


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    stream=sys.stdout
)

logger = logging.getLogger(__name__)


def demo_script(square_inputs: bool = False) -> List[DriveCommand]:
    """Scripted commands covering each kind of motion"""
    return [
        DriveCommand(strafe=0.0, forward=1.0, turn=0.0, square_inputs=square_inputs),
        DriveCommand(strafe=1.0, forward=0.0, turn=0.0, square_inputs=square_inputs),
        DriveCommand(strafe=0.0, forward=0.0, turn=0.5, square_inputs=square_inputs),
        DriveCommand(strafe=0.5, forward=0.5, turn=0.25, square_inputs=square_inputs),
        # Same stick, robot turned 90 deg: still drives away from the driver
        DriveCommand(strafe=0.0, forward=1.0, turn=0.0, heading=math.pi / 2,
                     square_inputs=square_inputs),
        DriveCommand(strafe=0.0, forward=0.0, turn=0.0, square_inputs=square_inputs),
    ]


def run_demo(env_file: Optional[str] = None, interval: float = 0.1) -> None:
    """Run the scripted demo with mock motors"""

    logger.info("=" * 60)
    logger.info("Mecanum Drivebase Demo")
    logger.info("=" * 60)

    config = DriveConfig(env_file).to_drivetrain_config()
    logger.info(
        f"Config: range=[{config.range_min}, {config.range_max}] "
        f"max_speed={config.max_speed} auto_invert={config.auto_invert}"
    )

    motors = [MockMotor(name=slot.name) for slot in MotorSlot]
    drive = MecanumDrive.from_config(*motors, config=config)

    logger.info("Running scripted commands...")
    logger.info("-" * 60)

    for command in demo_script(config.square_inputs):
        powers = drive.drive(command)
        frame = "field" if command.is_field_centric else "robot"
        logger.info(
            f"{frame:>5} s={command.strafe:+.2f} f={command.forward:+.2f} "
            f"t={command.turn:+.2f} -> "
            f"FL={powers.front_left:+.3f} FR={powers.front_right:+.3f} "
            f"BL={powers.back_left:+.3f} BR={powers.back_right:+.3f}"
        )
        time.sleep(interval)

    logger.info("Heading drive (joystick right, heading 0)...")
    powers = drive.drive_field_centric_heading(1.0, 0.0, 0.0, 0.0)
    logger.info(
        f"FL={powers.front_left:+.3f} FR={powers.front_right:+.3f} "
        f"BL={powers.back_left:+.3f} BR={powers.back_right:+.3f}"
    )

    logger.info("-" * 60)
    logger.info("Demo complete. Stopping motors...")
    drive.stop()

    logger.info("=" * 60)
    logger.info("Demo finished successfully!")
    logger.info("=" * 60)


def main(env_file: Optional[str] = None):
    """Main entry point"""
    try:
        run_demo(env_file)
    except KeyboardInterrupt:
        logger.info("\nDemo interrupted by user")
    except Exception as e:
        logger.error(f"Demo failed: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
