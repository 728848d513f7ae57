#!/usr/bin/env python3
"""
Drivebase Launcher - Easy start for the mecanum drivebase tools

Usage:
    python launch.py --demo       # Run scripted demo on mock motors
    python launch.py --config     # Show configuration status
"""

import sys
import argparse
import logging


def setup_logging(level: str = "INFO") -> None:
    """Configure logging"""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stdout
    )


def launch_demo(env_file: str = None) -> None:
    """Launch the scripted drive demo"""
    print("Starting drivebase demo...")
    from demo_drive import main
    main(env_file)


def launch_config(env_file: str = None) -> None:
    """Print configuration status"""
    from drive_config import DriveConfig
    config = DriveConfig(env_file)
    config.print_status()

    is_valid, _ = config.validate()
    if not is_valid:
        sys.exit(1)


def main():
    """Main entry point"""
    parser = argparse.ArgumentParser(
        description="Mecanum Drivebase",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python launch.py --demo                   Run scripted demo
  python launch.py --demo --log-level DEBUG Show every motor write
  python launch.py --config --env-file robot.env
        """
    )

    parser.add_argument(
        "--demo",
        action="store_true",
        help="Run scripted demo on mock motors"
    )
    parser.add_argument(
        "--config",
        action="store_true",
        help="Show configuration status"
    )
    parser.add_argument(
        "--env-file",
        help="Path to .env file"
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Set logging level"
    )

    args = parser.parse_args()

    # Setup logging
    setup_logging(args.log_level)

    # Route to appropriate launcher
    if args.config:
        launch_config(args.env_file)
    elif args.demo:
        launch_demo(args.env_file)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
