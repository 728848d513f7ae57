"""
Core interfaces (protocols) for pluggable components.

These define the contracts that all implementations must follow.
The drivebase never talks to hardware directly - it only needs
something that looks like a Motor.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Motor(Protocol):
    """
    Interface for a single drive motor handle.

    Hardware wrappers, simulators and test doubles must implement
    these methods to be usable by the MecanumDrive. The drivebase
    assumes neither call fails.
    """

    def set(self, power: float) -> None:
        """
        Set the motor output.

        Args:
            power: Fractional duty, nominally -1.0 to 1.0
        """
        ...

    def stop_motor(self) -> None:
        """
        Stop the motor.

        Called by MecanumDrive.stop() on every motor.
        """
        ...
