"""
Mock Motor - For testing without hardware.

Records every write instead of driving a motor.
"""

import logging
from typing import List, Optional


logger = logging.getLogger(__name__)


class MockMotor:
    """
    Mock motor for testing.

    Logs writes instead of sending them and keeps the history for
    inspection.
    """

    def __init__(self, name: str = "motor", fail_on_stop: bool = False) -> None:
        """
        Initialize mock motor.

        Args:
            name: Label used in log output
            fail_on_stop: If True, stop_motor() raises RuntimeError
        """
        self.name = name
        self.fail_on_stop = fail_on_stop

        self._power = 0.0
        self._history: List[float] = []
        self._stop_count = 0

    def set(self, power: float) -> None:
        """Record power instead of sending it"""
        self._power = power
        self._history.append(power)
        logger.debug(f"[MOCK] {self.name} set {power:+.3f}")

    def get(self) -> float:
        """Last power written"""
        return self._power

    def stop_motor(self) -> None:
        """Simulate stopping"""
        if self.fail_on_stop:
            raise RuntimeError(f"[MOCK] {self.name} simulated stop failure")
        self.set(0.0)
        self._stop_count += 1
        logger.debug(f"[MOCK] {self.name} stopped")

    @property
    def power(self) -> float:
        """Get last power written (for testing)"""
        return self._power

    @property
    def last_power(self) -> Optional[float]:
        """Last entry of the history, None if never written"""
        return self._history[-1] if self._history else None

    @property
    def history(self) -> List[float]:
        """Get every power written (for testing)"""
        return list(self._history)

    @property
    def stop_count(self) -> int:
        """Get total stop calls (for testing)"""
        return self._stop_count
