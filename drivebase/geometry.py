"""
2-D vector used to rotate drive commands into the robot frame.

Angles are radians, counter-clockwise positive.
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector2d:
    """Immutable 2-D vector"""
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def from_polar(cls, magnitude: float, angle: float) -> "Vector2d":
        """Create a vector from magnitude and angle (radians)"""
        return cls(magnitude * math.cos(angle), magnitude * math.sin(angle))

    def rotate_by(self, angle: float) -> "Vector2d":
        """
        Rotate the vector counter-clockwise.

        Args:
            angle: Rotation in radians

        Returns:
            New rotated vector
        """
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return Vector2d(
            self.x * cos_a - self.y * sin_a,
            self.x * sin_a + self.y * cos_a,
        )

    def angle(self) -> float:
        """Polar angle in radians (atan2, 0 for the zero vector)"""
        return math.atan2(self.y, self.x)

    def magnitude(self) -> float:
        """Euclidean length"""
        return math.hypot(self.x, self.y)

    def dot(self, other: "Vector2d") -> float:
        return self.x * other.x + self.y * other.y

    def normalize(self) -> "Vector2d":
        """Unit vector in the same direction; the zero vector stays zero"""
        mag = self.magnitude()
        if mag == 0.0:
            return Vector2d(0.0, 0.0)
        return Vector2d(self.x / mag, self.y / mag)

    def __add__(self, other: "Vector2d") -> "Vector2d":
        return Vector2d(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2d") -> "Vector2d":
        return Vector2d(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector2d":
        return Vector2d(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> "Vector2d":
        return Vector2d(-self.x, -self.y)
