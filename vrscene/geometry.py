"""Basic value types: colours, vectors and positions in 2D and 3D space."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class Color:
    """An RGBA colour with integer channels."""

    r: int
    g: int
    b: int
    a: int


@dataclass
class Vector3:
    """A three-component vector."""

    x: float
    y: float
    z: float

    def normalized(self) -> Vector3:
        """Return a unit vector in the same direction; the zero vector stays zero."""
        if self.x == 0 and self.y == 0 and self.z == 0:
            return Vector3(0.0, 0.0, 0.0)
        length = math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)
        return Vector3(self.x / length, self.y / length, self.z / length)


@dataclass
class Pos:
    """A position in world space together with an orientation in degrees."""

    x: float
    y: float
    z: float
    yaw: float = 0.0
    pitch: float = 0.0
    roll: float = 0.0

    def normalized_rotation(self) -> Vector3:
        """Return (yaw, pitch, roll) as a normalised vector."""
        return Vector3(self.yaw, self.pitch, self.roll).normalized()


@dataclass
class Pos2D:
    """An integer position on the screen plane."""

    x: int
    y: int

    def distance_to(self, other: Pos2D) -> float:
        """Return the Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)