"""Vector mathematics for horizontal navigation.

Velocities in the wind triangle are plane vectors: x points east, y points
north. Bearings follow the aviation convention (0° north, clockwise).

Typical usage example:
    from flightcalc.physics.vectors import Vector2

    air = Vector2.from_polar(tas_kts, heading_deg)
    ground = Vector2.from_polar(gs_kts, track_deg)
    wind = ground - air
"""

import math
from dataclasses import dataclass

from flightcalc.physics.units import DEG_TO_RAD, RAD_TO_DEG, normalize_angle


@dataclass(frozen=True)
class Vector2:
    """2D vector in the east/north plane.

    Attributes:
        x: East component.
        y: North component.

    Examples:
        >>> v1 = Vector2(1.0, 2.0)
        >>> v2 = Vector2(3.0, 4.0)
        >>> v1 + v2
        Vector2(x=4.0, y=6.0)
    """

    x: float
    y: float

    def __add__(self, other: "Vector2") -> "Vector2":
        """Add two vectors component-wise."""
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        """Subtract two vectors component-wise."""
        return Vector2(self.x - other.x, self.y - other.y)

    def magnitude(self) -> float:
        """Calculate the magnitude (length) of the vector.

        Returns:
            Vector magnitude.

        Examples:
            >>> Vector2(3.0, 4.0).magnitude()
            5.0
        """
        return math.sqrt(self.x * self.x + self.y * self.y)

    def bearing(self) -> float:
        """Direction the vector points, as a compass bearing.

        Returns:
            Bearing in degrees [0, 360), 0 = north, 90 = east. The zero
            vector reports 0.

        Examples:
            >>> Vector2(1.0, 0.0).bearing()
            90.0
        """
        return normalize_angle(math.atan2(self.x, self.y) * RAD_TO_DEG)

    @classmethod
    def from_polar(cls, magnitude: float, bearing_deg: float) -> "Vector2":
        """Create a vector from a speed and a compass bearing.

        Args:
            magnitude: Vector length (e.g. speed in knots).
            bearing_deg: Direction in degrees, 0 = north, clockwise.

        Returns:
            Vector2 pointing along the bearing.

        Examples:
            >>> v = Vector2.from_polar(10.0, 90.0)  # 10 kts due east
        """
        bearing_rad = bearing_deg * DEG_TO_RAD
        return cls(magnitude * math.sin(bearing_rad), magnitude * math.cos(bearing_rad))
