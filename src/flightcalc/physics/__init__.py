"""Physical constants, unit conversions and vector math shared by all calculators."""

from flightcalc.physics import units
from flightcalc.physics.vectors import Vector2

__all__ = ["Vector2", "units"]
