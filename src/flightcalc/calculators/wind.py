"""Wind triangle resolver.

Splits a reported wind into headwind and crosswind components relative to
the aircraft's ground track, and reports the drift angle between track and
heading.
"""

import math
from dataclasses import dataclass

from flightcalc.core.logging_system import get_logger
from flightcalc.physics.units import DEG_TO_RAD, normalize_angle, signed_angle

logger = get_logger(__name__)


@dataclass(frozen=True)
class WindComponents:
    """Wind resolved against the ground track.

    Attributes:
        headwind: Along-track component (kts), positive = headwind,
            negative = tailwind
        crosswind: Cross-track component (kts), positive = from the right,
            negative = from the left
        total_wind: Wind speed (kts)
        wca: Wind correction angle (deg). Always 0: true airspeed is not
            an input, so the correction cannot be solved here.
        drift: Track minus heading (deg), in (-180, 180]
    """

    headwind: float
    crosswind: float
    total_wind: float
    wca: float
    drift: float


def calculate_wind(track: float, heading: float, wind_dir: float, wind_speed: float) -> WindComponents:
    """Calculate wind components relative to aircraft track.

    Args:
        track: Ground track (degrees true)
        heading: Aircraft heading (degrees)
        wind_dir: Direction the wind blows FROM (degrees)
        wind_speed: Wind speed (knots), already checked to be >= 0

    Returns:
        WindComponents for the given geometry

    Examples:
        >>> wind = calculate_wind(90.0, 85.0, 270.0, 15.0)
        >>> wind.drift, round(wind.headwind, 2)
        (5.0, 15.0)
    """
    track = normalize_angle(track)
    heading = normalize_angle(heading)
    wind_dir = normalize_angle(wind_dir)

    drift = signed_angle(track - heading)

    wind_from_relative = signed_angle(wind_dir - track)
    wind_from_rad = wind_from_relative * DEG_TO_RAD

    headwind = -wind_speed * math.cos(wind_from_rad)
    crosswind = wind_speed * math.sin(wind_from_rad)

    logger.debug(
        "Wind %.0f/%.1f kts on track %.1f: relative=%.1f deg, head=%.2f, cross=%.2f",
        wind_dir,
        wind_speed,
        track,
        wind_from_relative,
        headwind,
        crosswind,
    )

    return WindComponents(
        headwind=headwind,
        crosswind=crosswind,
        total_wind=wind_speed,
        wca=0.0,
        drift=drift,
    )
