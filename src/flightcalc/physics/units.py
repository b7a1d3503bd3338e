"""Physical constants and unit conversion factors.

Every calculator shares this table. Values are fixed for the life of the
process; nothing in the application is allowed to reassign them.

Typical usage example:
    from flightcalc.physics import units

    v_ms = tas_kts * units.KTS_TO_MS
    heading = units.normalize_angle(heading_deg)
"""

import math

# Gravity
GRAVITY = 9.80665  # m/s²

# Speed
KTS_TO_MS = 0.514444  # 1 knot in m/s

# Length
FT_TO_M = 0.3048
M_TO_FT = 1.0 / FT_TO_M
NM_TO_FT = 6076.12
METERS_PER_NM = 1852.0
FEET_PER_METER = 3.28084

# Angles
DEG_TO_RAD = math.pi / 180.0
RAD_TO_DEG = 180.0 / math.pi
ANGLE_WRAP = 360.0
HALF_CIRCLE = 180.0

# Temperature
KELVIN_OFFSET = 273.15


def normalize_angle(angle: float) -> float:
    """Wrap an angle into the [0, 360) range.

    Uses a single modulo rather than repeated add/subtract so the cost does
    not depend on how far outside the range the input is.

    Args:
        angle: Angle in degrees (any value).

    Returns:
        Equivalent angle in [0, 360).

    Examples:
        >>> normalize_angle(-90.0)
        270.0
        >>> normalize_angle(725.0)
        5.0
    """
    result = math.fmod(angle, ANGLE_WRAP)
    if result < 0.0:
        result += ANGLE_WRAP
    # fmod of a tiny negative value can round back up to exactly 360.
    if result >= ANGLE_WRAP:
        result -= ANGLE_WRAP
    return result


def signed_angle(angle: float) -> float:
    """Wrap an angle into the (-180, 180] range.

    Args:
        angle: Angle in degrees (any value).

    Returns:
        Equivalent angle in (-180, 180].

    Examples:
        >>> signed_angle(270.0)
        -90.0
        >>> signed_angle(180.0)
        180.0
    """
    result = normalize_angle(angle)
    if result > HALF_CIRCLE:
        result -= ANGLE_WRAP
    return result
