"""Vertical navigation (VNAV) geometry.

This module calculates the vertical path to an altitude constraint: flight
path angle, vertical speed required to meet it, top-of-descent distance on a
standard 3° path, and time to reach the constraint at the current vertical
speed.

Distance and groundspeed are clamped to small positive minimums before use,
so a zero or negative input yields a steep-but-finite answer rather than a
division by zero. Pathological inputs are altered, not rejected.
"""

import math
from dataclasses import dataclass

from flightcalc.core.logging_system import get_logger
from flightcalc.physics.units import DEG_TO_RAD, NM_TO_FT, RAD_TO_DEG

logger = get_logger(__name__)

REFERENCE_PATH_DEG = 3.0
THREE_DEG_RAD = REFERENCE_PATH_DEG * DEG_TO_RAD

# VS (fpm) = 101.27 × GS (kts) × tan(γ); 101.27 = 6076.12 ft/NM / 60 min/h
VS_CONVERSION_FACTOR = 101.27

MIN_DISTANCE_NM = 0.01
MIN_GROUNDSPEED_KTS = 1.0
MIN_VS_FOR_TIME_FPM = 1.0
INFINITE_TIME_MIN = 999.9


@dataclass(frozen=True)
class VnavSolution:
    """VNAV results.

    Sign convention: a negative altitude change (target below current) is a
    descent.

    Attributes:
        altitude_to_lose_ft: Current minus target altitude (ft), positive
            when descending
        flight_path_angle_deg: Path angle to the constraint (deg), negative
            for descent
        required_vs_fpm: Vertical speed to fly that path at the groundspeed
        tod_distance_nm: Distance needed on a 3° path (NM)
        time_to_constraint_min: Minutes to the constraint at current VS
        distance_per_1000ft: NM covered per 1000 ft of altitude change
        vs_for_3deg: Vertical speed for a 3° path (fpm); the descent rate is
            reported as a positive number and its sign is flipped for a climb
        is_descent: True if target is below current altitude
    """

    altitude_to_lose_ft: float
    flight_path_angle_deg: float
    required_vs_fpm: float
    tod_distance_nm: float
    time_to_constraint_min: float
    distance_per_1000ft: float
    vs_for_3deg: float
    is_descent: bool


def calculate_vnav(
    current_alt_ft: float,
    target_alt_ft: float,
    distance_nm: float,
    groundspeed_kts: float,
    current_vs_fpm: float,
) -> VnavSolution:
    """Calculate VNAV parameters for an altitude constraint.

    Args:
        current_alt_ft: Current altitude (ft)
        target_alt_ft: Constraint altitude (ft)
        distance_nm: Distance to the constraint (NM), clamped to >= 0.01
        groundspeed_kts: Groundspeed (kts), clamped to >= 1
        current_vs_fpm: Current vertical speed (fpm)

    Returns:
        VnavSolution

    Examples:
        >>> vnav = calculate_vnav(35000, 10000, 100, 450, -1500)
        >>> vnav.is_descent
        True
    """
    altitude_change_ft = target_alt_ft - current_alt_ft
    is_descent = altitude_change_ft < 0.0

    if distance_nm < MIN_DISTANCE_NM:
        logger.debug("Distance %.3f NM clamped to %.2f NM", distance_nm, MIN_DISTANCE_NM)
        distance_nm = MIN_DISTANCE_NM
    if groundspeed_kts < MIN_GROUNDSPEED_KTS:
        logger.debug("Groundspeed %.2f kts clamped to %.1f kts", groundspeed_kts, MIN_GROUNDSPEED_KTS)
        groundspeed_kts = MIN_GROUNDSPEED_KTS

    distance_ft = distance_nm * NM_TO_FT
    gamma_rad = math.atan(altitude_change_ft / distance_ft)

    required_vs_fpm = VS_CONVERSION_FACTOR * groundspeed_kts * math.tan(gamma_rad)

    # Top of descent always uses the 3° reference path, not the actual angle
    abs_alt_change = abs(altitude_change_ft)
    tod_distance_nm = abs_alt_change / (NM_TO_FT * math.tan(THREE_DEG_RAD))

    vs_for_3deg = VS_CONVERSION_FACTOR * groundspeed_kts * math.tan(THREE_DEG_RAD)
    if not is_descent:
        vs_for_3deg = -vs_for_3deg

    if abs(current_vs_fpm) > MIN_VS_FOR_TIME_FPM:
        time_to_constraint_min = altitude_change_ft / current_vs_fpm
    else:
        time_to_constraint_min = INFINITE_TIME_MIN

    if abs_alt_change > MIN_VS_FOR_TIME_FPM:
        distance_per_1000ft = (distance_nm * 1000.0) / abs_alt_change
    else:
        distance_per_1000ft = 0.0

    return VnavSolution(
        altitude_to_lose_ft=-altitude_change_ft,
        flight_path_angle_deg=gamma_rad * RAD_TO_DEG,
        required_vs_fpm=required_vs_fpm,
        tod_distance_nm=tod_distance_nm,
        time_to_constraint_min=time_to_constraint_min,
        distance_per_1000ft=distance_per_1000ft,
        vs_for_3deg=vs_for_3deg,
        is_descent=is_descent,
    )
