"""Turn performance calculations.

This module calculates coordinated level-turn kinematics from true airspeed
and bank angle: turn radius, turn rate, lead distance for a course change,
time to complete the turn, load factor, and the bank angle that would give
a standard-rate turn at the same airspeed.

Near wings-level the radius and time diverge; those fields saturate to
fixed sentinel values instead of becoming infinite so every result can be
printed as a fixed-point number.
"""

import math
from dataclasses import dataclass

from flightcalc.core.logging_system import get_logger
from flightcalc.physics.units import DEG_TO_RAD, FEET_PER_METER, GRAVITY, KTS_TO_MS, METERS_PER_NM, RAD_TO_DEG

logger = get_logger(__name__)

STANDARD_RATE_DPS = 3.0  # Standard rate turn (deg/s)

INFINITE_RADIUS_NM = 999.9
INFINITE_RADIUS_FT = 999900.0
INFINITE_TIME_SEC = 999.9

MIN_TAN_THRESHOLD = 0.001  # |tan(bank)| below this is treated as wings level
MIN_TURN_RATE_DPS = 0.01


@dataclass(frozen=True)
class TurnPerformance:
    """Turn performance results.

    Attributes:
        radius_nm: Turn radius (NM)
        radius_ft: Turn radius (ft)
        turn_rate_dps: Rate of turn (deg/s)
        lead_distance_nm: Distance before the fix to start the turn (NM)
        lead_distance_ft: Lead distance (ft)
        time_to_turn_sec: Time to complete the course change (sec)
        load_factor: G-loading in the turn
        standard_rate_bank: Bank angle giving 3 deg/s at this TAS (deg)
    """

    radius_nm: float
    radius_ft: float
    turn_rate_dps: float
    lead_distance_nm: float
    lead_distance_ft: float
    time_to_turn_sec: float
    load_factor: float
    standard_rate_bank: float


def calculate_load_factor(bank_deg: float) -> float:
    """Calculate load factor in a coordinated level turn.

    n = 1 / cos(bank)

    Args:
        bank_deg: Bank angle (degrees)

    Returns:
        Load factor (G)
    """
    return 1.0 / math.cos(bank_deg * DEG_TO_RAD)


def calculate_standard_rate_bank(tas_kts: float) -> float:
    """Bank angle needed for a standard-rate (3 deg/s) turn.

    phi = atan(omega * V / g), independent of the bank actually flown.

    Args:
        tas_kts: True airspeed (knots)

    Returns:
        Bank angle in degrees
    """
    v_ms = tas_kts * KTS_TO_MS
    omega_rad_s = STANDARD_RATE_DPS * DEG_TO_RAD
    return math.atan((omega_rad_s * v_ms) / GRAVITY) * RAD_TO_DEG


def calculate_turn_performance(tas_kts: float, bank_deg: float, course_change_deg: float) -> TurnPerformance:
    """Calculate comprehensive turn performance.

    Uses the coordinated-turn relations:
    - R = V² / (g × tan φ)
    - ω = g × tan φ / V
    - Lead = R × tan(Δψ / 2)

    Args:
        tas_kts: True airspeed (knots), > 0
        bank_deg: Bank angle (degrees), 0-90
        course_change_deg: Course change (degrees)

    Returns:
        TurnPerformance. When |tan(bank)| < 0.001 the radius fields hold the
        999.9 NM / 999900 ft sentinels, rate and lead distance are zero and
        the time is 999.9 s.

    Examples:
        >>> turn = calculate_turn_performance(250.0, 25.0, 90.0)
        >>> round(turn.load_factor, 3)
        1.103
    """
    v_ms = tas_kts * KTS_TO_MS
    phi_rad = bank_deg * DEG_TO_RAD
    delta_psi_rad = course_change_deg * DEG_TO_RAD

    load_factor = calculate_load_factor(bank_deg)
    standard_rate_bank = calculate_standard_rate_bank(tas_kts)

    tan_phi = math.tan(phi_rad)
    if abs(tan_phi) < MIN_TAN_THRESHOLD:
        logger.debug("Bank %.3f deg is effectively wings level, radius saturated", bank_deg)
        return TurnPerformance(
            radius_nm=INFINITE_RADIUS_NM,
            radius_ft=INFINITE_RADIUS_FT,
            turn_rate_dps=0.0,
            lead_distance_nm=0.0,
            lead_distance_ft=0.0,
            time_to_turn_sec=INFINITE_TIME_SEC,
            load_factor=load_factor,
            standard_rate_bank=standard_rate_bank,
        )

    radius_m = (v_ms * v_ms) / (GRAVITY * tan_phi)

    omega_rad_s = (GRAVITY * tan_phi) / v_ms
    turn_rate_dps = omega_rad_s * RAD_TO_DEG

    lead_m = radius_m * math.tan(delta_psi_rad / 2.0)

    if abs(turn_rate_dps) > MIN_TURN_RATE_DPS:
        time_to_turn_sec = course_change_deg / turn_rate_dps
    else:
        time_to_turn_sec = INFINITE_TIME_SEC

    logger.debug(
        "Turn at %.0f kts, %.1f deg bank: R=%.0f m, rate=%.2f deg/s",
        tas_kts,
        bank_deg,
        radius_m,
        turn_rate_dps,
    )

    return TurnPerformance(
        radius_nm=radius_m / METERS_PER_NM,
        radius_ft=radius_m * FEET_PER_METER,
        turn_rate_dps=turn_rate_dps,
        lead_distance_nm=lead_m / METERS_PER_NM,
        lead_distance_ft=lead_m * FEET_PER_METER,
        time_to_turn_sec=time_to_turn_sec,
        load_factor=load_factor,
        standard_rate_bank=standard_rate_bank,
    )
