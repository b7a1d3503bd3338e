"""Flight envelope, energy and glide calculations.

This module combines several in-flight estimates:
- Wind vector from the air/ground velocity triangle, with a gust factor
  from recent indicated airspeed variability
- Envelope margins to stall, never-exceed speed and maximum Mach
- Specific energy and its trend
- Glide reach from height above ground
- Alternate airport combination counts

Glide ratio, best-glide multiplier and typical stall speed are illustrative
general-aviation values, not aircraft-specific performance data.
"""

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Any

import numpy as np
import numpy.typing as npt

from flightcalc.calculators.combinatorics import binomial_coefficient
from flightcalc.calculators.history import BoundedHistory
from flightcalc.core.logging_system import get_logger
from flightcalc.physics.units import DEG_TO_RAD, FT_TO_M, GRAVITY, KTS_TO_MS, M_TO_FT, NM_TO_FT, signed_angle
from flightcalc.physics.vectors import Vector2

logger = get_logger(__name__)

SQRT_TWO = 1.414
TYPICAL_GLIDE_RATIO = 12.0
BEST_GLIDE_MULTIPLIER = 1.3
TYPICAL_STALL_SPEED_KTS = 60.0
ENERGY_RATE_DIVISOR = 101.27
ENERGY_TREND_THRESHOLD_FPM = 50.0
MIN_HISTORY_FOR_STATS = 2

DEFAULT_ALTERNATE_PAIRS: tuple[tuple[int, int], ...] = ((5, 2), (10, 3))
ALTERNATE_NOTE = "Iterative binomial calculation (no recursion)"


class Trend(IntEnum):
    """Direction of total energy change.

    Attributes:
        DECREASING: Descending faster than the deadband
        STABLE: Within ±50 fpm
        INCREASING: Climbing faster than the deadband
    """

    DECREASING = -1
    STABLE = 0
    INCREASING = 1


@dataclass(frozen=True)
class WindVector:
    """Wind derived from the velocity triangle.

    Attributes:
        speed_kts: Wind speed (kts)
        direction_from: Bearing of the ground-minus-air vector (deg)
        headwind: Along-track component (kts), positive = headwind
        crosswind: Cross-track component (kts), positive = from the right
        gust_factor: IAS standard deviation / mean over the history
    """

    speed_kts: float
    direction_from: float
    headwind: float
    crosswind: float
    gust_factor: float


@dataclass(frozen=True)
class EnvelopeMargins:
    """Margins to the edges of the flight envelope.

    Attributes:
        stall_margin_pct: IAS above the load-factor stall speed (%)
        vmo_margin_pct: IAS below the never-exceed speed (%)
        mmo_margin_pct: Mach below the maximum operating Mach (%)
        min_margin_pct: Smallest of the three margins (%)
        load_factor: G-loading from bank angle
        corner_speed_kts: Corner speed estimate (kts)
    """

    stall_margin_pct: float
    vmo_margin_pct: float
    mmo_margin_pct: float
    min_margin_pct: float
    load_factor: float
    corner_speed_kts: float


@dataclass(frozen=True)
class EnergyState:
    """Specific energy state.

    Attributes:
        specific_energy_ft: Altitude plus kinetic energy height (ft)
        energy_rate_kts: Vertical speed expressed as a speed rate
        trend: Increasing, stable or decreasing
    """

    specific_energy_ft: float
    energy_rate_kts: float
    trend: Trend


@dataclass(frozen=True)
class GlideEstimate:
    """Glide reach estimate.

    Attributes:
        still_air_range_nm: Range with no wind (NM)
        wind_adjusted_range_nm: Range with the headwind discount (NM)
        glide_ratio: Assumed lift/drag ratio
        best_glide_speed_kts: Estimated best glide speed (kts)
    """

    still_air_range_nm: float
    wind_adjusted_range_nm: float
    glide_ratio: float
    best_glide_speed_kts: float


@dataclass(frozen=True)
class AlternateAirports:
    """Alternate airport combination counts.

    Attributes:
        combinations: ((n, k), C(n, k)) pairs in request order
        note: Human-readable note about the calculation
    """

    combinations: tuple[tuple[tuple[int, int], int], ...]
    note: str = ALTERNATE_NOTE


@dataclass(frozen=True)
class FlightSolution:
    """Everything the composite flight calculator reports."""

    wind: WindVector
    envelope: EnvelopeMargins
    energy: EnergyState
    glide: GlideEstimate
    alternate_airports: AlternateAirports


def calculate_gust_factor(samples: npt.ArrayLike) -> float:
    """Coefficient of variation of airspeed samples.

    Args:
        samples: Indicated airspeed readings (kts)

    Returns:
        Population standard deviation divided by mean. 0.0 with fewer than
        two samples or a zero mean.
    """
    values = np.asarray(samples, dtype=np.float64)
    if values.size < MIN_HISTORY_FOR_STATS:
        return 0.0

    mean = float(np.mean(values))
    if mean == 0.0:
        return 0.0

    return float(np.std(values)) / mean


def calculate_wind_vector(
    tas_kts: float,
    gs_kts: float,
    heading_deg: float,
    track_deg: float,
    ias_history: BoundedHistory,
) -> WindVector:
    """Solve the wind triangle from air and ground velocities.

    Wind = ground vector (GS along track) - air vector (TAS along heading).

    Args:
        tas_kts: True airspeed (kts)
        gs_kts: Groundspeed (kts)
        heading_deg: Heading (deg)
        track_deg: Ground track (deg)
        ias_history: Recent IAS samples for the gust factor

    Returns:
        WindVector

    Examples:
        >>> history = BoundedHistory()
        >>> wind = calculate_wind_vector(100.0, 100.0, 90.0, 90.0, history)
        >>> round(wind.speed_kts, 6)
        0.0
    """
    air_vec = Vector2.from_polar(tas_kts, heading_deg)
    ground_vec = Vector2.from_polar(gs_kts, track_deg)
    wind_vec = ground_vec - air_vec

    speed_kts = wind_vec.magnitude()
    direction_from = wind_vec.bearing()

    wind_from_rad = signed_angle(direction_from - track_deg) * DEG_TO_RAD
    headwind = -speed_kts * math.cos(wind_from_rad)
    crosswind = speed_kts * math.sin(wind_from_rad)

    gust_factor = calculate_gust_factor(ias_history.values())

    logger.debug(
        "Wind vector %.1f kts @ %.0f deg, gust factor %.4f over %d samples",
        speed_kts,
        direction_from,
        gust_factor,
        len(ias_history),
    )

    return WindVector(
        speed_kts=speed_kts,
        direction_from=direction_from,
        headwind=headwind,
        crosswind=crosswind,
        gust_factor=gust_factor,
    )


def calculate_envelope(
    bank_deg: float,
    ias_kts: float,
    mach: float,
    vso_kts: float,
    vne_kts: float,
    mmo: float,
) -> EnvelopeMargins:
    """Calculate margins to stall, overspeed and Mach limits.

    Stall speed rises with load factor: Vs(n) = Vso × sqrt(n).

    Args:
        bank_deg: Bank angle (deg)
        ias_kts: Indicated airspeed (kts)
        mach: Mach number
        vso_kts: Stall speed in landing configuration (KIAS), > 0
        vne_kts: Never-exceed speed (KIAS), > 0
        mmo: Maximum operating Mach number, > 0

    Returns:
        EnvelopeMargins
    """
    load_factor = 1.0 / math.cos(bank_deg * DEG_TO_RAD)

    vs_actual = vso_kts * math.sqrt(load_factor)
    stall_margin = ((ias_kts - vs_actual) / vs_actual) * 100.0
    vmo_margin = ((vne_kts - ias_kts) / vne_kts) * 100.0
    mmo_margin = ((mmo - mach) / mmo) * 100.0

    return EnvelopeMargins(
        stall_margin_pct=stall_margin,
        vmo_margin_pct=vmo_margin,
        mmo_margin_pct=mmo_margin,
        min_margin_pct=min(stall_margin, vmo_margin, mmo_margin),
        load_factor=load_factor,
        corner_speed_kts=vs_actual * SQRT_TWO,  # Vc ≈ Vs × √2
    )


def calculate_energy(tas_kts: float, altitude_ft: float, vs_fpm: float) -> EnergyState:
    """Calculate specific energy and its trend.

    Es = h + V² / (2g)

    Args:
        tas_kts: True airspeed (kts)
        altitude_ft: Altitude (ft)
        vs_fpm: Vertical speed (fpm)

    Returns:
        EnergyState

    Examples:
        >>> calculate_energy(250.0, 35000.0, -500.0).trend
        <Trend.DECREASING: -1>
    """
    v_ms = tas_kts * KTS_TO_MS
    h_m = altitude_ft * FT_TO_M
    kinetic_energy_m = (v_ms * v_ms) / (2.0 * GRAVITY)
    specific_energy_ft = (h_m + kinetic_energy_m) * M_TO_FT

    if vs_fpm > ENERGY_TREND_THRESHOLD_FPM:
        trend = Trend.INCREASING
    elif vs_fpm < -ENERGY_TREND_THRESHOLD_FPM:
        trend = Trend.DECREASING
    else:
        trend = Trend.STABLE

    return EnergyState(
        specific_energy_ft=specific_energy_ft,
        energy_rate_kts=vs_fpm / ENERGY_RATE_DIVISOR,  # Simplified
        trend=trend,
    )


def calculate_glide_reach(
    agl_ft: float,
    tas_kts: float,
    headwind_kts: float,
    glide_ratio: float = TYPICAL_GLIDE_RATIO,
    best_glide_multiplier: float = BEST_GLIDE_MULTIPLIER,
    typical_stall_speed_kts: float = TYPICAL_STALL_SPEED_KTS,
) -> GlideEstimate:
    """Estimate how far the aircraft can glide.

    Args:
        agl_ft: Height above ground (ft)
        tas_kts: True airspeed (kts)
        headwind_kts: Headwind component (kts), negative for tailwind
        glide_ratio: Assumed L/D
        best_glide_multiplier: Best glide speed as a multiple of stall speed
        typical_stall_speed_kts: Baseline stall speed (kts)

    Returns:
        GlideEstimate

    Note:
        The wind discount is linear: range × (1 - headwind / TAS). With
        TAS at or below zero no wind discount is applied.
    """
    still_air_range_nm = (agl_ft * glide_ratio) / NM_TO_FT

    wind_effect = headwind_kts / tas_kts if tas_kts > 0.0 else 0.0

    return GlideEstimate(
        still_air_range_nm=still_air_range_nm,
        wind_adjusted_range_nm=still_air_range_nm * (1.0 - wind_effect),
        glide_ratio=glide_ratio,
        best_glide_speed_kts=best_glide_multiplier * typical_stall_speed_kts,
    )


def calculate_alternate_airports(
    pairs: tuple[tuple[int, int], ...] = DEFAULT_ALTERNATE_PAIRS,
) -> AlternateAirports:
    """Count alternate airport combinations for each (n, k) pair.

    Args:
        pairs: (airports available, airports to pick) pairs

    Returns:
        AlternateAirports with C(n, k) for each pair
    """
    return AlternateAirports(
        combinations=tuple(((n, k), binomial_coefficient(n, k)) for n, k in pairs),
    )


@dataclass
class FlightInputs:
    """Instantaneous flight state fed to the composite calculator.

    Attributes:
        tas_kts: True airspeed (kts)
        gs_kts: Groundspeed (kts)
        heading_deg: Heading (deg)
        track_deg: Ground track (deg)
        ias_kts: Indicated airspeed (kts)
        mach: Mach number
        altitude_ft: Altitude (ft)
        agl_ft: Height above ground (ft)
        vs_fpm: Vertical speed (fpm)
        weight_kg: Aircraft weight (kg), reported but unused by the formulas
        bank_deg: Bank angle (deg)
        vso_kts: Stall speed in landing configuration (KIAS)
        vne_kts: Never-exceed speed (KIAS)
        mmo: Maximum operating Mach number
    """

    tas_kts: float
    gs_kts: float
    heading_deg: float
    track_deg: float
    ias_kts: float
    mach: float
    altitude_ft: float
    agl_ft: float
    vs_fpm: float
    weight_kg: float
    bank_deg: float
    vso_kts: float
    vne_kts: float
    mmo: float


class FlightPerformanceCalculator:
    """Composite in-flight performance calculator.

    Runs the wind, envelope, energy and glide estimates for one flight state
    and bundles them into a FlightSolution.

    Examples:
        >>> inputs = FlightInputs(
        ...     250.0, 245.0, 90.0, 95.0, 220.0, 0.65, 35000.0, 35000.0,
        ...     -500.0, 75000.0, 5.0, 120.0, 250.0, 0.82,
        ... )
        >>> history = BoundedHistory()
        >>> history.add_reading(220.0)
        >>> calc = FlightPerformanceCalculator({"glide_ratio": 12.0})
        >>> solution = calc.calculate(inputs, history)
        >>> print(f"Glide range: {solution.glide.still_air_range_nm:.1f} NM")
        Glide range: 69.1 NM
    """

    def __init__(self, config: dict[str, Any] | None = None) -> None:
        """Initialize the calculator.

        Args:
            config: The "flight" settings section, with optional:
                - glide_ratio: Assumed L/D
                - best_glide_multiplier: Best glide / stall speed ratio
                - typical_stall_speed_kts: Baseline stall speed
                - alternate_airports: list of [n, k] pairs
        """
        config = config or {}

        self.glide_ratio = float(config.get("glide_ratio", TYPICAL_GLIDE_RATIO))
        self.best_glide_multiplier = float(config.get("best_glide_multiplier", BEST_GLIDE_MULTIPLIER))
        self.typical_stall_speed_kts = float(config.get("typical_stall_speed_kts", TYPICAL_STALL_SPEED_KTS))
        self.alternate_pairs = tuple(
            (int(n), int(k)) for n, k in config.get("alternate_airports", DEFAULT_ALTERNATE_PAIRS)
        )

        logger.debug(
            "FlightPerformanceCalculator initialized: glide_ratio=%.1f, best_glide=%.1f x %.0f kts",
            self.glide_ratio,
            self.best_glide_multiplier,
            self.typical_stall_speed_kts,
        )

    def calculate(self, inputs: FlightInputs, ias_history: BoundedHistory) -> FlightSolution:
        """Run every estimate for one flight state.

        Args:
            inputs: Validated flight state
            ias_history: Recent IAS samples for the gust factor

        Returns:
            FlightSolution
        """
        wind = calculate_wind_vector(
            inputs.tas_kts,
            inputs.gs_kts,
            inputs.heading_deg,
            inputs.track_deg,
            ias_history,
        )
        envelope = calculate_envelope(
            inputs.bank_deg,
            inputs.ias_kts,
            inputs.mach,
            inputs.vso_kts,
            inputs.vne_kts,
            inputs.mmo,
        )
        energy = calculate_energy(inputs.tas_kts, inputs.altitude_ft, inputs.vs_fpm)
        glide = calculate_glide_reach(
            inputs.agl_ft,
            inputs.tas_kts,
            wind.headwind,
            glide_ratio=self.glide_ratio,
            best_glide_multiplier=self.best_glide_multiplier,
            typical_stall_speed_kts=self.typical_stall_speed_kts,
        )

        return FlightSolution(
            wind=wind,
            envelope=envelope,
            energy=energy,
            glide=glide,
            alternate_airports=calculate_alternate_airports(self.alternate_pairs),
        )
