"""Density altitude and air density calculations.

This module derives density altitude and related atmospheric parameters
from pressure altitude and outside air temperature:
- ISA temperature and deviation from standard
- Density altitude (how "high" the aircraft performs)
- Pressure ratio and air density ratio (sigma)
- Equivalent airspeed and TAS/IAS ratio
- Performance loss relative to sea level

Density altitude uses the linear rule DA = PA + 120 × (OAT - ISA), which
is an approximation good to about 1%, not the full ISA density inversion.
"""

import math
from dataclasses import dataclass

from flightcalc.core.logging_system import get_logger
from flightcalc.physics.units import KELVIN_OFFSET

logger = get_logger(__name__)

SEA_LEVEL_TEMP_C = 15.0
TEMP_LAPSE_RATE_C_PER_FT = 0.0019812  # Standard lapse rate
DENSITY_ALT_FACTOR = 120.0  # ft per °C of ISA deviation
PRESSURE_ALTITUDE_CONSTANT = 6.8756e-6
PRESSURE_ALTITUDE_EXPONENT = 5.2559
MIN_IAS_FOR_RATIO_KTS = 10.0


@dataclass(frozen=True)
class DensityAltitudeResult:
    """Density altitude results.

    Attributes:
        density_altitude_ft: Density altitude (ft)
        pressure_altitude_ft: Pressure altitude, as given (ft)
        air_density_ratio: Density relative to ISA sea level (sigma)
        temperature_deviation_c: OAT minus ISA temperature (°C)
        performance_loss_pct: Performance loss vs sea level (%)
        eas_kts: Equivalent airspeed (kts)
        tas_to_ias_ratio: TAS / IAS, 1.0 when IAS is 10 kts or less
        pressure_ratio: Pressure relative to ISA sea level
    """

    density_altitude_ft: float
    pressure_altitude_ft: float
    air_density_ratio: float
    temperature_deviation_c: float
    performance_loss_pct: float
    eas_kts: float
    tas_to_ias_ratio: float
    pressure_ratio: float


def isa_temperature_c(pressure_altitude_ft: float) -> float:
    """ISA temperature at a pressure altitude.

    Args:
        pressure_altitude_ft: Pressure altitude (ft)

    Returns:
        Standard temperature (°C)
    """
    return SEA_LEVEL_TEMP_C - (TEMP_LAPSE_RATE_C_PER_FT * pressure_altitude_ft)


def calculate_density_altitude(pressure_altitude_ft: float, oat_celsius: float) -> float:
    """Calculate density altitude.

    DA = PA + 120 × (OAT - ISA)

    Args:
        pressure_altitude_ft: Pressure altitude (ft)
        oat_celsius: Outside air temperature (°C)

    Returns:
        Density altitude (ft)

    Examples:
        >>> round(calculate_density_altitude(5000.0, 25.0))
        7389
    """
    temp_deviation = oat_celsius - isa_temperature_c(pressure_altitude_ft)
    return pressure_altitude_ft + (DENSITY_ALT_FACTOR * temp_deviation)


def calculate_pressure_ratio(pressure_altitude_ft: float) -> float:
    """Standard-atmosphere pressure ratio.

    delta = (1 - 6.8756e-6 × PA) ^ 5.2559

    The base is floored at zero, so altitudes above the model's ceiling
    (about 145,000 ft) give a ratio of 0 instead of a complex number.

    Args:
        pressure_altitude_ft: Pressure altitude (ft)

    Returns:
        Pressure ratio P / P0
    """
    base = max(0.0, 1.0 - PRESSURE_ALTITUDE_CONSTANT * pressure_altitude_ft)
    return base**PRESSURE_ALTITUDE_EXPONENT


def calculate_density_ratio(pressure_altitude_ft: float, oat_celsius: float) -> float:
    """Calculate air density ratio (sigma).

    sigma = (P / P0) × (T0 / T)

    Args:
        pressure_altitude_ft: Pressure altitude (ft)
        oat_celsius: Outside air temperature (°C), above absolute zero

    Returns:
        Density ratio rho / rho0
    """
    temp_k = oat_celsius + KELVIN_OFFSET
    sea_level_temp_k = SEA_LEVEL_TEMP_C + KELVIN_OFFSET
    return calculate_pressure_ratio(pressure_altitude_ft) * (sea_level_temp_k / temp_k)


def calculate_eas(tas_kts: float, sigma: float) -> float:
    """Calculate equivalent airspeed.

    EAS = TAS × sqrt(sigma)

    Args:
        tas_kts: True airspeed (kts)
        sigma: Air density ratio

    Returns:
        Equivalent airspeed (kts)
    """
    return tas_kts * math.sqrt(sigma)


def calculate_density_altitude_data(
    pressure_altitude_ft: float,
    oat_celsius: float,
    ias_kts: float,
    tas_kts: float,
) -> DensityAltitudeResult:
    """Calculate the complete density altitude picture.

    Args:
        pressure_altitude_ft: Pressure altitude (ft)
        oat_celsius: Outside air temperature (°C)
        ias_kts: Indicated airspeed (kts)
        tas_kts: True airspeed (kts)

    Returns:
        DensityAltitudeResult

    Examples:
        >>> da = calculate_density_altitude_data(0.0, 15.0, 100.0, 100.0)
        >>> round(da.air_density_ratio, 3)
        1.0
    """
    isa_temp = isa_temperature_c(pressure_altitude_ft)
    temperature_deviation = oat_celsius - isa_temp

    density_altitude = calculate_density_altitude(pressure_altitude_ft, oat_celsius)
    sigma = calculate_density_ratio(pressure_altitude_ft, oat_celsius)

    tas_to_ias = tas_kts / ias_kts if ias_kts > MIN_IAS_FOR_RATIO_KTS else 1.0

    logger.debug(
        "PA=%.0f ft, OAT=%.1f C (ISA %+.1f): DA=%.0f ft, sigma=%.4f",
        pressure_altitude_ft,
        oat_celsius,
        temperature_deviation,
        density_altitude,
        sigma,
    )

    return DensityAltitudeResult(
        density_altitude_ft=density_altitude,
        pressure_altitude_ft=pressure_altitude_ft,
        air_density_ratio=sigma,
        temperature_deviation_c=temperature_deviation,
        performance_loss_pct=(1.0 - sigma) * 100.0,
        eas_kts=calculate_eas(tas_kts, sigma),
        tas_to_ias_ratio=tas_to_ias,
        pressure_ratio=calculate_pressure_ratio(pressure_altitude_ft),
    )
