"""Flight performance calculation engines.

This package provides closed-form aeronautical calculations:
- Wind triangle components (headwind, crosswind, drift)
- Turn performance (radius, rate, lead distance, standard-rate bank)
- VNAV geometry (path angle, required VS, top of descent)
- Density altitude and air density ratio
- Flight envelope margins, energy state, glide reach and gust factor

Every engine is a total function over validated inputs: singular cases
saturate to documented sentinels or clamped minimums instead of raising.
"""

from flightcalc.calculators.combinatorics import binomial_coefficient
from flightcalc.calculators.density_altitude import DensityAltitudeResult, calculate_density_altitude_data
from flightcalc.calculators.envelope import (
    EnergyState,
    EnvelopeMargins,
    FlightInputs,
    FlightPerformanceCalculator,
    FlightSolution,
    GlideEstimate,
    Trend,
    WindVector,
)
from flightcalc.calculators.history import BoundedHistory
from flightcalc.calculators.turn import TurnPerformance, calculate_turn_performance
from flightcalc.calculators.vnav import VnavSolution, calculate_vnav
from flightcalc.calculators.wind import WindComponents, calculate_wind

__all__ = [
    "BoundedHistory",
    "DensityAltitudeResult",
    "EnergyState",
    "EnvelopeMargins",
    "FlightInputs",
    "FlightPerformanceCalculator",
    "FlightSolution",
    "GlideEstimate",
    "Trend",
    "TurnPerformance",
    "VnavSolution",
    "WindComponents",
    "WindVector",
    "binomial_coefficient",
    "calculate_density_altitude_data",
    "calculate_turn_performance",
    "calculate_vnav",
    "calculate_wind",
]
