"""Positional argument specs, numeric parsing and input validation.

Each calculator takes a fixed list of numeric positional arguments. This
module checks the count, parses each value in order (the first bad token
wins), and applies the calculator's domain rules. All failures are raised as
CalculatorError subclasses before any engine runs.

Typical usage example:
    from flightcalc.cli.arguments import TURN, parse_turn

    tas_kts, bank_deg, course_change_deg = parse_turn(["250", "25", "90"])
"""

import math
from dataclasses import dataclass

from flightcalc.calculators.envelope import FlightInputs
from flightcalc.core.config import ConfigLoader
from flightcalc.core.errors import ArgumentCountError, DomainValueError, ParseError, SimulatedError
from flightcalc.core.logging_system import get_logger

logger = get_logger(__name__)

ABSOLUTE_ZERO_C = -273.15
MAX_MAGNITUDE = 1.0e9  # Any argument, in its own unit


@dataclass(frozen=True)
class ArgumentSpec:
    """One positional argument.

    Attributes:
        name: Short name shown in usage (e.g. "tas_kts")
        description: Help text with units
        label: Name used in error messages (e.g. "TAS")
    """

    name: str
    description: str
    label: str


@dataclass(frozen=True)
class CalculatorSpec:
    """Command-line shape of one calculator.

    Attributes:
        command: Sub-command name
        summary: One-line description
        arguments: Required positional arguments, in order
        optional: Trailing optional positional arguments, in order
        example: Example argument list
        example_note: Plain-language reading of the example
    """

    command: str
    summary: str
    arguments: tuple[ArgumentSpec, ...]
    optional: tuple[ArgumentSpec, ...] = ()
    example: str = ""
    example_note: str = ""

    def usage(self, prog: str) -> str:
        """Build the usage text printed when the argument count is wrong.

        Args:
            prog: Program name to show

        Returns:
            Multi-line usage text
        """
        names = " ".join(f"<{arg.name}>" for arg in self.arguments)
        names += "".join(f" [{arg.name}]" for arg in self.optional)
        width = max(len(arg.name) for arg in self.arguments + self.optional)

        lines = [f"Usage: {prog} {self.command} {names}", "", "Arguments:"]
        for arg in self.arguments + self.optional:
            lines.append(f"  {arg.name:<{width}} : {arg.description}")
        if self.example:
            lines += ["", "Example:", f"  {prog} {self.command} {self.example}"]
            if self.example_note:
                lines.append(f"  ({self.example_note})")
        return "\n".join(lines)

    def check_count(self, values: list[str]) -> None:
        """Raise ArgumentCountError unless len(values) fits this spec."""
        minimum = len(self.arguments)
        maximum = minimum + len(self.optional)
        if not minimum <= len(values) <= maximum:
            if minimum == maximum:
                expected = f"{minimum}"
            else:
                expected = f"{minimum} to {maximum}"
            raise ArgumentCountError(f"{self.command} expects {expected} arguments, got {len(values)}")


def parse_float(token: str, label: str) -> float:
    """Parse a finite floating-point argument.

    Args:
        token: Raw command-line text
        label: Argument name for the error message

    Returns:
        Parsed value

    Raises:
        ParseError: If the token is not a number, or is nan/inf.
    """
    try:
        value = float(token)
    except ValueError:
        raise ParseError(f"Invalid {label}: {token!r}") from None

    if not math.isfinite(value):
        raise ParseError(f"Invalid {label}: {token!r} is not a finite number")

    return value


def parse_int(token: str, label: str) -> int:
    """Parse an integer argument.

    Args:
        token: Raw command-line text
        label: Argument name for the error message

    Returns:
        Parsed value

    Raises:
        ParseError: If the token is not an integer.
    """
    try:
        return int(token)
    except ValueError:
        raise ParseError(f"Invalid {label}: {token!r}") from None


def check_magnitude(value: float, label: str) -> None:
    """Reject values too large for the engines to keep results finite.

    Raises:
        DomainValueError: If |value| exceeds MAX_MAGNITUDE.
    """
    if abs(value) > MAX_MAGNITUDE:
        raise DomainValueError(f"{label} {value:g} is out of range (limit {MAX_MAGNITUDE:g})")


def _parse_all(spec: CalculatorSpec, values: list[str]) -> list[float]:
    parsed = [parse_float(token, arg.label) for token, arg in zip(values, spec.arguments)]
    # Only after every token parsed: a bad token outranks a bad magnitude
    for value, arg in zip(parsed, spec.arguments):
        check_magnitude(value, arg.label)
    return parsed


WIND = CalculatorSpec(
    command="wind",
    summary="Headwind, crosswind and drift from track, heading and wind",
    arguments=(
        ArgumentSpec("track", "Ground track (degrees true)", "track angle"),
        ArgumentSpec("heading", "Aircraft heading (degrees)", "heading"),
        ArgumentSpec("wind_dir", "Wind direction FROM (degrees)", "wind direction"),
        ArgumentSpec("wind_speed", "Wind speed (knots)", "wind speed"),
    ),
    example="90 85 270 15",
    example_note="Track 90°, Heading 85°, Wind from 270° at 15 knots",
)

TURN = CalculatorSpec(
    command="turn",
    summary="Turn radius, rate, lead distance and standard-rate bank",
    arguments=(
        ArgumentSpec("tas_kts", "True airspeed (knots)", "TAS"),
        ArgumentSpec("bank_deg", "Bank angle (degrees)", "bank angle"),
        ArgumentSpec("course_change_deg", "Course change (degrees)", "course change"),
    ),
    example="250 25 90",
    example_note="250 kts TAS, 25 deg bank, 90 deg turn",
)

VNAV = CalculatorSpec(
    command="vnav",
    summary="Descent/climb path angle, required VS and top of descent",
    arguments=(
        ArgumentSpec("current_alt_ft", "Current altitude (feet)", "current altitude"),
        ArgumentSpec("target_alt_ft", "Target altitude (feet)", "target altitude"),
        ArgumentSpec("distance_nm", "Distance to constraint (nautical miles)", "distance"),
        ArgumentSpec("groundspeed_kts", "Groundspeed (knots)", "groundspeed"),
        ArgumentSpec("current_vs_fpm", "Current vertical speed (feet per minute)", "vertical speed"),
    ),
    example="35000 10000 100 450 -1500",
    example_note="FL350 to 10000 ft, 100 NM, 450 kts GS, -1500 fpm",
)

DENSITY_ALTITUDE = CalculatorSpec(
    command="density-altitude",
    summary="Density altitude, density ratio, EAS and performance loss",
    arguments=(
        ArgumentSpec("pressure_alt_ft", "Pressure altitude (feet)", "pressure altitude"),
        ArgumentSpec("oat_celsius", "Outside air temperature (Celsius)", "temperature"),
        ArgumentSpec("ias_kts", "Indicated airspeed (knots)", "IAS"),
        ArgumentSpec("tas_kts", "True airspeed (knots)", "TAS"),
    ),
    optional=(ArgumentSpec("force_error", "Optional, 1 to simulate error (default: 0)", "force_error flag"),),
    example="5000 25 150 170",
    example_note="5000 ft PA, 25 Celsius OAT, 150 kts IAS, 170 kts TAS",
)

FLIGHT = CalculatorSpec(
    command="flight",
    summary="Wind vector, envelope margins, energy state and glide reach",
    arguments=(
        ArgumentSpec("tas_kts", "True airspeed (knots)", "TAS"),
        ArgumentSpec("gs_kts", "Ground speed (knots)", "groundspeed"),
        ArgumentSpec("heading", "Heading (deg)", "heading"),
        ArgumentSpec("track", "Ground track (deg)", "track"),
        ArgumentSpec("ias_kts", "Indicated airspeed (knots)", "IAS"),
        ArgumentSpec("mach", "Mach number", "Mach"),
        ArgumentSpec("altitude_ft", "Altitude (feet)", "altitude"),
        ArgumentSpec("agl_ft", "Above ground level (feet)", "height above ground"),
        ArgumentSpec("vs_fpm", "Vertical speed (feet/min)", "vertical speed"),
        ArgumentSpec("weight_kg", "Aircraft weight (kg)", "weight"),
        ArgumentSpec("bank_deg", "Bank angle (deg)", "bank angle"),
        ArgumentSpec("vso_kts", "Stall speed in landing config (knots IAS)", "stall speed"),
        ArgumentSpec("vne_kts", "Velocity never exceed (knots IAS)", "never-exceed speed"),
        ArgumentSpec("mmo", "Maximum operating Mach number", "maximum operating Mach"),
    ),
    example="250 245 90 95 220 0.65 35000 35000 -500 75000 5 120 250 0.82",
)

CALCULATORS: dict[str, CalculatorSpec] = {
    spec.command: spec for spec in (WIND, TURN, VNAV, DENSITY_ALTITUDE, FLIGHT)
}


def parse_wind(values: list[str]) -> tuple[float, float, float, float]:
    """Parse and validate wind calculator arguments.

    Returns:
        (track, heading, wind_dir, wind_speed)

    Raises:
        ArgumentCountError, ParseError, DomainValueError
    """
    WIND.check_count(values)
    track, heading, wind_dir, wind_speed = _parse_all(WIND, values)

    if wind_speed < 0.0:
        raise DomainValueError("Wind speed cannot be negative")

    return track, heading, wind_dir, wind_speed


def parse_turn(values: list[str]) -> tuple[float, float, float]:
    """Parse and validate turn calculator arguments.

    Returns:
        (tas_kts, bank_deg, course_change_deg)

    Raises:
        ArgumentCountError, ParseError, DomainValueError
    """
    TURN.check_count(values)
    tas_kts, bank_deg, course_change_deg = _parse_all(TURN, values)

    if tas_kts <= 0.0:
        raise DomainValueError("TAS must be positive")
    if bank_deg < 0.0 or bank_deg > 90.0:
        raise DomainValueError("Bank angle must be between 0 and 90 degrees")

    return tas_kts, bank_deg, course_change_deg


def parse_vnav(values: list[str]) -> tuple[float, float, float, float, float]:
    """Parse VNAV calculator arguments.

    No domain checks: the engine clamps distance and groundspeed itself.

    Returns:
        (current_alt_ft, target_alt_ft, distance_nm, groundspeed_kts, current_vs_fpm)

    Raises:
        ArgumentCountError, ParseError
    """
    VNAV.check_count(values)
    current_alt_ft, target_alt_ft, distance_nm, groundspeed_kts, current_vs_fpm = _parse_all(VNAV, values)
    return current_alt_ft, target_alt_ft, distance_nm, groundspeed_kts, current_vs_fpm


def parse_density_altitude(values: list[str], config: ConfigLoader) -> tuple[float, float, float, float]:
    """Parse and validate density altitude calculator arguments.

    The optional force_error flag is read before anything else; a value of 1
    fails the run deterministically. Out-of-range altitude or temperature
    only logs a warning.

    Args:
        values: Raw positional arguments
        config: Application settings (warning ranges)

    Returns:
        (pressure_alt_ft, oat_celsius, ias_kts, tas_kts)

    Raises:
        ArgumentCountError, ParseError, SimulatedError, DomainValueError
    """
    DENSITY_ALTITUDE.check_count(values)

    if len(values) == len(DENSITY_ALTITUDE.arguments) + 1:
        force_error = parse_int(values[-1], DENSITY_ALTITUDE.optional[0].label)
        if force_error == 1:
            raise SimulatedError("Simulated (forced) error")

    pressure_alt_ft, oat_celsius, ias_kts, tas_kts = _parse_all(DENSITY_ALTITUDE, values)

    if oat_celsius <= ABSOLUTE_ZERO_C:
        raise DomainValueError("Temperature must be above absolute zero")

    warn_range = "density_altitude.warning_range"
    min_alt = config.get_float(f"{warn_range}.min_altitude_ft", -2000.0)
    max_alt = config.get_float(f"{warn_range}.max_altitude_ft", 60000.0)
    min_temp = config.get_float(f"{warn_range}.min_temperature_c", -60.0)
    max_temp = config.get_float(f"{warn_range}.max_temperature_c", 60.0)

    if pressure_alt_ft < min_alt or pressure_alt_ft > max_alt:
        logger.warning(
            "Pressure altitude %.0f ft outside typical range (%.0f to %.0f ft)",
            pressure_alt_ft,
            min_alt,
            max_alt,
        )
    if oat_celsius < min_temp or oat_celsius > max_temp:
        logger.warning(
            "Temperature %.1f C outside typical range (%.0f to %.0f C)",
            oat_celsius,
            min_temp,
            max_temp,
        )

    return pressure_alt_ft, oat_celsius, ias_kts, tas_kts


def parse_flight(values: list[str]) -> FlightInputs:
    """Parse and validate the fourteen flight calculator arguments.

    Returns:
        FlightInputs

    Raises:
        ArgumentCountError, ParseError, DomainValueError
    """
    FLIGHT.check_count(values)
    inputs = FlightInputs(*_parse_all(FLIGHT, values))

    if inputs.tas_kts <= 0.0:
        raise DomainValueError("TAS must be positive")
    if abs(inputs.bank_deg) > 90.0:
        raise DomainValueError("Bank angle must be between -90 and 90 degrees")
    if inputs.vso_kts <= 0.0:
        raise DomainValueError("Stall speed must be positive")
    if inputs.vne_kts <= 0.0:
        raise DomainValueError("Never-exceed speed must be positive")
    if inputs.mmo <= 0.0:
        raise DomainValueError("Maximum operating Mach must be positive")

    return inputs


def parse_ias_samples(tokens: list[str]) -> list[float]:
    """Parse --ias history samples.

    Raises:
        ParseError: If a sample is not a finite number.
        DomainValueError: If a sample is not positive or is out of range.
    """
    samples = [parse_float(token, "IAS sample") for token in tokens]
    for sample in samples:
        check_magnitude(sample, "IAS sample")
        if sample <= 0.0:
            raise DomainValueError(f"IAS sample must be positive, got {sample}")
    return samples
