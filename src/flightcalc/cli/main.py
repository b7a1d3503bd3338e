"""FlightCalc command-line entry point.

Runs one calculator per invocation and prints its result as JSON on stdout.
Diagnostics go to stderr through the logging system; the exit status tells
which stage failed (see ReturnCode).

Examples:
    flightcalc wind 90 85 270 15
    flightcalc turn 250 25 90
    flightcalc vnav 35000 10000 100 450 -1500
    flightcalc density-altitude 5000 25 150 170
    flightcalc flight 250 245 90 95 220 0.65 35000 35000 -500 75000 5 120 250 0.82
"""

import argparse
import re
import sys
from collections.abc import Callable
from typing import Any

from flightcalc.calculators.density_altitude import calculate_density_altitude_data
from flightcalc.calculators.envelope import FlightPerformanceCalculator
from flightcalc.calculators.history import BoundedHistory
from flightcalc.calculators.turn import calculate_turn_performance
from flightcalc.calculators.vnav import calculate_vnav
from flightcalc.calculators.wind import calculate_wind
from flightcalc.cli.arguments import (
    CALCULATORS,
    parse_density_altitude,
    parse_flight,
    parse_ias_samples,
    parse_turn,
    parse_vnav,
    parse_wind,
)
from flightcalc.cli.output import format_json
from flightcalc.core.config import ConfigError, ConfigLoader
from flightcalc.core.errors import ArgumentCountError, CalculatorError, ReturnCode, SimulatedError
from flightcalc.core.logging_system import LoggingError, get_logger, initialize_logging

logger = get_logger(__name__)

PROG = "flightcalc"

# "-x..." but not "--x..."
SINGLE_DASH_TOKEN = re.compile(r"^-[^-]")


class CalculatorArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting with status 2.

    Exit status 2 is reserved for unparseable numbers, so argparse usage
    errors are reported as ArgumentCountError (exit 1). Single-dash tokens
    that are not registered options (e.g. "-1e3", "-1500.") are kept as
    positional values; the calculator's own parsing decides whether they
    are numbers.
    """

    def error(self, message: str) -> None:  # type: ignore[override]
        raise ArgumentCountError(message)

    def _parse_optional(self, arg_string):
        if SINGLE_DASH_TOKEN.match(arg_string) and arg_string[:2] not in self._option_string_actions:
            return None
        return super()._parse_optional(arg_string)


def build_parser() -> CalculatorArgumentParser:
    """Build the top-level parser with one sub-command per calculator.

    Returns:
        Configured parser
    """
    parser = CalculatorArgumentParser(
        prog=PROG,
        description="FlightCalc - closed-form flight performance calculators",
    )

    parser.add_argument(
        "--config",
        type=str,
        help="YAML settings file merged over the built-in defaults",
    )

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug details to stderr",
    )
    verbosity.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only log errors to stderr",
    )

    subparsers = parser.add_subparsers(dest="calculator", metavar="CALCULATOR", required=True)

    for spec in CALCULATORS.values():
        sub = subparsers.add_parser(
            spec.command,
            help=spec.summary,
            description=spec.summary,
            epilog=f"Example: {PROG} {spec.command} {spec.example}",
        )
        sub.add_argument(
            "values",
            nargs="*",
            metavar=" ".join(arg.name for arg in spec.arguments + spec.optional),
            help="Numeric arguments",
        )
        if spec.command == "flight":
            sub.add_argument(
                "--ias",
                action="append",
                default=[],
                metavar="SAMPLE",
                help="Recent IAS sample in knots (repeat; oldest first)",
            )

    return parser


def load_settings(config_path: str | None) -> ConfigLoader:
    """Built-in settings, with the user's file merged over them.

    Raises:
        ConfigError: If the user's file cannot be loaded.
    """
    settings = ConfigLoader.defaults()
    if config_path:
        settings.merge(ConfigLoader.load(config_path))
    return settings


def setup_logging(settings: ConfigLoader, verbose: bool = False, quiet: bool = False) -> None:
    """Reconfigure logging from the settings "logging" section and CLI flags."""
    overrides = settings.get_section("logging")
    if verbose:
        overrides = {**overrides, "console": {**overrides.get("console", {}), "level": "DEBUG"}}
    elif quiet:
        overrides = {**overrides, "console": {**overrides.get("console", {}), "level": "ERROR"}}

    initialize_logging(overrides=overrides, use_platform_dir="log_dir" not in overrides)


def build_history(tokens: list[str], settings: ConfigLoader) -> BoundedHistory:
    """Fill the IAS history from --ias samples or the synthetic feed.

    Args:
        tokens: Raw --ias values, oldest first
        settings: Application settings (synthetic feed parameters)

    Returns:
        BoundedHistory holding the most recent samples
    """
    history = BoundedHistory()

    if tokens:
        for sample in parse_ias_samples(tokens):
            history.add_reading(sample)
        logger.debug("IAS history from %d --ias samples", len(tokens))
        return history

    count = int(settings.get_float("flight.synthetic_history.count", 30))
    base_kts = settings.get_float("flight.synthetic_history.base_kts", 150.0)
    period = int(settings.get_float("flight.synthetic_history.period", 7))
    offset_kts = settings.get_float("flight.synthetic_history.offset_kts", 3.0)
    if period <= 0:
        raise ConfigError(f"flight.synthetic_history.period must be positive, got {period}")

    for i in range(count):
        history.add_reading(base_kts + float(i % period) - offset_kts)

    logger.debug("IAS history from %d synthetic samples", count)
    return history


def run_wind(args: argparse.Namespace, settings: ConfigLoader) -> Any:
    return calculate_wind(*parse_wind(args.values))


def run_turn(args: argparse.Namespace, settings: ConfigLoader) -> Any:
    return calculate_turn_performance(*parse_turn(args.values))


def run_vnav(args: argparse.Namespace, settings: ConfigLoader) -> Any:
    return calculate_vnav(*parse_vnav(args.values))


def run_density_altitude(args: argparse.Namespace, settings: ConfigLoader) -> Any:
    return calculate_density_altitude_data(*parse_density_altitude(args.values, settings))


def run_flight(args: argparse.Namespace, settings: ConfigLoader) -> Any:
    inputs = parse_flight(args.values)
    history = build_history(args.ias, settings)
    calculator = FlightPerformanceCalculator(settings.get_section("flight"))
    return calculator.calculate(inputs, history)


RUNNERS: dict[str, Callable[[argparse.Namespace, ConfigLoader], Any]] = {
    "wind": run_wind,
    "turn": run_turn,
    "vnav": run_vnav,
    "density-altitude": run_density_altitude,
    "flight": run_flight,
}


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Args:
        argv: Command-line arguments without the program name
            (sys.argv[1:] when None).

    Returns:
        Exit code (ReturnCode value).
    """
    # Defaults until the settings file and verbosity flags are known
    initialize_logging()
    parser = build_parser()

    try:
        args = parser.parse_args(argv)
    except ArgumentCountError as e:
        logger.error("%s", e)
        print(parser.format_usage(), end="", file=sys.stderr)
        return int(ReturnCode.INVALID_ARGC)

    try:
        settings = load_settings(args.config)
        setup_logging(settings, verbose=args.verbose, quiet=args.quiet)
    except (ConfigError, LoggingError) as e:
        logger.error("%s", e)
        return int(ReturnCode.INVALID_VALUE)

    spec = CALCULATORS[args.calculator]
    logger.debug("Running %s with %s", spec.command, args.values)

    try:
        result = RUNNERS[spec.command](args, settings)
    except CalculatorError as e:
        logger.error("%s", e)
        if isinstance(e, (ArgumentCountError, SimulatedError)):
            print(spec.usage(PROG), file=sys.stderr)
        return int(e.return_code)
    except ConfigError as e:
        logger.error("%s", e)
        return int(ReturnCode.INVALID_VALUE)
    except Exception as e:  # pylint: disable=broad-exception-caught
        logger.exception("Fatal error: %s", e)
        return int(ReturnCode.INVALID_ARGC)

    try:
        text = format_json(result)
    except ValueError as e:
        # Inputs in range can still overflow an engine (e.g. a near-zero stall speed)
        logger.error("Result cannot be represented: %s", e)
        return int(ReturnCode.INVALID_VALUE)

    print(text)
    return int(ReturnCode.SUCCESS)


if __name__ == "__main__":
    sys.exit(main())
