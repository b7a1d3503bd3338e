"""Error taxonomy for calculator invocations.

Each failure class maps to a distinct process exit status. Errors are raised
only while reading and validating arguments; the calculation engines are
total functions and never raise.

Typical usage example:
    from flightcalc.core.errors import CalculatorError, ReturnCode

    try:
        values = parse_turn(argv)
    except CalculatorError as e:
        return int(e.return_code)
"""

from enum import IntEnum


class ReturnCode(IntEnum):
    """Process exit status for a calculator run.

    Attributes:
        SUCCESS: Calculation ran and printed its result.
        INVALID_ARGC: Too few or too many arguments.
        PARSE_FAILED: An argument is not a number of the required type.
        INVALID_VALUE: An argument is outside the acceptable range.
        SIMULATED: Failure forced by the force_error flag.
    """

    SUCCESS = 0
    INVALID_ARGC = 1
    PARSE_FAILED = 2
    INVALID_VALUE = 3
    SIMULATED = 4


class CalculatorError(Exception):
    """Base class for failures detected before a calculation runs."""

    return_code = ReturnCode.INVALID_VALUE


class ArgumentCountError(CalculatorError):
    """Raised when the number of positional arguments is wrong."""

    return_code = ReturnCode.INVALID_ARGC


class ParseError(CalculatorError):
    """Raised when an argument cannot be read as the required number type."""

    return_code = ReturnCode.PARSE_FAILED


class DomainValueError(CalculatorError):
    """Raised when a parsed value is outside a calculator's domain."""

    return_code = ReturnCode.INVALID_VALUE


class SimulatedError(CalculatorError):
    """Raised when the caller explicitly asks for a forced failure."""

    return_code = ReturnCode.SIMULATED
