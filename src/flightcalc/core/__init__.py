"""Core infrastructure: configuration, logging and the error taxonomy."""

from flightcalc.core.config import ConfigError, ConfigLoader
from flightcalc.core.errors import (
    ArgumentCountError,
    CalculatorError,
    DomainValueError,
    ParseError,
    ReturnCode,
    SimulatedError,
)

__all__ = [
    "ArgumentCountError",
    "CalculatorError",
    "ConfigError",
    "ConfigLoader",
    "DomainValueError",
    "ParseError",
    "ReturnCode",
    "SimulatedError",
]
