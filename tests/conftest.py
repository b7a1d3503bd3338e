"""Pytest configuration and fixtures for all tests."""

import pytest

from flightcalc.core.logging_system import shutdown_logging


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop root handlers configured by a test.

    The CLI reconfigures logging on every run; without this, handlers bound
    to one test's captured stderr would leak into the next test.
    """
    yield
    shutdown_logging()


@pytest.fixture
def flight_args() -> list[str]:
    """The reference airliner cruise state for the flight calculator."""
    return "250 245 90 95 220 0.65 35000 35000 -500 75000 5 120 250 0.82".split()
