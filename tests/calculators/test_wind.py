"""Tests for wind triangle components."""

import math

import pytest

from flightcalc.calculators.wind import calculate_wind


class TestWindComponents:
    """Test headwind, crosswind and drift."""

    def test_reference_case(self) -> None:
        """Test track 90, heading 85, wind from 270 at 15 kts."""
        wind = calculate_wind(90.0, 85.0, 270.0, 15.0)

        assert wind.headwind == pytest.approx(15.0)
        assert wind.crosswind == pytest.approx(0.0, abs=1e-9)
        assert wind.total_wind == 15.0
        assert wind.drift == pytest.approx(5.0)
        assert wind.wca == 0.0

    def test_wind_along_track(self) -> None:
        """Test wind from the track direction gives the opposite sign."""
        wind = calculate_wind(90.0, 90.0, 90.0, 15.0)
        assert wind.headwind == pytest.approx(-15.0)
        assert wind.crosswind == pytest.approx(0.0, abs=1e-9)

    @pytest.mark.parametrize("wind_dir,expected", [(180.0, 15.0), (0.0, -15.0)])
    def test_crosswind_sign(self, wind_dir: float, expected: float) -> None:
        """Test a beam wind is pure crosswind with the relative-angle sign."""
        wind = calculate_wind(90.0, 90.0, wind_dir, 15.0)
        assert wind.crosswind == pytest.approx(expected)
        assert wind.headwind == pytest.approx(0.0, abs=1e-9)

    @pytest.mark.parametrize("wind_dir", [0.0, 37.0, 135.0, 222.5, 300.0, 359.9])
    def test_components_preserve_speed(self, wind_dir: float) -> None:
        """Test the components always recombine to the wind speed."""
        wind = calculate_wind(47.0, 40.0, wind_dir, 22.0)
        assert math.hypot(wind.headwind, wind.crosswind) == pytest.approx(22.0)

    def test_zero_wind(self) -> None:
        """Test calm wind gives zero components."""
        wind = calculate_wind(10.0, 20.0, 200.0, 0.0)
        assert wind.headwind == pytest.approx(0.0, abs=1e-12)
        assert wind.crosswind == pytest.approx(0.0, abs=1e-12)
        assert wind.total_wind == 0.0

    @pytest.mark.parametrize(
        "track,heading,expected",
        [
            (90.0, 85.0, 5.0),
            (85.0, 90.0, -5.0),
            (5.0, 355.0, 10.0),
            (355.0, 5.0, -10.0),
            (10.0, 190.0, 180.0),
        ],
    )
    def test_drift_signed_across_north(self, track: float, heading: float, expected: float) -> None:
        """Test drift is wrapped into (-180, 180]."""
        assert calculate_wind(track, heading, 0.0, 0.0).drift == pytest.approx(expected)

    def test_unnormalized_inputs(self) -> None:
        """Test angles outside [0, 360) behave like their wrapped values."""
        wrapped = calculate_wind(90.0, 85.0, 270.0, 15.0)
        raw = calculate_wind(450.0, -275.0, -90.0, 15.0)
        assert raw.headwind == pytest.approx(wrapped.headwind)
        assert raw.drift == pytest.approx(wrapped.drift)
