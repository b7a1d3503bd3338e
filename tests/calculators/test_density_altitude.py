"""Tests for density altitude calculations."""

import pytest

from flightcalc.calculators.density_altitude import (
    calculate_density_altitude,
    calculate_density_altitude_data,
    calculate_density_ratio,
    calculate_pressure_ratio,
    isa_temperature_c,
)


class TestIsaTemperature:
    """Test the ISA temperature model."""

    def test_sea_level(self) -> None:
        """Test ISA is 15 C at sea level."""
        assert isa_temperature_c(0.0) == pytest.approx(15.0)

    def test_tropopause(self) -> None:
        """Test the standard lapse rate at 36000 ft."""
        assert isa_temperature_c(36000.0) == pytest.approx(-56.32, abs=0.01)


class TestDensityAltitudeData:
    """Test the full density altitude result."""

    def test_standard_sea_level(self) -> None:
        """Test ISA sea level gives unit ratios and zero density altitude."""
        da = calculate_density_altitude_data(0.0, 15.0, 120.0, 120.0)

        assert da.density_altitude_ft == pytest.approx(0.0, abs=1e-9)
        assert da.air_density_ratio == pytest.approx(1.0)
        assert da.pressure_ratio == pytest.approx(1.0)
        assert da.temperature_deviation_c == pytest.approx(0.0)
        assert da.performance_loss_pct == pytest.approx(0.0, abs=1e-9)
        assert da.eas_kts == pytest.approx(120.0)
        assert da.tas_to_ias_ratio == pytest.approx(1.0)

    def test_hot_day(self) -> None:
        """Test 5000 ft pressure altitude at 25 C."""
        da = calculate_density_altitude_data(5000.0, 25.0, 150.0, 170.0)

        assert da.pressure_altitude_ft == 5000.0
        assert da.temperature_deviation_c == pytest.approx(19.906, abs=1e-3)
        assert da.density_altitude_ft == pytest.approx(7388.7, abs=0.1)
        assert da.pressure_ratio == pytest.approx(0.832, abs=1e-3)
        assert da.air_density_ratio == pytest.approx(0.804, abs=1e-3)
        assert da.performance_loss_pct == pytest.approx((1.0 - da.air_density_ratio) * 100.0)
        assert da.eas_kts == pytest.approx(170.0 * da.air_density_ratio**0.5)
        assert da.tas_to_ias_ratio == pytest.approx(170.0 / 150.0)

    @pytest.mark.parametrize("ias", [0.0, 5.0, 10.0])
    def test_low_ias_ratio_defaults_to_one(self, ias: float) -> None:
        """Test the TAS/IAS ratio is 1 at or below 10 kts IAS."""
        assert calculate_density_altitude_data(5000.0, 25.0, ias, 170.0).tas_to_ias_ratio == 1.0

    def test_above_model_ceiling(self) -> None:
        """Test pressure ratio and density floor at zero above about 145000 ft."""
        da = calculate_density_altitude_data(150000.0, -50.0, 100.0, 300.0)

        assert da.pressure_ratio == 0.0
        assert da.air_density_ratio == 0.0
        assert da.eas_kts == 0.0
        assert da.performance_loss_pct == pytest.approx(100.0)


class TestProperties:
    """Test monotonic relationships."""

    @pytest.mark.parametrize("pa", [0.0, 5000.0, 10000.0])
    def test_hotter_is_higher(self, pa: float) -> None:
        """Test density altitude rises with temperature."""
        cold = calculate_density_altitude(pa, -10.0)
        hot = calculate_density_altitude(pa, 30.0)
        assert hot - cold == pytest.approx(120.0 * 40.0)

    def test_density_falls_with_altitude(self) -> None:
        """Test sigma decreases with pressure altitude at fixed OAT."""
        sigmas = [calculate_density_ratio(pa, 0.0) for pa in (0.0, 5000.0, 10000.0, 20000.0)]
        assert sigmas == sorted(sigmas, reverse=True)

    def test_density_falls_with_temperature(self) -> None:
        """Test sigma decreases as temperature rises."""
        assert calculate_density_ratio(5000.0, 30.0) < calculate_density_ratio(5000.0, 0.0)

    def test_pressure_ratio_in_unit_interval(self) -> None:
        """Test the pressure ratio stays within [0, 1] for non-negative altitude."""
        for pa in (0.0, 10000.0, 40000.0, 100000.0, 200000.0):
            assert 0.0 <= calculate_pressure_ratio(pa) <= 1.0
