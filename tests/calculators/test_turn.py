"""Tests for turn performance."""

import math

import pytest

from flightcalc.calculators.turn import (
    INFINITE_RADIUS_FT,
    INFINITE_RADIUS_NM,
    INFINITE_TIME_SEC,
    calculate_load_factor,
    calculate_standard_rate_bank,
    calculate_turn_performance,
)


class TestLoadFactor:
    """Test load factor from bank angle."""

    def test_wings_level(self) -> None:
        """Test level flight is 1 G."""
        assert calculate_load_factor(0.0) == pytest.approx(1.0)

    def test_sixty_degrees(self) -> None:
        """Test 60 degrees of bank is 2 G."""
        assert calculate_load_factor(60.0) == pytest.approx(2.0)


class TestStandardRateBank:
    """Test the bank for a 3 deg/s turn."""

    def test_increases_with_speed(self) -> None:
        """Test faster aircraft need more bank."""
        assert calculate_standard_rate_bank(100.0) < calculate_standard_rate_bank(250.0)

    def test_rule_of_thumb(self) -> None:
        """Test the 15% of TAS rule of thumb at 100 kts."""
        assert calculate_standard_rate_bank(100.0) == pytest.approx(15.0, abs=0.5)


class TestTurnPerformance:
    """Test coordinated turn geometry."""

    def test_reference_case(self) -> None:
        """Test 250 kts, 25 deg bank, 90 deg course change."""
        turn = calculate_turn_performance(250.0, 25.0, 90.0)

        assert turn.load_factor == pytest.approx(1.1034, abs=1e-3)
        assert turn.turn_rate_dps == pytest.approx(2.04, abs=0.01)
        assert turn.radius_nm == pytest.approx(1.95, abs=0.01)
        assert turn.radius_ft == pytest.approx(turn.radius_nm * 1852.0 * 3.28084)
        # tan(45 deg) = 1
        assert turn.lead_distance_nm == pytest.approx(turn.radius_nm)
        assert turn.time_to_turn_sec == pytest.approx(90.0 / turn.turn_rate_dps)

    def test_rate_matches_formula(self) -> None:
        """Test turn rate is g tan(bank) / V."""
        turn = calculate_turn_performance(180.0, 30.0, 45.0)
        v_ms = 180.0 * 0.514444
        expected = math.degrees(9.80665 * math.tan(math.radians(30.0)) / v_ms)
        assert turn.turn_rate_dps == pytest.approx(expected)

    @pytest.mark.parametrize("bank", [10.0, 20.0, 30.0, 45.0, 60.0])
    def test_radius_increases_with_speed(self, bank: float) -> None:
        """Test radius grows with TAS at fixed bank."""
        slow = calculate_turn_performance(120.0, bank, 90.0)
        fast = calculate_turn_performance(240.0, bank, 90.0)
        assert fast.radius_nm > slow.radius_nm
        assert fast.radius_nm == pytest.approx(4.0 * slow.radius_nm)

    def test_radius_decreases_with_bank(self) -> None:
        """Test radius shrinks as bank increases."""
        radii = [calculate_turn_performance(200.0, bank, 90.0).radius_nm for bank in (10.0, 20.0, 30.0, 45.0)]
        assert radii == sorted(radii, reverse=True)

    def test_wings_level_sentinels(self) -> None:
        """Test zero bank saturates to the sentinel values."""
        turn = calculate_turn_performance(250.0, 0.0, 90.0)

        assert turn.radius_nm == INFINITE_RADIUS_NM
        assert turn.radius_ft == INFINITE_RADIUS_FT
        assert turn.turn_rate_dps == 0.0
        assert turn.lead_distance_nm == 0.0
        assert turn.lead_distance_ft == 0.0
        assert turn.time_to_turn_sec == INFINITE_TIME_SEC
        assert turn.load_factor == pytest.approx(1.0)

    def test_near_level_uses_sentinels(self) -> None:
        """Test a bank whose tangent is below the threshold is treated as level."""
        turn = calculate_turn_performance(250.0, 0.05, 90.0)
        assert turn.radius_nm == INFINITE_RADIUS_NM

    def test_standard_rate_bank_independent_of_bank(self) -> None:
        """Test the standard-rate bank only depends on TAS."""
        a = calculate_turn_performance(150.0, 10.0, 90.0)
        b = calculate_turn_performance(150.0, 40.0, 30.0)
        assert a.standard_rate_bank == pytest.approx(b.standard_rate_bank)

    def test_standard_rate_turn_rate(self) -> None:
        """Test flying the standard-rate bank gives 3 deg/s."""
        bank = calculate_standard_rate_bank(160.0)
        assert calculate_turn_performance(160.0, bank, 90.0).turn_rate_dps == pytest.approx(3.0)

    def test_zero_course_change(self) -> None:
        """Test no course change needs no lead and no time."""
        turn = calculate_turn_performance(200.0, 25.0, 0.0)
        assert turn.lead_distance_nm == pytest.approx(0.0)
        assert turn.time_to_turn_sec == pytest.approx(0.0)
