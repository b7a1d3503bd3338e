"""Tests for VNAV geometry."""

import math

import pytest

from flightcalc.calculators.vnav import INFINITE_TIME_MIN, calculate_vnav


class TestDescent:
    """Test a typical descent to a constraint."""

    @pytest.fixture
    def vnav(self):
        """FL350 to 10000 ft over 100 NM at 450 kts, descending at 1500 fpm."""
        return calculate_vnav(35000.0, 10000.0, 100.0, 450.0, -1500.0)

    def test_altitude_to_lose(self, vnav) -> None:
        """Test the altitude to lose is current minus target."""
        assert vnav.altitude_to_lose_ft == pytest.approx(25000.0)
        assert vnav.is_descent is True

    def test_flight_path_angle(self, vnav) -> None:
        """Test the path angle is negative and about 2.36 degrees."""
        assert vnav.flight_path_angle_deg == pytest.approx(-2.356, abs=1e-3)

    def test_required_vs(self, vnav) -> None:
        """Test the VS required to make the constraint."""
        assert vnav.required_vs_fpm == pytest.approx(-1875.0, abs=1.0)

    def test_top_of_descent(self, vnav) -> None:
        """Test TOD distance on the 3 degree reference path."""
        assert vnav.tod_distance_nm == pytest.approx(78.51, abs=0.01)

    def test_vs_for_3deg_positive_when_descending(self, vnav) -> None:
        """Test the 3 degree VS is reported as a positive rate."""
        assert vnav.vs_for_3deg == pytest.approx(2388.3, abs=0.5)

    def test_time_and_spacing(self, vnav) -> None:
        """Test time to constraint and miles per thousand feet."""
        assert vnav.time_to_constraint_min == pytest.approx(25000.0 / 1500.0)
        assert vnav.distance_per_1000ft == pytest.approx(4.0)


class TestClimb:
    """Test climb geometry."""

    def test_climb_signs(self) -> None:
        """Test a climb flips the descent sign conventions."""
        vnav = calculate_vnav(5000.0, 10000.0, 20.0, 200.0, 1000.0)

        assert vnav.is_descent is False
        assert vnav.altitude_to_lose_ft == pytest.approx(-5000.0)
        assert vnav.flight_path_angle_deg > 0.0
        assert vnav.required_vs_fpm > 0.0
        assert vnav.vs_for_3deg < 0.0
        assert vnav.time_to_constraint_min == pytest.approx(5.0)


class TestEdgeCases:
    """Test clamping and sentinels."""

    def test_level_segment(self) -> None:
        """Test no altitude change gives a flat path."""
        vnav = calculate_vnav(10000.0, 10000.0, 30.0, 250.0, 0.0)

        assert vnav.is_descent is False
        assert vnav.flight_path_angle_deg == pytest.approx(0.0)
        assert vnav.required_vs_fpm == pytest.approx(0.0)
        assert vnav.tod_distance_nm == pytest.approx(0.0)
        assert vnav.distance_per_1000ft == 0.0
        assert vnav.time_to_constraint_min == INFINITE_TIME_MIN

    @pytest.mark.parametrize("vs", [0.0, 0.5, -1.0])
    def test_small_vs_time_sentinel(self, vs: float) -> None:
        """Test vertical speeds of 1 fpm or less give the time sentinel."""
        assert calculate_vnav(10000.0, 5000.0, 30.0, 250.0, vs).time_to_constraint_min == INFINITE_TIME_MIN

    def test_zero_distance_and_groundspeed_clamped(self) -> None:
        """Test zero distance and groundspeed use the clamped minimums."""
        clamped = calculate_vnav(10000.0, 9000.0, 0.0, 0.0, -500.0)
        minimums = calculate_vnav(10000.0, 9000.0, 0.01, 1.0, -500.0)

        assert clamped == minimums
        assert math.isfinite(clamped.flight_path_angle_deg)
        assert math.isfinite(clamped.required_vs_fpm)

    def test_negative_distance_clamped(self) -> None:
        """Test a negative distance is treated as the minimum distance."""
        assert calculate_vnav(10000.0, 9000.0, -5.0, 200.0, -500.0) == calculate_vnav(
            10000.0, 9000.0, 0.01, 200.0, -500.0
        )


class TestProperties:
    """Test monotonic relationships."""

    def test_tod_independent_of_distance(self) -> None:
        """Test TOD only depends on the altitude change."""
        near = calculate_vnav(20000.0, 5000.0, 20.0, 300.0, -1000.0)
        far = calculate_vnav(20000.0, 5000.0, 200.0, 300.0, -1000.0)
        assert near.tod_distance_nm == pytest.approx(far.tod_distance_nm)

    def test_steeper_when_closer(self) -> None:
        """Test the path angle steepens as distance shrinks."""
        angles = [calculate_vnav(20000.0, 5000.0, d, 300.0, -1000.0).flight_path_angle_deg for d in (200.0, 100.0, 50.0)]
        assert angles == sorted(angles, reverse=True)

    def test_required_vs_scales_with_groundspeed(self) -> None:
        """Test required VS is proportional to groundspeed."""
        slow = calculate_vnav(20000.0, 5000.0, 60.0, 200.0, -1000.0)
        fast = calculate_vnav(20000.0, 5000.0, 60.0, 400.0, -1000.0)
        assert fast.required_vs_fpm == pytest.approx(2.0 * slow.required_vs_fpm)
