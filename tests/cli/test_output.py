"""Tests for JSON rendering."""

import json

import pytest

from flightcalc.calculators.envelope import AlternateAirports, Trend
from flightcalc.calculators.vnav import calculate_vnav
from flightcalc.calculators.wind import calculate_wind
from flightcalc.cli.output import format_json, format_scalar, to_record


class TestFormatScalar:
    """Test leaf value rendering."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (3.0, "3.00"),
            (2.0 / 3.0, "0.67"),
            (-1875.04, "-1875.04"),
            (True, "true"),
            (False, "false"),
            (120, "120"),
            (Trend.DECREASING, "-1"),
            ('say "hi"', '"say \\"hi\\""'),
        ],
    )
    def test_values(self, value: object, expected: str) -> None:
        """Test each supported type."""
        assert format_scalar(value) == expected

    def test_unsupported(self) -> None:
        """Test unknown types raise TypeError."""
        with pytest.raises(TypeError):
            format_scalar(None)

    @pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_refused(self, value: float) -> None:
        """Test infinite and NaN floats are never rendered as bare tokens."""
        with pytest.raises(ValueError, match="not a finite number"):
            format_scalar(value)


class TestFormatJson:
    """Test whole-document rendering."""

    def test_flat_record_layout(self) -> None:
        """Test exact text for a flat result."""
        text = format_json(calculate_wind(90.0, 85.0, 270.0, 15.0))
        lines = text.splitlines()

        assert lines[0] == "{"
        assert lines[1] == '  "headwind": 15.00,'
        assert lines[-2] == '  "drift": 5.00'
        assert lines[-1] == "}"

    def test_key_order_follows_fields(self) -> None:
        """Test keys appear in dataclass field order."""
        parsed = json.loads(format_json(calculate_wind(90.0, 85.0, 270.0, 15.0)))
        assert list(parsed) == ["headwind", "crosswind", "total_wind", "wca", "drift"]

    def test_boolean_field(self) -> None:
        """Test booleans render as JSON literals."""
        parsed = json.loads(format_json(calculate_vnav(35000, 10000, 100, 450, -1500)))
        assert parsed["is_descent"] is True

    def test_nested(self) -> None:
        """Test nested dicts are indented one more level."""
        text = format_json({"outer": {"inner": 1.5}, "n": 2})
        assert text == '{\n  "outer": {\n    "inner": 1.50\n  },\n  "n": 2\n}'
        assert json.loads(text) == {"outer": {"inner": 1.5}, "n": 2}

    def test_non_finite_field_named(self) -> None:
        """Test the error names the field that overflowed."""
        with pytest.raises(ValueError, match="radius_nm"):
            format_json({"turn": {"radius_nm": float("inf")}})


class TestToRecord:
    """Test dataclass flattening."""

    def test_alternate_airports_keys(self) -> None:
        """Test alternate counts become combinations_<n>_choose_<k> keys."""
        record = to_record(AlternateAirports(combinations=(((5, 2), 10), ((10, 3), 120))))
        assert list(record) == ["combinations_5_choose_2", "combinations_10_choose_3", "note"]
        assert record["combinations_10_choose_3"] == 120
