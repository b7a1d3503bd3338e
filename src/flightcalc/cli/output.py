"""JSON rendering of calculator results.

Results are printed as one JSON object with two-space indentation. Floats
always carry exactly two decimals (so 3.0 prints as 3.00), which the json
module cannot do, so the text is assembled here. Infinite and NaN floats
have no JSON form and are refused.

Typical usage example:
    from flightcalc.cli.output import format_json

    print(format_json(calculate_wind(90.0, 85.0, 270.0, 15.0)))
"""

import dataclasses
import json
import math
from enum import IntEnum
from typing import Any

from flightcalc.calculators.envelope import AlternateAirports

INDENT = "  "


def to_record(result: Any) -> Any:
    """Convert a result dataclass into plain dicts, keeping field order.

    Alternate airport counts are flattened to
    "combinations_<n>_choose_<k>" keys followed by the note.

    Args:
        result: Dataclass instance, dict, or scalar

    Returns:
        Nested dicts and scalars ready for format_json
    """
    if isinstance(result, AlternateAirports):
        record: dict[str, Any] = {
            f"combinations_{n}_choose_{k}": count for (n, k), count in result.combinations
        }
        record["note"] = result.note
        return record

    if dataclasses.is_dataclass(result) and not isinstance(result, type):
        return {field.name: to_record(getattr(result, field.name)) for field in dataclasses.fields(result)}

    if isinstance(result, dict):
        return {key: to_record(value) for key, value in result.items()}

    return result


def format_scalar(value: Any) -> str:
    """Render one leaf value.

    Raises:
        TypeError: If the value has no JSON rendering here.
        ValueError: If the value is an infinite or NaN float.
    """
    # bool before int: True is an int
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, IntEnum):
        return str(int(value))
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"{value} is not a finite number")
        return f"{value:.2f}"
    if isinstance(value, str):
        return json.dumps(value)
    raise TypeError(f"Cannot render {type(value).__name__} as JSON")


def format_json(result: Any, level: int = 0) -> str:
    """Render a result as a JSON object with fixed two-decimal floats.

    Args:
        result: Result dataclass or dict
        level: Current nesting depth

    Returns:
        JSON text, without trailing newline

    Raises:
        ValueError: If a float in the result is infinite or NaN.

    Examples:
        >>> print(format_json({"radius_nm": 2.5, "is_descent": True}))
        {
          "radius_nm": 2.50,
          "is_descent": true
        }
    """
    record = to_record(result)
    if not isinstance(record, dict):
        return format_scalar(record)

    pad = INDENT * (level + 1)
    lines = []
    for key, value in record.items():
        if isinstance(value, dict):
            rendered = format_json(value, level + 1)
        else:
            try:
                rendered = format_scalar(value)
            except ValueError as e:
                raise ValueError(f"{key}: {e}") from None
        lines.append(f"{pad}{json.dumps(key)}: {rendered}")

    return "{\n" + ",\n".join(lines) + "\n" + INDENT * level + "}"
