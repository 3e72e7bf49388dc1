"""
Input validation for both calculators.
Validators take raw field strings and return a mapping of field name -> message.
An empty mapping means the inputs are valid.
"""
import re

from dual_calculator.projects.calculators.core.constants import (
    HEIGHT_INVALID_MESSAGE,
    HEIGHT_RANGES,
    OPERAND_MAX,
    OPERAND_MIN,
    OPERAND_RANGE_MESSAGE,
    WEIGHT_MAX,
    WEIGHT_MIN,
    WEIGHT_RANGE_MESSAGE,
)

# Plain ASCII decimal notation only: no nan/inf, no digit separators, no non-Latin digits
_NUMBER_RE = re.compile(r"^[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?$")


def parse_number(raw: str | None) -> float | None:
    """Parse a raw field value; returns None if empty or not a number."""
    if raw is None:
        return None
    s = str(raw).strip()
    if not s or not _NUMBER_RE.match(s):
        return None
    return float(s)


def in_range(value: float | None, minimum, maximum) -> bool:
    """Closed-interval check. None is never in range."""
    return value is not None and minimum <= value <= maximum


def validate_operands(first: str, second: str) -> dict[str, str]:
    """Validate the two basic calculator operands independently."""
    errors = {}
    if not in_range(parse_number(first), OPERAND_MIN, OPERAND_MAX):
        errors["first"] = OPERAND_RANGE_MESSAGE
    if not in_range(parse_number(second), OPERAND_MIN, OPERAND_MAX):
        errors["second"] = OPERAND_RANGE_MESSAGE
    return errors


def validate_body_measurements(weight: str, height: str, unit: str) -> dict[str, str]:
    """
    Validate BMI inputs. The height range depends on the unit.
    Raises ValueError for an unknown unit.
    """
    if unit not in HEIGHT_RANGES:
        raise ValueError(f"Unknown height unit: {unit!r}")

    errors = {}
    if not in_range(parse_number(weight), WEIGHT_MIN, WEIGHT_MAX):
        errors["weight"] = WEIGHT_RANGE_MESSAGE

    height_value = parse_number(height)
    minimum, maximum, message = HEIGHT_RANGES[unit]
    if height_value is None:
        errors["height"] = HEIGHT_INVALID_MESSAGE
    elif not in_range(height_value, minimum, maximum):
        errors["height"] = message
    return errors
