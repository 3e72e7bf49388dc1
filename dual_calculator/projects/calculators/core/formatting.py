"""
Number display helpers.
"""
import math
from decimal import Decimal


def format_number(value: float) -> str:
    """
    Render a float the way a browser prints a number: shortest round-trip
    digits, no trailing '.0', exponent notation below 1e-6 and from 1e21 up.

    >>> format_number(7.0)
    '7'
    >>> format_number(0.1 + 0.2)
    '0.30000000000000004'
    >>> format_number(1e21)
    '1e+21'
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    digits = Decimal(repr(value))
    if 1e-6 <= abs(value) < 1e21:
        text = format(digits, "f")
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return text

    text = format(digits.normalize(), "e")
    mantissa, exponent = text.split("e")
    if not exponent.startswith("-") and not exponent.startswith("+"):
        exponent = "+" + exponent
    return f"{mantissa}e{exponent}"
