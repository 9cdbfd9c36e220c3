"""Render numeric results for the calculator display."""
import math

# Bounds of a signed 64-bit integer
INT64_MIN: int = -(2**63)
INT64_MAX: int = 2**63 - 1


def format_number(value: float) -> str:
    """
    Render a number as display text.

    Integral values that fit a signed 64-bit integer are shown without a fractional
    part (``4.0`` -> ``"4"``); everything else uses the shortest float repr
    (``4.5`` -> ``"4.5"``).

    :param float value: Number to render

    :return: Display text
    :rtype: str
    """
    if math.isfinite(value):
        truncated = int(value)
        if INT64_MIN <= truncated <= INT64_MAX and truncated == value:
            return str(truncated)
    return str(value)
