"""Display-only unit conversion.

The geometry pipeline works in millimeters throughout. These helpers exist
for presenting results to users who think in inches.
"""

from __future__ import annotations

from fractions import Fraction

MM_PER_INCH = 25.4


def mm_to_inches(mm: float) -> float:
    return mm / MM_PER_INCH


def inches_to_mm(inches: float) -> float:
    return inches * MM_PER_INCH


def format_as_inches(mm: float, denominator: int = 16) -> str:
    """Format a length as inches rounded to the nearest fraction.

    Examples:
        >>> format_as_inches(19.05)
        '3/4"'
        >>> format_as_inches(600)
        '23-5/8"'
    """
    inches = mm_to_inches(mm)
    sign = "-" if inches < 0 else ""
    ticks = round(abs(inches) * denominator)
    whole, remainder = divmod(ticks, denominator)
    if remainder == 0:
        return f'{sign}{whole}"'
    fraction = Fraction(remainder, denominator)
    if whole == 0:
        return f'{sign}{fraction.numerator}/{fraction.denominator}"'
    return f'{sign}{whole}-{fraction.numerator}/{fraction.denominator}"'
