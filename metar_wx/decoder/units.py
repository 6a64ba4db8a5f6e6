"""Unit conversions used by the METAR decoder.

All converters are plain functions. Rounding is half away from zero, which is
what aviation tables (and most people) expect: 2.5 -> 3, -2.5 -> -3. Python's
built-in ``round`` rounds half to even and would disagree on exact halves.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

Number = Union[int, float]

# Speed factors to miles per hour
KNOTS_TO_MPH = 1.1508
MPS_TO_MPH = 2.23694
KMH_TO_MPH = 0.621371

_SPEED_FACTORS = {
    'KT': KNOTS_TO_MPH,
    'MPS': MPS_TO_MPH,
    'KMH': KMH_TO_MPH,
}

# Divisor applied to 4-digit meter visibility groups
_METERS_DIVISOR = 621.4

# inches of mercury per hectopascal
INHG_PER_HPA = 0.02953


def round_half_away(value: Number, ndigits: int = 0) -> float:
    """
    Round to ``ndigits`` decimals, halves away from zero.

    Args:
        value: Number to round
        ndigits: Number of decimals to keep

    Returns:
        Rounded value as float
    """
    quantum = Decimal(1).scaleb(-ndigits)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def round_int(value: Number) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(round_half_away(value))


def speed_to_mph(value: Number, unit: str) -> int:
    """
    Convert a METAR wind speed to whole miles per hour.

    Args:
        value: Speed in the reported unit
        unit: One of KT, MPS, KMH

    Returns:
        Speed in mph, rounded to the nearest integer

    Raises:
        ValueError: If the unit is not a METAR wind unit
    """
    try:
        factor = _SPEED_FACTORS[unit.upper()]
    except KeyError:
        raise ValueError(f"Unsupported wind speed unit: {unit}")
    return round_int(factor * value)


def meters_to_miles(meters: Number) -> float:
    """
    Convert a METAR visibility in meters to miles.

    Short distances keep one decimal (0400 -> 0.6), anything above 5 miles
    is rounded to a whole number (9999 -> 16.0).
    """
    distance = round_half_away(meters / _METERS_DIVISOR, 1)
    if distance > 5:
        distance = round_half_away(distance)
    return distance


def celsius_to_fahrenheit(celsius: Number) -> int:
    """Convert Celsius to whole degrees Fahrenheit."""
    return round_int(1.8 * celsius + 32)


def in_hg_to_hpa(in_hg: Number) -> int:
    """Convert inches of mercury to whole hectopascals."""
    return round_int(in_hg / INHG_PER_HPA)


def hpa_to_in_hg(hpa: Number) -> float:
    """Convert hectopascals to inches of mercury, two decimals."""
    return round_half_away(INHG_PER_HPA * hpa, 2)
