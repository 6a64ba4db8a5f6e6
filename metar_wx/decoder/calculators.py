"""Derived comfort values: relative humidity, heat index, wind chill.

Each calculator returns None when its preconditions do not hold.
"""

from typing import Optional

from metar_wx.decoder.units import round_int

HEAT_INDEX_MIN_TEMP_F = 79
HEAT_INDEX_MIN_HUMIDITY = 39
WIND_CHILL_MAX_TEMP_F = 51
WIND_CHILL_MIN_SPEED_MPH = 3


def relative_humidity(temperature_c: int, dew_point_c: int) -> int:
    """
    Relative humidity in percent from temperature and dew point.

    Uses the approximation
    RH = 100 * ((112 - 0.1 T + D) / (112 + 0.9 T)) ** 8 with T, D in Celsius.
    """
    ratio = (112 - 0.1 * temperature_c + dew_point_c) / (112 + 0.9 * temperature_c)
    return round_int(100 * ratio ** 8)


def heat_index(temperature_f: int, humidity: int) -> Optional[int]:
    """
    Heat index in Fahrenheit (Rothfusz regression).

    Only defined above 79F and 39% relative humidity.
    """
    if temperature_f <= HEAT_INDEX_MIN_TEMP_F or humidity <= HEAT_INDEX_MIN_HUMIDITY:
        return None

    t = temperature_f
    rh = humidity
    hi = -42.379 + 2.04901523 * t + 10.14333127 * rh - 0.22475541 * t * rh
    hi += -0.00683783 * t ** 2 - 0.05481717 * rh ** 2
    hi += 0.00122874 * t ** 2 * rh + 0.00085282 * t * rh ** 2
    hi += -0.00000199 * t ** 2 * rh ** 2
    return round_int(hi)


def wind_chill(temperature_f: int, wind_speed_mph: Optional[int]) -> Optional[int]:
    """
    Wind chill in Fahrenheit (NWS 2001 formula).

    Only defined below 51F with a wind above 3 mph. Gusts are not used.
    """
    if temperature_f >= WIND_CHILL_MAX_TEMP_F:
        return None
    if wind_speed_mph is None or wind_speed_mph <= WIND_CHILL_MIN_SPEED_MPH:
        return None

    v = wind_speed_mph ** 0.16
    chill = 35.74 + 0.6215 * temperature_f - 35.75 * v + 0.4275 * temperature_f * v
    return round_int(chill)
