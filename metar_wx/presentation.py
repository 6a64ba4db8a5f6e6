"""
Plain-text rendering of decoded weather.

Turns the structured values of a WeatherObservation into labelled lines for
monospaced output, e.g.::

    Temperature...............34°F
    Wind................NE 10 mph
"""

from datetime import datetime, timedelta
from typing import Callable, List, Optional, Tuple

from metar_wx.decoder.models import Visibility, VisibilityQualifier, WeatherObservation, Wind
from metar_wx.station import StationWeather

DEFAULT_WIDTH = 30
DEGREE_SIGN = "°"

VISIBILITY_GLYPHS = {
    VisibilityQualifier.EXACT: "",
    VisibilityQualifier.AT_LEAST: ">",
    VisibilityQualifier.AT_MOST: "<",
}


def format_line(label: str, value: str, width: int = DEFAULT_WIDTH) -> str:
    """
    Pad label and value with dots to ``width`` characters.

    When the pair does not fit, two dots are used.
    """
    padding = width - len(label) - len(value)
    if padding <= 0:
        padding = 2
    return f"{label}{'.' * padding}{value}"


def format_number(value: float) -> str:
    """10.0 -> "10", 0.6 -> "0.6", 0.25 -> "0.25"."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


def format_temperature(value_f: int) -> str:
    return f"{value_f}{DEGREE_SIGN}F"


def format_wind(wind: Wind) -> str:
    """"calm", "NE 10 mph" or "NE 10/25 mph" with a gust."""
    if wind.is_calm:
        return wind.direction
    speed = f"{wind.speed_mph}"
    if wind.gust_mph is not None:
        speed += f"/{wind.gust_mph}"
    return f"{wind.direction} {speed} mph"


def format_visibility(visibility: Visibility) -> str:
    glyph = VISIBILITY_GLYPHS[visibility.qualifier]
    return f"{glyph}{format_number(visibility.value)} {visibility.unit}"


def format_pressure(in_hg: float) -> str:
    return f"{in_hg:.2f} in"


def format_age(age: timedelta) -> str:
    """
    Observation age: "42 min" below 91 minutes, "1:35 hr" beyond.
    """
    minutes = int(age.total_seconds() // 60)
    if minutes < 91:
        return f"{minutes} min"
    return f"{minutes // 60}:{minutes % 60:02d} hr"


_Field = Tuple[str, Callable[[WeatherObservation], Optional[str]]]

_OBSERVATION_FIELDS: List[_Field] = [
    ('Temperature', lambda o: _maybe(o.temperature_f, format_temperature)),
    ('Wind Chill', lambda o: _maybe(o.wind_chill_f, format_temperature)),
    ('Heat Index', lambda o: _maybe(o.heat_index_f, format_temperature)),
    ('Dew Point', lambda o: _maybe(o.dew_point_f, format_temperature)),
    ('Humidity', lambda o: _maybe(o.relative_humidity, lambda rh: f"{rh}%")),
    ('Pressure', lambda o: _maybe(o.pressure_in_hg, format_pressure)),
    ('Wind', lambda o: _maybe(o.wind, format_wind)),
    ('Visibility', lambda o: _maybe(o.visibility, format_visibility)),
    ('Sky', lambda o: o.cloud_layer.text if o.cloud_layer else None),
    ('Wx', lambda o: o.conditions_text),
]


def _maybe(value, formatter):
    return formatter(value) if value is not None else None


def format_observation(observation: WeatherObservation, width: int = DEFAULT_WIDTH) -> List[str]:
    """
    Labelled lines for every reported value of an observation.

    Values that were not reported are left out.
    """
    lines = []
    for label, getter in _OBSERVATION_FIELDS:
        value = getter(observation)
        if value:
            lines.append(format_line(label, value, width))
    return lines


def format_station_weather(
    weather: StationWeather,
    width: int = DEFAULT_WIDTH,
    now: Optional[datetime] = None,
) -> List[str]:
    """
    Labelled lines for a station, starting with the observation age.

    Returns the error message alone when the station has no observation.
    """
    if not weather.ok:
        error = weather.error.value if weather.error else "Data not available"
        return [error]

    lines = []
    age = weather.age(now)
    if age is not None:
        lines.append(format_line('Age', format_age(age), width))
    lines.extend(format_observation(weather.observation, width))
    return lines
