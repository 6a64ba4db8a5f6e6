"""
METAR weather decoding library.

This package turns raw METAR aviation weather reports into structured
observations: wind, visibility, sky condition, present weather,
temperature, dew point, humidity, heat index, wind chill and pressure.

The main public API includes:
- MetarDecoder / decode_metar: Decode a raw report into a WeatherObservation
- WeatherObservation: Decoded, immutable observation
- StationWeather: A decoded report with its station, time and fetch status
- AviationWeatherSource: Fetch the latest report from aviationweather.gov
- StationWeatherCollection: Queryable results with a pandas export
"""

from metar_wx.decoder import (
    DecodeError,
    DecodeResult,
    MetarDecoder,
    WeatherObservation,
    decode_metar,
)
from metar_wx.station import StationError, StationWeather
from metar_wx.collection import StationWeatherCollection
from metar_wx.sources.avwx import AviationWeatherSource

__version__ = '0.1.0'
__all__ = [
    'MetarDecoder',
    'decode_metar',
    'WeatherObservation',
    'DecodeResult',
    'DecodeError',
    'StationWeather',
    'StationError',
    'StationWeatherCollection',
    'AviationWeatherSource',
]
