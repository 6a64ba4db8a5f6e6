"""
METAR decoding.

Provides:
- MetarDecoder: Decode raw METAR text into a WeatherObservation
- decode_metar: Module-level shortcut using the standard group order
- WeatherObservation and its parts: Wind, Visibility, PresentCondition, CloudLayer
- DecodeResult / DecodeError: Decode outcome and the NoData tag

Example:
    from metar_wx.decoder import decode_metar

    result = decode_metar("KTIK 251753Z 04009KT 10SM OVC037 01/M04 A3010")
    obs = result.observation
    print(obs.wind.direction, obs.wind.speed_mph)  # NE 10
    print(obs.wind_chill_f)  # 26
"""

from metar_wx.decoder.models import (
    CloudLayer,
    DecodeError,
    DecodeResult,
    Intensity,
    PresentCondition,
    Visibility,
    VisibilityQualifier,
    WeatherObservation,
    Wind,
)
from metar_wx.decoder.groups import GroupDecoder, GroupKind, Step
from metar_wx.decoder.parser import MetarDecoder, decode_metar

__all__ = [
    'MetarDecoder',
    'decode_metar',
    'WeatherObservation',
    'Wind',
    'Visibility',
    'VisibilityQualifier',
    'PresentCondition',
    'Intensity',
    'CloudLayer',
    'DecodeResult',
    'DecodeError',
    'GroupDecoder',
    'GroupKind',
    'Step',
]
