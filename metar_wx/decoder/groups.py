"""
Field decoders, one per METAR group kind.

Each decoder looks at a single group and tells the dispatcher what to do
next through a Step:

- SKIP: the group kind is absent, try the next kind on the same token
- TAKE: token consumed, move on to the next kind
- TAKE_AND_RETRY: token consumed, try the same kind again on the next token
  (repeatable groups such as runway visual range or cloud layers)

Decoders write their results into the ParseSession they are given and keep
no state of their own, so one instance can serve any number of decodes.
"""

import re
from abc import ABC, abstractmethod
from enum import Enum
from typing import NamedTuple, Optional, List, Tuple

from metar_wx.decoder.calculators import heat_index, relative_humidity, wind_chill
from metar_wx.decoder.models import (
    CloudLayer,
    Intensity,
    PresentCondition,
    Visibility,
    VisibilityQualifier,
    Wind,
)
from metar_wx.decoder.session import ParseSession
from metar_wx.decoder.tables import (
    CLEAR_SKY_CODES,
    CLEAR_SKY_DESCRIPTION,
    CLOUD_CODES,
    COMPASS_POINTS,
    SHOWERS_CODE,
    VERTICAL_VISIBILITY_CODE,
    WEATHER_CODES,
)
from metar_wx.decoder.units import (
    celsius_to_fahrenheit,
    hpa_to_in_hg,
    in_hg_to_hpa,
    meters_to_miles,
    round_int,
    speed_to_mph,
)


class GroupKind(Enum):
    """METAR group kinds in report order."""

    TIME = "time"
    STATION_TYPE = "station_type"
    WIND = "wind"
    VARIABLE_WIND = "variable_wind"
    VISIBILITY = "visibility"
    RUNWAY = "runway"
    PRESENT_CONDITIONS = "present_conditions"
    CLOUD_LAYER = "cloud_layer"
    TEMPERATURE = "temperature"
    ALTIMETER = "altimeter"


class Step(NamedTuple):
    """Dispatcher instruction returned by a group decoder."""

    consumed: bool
    advance: int


SKIP = Step(consumed=False, advance=1)
TAKE = Step(consumed=True, advance=1)
TAKE_AND_RETRY = Step(consumed=True, advance=0)
# CAVOK stands in for visibility, runway, present weather and clouds
CAVOK_SKIP = Step(consumed=True, advance=4)


class GroupDecoder(ABC):
    """Uniform attempt-and-maybe-consume contract for one group kind."""

    kind: GroupKind

    @abstractmethod
    def attempt(self, token: str, session: ParseSession) -> Step:
        """
        Try to decode ``token`` as this group kind.

        Args:
            token: The group at the session's token cursor
            session: Session receiving any decoded values

        Returns:
            Step telling the dispatcher how to move both cursors
        """

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class TimeDecoder(GroupDecoder):
    """ddhhmmZ observation time. Consumed but not decoded."""

    kind = GroupKind.TIME

    def attempt(self, token: str, session: ParseSession) -> Step:
        if token.endswith('Z'):
            return TAKE
        return SKIP


class StationTypeDecoder(GroupDecoder):
    """AUTO or COR modifier. Consumed but not decoded."""

    kind = GroupKind.STATION_TYPE

    _MODIFIERS = frozenset({'AUTO', 'COR'})

    def attempt(self, token: str, session: ParseSession) -> Step:
        if token in self._MODIFIERS:
            return TAKE
        return SKIP


class WindDecoder(GroupDecoder):
    """dddss[Ggg]KT, VRBssKT, with KT, MPS or KMH units."""

    kind = GroupKind.WIND

    _PATTERN = re.compile(
        r'^(?P<direction>\d{3}|VRB)(?P<speed>\d{2,3})(?:G(?P<gust>\d{2,3}))?(?P<unit>KT|MPS|KMH)$'
    )
    _CALM = '00000'

    def attempt(self, token: str, session: ParseSession) -> Step:
        match = self._PATTERN.match(token)
        if not match:
            return SKIP

        unit = match.group('unit')
        if token[:-len(unit)] == self._CALM:
            session.wind = Wind(direction=Wind.CALM)
            return TAKE

        direction = match.group('direction')
        degrees = None
        if direction == 'VRB':
            label = Wind.VARIES
        else:
            degrees = int(direction)
            label = compass_point(degrees)

        gust = match.group('gust')
        session.wind = Wind(
            direction=label,
            speed_mph=speed_to_mph(int(match.group('speed')), unit),
            gust_mph=speed_to_mph(int(gust), unit) if gust else None,
            degrees=degrees,
        )
        return TAKE


class VariableWindDecoder(GroupDecoder):
    """fffVttt variable wind direction range."""

    kind = GroupKind.VARIABLE_WIND

    _PATTERN = re.compile(r'^(\d{3})V(\d{3})$')

    def attempt(self, token: str, session: ParseSession) -> Step:
        match = self._PATTERN.match(token)
        if not match:
            return SKIP
        session.wind_variation = (int(match.group(1)), int(match.group(2)))
        return TAKE


class VisibilityDecoder(GroupDecoder):
    """
    Prevailing visibility.

    Handles statute miles (10SM, M1/4SM, P6SM), mixed numbers split over two
    groups (1 1/2SM), 4-digit meters (0400) and CAVOK. Kilometer groups are
    consumed but their value is not used.
    """

    kind = GroupKind.VISIBILITY

    _METERS = re.compile(r'^\d{4}$')
    _QUALIFIER_PREFIXES = {
        'M': VisibilityQualifier.AT_MOST,
        'P': VisibilityQualifier.AT_LEAST,
    }
    CAVOK = 'CAVOK'
    CAVOK_MILES = 7.0

    def attempt(self, token: str, session: ParseSession) -> Step:
        if len(token) == 1 and token.isdecimal():
            session.pending_whole_mile = int(token)
            return TAKE_AND_RETRY

        if token.endswith('SM'):
            return self._statute_miles(token[:-2], session)

        if token.endswith('KM'):
            return TAKE

        if self._METERS.match(token):
            session.visibility = Visibility(
                qualifier=VisibilityQualifier.EXACT,
                value=meters_to_miles(int(token)),
            )
            return TAKE

        if token == self.CAVOK:
            session.visibility = Visibility(
                qualifier=VisibilityQualifier.AT_LEAST,
                value=self.CAVOK_MILES,
            )
            session.conditions.clear()
            session.cloud_layer = CloudLayer(code=self.CAVOK, description=CLEAR_SKY_DESCRIPTION)
            return CAVOK_SKIP

        return SKIP

    def _statute_miles(self, text: str, session: ParseSession) -> Step:
        qualifier = VisibilityQualifier.EXACT
        if text[:1] in self._QUALIFIER_PREFIXES:
            qualifier = self._QUALIFIER_PREFIXES[text[:1]]
            text = text[1:]

        miles = _safe_parse_fraction(text)
        if miles is None:
            return SKIP

        if session.pending_whole_mile is not None:
            miles += session.pending_whole_mile
            session.pending_whole_mile = None

        session.visibility = Visibility(qualifier=qualifier, value=float(miles))
        return TAKE


class RunwayDecoder(GroupDecoder):
    """Rrrr/vvvvFT runway visual range. Consumed but not decoded; repeatable."""

    kind = GroupKind.RUNWAY

    _PATTERN = re.compile(r'^R\d{1,3}')

    def attempt(self, token: str, session: ParseSession) -> Step:
        if self._PATTERN.match(token):
            return TAKE_AND_RETRY
        return SKIP


class PresentConditionsDecoder(GroupDecoder):
    """
    Present weather, e.g. -RA, +TSRA, VCSH, BR. Repeatable.

    A leading SH is moved behind the next code so that SHRA reads
    "rain showers" rather than "showers rain".
    """

    kind = GroupKind.PRESENT_CONDITIONS

    _PATTERN = re.compile(r'^(?P<prefix>-|\+|VC)?(?P<codes>(?:[A-Z]{2})+)$')
    _INTENSITIES = {
        '-': Intensity.LIGHT,
        '+': Intensity.HEAVY,
        'VC': Intensity.NEARBY,
    }

    def attempt(self, token: str, session: ParseSession) -> Step:
        match = self._PATTERN.match(token)
        if not match:
            return SKIP

        text = match.group('codes')
        codes = [text[i:i + 2] for i in range(0, len(text), 2)]
        if not all(code in WEATHER_CODES for code in codes):
            return SKIP

        if len(codes) > 1 and codes[0] == SHOWERS_CODE:
            codes[0], codes[1] = codes[1], codes[0]

        intensity = self._INTENSITIES.get(match.group('prefix'), Intensity.MODERATE)
        session.conditions.append(PresentCondition(
            intensity=intensity,
            phenomena=tuple(WEATHER_CODES[code] for code in codes),
            code=token,
        ))
        return TAKE_AND_RETRY


class CloudLayerDecoder(GroupDecoder):
    """
    Sky condition: SKC/CLR, or FEW/SCT/BKN/OVC/VV followed by height.

    Layers are repeatable but only the last one is kept. CB and TCU
    suffixes are ignored.
    """

    kind = GroupKind.CLOUD_LAYER

    _PATTERN = re.compile(r'^(?P<code>FEW|SCT|BKN|OVC|VV)(?P<height>\d{3})')

    def attempt(self, token: str, session: ParseSession) -> Step:
        if token in CLEAR_SKY_CODES:
            session.cloud_layer = CloudLayer(code=token, description=CLEAR_SKY_DESCRIPTION)
            return TAKE

        match = self._PATTERN.match(token)
        if not match:
            return SKIP

        code = match.group('code')
        altitude = None
        if code == VERTICAL_VISIBILITY_CODE:
            altitude = int(match.group('height')) * 100
        session.cloud_layer = CloudLayer(
            code=code,
            description=CLOUD_CODES[code],
            altitude_ft=altitude,
        )
        return TAKE_AND_RETRY


class TemperatureDecoder(GroupDecoder):
    """
    tt/dd temperature and dew point in Celsius, M for negative.

    Also computes the derived values: wind chill from the temperature and
    the already decoded wind, humidity and heat index when a dew point is
    reported.
    """

    kind = GroupKind.TEMPERATURE

    _PATTERN = re.compile(r'^(?P<temp>M?\d{2})/(?P<dew>M?\d{2}|XX)?$')

    def attempt(self, token: str, session: ParseSession) -> Step:
        match = self._PATTERN.match(token)
        if not match:
            return SKIP

        temp_c = _signed_celsius(match.group('temp'))
        temp_f = celsius_to_fahrenheit(temp_c)
        session.temperature_c = temp_c
        session.temperature_f = temp_f

        speed = session.wind.speed_mph if session.wind and not session.wind.is_calm else None
        session.wind_chill_f = wind_chill(temp_f, speed)

        dew = match.group('dew')
        if dew and dew != 'XX':
            dew_c = _signed_celsius(dew)
            humidity = relative_humidity(temp_c, dew_c)
            session.dew_point_c = dew_c
            session.dew_point_f = celsius_to_fahrenheit(dew_c)
            session.relative_humidity = humidity
            session.heat_index_f = heat_index(temp_f, humidity)
        return TAKE


class AltimeterDecoder(GroupDecoder):
    """Annnn (inHg x100) or Qnnnn (hPa) altimeter setting."""

    kind = GroupKind.ALTIMETER

    _PATTERN = re.compile(r'^(?P<unit>[AQ])(?P<value>\d{4})')

    def attempt(self, token: str, session: ParseSession) -> Step:
        match = self._PATTERN.match(token)
        if not match:
            return SKIP

        value = match.group('value')
        if match.group('unit') == 'A':
            in_hg = float(f"{value[:2]}.{value[2:]}")
            session.pressure_in_hg = in_hg
            session.pressure_hpa = in_hg_to_hpa(in_hg)
        else:
            hpa = int(value)
            session.pressure_hpa = hpa
            session.pressure_in_hg = hpa_to_in_hg(hpa)
        return TAKE


DEFAULT_GROUP_ORDER: Tuple[GroupDecoder, ...] = (
    TimeDecoder(),
    StationTypeDecoder(),
    WindDecoder(),
    VariableWindDecoder(),
    VisibilityDecoder(),
    RunwayDecoder(),
    PresentConditionsDecoder(),
    CloudLayerDecoder(),
    TemperatureDecoder(),
    AltimeterDecoder(),
)


def compass_point(degrees: int) -> str:
    """16-point compass label for a direction in degrees (40 -> "NE")."""
    index = round_int(degrees / 22.5) % len(COMPASS_POINTS)
    return COMPASS_POINTS[index]


def _signed_celsius(text: str) -> int:
    """'M04' -> -4, '21' -> 21."""
    if text.startswith('M'):
        return -int(text[1:])
    return int(text)


def _safe_parse_fraction(text: str) -> Optional[float]:
    """
    Parse a whole number or simple fraction ("10", "1/2").

    Returns:
        Float value or None if unparseable
    """
    if not text:
        return None

    parts: List[str] = text.split('/')
    if len(parts) == 1:
        return float(parts[0]) if parts[0].isdecimal() else None
    if len(parts) != 2 or not parts[0].isdecimal() or not parts[1].isdecimal():
        return None
    denominator = int(parts[1])
    if denominator == 0:
        return None
    return int(parts[0]) / denominator
