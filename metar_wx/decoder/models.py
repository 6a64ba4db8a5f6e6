"""Decoded METAR data models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple, Dict, Any


class VisibilityQualifier(Enum):
    """How the reported visibility value relates to the real visibility."""

    EXACT = "exact"
    AT_LEAST = "at-least"
    AT_MOST = "at-most"


class Intensity(Enum):
    """Intensity or proximity prefix of a present weather group."""

    LIGHT = "light"
    MODERATE = "moderate"
    HEAVY = "heavy"
    NEARBY = "nearby"


class DecodeError(Enum):
    """Top-level decoder error tags."""

    NO_DATA = "NoData"


@dataclass(frozen=True)
class Wind:
    """
    Surface wind.

    Attributes:
        direction: 16-point compass label, "calm" or "varies"
        speed_mph: Sustained speed in mph (None when calm)
        gust_mph: Gust speed in mph
        degrees: Reported direction in degrees (None when calm or variable)
    """

    direction: str
    speed_mph: Optional[int] = None
    gust_mph: Optional[int] = None
    degrees: Optional[int] = None

    CALM = "calm"
    VARIES = "varies"

    @property
    def is_calm(self) -> bool:
        return self.direction == self.CALM

    @property
    def is_variable(self) -> bool:
        return self.direction == self.VARIES

    def to_dict(self) -> dict:
        return {
            'direction': self.direction,
            'speed_mph': self.speed_mph,
            'gust_mph': self.gust_mph,
            'degrees': self.degrees,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Wind':
        return cls(
            direction=data.get('direction', cls.CALM),
            speed_mph=data.get('speed_mph'),
            gust_mph=data.get('gust_mph'),
            degrees=data.get('degrees'),
        )


@dataclass(frozen=True)
class Visibility:
    """Prevailing visibility as a (qualifier, value) pair in miles."""

    qualifier: VisibilityQualifier
    value: float
    unit: str = "mi"

    def to_dict(self) -> dict:
        return {
            'qualifier': self.qualifier.value,
            'value': self.value,
            'unit': self.unit,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Visibility':
        return cls(
            qualifier=VisibilityQualifier(data.get('qualifier', VisibilityQualifier.EXACT.value)),
            value=data['value'],
            unit=data.get('unit', 'mi'),
        )


@dataclass(frozen=True)
class PresentCondition:
    """
    One present weather group, e.g. "-SHRA".

    Attributes:
        intensity: Intensity or proximity prefix
        phenomena: Translated codes in reading order, e.g. ("rain", "showers")
        code: The group as reported
    """

    intensity: Intensity
    phenomena: Tuple[str, ...]
    code: str = ""

    @property
    def text(self) -> str:
        """Human readable phrase, e.g. "light rain showers"."""
        words = " ".join(self.phenomena)
        if self.intensity == Intensity.MODERATE:
            return words
        return f"{self.intensity.value} {words}"

    def to_dict(self) -> dict:
        return {
            'intensity': self.intensity.value,
            'phenomena': list(self.phenomena),
            'code': self.code,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'PresentCondition':
        return cls(
            intensity=Intensity(data.get('intensity', Intensity.MODERATE.value)),
            phenomena=tuple(data.get('phenomena', ())),
            code=data.get('code', ''),
        )


@dataclass(frozen=True)
class CloudLayer:
    """
    Sky condition. Only vertical visibility carries an altitude.

    Attributes:
        code: Reported code (SKC, CLR, FEW, SCT, BKN, OVC, VV, or CAVOK)
        description: Plain language label
        altitude_ft: Vertical visibility in feet, VV layers only
    """

    code: str
    description: str
    altitude_ft: Optional[int] = None

    @property
    def text(self) -> str:
        if self.altitude_ft is not None:
            return f"{self.code} {self.altitude_ft} ft"
        return self.description

    def to_dict(self) -> dict:
        return {
            'code': self.code,
            'description': self.description,
            'altitude_ft': self.altitude_ft,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'CloudLayer':
        return cls(
            code=data.get('code', ''),
            description=data.get('description', ''),
            altitude_ft=data.get('altitude_ft'),
        )


@dataclass(frozen=True)
class WeatherObservation:
    """
    Structured result of decoding one METAR.

    Every field is optional: None means the group was not reported.

    Attributes:
        wind: Surface wind
        wind_variation: (from, to) degrees of a variable wind group
        visibility: Prevailing visibility
        present_conditions: Present weather groups in report order
        cloud_layer: Last reported sky condition
        temperature_c: Air temperature in Celsius
        temperature_f: Air temperature in Fahrenheit
        dew_point_c: Dew point in Celsius
        dew_point_f: Dew point in Fahrenheit
        relative_humidity: Relative humidity in percent
        heat_index_f: Heat index in Fahrenheit
        wind_chill_f: Wind chill in Fahrenheit
        pressure_in_hg: Altimeter setting in inches of mercury
        pressure_hpa: Altimeter setting in hectopascals
    """

    wind: Optional[Wind] = None
    wind_variation: Optional[Tuple[int, int]] = None
    visibility: Optional[Visibility] = None
    present_conditions: Tuple[PresentCondition, ...] = field(default_factory=tuple)
    cloud_layer: Optional[CloudLayer] = None
    temperature_c: Optional[int] = None
    temperature_f: Optional[int] = None
    dew_point_c: Optional[int] = None
    dew_point_f: Optional[int] = None
    relative_humidity: Optional[int] = None
    heat_index_f: Optional[int] = None
    wind_chill_f: Optional[int] = None
    pressure_in_hg: Optional[float] = None
    pressure_hpa: Optional[int] = None

    @property
    def conditions_text(self) -> Optional[str]:
        """Present weather as one phrase, groups joined by "&"."""
        if not self.present_conditions:
            return None
        return " & ".join(c.text for c in self.present_conditions)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary for JSON export."""
        return {
            'wind': self.wind.to_dict() if self.wind else None,
            'wind_variation': list(self.wind_variation) if self.wind_variation else None,
            'visibility': self.visibility.to_dict() if self.visibility else None,
            'present_conditions': [c.to_dict() for c in self.present_conditions],
            'cloud_layer': self.cloud_layer.to_dict() if self.cloud_layer else None,
            'temperature_c': self.temperature_c,
            'temperature_f': self.temperature_f,
            'dew_point_c': self.dew_point_c,
            'dew_point_f': self.dew_point_f,
            'relative_humidity': self.relative_humidity,
            'heat_index_f': self.heat_index_f,
            'wind_chill_f': self.wind_chill_f,
            'pressure_in_hg': self.pressure_in_hg,
            'pressure_hpa': self.pressure_hpa,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'WeatherObservation':
        """Create WeatherObservation from dictionary."""
        wind_variation = None
        if data.get('wind_variation'):
            wind_variation = tuple(data['wind_variation'])

        return cls(
            wind=Wind.from_dict(data['wind']) if data.get('wind') else None,
            wind_variation=wind_variation,
            visibility=Visibility.from_dict(data['visibility']) if data.get('visibility') else None,
            present_conditions=tuple(
                PresentCondition.from_dict(c) for c in data.get('present_conditions', [])
            ),
            cloud_layer=CloudLayer.from_dict(data['cloud_layer']) if data.get('cloud_layer') else None,
            temperature_c=data.get('temperature_c'),
            temperature_f=data.get('temperature_f'),
            dew_point_c=data.get('dew_point_c'),
            dew_point_f=data.get('dew_point_f'),
            relative_humidity=data.get('relative_humidity'),
            heat_index_f=data.get('heat_index_f'),
            wind_chill_f=data.get('wind_chill_f'),
            pressure_in_hg=data.get('pressure_in_hg'),
            pressure_hpa=data.get('pressure_hpa'),
        )


@dataclass(frozen=True)
class DecodeResult:
    """Outcome of one decode call: an observation or an error tag."""

    observation: Optional[WeatherObservation] = None
    error: Optional[DecodeError] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.observation is not None
