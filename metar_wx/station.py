"""Station weather: a decoded METAR together with where and when it came from."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Optional

from metar_wx.decoder.models import DecodeError, WeatherObservation
from metar_wx.decoder.parser import MetarDecoder, decode_metar


class StationError(Enum):
    """Reasons a station has no observation."""

    FILE_NOT_FOUND = "File not found"
    STATION_NOT_FOUND = "Station not found"
    DATA_NOT_AVAILABLE = "Data not available"


@dataclass
class StationWeather:
    """
    Latest weather for one station.

    Attributes:
        station: ICAO station identifier
        raw_text: Raw METAR as received
        observed: Observation instant (UTC), supplied by the source
        observation: Decoded observation, None when unavailable
        error: Why there is no observation
        source: Data source identifier
    """

    station: str
    raw_text: str = ""
    observed: Optional[datetime] = None
    observation: Optional[WeatherObservation] = None
    error: Optional[StationError] = None
    source: str = ""

    @classmethod
    def from_report(
        cls,
        station: str,
        raw_text: str,
        observed: Optional[datetime] = None,
        source: str = "",
        decoder: Optional[MetarDecoder] = None,
    ) -> 'StationWeather':
        """
        Decode a raw report received for a station.

        Args:
            station: ICAO station identifier
            raw_text: Raw METAR text
            observed: Observation instant from the report envelope
            source: Data source identifier
            decoder: Decoder to use, defaults to the standard one

        Returns:
            StationWeather with observation set, or error DATA_NOT_AVAILABLE
            when the report is empty
        """
        result = decoder.decode(raw_text) if decoder else decode_metar(raw_text)
        error = None
        if result.error == DecodeError.NO_DATA:
            error = StationError.DATA_NOT_AVAILABLE
        return cls(
            station=station,
            raw_text=raw_text.strip(),
            observed=observed,
            observation=result.observation,
            error=error,
            source=source,
        )

    @property
    def ok(self) -> bool:
        return self.error is None and self.observation is not None

    def age(self, now: Optional[datetime] = None) -> Optional[timedelta]:
        """
        Time elapsed since the observation.

        Args:
            now: Reference instant, defaults to the current UTC time

        Returns:
            timedelta, or None when the observation time is unknown
        """
        if self.observed is None:
            return None
        if now is None:
            now = datetime.now(timezone.utc)
        return now - self.observed

    def to_dict(self) -> dict:
        """Serialize to dictionary for JSON export."""
        return {
            'station': self.station,
            'raw_text': self.raw_text,
            'observed': self.observed.isoformat() if self.observed else None,
            'observation': self.observation.to_dict() if self.observation else None,
            'error': self.error.value if self.error else None,
            'source': self.source,
        }

    def __repr__(self) -> str:
        status = self.error.value if self.error else "ok"
        return f"StationWeather({self.station} {status})"
