"""Per-decode mutable state."""

from dataclasses import dataclass, field
from typing import Optional, List, Tuple

from metar_wx.decoder.models import (
    CloudLayer,
    PresentCondition,
    Visibility,
    WeatherObservation,
    Wind,
)


@dataclass
class ParseSession:
    """
    Everything that changes while one report is decoded.

    A session is created at the start of each decode call and thrown away
    at the end; nothing here outlives the call.

    Attributes:
        tokens: Report groups, station identifier first
        token_cursor: Index of the next unconsumed group
        group_cursor: Index of the group kind being attempted
        pending_whole_mile: Whole-mile part of a split visibility ("1 1/2SM")
        conditions: Present weather groups decoded so far
    """

    tokens: Tuple[str, ...]
    token_cursor: int = 1
    group_cursor: int = 0
    pending_whole_mile: Optional[int] = None
    conditions: List[PresentCondition] = field(default_factory=list)

    # Observation draft
    wind: Optional[Wind] = None
    wind_variation: Optional[Tuple[int, int]] = None
    visibility: Optional[Visibility] = None
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
    def current_token(self) -> Optional[str]:
        if self.token_cursor < len(self.tokens):
            return self.tokens[self.token_cursor]
        return None

    def to_observation(self) -> WeatherObservation:
        """Freeze the draft into an immutable observation."""
        return WeatherObservation(
            wind=self.wind,
            wind_variation=self.wind_variation,
            visibility=self.visibility,
            present_conditions=tuple(self.conditions),
            cloud_layer=self.cloud_layer,
            temperature_c=self.temperature_c,
            temperature_f=self.temperature_f,
            dew_point_c=self.dew_point_c,
            dew_point_f=self.dew_point_f,
            relative_humidity=self.relative_humidity,
            heat_index_f=self.heat_index_f,
            wind_chill_f=self.wind_chill_f,
            pressure_in_hg=self.pressure_in_hg,
            pressure_hpa=self.pressure_hpa,
        )
