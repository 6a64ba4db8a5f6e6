"""Queryable collection of station weather results."""

from datetime import datetime, timezone
from typing import List, Optional

import pandas as pd

from metar_wx.queryable_collection import QueryableCollection
from metar_wx.station import StationWeather

_DATAFRAME_COLUMNS = [
    'station',
    'observed',
    'error',
    'wind_direction',
    'wind_speed_mph',
    'wind_gust_mph',
    'visibility_qualifier',
    'visibility_mi',
    'conditions',
    'sky',
    'temperature_f',
    'dew_point_f',
    'relative_humidity',
    'heat_index_f',
    'wind_chill_f',
    'pressure_in_hg',
    'pressure_hpa',
    'raw_text',
]


class StationWeatherCollection(QueryableCollection[StationWeather]):
    """
    Queryable collection of StationWeather results.

    Example:
        weather = source.fetch_stations(["KTIK", "KOKC"])
        failed = weather.with_errors().all()
        frame = weather.without_errors().to_dataframe()
    """

    def __init__(self, items: List[StationWeather]):
        super().__init__(items)

    def for_station(self, station: str) -> 'StationWeatherCollection':
        """Filter results for one station (case insensitive)."""
        station_upper = station.strip().upper()
        return self.filter(lambda w: w.station.upper() == station_upper)

    def with_errors(self) -> 'StationWeatherCollection':
        """Results that carry no observation."""
        return self.filter(lambda w: not w.ok)

    def without_errors(self) -> 'StationWeatherCollection':
        """Results with a decoded observation."""
        return self.filter(lambda w: w.ok)

    def latest(self) -> Optional[StationWeather]:
        """
        Most recent result by observation time.

        Falls back to the last item when no result has a time.
        """
        with_time = [w for w in self._items if w.observed is not None]
        if not with_time:
            return self.last()
        return max(with_time, key=lambda w: w.observed)

    def chronological(self) -> 'StationWeatherCollection':
        """Sort results by observation time (oldest first, unknown first)."""
        oldest = datetime.min.replace(tzinfo=timezone.utc)
        return self.order_by(lambda w: w.observed or oldest)

    def to_dataframe(self) -> pd.DataFrame:
        """
        Flatten the results into a DataFrame, one row per station.

        Returns:
            DataFrame with the columns of _DATAFRAME_COLUMNS
        """
        rows = [_flatten(w) for w in self._items]
        return pd.DataFrame(rows, columns=_DATAFRAME_COLUMNS)


def _flatten(weather: StationWeather) -> dict:
    row = dict.fromkeys(_DATAFRAME_COLUMNS)
    row['station'] = weather.station
    row['observed'] = weather.observed
    row['error'] = weather.error.value if weather.error else None
    row['raw_text'] = weather.raw_text

    obs = weather.observation
    if obs is None:
        return row

    if obs.wind:
        row['wind_direction'] = obs.wind.direction
        row['wind_speed_mph'] = obs.wind.speed_mph
        row['wind_gust_mph'] = obs.wind.gust_mph
    if obs.visibility:
        row['visibility_qualifier'] = obs.visibility.qualifier.value
        row['visibility_mi'] = obs.visibility.value
    row['conditions'] = obs.conditions_text
    row['sky'] = obs.cloud_layer.text if obs.cloud_layer else None
    row['temperature_f'] = obs.temperature_f
    row['dew_point_f'] = obs.dew_point_f
    row['relative_humidity'] = obs.relative_humidity
    row['heat_index_f'] = obs.heat_index_f
    row['wind_chill_f'] = obs.wind_chill_f
    row['pressure_in_hg'] = obs.pressure_in_hg
    row['pressure_hpa'] = obs.pressure_hpa
    return row
