"""Aviation Weather (aviationweather.gov) API source for the latest METAR."""

import logging
from datetime import datetime, timezone
from typing import Dict, Iterator, List, Optional

import requests
from dateutil import parser as date_parser
from dateutil import tz

from metar_wx.collection import StationWeatherCollection
from metar_wx.decoder.parser import MetarDecoder
from metar_wx.station import StationError, StationWeather

logger = logging.getLogger(__name__)


class AviationWeatherSource:
    """
    Fetch the most recent METAR for airports from the aviationweather.gov API.

    The API answers with a JSON list, one entry per report. Each entry
    carries the raw report ("rawOb") and its observation instant ("obsTime",
    epoch seconds, or "reportTime" as an ISO string). The raw report is
    decoded with MetarDecoder; the observation instant comes from the
    envelope, not from the report's own time group.

    Failures never raise: they end up on StationWeather.error.

    Example:
        source = AviationWeatherSource()
        weather = source.fetch_station("KTIK")
        if weather.ok:
            print(weather.observation.temperature_f)
    """

    BASE_URL = "https://aviationweather.gov/api/data"
    BATCH_SIZE = 400
    DEFAULT_TIMEOUT = 10
    HOURS_BEFORE_NOW = 3
    USER_AGENT = "metar-wx/0.1 (metar decoder)"
    SOURCE_NAME = "avwx"

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
        hours: float = HOURS_BEFORE_NOW,
        decoder: Optional[MetarDecoder] = None,
    ):
        """
        Args:
            session: Optional requests.Session for dependency injection (testing).
            timeout: HTTP request timeout in seconds.
            hours: How far back to look for a report.
            decoder: Decoder for the raw reports.
        """
        self._session = session or requests.Session()
        self._timeout = timeout
        self._hours = hours
        self._decoder = decoder or MetarDecoder()
        self._session.headers.setdefault("User-Agent", self.USER_AGENT)

    def fetch_station(self, station: str) -> StationWeather:
        """
        Fetch and decode the latest METAR for one station.

        Args:
            station: ICAO station identifier, e.g. "KTIK"

        Returns:
            StationWeather, with error set if nothing could be decoded
        """
        return self.fetch_stations([station]).first() or StationWeather(
            station=station.strip().upper(),
            error=StationError.STATION_NOT_FOUND,
            source=self.SOURCE_NAME,
        )

    def fetch_stations(self, stations: List[str]) -> StationWeatherCollection:
        """
        Fetch and decode the latest METAR for several stations.

        Args:
            stations: ICAO station identifiers

        Returns:
            StationWeatherCollection with one entry per requested station,
            in request order
        """
        results = []
        for batch in self._batches(stations):
            entries = self._fetch_json("metar", {
                "ids": ",".join(batch),
                "format": "json",
                "hours": str(self._hours),
            })
            if entries is None:
                results.extend(
                    StationWeather(station=s, error=StationError.FILE_NOT_FOUND, source=self.SOURCE_NAME)
                    for s in batch
                )
                continue

            latest = self._latest_by_station(entries)
            for station in batch:
                entry = latest.get(station)
                if entry is None:
                    logger.info("No METAR for %s in the last %s hours", station, self._hours)
                    results.append(StationWeather(
                        station=station,
                        error=StationError.STATION_NOT_FOUND,
                        source=self.SOURCE_NAME,
                    ))
                    continue
                results.append(StationWeather.from_report(
                    station,
                    str(entry.get("rawOb") or ""),
                    observed=self._observation_time(entry),
                    source=self.SOURCE_NAME,
                    decoder=self._decoder,
                ))
        return StationWeatherCollection(results)

    def _fetch_json(self, endpoint: str, params: dict) -> Optional[list]:
        """
        Make HTTP GET request and return the decoded JSON list.

        Handles 204 (no data) by returning an empty list; returns None when
        the request or the payload fails.
        """
        url = f"{self.BASE_URL}/{endpoint}"
        try:
            response = self._session.get(url, params=params, timeout=self._timeout)
            if response.status_code == 204:
                return []
            response.raise_for_status()
            payload = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.warning("AvWx fetch failed for %s: %s", endpoint, e)
            return None

        if not isinstance(payload, list):
            logger.warning("Unexpected AvWx payload for %s: %s", endpoint, type(payload).__name__)
            return None
        return payload

    def _latest_by_station(self, entries: list) -> Dict[str, dict]:
        """Keep the most recent entry per station."""
        latest: Dict[str, dict] = {}
        for entry in entries:
            if not isinstance(entry, dict):
                continue
            station = str(entry.get("icaoId") or "").upper()
            if not station:
                continue
            current = latest.get(station)
            if current is None or self._sort_key(entry) > self._sort_key(current):
                latest[station] = entry
        return latest

    def _sort_key(self, entry: dict) -> float:
        observed = self._observation_time(entry)
        return observed.timestamp() if observed else float("-inf")

    @staticmethod
    def _observation_time(entry: dict) -> Optional[datetime]:
        """Observation instant from the envelope, always timezone-aware UTC."""
        obs_time = entry.get("obsTime")
        if isinstance(obs_time, (int, float)):
            return datetime.fromtimestamp(obs_time, tz=timezone.utc)

        report_time = entry.get("reportTime")
        if report_time:
            try:
                parsed = date_parser.isoparse(str(report_time))
            except ValueError:
                logger.debug("Unparseable reportTime %r", report_time)
                return None
            if parsed.tzinfo is None:
                parsed = parsed.replace(tzinfo=tz.UTC)
            return parsed.astimezone(timezone.utc)
        return None

    def _batches(self, stations: List[str]) -> Iterator[List[str]]:
        """Yield batches of stations respecting the API batch size limit."""
        cleaned = [s.strip().upper() for s in stations if s.strip()]
        for i in range(0, len(cleaned), self.BATCH_SIZE):
            yield cleaned[i:i + self.BATCH_SIZE]
