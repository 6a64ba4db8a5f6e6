"""Tests for StationWeather."""

from datetime import timedelta

from metar_wx.decoder.parser import MetarDecoder
from metar_wx.station import StationError, StationWeather


class TestFromReport:

    def test_decodes_report(self, ktik_report, observed_at):
        weather = StationWeather.from_report("KTIK", ktik_report, observed=observed_at, source="test")

        assert weather.ok
        assert weather.station == "KTIK"
        assert weather.raw_text == ktik_report
        assert weather.observed == observed_at
        assert weather.observation.temperature_f == 34
        assert weather.source == "test"

    def test_empty_report(self):
        weather = StationWeather.from_report("KTIK", "  ")

        assert not weather.ok
        assert weather.error == StationError.DATA_NOT_AVAILABLE
        assert weather.observation is None

    def test_custom_decoder(self, ktik_report):
        weather = StationWeather.from_report("KTIK", ktik_report, decoder=MetarDecoder(groups=[]))

        assert weather.ok
        assert weather.observation.temperature_f is None


class TestAge:

    def test_age(self, observed_at):
        weather = StationWeather(station="KTIK", observed=observed_at)
        assert weather.age(observed_at + timedelta(minutes=42)) == timedelta(minutes=42)

    def test_unknown_time(self):
        assert StationWeather(station="KTIK").age() is None

    def test_defaults_to_now(self, observed_at):
        assert StationWeather(station="KTIK", observed=observed_at).age() > timedelta(0)


class TestSerialization:

    def test_to_dict(self, ktik_report, observed_at):
        data = StationWeather.from_report("KTIK", ktik_report, observed=observed_at).to_dict()

        assert data['station'] == "KTIK"
        assert data['observed'] == "2024-01-25T17:53:00+00:00"
        assert data['observation']['temperature_f'] == 34
        assert data['error'] is None

    def test_error_to_dict(self):
        data = StationWeather(station="XXXX", error=StationError.STATION_NOT_FOUND).to_dict()

        assert data['error'] == "Station not found"
        assert data['observation'] is None

    def test_repr(self):
        assert repr(StationWeather(station="XXXX", error=StationError.FILE_NOT_FOUND)) == \
            "StationWeather(XXXX File not found)"
