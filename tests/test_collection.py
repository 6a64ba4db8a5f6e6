"""Tests for StationWeatherCollection."""

from datetime import timedelta

import pandas as pd
import pytest

from metar_wx.collection import StationWeatherCollection
from metar_wx.station import StationError, StationWeather


@pytest.fixture
def collection(ktik_report, hot_report, observed_at):
    return StationWeatherCollection([
        StationWeather.from_report("KTIK", ktik_report, observed=observed_at),
        StationWeather.from_report("LFMN", hot_report, observed=observed_at + timedelta(hours=1)),
        StationWeather(station="XXXX", error=StationError.STATION_NOT_FOUND),
    ])


class TestFilters:

    def test_for_station(self, collection):
        result = collection.for_station("ktik")

        assert isinstance(result, StationWeatherCollection)
        assert len(result) == 1
        assert result.first().station == "KTIK"

    def test_with_errors(self, collection):
        assert [w.station for w in collection.with_errors()] == ["XXXX"]

    def test_without_errors(self, collection):
        assert [w.station for w in collection.without_errors()] == ["KTIK", "LFMN"]

    def test_where(self, collection):
        assert collection.where(error=StationError.STATION_NOT_FOUND).count() == 1

    def test_group_by(self, collection):
        groups = collection.group_by(lambda w: "ok" if w.ok else "failed")
        assert len(groups["ok"]) == 2
        assert len(groups["failed"]) == 1


class TestTime:

    def test_latest(self, collection):
        assert collection.latest().station == "LFMN"

    def test_latest_without_times(self):
        collection = StationWeatherCollection([
            StationWeather(station="AAAA"),
            StationWeather(station="BBBB"),
        ])
        assert collection.latest().station == "BBBB"

    def test_chronological(self, collection):
        assert [w.station for w in collection.chronological()] == ["XXXX", "KTIK", "LFMN"]

    def test_empty(self):
        collection = StationWeatherCollection([])
        assert collection.latest() is None
        assert not collection


class TestDataFrame:

    def test_one_row_per_station(self, collection):
        frame = collection.to_dataframe()

        assert isinstance(frame, pd.DataFrame)
        assert list(frame['station']) == ["KTIK", "LFMN", "XXXX"]

    def test_values(self, collection):
        frame = collection.to_dataframe().set_index('station')

        assert frame.loc["KTIK", 'wind_direction'] == "NE"
        assert frame.loc["KTIK", 'temperature_f'] == 34
        assert frame.loc["KTIK", 'sky'] == "overcast"
        assert frame.loc["LFMN", 'heat_index_f'] == 92
        assert frame.loc["XXXX", 'error'] == "Station not found"

    def test_empty_frame_has_columns(self):
        frame = StationWeatherCollection([]).to_dataframe()

        assert frame.empty
        assert 'temperature_f' in frame.columns


class TestRepr:

    def test_repr(self, collection):
        assert repr(collection) == "StationWeatherCollection(['KTIK', 'LFMN', 'XXXX'], count=3)"
