"""Tests for plain-text rendering of decoded weather."""

from datetime import timedelta

import pytest

from metar_wx.decoder.models import Visibility, VisibilityQualifier, Wind
from metar_wx.decoder.parser import decode_metar
from metar_wx.presentation import (
    format_age,
    format_line,
    format_number,
    format_observation,
    format_station_weather,
    format_visibility,
    format_wind,
)
from metar_wx.station import StationError, StationWeather


class TestFormatLine:

    def test_pads_with_dots(self):
        line = format_line("Wind", "NE 10 mph", 30)

        assert line == "Wind" + "." * 17 + "NE 10 mph"
        assert len(line) == 30

    def test_overflow_uses_two_dots(self):
        assert format_line("Wx", "heavy thunderstorm rain showers", 20) == "Wx..heavy thunderstorm rain showers"

    def test_exact_fit_uses_two_dots(self):
        assert format_line("Sky", "x" * 27, 30) == "Sky.." + "x" * 27


class TestFormatValues:

    @pytest.mark.parametrize('value, expected', [
        (10.0, "10"),
        (0.6, "0.6"),
        (0.25, "0.25"),
        (1.5, "1.5"),
    ])
    def test_number(self, value, expected):
        assert format_number(value) == expected

    def test_calm_wind(self):
        assert format_wind(Wind(direction=Wind.CALM)) == "calm"

    def test_gusting_wind(self):
        assert format_wind(Wind(direction="WSW", speed_mph=17, gust_mph=29)) == "WSW 17/29 mph"

    @pytest.mark.parametrize('qualifier, expected', [
        (VisibilityQualifier.EXACT, "7 mi"),
        (VisibilityQualifier.AT_LEAST, ">7 mi"),
        (VisibilityQualifier.AT_MOST, "<7 mi"),
    ])
    def test_visibility_glyphs(self, qualifier, expected):
        assert format_visibility(Visibility(qualifier=qualifier, value=7.0)) == expected

    @pytest.mark.parametrize('minutes, expected', [
        (42, "42 min"),
        (90, "90 min"),
        (95, "1:35 hr"),
        (125, "2:05 hr"),
    ])
    def test_age(self, minutes, expected):
        assert format_age(timedelta(minutes=minutes)) == expected


class TestFormatObservation:

    def test_cold_report(self, ktik_report):
        lines = format_observation(decode_metar(ktik_report).observation)

        assert [line.split('.')[0] for line in lines] == [
            "Temperature", "Wind Chill", "Dew Point", "Humidity",
            "Pressure", "Wind", "Visibility", "Sky",
        ]
        assert lines[0] == "Temperature...............34°F"
        assert lines[3].endswith("70%")
        assert lines[4].endswith("30.10 in")
        assert lines[5].endswith("NE 10 mph")
        assert lines[6].endswith("10 mi")
        assert lines[7].endswith("overcast")
        assert all(len(line) == 30 for line in lines)

    def test_hot_report_has_heat_index(self, hot_report):
        lines = format_observation(decode_metar(hot_report).observation)

        assert format_line("Heat Index", "92°F") in lines
        assert not any(line.startswith("Wind Chill") for line in lines)

    def test_conditions_line(self):
        lines = format_observation(decode_metar("EGLL 251750Z 24008KT 0400 FG VV002 08/08 Q1020").observation)

        assert lines[-2] == format_line("Sky", "VV 200 ft")
        assert lines[-1] == format_line("Wx", "fog")


class TestFormatStationWeather:

    def test_age_line_first(self, ktik_report, observed_at):
        weather = StationWeather.from_report("KTIK", ktik_report, observed=observed_at)
        lines = format_station_weather(weather, now=observed_at + timedelta(minutes=42))

        assert lines[0] == format_line("Age", "42 min")
        assert lines[1:] == format_observation(weather.observation)

    def test_without_time(self, ktik_report):
        weather = StationWeather.from_report("KTIK", ktik_report)

        assert format_station_weather(weather) == format_observation(weather.observation)

    def test_error(self):
        weather = StationWeather(station="XXXX", error=StationError.STATION_NOT_FOUND)

        assert format_station_weather(weather) == ["Station not found"]
