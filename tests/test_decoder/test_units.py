"""Tests for unit conversions and rounding."""

import pytest

from metar_wx.decoder.units import (
    celsius_to_fahrenheit,
    hpa_to_in_hg,
    in_hg_to_hpa,
    meters_to_miles,
    round_half_away,
    round_int,
    speed_to_mph,
)


class TestRounding:
    """Halves round away from zero, unlike the built-in round()."""

    def test_positive_half_rounds_up(self):
        assert round_int(2.5) == 3
        assert round_int(0.5) == 1

    def test_negative_half_rounds_down(self):
        assert round_int(-2.5) == -3

    def test_decimals(self):
        assert round_half_away(0.25, 1) == 0.3
        assert round_half_away(0.644, 1) == 0.6

    def test_returns_int(self):
        assert isinstance(round_int(9.7), int)


class TestSpeed:

    def test_knots(self):
        assert speed_to_mph(9, 'KT') == 10
        assert speed_to_mph(15, 'KT') == 17

    def test_meters_per_second(self):
        assert speed_to_mph(5, 'MPS') == 11

    def test_kilometers_per_hour(self):
        assert speed_to_mph(20, 'KMH') == 12

    def test_unknown_unit(self):
        with pytest.raises(ValueError):
            speed_to_mph(10, 'MPH')


class TestDistance:

    def test_short_distance_keeps_one_decimal(self):
        assert meters_to_miles(400) == 0.6
        assert meters_to_miles(3000) == 4.8

    def test_long_distance_rounds_to_whole_miles(self):
        assert meters_to_miles(5000) == 8.0
        assert meters_to_miles(9999) == 16.0


class TestTemperature:

    def test_celsius_to_fahrenheit(self):
        assert celsius_to_fahrenheit(1) == 34
        assert celsius_to_fahrenheit(-4) == 25
        assert celsius_to_fahrenheit(30) == 86
        assert celsius_to_fahrenheit(0) == 32


class TestPressure:

    def test_in_hg_to_hpa(self):
        assert in_hg_to_hpa(30.10) == 1019
        assert in_hg_to_hpa(29.92) == 1013

    def test_hpa_to_in_hg(self):
        assert hpa_to_in_hg(1013) == 29.91
        assert hpa_to_in_hg(1012) == 29.88
