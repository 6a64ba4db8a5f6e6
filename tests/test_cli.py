"""Tests for the metar-wx command line."""

import json

import pytest

from metar_wx import cli
from metar_wx.collection import StationWeatherCollection
from metar_wx.sources.avwx import AviationWeatherSource
from metar_wx.station import StationError, StationWeather


@pytest.fixture
def fake_fetch(monkeypatch, ktik_report, observed_at):
    """Replace the network fetch with canned results."""
    calls = []

    def fetch_stations(self, stations):
        calls.append(list(stations))
        results = []
        for station in stations:
            if station.upper() == "KTIK":
                results.append(StationWeather.from_report("KTIK", ktik_report, observed=observed_at))
            else:
                results.append(StationWeather(station=station.upper(), error=StationError.STATION_NOT_FOUND))
        return StationWeatherCollection(results)

    monkeypatch.setattr(AviationWeatherSource, "fetch_stations", fetch_stations)
    return calls


class TestDecode:

    def test_formatted(self, capsys, ktik_report):
        assert cli.main(["decode", ktik_report]) == 0

        out = capsys.readouterr().out.splitlines()
        assert out[0] == "Temperature...............34°F"
        assert out[-1].endswith("overcast")

    def test_split_arguments(self, capsys, ktik_report):
        assert cli.main(["decode"] + ktik_report.split()) == 0
        assert "Wind Chill" in capsys.readouterr().out

    def test_json(self, capsys, ktik_report):
        assert cli.main(["--json", "decode", ktik_report]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data['temperature_f'] == 34
        assert data['wind']['direction'] == "NE"

    def test_width(self, capsys, ktik_report):
        cli.main(["--width", "40", "decode", ktik_report])

        assert all(len(line) == 40 for line in capsys.readouterr().out.splitlines())

    def test_nothing_to_decode(self, capsys):
        assert cli.main(["decode", "  "]) == 1
        assert capsys.readouterr().out == ""


class TestFetch:

    def test_formatted(self, capsys, fake_fetch):
        assert cli.main(["fetch", "KTIK", "XXXX"]) == 0

        out = capsys.readouterr().out
        assert fake_fetch == [["KTIK", "XXXX"]]
        assert "Weather @ KTIK" in out
        assert "  Temperature" in out
        assert "Weather @ XXXX\n  Station not found" in out

    def test_json(self, capsys, fake_fetch):
        assert cli.main(["--json", "fetch", "KTIK"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data[0]['station'] == "KTIK"
        assert data[0]['observation']['pressure_in_hg'] == 30.1

    def test_all_failed(self, capsys, fake_fetch):
        assert cli.main(["fetch", "XXXX"]) == 1


class TestParser:

    def test_command_required(self):
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args([])

    def test_log_level_from_environment(self, monkeypatch):
        monkeypatch.setenv(cli.LOG_LEVEL_ENV, "DEBUG")

        args = cli.build_parser().parse_args(["decode", "KTIK"])
        assert args.log_level == "DEBUG"

    def test_default_timeout(self):
        args = cli.build_parser().parse_args(["fetch", "KTIK"])
        assert args.timeout == AviationWeatherSource.DEFAULT_TIMEOUT
