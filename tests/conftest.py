import pytest
from datetime import datetime, timezone

from metar_wx.decoder.parser import MetarDecoder
from metar_wx.decoder.session import ParseSession


@pytest.fixture
def decoder() -> MetarDecoder:
    """Return a decoder with the standard group order."""
    return MetarDecoder()


@pytest.fixture
def session() -> ParseSession:
    """Return an empty parse session."""
    return ParseSession(tokens=("KTIK",))


@pytest.fixture
def ktik_report() -> str:
    """A cold, overcast US report."""
    return "KTIK 251753Z 04009KT 10SM OVC037 01/M04 A3010"


@pytest.fixture
def hot_report() -> str:
    """A hot, humid European report."""
    return "LFMN 121450Z 18012KT 9999 FEW030 30/22 Q1012"


@pytest.fixture
def observed_at() -> datetime:
    """Observation instant matching the sample reports."""
    return datetime(2024, 1, 25, 17, 53, tzinfo=timezone.utc)
