"""Static lookup tables for METAR decoding."""

from types import MappingProxyType
from typing import Mapping, Tuple

COMPASS_POINTS: Tuple[str, ...] = (
    'N', 'NNE', 'NE', 'ENE',
    'E', 'ESE', 'SE', 'SSE',
    'S', 'SSW', 'SW', 'WSW',
    'W', 'WNW', 'NW', 'NNW',
)

# Present weather, FMH-1 section 12.6.8
DESCRIPTOR_CODES: Mapping[str, str] = MappingProxyType({
    'MI': 'shallow',
    'PR': 'partial',
    'BC': 'patches of',
    'DR': 'low drifting',
    'BL': 'blowing',
    'SH': 'showers',
    'TS': 'thunderstorm',
    'FZ': 'freezing',
})

PHENOMENON_CODES: Mapping[str, str] = MappingProxyType({
    'DZ': 'drizzle',
    'RA': 'rain',
    'SN': 'snow',
    'SG': 'snow grains',
    'IC': 'ice crystals',
    'PE': 'ice pellets',
    'PL': 'ice pellets',
    'GR': 'hail',
    'GS': 'small hail',
    'UP': 'unknown',
    'BR': 'mist',
    'FG': 'fog',
    'FU': 'smoke',
    'VA': 'volcanic ash',
    'DU': 'dust',
    'SA': 'sand',
    'HZ': 'haze',
    'PY': 'spray',
    'PO': 'dust whirls',
    'SQ': 'squalls',
    'FC': 'tornado',
    'SS': 'sandstorm',
    'DS': 'duststorm',
})

WEATHER_CODES: Mapping[str, str] = MappingProxyType({**DESCRIPTOR_CODES, **PHENOMENON_CODES})

SHOWERS_CODE = 'SH'

CLEAR_SKY_CODES = frozenset({'SKC', 'CLR'})
CLEAR_SKY_DESCRIPTION = 'clear skies'

CLOUD_CODES: Mapping[str, str] = MappingProxyType({
    'FEW': 'partly cloudy',
    'SCT': 'scattered clouds',
    'BKN': 'mostly cloudy',
    'OVC': 'overcast',
    'VV': 'vertical visibility',
})

VERTICAL_VISIBILITY_CODE = 'VV'
