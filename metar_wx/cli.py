#!/usr/bin/env python3
"""Command-line interface: decode a METAR or fetch the latest one for stations."""

import argparse
import json
import logging
import os
import sys
from typing import List, Optional

from metar_wx.decoder.parser import MetarDecoder
from metar_wx.presentation import DEFAULT_WIDTH, format_observation, format_station_weather
from metar_wx.sources.avwx import AviationWeatherSource

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "METAR_WX_LOG_LEVEL"


class Command:
    """Command-line interface for metar_wx."""

    def __init__(self, args):
        """
        Initialize the command interface.

        Args:
            args: Command line arguments
        """
        self.args = args
        self.decoder = MetarDecoder()

    def run_decode(self) -> int:
        """Decode a raw METAR given on the command line."""
        raw = " ".join(self.args.report)
        result = self.decoder.decode(raw)
        if not result.ok:
            logger.error("Nothing to decode: %s", result.error.value if result.error else "unknown")
            return 1

        if self.args.json:
            print(json.dumps(result.observation.to_dict(), indent=2))
        else:
            for line in format_observation(result.observation, self.args.width):
                print(line)
        return 0

    def run_fetch(self) -> int:
        """Fetch and decode the latest METAR for the given stations."""
        source = AviationWeatherSource(timeout=self.args.timeout, decoder=self.decoder)
        weather = source.fetch_stations(self.args.stations)

        if self.args.json:
            print(json.dumps([w.to_dict() for w in weather], indent=2))
        else:
            for station_weather in weather:
                print(f"Weather @ {station_weather.station}")
                for line in format_station_weather(station_weather, self.args.width):
                    print(f"  {line}")

        if weather and not weather.without_errors():
            logger.error("No weather for %s", ", ".join(w.station for w in weather))
            return 1
        return 0

    def run(self) -> int:
        return getattr(self, f"run_{self.args.command}")()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Decode METAR weather reports")
    parser.add_argument('-v', '--verbose', action='store_true', help='Verbose output')
    parser.add_argument(
        '--log-level',
        default=os.getenv(LOG_LEVEL_ENV, 'WARNING'),
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help=f'Logging level (default from ${LOG_LEVEL_ENV} or WARNING)',
    )
    parser.add_argument('--json', action='store_true', help='Print JSON instead of formatted lines')
    parser.add_argument('--width', type=int, default=DEFAULT_WIDTH, help='Width of formatted lines')

    subparsers = parser.add_subparsers(dest='command', required=True)

    decode_parser = subparsers.add_parser('decode', help='Decode a raw METAR')
    decode_parser.add_argument('report', nargs='+', help='Raw METAR, e.g. "KTIK 251753Z 04009KT 10SM OVC037 01/M04 A3010"')

    fetch_parser = subparsers.add_parser('fetch', help='Fetch the latest METAR from aviationweather.gov')
    fetch_parser.add_argument('stations', nargs='+', help='ICAO station identifiers')
    fetch_parser.add_argument(
        '--timeout',
        type=float,
        default=AviationWeatherSource.DEFAULT_TIMEOUT,
        help='HTTP timeout in seconds',
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else getattr(logging, args.log_level)
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    return Command(args).run()


if __name__ == '__main__':
    sys.exit(main())
