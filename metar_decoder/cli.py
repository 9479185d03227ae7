#!/usr/bin/env python3

import sys
import json
import argparse
import logging
from typing import List, Optional

from metar_decoder.decoder import MetarDecoder, find_issue_token
from metar_decoder.classifiers import resolve_report_time
from metar_decoder.formatter import format_report, format_local_time, DEFAULT_STATION_LABEL
from metar_decoder.sources.vatsim import (
    VatsimMetarSource,
    MetarFetchError,
    KNOWN_STATIONS,
    DEFAULT_STATION,
)

logger = logging.getLogger(__name__)


class Command:
    """Command-line interface for displaying decoded METARs."""

    def __init__(self, args, source: Optional[VatsimMetarSource] = None, out=None):
        """
        Initialize the command interface.

        Args:
            args: Command line arguments
            source: METAR source (created on demand when fetching)
            out: Output stream, defaults to stdout
        """
        self.args = args
        self.decoder = MetarDecoder(station_sensor=args.sensor)
        self.source = source
        self.out = out or sys.stdout

    @property
    def station_label(self) -> str:
        """Display name for the local wind sensor."""
        if self.args.sensor_label:
            return self.args.sensor_label
        if self.args.sensor == MetarDecoder.DEFAULT_STATION_SENSOR:
            return DEFAULT_STATION_LABEL
        return self.args.sensor

    def print(self, text: str = "") -> None:
        self.out.write(text + "\n")

    def run(self) -> int:
        if self.args.raw is not None:
            return self.run_raw(self.args.raw.strip())
        return self.run_station(self.args.station.upper())

    def run_raw(self, raw: str) -> int:
        """Decode text given on the command line, no network access."""
        decoded = self.decoder.decode(raw)
        if self.args.json:
            self.print(json.dumps(decoded.to_dict(), indent=2))
            return 0

        self.print(raw or "No METAR received.")
        self.print()
        self.print(format_report(decoded, highlight=self.args.color, station_label=self.station_label))

        token = find_issue_token(raw)
        if token:
            issued = resolve_report_time(token)
            self.print()
            self.print(f"METAR issued: {format_local_time(issued, self.args.timezone)}")
        return 0

    def run_station(self, station: str) -> int:
        """Fetch the current METAR for a station and display it."""
        if station not in KNOWN_STATIONS:
            logger.info("Station %s is not one of %s", station, ", ".join(KNOWN_STATIONS))

        if self.source is None:
            self.source = VatsimMetarSource(timeout=self.args.timeout, decoder=self.decoder)

        try:
            bulletin = self.source.fetch_bulletin(station)
        except MetarFetchError as e:
            logger.debug("Fetch error: %s", e)
            self.print("Failed to fetch METAR.")
            self.print(str(e))
            return 1

        if self.args.json:
            self.print(json.dumps(bulletin.to_dict(), indent=2))
            return 0

        self.print(bulletin.raw_text or "No METAR received.")
        self.print(f"• Data from {bulletin.source_label} • {'AUTO' if bulletin.automated else 'MANUAL'} •")
        self.print()
        self.print(format_report(bulletin.decoded, highlight=self.args.color, station_label=self.station_label))
        self.print()
        if bulletin.issued_at:
            self.print(f"METAR issued: {format_local_time(bulletin.issued_at, self.args.timezone)}")
        self.print(f"Last updated: {format_local_time(bulletin.fetched_at, self.args.timezone)}")
        return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Fetch and decode station METARs')
    parser.add_argument('station', help='ICAO station code', nargs='?', default=DEFAULT_STATION)
    parser.add_argument('-r', '--raw', help='Decode this METAR text instead of fetching')
    parser.add_argument('-s', '--sensor', help='Local wind sensor name', default=MetarDecoder.DEFAULT_STATION_SENSOR)
    parser.add_argument('-l', '--sensor-label', help='Display name for the local wind sensor')
    parser.add_argument('-z', '--timezone', help='Display timezone', default='Pacific/Auckland')
    parser.add_argument('-t', '--timeout', help='HTTP timeout in seconds', type=int, default=VatsimMetarSource.DEFAULT_TIMEOUT)
    parser.add_argument('--no-color', help='Disable wind severity colours', dest='color', action='store_false')
    parser.add_argument('--json', help='Output decoded data as JSON', action='store_true')
    parser.add_argument('-v', '--verbose', help='Verbose output', action='store_true')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # Configure logging
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    cmd = Command(args)
    return cmd.run()


if __name__ == '__main__':
    sys.exit(main())
