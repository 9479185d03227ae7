"""METAR decoder built from independent field extraction rules."""

import re
import logging
from typing import Optional, Tuple

from metar_decoder.models import (
    DecodedReport,
    Wind,
    StationWind,
    CloudLayer,
    CloudCoverage,
    Clouds,
    WeatherPhenomenon,
    NO_CLOUDS_DETECTED,
)
from metar_decoder.classifiers import classify_wind, parse_temperature

logger = logging.getLogger(__name__)

WIND_GROUP = r'(\d{3})(\d{2})(G(\d{2}))?KT'

_WIND_RE = re.compile(WIND_GROUP, re.ASCII)
_VISIBILITY_RE = re.compile(r'\b(\d{4})\b', re.ASCII)
_RAIN_RE = re.compile(r'\bRA\b', re.ASCII)
_CLOUD_RE = re.compile(r'(FEW|SCT|BKN|OVC)(\d{3})', re.ASCII)
_TEMPERATURE_RE = re.compile(r' (M?\d{2})/(M?\d{2}) ', re.ASCII)
_QNH_RE = re.compile(r'Q(\d{4})', re.ASCII)
_ISSUE_TIME_RE = re.compile(r'\b(\d{6}Z)\b', re.ASCII)


# --- Extraction rules ---
#
# Each rule scans the whole raw text and returns None when its pattern is
# absent. Rules do not depend on each other.

def extract_wind(raw: str) -> Optional[Wind]:
    """
    Extract the surface wind group (first match).

    Severity is taken from the gust when a non-zero gust is reported.
    """
    match = _WIND_RE.search(raw)
    if not match:
        return None
    direction = int(match.group(1))
    speed = int(match.group(2))
    gust = int(match.group(4)) if match.group(4) else None
    severity = classify_wind(gust if gust else speed)
    return Wind(direction_deg=direction, speed_kt=speed, gust_kt=gust, severity=severity)


def extract_visibility(raw: str) -> Optional[int]:
    """First standalone 4-digit token, in meters."""
    match = _VISIBILITY_RE.search(raw)
    return int(match.group(1)) if match else None


def extract_weather(raw: str) -> Optional[Tuple[WeatherPhenomenon, ...]]:
    """
    Extract rain phenomena.

    Light, heavy and plain rain are mutually exclusive and checked in that
    order. Recent rain is recorded independently of them.
    """
    weather = []
    if "-RA" in raw:
        weather.append(WeatherPhenomenon.LIGHT_RAIN)
    elif "+RA" in raw:
        weather.append(WeatherPhenomenon.HEAVY_RAIN)
    elif _RAIN_RE.search(raw):
        weather.append(WeatherPhenomenon.RAIN)
    if "RERA" in raw:
        weather.append(WeatherPhenomenon.RECENT_RAIN)
    return tuple(weather) if weather else None


def extract_clouds(raw: str) -> Optional[Clouds]:
    """
    Extract all cloud layers in text order, duplicates included.

    Falls back to NO_CLOUDS_DETECTED when NCD is present without layers.
    """
    layers = tuple(
        CloudLayer(coverage=CloudCoverage(code), height_ft=int(height) * 100)
        for code, height in _CLOUD_RE.findall(raw)
    )
    if layers:
        return layers
    if "NCD" in raw:
        return NO_CLOUDS_DETECTED
    return None


def extract_temperatures(raw: str) -> Optional[Tuple[int, int]]:
    """Space-delimited TT/DD pair, returned as (temperature, dew point)."""
    match = _TEMPERATURE_RE.search(raw)
    if not match:
        return None
    return parse_temperature(match.group(1)), parse_temperature(match.group(2))


def extract_qnh(raw: str) -> Optional[int]:
    match = _QNH_RE.search(raw)
    return int(match.group(1)) if match else None


def extract_station_wind(raw: str, station: str) -> Optional[StationWind]:
    """
    Extract a named sensor wind group such as ``KAUKAU 30035G45KT``.

    Severity uses the sustained speed only; the gust is dropped. An empty
    station name never matches.
    """
    if not station or not station.strip():
        return None
    pattern = re.escape(station) + r'\s+' + WIND_GROUP
    match = re.search(pattern, raw, re.ASCII)
    if not match:
        return None
    speed = int(match.group(2))
    return StationWind(
        name=station,
        direction_deg=int(match.group(1)),
        speed_kt=speed,
        severity=classify_wind(speed),
    )


def find_issue_token(raw: str) -> Optional[str]:
    """Return the DDHHMMZ issuance token, e.g. "251150Z"."""
    if not raw:
        return None
    match = _ISSUE_TIME_RE.search(raw)
    return match.group(1) if match else None


def is_automated(raw: str) -> bool:
    """True when the report comes from an automated station (AUTO)."""
    return bool(raw) and "AUTO" in raw


class MetarDecoder:
    """
    Decode raw METAR text into a DecodedReport.

    Decoding never raises: empty or unrecognisable input gives a report with
    every field set to None.

    Example:
        report = MetarDecoder().decode(
            "NZWN 251150Z 28015G25KT 9999 -RA FEW020 BKN035 18/12 Q1015"
        )
        print(report.wind.compass)  # W
    """

    DEFAULT_STATION_SENSOR = "KAUKAU"

    def __init__(self, station_sensor: str = DEFAULT_STATION_SENSOR):
        """
        Args:
            station_sensor: Literal name of the local wind sensor token.
        """
        self.station_sensor = station_sensor

    def decode(self, raw: Optional[str]) -> DecodedReport:
        """
        Decode a raw METAR.

        Args:
            raw: Raw METAR text, already trimmed by the caller

        Returns:
            DecodedReport (possibly empty)
        """
        if not raw or not isinstance(raw, str):
            return DecodedReport()

        temperatures = self._apply(extract_temperatures, raw)
        temperature, dew_point = temperatures if temperatures else (None, None)

        return DecodedReport(
            wind=self._apply(extract_wind, raw),
            visibility_meters=self._apply(extract_visibility, raw),
            weather=self._apply(extract_weather, raw),
            clouds=self._apply(extract_clouds, raw),
            temperature_c=temperature,
            dew_point_c=dew_point,
            qnh_hpa=self._apply(extract_qnh, raw),
            station_wind=self._apply(extract_station_wind, raw, self.station_sensor),
        )

    @staticmethod
    def _apply(rule, raw: str, *args):
        try:
            return rule(raw, *args)
        except Exception as e:
            logger.debug("Rule %s failed on %s: %s", rule.__name__, raw[:80], e)
            return None


_default_decoder = MetarDecoder()


def decode(raw: Optional[str]) -> DecodedReport:
    """Decode a raw METAR using the default station sensor."""
    return _default_decoder.decode(raw)
