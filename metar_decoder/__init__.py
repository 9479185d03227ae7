"""
METAR decoding for station weather displays.

Provides:
- decode / MetarDecoder: Turn raw METAR text into a DecodedReport
- DecodedReport and its parts: Wind, StationWind, CloudLayer
- Classifiers: wind severity, compass points, temperatures, report times
- format_report: Human-readable rendering
- VatsimMetarSource: Fetch live reports from metar.vatsim.net

Example:
    from metar_decoder import decode, format_report

    report = decode("NZWN 251150Z 28015G25KT 9999 -RA FEW020 BKN035 18/12 Q1015")
    print(report.wind.severity)  # WindSeverity.BREEZY
    print(format_report(report))
"""

from metar_decoder.models import (
    DecodedReport,
    Wind,
    StationWind,
    CloudLayer,
    CloudCoverage,
    WeatherPhenomenon,
    WindSeverity,
    NO_CLOUDS_DETECTED,
)
from metar_decoder.classifiers import (
    classify_wind,
    degrees_to_compass,
    parse_temperature,
    resolve_report_time,
)
from metar_decoder.decoder import MetarDecoder, decode
from metar_decoder.formatter import format_report, format_local_time
from metar_decoder.sources.vatsim import VatsimMetarSource, StationBulletin, MetarFetchError

__all__ = [
    # Models
    'DecodedReport',
    'Wind',
    'StationWind',
    'CloudLayer',
    'CloudCoverage',
    'WeatherPhenomenon',
    'WindSeverity',
    'NO_CLOUDS_DETECTED',
    # Classifiers
    'classify_wind',
    'degrees_to_compass',
    'parse_temperature',
    'resolve_report_time',
    # Decoding
    'MetarDecoder',
    'decode',
    # Rendering
    'format_report',
    'format_local_time',
    # Sources
    'VatsimMetarSource',
    'StationBulletin',
    'MetarFetchError',
]
