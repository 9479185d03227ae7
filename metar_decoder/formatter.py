"""Human-readable rendering of decoded reports."""

from datetime import datetime
from typing import List, Optional, Union

from dateutil import tz

from metar_decoder.models import DecodedReport, Wind, StationWind, WindSeverity

DEFAULT_TIMEZONE = "Pacific/Auckland"
DEFAULT_STATION_LABEL = "Mt Kaukau"
EMPTY_REPORT_TEXT = "No detailed data decoded."

RESET = "\033[0m"
SEVERITY_COLORS = {
    WindSeverity.NONE: "",
    WindSeverity.BREEZY: "\033[93m",  # Yellow
    WindSeverity.STRONG: "\033[91m",  # Red
    WindSeverity.SEVERE: "\033[95m",  # Magenta
}


def format_wind(wind: Union[Wind, StationWind], highlight: bool = False) -> str:
    """
    Format a wind reading, e.g. "280° (W) at 15 knots gusting 25".

    Station winds never show a gust, and a zero gust is not shown.
    """
    text = f"{wind.direction_deg}° ({wind.compass}) at {wind.speed_kt} knots"
    gust = getattr(wind, 'gust_kt', None)
    if gust:
        text += f" gusting {gust}"

    color = SEVERITY_COLORS.get(wind.severity, "") if highlight else ""
    if color:
        return f"{color}{text}{RESET}"
    return text


def format_visibility(report: DecodedReport) -> Optional[str]:
    if report.visibility_meters is None:
        return None
    return f"{report.visibility_meters} metres ({report.visibility_km:.1f} km)"


def _bullets(items: List[str]) -> List[str]:
    return [f"  • {item}" for item in items]


def format_report(
    report: DecodedReport,
    highlight: bool = False,
    station_label: str = DEFAULT_STATION_LABEL,
) -> str:
    """
    Render a decoded report as labelled text lines.

    Args:
        report: Decoded report
        highlight: Colour wind readings by severity (ANSI)
        station_label: Display name of the local wind sensor

    Returns:
        Multi-line text, or EMPTY_REPORT_TEXT when nothing was decoded
    """
    lines = []

    if report.wind:
        lines.append(f"Wind: {format_wind(report.wind, highlight)}")

    visibility = format_visibility(report)
    if visibility:
        lines.append(f"Visibility: {visibility}")

    if report.weather:
        lines.append("Rain:")
        lines += _bullets([w.label for w in report.weather])

    if report.clouds is not None:
        lines.append("Clouds:")
        if report.no_clouds_detected:
            lines += _bullets([report.clouds.label])
        else:
            lines += _bullets([f"{c.coverage.label} at {c.height_ft} ft" for c in report.clouds])

    if report.temperature_c is not None and report.dew_point_c is not None:
        lines.append(f"Temperature: {report.temperature_c}°C, Dew Point: {report.dew_point_c}°C")

    if report.qnh_hpa is not None:
        lines.append(f"QNH: {report.qnh_hpa} hPa")

    if report.station_wind:
        lines.append(f"{station_label} Wind: {format_wind(report.station_wind, highlight)}")

    return "\n".join(lines) if lines else EMPTY_REPORT_TEXT


def format_local_time(dt: datetime, tz_name: str = DEFAULT_TIMEZONE) -> str:
    """
    Format a timestamp in local time, e.g. "25/10/2026, 00:50:00 NZDT".

    Naive datetimes are taken as UTC.
    """
    zone = tz.gettz(tz_name)
    if zone is None:
        raise ValueError(f"Unknown timezone: {tz_name}")
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=tz.UTC)
    local = dt.astimezone(zone)
    return f"{local.strftime('%d/%m/%Y, %H:%M:%S')} {local.tzname()}"
