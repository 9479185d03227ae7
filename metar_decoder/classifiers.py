"""
Classification and formatting helpers used by the decoder.

All functions are pure. Only resolve_report_time looks at the clock, and
only when no reference time is passed in.
"""

import math
import re
import logging
from datetime import datetime, timedelta
from typing import Optional

from dateutil import tz
from dateutil.relativedelta import relativedelta

from metar_decoder.models import WindSeverity

logger = logging.getLogger(__name__)

COMPASS_POINTS = ["N", "NE", "E", "SE", "S", "SW", "W", "NW"]

# (threshold_kt, severity), checked from the top
_SEVERITY_THRESHOLDS = [
    (55, WindSeverity.SEVERE),
    (40, WindSeverity.STRONG),
    (25, WindSeverity.BREEZY),
]

_TEMPERATURE_RE = re.compile(r'^(M?)(\d{2})\Z', re.ASCII)
_REPORT_TIME_RE = re.compile(r'^(\d{2})(\d{2})(\d{2})Z?\Z', re.ASCII)


def classify_wind(speed_kt: int) -> WindSeverity:
    """
    Classify a wind speed into a severity tier.

    Args:
        speed_kt: Wind speed in knots (sustained or gust)

    Returns:
        WindSeverity, NONE below 25 kt
    """
    for threshold, severity in _SEVERITY_THRESHOLDS:
        if speed_kt >= threshold:
            return severity
    return WindSeverity.NONE


def degrees_to_compass(degrees: int) -> str:
    """
    Map a wind direction to one of the 8 compass points.

    Halves round up, so 360 wraps back to N.
    """
    index = int(math.floor(degrees / 45 + 0.5)) % 8
    return COMPASS_POINTS[index]


def parse_temperature(token: str) -> int:
    """
    Parse a METAR temperature such as "M05" or "07".

    Args:
        token: Two digits, optionally prefixed with M for negative

    Returns:
        Temperature in Celsius

    Raises:
        ValueError: If the token is not a METAR temperature
    """
    match = _TEMPERATURE_RE.match(token or "")
    if not match:
        raise ValueError(f"Invalid temperature token: {token!r}")
    value = int(match.group(2))
    return -value if match.group(1) else value


def resolve_report_time(token: str, reference_time: Optional[datetime] = None) -> datetime:
    """
    Resolve a DDHHMM(Z) issuance token into a full UTC timestamp.

    The month and year come from the reference time. A day later than the
    reference day means the report was issued in the previous month. Days
    past the end of that month roll forward into the next one.

    Args:
        token: Day/hour/minute token, e.g. "311200Z"
        reference_time: Time the report was seen (defaults to now, UTC).
            Naive datetimes are taken as UTC.

    Returns:
        Timezone-aware UTC datetime

    Raises:
        ValueError: If the token is not six digits
    """
    match = _REPORT_TIME_RE.match(token or "")
    if not match:
        raise ValueError(f"Invalid report time token: {token!r}")
    day, hour, minute = (int(g) for g in match.groups())

    if reference_time is None:
        reference_time = datetime.now(tz.UTC)
    elif reference_time.tzinfo is None:
        reference_time = reference_time.replace(tzinfo=tz.UTC)
    else:
        reference_time = reference_time.astimezone(tz.UTC)

    month_start = datetime(reference_time.year, reference_time.month, 1, tzinfo=tz.UTC)
    if day > reference_time.day:
        month_start -= relativedelta(months=1)
        logger.debug("Report day %d after reference day %d, using %s",
                     day, reference_time.day, month_start.strftime('%Y-%m'))

    return month_start + timedelta(days=day - 1, hours=hour, minutes=minute)
