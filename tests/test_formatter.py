"""Tests for text rendering of decoded reports."""

import pytest
from datetime import datetime

from dateutil import tz

from metar_decoder.decoder import decode
from metar_decoder.formatter import (
    format_report,
    format_wind,
    format_local_time,
    EMPTY_REPORT_TEXT,
    SEVERITY_COLORS,
    RESET,
)
from metar_decoder.models import DecodedReport, Wind, WindSeverity


class TestFormatReport:
    """Test full report rendering."""

    def test_wellington_report(self, wellington_metar):
        text = format_report(decode(wellington_metar))

        assert text.splitlines() == [
            "Wind: 280° (W) at 15 knots gusting 25",
            "Visibility: 9999 metres (9.9 km)",
            "Rain:",
            "  • Light rain",
            "Clouds:",
            "  • Few at 2000 ft",
            "  • Broken at 3500 ft",
            "Temperature: 18°C, Dew Point: 12°C",
            "QNH: 1015 hPa",
        ]

    def test_station_wind_line(self, kaukau_metar):
        text = format_report(decode(kaukau_metar))
        assert text.splitlines()[-1] == "Mt Kaukau Wind: 300° (NW) at 45 knots"

    def test_station_label(self, kaukau_metar):
        text = format_report(decode(kaukau_metar), station_label="Hilltop")
        assert "Hilltop Wind: 300° (NW) at 45 knots" in text

    def test_no_clouds_detected(self, auto_ncd_metar):
        text = format_report(decode(auto_ncd_metar))
        assert "Clouds:\n  • No clouds detected" in text
        assert "Temperature: -2°C, Dew Point: -5°C" in text

    def test_rain_and_recent_rain(self):
        text = format_report(decode("3000 RA BKN008 RERA"))
        assert "Rain:\n  • Rain\n  • Recent rain" in text

    def test_empty_report(self):
        assert format_report(DecodedReport()) == EMPTY_REPORT_TEXT

    def test_no_colour_by_default(self, kaukau_metar):
        assert "\033[" not in format_report(decode(kaukau_metar))


class TestFormatWind:
    """Test wind rendering and highlighting."""

    def test_highlight_breezy(self):
        wind = Wind(direction_deg=280, speed_kt=15, gust_kt=25, severity=WindSeverity.BREEZY)
        text = format_wind(wind, highlight=True)
        assert text.startswith(SEVERITY_COLORS[WindSeverity.BREEZY])
        assert text.endswith(RESET)

    def test_highlight_calm_has_no_colour(self):
        wind = Wind(direction_deg=280, speed_kt=5)
        assert format_wind(wind, highlight=True) == "280° (W) at 5 knots"

    def test_zero_gust_not_shown(self):
        wind = Wind(direction_deg=90, speed_kt=5, gust_kt=0)
        assert format_wind(wind) == "90° (E) at 5 knots"


class TestFormatLocalTime:
    """Test local time display."""

    def test_daylight_time(self):
        dt = datetime(2026, 10, 25, 11, 50, tzinfo=tz.UTC)
        assert format_local_time(dt) == "26/10/2026, 00:50:00 NZDT"

    def test_standard_time(self):
        dt = datetime(2026, 7, 1, 0, 0, tzinfo=tz.UTC)
        assert format_local_time(dt) == "01/07/2026, 12:00:00 NZST"

    def test_naive_is_utc(self):
        assert format_local_time(datetime(2026, 7, 1, 0, 0), "UTC") == "01/07/2026, 00:00:00 UTC"

    def test_unknown_zone(self):
        with pytest.raises(ValueError, match="Unknown timezone"):
            format_local_time(datetime(2026, 7, 1), "Not/AZone")
