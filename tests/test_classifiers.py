"""Tests for wind, compass, temperature and report time helpers."""

import pytest
from datetime import datetime, timedelta

from dateutil import tz

from metar_decoder.classifiers import (
    classify_wind,
    degrees_to_compass,
    parse_temperature,
    resolve_report_time,
)
from metar_decoder.models import WindSeverity


class TestClassifyWind:
    """Test wind severity tiers."""

    @pytest.mark.parametrize("speed, expected", [
        (0, WindSeverity.NONE),
        (24, WindSeverity.NONE),
        (25, WindSeverity.BREEZY),
        (39, WindSeverity.BREEZY),
        (40, WindSeverity.STRONG),
        (54, WindSeverity.STRONG),
        (55, WindSeverity.SEVERE),
        (99, WindSeverity.SEVERE),
    ])
    def test_boundaries(self, speed, expected):
        assert classify_wind(speed) == expected

    def test_severity_ordering(self):
        assert WindSeverity.NONE < WindSeverity.BREEZY < WindSeverity.STRONG < WindSeverity.SEVERE
        assert max(WindSeverity.BREEZY, WindSeverity.SEVERE) == WindSeverity.SEVERE


class TestDegreesToCompass:
    """Test 8-point compass mapping."""

    def test_north(self):
        assert degrees_to_compass(0) == "N"

    def test_just_below_half_sector(self):
        # 22 / 45 = 0.49
        assert degrees_to_compass(22) == "N"

    def test_rounds_up_past_half_sector(self):
        # 44 / 45 = 0.98
        assert degrees_to_compass(44) == "NE"

    def test_northeast(self):
        assert degrees_to_compass(46) == "NE"

    def test_360_wraps_to_north(self):
        assert degrees_to_compass(360) == "N"

    @pytest.mark.parametrize("degrees, expected", [
        (90, "E"),
        (135, "SE"),
        (180, "S"),
        (225, "SW"),
        (280, "W"),
        (300, "NW"),
        (315, "NW"),
        (350, "N"),
    ])
    def test_cardinal_and_intercardinal(self, degrees, expected):
        assert degrees_to_compass(degrees) == expected


class TestParseTemperature:
    """Test signed temperature parsing."""

    def test_negative(self):
        assert parse_temperature("M05") == -5

    def test_positive(self):
        assert parse_temperature("07") == 7

    def test_minus_zero_is_zero(self):
        assert parse_temperature("M00") == 0

    def test_two_digit_value(self):
        assert parse_temperature("32") == 32

    @pytest.mark.parametrize("token", ["", "5", "M5", "X05", "123", "-05", "05\n"])
    def test_invalid_raises(self, token):
        with pytest.raises(ValueError, match="Invalid temperature token"):
            parse_temperature(token)


class TestResolveReportTime:
    """Test DDHHMM issuance time resolution."""

    def test_same_month(self):
        reference = datetime(2026, 10, 25, 12, 0, tzinfo=tz.UTC)
        result = resolve_report_time("251150Z", reference)
        assert result == datetime(2026, 10, 25, 11, 50, tzinfo=tz.UTC)

    def test_day_after_reference_uses_previous_month(self):
        reference = datetime(2026, 11, 2, 8, 0, tzinfo=tz.UTC)
        result = resolve_report_time("311200Z", reference)
        assert result == datetime(2026, 10, 31, 12, 0, tzinfo=tz.UTC)

    def test_previous_month_crosses_year(self):
        reference = datetime(2026, 1, 2, 0, 30, tzinfo=tz.UTC)
        result = resolve_report_time("311200Z", reference)
        assert result == datetime(2025, 12, 31, 12, 0, tzinfo=tz.UTC)

    def test_missing_day_rolls_forward(self):
        """September has no 31st; the day rolls into October."""
        reference = datetime(2026, 10, 2, 9, 0, tzinfo=tz.UTC)
        result = resolve_report_time("310600Z", reference)
        assert result == datetime(2026, 10, 1, 6, 0, tzinfo=tz.UTC)

    def test_token_without_z_suffix(self):
        reference = datetime(2026, 10, 25, 12, 0, tzinfo=tz.UTC)
        assert resolve_report_time("251150", reference) == datetime(2026, 10, 25, 11, 50, tzinfo=tz.UTC)

    def test_naive_reference_is_utc(self):
        result = resolve_report_time("251150Z", datetime(2026, 10, 25, 12, 0))
        assert result.tzinfo is not None
        assert result.utcoffset() == timedelta(0)
        assert result.day == 25

    def test_aware_reference_converted_to_utc(self):
        """26 Oct 00:30 in Auckland is still 25 Oct in UTC."""
        auckland = tz.gettz("Pacific/Auckland")
        reference = datetime(2026, 10, 26, 0, 30, tzinfo=auckland)
        result = resolve_report_time("251150Z", reference)
        assert result == datetime(2026, 10, 25, 11, 50, tzinfo=tz.UTC)

    def test_defaults_to_current_time(self):
        now = datetime.now(tz.UTC)
        token = now.strftime("%d%H%MZ")
        result = resolve_report_time(token)
        assert abs(result - now.replace(second=0, microsecond=0)) < timedelta(minutes=2)

    @pytest.mark.parametrize("token", ["", "2511Z", "AB1150Z", "2511500Z", "251150Z\n"])
    def test_invalid_token_raises(self, token):
        with pytest.raises(ValueError, match="Invalid report time token"):
            resolve_report_time(token)
