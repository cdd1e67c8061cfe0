from __future__ import annotations

from datetime import datetime

import pytest
import pytz

import localization.locale_detector as locale_detector
from localization import LocaleDetector, TimeFormatter


def test_format_short_time_12_hour(fixed_now):
    formatter = TimeFormatter("en_US")

    assert formatter.format_short_time("America/New_York", fixed_now) == "7:00 AM"
    assert formatter.format_short_time("Asia/Kathmandu", fixed_now) == "5:45 PM"


def test_format_short_time_observes_dst():
    summer = pytz.utc.localize(datetime(2024, 7, 15, 12, 0))
    assert TimeFormatter().format_short_time("America/New_York", summer) == "8:00 AM"


def test_format_short_time_naive_is_utc():
    naive = datetime(2024, 1, 15, 12, 0)
    assert TimeFormatter().format_short_time("Asia/Tokyo", naive) == "9:00 PM"


def test_format_short_time_24_hour(fixed_now):
    formatter = TimeFormatter("de_DE", hour12=False)
    assert formatter.format_short_time("Europe/Berlin", fixed_now) == "13:00"


def test_format_short_time_defaults_to_now():
    assert TimeFormatter().format_short_time("UTC").endswith(("AM", "PM"))


def test_format_short_time_unknown_zone(fixed_now):
    with pytest.raises(pytz.UnknownTimeZoneError):
        TimeFormatter().format_short_time("Mars/Olympus_Mons", fixed_now)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("en_US", "en_US"),
        ("en-us", "en_US"),
        ("en_GB.UTF-8", "en_GB"),
        ("de", "de"),
        ("", "en_US"),
        (None, "en_US"),
        ("xx_YY", "en_US"),
    ],
)
def test_normalize_locale(raw, expected):
    assert LocaleDetector().normalize_locale(raw) == expected


def test_get_local_timezone(monkeypatch):
    monkeypatch.setattr(
        locale_detector.tzlocal, "get_localzone_name", lambda: "Europe/Paris"
    )
    assert LocaleDetector().get_local_timezone() == "Europe/Paris"


def test_get_local_timezone_failure(monkeypatch):
    def broken():
        raise LookupError("no zone")

    monkeypatch.setattr(locale_detector.tzlocal, "get_localzone_name", broken)
    assert LocaleDetector().get_local_timezone() is None
