from __future__ import annotations

from datetime import datetime, timezone

import pytest

from countryclock import StaticDataset, TimezoneRegistry, load_dataset

COUNTRIES = {
    "US": "United States",
    "IN": "India",
    "CH": "Switzerland",
    "DE": "Germany",
    "XX": "Nowhere",
}

TIMEZONES = {
    "America/New_York": {"c": ["US"], "u": -300, "d": -240},
    "America/Chicago": {"c": ["US"], "u": -360, "d": -300},
    "US/Eastern": {"a": "America/New_York", "u": -300, "d": -240, "r": 1},
    "Asia/Calcutta": {"a": "Asia/Kolkata", "u": 330, "r": 1},
    "Asia/Kolkata": {"c": ["IN"], "u": 330},
    "Europe/Zurich": {"c": ["CH", "DE"], "u": 60, "d": 120},
    "Europe/Busingen": {"a": "Europe/Zurich", "c": ["DE"], "u": 60, "d": 120},
    # alias of an alias: only one level is followed
    "Legacy/Eastern": {"a": "US/Eastern", "u": -300, "r": 1},
    "Etc/UTC": {"u": 0},
    "UTC": {"a": "Etc/UTC", "u": 0, "r": 1},
}

# 2024-01-15 12:00 UTC: no DST anywhere in the northern hemisphere.
FIXED_NOW = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def dataset() -> StaticDataset:
    return StaticDataset.from_mappings(COUNTRIES, TIMEZONES)


@pytest.fixture
def registry(dataset) -> TimezoneRegistry:
    return TimezoneRegistry(dataset)


@pytest.fixture(scope="session")
def packaged_registry() -> TimezoneRegistry:
    return TimezoneRegistry(load_dataset())


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW
