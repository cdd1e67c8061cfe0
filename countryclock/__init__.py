"""CountryClock: the timezones of a country and the current time in each.

`get_country_live_clock` is the entry point; `TimezoneRegistry` gives
direct access to the country and timezone records behind it.
"""

from .dataset import StaticDataset, load_dataset
from .errors import (
    ClockRenderError,
    CountryClockError,
    DatasetError,
    InvalidCountryCode,
    MissingInput,
)
from .index_builder import TimezoneIndexEntry, build_index
from .live_clock import LiveClockEntry, get_country_live_clock, get_local_country
from .models import CountryRecord, TimezoneRecord
from .offsets import format_offset
from .registry import TimezoneRegistry, get_default_registry
from .settings import ClockSettings

__all__ = [
    "ClockRenderError",
    "ClockSettings",
    "CountryClockError",
    "CountryRecord",
    "DatasetError",
    "InvalidCountryCode",
    "LiveClockEntry",
    "MissingInput",
    "StaticDataset",
    "TimezoneIndexEntry",
    "TimezoneRecord",
    "TimezoneRegistry",
    "build_index",
    "format_offset",
    "get_country_live_clock",
    "get_default_registry",
    "get_local_country",
    "load_dataset",
]
