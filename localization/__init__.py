"""Localization package for CountryClock.

Exposes the host-side helpers the live clock depends on: rendering a
local time in a named zone, and locale/timezone detection.
"""

from .locale_detector import LocaleDetector
from .time_formatter import TimeFormatter

__all__ = ["LocaleDetector", "TimeFormatter"]
