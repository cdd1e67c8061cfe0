"""Exceptions raised by countryclock.

Lookups (`get_country`, `get_timezone`, ...) return ``None`` for unknown
keys. Only the live clock entry point turns "not found" into an error.
"""

from __future__ import annotations


class CountryClockError(Exception):
    """Base class for all countryclock errors."""


class MissingInput(CountryClockError, ValueError):
    """No country code was supplied."""

    def __init__(self, message: str = "Country code is required") -> None:
        super().__init__(message)


class InvalidCountryCode(CountryClockError, LookupError):
    """The country code is unknown or has no usable timezones."""

    def __init__(self, country_code: str) -> None:
        self.country_code = country_code
        super().__init__(f"Invalid country code: {country_code!r}")


class DatasetError(CountryClockError):
    """The static country/timezone dataset could not be loaded."""


class ClockRenderError(CountryClockError):
    """The local time for a timezone could not be rendered."""

    def __init__(self, timezone: str, reason: str) -> None:
        self.timezone = timezone
        super().__init__(f"Could not render time for {timezone}: {reason}")
