"""
Locale and host timezone detection for CountryClock.

Locale strings arrive from settings files and callers in many shapes
("en-us", "en_US.UTF-8", "en"); this module turns them into identifiers
babel understands and finds the host's IANA timezone.
"""

import logging
from typing import Optional

import tzlocal
from babel import Locale, UnknownLocaleError

logger = logging.getLogger(__name__)


class LocaleDetector:
    """Normalises locale codes and detects the host timezone."""

    # Matches the en-US rendering the live clock is built around
    DEFAULT_LOCALE = "en_US"

    def normalize_locale(self, locale_str: Optional[str]) -> str:
        """
        Normalize a locale string to a babel identifier.

        Args:
            locale_str: Raw locale string

        Returns:
            str: Normalized locale code, DEFAULT_LOCALE when unusable
        """
        if not locale_str:
            return self.DEFAULT_LOCALE

        # Remove encoding and other suffixes
        cleaned = locale_str.split(".")[0].split("@")[0].replace("-", "_")

        try:
            return str(Locale.parse(cleaned))
        except (UnknownLocaleError, ValueError) as e:
            logger.warning(
                "Unusable locale %r, falling back to %s: %s",
                locale_str,
                self.DEFAULT_LOCALE,
                e,
            )
            return self.DEFAULT_LOCALE

    def get_local_timezone(self) -> Optional[str]:
        """
        Return the host's IANA timezone name, or None if undetectable.
        """
        try:
            return tzlocal.get_localzone_name()
        except Exception as e:
            logger.warning("Could not determine local timezone: %s", e)
            return None
