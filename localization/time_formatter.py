from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

import pytz
from babel.dates import format_time

HOUR12_PATTERN = "h:mm a"


@dataclass
class TimeFormatter:
    """Render wall-clock times for time zones in a given locale."""

    locale: str = "en_US"
    hour12: bool = True

    @property
    def pattern(self) -> str:
        return HOUR12_PATTERN if self.hour12 else "short"

    def format_short_time(self, tz_id: str, dt: Optional[datetime] = None) -> str:
        """Return the short local time (e.g. '7:23 AM') in a time zone.

        Args:
            tz_id: The time zone ID (e.g. 'America/New_York').
            dt: Instant to render. Naive values are taken as UTC.
                Defaults to now.

        Raises:
            pytz.UnknownTimeZoneError: If ``tz_id`` is not a known zone.
        """
        tz = pytz.timezone(tz_id)

        if dt is None:
            aware_dt = datetime.now(tz)
        else:
            aware_dt = dt
            if aware_dt.tzinfo is None:
                aware_dt = aware_dt.replace(tzinfo=timezone.utc)
            aware_dt = aware_dt.astimezone(tz)

        return format_time(aware_dt, format=self.pattern, tzinfo=tz, locale=self.locale)
