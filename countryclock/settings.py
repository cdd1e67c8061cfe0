"""Rendering options for the live clock."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

DEFAULT_LOCALE = "en_US"
# Upper bound on rendered zones; smaller limits are allowed.
MAX_LIVE_ZONES = 5


@dataclass(frozen=True)
class ClockSettings:
    """Options a caller passes to `get_country_live_clock`.

    Nothing is read from disk; the defaults give the en-US 12-hour
    rendering of the first five current zones.
    """

    locale: str = DEFAULT_LOCALE
    hour12: bool = True
    max_zones: int = MAX_LIVE_ZONES
    data_dir: Optional[str] = None

    @property
    def zone_limit(self) -> int:
        return max(1, min(self.max_zones, MAX_LIVE_ZONES))
