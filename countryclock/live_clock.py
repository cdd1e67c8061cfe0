"""Current local time in the main timezones of a country."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Dict, List, Optional

import pytz
from babel import UnknownLocaleError

from localization import LocaleDetector, TimeFormatter

from .errors import ClockRenderError, InvalidCountryCode, MissingInput
from .models import CountryRecord
from .registry import TimezoneRegistry, get_default_registry
from .settings import ClockSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LiveClockEntry:
    timezone: str
    time: str

    def to_dict(self) -> Dict[str, str]:
        return {"timezone": self.timezone, "time": self.time}


def _select_timezones(
    country_code: str, registry: TimezoneRegistry, limit: int
) -> List[str]:
    code = country_code.upper()
    country = registry.get_country(code)
    if country is None or not country.timezones:
        raise InvalidCountryCode(country_code)

    return [registry.get_timezone(name).name for name in country.timezones[:limit]]


async def _render(formatter: TimeFormatter, tz_id: str, now: datetime) -> str:
    try:
        return await asyncio.to_thread(formatter.format_short_time, tz_id, now)
    except pytz.UnknownTimeZoneError as e:
        raise ClockRenderError(tz_id, f"unknown time zone {e}") from e
    except (UnknownLocaleError, ValueError, KeyError) as e:
        raise ClockRenderError(tz_id, str(e)) from e


async def get_country_live_clock(
    country_code: Optional[str],
    registry: Optional[TimezoneRegistry] = None,
    *,
    settings: Optional[ClockSettings] = None,
    now: Optional[datetime] = None,
) -> List[LiveClockEntry]:
    """Return the local time in up to five current timezones of a country.

    The code is upper-cased before lookup. Zones keep the order of the
    country's current timezone list.

    Raises:
        MissingInput: ``country_code`` is empty or None.
        InvalidCountryCode: the country is unknown or has no timezones.
        ClockRenderError: a zone could not be rendered.
    """
    if not country_code:
        raise MissingInput()

    if settings is None:
        settings = ClockSettings()
    if registry is None:
        registry = get_default_registry(settings.data_dir)

    tz_ids = _select_timezones(country_code, registry, settings.zone_limit)

    instant = now if now is not None else datetime.now(timezone.utc)
    formatter = TimeFormatter(
        locale=LocaleDetector().normalize_locale(settings.locale),
        hour12=settings.hour12,
    )

    result = []
    for tz_id in tz_ids:
        result.append(LiveClockEntry(tz_id, await _render(formatter, tz_id, instant)))
    logger.debug("Rendered %d clocks for %s", len(result), country_code.upper())
    return result


def get_local_country(
    registry: Optional[TimezoneRegistry] = None,
    detector: Optional[LocaleDetector] = None,
) -> Optional[CountryRecord]:
    """Country of the host's timezone, or None if it cannot be resolved."""
    detector = detector or LocaleDetector()
    tz_name = detector.get_local_timezone()
    if not tz_name:
        return None

    registry = registry or get_default_registry()
    country = registry.get_country_for_timezone(tz_name)
    if country is None:
        logger.info("Local timezone %s does not map to a country", tz_name)
    return country
