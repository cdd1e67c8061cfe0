"""Country and timezone lookups over a static dataset.

`TimezoneRegistry` owns the lazily built country index and the record
caches. Caches only ever grow and every value is built from immutable
data, so two callers racing to fill the same slot produce equal records.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import replace
from typing import Dict, List, Optional

from .dataset import StaticDataset, load_dataset
from .index_builder import TimezoneIndexEntry, build_index
from .models import CountryRecord, TimezoneRecord

logger = logging.getLogger(__name__)


class TimezoneRegistry:
    def __init__(self, dataset: StaticDataset) -> None:
        self.dataset = dataset
        self._index: Optional[Dict[str, TimezoneIndexEntry]] = None
        self._countries: Dict[str, CountryRecord] = {}
        self._timezones: Dict[str, TimezoneRecord] = {}

    @classmethod
    def from_data_dir(cls, data_dir=None) -> "TimezoneRegistry":
        return cls(load_dataset(data_dir))

    @property
    def index(self) -> Dict[str, TimezoneIndexEntry]:
        """Country id -> timezone ids, built on first access."""
        if self._index is None:
            self._index = build_index(self.dataset)
        return self._index

    # ------------------------------------------------------------------
    # Countries
    # ------------------------------------------------------------------
    def _build_country(self, country_id: str) -> Optional[CountryRecord]:
        name = self.dataset.countries.get(country_id)
        if not name:
            return None
        entry = self.index.get(country_id) or TimezoneIndexEntry()
        return CountryRecord(
            id=country_id,
            name=name,
            timezones=entry.current,
            all_timezones=entry.all_ids,
        )

    def get_country(
        self, country_id: str, deprecated: bool = False
    ) -> Optional[CountryRecord]:
        """Return the country record for ``country_id`` or None.

        Args:
            country_id: ISO 3166 alpha-2 code, matched case-sensitively.
            deprecated: Expose every timezone id, including deprecated
                ones, as ``timezones`` instead of the current ones only.
        """
        country = self._countries.get(country_id)
        if country is None:
            country = self._build_country(country_id)
            if country is None:
                return None
            self._countries[country_id] = country
            logger.debug("Cached country %s (%s)", country_id, country.name)
        return country.project(deprecated)

    def get_all_countries(self, deprecated: bool = False) -> Dict[str, CountryRecord]:
        return {
            country_id: self.get_country(country_id, deprecated)
            for country_id in self.dataset.countries
        }

    def get_countries_for_timezone(self, name: str) -> List[CountryRecord]:
        """Countries a timezone belongs to, following one level of alias."""
        timezone = self.get_timezone(name)
        if timezone is None:
            return []

        countries = timezone.countries
        if countries is None and timezone.alias_of:
            target = self.get_timezone(timezone.alias_of)
            if target is not None:
                countries = target.countries

        records = (self.get_country(country_id) for country_id in countries or ())
        return [record for record in records if record is not None]

    def get_country_for_timezone(self, name: str) -> Optional[CountryRecord]:
        countries = self.get_countries_for_timezone(name)
        return countries[0] if countries else None

    # ------------------------------------------------------------------
    # Timezones
    # ------------------------------------------------------------------
    def get_timezone(self, name: str) -> Optional[TimezoneRecord]:
        """Return a copy of the timezone record for ``name`` or None."""
        timezone = self._timezones.get(name)
        if timezone is None:
            entry = self.dataset.timezones.get(name)
            if entry is None:
                return None
            timezone = TimezoneRecord.from_entry(name, entry)
            self._timezones[name] = timezone
        return replace(timezone)

    def get_all_timezones(self, deprecated: bool = False) -> Dict[str, TimezoneRecord]:
        result = {}
        for name in self.dataset.timezones:
            timezone = self.get_timezone(name)
            if deprecated or not timezone.deprecated:
                result[name] = timezone
        return result

    def get_timezones_for_country(
        self, country_id: str, deprecated: bool = False
    ) -> Optional[List[TimezoneRecord]]:
        country = self.get_country(country_id, deprecated)
        if country is None:
            return None
        return [self.get_timezone(name) for name in country.timezones]


@functools.lru_cache(maxsize=None)
def get_default_registry(data_dir: Optional[str] = None) -> TimezoneRegistry:
    """Registry shared by the whole process, one per data directory.

    Without ``data_dir`` the packaged dataset is used.
    """
    return TimezoneRegistry.from_data_dir(data_dir)
