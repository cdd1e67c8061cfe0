"""Country and timezone records handed out by the registry."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional, Tuple

from .dataset import TimezoneEntry
from .offsets import format_offset


@dataclass(frozen=True)
class CountryRecord:
    id: str
    name: str
    timezones: Tuple[str, ...]
    all_timezones: Tuple[str, ...]

    def project(self, deprecated: bool = False) -> "CountryRecord":
        """Return the record with ``timezones`` set to the requested list.

        The record itself is never changed; with ``deprecated=True`` a new
        record sharing the same tuples is returned.
        """
        if not deprecated or self.timezones == self.all_timezones:
            return self
        return replace(self, timezones=self.all_timezones)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "timezones": list(self.timezones),
            "allTimezones": list(self.all_timezones),
        }


@dataclass(frozen=True)
class TimezoneRecord:
    name: str
    countries: Optional[Tuple[str, ...]]
    utc_offset: int
    utc_offset_str: str
    dst_offset: int
    dst_offset_str: str
    alias_of: Optional[str] = None
    deprecated: Optional[bool] = None

    @classmethod
    def from_entry(cls, name: str, entry: TimezoneEntry) -> "TimezoneRecord":
        return cls(
            name=name,
            countries=entry.countries,
            utc_offset=entry.utc_offset,
            utc_offset_str=format_offset(entry.utc_offset),
            dst_offset=entry.dst_offset,
            dst_offset_str=format_offset(entry.dst_offset),
            alias_of=entry.alias_of,
            deprecated=True if entry.deprecated else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "name": self.name,
            "countries": list(self.countries) if self.countries is not None else None,
            "utcOffset": self.utc_offset,
            "utcOffsetStr": self.utc_offset_str,
            "dstOffset": self.dst_offset,
            "dstOffsetStr": self.dst_offset_str,
            "aliasOf": self.alias_of,
        }
        if self.deprecated:
            data["deprecated"] = True
        return data
