"""Static country and timezone dataset.

The dataset ships as two JSON files in ``countryclock/data``:

``countries.json``
    ``{"US": "United States", ...}``

``timezones.json``
    ``{"America/New_York": {"c": ["US"], "u": -300, "d": -240}, ...}``

    ``c``  countries the zone belongs to (optional)
    ``a``  canonical zone this id is an alias of (optional)
    ``u``  standard UTC offset in minutes
    ``d``  DST offset in minutes (optional, defaults to ``u``)
    ``r``  deprecation marker (optional)

File order is kept; it is the iteration order used to build the index.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from .errors import DatasetError

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"
COUNTRIES_FILE_NAME = "countries.json"
TIMEZONES_FILE_NAME = "timezones.json"


@dataclass(frozen=True)
class TimezoneEntry:
    """One raw timezone entry of the dataset."""

    countries: Optional[Tuple[str, ...]]
    alias_of: Optional[str]
    utc_offset: int
    dst_offset: int
    # None means the entry carries no marker at all.
    deprecated: Optional[bool] = None

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "TimezoneEntry":
        countries = raw.get("c")
        utc_offset = int(raw.get("u", 0))
        dst_offset = raw.get("d")
        marker = raw.get("r")
        return cls(
            countries=tuple(countries) if countries is not None else None,
            alias_of=raw.get("a"),
            utc_offset=utc_offset,
            dst_offset=utc_offset if dst_offset is None else int(dst_offset),
            deprecated=None if marker is None else bool(marker),
        )


class StaticDataset:
    """Read-only view over the country and timezone mappings."""

    def __init__(
        self,
        countries: Mapping[str, str],
        timezones: Mapping[str, TimezoneEntry],
    ) -> None:
        self.countries: Mapping[str, str] = MappingProxyType(dict(countries))
        self.timezones: Mapping[str, TimezoneEntry] = MappingProxyType(
            dict(timezones)
        )

    @classmethod
    def from_mappings(
        cls,
        countries: Mapping[str, str],
        timezones: Mapping[str, Mapping[str, Any]],
    ) -> "StaticDataset":
        """Build a dataset from raw mappings in the JSON file shape."""
        return cls(
            countries,
            {name: TimezoneEntry.from_raw(raw) for name, raw in timezones.items()},
        )

    def __repr__(self) -> str:
        return (
            f"<StaticDataset countries={len(self.countries)} "
            f"timezones={len(self.timezones)}>"
        )


def _read_json(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as fh:
            data = json.load(fh)
    except (OSError, json.JSONDecodeError) as e:
        logger.error("Failed to load dataset file %s: %s", path, e)
        raise DatasetError(f"Failed to load {path}: {e}") from e

    if not isinstance(data, dict):
        logger.error("Dataset file %s does not hold a JSON object", path)
        raise DatasetError(f"{path} must contain a JSON object")
    return data


def load_dataset(data_dir: Optional[Union[str, Path]] = None) -> StaticDataset:
    """Load the dataset from ``data_dir`` (default: the packaged data)."""
    base = Path(data_dir) if data_dir else DATA_DIR

    countries = _read_json(base / COUNTRIES_FILE_NAME)
    timezones = _read_json(base / TIMEZONES_FILE_NAME)

    dataset = StaticDataset.from_mappings(countries, timezones)
    logger.debug("Loaded %r from %s", dataset, base)
    return dataset
