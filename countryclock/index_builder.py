"""Country -> timezone index built from the static dataset."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Tuple

from .dataset import StaticDataset

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TimezoneIndexEntry:
    """Timezone ids of one country, in dataset order."""

    current: Tuple[str, ...] = ()
    all_ids: Tuple[str, ...] = ()


def build_index(dataset: StaticDataset) -> Dict[str, TimezoneIndexEntry]:
    """Map every country id to its current and full timezone id lists.

    A zone without countries of its own borrows them from the zone it
    aliases. Only one level of alias is followed: alias targets are
    expected to be canonical zones. Zones that end up without countries
    are left out.
    """
    current: Dict[str, List[str]] = {}
    every: Dict[str, List[str]] = {}

    for tz_id, entry in dataset.timezones.items():
        countries = entry.countries
        if countries is None and entry.alias_of:
            target = dataset.timezones.get(entry.alias_of)
            if target is not None:
                countries = target.countries
        if countries is None:
            continue

        for country in countries:
            every.setdefault(country, []).append(tz_id)
            current.setdefault(country, [])
            if entry.deprecated is None:
                current[country].append(tz_id)

    index = {
        country: TimezoneIndexEntry(tuple(current[country]), tuple(ids))
        for country, ids in every.items()
    }
    logger.debug("Built timezone index for %d countries", len(index))
    return index
