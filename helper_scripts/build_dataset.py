#!/usr/bin/env python3
"""
Regenerate countryclock/data/countries.json and timezones.json from the
IANA tz database files.

- Country names come from iso3166.tab.
- Countries per zone come from zone.tab and zone1970.tab.
- Backward links ("L target name" lines of tzdata.zi) become aliases;
  a link without countries of its own is marked deprecated (r: 1).
- Offsets are computed with pytz at a January and a July instant; the
  smaller one is the standard offset, the larger the DST offset.

Run from the project root:

    python helper_scripts/build_dataset.py --zoneinfo /usr/share/zoneinfo
"""

import argparse
import json
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import pytz

PROJECT_ROOT = Path(__file__).resolve().parent.parent
OUTPUT_DIR = PROJECT_ROOT / "countryclock" / "data"

SAMPLE_INSTANTS = (datetime(2026, 1, 15, 12), datetime(2026, 7, 15, 12))


def _rows(content: str) -> List[List[str]]:
    rows = []
    for line in content.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        rows.append(line.split("\t"))
    return rows


def parse_iso3166(content: str) -> Dict[str, str]:
    """Country code -> name."""
    return {row[0]: row[1] for row in _rows(content) if len(row) >= 2}


def parse_zone_tab(content: str) -> Dict[str, List[str]]:
    """Zone name -> country codes, for zone.tab and zone1970.tab alike."""
    zones: Dict[str, List[str]] = {}
    for row in _rows(content):
        if len(row) >= 3:
            zones.setdefault(row[2], []).extend(row[0].split(","))
    return zones


def parse_tzdata_zi(content: str) -> Tuple[List[str], Dict[str, str]]:
    """Return (zone names, link name -> target) from a tzdata.zi file."""
    zones = []
    links = {}
    for line in content.splitlines():
        parts = line.split()
        if len(parts) >= 2 and parts[0] == "Z":
            zones.append(parts[1])
        elif len(parts) >= 3 and parts[0] == "L":
            links[parts[2]] = parts[1]
    return zones, links


def offsets_for(tz_name: str) -> Tuple[int, int]:
    """(standard, dst) offsets in minutes."""
    tz = pytz.timezone(tz_name)
    minutes = []
    for instant in SAMPLE_INSTANTS:
        offset = pytz.utc.localize(instant).astimezone(tz).utcoffset()
        minutes.append(int(offset.total_seconds() // 60))
    return min(minutes), max(minutes)


def build_timezones(
    zone_names: List[str],
    links: Dict[str, str],
    *zone_tabs: Dict[str, List[str]],
) -> Dict[str, dict]:
    timezones = {}
    for name in sorted(set(zone_names) | set(links)):
        countries: List[str] = []
        for tab in zone_tabs:
            for code in tab.get(name, []):
                if code not in countries:
                    countries.append(code)

        entry: Dict[str, object] = {}
        alias: Optional[str] = links.get(name)
        if alias:
            entry["a"] = alias
        if countries:
            entry["c"] = countries

        try:
            utc, dst = offsets_for(name)
        except pytz.UnknownTimeZoneError:
            print("Skipping zone unknown to pytz:", name)
            continue
        entry["u"] = utc
        if dst != utc:
            entry["d"] = dst

        if alias and not countries:
            entry["r"] = 1
        timezones[name] = entry
    return timezones


def write_json(path: Path, data: dict) -> None:
    tmp = path.with_suffix(".tmp")
    with tmp.open("w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=1)
        f.write("\n")
    tmp.replace(path)


def main():
    parser = argparse.ArgumentParser(description=__doc__.split("\n\n")[0])
    parser.add_argument("--zoneinfo", default="/usr/share/zoneinfo", type=Path)
    parser.add_argument("--output", default=OUTPUT_DIR, type=Path)
    args = parser.parse_args()

    def read(name: str) -> str:
        return (args.zoneinfo / name).read_text(encoding="utf-8")

    countries = parse_iso3166(read("iso3166.tab"))
    zone_names, links = parse_tzdata_zi(read("tzdata.zi"))
    timezones = build_timezones(
        zone_names,
        links,
        parse_zone_tab(read("zone.tab")),
        parse_zone_tab(read("zone1970.tab")),
    )

    args.output.mkdir(parents=True, exist_ok=True)
    write_json(args.output / "countries.json", countries)
    write_json(args.output / "timezones.json", timezones)

    print(f"Wrote {len(countries)} countries and {len(timezones)} timezones to {args.output}")


if __name__ == "__main__":
    main()
