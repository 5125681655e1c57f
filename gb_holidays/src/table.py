"""In-memory holiday table: per-date, per-region lookups and name composition."""

import logging
from bisect import bisect_right
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path
from types import MappingProxyType

import pandas as pd

from gb_holidays.src.data_loading import HolidayRecord, parse_record, read_holiday_file
from gb_holidays.src.errors import InvalidDate, MalformedDataRow
from gb_holidays.src.query import HolidayQuery, date_key
from gb_holidays.src.regions import ALL_REGIONS, Region, parse_regions

logger = logging.getLogger(__name__)

# Key used for the all-region holiday in legacy dict output
ALL_KEY = "ALL"


def compose_name(entry: "DayHolidays", regions: Iterable[Region]) -> str | None:
    """Build the display string for one date restricted to the given regions.

    A holiday shared by all three regions is returned under its canonical
    (England & Wales) name whatever the requested regions are. A request for
    a single region gets the plain name. Otherwise regions sharing a name are
    grouped, e.g. "Easter Monday (England & Wales, Northern Ireland)", and
    groups are joined by ", " in name order. Returns None when no requested
    region has a holiday.
    """
    regions = tuple(regions)
    if not regions:
        return None
    if entry.all_regions is not None:
        return entry.all_regions
    if len(set(regions)) == 1:
        return entry.names.get(regions[0])

    grouped: dict[str, list[str]] = {}
    for region in ALL_REGIONS:
        if region in regions and region in entry.names:
            grouped.setdefault(entry.names[region], []).append(region.display_name)

    if not grouped:
        return None
    return ", ".join(f"{name} ({', '.join(grouped[name])})" for name in sorted(grouped))


@dataclass(frozen=True)
class DayHolidays:
    """All holiday names on a single date.

    ``all_regions`` carries the England & Wales name when every region has a
    holiday that day, else None.
    """

    date: date
    names: Mapping[Region, str]
    all_regions: str | None = None

    def name_for(self, regions: Iterable[Region] = ALL_REGIONS) -> str | None:
        return compose_name(self, regions)


@dataclass(frozen=True)
class NextHoliday:
    """Names of the next holiday per region after a reference date."""

    regions: Mapping[Region, str] = field(default_factory=lambda: MappingProxyType({}))
    all_regions: str | None = None

    def __bool__(self) -> bool:
        return bool(self.regions) or self.all_regions is not None

    def as_dict(self) -> dict[str, str]:
        """Legacy mapping keyed by region code, plus "ALL" for the shared holiday."""
        result = {}
        if self.all_regions is not None:
            result[ALL_KEY] = self.all_regions
        result.update((region.value, name) for region, name in self.regions.items())
        return result


class HolidayTable:
    """Read-only holiday lookup built once from (date, region, name) rows."""

    def __init__(self, days: Mapping[date, DayHolidays]):
        self._days = MappingProxyType(dict(sorted(days.items())))
        self._dates = tuple(self._days)
        by_year: dict[int, list[DayHolidays]] = {}
        for entry in self._days.values():
            by_year.setdefault(entry.date.year, []).append(entry)
        self._by_year = MappingProxyType({y: tuple(entries) for y, entries in by_year.items()})

    @classmethod
    def load(cls, rows: Iterable) -> "HolidayTable":
        """Build a table from HolidayRecords or raw (date, region, name) triples.

        Any malformed or duplicated row raises MalformedDataRow; nothing is
        skipped.
        """
        names: dict[date, dict[Region, str]] = {}
        count = 0
        for row in rows:
            record = parse_record(row)
            day_names = names.setdefault(record.date, {})
            if record.region in day_names:
                raise MalformedDataRow(
                    f"duplicate entry for {record.date.isoformat()} {record.region.value}", row
                )
            day_names[record.region] = record.name
            count += 1

        days = {}
        for day, day_names in names.items():
            # Merge pass: canonical name comes from England & Wales
            all_regions = day_names[Region.EAW] if len(day_names) == len(ALL_REGIONS) else None
            ordered = {r: day_names[r] for r in ALL_REGIONS if r in day_names}
            days[day] = DayHolidays(day, MappingProxyType(ordered), all_regions)

        table = cls(days)
        logger.info(
            f"Loaded {count} holiday rows covering {len(table)} dates, years {list(table.years)}"
        )
        return table

    @classmethod
    def from_file(cls, path: Path) -> "HolidayTable":
        return cls.load(read_holiday_file(path))

    @property
    def years(self) -> tuple[int, ...]:
        return tuple(self._by_year)

    def __len__(self) -> int:
        return len(self._days)

    def __contains__(self, day: object) -> bool:
        return day in self._days

    def __iter__(self) -> Iterator[DayHolidays]:
        return iter(self._days.values())

    def get(self, day: date) -> DayHolidays | None:
        return self._days.get(day)

    def days(self, year: int | None = None) -> tuple[DayHolidays, ...]:
        """Entries in date order, optionally for one year only."""
        if year is None:
            return tuple(self._days.values())
        return self._by_year.get(year, ())

    def holidays(self, query: HolidayQuery) -> dict[str, str]:
        """All holidays in the query's year for its regions, keyed by date.

        Dates without a holiday in any requested region are left out.
        """
        year = query.resolved_year()
        regions = query.region_set
        if not regions:
            return {}

        result = {}
        for entry in self.days(year):
            name = compose_name(entry, regions)
            if name is not None:
                result[date_key(entry.date, query.ymd)] = name
        return result

    def is_holiday(self, query: HolidayQuery) -> str | None:
        """Composed holiday name for the query's date, or None."""
        day = query.resolved_date()
        regions = query.region_set
        if day is None or not regions:
            return None
        entry = self._days.get(day)
        if entry is None:
            return None
        return compose_name(entry, regions)

    def next_holiday(
        self,
        regions: Iterable[str | Region] | str | Region | None = None,
        reference_date: date | None = None,
    ) -> NextHoliday:
        """Find the next holiday strictly after reference_date (default today).

        The scan runs across every loaded year and stops at the first
        all-region holiday or once each requested region has a name.
        """
        wanted = parse_regions(regions)
        if not wanted:
            return NextHoliday()
        if reference_date is None:
            reference_date = date.today()
        elif isinstance(reference_date, datetime):
            reference_date = reference_date.date()
        elif not isinstance(reference_date, date):
            raise InvalidDate(f"reference_date must be a date, got {reference_date!r}")

        found: dict[Region, str] = {}
        all_regions = None
        for day in self._dates[bisect_right(self._dates, reference_date):]:
            entry = self._days[day]
            for region in wanted:
                if region in entry.names:
                    found.setdefault(region, entry.names[region])
            if entry.all_regions is not None:
                all_regions = entry.all_regions
                break
            if len(found) == len(wanted):
                break

        logger.debug(f"Next holiday after {reference_date} for {[r.value for r in wanted]}: {found}")
        ordered = {r: found[r] for r in wanted if r in found}
        return NextHoliday(MappingProxyType(ordered), all_regions)

    def records(self, year: int | None = None) -> list[HolidayRecord]:
        return [
            HolidayRecord(entry.date, region, name)
            for entry in self.days(year)
            for region, name in entry.names.items()
        ]

    def to_frame(self, year: int | None = None) -> pd.DataFrame:
        """Export raw rows as a DataFrame.

        Columns: date (datetime64), region, region_name, name, all_regions (bool).
        """
        rows = [
            {
                "date": record.date,
                "region": record.region.value,
                "region_name": record.region.display_name,
                "name": record.name,
                "all_regions": self._days[record.date].all_regions is not None,
            }
            for record in self.records(year)
        ]
        df = pd.DataFrame(rows, columns=["date", "region", "region_name", "name", "all_regions"])
        df["date"] = pd.to_datetime(df["date"])
        df["all_regions"] = df["all_regions"].astype(bool)
        return df.sort_values(["date", "region"]).reset_index(drop=True)
