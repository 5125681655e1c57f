"""Module-level holiday lookups against the bundled UK data.

Every function accepts its arguments positionally or by keyword and hands a
HolidayQuery to a HolidayTable. Pass ``table=`` to query a table of your own
instead of the bundled one.

    >>> holidays(2013, ["EAW", "SCT"])["0101"]
    "New Year's Day"
    >>> is_holiday(2013, 3, 18)
    "St Patrick's Day (Northern Ireland)"
"""

import logging
import threading
from collections.abc import Iterable
from datetime import date
from functools import lru_cache

from gb_holidays.src.config import data_path, load_config
from gb_holidays.src.query import HolidayQuery
from gb_holidays.src.regions import Region
from gb_holidays.src.table import HolidayTable, NextHoliday

logger = logging.getLogger(__name__)

Regions = Iterable[str | Region] | str | Region | None

_table: HolidayTable | None = None
_table_lock = threading.Lock()


@lru_cache(maxsize=1)
def settings() -> dict:
    """Bundled config.yaml, read once per process."""
    return load_config()


def default_table() -> HolidayTable:
    """Return the bundled table, building it on first use."""
    global _table
    if _table is None:
        with _table_lock:
            if _table is None:
                path = data_path(settings())
                logger.info(f"Building bundled holiday table from {path}")
                _table = HolidayTable.from_file(path)
    return _table


def _resolve(table: HolidayTable | None) -> HolidayTable:
    return default_table() if table is None else table


def holidays(
    year: int | str | None = None,
    regions: Regions = None,
    *,
    ymd: bool | None = None,
    table: HolidayTable | None = None,
) -> dict[str, str]:
    """Holidays for a year, keyed MMDD (or YYYY-MM-DD with ymd=True).

    regions=None covers all of the UK; an empty list returns {}.
    """
    if ymd is None:
        ymd = bool(settings()["query"]["ymd"])
    query = HolidayQuery(year=year, regions=regions, ymd=ymd)
    return _resolve(table).holidays(query)


def holidays_ymd(
    year: int | str | None = None,
    regions: Regions = None,
    *,
    table: HolidayTable | None = None,
) -> dict[str, str]:
    return holidays(year, regions, ymd=True, table=table)


def is_holiday(
    year: int | str | None = None,
    month: int | str | None = None,
    day: int | str | None = None,
    regions: Regions = None,
    *,
    table: HolidayTable | None = None,
) -> str | None:
    """Holiday name for a date in the given regions, or None."""
    query = HolidayQuery(year=year, month=month, day=day, regions=regions)
    return _resolve(table).is_holiday(query)


def next_holiday(
    regions: Regions = None,
    reference_date: date | None = None,
    *,
    table: HolidayTable | None = None,
) -> NextHoliday:
    return _resolve(table).next_holiday(regions, reference_date)


def date_generated() -> str | None:
    """Date (YYYY-MM-DD) the bundled data was downloaded from gov.uk."""
    return settings()["data"]["date_generated"]


# Date::Holidays-style aliases
gb_holidays = holidays
is_gb_holiday = is_holiday
