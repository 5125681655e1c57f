"""Query arguments shared by every holiday lookup.

Positional and keyword call styles are both normalized into a HolidayQuery
before anything touches the table.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date

from gb_holidays.src.errors import InvalidDate, InvalidYear, MissingArgument
from gb_holidays.src.regions import Region, parse_regions

_FOUR_DIGITS = re.compile(r"\A[0-9]{4}\Z")
_DIGITS = re.compile(r"\A[0-9]+\Z")


def validate_year(year: int | str | None) -> int:
    """Return year as an int, defaulting to the current local year.

    Only exactly four digits are accepted; nothing is coerced.
    """
    if year is None:
        return date.today().year
    if isinstance(year, bool) or not isinstance(year, (int, str)):
        raise InvalidYear(year)
    if not _FOUR_DIGITS.match(str(year)):
        raise InvalidYear(year)
    return int(year)


def _as_int(value, field: str) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str) and _DIGITS.match(value):
        return int(value)
    raise InvalidDate(f"{field} must be an integer, got {value!r}")


def date_key(day: date, ymd: bool = False) -> str:
    """Format a result key: MMDD by default, YYYY-MM-DD when ymd is set."""
    if ymd:
        return day.isoformat()
    return f"{day.month:02d}{day.day:02d}"


@dataclass(frozen=True)
class HolidayQuery:
    year: int | str | None = None
    month: int | str | None = None
    day: int | str | None = None
    regions: Iterable[str | Region] | str | Region | None = None
    ymd: bool = False

    @property
    def region_set(self) -> tuple[Region, ...]:
        return parse_regions(self.regions)

    def resolved_year(self) -> int:
        return validate_year(self.year)

    def resolved_date(self) -> date | None:
        """Return the queried calendar date.

        Raises MissingArgument unless year, month and day are all given.
        Returns None for a well-formed but impossible date such as Feb 30,
        which can never be a holiday.
        """
        if self.year is None or self.month is None or self.day is None:
            raise MissingArgument("Must specify year, month and day")
        year = validate_year(self.year)
        month = _as_int(self.month, "month")
        day = _as_int(self.day, "day")
        try:
            return date(year, month, day)
        except ValueError:
            return None
