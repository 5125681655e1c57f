"""Errors raised by holiday queries and table construction."""


class HolidayError(ValueError):
    """Base class for all gb_holidays validation failures."""


class InvalidYear(HolidayError):
    def __init__(self, year):
        super().__init__(f"Year must be numeric and four digits, eg '2004' (got {year!r})")
        self.year = year


class MissingArgument(HolidayError):
    pass


class InvalidDate(HolidayError):
    pass


class UnknownRegion(HolidayError):
    pass


class MalformedDataRow(HolidayError):
    """A reference data row that cannot be loaded.

    Raised only while building a HolidayTable, never by queries.
    """

    def __init__(self, reason: str, row, line: int | None = None):
        where = f"line {line}" if line is not None else "row"
        super().__init__(f"Malformed holiday data at {where}: {reason} ({row!r})")
        self.reason = reason
        self.row = row
        self.line = line
