"""Single-region shortcuts: EAW, SCT and NIR."""

from datetime import date

from gb_holidays.src import api
from gb_holidays.src.regions import Region
from gb_holidays.src.table import HolidayTable, NextHoliday


class RegionHolidays:
    """The api functions with ``regions`` fixed to one region."""

    def __init__(self, region: Region, table: HolidayTable | None = None):
        self.region = region
        self.table = table

    def __repr__(self) -> str:
        return f"RegionHolidays({self.region.value})"

    @property
    def name(self) -> str:
        return self.region.display_name

    def holidays(self, year: int | str | None = None, ymd: bool = False) -> dict[str, str]:
        return api.holidays(year, [self.region], ymd=ymd, table=self.table)

    def holidays_ymd(self, year: int | str | None = None) -> dict[str, str]:
        return self.holidays(year, ymd=True)

    def is_holiday(
        self,
        year: int | str | None = None,
        month: int | str | None = None,
        day: int | str | None = None,
    ) -> str | None:
        return api.is_holiday(year, month, day, [self.region], table=self.table)

    def next_holiday(self, reference_date: date | None = None) -> NextHoliday:
        return api.next_holiday([self.region], reference_date, table=self.table)


EAW = RegionHolidays(Region.EAW)
NIR = RegionHolidays(Region.NIR)
SCT = RegionHolidays(Region.SCT)

_BY_REGION = {r.region: r for r in (EAW, NIR, SCT)}


def for_region(code: str | Region) -> RegionHolidays:
    return _BY_REGION[Region.parse(code)]

