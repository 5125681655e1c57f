"""Tests for the single-region shortcuts."""

from datetime import date

import pytest

from gb_holidays.src import api
from gb_holidays.src.errors import UnknownRegion
from gb_holidays.src.regional import EAW, NIR, SCT, RegionHolidays, for_region
from gb_holidays.src.regions import Region
from gb_holidays.src.table import HolidayTable


class TestRegionHolidays:
    def test_holidays_match_api(self):
        assert SCT.holidays(2013) == api.holidays(2013, ["SCT"])
        assert NIR.holidays_ymd(2014) == api.holidays(2014, ["NIR"], ymd=True)

    def test_scotland_only_holiday(self):
        assert SCT.is_holiday(2013, 1, 2) == "2nd January"
        assert EAW.is_holiday(2013, 1, 2) is None

    def test_keyword_arguments(self):
        assert NIR.is_holiday(year=2013, month=7, day=12) == "Battle of the Boyne (Orangemen's Day)"

    def test_scotland_holidays_2013(self):
        result = SCT.holidays(2013)
        assert result["1202"] == "St Andrew's Day"
        assert result["0805"] == "Summer bank holiday"
        assert "0826" not in result

    def test_next_holiday(self):
        result = NIR.next_holiday(date(2013, 3, 1))
        assert result.regions == {Region.NIR: "St Patrick's Day"}

    def test_own_table(self):
        table = HolidayTable.load([("2030-11-30", "SCT", "St Andrew's Day")])
        scotland = RegionHolidays(Region.SCT, table)
        assert scotland.holidays(2030) == {"1130": "St Andrew's Day"}
        assert scotland.name == "Scotland"

    def test_mmdd_keys_regardless_of_config(self, monkeypatch):
        monkeypatch.setattr(api, "settings", lambda: {"query": {"ymd": True}, "data": {}})
        assert "1202" in SCT.holidays(2013)
        assert "2013-12-02" in SCT.holidays(2013, ymd=True)
        assert "2013-12-02" in api.holidays(2013, ["SCT"])


class TestForRegion:
    def test_lookup(self):
        assert for_region("eaw") is EAW
        assert for_region(Region.SCT) is SCT

    def test_unknown(self):
        with pytest.raises(UnknownRegion):
            for_region("WAL")
