"""Tests for region codes."""

import pytest

from gb_holidays.src.errors import HolidayError, UnknownRegion
from gb_holidays.src.regions import ALL_REGIONS, REGION_CODES, Region, parse_regions


class TestRegion:
    def test_codes_sorted(self):
        assert REGION_CODES == ("EAW", "NIR", "SCT")
        assert ALL_REGIONS == (Region.EAW, Region.NIR, Region.SCT)

    def test_display_names(self):
        assert Region.EAW.display_name == "England & Wales"
        assert Region.SCT.display_name == "Scotland"
        assert Region.NIR.display_name == "Northern Ireland"

    def test_parse_case_insensitive(self):
        assert Region.parse("sct") is Region.SCT
        assert Region.parse(" NIR ") is Region.NIR
        assert Region.parse(Region.EAW) is Region.EAW

    def test_parse_unknown(self):
        with pytest.raises(UnknownRegion, match="WAL"):
            Region.parse("WAL")

    def test_unknown_is_value_error(self):
        assert issubclass(UnknownRegion, HolidayError)
        assert issubclass(HolidayError, ValueError)


class TestParseRegions:
    def test_none_means_all(self):
        assert parse_regions(None) == ALL_REGIONS

    def test_empty_stays_empty(self):
        assert parse_regions([]) == ()
        assert parse_regions(set()) == ()

    def test_sorted_and_deduplicated(self):
        assert parse_regions(["SCT", "eaw", "SCT"]) == (Region.EAW, Region.SCT)

    def test_single_code_string(self):
        assert parse_regions("NIR") == (Region.NIR,)

    def test_unknown_code(self):
        with pytest.raises(UnknownRegion):
            parse_regions(["EAW", "XXX"])
