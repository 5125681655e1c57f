"""Load holiday reference rows from the tab-separated data artifact.

Each line is ``YYYY-MM-DD<TAB>CODE<TAB>Holiday name``, one line per
(date, region) pair, as produced from the gov.uk calendars.
"""

import csv
import logging
import re
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path

import pandas as pd

from gb_holidays.src.errors import MalformedDataRow, UnknownRegion
from gb_holidays.src.regions import Region

logger = logging.getLogger(__name__)

COLUMNS = ["date", "region", "name"]

_ISO_DATE = re.compile(r"\A[0-9]{4}-[0-9]{2}-[0-9]{2}\Z")


@dataclass(frozen=True)
class HolidayRecord:
    date: date
    region: Region
    name: str


def parse_record(row, line: int | None = None) -> HolidayRecord:
    """Validate one (date, region, name) row and return it as a HolidayRecord.

    Accepts a HolidayRecord, or any 3-item sequence whose date is a
    datetime.date or a YYYY-MM-DD string and whose region is a Region or code.
    """
    if isinstance(row, HolidayRecord):
        return row
    try:
        raw_date, raw_region, raw_name = row
    except (TypeError, ValueError):
        raise MalformedDataRow("expected (date, region, name)", row, line) from None

    if isinstance(raw_date, datetime):
        raw_date = raw_date.date()
    if isinstance(raw_date, date):
        day = raw_date
    elif isinstance(raw_date, str) and _ISO_DATE.match(raw_date.strip()):
        try:
            day = datetime.strptime(raw_date.strip(), "%Y-%m-%d").date()
        except ValueError:
            raise MalformedDataRow(f"invalid date {raw_date!r}", row, line) from None
    else:
        raise MalformedDataRow(f"unparseable date {raw_date!r}", row, line)

    if not isinstance(raw_region, (str, Region)):
        raise MalformedDataRow("missing region code", row, line)
    try:
        region = Region.parse(raw_region)
    except UnknownRegion:
        raise MalformedDataRow(f"unknown region code {raw_region!r}", row, line) from None

    if not isinstance(raw_name, str) or not raw_name.strip():
        raise MalformedDataRow("missing holiday name", row, line)

    return HolidayRecord(day, region, raw_name.strip())


def read_holiday_frame(path: Path) -> pd.DataFrame:
    """Read the raw TSV into a DataFrame of strings (columns: date, region, name).

    Blank lines are dropped; the index holds the 1-based source line number.
    """
    try:
        df = pd.read_csv(
            path,
            sep="\t",
            header=None,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=False,
            quoting=csv.QUOTE_NONE,
            encoding="utf-8",
        )
    except pd.errors.EmptyDataError:
        logger.warning(f"Holiday data file is empty: {path}")
        return pd.DataFrame(columns=COLUMNS)
    except (pd.errors.ParserError, UnicodeDecodeError) as e:
        raise MalformedDataRow(str(e).strip(), str(path)) from e

    df.index = df.index + 1
    # Blank lines come through as all-missing rows
    blank = df.fillna("").apply(lambda col: col.str.strip().eq("")).all(axis=1)
    df = df[~blank]

    if df.empty:
        return pd.DataFrame(columns=COLUMNS)
    if df.shape[1] != len(COLUMNS):
        raise MalformedDataRow(
            f"expected {len(COLUMNS)} tab-separated fields, found {df.shape[1]}",
            df.iloc[0].tolist(),
            int(df.index[0]),
        )
    df.columns = COLUMNS
    return df


def read_holiday_file(path: Path) -> list[HolidayRecord]:
    """Load and validate every row of a holiday TSV file.

    Raises MalformedDataRow (with the line number) on the first bad row.
    """
    path = Path(path)
    df = read_holiday_frame(path)
    records = [
        parse_record((raw_date, region, name), line=int(line))
        for line, raw_date, region, name in df.itertuples(name=None)
    ]
    logger.info(f"Read {len(records)} holiday rows from {path}")
    return records
