"""Parser for the semicolon-delimited working-times export.

The first line is always the header. Columns are fixed by the export format:
0 = date (DD.MM.YYYY), 1 = category label, 6/7 = start/end (HH:MM).
Rows that are too short or carry no valid date (typically blank trailing
lines) are skipped.
"""

from __future__ import annotations

import re
from typing import Optional

from ..common.datetime_utils import parse_clock_minutes, parse_table_date
from ..core.constants import (
    CATEGORY_COLUMN,
    DATE_COLUMN,
    END_TIME_COLUMN,
    FLEX_DAY_CODE,
    MIN_COLUMNS,
    START_TIME_COLUMN,
    TABLE_DELIMITER,
    VACATION_CODE,
)
from ..core.enums import AttendanceCategory
from ..core.exceptions import MalformedRowError, ParseError
from .model import AttendanceRecord

_NON_DIGITS = re.compile(r"\D")


def extract_category_code(label: str) -> Optional[int]:
    """Keep only the digits of a label: "Urlaub(9001)" -> 9001."""
    digits = _NON_DIGITS.sub("", label)
    return int(digits) if digits else None


def classify(code: Optional[int]) -> AttendanceCategory:
    if code == VACATION_CODE:
        return AttendanceCategory.VACATION
    if code == FLEX_DAY_CODE:
        return AttendanceCategory.FLEX_DAY
    return AttendanceCategory.OTHER


def _clock_minutes(value: str) -> Optional[int]:
    """Clock time of a cell, None when blank or unparseable."""
    try:
        return parse_clock_minutes(value)
    except ValueError:
        return None


def parse_row(line: str) -> AttendanceRecord:
    """Parse one table line.

    Only the column count and the date are required; a row without a usable
    time range still marks its date as present, with no worked time.
    """
    cells = line.rstrip("\r").split(TABLE_DELIMITER)
    if len(cells) < MIN_COLUMNS:
        raise MalformedRowError(f"expected at least {MIN_COLUMNS} columns, got {len(cells)}")

    try:
        work_date = parse_table_date(cells[DATE_COLUMN])
    except ValueError as e:
        raise MalformedRowError(str(e)) from e

    label = cells[CATEGORY_COLUMN].strip()
    code = extract_category_code(label)
    return AttendanceRecord(
        work_date=work_date,
        category_label=label,
        category_code=code,
        category=classify(code),
        start_minute=_clock_minutes(cells[START_TIME_COLUMN]),
        end_minute=_clock_minutes(cells[END_TIME_COLUMN]),
    )


def parse_table(text: str) -> list[AttendanceRecord]:
    """Parse the export into records in input order.

    Raises ParseError if no row survives (empty table or only malformed rows).
    """
    lines = text.split("\n")[1:]

    records: list[AttendanceRecord] = []
    for line in lines:
        try:
            records.append(parse_row(line))
        except MalformedRowError:
            continue

    if not records:
        raise ParseError("Working-times table has no attendance rows")
    return records
