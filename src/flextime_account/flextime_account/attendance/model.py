from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import minutes_between
from ..core.enums import AttendanceCategory


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one row of the exported working-times table.

    Clock times are minutes since midnight; None when the row carries no
    usable time range (flex days are usually logged that way).
    """

    work_date: date
    category_label: str
    category_code: Optional[int]
    category: AttendanceCategory
    start_minute: Optional[int]
    end_minute: Optional[int]

    @property
    def worked_minutes(self) -> int:
        if self.start_minute is None or self.end_minute is None:
            return 0
        return minutes_between(self.start_minute, self.end_minute)

    @property
    def is_vacation(self) -> bool:
        return self.category == AttendanceCategory.VACATION

    @property
    def is_flex_day(self) -> bool:
        return self.category == AttendanceCategory.FLEX_DAY
