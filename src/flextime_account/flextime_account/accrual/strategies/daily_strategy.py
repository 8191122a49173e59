from __future__ import annotations

from itertools import groupby
from typing import Sequence

from ...attendance.model import AttendanceRecord
from ...policy.schema import Policy
from ..model import AccrualPeriod
from .base import AccrualStrategy, worked_minutes


class DailyAccrualStrategy(AccrualStrategy):
    """Every date present in the table is charged one fifth of the weekly quota.

    Entries after the last non-vacation entry are ignored. Absent weekdays are
    never charged; weekend dates with entries are.
    """

    def accrue(self, records: Sequence[AttendanceRecord], *, last_index: int, policy: Policy) -> list[AccrualPeriod]:
        periods: list[AccrualPeriod] = []
        for work_date, group in groupby(records[: last_index + 1], key=lambda r: r.work_date):
            periods.append(
                AccrualPeriod(
                    start=work_date,
                    end=work_date,
                    worked_minutes=worked_minutes(list(group)),
                    expected_minutes=policy.daily_minutes,
                )
            )
        return periods
