from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, replace
from datetime import date, timedelta
from decimal import Decimal
from functools import reduce
from typing import Sequence

from ...attendance.model import AttendanceRecord
from ...common.datetime_utils import is_workday, week_end, week_start
from ...policy.schema import Policy
from ..model import AccrualPeriod
from .base import AccrualStrategy, worked_minutes

SUNDAY = 6


@dataclass(frozen=True)
class WeekState:
    start: date
    worked_minutes: int
    expected_minutes: Decimal
    inferred_holidays: int = 0

    @classmethod
    def open(cls, start: date, policy: Policy) -> "WeekState":
        return cls(start=start, worked_minutes=0, expected_minutes=policy.weekly_minutes)

    def add_day(self, day: date, records: Sequence[AttendanceRecord], *, policy: Policy) -> "WeekState":
        if records:
            return replace(self, worked_minutes=self.worked_minutes + worked_minutes(records))
        if is_workday(day):
            # inferred holiday: no entry on a weekday
            return replace(
                self,
                expected_minutes=self.expected_minutes - policy.daily_minutes,
                inferred_holidays=self.inferred_holidays + 1,
            )
        return self

    def close(self, end: date) -> AccrualPeriod:
        return AccrualPeriod(
            start=self.start,
            end=end,
            worked_minutes=self.worked_minutes,
            expected_minutes=self.expected_minutes,
            inferred_holidays=self.inferred_holidays,
        )


class WeeklyAccrualStrategy(AccrualStrategy):
    """Calendar weeks (Mon-Sun) against the weekly quota, weekdays without entries are holidays.

    The walk covers the Monday on/before the first entry through the Sunday
    on/after the last non-vacation entry, so a week in progress is closed as if
    its remaining weekdays were holidays.
    """

    def accrue(self, records: Sequence[AttendanceRecord], *, last_index: int, policy: Policy) -> list[AccrualPeriod]:
        by_date: dict[date, list[AttendanceRecord]] = defaultdict(list)
        for r in records:
            by_date[r.work_date].append(r)

        first = week_start(records[0].work_date)
        last = week_end(records[last_index].work_date)
        days = (first + timedelta(days=i) for i in range((last - first).days + 1))

        def step(acc: tuple[WeekState, tuple[AccrualPeriod, ...]], day: date):
            state, closed = acc
            state = state.add_day(day, by_date.get(day, ()), policy=policy)
            if day.weekday() == SUNDAY:
                return WeekState.open(day + timedelta(days=1), policy), closed + (state.close(day),)
            return state, closed

        _, periods = reduce(step, days, (WeekState.open(first, policy), ()))
        return list(periods)
