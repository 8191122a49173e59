from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from ...attendance.model import AttendanceRecord
from ...policy.schema import Policy
from ..model import AccrualPeriod


class AccrualStrategy(ABC):
    """Strategy Pattern: encapsulate how worked time is bucketed against the quota."""

    @abstractmethod
    def accrue(self, records: Sequence[AttendanceRecord], *, last_index: int, policy: Policy) -> list[AccrualPeriod]:
        """Fold date-sorted `records` into closed periods.

        `last_index` points at the last non-vacation record.
        """

        raise NotImplementedError


def worked_minutes(records) -> int:
    """Worked time of a group of entries; flex days never count."""
    return sum(r.worked_minutes for r in records if not r.is_flex_day)
