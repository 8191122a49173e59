from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class AccrualPeriod:
    """One closed accrual bucket (a calendar week or a single day)."""

    start: date
    end: date
    worked_minutes: int
    expected_minutes: Decimal
    inferred_holidays: int = 0

    @property
    def delta(self) -> Decimal:
        return self.worked_minutes - self.expected_minutes


@dataclass(frozen=True)
class CalculationResult:
    balance_minutes: int
    balance_label: str
    last_considered_date: date
    periods: tuple[AccrualPeriod, ...] = ()
