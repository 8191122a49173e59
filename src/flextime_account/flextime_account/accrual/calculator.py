from __future__ import annotations

from decimal import ROUND_FLOOR, Decimal
from typing import Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..core.exceptions import ParseError
from ..policy.schema import Policy
from .factory import AccrualStrategyFactory
from .model import CalculationResult
from .rendering import render_label


def round_half_up(value: Decimal) -> int:
    """Round to the nearest integer, halves towards +infinity (-0.5 -> 0, 0.5 -> 1)."""
    return int((value + Decimal("0.5")).to_integral_value(rounding=ROUND_FLOOR))


def last_working_index(records: Sequence[AttendanceRecord]) -> Optional[int]:
    for i in range(len(records) - 1, -1, -1):
        if not records[i].is_vacation:
            return i
    return None


class OvertimeCalculator:
    """Pure calculation: (records, policy) -> balance. No I/O, no state between calls."""

    def __init__(self, *, strategy_factory: Optional[AccrualStrategyFactory] = None):
        self._factory = strategy_factory or AccrualStrategyFactory()

    def calculate(self, records: Sequence[AttendanceRecord], policy: Policy) -> CalculationResult:
        # stable: rows of the same date keep their table order
        considered = sorted((r for r in records if policy.covers(r.work_date)), key=lambda r: r.work_date)
        if not considered:
            raise ParseError("No attendance rows within the configured period")

        last_index = last_working_index(considered)
        if last_index is None:
            raise ParseError("Working-times table has only vacation rows")

        strategy = self._factory.for_policy(policy)
        periods = strategy.accrue(considered, last_index=last_index, policy=policy)

        total = sum((p.delta for p in periods), Decimal(0))
        balance = round_half_up(total) + round_half_up(policy.starting_balance_minutes)

        return CalculationResult(
            balance_minutes=balance,
            balance_label=render_label(balance),
            last_considered_date=considered[last_index].work_date,
            periods=tuple(periods),
        )
