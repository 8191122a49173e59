from __future__ import annotations

from dataclasses import dataclass

from ..accrual.calculator import round_half_up
from ..accrual.model import CalculationResult
from ..accrual.rendering import render_hours, render_label


@dataclass(frozen=True)
class ReportData:
    rows: list[dict]
    summary: dict


class AccrualReportService:
    """Breakdown of a calculation: one row per accrual period plus totals."""

    def build(self, result: CalculationResult) -> ReportData:
        rows: list[dict] = []
        total_worked = 0
        total_expected = 0

        for p in result.periods:
            expected = round_half_up(p.expected_minutes)
            delta = round_half_up(p.delta)
            total_worked += p.worked_minutes
            total_expected += expected

            rows.append(
                {
                    "start": p.start.strftime("%Y-%m-%d"),
                    "end": p.end.strftime("%Y-%m-%d"),
                    "worked_hours": render_hours(p.worked_minutes),
                    "expected_hours": render_hours(expected),
                    "delta_minutes": delta,
                    "delta": render_label(delta),
                    "inferred_holidays": p.inferred_holidays,
                }
            )

        summary = {
            "periods": len(rows),
            "total_worked_hours": render_hours(total_worked),
            "total_expected_hours": render_hours(total_expected),
            "balance_minutes": result.balance_minutes,
            "balance": result.balance_label,
            "last_considered_date": result.last_considered_date.strftime("%Y-%m-%d"),
        }
        return ReportData(rows=rows, summary=summary)
