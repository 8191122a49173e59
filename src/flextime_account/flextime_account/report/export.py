from __future__ import annotations

from pathlib import Path

import pandas as pd

from ..core.exceptions import ValidationError
from .service import ReportData

COLUMNS = [
    "start",
    "end",
    "worked_hours",
    "expected_hours",
    "delta_minutes",
    "delta",
    "inferred_holidays",
]


def report_frames(report: ReportData) -> tuple[pd.DataFrame, pd.DataFrame]:
    periods = pd.DataFrame(report.rows, columns=COLUMNS)
    summary = pd.DataFrame([report.summary])
    return periods, summary


def export_report(report: ReportData, path: Path | str) -> Path:
    """Write the breakdown to .xlsx (periods + summary sheets) or .csv (periods only)."""
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in {".xlsx", ".csv"}:
        raise ValidationError("report path must end with .xlsx or .csv")

    periods, summary = report_frames(report)
    path.parent.mkdir(parents=True, exist_ok=True)

    if suffix == ".csv":
        periods.to_csv(path, index=False, sep=";", encoding="utf-8-sig")
        return path

    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        periods.to_excel(writer, index=False, sheet_name="Periods")
        summary.to_excel(writer, index=False, sheet_name="Summary")
    return path
