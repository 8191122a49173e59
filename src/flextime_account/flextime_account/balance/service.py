from __future__ import annotations

from typing import Optional

from ..accrual.calculator import OvertimeCalculator
from ..accrual.model import CalculationResult
from ..attendance.parser import parse_table
from ..attendance.repository import AttendanceTableSource
from ..common.console import log, log_error
from ..common.datetime_utils import format_table_date
from ..core.exceptions import SourceUnavailableError
from ..policy.schema import Policy


class BalanceService:
    def __init__(
        self,
        source: AttendanceTableSource,
        *,
        calculator: Optional[OvertimeCalculator] = None,
        verbose: bool = False,
    ):
        self._source = source
        self._calculator = calculator or OvertimeCalculator()
        self._verbose = verbose

    def calculate(self, policy: Policy) -> Optional[CalculationResult]:
        """Balance from the current table, or None when no table is available yet."""
        try:
            text = self._source.read_text()
        except SourceUnavailableError as e:
            log_error(str(e), enabled=self._verbose)
            return None
        return self.calculate_text(text, policy)

    def calculate_text(self, text: str, policy: Policy) -> CalculationResult:
        records = parse_table(text)
        log(f"parsed {len(records)} attendance rows", enabled=self._verbose)

        result = self._calculator.calculate(records, policy)
        log(
            f"balance {result.balance_label} up to {format_table_date(result.last_considered_date)}",
            enabled=self._verbose,
        )
        return result
