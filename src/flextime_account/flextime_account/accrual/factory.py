from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import AccrualStrategyKind
from ..policy.schema import Policy
from .strategies.base import AccrualStrategy
from .strategies.daily_strategy import DailyAccrualStrategy
from .strategies.weekly_strategy import WeeklyAccrualStrategy


@dataclass
class AccrualStrategyFactory:
    """Factory Pattern: choose the accrual strategy configured in the policy."""

    def for_policy(self, policy: Policy) -> AccrualStrategy:
        if policy.accrual_strategy == AccrualStrategyKind.DAILY:
            return DailyAccrualStrategy()
        return WeeklyAccrualStrategy()
