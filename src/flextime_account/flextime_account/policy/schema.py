"""Policy settings schema.

`DEFAULT_SETTINGS` is the single definition of which fields exist and what
they default to; loading and the missing-file fallback live in `loader.py`.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from ..common.datetime_utils import resolve_date_token
from ..core.constants import WORKDAYS_PER_WEEK
from ..core.enums import AccrualStrategyKind

DEFAULT_SETTINGS: dict[str, object] = {
    # contracted workload per week, in hours
    "weekly_hours": 40,
    # account balance at period_start, in hours
    "starting_balance_hours": 0.0,
    # export window (both included); far-off defaults include every registered entry
    "period_start": "01.01.1999",
    # a date or a relative token: "yesterday", "today", "tomorrow"
    "period_end": "31.12.2099",
    # Chromium-based browser used by the downloader (Edge or Chrome)
    "browser_path": "C:/Program Files (x86)/Microsoft/Edge/Application/msedge.exe",
    "accrual_strategy": AccrualStrategyKind.WEEKLY.value,
}

# Keys written by older versions of the settings file
LEGACY_KEYS = {
    "wochenstunden": "weekly_hours",
    "startStunden": "starting_balance_hours",
    "startDatum": "period_start",
    "endDatum": "period_end",
    "browserPfad": "browser_path",
}


def _to_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


@dataclass(frozen=True)
class Policy:
    """Resolved, immutable parameters of one calculation run."""

    weekly_hours: Decimal
    starting_balance_hours: Decimal = Decimal(0)
    period_start: Optional[date] = None
    period_end: Optional[date] = None
    accrual_strategy: AccrualStrategyKind = AccrualStrategyKind.WEEKLY

    def __post_init__(self):
        object.__setattr__(self, "weekly_hours", _to_decimal(self.weekly_hours))
        object.__setattr__(self, "starting_balance_hours", _to_decimal(self.starting_balance_hours))
        object.__setattr__(self, "accrual_strategy", AccrualStrategyKind(self.accrual_strategy))

    @property
    def weekly_minutes(self) -> Decimal:
        return self.weekly_hours * 60

    @property
    def daily_minutes(self) -> Decimal:
        return self.weekly_minutes / WORKDAYS_PER_WEEK

    @property
    def starting_balance_minutes(self) -> Decimal:
        return self.starting_balance_hours * 60

    def covers(self, day: date) -> bool:
        if self.period_start and day < self.period_start:
            return False
        if self.period_end and day > self.period_end:
            return False
        return True


@dataclass(frozen=True)
class PolicySettings:
    """Validated content of the settings file (period bounds still unresolved)."""

    weekly_hours: float
    starting_balance_hours: float
    period_start: str
    period_end: str
    browser_path: str
    accrual_strategy: AccrualStrategyKind

    @classmethod
    def defaults(cls) -> "PolicySettings":
        values = dict(DEFAULT_SETTINGS)
        values["accrual_strategy"] = AccrualStrategyKind(values["accrual_strategy"])
        return cls(**values)

    def resolve(self, *, today: date) -> Policy:
        return Policy(
            weekly_hours=self.weekly_hours,
            starting_balance_hours=self.starting_balance_hours,
            period_start=resolve_date_token(self.period_start, today=today),
            period_end=resolve_date_token(self.period_end, today=today),
            accrual_strategy=self.accrual_strategy,
        )

    def to_document(self) -> dict:
        document = asdict(self)
        document["accrual_strategy"] = self.accrual_strategy.value
        return document
