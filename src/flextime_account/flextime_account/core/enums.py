from __future__ import annotations

from enum import Enum, IntEnum


class AttendanceCategory(str, Enum):
    """Category of a time-tracking entry, derived from its numeric code."""

    VACATION = "VACATION"
    FLEX_DAY = "FLEX_DAY"
    OTHER = "OTHER"


class AccrualStrategyKind(str, Enum):
    """How worked time is accrued against the contracted quota."""

    WEEKLY = "weekly"
    DAILY = "daily"


class DownloadStatus(IntEnum):
    """Outcome of a working-times download (values are the script exit codes)."""

    OK = 0
    BROWSER_LAUNCH_FAILED = 1
    PORTAL_UNREACHABLE = 2
    TOO_MANY_FILES = 3
    DOWNLOAD_FAILED = 4
