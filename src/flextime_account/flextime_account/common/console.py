"""Console progress output, printed only when enabled (DEBUG / verbose)."""

from __future__ import annotations

import sys

PREFIX = "[flextime-account]"


def log(*parts, enabled: bool) -> None:
    if enabled:
        print(PREFIX, *parts)


def log_error(*parts, enabled: bool) -> None:
    if enabled:
        print(PREFIX, *parts, file=sys.stderr)
