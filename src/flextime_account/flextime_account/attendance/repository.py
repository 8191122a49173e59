from __future__ import annotations

from typing import Protocol


class AttendanceTableSource(Protocol):
    def read_text(self) -> str:
        """Return the raw export text.

        Raises SourceUnavailableError when no table can be read.
        """

        raise NotImplementedError
