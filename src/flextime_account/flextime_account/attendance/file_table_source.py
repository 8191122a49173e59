from __future__ import annotations

from pathlib import Path

from ..core.exceptions import SourceUnavailableError


class FileTableSource:
    """Reads the downloaded export from disk."""

    def __init__(self, path: Path | str):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def read_text(self) -> str:
        try:
            # utf-8-sig drops the BOM some exports start with
            return self._path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            raise SourceUnavailableError(f"Cannot read working-times table {self._path}: {e}") from e
