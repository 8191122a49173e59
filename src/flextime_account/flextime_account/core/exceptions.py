from __future__ import annotations

from .enums import DownloadStatus


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class SourceUnavailableError(DomainError):
    """Raised when the working-times table (or settings file) cannot be read."""


class ParseError(DomainError):
    """Raised when a table holds no usable attendance rows."""


class MalformedRowError(ParseError):
    """Raised for a single row that cannot be parsed; callers skip the row."""


class DownloadError(DomainError):
    """Raised by a download step; carries the status reported to the caller."""

    def __init__(self, message: str, status: DownloadStatus):
        super().__init__(message)
        self.status = status
