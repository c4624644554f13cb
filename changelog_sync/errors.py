"""
Exception hierarchy for changelog_sync.

Every error raised on purpose by the package derives from DomainError, which
carries a machine-readable code and an HTTP-like status for callers that need
to map failures onto a transport.

Error philosophy:
  - Strategy failures are raised and caught by the sync engine (fallback).
  - NotFoundError is the only error the sync service raises on purpose.
  - FetchError is raised by ExtractionContext implementations on transport or
    HTTP status failures and is what usually triggers strategy fallback.
"""

from __future__ import annotations

from typing import Any


class DomainError(Exception):
    """Base exception for all changelog_sync errors."""

    def __init__(self, message: str, code: str, status_code: int, details: Any = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": type(self).__name__,
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(DomainError):
    def __init__(self, message: str = "Resource not found", details: Any = None):
        super().__init__(message, "NOT_FOUND", 404, details)


class ValidationError(DomainError):
    def __init__(self, message: str = "Validation failed", details: Any = None):
        super().__init__(message, "VALIDATION_ERROR", 400, details)


class FetchError(DomainError):
    """Raised when an ExtractionContext cannot retrieve a URL.

    Attributes:
        url: The URL that failed
        status_code_http: HTTP status of the response, or None for network failures
    """

    def __init__(self, message: str, url: str, status_code_http: int | None = None):
        super().__init__(message, "FETCH_ERROR", 502, {"url": url, "status": status_code_http})
        self.url = url
        self.status_code_http = status_code_http


class ToolsRepositoryError(DomainError):
    def __init__(self, message: str, details: Any = None):
        super().__init__(message, "TOOLS_REPOSITORY_ERROR", 500, details)


class SyncLogsRepositoryError(DomainError):
    def __init__(self, message: str, details: Any = None):
        super().__init__(message, "SYNC_LOGS_REPOSITORY_ERROR", 500, details)
