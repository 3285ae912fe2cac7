"""Custom exceptions for terrafactor."""

from __future__ import annotations

from dataclasses import dataclass


class TerrafactorError(Exception):
    """Base exception for all terrafactor errors."""


class ConfigError(TerrafactorError):
    """Raised when a setting (CLI option or environment variable) is invalid."""


@dataclass
class InvalidOperationError(TerrafactorError):
    """Raised when the operation tag is neither ``"create"`` nor ``"destroy"``."""

    operation: str

    def __post_init__(self) -> None:
        super().__init__(
            f"invalid operation: {self.operation}. "
            "Supported operations are 'create' or 'destroy'"
        )


class WriteFailureError(TerrafactorError):
    """Raised when the output sink rejects a write."""

    def __init__(self, cause: Exception) -> None:
        self.cause = cause
        super().__init__(f"Write to output failed: {cause}")


class DocumentError(TerrafactorError):
    """Base exception for failures while loading an input document."""


class DocumentReadError(DocumentError):
    """Raised when a local document (file or stdin) cannot be read."""

    def __init__(self, source: str, cause: Exception) -> None:
        self.source = source
        self.cause = cause
        super().__init__(f"Error reading {source!r}: {cause}")


class DocumentParseError(DocumentError):
    """Raised when the document text is not valid JSON."""

    def __init__(self, source: str, cause: ValueError | RecursionError) -> None:
        self.source = source
        self.cause = cause
        self.lineno: int | None = getattr(cause, "lineno", None)
        self.colno: int | None = getattr(cause, "colno", None)
        super().__init__(f"Error parsing JSON from {source!r}: {cause}")


class DocumentRequestError(DocumentError):
    """Raised when a network-level error occurs (connection refused, timeout, etc.)."""

    def __init__(self, url: str, cause: Exception) -> None:
        self.url = url
        self.cause = cause
        super().__init__(f"Request to {url!r} failed: {cause}")


class DocumentResponseError(DocumentError):
    """Raised when the document server returns a non-2xx HTTP status code."""

    def __init__(self, status_code: int, url: str) -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(f"HTTP {status_code} for {url!r}")
