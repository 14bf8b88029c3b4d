"""Error codes and error handling utilities for theme resolution."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum, auto
from pathlib import Path
from typing import Any


class ErrorCode(Enum):
    """Standardized error codes for theme operations."""

    # Document errors
    DOCUMENT_NOT_FOUND = auto()
    DOCUMENT_UNREADABLE = auto()
    DOCUMENT_MALFORMED = auto()
    DOCUMENT_INVALID = auto()
    DUPLICATE_RESOURCE = auto()

    # Theme state errors
    THEME_NOT_SET = auto()
    THEME_DIR_MISSING = auto()

    # Configuration errors
    CONFIG_INVALID = auto()
    CONFIG_MISSING = auto()


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.DOCUMENT_NOT_FOUND: "The theme document was not found. It may have been moved or deleted.",
    ErrorCode.DOCUMENT_UNREADABLE: "The theme document could not be read. Check file permissions.",
    ErrorCode.DOCUMENT_MALFORMED: "The theme document is not well-formed XML.",
    ErrorCode.DOCUMENT_INVALID: "The theme document does not have the expected structure.",
    ErrorCode.DUPLICATE_RESOURCE: "The theme document defines the same resource more than once.",

    ErrorCode.THEME_NOT_SET: "No theme is active. Select a theme before requesting theme paths.",
    ErrorCode.THEME_DIR_MISSING: "The theme document has no 'dir' attribute on its root element.",

    ErrorCode.CONFIG_INVALID: "Theme configuration is invalid. Check the settings file.",
    ErrorCode.CONFIG_MISSING: "Theme configuration file not found.",
}


@dataclass
class ThemeError(Exception):
    """Base exception for theme operations with error code and context."""

    code: ErrorCode
    message: str = ""
    path: Path | None = None
    details: dict[str, Any] = field(default_factory=dict)
    suggestion: str = ""

    def __post_init__(self) -> None:
        known = ERROR_MESSAGES.get(self.code)
        self.message = self.message or known or "An unexpected theme error occurred."
        self.suggestion = self.suggestion or known or ""
        Exception.__init__(self, self.message)

    def __str__(self) -> str:
        lines = [self.message]
        if self.path:
            lines.append(f"File: {self.path}")
        if self.details:
            lines.append("Details: " + " | ".join(f"{key}={value}" for key, value in self.details.items()))
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        """Plain mapping for log records and diagnostic events."""
        record: dict[str, Any] = {"code": self.code.name}
        for item in fields(self):
            if item.name != "code":
                record[item.name] = getattr(self, item.name)
        record["path"] = str(self.path) if self.path else None
        return record


class ThemeLoadError(ThemeError):
    """Raised when a theme document cannot be loaded."""


class ThemeConfigurationError(ThemeError):
    """Raised for misconfiguration: bad settings, no theme, missing theme dir."""


def classify_load_exception(exc: Exception, path: Path | None = None) -> ThemeLoadError:
    """Classify an exception raised while reading a theme document."""
    if isinstance(exc, ThemeLoadError):
        return exc
    exc_name = type(exc).__name__
    exc_str = str(exc)

    if isinstance(exc, FileNotFoundError):
        return ThemeLoadError(ErrorCode.DOCUMENT_NOT_FOUND, path=path, details={"original": exc_str})
    if isinstance(exc, (PermissionError, IsADirectoryError)):
        return ThemeLoadError(ErrorCode.DOCUMENT_UNREADABLE, path=path, details={"original": exc_str})
    if "ParseError" in exc_name or isinstance(exc, UnicodeDecodeError):
        return ThemeLoadError(ErrorCode.DOCUMENT_MALFORMED, path=path, details={"original": exc_str})
    if isinstance(exc, OSError):
        return ThemeLoadError(ErrorCode.DOCUMENT_UNREADABLE, path=path, details={"original": exc_str})

    return ThemeLoadError(
        ErrorCode.DOCUMENT_INVALID,
        message=f"{exc_name}: {exc}",
        path=path,
        details={"original": exc_str},
    )


def format_error_for_user(error: ThemeError | Exception) -> str:
    """Format an error for an operator with actionable suggestions."""
    if isinstance(error, ThemeError):
        parts = [error.message]
        if error.suggestion and error.suggestion != error.message:
            parts.append(f"\n\n{error.suggestion}")
        if error.path:
            parts.append(f"\n\nFile: {error.path.name}")
        return "".join(parts)

    classified = classify_load_exception(error)
    return format_error_for_user(classified)
