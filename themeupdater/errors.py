"""Error codes and error handling utilities for themeupdater."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import Any


class ErrorCode(Enum):
    """Standardized error codes for theme update runs."""

    # Environment errors
    UNSUPPORTED_PLATFORM_VERSION = auto()

    # Invocation errors
    THEME_UPDATE_FAILED = auto()

    # Configuration errors
    CONFIG_INVALID = auto()
    CONFIG_MISSING = auto()


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.UNSUPPORTED_PLATFORM_VERSION: "The goal update-theme requires Vaadin 7.1 or later.",
    ErrorCode.THEME_UPDATE_FAILED: "Updating the theme failed. See the log for the tool output.",
    ErrorCode.CONFIG_INVALID: "The project descriptor is invalid.",
    ErrorCode.CONFIG_MISSING: "The project descriptor was not found.",
}

ERROR_SUGGESTIONS: dict[ErrorCode, str] = {
    ErrorCode.UNSUPPORTED_PLATFORM_VERSION: (
        "Depend on com.vaadin:vaadin-shared 7.1 or later, or skip theme updates."
    ),
    ErrorCode.THEME_UPDATE_FAILED: (
        "Check that the Vaadin server jar is on the classpath and the theme directory exists."
    ),
    ErrorCode.CONFIG_INVALID: "Fix the reported key in the project descriptor and run again.",
    ErrorCode.CONFIG_MISSING: "Pass --config with the path to the project descriptor.",
}


@dataclass
class ThemeUpdaterError(Exception):
    """Base exception for themeupdater with error code and context."""

    code: ErrorCode
    message: str = ""
    path: Path | None = None
    details: dict[str, Any] = field(default_factory=dict)
    suggestion: str = ""

    def __post_init__(self) -> None:
        if not self.message:
            self.message = ERROR_MESSAGES.get(self.code, "An unexpected error occurred.")
        if not self.suggestion:
            self.suggestion = ERROR_SUGGESTIONS.get(self.code, "")

    def __str__(self) -> str:
        parts = [self.message]
        if self.path:
            parts.append(f"\nPath: {self.path}")
        if self.details:
            details_str = " | ".join(f"{k}={v}" for k, v in self.details.items())
            parts.append(f"\nDetails: {details_str}")
        return "".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        return {
            "code": self.code.name,
            "message": self.message,
            "path": str(self.path) if self.path else None,
            "details": self.details,
            "suggestion": self.suggestion,
        }


class LaunchError(RuntimeError):
    """Raised when the external tool process cannot be started."""

    def __init__(self, command: list[str], reason: str) -> None:
        super().__init__(f"Unable to launch {command[0] if command else '<empty>'}: {reason}")
        self.command = list(command)
        self.reason = reason


def format_error_for_user(error: ThemeUpdaterError | Exception) -> str:
    """Format an error for display on the console with actionable suggestions."""
    if isinstance(error, ThemeUpdaterError):
        parts = [f"error: {error.message}"]
        if error.path:
            parts.append(f"\n  path: {error.path}")
        cause = error.__cause__
        if cause is not None:
            parts.append(f"\n  cause: {cause}")
        if error.suggestion and error.suggestion != error.message:
            parts.append(f"\n  hint: {error.suggestion}")
        return "".join(parts)
    return f"error: {type(error).__name__}: {error}"
