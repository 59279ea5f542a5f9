"""Standardized error types for string utilities.

Every error carries a machine-readable code plus a human-readable message so
callers that surface failures (CLIs, services) can serialize them uniformly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


class ErrorCode:
    """Constants for error codes carried by :class:`StringKitError`."""

    OFFSET_OUT_OF_RANGE = "offset_out_of_range"
    CURSOR_NOT_ON_BOUNDARY = "cursor_not_on_boundary"
    PATTERN_INVALID = "pattern_invalid"
    INVALID_SETTING = "invalid_setting"
    INVALID_PARAMETER = "invalid_parameter"


@dataclass
class StringKitError(Exception):
    """Base exception class for all library errors.

    Attributes:
        error_code: Machine-readable error identifier.
        message: Human-readable error description.
        details: Additional structured error information.
        suggestion: Actionable guidance for recovery.
    """

    error_code: str
    message: str
    details: dict[str, Any] = field(default_factory=dict)
    suggestion: str = ""

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a dictionary for structured reporting."""
        result: dict[str, Any] = {
            "error": self.error_code,
            "message": self.message,
        }
        if self.details:
            result["details"] = dict(self.details)
        if self.suggestion:
            result["suggestion"] = self.suggestion
        return result

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


@dataclass
class OffsetOutOfRangeError(StringKitError, IndexError):
    """Raised when an integer offset cannot be resolved inside a string."""

    error_code: str = field(default=ErrorCode.OFFSET_OUT_OF_RANGE)
    message: str = field(default="Offset is outside the string")
    details: dict[str, Any] = field(default_factory=dict)
    suggestion: str = field(default="Keep |offset| within the unit count of the string")

    offset: int | None = field(default=None)
    unit_count: int | None = field(default=None)

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.offset is not None:
            result["offset"] = self.offset
        if self.unit_count is not None:
            result["unit_count"] = self.unit_count
        return result


@dataclass
class PatternInvalidError(StringKitError, ValueError):
    """Raised when a search pattern fails to compile."""

    error_code: str = field(default=ErrorCode.PATTERN_INVALID)
    message: str = field(default="Invalid search pattern")
    details: dict[str, Any] = field(default_factory=dict)
    suggestion: str = field(default="Check the regex syntax and try again")

    pattern: str | None = field(default=None)
    reason: str | None = field(default=None)

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.pattern is not None:
            result["pattern"] = self.pattern
        if self.reason is not None:
            result["reason"] = self.reason
        return result


@dataclass
class ConfigurationError(StringKitError, ValueError):
    """Raised when a setting holds a value the library cannot use."""

    error_code: str = field(default=ErrorCode.INVALID_SETTING)
    message: str = field(default="Invalid setting value")
    details: dict[str, Any] = field(default_factory=dict)
    suggestion: str = field(default="")

    setting: str | None = field(default=None)
    value: Any = field(default=None)

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.setting is not None:
            result["setting"] = self.setting
            result["value"] = self.value
        return result


__all__ = [
    "ErrorCode",
    "StringKitError",
    "OffsetOutOfRangeError",
    "PatternInvalidError",
    "ConfigurationError",
]
