"""
Exception hierarchy for the content linter.

Provides layered exception structure for configuration, data-shape and
judgment errors. All exceptions carry a details dict for observability.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the linter
"""

from typing import Any


class ContentLintException(Exception):
    """Base exception for all content linter errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(ContentLintException):
    """Raised when configuration is invalid for a file or rule."""

    def __init__(
        self,
        message: str,
        key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize configuration error.

        Args:
            message: Error message
            key: Configuration key that was rejected
            details: Additional context
        """
        details = details or {}
        if key:
            details["key"] = key
        super().__init__(message, details)


class InvalidPatternError(ConfigurationError):
    """Raised when a section pattern is not valid glob syntax."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(
            f"Invalid glob pattern '{pattern}': {reason}",
            details={"pattern": pattern},
        )
        self.pattern = pattern


class UnmatchedPathError(ConfigurationError):
    """Raised in strict mode when no section matches a file path."""

    def __init__(self, file_path: str) -> None:
        super().__init__(
            f"No configuration found for this path: {file_path}",
            details={"file_path": file_path},
        )
        self.file_path = file_path


class UnknownEvaluatorError(ConfigurationError):
    """Raised when a rule names an evaluator type nobody registered."""

    def __init__(self, name: str, available: list[str]) -> None:
        super().__init__(
            f"Unknown evaluator type: '{name}'. "
            f"Available types: {', '.join(available) or 'none'}",
            details={"evaluator": name},
        )
        self.name = name


class DataShapeError(ContentLintException):
    """Raised when judged output does not match the expected schema."""


class PayloadValidationError(DataShapeError):
    """Raised when a judged payload fails validation."""

    def __init__(
        self,
        message: str,
        mode: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize payload validation error.

        Args:
            message: Error message
            mode: Evaluation mode the payload was validated against
            details: Additional context
        """
        details = details or {}
        if mode:
            details["mode"] = mode
        super().__init__(message, details)


class JudgmentError(ContentLintException):
    """Raised when the external judgment call fails."""

    def __init__(
        self,
        message: str,
        rule_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if rule_id:
            details["rule_id"] = rule_id
        super().__init__(message, details)
