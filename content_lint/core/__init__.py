"""
Core module.

Holds the exception hierarchy shared by every layer of the linter.
"""

from content_lint.core.exceptions import (
    ConfigurationError,
    ContentLintException,
    DataShapeError,
    InvalidPatternError,
    JudgmentError,
    PayloadValidationError,
    UnknownEvaluatorError,
    UnmatchedPathError,
)

__all__ = [
    "ContentLintException",
    "ConfigurationError",
    "InvalidPatternError",
    "UnmatchedPathError",
    "UnknownEvaluatorError",
    "DataShapeError",
    "PayloadValidationError",
    "JudgmentError",
]
