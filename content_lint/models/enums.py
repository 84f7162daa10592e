"""
Enumerations shared across the linter.

Dependencies: enum (stdlib)
System role: Closed vocabularies for modes, severities and resolver policies
"""

from enum import Enum


class EvaluationMode(str, Enum):
    """Scoring discipline selected by a rule definition."""

    SUBJECTIVE = "subjective"
    SEMI_OBJECTIVE = "semi-objective"


class Severity(str, Enum):
    """Configured severity of a rule."""

    WARNING = "warning"
    ERROR = "error"


class Status(str, Enum):
    """Reported status of a scored result."""

    WARNING = "warning"
    ERROR = "error"


class MergePolicy(str, Enum):
    """How pack lists from several matching sections combine."""

    REPLACE = "replace"  # last non-empty match wins entirely
    UNION = "union"  # packs accumulate across matches


class SectionOrder(str, Enum):
    """Order in which matching sections are applied."""

    DECLARATION = "declaration"
    SPECIFICITY = "specificity"
