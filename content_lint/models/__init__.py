"""
Domain models - pure data containers used across the linter.

All models are Pydantic models with no business logic beyond derived
properties.
"""

from content_lint.models.chunk import Chunk, ChunkingOptions
from content_lint.models.enums import (
    EvaluationMode,
    MergePolicy,
    SectionOrder,
    Severity,
    Status,
)
from content_lint.models.file_section import (
    FilePatternConfig,
    OverrideValue,
    ProjectConfig,
    ResolvedFileConfig,
)
from content_lint.models.finding import Evidence, Finding, LocatedFinding, Location
from content_lint.models.report import FileReport, LintSummary, RuleOutcome
from content_lint.models.rule import CriterionDefinition, RuleDefinition
from content_lint.models.scoring import (
    CriterionJudgment,
    CriterionResult,
    SemiObjectiveResult,
    SubjectiveResult,
)

__all__ = [
    "Chunk",
    "ChunkingOptions",
    "EvaluationMode",
    "MergePolicy",
    "SectionOrder",
    "Severity",
    "Status",
    "FilePatternConfig",
    "OverrideValue",
    "ProjectConfig",
    "ResolvedFileConfig",
    "Evidence",
    "Finding",
    "LocatedFinding",
    "Location",
    "FileReport",
    "LintSummary",
    "RuleOutcome",
    "CriterionDefinition",
    "RuleDefinition",
    "CriterionJudgment",
    "CriterionResult",
    "SemiObjectiveResult",
    "SubjectiveResult",
]
