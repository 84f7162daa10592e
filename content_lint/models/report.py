"""
Report models.

Per-rule outcomes, per-file reports and the scan-wide summary handed to
report consumers (line-oriented text, JSON, third-party formats).

Dependencies: pydantic
System role: Orchestrator output data structures
"""

from pydantic import BaseModel, Field, computed_field

from content_lint.models.enums import EvaluationMode, Severity
from content_lint.models.file_section import ResolvedFileConfig
from content_lint.models.finding import LocatedFinding
from content_lint.models.scoring import SemiObjectiveResult, SubjectiveResult


class RuleOutcome(BaseModel):
    """Result of evaluating one rule against one document."""

    rule_id: str
    pack: str
    mode: EvaluationMode
    severity: Severity = Severity.WARNING
    score: SubjectiveResult | SemiObjectiveResult | None = None
    findings: list[LocatedFinding] = Field(default_factory=list)
    total_chunks: int = 0
    discarded_chunks: int = Field(
        default=0,
        description="Chunks whose judged output failed validation or whose judgment call failed",
    )
    error: str | None = None
    configuration_error: bool = Field(
        default=False,
        description="True when error comes from rule configuration rather than evaluation",
    )

    @computed_field
    @property
    def failed(self) -> bool:
        """True when the rule produced no usable result at all."""
        return self.error is not None or (
            self.total_chunks > 0 and self.discarded_chunks == self.total_chunks
        )


class FileReport(BaseModel):
    """All rule outcomes for one scanned file."""

    file_path: str
    resolution: ResolvedFileConfig | None = None
    outcomes: list[RuleOutcome] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list, description="Configuration errors for this file")

    @property
    def finding_count(self) -> int:
        return sum(len(o.findings) for o in self.outcomes)


class LintSummary(BaseModel):
    """Aggregated scan result."""

    reports: list[FileReport] = Field(default_factory=list)

    @computed_field
    @property
    def configuration_errors(self) -> int:
        return sum(len(r.errors) for r in self.reports) + sum(
            1 for r in self.reports for o in r.outcomes if o.configuration_error
        )

    @computed_field
    @property
    def request_failures(self) -> int:
        return sum(o.discarded_chunks for r in self.reports for o in r.outcomes)

    @computed_field
    @property
    def exit_code(self) -> int:
        """Non-zero only for configuration errors or total evaluation failure."""
        outcomes = [o for r in self.reports for o in r.outcomes]
        if self.configuration_errors:
            return 1
        if outcomes and all(o.failed for o in outcomes):
            return 1
        return 0
