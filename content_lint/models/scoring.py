"""
Scoring result models.

Data classes for the two scoring disciplines:
- SubjectiveResult: weighted 1-4 rubric averaging per criterion
- SemiObjectiveResult: violation-count penalty scoring

SemiObjectiveResult derives its score and percentage from its items; they
cannot be set independently.

Dependencies: pydantic
System role: Scoring engine output data structures
"""

from pydantic import BaseModel, Field, computed_field

from content_lint.models.enums import Status
from content_lint.models.finding import Finding

MAX_SCORE = 10
MIN_SEMI_OBJECTIVE_SCORE = 1


class CriterionJudgment(BaseModel):
    """Raw judged output for one criterion, before weighting."""

    name: str = Field(description="Criterion name as reported by the judge")
    score: int = Field(ge=0, le=4, description="Judged score (1-4, or 0-4 in legacy mode)")
    summary: str = Field(default="")
    reasoning: str = Field(default="")
    violations: list[Finding] = Field(default_factory=list)


class CriterionResult(CriterionJudgment):
    """Judged and scored result for one criterion."""

    weight: float = Field(default=1.0, ge=0, description="Configured criterion weight")
    percentage: float = Field(default=0.0, description="score / 4 * 100")
    weighted_points: float = Field(default=0.0, description="percentage * weight")


class SubjectiveResult(BaseModel):
    """Weighted rubric result across all criteria of a rule."""

    final_score: float = Field(description="Score on the 0-10 scale, one decimal")
    final_percentage: float = Field(description="Weighted average percentage")
    criteria: list[CriterionResult] = Field(default_factory=list)

    @property
    def violations(self) -> list[Finding]:
        """All criterion violations in criterion order."""
        return [v for criterion in self.criteria for v in criterion.violations]


class SemiObjectiveResult(BaseModel):
    """Violation-count result for a rule judged in semi-objective mode."""

    items: list[Finding] = Field(default_factory=list)
    status: Status | None = Field(
        default=None,
        description="None when clean, warning when violations exist (error after escalation)",
    )

    @computed_field
    @property
    def violation_count(self) -> int:
        return len(self.items)

    @computed_field
    @property
    def final_score(self) -> float:
        if not self.items:
            return float(MAX_SCORE)
        return float(max(MIN_SEMI_OBJECTIVE_SCORE, MAX_SCORE - len(self.items)))

    @computed_field
    @property
    def percentage(self) -> float:
        return (self.final_score / MAX_SCORE) * 100

    @computed_field
    @property
    def message(self) -> str:
        count = len(self.items)
        if count == 0:
            return "No issues found"
        return f"Found {count} issue{'s' if count > 1 else ''}"
