"""
Rule definition models.

A rule belongs to a pack and declares its evaluation mode, severity and
ordered criteria. The instruction text handed to the judge is opaque here.

Dependencies: pydantic
System role: Rule configuration consumed by evaluators and the scorer
"""

from pydantic import BaseModel, Field

from content_lint.models.enums import EvaluationMode, Severity


class CriterionDefinition(BaseModel):
    """Configured criterion with its weight."""

    name: str = Field(description="Criterion name as judged output reports it")
    weight: float = Field(default=1.0, gt=0, description="Relative weight")


class RuleDefinition(BaseModel):
    """One rule of a rule pack."""

    id: str = Field(description="Rule identifier, unique within its pack")
    name: str = Field(description="Human-readable rule name")
    pack: str = Field(description="Rule pack the rule belongs to")
    mode: EvaluationMode = Field(default=EvaluationMode.SUBJECTIVE)
    severity: Severity | None = Field(default=None, description="None falls back to the configured default")
    criteria: list[CriterionDefinition] = Field(default_factory=list)
    instructions: str = Field(default="", description="Instruction text sent with each chunk")
    evaluator: str = Field(default="base", description="Registered evaluator type")

    @property
    def criterion_weights(self) -> dict[str, float]:
        """Criterion name -> weight, for lookup by name."""
        return {c.name: c.weight for c in self.criteria}
