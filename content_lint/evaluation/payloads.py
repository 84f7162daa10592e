"""
Judged payload validation.

The judgment service returns untyped JSON. Payloads are validated at this
boundary into one of two typed shapes, selected by the rule's evaluation
mode, before anything in the core touches them:
- SubjectivePayload: {"criteria": [{name, score, summary, reasoning, violations}]}
- SemiObjectivePayload: {"violations": [{description, analysis, ...}]}

Dependencies: pydantic
System role: Data-shape boundary between the judge and the core
"""

import json
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

from content_lint.core.exceptions import PayloadValidationError
from content_lint.models.enums import EvaluationMode
from content_lint.models.finding import Finding
from content_lint.models.scoring import CriterionJudgment


class SubjectivePayload(BaseModel):
    """Judged rubric scores for every criterion of a rule."""

    model_config = ConfigDict(extra="ignore")

    criteria: list[CriterionJudgment]


class SemiObjectivePayload(BaseModel):
    """Judged violations; passes are not reported."""

    model_config = ConfigDict(extra="ignore")

    violations: list[Finding] = Field(
        default_factory=list,
        validation_alias=AliasChoices("violations", "items"),
    )


ParsedPayload = SubjectivePayload | SemiObjectivePayload

_PAYLOAD_MODELS: dict[EvaluationMode, type[BaseModel]] = {
    EvaluationMode.SUBJECTIVE: SubjectivePayload,
    EvaluationMode.SEMI_OBJECTIVE: SemiObjectivePayload,
}


def output_shape(mode: EvaluationMode) -> dict[str, Any]:
    """JSON schema describing the payload the judge must return."""
    return _PAYLOAD_MODELS[mode].model_json_schema()


def _extract_json(text: str) -> str:
    """Strip markdown code fences around a JSON document."""
    if "```json" in text:
        text = text.split("```json", 1)[1].split("```", 1)[0]
    elif "```" in text:
        text = text.split("```", 1)[1].split("```", 1)[0]
    return text.strip()


def parse_payload(raw: Any, mode: EvaluationMode) -> ParsedPayload:
    """
    Validate a judged payload.

    Args:
        raw: Parsed dict, a model instance, or the raw response text
        mode: Evaluation mode selecting the expected shape

    Returns:
        ParsedPayload: SubjectivePayload or SemiObjectivePayload

    Raises:
        PayloadValidationError: When the payload is not JSON or does not match
    """
    model = _PAYLOAD_MODELS[mode]
    if isinstance(raw, model):
        return raw
    if isinstance(raw, BaseModel):
        raw = raw.model_dump()

    if isinstance(raw, (str, bytes)):
        text = raw.decode("utf-8", errors="replace") if isinstance(raw, bytes) else raw
        try:
            raw = json.loads(_extract_json(text))
        except json.JSONDecodeError as e:
            raise PayloadValidationError(
                f"Judged output is not valid JSON: {e}", mode=mode.value
            ) from e

    if not isinstance(raw, dict):
        raise PayloadValidationError(
            f"Judged output must be an object, got {type(raw).__name__}",
            mode=mode.value,
        )

    try:
        return model.model_validate(raw)
    except ValidationError as e:
        raise PayloadValidationError(
            f"Judged output does not match the {mode.value} shape",
            mode=mode.value,
            details={"errors": e.error_count()},
        ) from e
