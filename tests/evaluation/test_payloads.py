"""Tests for judged payload validation."""

import json

import pytest

from content_lint.core.exceptions import DataShapeError, PayloadValidationError
from content_lint.evaluation import (
    SemiObjectivePayload,
    SubjectivePayload,
    output_shape,
    parse_payload,
)
from content_lint.models import EvaluationMode

SUBJECTIVE = {
    "criteria": [
        {
            "name": "Structure",
            "score": 3,
            "summary": "Mostly clear",
            "reasoning": "Headings are consistent",
            "violations": [{"quote": "was run", "pre": "installer ", "analysis": "Passive"}],
        }
    ]
}


class TestSubjectivePayload:
    """Subjective shape."""

    def test_dict_payload(self) -> None:
        payload = parse_payload(SUBJECTIVE, EvaluationMode.SUBJECTIVE)

        assert isinstance(payload, SubjectivePayload)
        assert payload.criteria[0].score == 3
        assert payload.criteria[0].violations[0].quoted_text == "was run"
        assert payload.criteria[0].violations[0].context_before == "installer "

    def test_json_string_payload(self) -> None:
        payload = parse_payload(json.dumps(SUBJECTIVE), EvaluationMode.SUBJECTIVE)
        assert payload.criteria[0].name == "Structure"

    def test_fenced_json_payload(self) -> None:
        raw = f"Here you go:\n```json\n{json.dumps(SUBJECTIVE)}\n```"
        payload = parse_payload(raw, EvaluationMode.SUBJECTIVE)
        assert payload.criteria[0].name == "Structure"

    def test_bytes_payload(self) -> None:
        payload = parse_payload(json.dumps(SUBJECTIVE).encode(), EvaluationMode.SUBJECTIVE)
        assert len(payload.criteria) == 1

    def test_score_out_of_range(self) -> None:
        raw = {"criteria": [{"name": "Structure", "score": 7}]}
        with pytest.raises(PayloadValidationError) as exc_info:
            parse_payload(raw, EvaluationMode.SUBJECTIVE)

        assert exc_info.value.details["mode"] == "subjective"

    def test_missing_criteria(self) -> None:
        with pytest.raises(PayloadValidationError):
            parse_payload({"violations": []}, EvaluationMode.SUBJECTIVE)


class TestSemiObjectivePayload:
    """Semi-objective shape."""

    def test_violations(self) -> None:
        raw = {"violations": [{"description": "Passive voice", "analysis": "uses passive"}]}
        payload = parse_payload(raw, EvaluationMode.SEMI_OBJECTIVE)

        assert isinstance(payload, SemiObjectivePayload)
        assert payload.violations[0].criterion_name == "Passive voice"

    def test_items_alias(self) -> None:
        payload = parse_payload({"items": [{"analysis": "x"}]}, EvaluationMode.SEMI_OBJECTIVE)
        assert len(payload.violations) == 1

    def test_empty_object_is_clean(self) -> None:
        payload = parse_payload({}, EvaluationMode.SEMI_OBJECTIVE)
        assert payload.violations == []

    def test_model_instance_passes_through(self) -> None:
        payload = SemiObjectivePayload(violations=[])
        assert parse_payload(payload, EvaluationMode.SEMI_OBJECTIVE) is payload


class TestMalformedPayloads:
    """Anything that is not the expected object is a data-shape error."""

    @pytest.mark.parametrize("raw", ["not json", "[1, 2]", "", 42, None, ["a"]])
    def test_rejected(self, raw) -> None:
        with pytest.raises(DataShapeError):
            parse_payload(raw, EvaluationMode.SEMI_OBJECTIVE)

    def test_wrong_violation_type(self) -> None:
        with pytest.raises(PayloadValidationError):
            parse_payload({"violations": "many"}, EvaluationMode.SEMI_OBJECTIVE)


class TestOutputShape:
    """Schema handed to the judge."""

    def test_subjective_schema(self) -> None:
        schema = output_shape(EvaluationMode.SUBJECTIVE)
        assert "criteria" in schema["properties"]

    def test_semi_objective_schema(self) -> None:
        schema = output_shape(EvaluationMode.SEMI_OBJECTIVE)
        assert "violations" in schema["properties"]
