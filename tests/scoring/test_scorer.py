"""Tests for the scoring engine."""

import pytest
from pydantic import ValidationError

from content_lint.models import (
    CriterionJudgment,
    Finding,
    SemiObjectiveResult,
    Severity,
    Status,
)
from content_lint.scoring import (
    apply_severity,
    average_subjective_results,
    calculate_semi_objective_score,
    calculate_subjective_score,
    round_half_up,
)


def _criterion(name: str, score: int, *analyses: str) -> CriterionJudgment:
    return CriterionJudgment(
        name=name,
        score=score,
        summary=f"{name} summary",
        reasoning=f"{name} reasoning",
        violations=[Finding(analysis=a) for a in analyses],
    )


class TestRoundHalfUp:
    """Half-up rounding."""

    @pytest.mark.parametrize(
        "value, digits, expected",
        [(7.25, 1, 7.3), (0.05, 1, 0.1), (6.24, 1, 6.2), (2.5, 0, 3.0), (3.5, 0, 4.0)],
    )
    def test_rounds_half_up(self, value: float, digits: int, expected: float) -> None:
        assert round_half_up(value, digits) == expected


class TestSubjectiveScore:
    """Weighted rubric scoring."""

    def test_weighted_average(self) -> None:
        """Percentages average by weight and map to the 0-10 scale."""
        result = calculate_subjective_score(
            [_criterion("Structure", 4), _criterion("Wording", 2)],
            {"Structure": 1, "Wording": 3},
        )

        assert result.final_percentage == pytest.approx(62.5)
        assert result.final_score == 6.3
        assert [c.percentage for c in result.criteria] == [100.0, 50.0]
        assert [c.weighted_points for c in result.criteria] == [100.0, 150.0]

    def test_weights_looked_up_by_name(self) -> None:
        """Criterion order in the payload does not matter."""
        weights = {"Structure": 1, "Wording": 3}
        forward = calculate_subjective_score(
            [_criterion("Structure", 4), _criterion("Wording", 2)], weights
        )
        backward = calculate_subjective_score(
            [_criterion("Wording", 2), _criterion("Structure", 4)], weights
        )
        assert forward.final_score == backward.final_score

    def test_unknown_criterion_weighs_one(self) -> None:
        """Names missing from the weights default to weight 1."""
        result = calculate_subjective_score([_criterion("Other", 3)], {"Structure": 5})

        assert result.criteria[0].weight == 1.0
        assert result.final_score == 7.5

    def test_all_max_scores_give_ten(self) -> None:
        result = calculate_subjective_score([_criterion("A", 4), _criterion("B", 4)])
        assert result.final_score == 10.0

    def test_empty_criteria_score_zero(self) -> None:
        """No criteria means no weight; the score is 0."""
        result = calculate_subjective_score([])

        assert result.final_score == 0.0
        assert result.final_percentage == 0.0

    def test_zero_total_weight_scores_zero(self) -> None:
        """A zero total weight never divides by zero."""
        result = calculate_subjective_score([_criterion("A", 4)], {"A": 0})
        assert result.final_score == 0.0

    def test_violations_collected_in_criterion_order(self) -> None:
        result = calculate_subjective_score(
            [_criterion("A", 2, "a1", "a2"), _criterion("B", 3, "b1")]
        )
        assert [v.analysis for v in result.violations] == ["a1", "a2", "b1"]

    def test_score_out_of_range_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CriterionJudgment(name="A", score=5)


class TestSemiObjectiveScore:
    """Violation-count scoring."""

    def test_clean_result(self) -> None:
        result = calculate_semi_objective_score([])

        assert result.final_score == 10.0
        assert result.percentage == 100.0
        assert result.violation_count == 0
        assert result.message == "No issues found"
        assert result.status is None

    def test_single_violation_message(self) -> None:
        result = calculate_semi_objective_score([Finding(analysis="x")])

        assert result.final_score == 9.0
        assert result.message == "Found 1 issue"
        assert result.status == Status.WARNING

    def test_each_violation_costs_a_point(self) -> None:
        items = [Finding(analysis=str(i)) for i in range(3)]
        result = calculate_semi_objective_score(items)

        assert result.final_score == 7.0
        assert result.percentage == 70.0
        assert result.message == "Found 3 issues"

    def test_score_floored_at_one(self) -> None:
        items = [Finding(analysis=str(i)) for i in range(12)]
        assert calculate_semi_objective_score(items).final_score == 1.0

    def test_score_derived_from_items(self) -> None:
        """Derived fields are serialised with the result."""
        dumped = calculate_semi_objective_score([Finding(analysis="x")]).model_dump()
        assert dumped["final_score"] == 9.0
        assert dumped["violation_count"] == 1

    def test_clean_is_absent_status_not_ok(self) -> None:
        """Only warning and error are reportable statuses."""
        assert {s.value for s in Status} == {"warning", "error"}
        with pytest.raises(ValidationError):
            SemiObjectiveResult(status="ok")


class TestApplySeverity:
    """Severity escalation."""

    def test_error_severity_escalates(self) -> None:
        result = calculate_semi_objective_score([Finding(analysis="x")])
        escalated = apply_severity(result, Severity.ERROR)

        assert escalated.status == Status.ERROR
        assert result.status == Status.WARNING

    def test_warning_severity_keeps_status(self) -> None:
        result = calculate_semi_objective_score([Finding(analysis="x")])
        assert apply_severity(result, Severity.WARNING).status == Status.WARNING

    def test_clean_result_never_escalates(self) -> None:
        result = SemiObjectiveResult()
        assert apply_severity(result, Severity.ERROR).status is None


class TestAverageSubjectiveResults:
    """Chunk-level aggregation weighted by word count."""

    def test_word_count_weighting(self) -> None:
        """A longer chunk dominates the average."""
        long_chunk = calculate_subjective_score([_criterion("Structure", 4)])
        short_chunk = calculate_subjective_score([_criterion("Structure", 2)])

        result = average_subjective_results([long_chunk, short_chunk], [30, 10])

        # 4 * 0.75 + 2 * 0.25 = 3.5, rounded half up
        assert result.criteria[0].score == 4
        assert result.final_score == 10.0

    def test_equal_chunks_round_half_up(self) -> None:
        first = calculate_subjective_score([_criterion("Structure", 1)])
        second = calculate_subjective_score([_criterion("Structure", 2)])

        result = average_subjective_results([first, second], [10, 10])

        assert result.criteria[0].score == 2
        assert result.final_score == 5.0

    def test_averaged_score_clamped_to_one(self) -> None:
        """Legacy zero scores never average below one."""
        zero = calculate_subjective_score([_criterion("A", 0)])
        result = average_subjective_results([zero, zero], [5, 5])
        assert result.criteria[0].score == 1

    def test_weights_preserved(self) -> None:
        weights = {"Structure": 1, "Wording": 3}
        first = calculate_subjective_score(
            [_criterion("Structure", 4), _criterion("Wording", 2)], weights
        )
        second = calculate_subjective_score(
            [_criterion("Structure", 4), _criterion("Wording", 2)], weights
        )

        result = average_subjective_results([first, second], [10, 10])

        assert [c.weight for c in result.criteria] == [1.0, 3.0]
        assert result.final_score == 6.3

    def test_violations_deduplicated_across_chunks(self) -> None:
        first = calculate_subjective_score([_criterion("A", 3, "Same issue", "Only first")])
        second = calculate_subjective_score([_criterion("A", 3, "same issue ")])

        result = average_subjective_results([first, second], [10, 10])

        assert [v.analysis for v in result.violations] == ["Same issue", "Only first"]

    def test_summaries_joined(self) -> None:
        first = calculate_subjective_score([_criterion("A", 3)])
        second = calculate_subjective_score([_criterion("A", 3)])

        result = average_subjective_results([first, second], [1, 1])

        assert result.criteria[0].summary == "A summary A summary"

    def test_zero_word_counts_share_equally(self) -> None:
        first = calculate_subjective_score([_criterion("A", 1)])
        second = calculate_subjective_score([_criterion("A", 3)])

        result = average_subjective_results([first, second], [0, 0])

        assert result.criteria[0].score == 2

    def test_empty_results(self) -> None:
        result = average_subjective_results([], [])

        assert result.final_score == 0.0
        assert result.criteria == []
