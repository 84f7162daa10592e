"""
Scoring engine.

Deterministic scoring of already-judged data, in two disciplines:
- Subjective: each criterion's 1-4 score becomes a percentage, percentages
  are averaged by configured weight and mapped onto a 0-10 scale
- Semi-objective: the judge reports only failures; each violation costs one
  point from 10, floored at 1

No judgment calls happen here.

Dependencies: content_lint.models, content_lint.chunking.merger
System role: Final stage of the lint pipeline
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal

from content_lint.chunking.merger import merge_violations
from content_lint.models.enums import Severity, Status
from content_lint.models.finding import Finding
from content_lint.models.scoring import (
    CriterionJudgment,
    CriterionResult,
    SemiObjectiveResult,
    SubjectiveResult,
)

MAX_CRITERION_SCORE = 4
MIN_AVERAGED_SCORE = 1
DEFAULT_WEIGHT = 1.0


def round_half_up(value: float, digits: int = 1) -> float:
    """Round with half-up semantics (7.25 -> 7.3), unlike round()."""
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def calculate_subjective_score(
    criteria: Sequence[CriterionJudgment],
    criterion_weights: Mapping[str, float] | None = None,
) -> SubjectiveResult:
    """
    Score judged criteria with configured weights.

    Weights are looked up by criterion name since judged output order is not
    guaranteed to match configuration order; unknown names weigh 1.

    Args:
        criteria: Judged criteria
        criterion_weights: Criterion name -> weight from the rule definition

    Returns:
        SubjectiveResult: final_score = round(weighted percentage / 10, 1);
        0 when the total weight is 0
    """
    weights = criterion_weights or {}
    total_points = 0.0
    total_weight = 0.0
    results: list[CriterionResult] = []

    for criterion in criteria:
        weight = weights.get(criterion.name, DEFAULT_WEIGHT)
        percentage = (criterion.score / MAX_CRITERION_SCORE) * 100
        weighted_points = percentage * weight

        total_points += weighted_points
        total_weight += weight

        results.append(
            CriterionResult(
                name=criterion.name,
                score=criterion.score,
                summary=criterion.summary,
                reasoning=criterion.reasoning,
                violations=list(criterion.violations),
                weight=weight,
                percentage=percentage,
                weighted_points=weighted_points,
            )
        )

    final_percentage = total_points / total_weight if total_weight > 0 else 0.0

    return SubjectiveResult(
        final_score=round_half_up(final_percentage / 10),
        final_percentage=final_percentage,
        criteria=results,
    )


def calculate_semi_objective_score(items: Sequence[Finding]) -> SemiObjectiveResult:
    """
    Score a flat list of reported violations.

    Args:
        items: Violations reported by the judge (passes are never reported)

    Returns:
        SemiObjectiveResult: status None when clean, warning otherwise
    """
    return SemiObjectiveResult(
        items=list(items),
        status=Status.WARNING if items else None,
    )


def apply_severity(result: SemiObjectiveResult, severity: Severity) -> SemiObjectiveResult:
    """Escalate a warning to an error when the rule is configured as an error."""
    if severity == Severity.ERROR and result.items:
        return result.model_copy(update={"status": Status.ERROR})
    return result


@dataclass
class _CriterionAccumulator:
    weight: float
    total_score: float = 0.0
    total_share: float = 0.0
    violations: list[Finding] = field(default_factory=list)
    summaries: list[str] = field(default_factory=list)
    reasonings: list[str] = field(default_factory=list)


def average_subjective_results(
    results: Sequence[SubjectiveResult],
    chunk_word_counts: Sequence[int],
) -> SubjectiveResult:
    """
    Combine per-chunk subjective results into one document-level result.

    Each criterion's score is averaged with the chunk's share of the total
    word count, rounded and clamped to 1-4, then the whole set is re-scored.
    Violations are deduplicated across chunks.

    Args:
        results: Per-chunk results, in chunk order
        chunk_word_counts: Word count of each chunk, parallel to results

    Returns:
        SubjectiveResult: Aggregated result; final_score 0 when results is empty
    """
    if not results:
        return SubjectiveResult(final_score=0.0, final_percentage=0.0, criteria=[])

    total_words = sum(chunk_word_counts)
    entries: dict[str, _CriterionAccumulator] = {}

    for i, result in enumerate(results):
        if total_words > 0:
            words = chunk_word_counts[i] if i < len(chunk_word_counts) else 0
            share = words / total_words
        else:
            share = 1 / len(results)

        for criterion in result.criteria:
            entry = entries.setdefault(
                criterion.name, _CriterionAccumulator(weight=criterion.weight)
            )
            entry.total_score += criterion.score * share
            entry.total_share += share
            entry.violations.extend(criterion.violations)
            if criterion.summary:
                entry.summaries.append(criterion.summary)
            if criterion.reasoning:
                entry.reasonings.append(criterion.reasoning)

    judgments: list[CriterionJudgment] = []
    for name, entry in entries.items():
        average = entry.total_score / entry.total_share if entry.total_share > 0 else 0.0
        score = int(round_half_up(average, 0))
        judgments.append(
            CriterionJudgment(
                name=name,
                score=max(MIN_AVERAGED_SCORE, min(MAX_CRITERION_SCORE, score)),
                summary=" ".join(entry.summaries),
                reasoning=" ".join(entry.reasonings),
                violations=merge_violations([entry.violations]),
            )
        )

    return calculate_subjective_score(
        judgments, {name: entry.weight for name, entry in entries.items()}
    )
