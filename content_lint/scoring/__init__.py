"""
Scoring module.

Converts judged per-criterion or per-item data into reproducible scores.
"""

from content_lint.scoring.scorer import (
    apply_severity,
    average_subjective_results,
    calculate_semi_objective_score,
    calculate_subjective_score,
    round_half_up,
)

__all__ = [
    "calculate_subjective_score",
    "calculate_semi_objective_score",
    "apply_severity",
    "average_subjective_results",
    "round_half_up",
]
