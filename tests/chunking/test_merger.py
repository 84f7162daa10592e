"""Tests for cross-chunk finding deduplication."""

from content_lint.chunking import merge_violations
from content_lint.models import Finding


def _finding(analysis: str | None, suggestion: str | None = None) -> Finding:
    return Finding(analysis=analysis, suggestion=suggestion)


class TestMergeViolations:
    """merge_violations behaviour."""

    def test_empty_input(self) -> None:
        """No chunks, no findings."""
        assert merge_violations([]) == []
        assert merge_violations([[], []]) == []

    def test_distinct_findings_kept_in_order(self) -> None:
        """Distinct analyses are kept in first-seen order."""
        merged = merge_violations([[_finding("a"), _finding("b")], [_finding("c")]])
        assert [f.analysis for f in merged] == ["a", "b", "c"]

    def test_duplicates_are_case_and_whitespace_insensitive(self) -> None:
        """Normalised analysis text decides identity."""
        merged = merge_violations([
            [_finding("Passive voice in intro", suggestion="first")],
            [_finding("  passive VOICE in intro ", suggestion="second")],
        ])

        assert len(merged) == 1
        assert merged[0].suggestion == "first"

    def test_duplicates_within_one_chunk(self) -> None:
        """Duplicates inside a single chunk are dropped too."""
        merged = merge_violations([[_finding("x"), _finding("X")]])
        assert len(merged) == 1

    def test_findings_without_analysis_collapse(self) -> None:
        """Missing and empty analyses share one key."""
        merged = merge_violations([[_finding(None, "one")], [_finding("", "two")], [_finding("  ")]])

        assert len(merged) == 1
        assert merged[0].suggestion == "one"
