"""
Cross-chunk finding merger.

Findings are judged independently per chunk, so the same issue can be
reported more than once. Deduplication is exact after normalising the
analysis text (trimmed, lower-cased); findings without an analysis share
the empty key, so at most one of them survives.

Callers must pass per-chunk lists ordered by ``Chunk.index`` for the
first-seen-wins rule to be deterministic.
"""

from typing import Iterable, Sequence

from content_lint.models.finding import Finding


def merge_violations(per_chunk: Sequence[Iterable[Finding]]) -> list[Finding]:
    """
    Flatten per-chunk findings and drop duplicates.

    Args:
        per_chunk: Finding lists, one per chunk, in chunk order

    Returns:
        list[Finding]: First occurrence of each distinct finding, in first-seen order
    """
    seen: set[str] = set()
    merged: list[Finding] = []
    for findings in per_chunk:
        for finding in findings:
            key = finding.dedup_key
            if key in seen:
                continue
            seen.add(key)
            merged.append(finding)
    return merged
