"""
Evidence locator.

Maps a reported finding back to a deterministic 1-based line/column in the
original document. Two anchoring strategies, selected by which evidence
fields are populated:

- Quote-anchored: find every occurrence of the quoted text and prefer the
  one whose surrounding text equals the reported context (+2 for an exact
  before-window, +2 for an exact after-window; ties keep the earliest).
- Seam-anchored: with no quote, anchor at the tightest gap between an
  occurrence of the before-context and the next occurrence of the
  after-context, or next to whichever single context was given.

A missing match is reported as None, never as an exception.

Dependencies: content_lint.models
System role: Third stage of the lint pipeline (after merging)
"""

from typing import Any, Iterable, Iterator

from content_lint.models.finding import Finding, LocatedFinding, Location

QUOTE_CONTEXT_MATCH_POINTS = 2


def compute_line_column(text: str, index: int) -> Location:
    """
    Convert a character index into a 1-based line and column.

    Args:
        text: Document text
        index: 0-based character index

    Returns:
        Location: Line counts newlines before index; column counts from the
        character right after the last newline (or document start)
    """
    line = text.count("\n", 0, index) + 1
    last_break = text.rfind("\n", 0, index)
    return Location(line=line, column=index - last_break)


def location_to_index(text: str, location: Location) -> int:
    """Inverse of compute_line_column: character index of a location."""
    line_start = 0
    for _ in range(location.line - 1):
        newline = text.find("\n", line_start)
        if newline < 0:
            break
        line_start = newline + 1
    return line_start + location.column - 1


def _occurrences(text: str, needle: str) -> Iterator[int]:
    """Start indices of every (possibly overlapping) occurrence of needle."""
    start = text.find(needle)
    while start >= 0:
        yield start
        start = text.find(needle, start + 1)


def _locate_quote(text: str, quote: str, before: str, after: str) -> int | None:
    candidates = list(_occurrences(text, quote))
    if not candidates:
        return None
    if len(candidates) == 1:
        return candidates[0]

    best_index = candidates[0]
    best_score = -1
    for index in candidates:
        score = 0
        if before and text[max(0, index - len(before)):index] == before:
            score += QUOTE_CONTEXT_MATCH_POINTS
        quote_end = index + len(quote)
        if after and text[quote_end:quote_end + len(after)] == after:
            score += QUOTE_CONTEXT_MATCH_POINTS
        if score > best_score:
            best_score = score
            best_index = index
    return best_index


def _locate_seam(text: str, before: str, after: str) -> int | None:
    if before and after:
        best_anchor: int | None = None
        best_gap: int | None = None
        for before_index in _occurrences(text, before):
            before_end = before_index + len(before)
            after_index = text.find(after, before_end)
            if after_index < 0:
                # Later before-occurrences cannot find an after either
                break
            gap = after_index - before_end
            if best_gap is None or gap < best_gap:
                best_gap = gap
                best_anchor = before_end
        if best_anchor is not None:
            return best_anchor

    if before:
        before_index = text.find(before)
        if before_index >= 0:
            return before_index + len(before)

    if after:
        after_index = text.find(after)
        if after_index >= 0:
            return after_index

    return None


def locate(document_text: str, evidence: Any) -> Location | None:
    """
    Locate a finding's evidence in the document.

    Args:
        document_text: Full original document
        evidence: Any object exposing ``quoted_text``, ``context_before`` and
            ``context_after`` (Finding, Evidence, ...); missing attributes count
            as empty

    Returns:
        Location | None: Position of the anchor, or None when nothing matches
    """
    quote = getattr(evidence, "quoted_text", None) or ""
    before = getattr(evidence, "context_before", None) or ""
    after = getattr(evidence, "context_after", None) or ""

    if quote:
        index = _locate_quote(document_text, quote, before, after)
    else:
        index = _locate_seam(document_text, before, after)

    if index is None:
        return None
    return compute_line_column(document_text, index)


def annotate_findings(document_text: str, findings: Iterable[Finding]) -> list[LocatedFinding]:
    """Attach a location to each finding; unlocated findings are kept with None."""
    return [
        LocatedFinding(finding=finding, location=locate(document_text, finding))
        for finding in findings
    ]
