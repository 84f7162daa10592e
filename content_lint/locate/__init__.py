"""
Locate module.

Maps findings back to line/column positions in the source document.
"""

from content_lint.locate.evidence_locator import (
    annotate_findings,
    compute_line_column,
    locate,
    location_to_index,
)
from content_lint.locate.line_numbering import (
    get_line_content,
    prepend_line_numbers,
    strip_line_numbers,
)

__all__ = [
    "locate",
    "annotate_findings",
    "compute_line_column",
    "location_to_index",
    "prepend_line_numbers",
    "strip_line_numbers",
    "get_line_content",
]
