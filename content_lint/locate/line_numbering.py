"""
Line-numbering helpers.

The judge is handed line-numbered text so it never has to count lines
itself; numbers are stripped again before anything is located.
"""

import re

_LINE_NUMBER_PREFIX = re.compile(r"^\d+\t")


def prepend_line_numbers(content: str, start: int = 1) -> str:
    """Prefix each line with ``<n>\\t``."""
    return "\n".join(f"{i}\t{line}" for i, line in enumerate(content.split("\n"), start))


def strip_line_numbers(content: str) -> str:
    """Remove a leading ``<n>\\t`` from every line."""
    return "\n".join(_LINE_NUMBER_PREFIX.sub("", line) for line in content.split("\n"))


def get_line_content(text: str, line_number: int) -> str:
    """Content of a 1-based line, or "" when out of range."""
    lines = text.split("\n")
    if line_number < 1 or line_number > len(lines):
        return ""
    return lines[line_number - 1]
