"""
POSIX-style glob matching for file sections.

Patterns are compiled to anchored regular expressions:
- ``**`` as a whole segment matches zero or more path segments
- ``*`` and ``?`` never cross a ``/``
- ``[abc]``, ``[a-z]``, ``[!abc]`` character classes, never matching ``/``
- ``{a,b}`` brace lists, nestable, each alternative a full sub-pattern
- ``\\`` escapes the next character

Paths are matched after normalising separators to ``/``.
"""

import re
from functools import lru_cache

from content_lint.core.exceptions import InvalidPatternError

_SEGMENT_BOUNDARY = "/{,"


def normalize_path(file_path: str) -> str:
    """Forward-slash path without a leading ``./``."""
    normalized = file_path.replace("\\", "/")
    while normalized.startswith("./"):
        normalized = normalized[2:]
    return normalized


def _translate_class(pattern: str, start: int) -> tuple[str, int]:
    end = start + 1
    if end < len(pattern) and pattern[end] in "!^":
        end += 1
    if end < len(pattern) and pattern[end] == "]":
        end += 1
    while end < len(pattern) and pattern[end] != "]":
        end += 1
    if end >= len(pattern):
        raise InvalidPatternError(pattern, "unterminated character class")

    body = pattern[start + 1:end]
    if body[0] in "!^":
        body = "^" + body[1:]
    body = body.replace("\\", "\\\\")
    return f"(?!/)[{body}]", end + 1


def _translate(pattern: str, i: int, depth: int) -> tuple[str, int]:
    parts: list[str] = []
    n = len(pattern)

    while i < n:
        c = pattern[i]

        if c == "*":
            if i + 1 < n and pattern[i + 1] == "*":
                after = i + 2
                at_segment_start = i == 0 or pattern[i - 1] in _SEGMENT_BOUNDARY
                if at_segment_start and after < n and pattern[after] == "/":
                    parts.append("(?:[^/]*/)*")
                    i = after + 1
                    continue
                at_segment_end = after == n or (depth > 0 and pattern[after] in ",}")
                if at_segment_start and at_segment_end:
                    parts.append(".*")
                    i = after
                    continue
                parts.append("[^/]*")
                i = after
                continue
            parts.append("[^/]*")
            i += 1
        elif c == "?":
            parts.append("[^/]")
            i += 1
        elif c == "[":
            translated, i = _translate_class(pattern, i)
            parts.append(translated)
        elif c == "{":
            alternatives: list[str] = []
            i += 1
            while True:
                alternative, i = _translate(pattern, i, depth + 1)
                alternatives.append(alternative)
                if i >= n:
                    raise InvalidPatternError(pattern, "unbalanced '{'")
                if pattern[i] == ",":
                    i += 1
                    continue
                i += 1  # closing brace
                break
            parts.append("(?:" + "|".join(alternatives) + ")")
        elif c in ",}" and depth > 0:
            return "".join(parts), i
        elif c == "}":
            raise InvalidPatternError(pattern, "unbalanced '}'")
        elif c == "\\":
            if i + 1 >= n:
                raise InvalidPatternError(pattern, "trailing escape character")
            parts.append(re.escape(pattern[i + 1]))
            i += 2
        else:
            parts.append(re.escape(c))
            i += 1

    return "".join(parts), i


@lru_cache(maxsize=512)
def compile_glob(pattern: str) -> re.Pattern[str]:
    """
    Compile a glob pattern.

    Raises:
        InvalidPatternError: For empty patterns or invalid syntax
    """
    if not pattern or not pattern.strip():
        raise InvalidPatternError(pattern, "empty pattern")
    while pattern.startswith("./"):
        pattern = pattern[2:]
    regex, _ = _translate(pattern, 0, 0)
    try:
        return re.compile(f"(?s:{regex})")
    except re.error as e:
        raise InvalidPatternError(pattern, str(e)) from e


def glob_match(file_path: str, pattern: str) -> bool:
    """True when the whole normalised path matches the pattern."""
    return compile_glob(pattern).fullmatch(normalize_path(file_path)) is not None


def specificity_score(pattern: str) -> int:
    """Deeper and more literal patterns score higher; length breaks ties."""
    segments = len(pattern.split("/"))
    wildcards = pattern.count("*")
    return segments * 100 - wildcards * 10 + len(pattern)
