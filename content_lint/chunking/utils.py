"""Word-level helpers shared by the chunker and the scorer."""

import re

_WHITESPACE = re.compile(r"\s+")


def split_into_words(text: str) -> list[str]:
    """Whitespace-delimited tokens of ``text``."""
    return [word for word in _WHITESPACE.sub(" ", text).strip().split(" ") if word]


def count_words(text: str) -> int:
    return len(split_into_words(text))
