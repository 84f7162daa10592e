"""
Chunking module.

Contains:
- chunker: recursive separator-based document chunker
- merger: cross-chunk finding deduplication
- utils: word counting helpers
"""

from content_lint.chunking.chunker import (
    SEPARATORS,
    ChunkingStrategy,
    RecursiveChunker,
    chunk_text,
)
from content_lint.chunking.merger import merge_violations
from content_lint.chunking.utils import count_words, split_into_words

__all__ = [
    "SEPARATORS",
    "ChunkingStrategy",
    "RecursiveChunker",
    "chunk_text",
    "merge_violations",
    "count_words",
    "split_into_words",
]
