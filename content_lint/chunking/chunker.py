"""
Recursive separator-based chunker.

Splits long documents into word-bounded segments, preferring the coarsest
natural boundary available:

    paragraph ("\\n\\n") -> line ("\\n") -> sentence (". ") -> word (" ")

and falling back to a forced split into fixed-size word runs when no
separator brings a piece under the limit. Every returned chunk records where
it starts and ends in the original document.

Dependencies: content_lint.models, content_lint.chunking.utils
System role: First stage of the lint pipeline
"""

from typing import Protocol, runtime_checkable

from content_lint.chunking.utils import count_words, split_into_words
from content_lint.core.exceptions import ConfigurationError
from content_lint.models.chunk import Chunk, ChunkingOptions

SEPARATORS: tuple[str, ...] = ("\n\n", "\n", ". ", " ")


@runtime_checkable
class ChunkingStrategy(Protocol):
    """Protocol for text chunking strategies."""

    @property
    def name(self) -> str:
        ...

    def chunk(self, content: str, options: ChunkingOptions | None = None) -> list[Chunk]:
        """Split text into ordered chunks with offsets."""
        ...


class RecursiveChunker:
    """Chunk documents by recursive separator splitting.

    Usage:
        chunker = RecursiveChunker()
        chunks = chunker.chunk(text, ChunkingOptions(max_chunk_size=300))
    """

    name = "recursive"

    def __init__(self, separators: tuple[str, ...] = SEPARATORS) -> None:
        self.separators = separators

    def chunk(self, content: str, options: ChunkingOptions | None = None) -> list[Chunk]:
        """
        Split content into chunks of at most ``max_chunk_size`` words.

        Args:
            content: Original document text
            options: Chunking options (defaults apply when omitted)

        Returns:
            list[Chunk]: Chunks in document order, offsets non-decreasing

        Raises:
            ConfigurationError: When max_chunk_size < 1
        """
        opts = options or ChunkingOptions()
        if opts.max_chunk_size < 1:
            raise ConfigurationError(
                f"max_chunk_size must be at least 1, got {opts.max_chunk_size}",
                key="max_chunk_size",
            )

        segments = self._recursive_chunk(content, opts.max_chunk_size, 0)
        return self._assign_offsets(content, segments)

    def _recursive_chunk(self, text: str, max_size: int, separator_index: int) -> list[str]:
        trimmed = text.strip()

        if count_words(trimmed) <= max_size:
            return [trimmed] if trimmed else []

        if separator_index >= len(self.separators):
            return self._force_split(trimmed, max_size)

        separator = self.separators[separator_index]
        if separator not in trimmed:
            return self._recursive_chunk(trimmed, max_size, separator_index + 1)

        segments: list[str] = []
        current = ""
        for part in trimmed.split(separator):
            candidate = current + separator + part if current else part
            if count_words(candidate) <= max_size:
                current = candidate
            else:
                if current:
                    segments.append(current.strip())
                current = part
        if current:
            segments.append(current.strip())

        # Oversized pieces move down the hierarchy, never back to this separator
        result: list[str] = []
        for segment in segments:
            if count_words(segment) > max_size:
                result.extend(self._recursive_chunk(segment, max_size, separator_index + 1))
            elif segment:
                result.append(segment)
        return result

    @staticmethod
    def _force_split(text: str, max_size: int) -> list[str]:
        words = split_into_words(text)
        return [" ".join(words[i:i + max_size]) for i in range(0, len(words), max_size)]

    @staticmethod
    def _assign_offsets(content: str, segments: list[str]) -> list[Chunk]:
        chunks: list[Chunk] = []
        cursor = 0

        for segment in segments:
            if not segment:
                continue
            start = content.find(segment, cursor)
            if start < 0:
                # Forced split normalises whitespace; treat as adjacent to the cursor
                start = cursor
            end = start + len(segment)
            chunks.append(
                Chunk(
                    content=segment,
                    start_offset=start,
                    end_offset=end,
                    index=len(chunks),
                )
            )
            cursor = end

        return chunks


_default_chunker = RecursiveChunker()


def chunk_text(content: str, options: ChunkingOptions | None = None) -> list[Chunk]:
    """Chunk ``content`` with the default recursive strategy."""
    return _default_chunker.chunk(content, options)
