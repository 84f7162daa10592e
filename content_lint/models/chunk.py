"""
Chunk domain models.

Represents a bounded slice of a source document and the options that
control how documents are sliced.

Dependencies: pydantic
System role: Chunker input/output data structures
"""

from pydantic import BaseModel, ConfigDict, Field


class Chunk(BaseModel):
    """Contiguous document segment with character offsets."""

    model_config = ConfigDict(frozen=True)

    content: str = Field(description="Chunk text content")
    start_offset: int = Field(ge=0, description="0-based start offset in the original document")
    end_offset: int = Field(ge=0, description="0-based end offset (exclusive)")
    index: int = Field(ge=0, description="Sequential chunk position")


class ChunkingOptions(BaseModel):
    """Chunking configuration.

    ``max_chunk_size`` is not constrained here so that the chunker can
    report an out-of-range value as a configuration error.
    """

    max_chunk_size: int = Field(default=500, description="Maximum words per chunk")
    overlap_fraction: float = Field(
        default=0.1,
        ge=0.0,
        lt=1.0,
        description="Fraction of overlap between chunks (not applied)",
    )
    preserve_sentences: bool = Field(
        default=True,
        description="Avoid breaking mid-sentence (not applied)",
    )
