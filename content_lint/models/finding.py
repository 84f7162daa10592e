"""
Finding domain models.

Represents a single reported issue, the evidence used to relocate it in the
original document, and its derived position.

Judged payloads use several spellings for the same field (``pre``/``post``
from the criteria schema, ``quote``, camelCase keys); all are accepted as
validation aliases.

Dependencies: pydantic
System role: Finding/violation data structures
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class Evidence(BaseModel):
    """Anchor text used to relocate a finding."""

    model_config = ConfigDict(frozen=True)

    quoted_text: str | None = Field(
        default=None,
        validation_alias=AliasChoices("quoted_text", "quotedText", "quote"),
        description="Exact text the finding refers to",
    )
    context_before: str | None = Field(
        default=None,
        validation_alias=AliasChoices("context_before", "contextBefore", "pre"),
        description="Text immediately preceding the anchor",
    )
    context_after: str | None = Field(
        default=None,
        validation_alias=AliasChoices("context_after", "contextAfter", "post"),
        description="Text immediately following the anchor",
    )


class Finding(Evidence):
    """Single reported issue produced by judging one chunk."""

    criterion_name: str | None = Field(
        default=None,
        validation_alias=AliasChoices("criterion_name", "criterionName", "description"),
        description="Criterion or short description of the issue",
    )
    analysis: str | None = Field(default=None, description="Explanation of the issue")
    suggestion: str | None = Field(default=None, description="Suggested fix")

    @property
    def dedup_key(self) -> str:
        """Case-insensitive, trimmed analysis used for deduplication."""
        return (self.analysis or "").strip().lower()


class Location(BaseModel):
    """1-based line/column position in a document."""

    model_config = ConfigDict(frozen=True)

    line: int = Field(ge=1, description="1-based line number")
    column: int = Field(ge=1, description="1-based column number")


class LocatedFinding(BaseModel):
    """Finding annotated with its position, if one could be determined."""

    finding: Finding
    location: Location | None = Field(
        default=None,
        description="Position in the source document; None when unknown",
    )

    @property
    def has_location(self) -> bool:
        return self.location is not None
