"""
Linter configuration settings.

Settings for chunking, concurrency, severities and file-section resolution.

Dependencies: pydantic_settings
System role: Linting engine configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from content_lint.configs.base import BaseSettings
from content_lint.models.enums import MergePolicy, SectionOrder, Severity
from content_lint.models.file_section import ProjectConfig


class LinterSettings(BaseSettings):
    """Settings for the linting pipeline."""

    model_config = SettingsConfigDict(
        env_prefix="CONTENT_LINT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    concurrency: int = Field(
        default=4,
        gt=0,
        description="Maximum concurrent judgment calls",
    )
    max_chunk_size: int = Field(
        default=500,
        description="Maximum words per chunk",
    )
    overlap_fraction: float = Field(
        default=0.1,
        ge=0.0,
        lt=1.0,
        description="Chunk overlap fraction (carried, not applied)",
    )
    default_severity: Severity = Field(
        default=Severity.WARNING,
        description="Severity for rules that declare none",
    )
    strict_sections: bool = Field(
        default=False,
        description="Fail files that no configuration section matches",
    )
    merge_policy: MergePolicy = Field(
        default=MergePolicy.REPLACE,
        description="How packs from several matching sections combine",
    )
    section_order: SectionOrder = Field(
        default=SectionOrder.DECLARATION,
        description="Order in which matching sections are applied",
    )
    config_filename: str = Field(
        default="contentlint.ini",
        description="Project configuration file name",
    )

    def merged_with(self, project: ProjectConfig) -> "LinterSettings":
        """Copy with the project file's global keys applied over these settings."""
        updates: dict[str, object] = {}
        if project.concurrency is not None:
            updates["concurrency"] = project.concurrency
        if project.default_severity is not None:
            updates["default_severity"] = project.default_severity
        return self.model_copy(update=updates)
