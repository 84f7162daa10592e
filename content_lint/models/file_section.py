"""
File-section configuration models.

Dependencies: pydantic
System role: Resolver input (sections) and output (per-file resolution)
"""

from pydantic import BaseModel, ConfigDict, Field

from content_lint.models.enums import Severity

OverrideValue = str | int | float | bool


class FilePatternConfig(BaseModel):
    """Glob-scoped configuration block.

    ``run_rules`` is None when the section does not mention packs at all,
    and an empty list when it explicitly excludes matching files.
    """

    model_config = ConfigDict(frozen=True)

    pattern: str = Field(description="POSIX-style glob matched against relative paths")
    run_rules: list[str] | None = Field(default=None, description="Rule pack names")
    overrides: dict[str, OverrideValue] = Field(default_factory=dict)


class ResolvedFileConfig(BaseModel):
    """Effective packs and overrides for one file path."""

    packs: list[str] = Field(default_factory=list)
    overrides: dict[str, OverrideValue] = Field(default_factory=dict)
    matched: bool = Field(default=False, description="Whether any section matched")


class ProjectConfig(BaseModel):
    """Parsed project configuration file."""

    rules_path: str | None = Field(default=None, description="Directory holding rule packs")
    concurrency: int | None = Field(default=None, gt=0, description="None keeps the environment setting")
    default_severity: Severity | None = Field(default=None)
    sections: list[FilePatternConfig] = Field(default_factory=list)
