"""
Unified settings.

Environment-driven settings are read once and cached. The project file
(``contentlint.ini``) can then tighten the linter settings for one scan:
its global keys take precedence over the environment.

    settings = linter_settings_for(load_project_config_file("."))
    orchestrator = LintOrchestrator(judge, packs, config.sections, settings)

Dependencies: pydantic_settings
System role: Central configuration aggregator for the linter
"""

from functools import lru_cache

from pydantic import Field

from content_lint.configs.base import BaseSettings
from content_lint.configs.linter import LinterSettings
from content_lint.models.file_section import ProjectConfig


class Settings(BaseSettings):
    """Top-level settings; one field per config module."""

    linter: LinterSettings = Field(default_factory=LinterSettings)


@lru_cache
def get_settings() -> Settings:
    """Cached settings; the environment is read on first call only."""
    return Settings()


def linter_settings_for(project: ProjectConfig | None = None) -> LinterSettings:
    """
    Linter settings for a scan.

    Args:
        project: Parsed project file; None uses the environment alone

    Returns:
        LinterSettings: Environment settings with project globals applied
    """
    linter = get_settings().linter
    if project is None:
        return linter
    return linter.merged_with(project)
