"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from content_lint.configs import LinterSettings, Settings, get_settings, linter_settings_for
from content_lint.models import MergePolicy, ProjectConfig, SectionOrder, Severity


class TestLinterSettings:
    """LinterSettings defaults and environment mapping."""

    def test_defaults(self, monkeypatch) -> None:
        for name in ("CONCURRENCY", "MAX_CHUNK_SIZE", "DEFAULT_SEVERITY", "MERGE_POLICY"):
            monkeypatch.delenv(f"CONTENT_LINT_{name}", raising=False)

        settings = LinterSettings(_env_file=None)

        assert settings.concurrency == 4
        assert settings.max_chunk_size == 500
        assert settings.default_severity == Severity.WARNING
        assert settings.strict_sections is False
        assert settings.merge_policy == MergePolicy.REPLACE
        assert settings.section_order == SectionOrder.DECLARATION

    def test_environment_overrides(self, monkeypatch) -> None:
        monkeypatch.setenv("CONTENT_LINT_CONCURRENCY", "8")
        monkeypatch.setenv("CONTENT_LINT_DEFAULT_SEVERITY", "error")
        monkeypatch.setenv("CONTENT_LINT_MERGE_POLICY", "union")
        monkeypatch.setenv("CONTENT_LINT_STRICT_SECTIONS", "true")

        settings = LinterSettings(_env_file=None)

        assert settings.concurrency == 8
        assert settings.default_severity == Severity.ERROR
        assert settings.merge_policy == MergePolicy.UNION
        assert settings.strict_sections is True

    def test_invalid_concurrency(self) -> None:
        with pytest.raises(ValidationError):
            LinterSettings(_env_file=None, concurrency=0)


class TestLogLevel:
    """Shared logging settings."""

    def test_level_normalised(self) -> None:
        assert Settings(_env_file=None, log_level=" warning ").log_level == "WARNING"

    def test_unknown_level_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="loud")

    def test_debug_overrides_level(self) -> None:
        settings = Settings(_env_file=None, log_level="ERROR", debug=True)
        assert settings.effective_log_level == "DEBUG"


class TestSettings:
    """Aggregated settings singleton."""

    def test_aggregates_linter_settings(self) -> None:
        assert isinstance(Settings(_env_file=None).linter, LinterSettings)

    def test_get_settings_is_cached(self) -> None:
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()


class TestProjectOverrides:
    """Project-file globals applied over environment settings."""

    def test_project_values_take_precedence(self) -> None:
        base = LinterSettings(_env_file=None, concurrency=4)
        project = ProjectConfig(concurrency=8, default_severity=Severity.ERROR)

        merged = base.merged_with(project)

        assert merged.concurrency == 8
        assert merged.default_severity == Severity.ERROR
        assert base.concurrency == 4

    def test_missing_project_values_keep_environment(self) -> None:
        base = LinterSettings(_env_file=None, concurrency=3, default_severity=Severity.ERROR)

        merged = base.merged_with(ProjectConfig())

        assert merged.concurrency == 3
        assert merged.default_severity == Severity.ERROR

    def test_linter_settings_for(self, monkeypatch) -> None:
        monkeypatch.setenv("CONTENT_LINT_CONCURRENCY", "2")
        get_settings.cache_clear()
        try:
            assert linter_settings_for().concurrency == 2
            assert linter_settings_for(ProjectConfig(concurrency=6)).concurrency == 6
        finally:
            get_settings.cache_clear()
