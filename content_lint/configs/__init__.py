"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from content_lint.configs.linter import LinterSettings
from content_lint.configs.settings import Settings, get_settings, linter_settings_for

__all__ = ["LinterSettings", "Settings", "get_settings", "linter_settings_for"]
