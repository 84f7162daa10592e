"""
Content linter: judge prose documents against rule packs.

Usage:
    from content_lint import LintOrchestrator, LLMJudge, linter_settings_for, load_project_config_file

    config = load_project_config_file(".")
    orchestrator = LintOrchestrator(
        LLMJudge(chat_model), rule_packs, config.sections, linter_settings_for(config)
    )
    summary = await orchestrator.lint_files({"docs/intro.md": text})
"""

from content_lint.configs import linter_settings_for
from content_lint.evaluation import LintOrchestrator, LLMJudge
from content_lint.sections import load_project_config, load_project_config_file

__all__ = [
    "LintOrchestrator",
    "LLMJudge",
    "linter_settings_for",
    "load_project_config",
    "load_project_config_file",
]
