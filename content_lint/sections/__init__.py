"""
File-section module.

Contains:
- glob_pattern: POSIX-style glob compilation and matching
- parser: raw section mappings -> FilePatternConfig
- config_loader: INI project file -> ProjectConfig
- resolver: per-file pack and override resolution
"""

from content_lint.sections.config_loader import (
    load_project_config,
    load_project_config_file,
)
from content_lint.sections.glob_pattern import (
    compile_glob,
    glob_match,
    normalize_path,
    specificity_score,
)
from content_lint.sections.parser import FileSectionParser
from content_lint.sections.resolver import FileSectionResolver, resolve

__all__ = [
    "compile_glob",
    "glob_match",
    "normalize_path",
    "specificity_score",
    "FileSectionParser",
    "FileSectionResolver",
    "resolve",
    "load_project_config",
    "load_project_config_file",
]
