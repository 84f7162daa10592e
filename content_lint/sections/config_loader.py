"""
Project configuration loader.

Reads the INI project file: global keys before the first section, then one
section per glob pattern.

    RulesPath = .github/rules
    Concurrency = 4
    DefaultSeverity = warning

    [**/*.md]
    RunRules = Base

Dependencies: configparser (stdlib), pydantic
System role: Configuration boundary, loaded once before a scan
"""

import configparser
import logging
from pathlib import Path

from pydantic import ValidationError

from content_lint.configs.linter import LinterSettings
from content_lint.core.exceptions import ConfigurationError
from content_lint.models.file_section import ProjectConfig
from content_lint.sections.parser import FileSectionParser, strip_quotes

logger = logging.getLogger(__name__)

_ROOT_SECTION = "__root__"
_GLOBAL_KEYS = {
    "RulesPath": "rules_path",
    "Concurrency": "concurrency",
    "DefaultSeverity": "default_severity",
}


def _read_ini(text: str) -> configparser.ConfigParser:
    parser = configparser.ConfigParser(
        delimiters=("=",),
        comment_prefixes=("#", ";"),
        interpolation=None,
        default_section="__defaults__",
    )
    # Keys are case-sensitive (RunRules, rule-id.severity)
    parser.optionxform = str
    parser.read_string(f"[{_ROOT_SECTION}]\n{text}")
    return parser


def load_project_config(text: str) -> ProjectConfig:
    """
    Parse project configuration text.

    Args:
        text: INI file contents

    Returns:
        ProjectConfig: Global settings and ordered sections

    Raises:
        ConfigurationError: For malformed INI, invalid values or patterns
    """
    try:
        ini = _read_ini(text)
    except configparser.Error as e:
        raise ConfigurationError(f"Malformed configuration file: {e}") from e

    data: dict[str, str] = {}
    for key, value in ini[_ROOT_SECTION].items():
        field = _GLOBAL_KEYS.get(key)
        if field is None:
            logger.debug(f"Ignoring unknown configuration key: {key}")
            continue
        value = strip_quotes(value)
        data[field] = value.lower() if field == "default_severity" else value

    raw_sections = {
        name: dict(ini[name].items())
        for name in ini.sections()
        if name != _ROOT_SECTION
    }
    sections = FileSectionParser().parse_sections(raw_sections)

    try:
        config = ProjectConfig(**data, sections=sections)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e

    logger.info(f"Loaded configuration with {len(config.sections)} file sections")
    return config


def load_project_config_file(path: str | Path, filename: str | None = None) -> ProjectConfig:
    """
    Read and parse a project configuration file.

    Args:
        path: Configuration file, or the directory holding it
        filename: File name used when path is a directory
            (defaults to LinterSettings.config_filename)

    Raises:
        ConfigurationError: When the file cannot be read or is invalid
    """
    config_path = Path(path)
    if config_path.is_dir():
        config_path = config_path / (filename or LinterSettings().config_filename)
    try:
        text = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(
            f"Failed to read configuration file {config_path}: {e}",
            details={"path": str(config_path)},
        ) from e
    return load_project_config(text)
