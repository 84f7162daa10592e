"""
File-section parser.

Turns raw configuration sections (pattern -> key/value mapping, as read from
the INI project file) into validated FilePatternConfig objects.

    [content/**/*.md]
    RunRules = Base, Blog
    readability.severity = error

    [archived/**/*.md]
    RunRules =

Dependencies: content_lint.models, content_lint.sections.glob_pattern
System role: Configuration boundary for the file-section resolver
"""

import re
from collections.abc import Mapping
from typing import Any

from content_lint.models.file_section import FilePatternConfig, OverrideValue
from content_lint.sections.glob_pattern import compile_glob

RUN_RULES_KEY = "RunRules"

_INT_VALUE = re.compile(r"[+-]?\d+")
_FLOAT_VALUE = re.compile(r"[+-]?(\d+\.\d*|\.\d+)")


def strip_quotes(value: str) -> str:
    """Remove one pair of surrounding single or double quotes."""
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value


def coerce_value(value: Any) -> OverrideValue:
    """INI values arrive as strings; numeric ones become int or float."""
    if isinstance(value, (bool, int, float)):
        return value
    text = strip_quotes(str(value))
    if _INT_VALUE.fullmatch(text):
        return int(text)
    if _FLOAT_VALUE.fullmatch(text):
        return float(text)
    return text


def parse_run_rules(value: Any) -> list[str]:
    """Comma-separated pack names; blank means explicit exclusion."""
    if isinstance(value, (list, tuple)):
        return [str(v).strip() for v in value if str(v).strip()]
    return [name.strip() for name in strip_quotes(str(value)).split(",") if name.strip()]


class FileSectionParser:
    """Parse glob-keyed sections into FilePatternConfig objects."""

    def parse_sections(self, raw_config: Mapping[str, Any]) -> list[FilePatternConfig]:
        """
        Parse sections in declaration order.

        Non-mapping values (top-level keys) are ignored.

        Args:
            raw_config: Pattern -> section key/values

        Returns:
            list[FilePatternConfig]: Parsed sections, order preserved

        Raises:
            InvalidPatternError: When a pattern is not valid glob syntax
        """
        sections: list[FilePatternConfig] = []
        for pattern, body in raw_config.items():
            if not isinstance(body, Mapping):
                continue
            compile_glob(pattern)

            run_rules: list[str] | None = None
            overrides: dict[str, OverrideValue] = {}
            for key, value in body.items():
                if key == RUN_RULES_KEY:
                    run_rules = parse_run_rules(value)
                else:
                    overrides[key] = coerce_value(value)

            sections.append(
                FilePatternConfig(pattern=pattern, run_rules=run_rules, overrides=overrides)
            )
        return sections
