"""
File-section resolver.

Computes, for one file path, which rule packs run and which options are
overridden, from ordered glob-scoped sections.

Canonical behaviour (MergePolicy.REPLACE, SectionOrder.DECLARATION):
- sections apply in declaration order; later sections win
- a non-empty pack list replaces the effective pack list
- an explicitly empty pack list is an exclusion: it clears packs and overrides
- overrides merge key by key
- unknown packs are dropped when the available packs are known
- an unmatched path yields an empty result, or UnmatchedPathError when strict

The UNION policy (packs accumulate) and SPECIFICITY order (general patterns
first, specific last) must be selected explicitly.

Dependencies: content_lint.sections.glob_pattern, content_lint.models
System role: Per-file rule selection upstream of the lint pipeline
"""

from collections.abc import Collection, Sequence

from content_lint.core.exceptions import UnmatchedPathError
from content_lint.models.enums import MergePolicy, SectionOrder
from content_lint.models.file_section import (
    FilePatternConfig,
    OverrideValue,
    ResolvedFileConfig,
)
from content_lint.sections.glob_pattern import glob_match, normalize_path, specificity_score


class FileSectionResolver:
    """Resolve effective packs and overrides per file.

    Usage:
        resolver = FileSectionResolver(strict=True)
        resolved = resolver.resolve("docs/api.md", sections, available_packs=["Base"])
    """

    def __init__(
        self,
        strict: bool = False,
        merge_policy: MergePolicy = MergePolicy.REPLACE,
        section_order: SectionOrder = SectionOrder.DECLARATION,
    ) -> None:
        """
        Initialize resolver.

        Args:
            strict: Raise UnmatchedPathError when no section matches
            merge_policy: How packs from several matching sections combine
            section_order: Order in which matching sections are applied
        """
        self.strict = strict
        self.merge_policy = merge_policy
        self.section_order = section_order

    def matching_sections(
        self, file_path: str, sections: Sequence[FilePatternConfig]
    ) -> list[FilePatternConfig]:
        """Sections whose pattern matches the path, in application order."""
        normalized = normalize_path(file_path)
        matches = [s for s in sections if glob_match(normalized, s.pattern)]
        if self.section_order == SectionOrder.SPECIFICITY:
            # sorted() is stable: equal scores keep declaration order
            matches = sorted(matches, key=lambda s: specificity_score(s.pattern))
        return matches

    def resolve(
        self,
        file_path: str,
        sections: Sequence[FilePatternConfig],
        available_packs: Collection[str] | None = None,
    ) -> ResolvedFileConfig:
        """
        Resolve packs and overrides for a file.

        Args:
            file_path: Path relative to the configuration root
            sections: Sections in declaration order
            available_packs: Known pack names; None disables filtering

        Returns:
            ResolvedFileConfig: Effective packs and merged overrides

        Raises:
            UnmatchedPathError: In strict mode when no section matches
            InvalidPatternError: When a section pattern is not valid glob syntax
        """
        matches = self.matching_sections(file_path, sections)
        if not matches:
            if self.strict:
                raise UnmatchedPathError(normalize_path(file_path))
            return ResolvedFileConfig()

        packs: list[str] = []
        overrides: dict[str, OverrideValue] = {}

        for section in matches:
            if section.run_rules is not None:
                if not section.run_rules:
                    packs = []
                    overrides = {}
                elif self.merge_policy == MergePolicy.UNION:
                    packs.extend(p for p in section.run_rules if p not in packs)
                else:
                    packs = list(dict.fromkeys(section.run_rules))
            overrides.update(section.overrides)

        if available_packs is not None:
            known = set(available_packs)
            packs = [p for p in packs if p in known]

        return ResolvedFileConfig(packs=packs, overrides=overrides, matched=True)


def resolve(
    file_path: str,
    sections: Sequence[FilePatternConfig],
    available_packs: Collection[str] | None = None,
    strict: bool = False,
) -> ResolvedFileConfig:
    """Resolve with the canonical policy."""
    return FileSectionResolver(strict=strict).resolve(file_path, sections, available_packs)
