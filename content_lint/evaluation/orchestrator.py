"""
Lint orchestrator.

Runs every rule of every pack that applies to a file, for one file or a
whole scan. Per file:

    resolve sections -> apply overrides -> evaluate rules concurrently
                     -> collect outcomes into a FileReport

Configuration problems for one file or one rule are recorded in the report
and never abort the scan.

Dependencies: asyncio (stdlib), content_lint.sections, content_lint.evaluation
System role: Top-level entry point of the linting engine
"""

import asyncio
import logging
from collections.abc import Mapping, Sequence

from content_lint.configs.linter import LinterSettings
from content_lint.core.exceptions import ConfigurationError
from content_lint.evaluation.evaluators import EvaluationContext
from content_lint.evaluation.judge import JudgmentClient
from content_lint.evaluation.registry import EvaluatorRegistry, build_default_registry
from content_lint.models.chunk import ChunkingOptions
from content_lint.models.enums import Severity
from content_lint.models.file_section import FilePatternConfig, OverrideValue
from content_lint.models.report import FileReport, LintSummary, RuleOutcome
from content_lint.models.rule import RuleDefinition
from content_lint.observability.log_utils import (
    log_exception_with_context,
    log_with_context,
)
from content_lint.sections.resolver import FileSectionResolver

logger = logging.getLogger(__name__)

MAX_CHUNK_SIZE_KEY = "MaxChunkSize"
SEVERITY_SUFFIX = ".severity"


class LintOrchestrator:
    """Lint documents against rule packs selected per file.

    Usage:
        orchestrator = LintOrchestrator(judge, {"Base": rules}, config.sections)
        summary = await orchestrator.lint_files({"docs/intro.md": text})
        sys.exit(summary.exit_code)
    """

    def __init__(
        self,
        judge: JudgmentClient,
        rule_packs: Mapping[str, Sequence[RuleDefinition]],
        sections: Sequence[FilePatternConfig],
        settings: LinterSettings | None = None,
        registry: EvaluatorRegistry | None = None,
    ) -> None:
        """
        Initialize orchestrator.

        Args:
            judge: Judgment client shared by every evaluator
            rule_packs: Pack name -> rules of that pack
            sections: File-pattern sections in declaration order
            settings: Linter settings (defaults from environment)
            registry: Evaluator registry (built-in types by default)
        """
        self.judge = judge
        self.rule_packs = rule_packs
        self.sections = list(sections)
        self.settings = settings or LinterSettings()
        self.registry = registry or build_default_registry()
        self.resolver = FileSectionResolver(
            strict=self.settings.strict_sections,
            merge_policy=self.settings.merge_policy,
            section_order=self.settings.section_order,
        )
        self._semaphore: asyncio.Semaphore | None = None

        logger.info(
            f"Lint orchestrator initialized ({len(rule_packs)} packs, "
            f"{len(self.sections)} sections, concurrency={self.settings.concurrency})"
        )

    @property
    def semaphore(self) -> asyncio.Semaphore:
        """Judgment-call limit shared across every file and rule."""
        if self._semaphore is None:
            self._semaphore = asyncio.Semaphore(self.settings.concurrency)
        return self._semaphore

    async def lint_file(self, file_path: str, text: str) -> FileReport:
        """
        Lint one document.

        Args:
            file_path: Path relative to the configuration root
            text: Document text

        Returns:
            FileReport: Outcomes of every applicable rule plus configuration errors
        """
        report = FileReport(file_path=file_path)
        try:
            resolution = self.resolver.resolve(
                file_path, self.sections, available_packs=self.rule_packs.keys()
            )
            options = self._chunking_options(resolution.overrides)
        except ConfigurationError as e:
            log_with_context(
                logger,
                logging.WARNING,
                f"Configuration error for {file_path}: {e.message}",
                file_path=file_path,
                error_type=type(e).__name__,
            )
            report.errors.append(str(e))
            return report

        report.resolution = resolution
        rules = [rule for pack in resolution.packs for rule in self.rule_packs[pack]]
        if not rules:
            logger.debug(f"No rules apply to {file_path}")
            return report

        report.outcomes = list(
            await asyncio.gather(
                *(
                    self._evaluate_rule(file_path, text, rule, options, resolution.overrides)
                    for rule in rules
                )
            )
        )
        return report

    async def lint_files(self, documents: Mapping[str, str]) -> LintSummary:
        """
        Lint several documents.

        Args:
            documents: File path -> document text

        Returns:
            LintSummary: Reports in input order, with exit code
        """
        reports = await asyncio.gather(
            *(self.lint_file(path, text) for path, text in documents.items())
        )
        summary = LintSummary(reports=list(reports))
        logger.info(
            f"Linted {len(summary.reports)} files: "
            f"{sum(r.finding_count for r in summary.reports)} findings, "
            f"{summary.configuration_errors} configuration errors, "
            f"{summary.request_failures} failed chunks"
        )
        return summary

    async def _evaluate_rule(
        self,
        file_path: str,
        text: str,
        rule: RuleDefinition,
        options: ChunkingOptions,
        overrides: Mapping[str, OverrideValue],
    ) -> RuleOutcome:
        try:
            context = EvaluationContext(
                options=options,
                severity=self._effective_severity(rule, overrides),
                semaphore=self.semaphore,
            )
            evaluator = self.registry.create(rule.evaluator, self.judge, rule, context)
            return await evaluator.evaluate(text)
        except ConfigurationError as e:
            log_with_context(
                logger,
                logging.WARNING,
                f"Configuration error for rule {rule.id} in {file_path}: {e.message}",
                file_path=file_path,
                rule_id=rule.id,
                error_type=type(e).__name__,
            )
            return RuleOutcome(
                rule_id=rule.id,
                pack=rule.pack,
                mode=rule.mode,
                error=str(e),
                configuration_error=True,
            )
        except Exception as e:
            log_exception_with_context(
                logger,
                f"Rule {rule.id} failed for {file_path}",
                e,
                file_path=file_path,
                rule_id=rule.id,
            )
            return RuleOutcome(
                rule_id=rule.id,
                pack=rule.pack,
                mode=rule.mode,
                error=str(e),
            )

    def _chunking_options(self, overrides: Mapping[str, OverrideValue]) -> ChunkingOptions:
        max_chunk_size = overrides.get(MAX_CHUNK_SIZE_KEY, self.settings.max_chunk_size)
        if isinstance(max_chunk_size, bool) or not isinstance(max_chunk_size, int):
            raise ConfigurationError(
                f"{MAX_CHUNK_SIZE_KEY} must be an integer, got {max_chunk_size!r}",
                key=MAX_CHUNK_SIZE_KEY,
            )
        return ChunkingOptions(
            max_chunk_size=max_chunk_size,
            overlap_fraction=self.settings.overlap_fraction,
        )

    def _effective_severity(
        self, rule: RuleDefinition, overrides: Mapping[str, OverrideValue]
    ) -> Severity:
        key = f"{rule.id}{SEVERITY_SUFFIX}"
        if key in overrides:
            value = str(overrides[key]).strip().lower()
            try:
                return Severity(value)
            except ValueError as e:
                raise ConfigurationError(
                    f"Invalid severity '{overrides[key]}' for rule {rule.id}",
                    key=key,
                ) from e
        return rule.severity or self.settings.default_severity
