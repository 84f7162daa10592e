"""
Rule evaluators.

A rule evaluator runs one rule over one document:

    chunk -> judge every chunk (bounded concurrency) -> validate
          -> order by chunk index -> merge -> locate -> score

A chunk whose judgment call fails or whose output does not validate is
discarded with a warning; the remaining chunks still produce a result.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from content_lint.chunking.chunker import ChunkingStrategy, RecursiveChunker
from content_lint.chunking.merger import merge_violations
from content_lint.chunking.utils import count_words
from content_lint.evaluation.judge import JudgmentClient
from content_lint.evaluation.payloads import (
    ParsedPayload,
    SemiObjectivePayload,
    SubjectivePayload,
    output_shape,
    parse_payload,
)
from content_lint.locate.evidence_locator import annotate_findings
from content_lint.models.chunk import Chunk, ChunkingOptions
from content_lint.models.enums import EvaluationMode, Severity
from content_lint.models.report import RuleOutcome
from content_lint.models.rule import RuleDefinition
from content_lint.observability.log_utils import log_with_context
from content_lint.scoring.scorer import (
    apply_severity,
    average_subjective_results,
    calculate_semi_objective_score,
    calculate_subjective_score,
)

logger = logging.getLogger(__name__)


@dataclass
class EvaluationContext:
    """Per-file settings shared by every evaluator of that file."""

    options: ChunkingOptions = field(default_factory=ChunkingOptions)
    severity: Severity = Severity.WARNING
    semaphore: asyncio.Semaphore = field(default_factory=lambda: asyncio.Semaphore(4))


@runtime_checkable
class Evaluator(Protocol):
    """Protocol for rule evaluators."""

    async def evaluate(self, text: str) -> RuleOutcome:
        ...


class RuleEvaluator:
    """Evaluate one rule with the chunk/judge/merge/locate/score pipeline."""

    def __init__(
        self,
        judge: JudgmentClient,
        rule: RuleDefinition,
        context: EvaluationContext,
        chunker: ChunkingStrategy | None = None,
    ) -> None:
        self.judge = judge
        self.rule = rule
        self.context = context
        self.chunker = chunker or RecursiveChunker()

    async def evaluate(self, text: str) -> RuleOutcome:
        """
        Evaluate the rule against a whole document.

        Args:
            text: Original document text

        Returns:
            RuleOutcome: Score, located findings and chunk statistics

        Raises:
            ConfigurationError: When the chunking options are invalid
        """
        chunks = self.chunker.chunk(text, self.context.options)

        # gather() keeps chunk order even when calls complete out of order
        payloads = await asyncio.gather(*(self._judge_chunk(chunk) for chunk in chunks))

        judged = [(chunk, p) for chunk, p in zip(chunks, payloads) if p is not None]
        discarded = len(chunks) - len(judged)

        if self.rule.mode == EvaluationMode.SEMI_OBJECTIVE:
            outcome = self._score_semi_objective(text, judged)
        else:
            outcome = self._score_subjective(text, judged)

        outcome.total_chunks = len(chunks)
        outcome.discarded_chunks = discarded

        log_with_context(
            logger,
            logging.INFO,
            f"Rule {self.rule.id} evaluated: {len(outcome.findings)} findings",
            rule_id=self.rule.id,
            chunks=len(chunks),
            discarded=discarded,
        )
        return outcome

    async def _judge_chunk(self, chunk: Chunk) -> ParsedPayload | None:
        async with self.context.semaphore:
            try:
                raw = await self.judge.judge(
                    chunk.content,
                    self.rule.instructions,
                    output_shape(self.rule.mode),
                )
                return parse_payload(raw, self.rule.mode)
            except Exception as e:
                # A failed call or invalid payload discards only this chunk
                log_with_context(
                    logger,
                    logging.WARNING,
                    f"Discarding chunk {chunk.index} for rule {self.rule.id}: {e}",
                    rule_id=self.rule.id,
                    chunk_index=chunk.index,
                    error_type=type(e).__name__,
                )
                return None

    def _outcome(self) -> RuleOutcome:
        return RuleOutcome(
            rule_id=self.rule.id,
            pack=self.rule.pack,
            mode=self.rule.mode,
            severity=self.context.severity,
        )

    def _score_semi_objective(
        self, text: str, judged: list[tuple[Chunk, ParsedPayload]]
    ) -> RuleOutcome:
        per_chunk = [
            payload.violations
            for _, payload in judged
            if isinstance(payload, SemiObjectivePayload)
        ]
        merged = merge_violations(per_chunk)
        score = apply_severity(calculate_semi_objective_score(merged), self.context.severity)

        outcome = self._outcome()
        outcome.score = score
        outcome.findings = annotate_findings(text, merged)
        return outcome

    def _score_subjective(
        self, text: str, judged: list[tuple[Chunk, ParsedPayload]]
    ) -> RuleOutcome:
        weights = self.rule.criterion_weights
        results = []
        word_counts = []
        for chunk, payload in judged:
            if isinstance(payload, SubjectivePayload):
                results.append(calculate_subjective_score(payload.criteria, weights))
                word_counts.append(count_words(chunk.content))

        if len(results) == 1:
            score = results[0]
        else:
            score = average_subjective_results(results, word_counts)

        outcome = self._outcome()
        outcome.score = score
        outcome.findings = annotate_findings(text, score.violations)
        return outcome
