"""
Evaluation module.

Contains:
- payloads: judged output validation (subjective / semi-objective shapes)
- judge: JudgmentClient protocol and the LangChain LLMJudge adapter
- evaluators: RuleEvaluator (chunk -> judge -> merge -> locate -> score)
- registry: evaluator type name -> factory
- orchestrator: per-file rule selection and scan summary
"""

from content_lint.evaluation.evaluators import EvaluationContext, Evaluator, RuleEvaluator
from content_lint.evaluation.judge import JudgmentClient, LLMJudge
from content_lint.evaluation.orchestrator import LintOrchestrator
from content_lint.evaluation.payloads import (
    ParsedPayload,
    SemiObjectivePayload,
    SubjectivePayload,
    output_shape,
    parse_payload,
)
from content_lint.evaluation.registry import (
    EvaluatorFactory,
    EvaluatorRegistry,
    build_default_registry,
)

__all__ = [
    "EvaluationContext",
    "Evaluator",
    "RuleEvaluator",
    "JudgmentClient",
    "LLMJudge",
    "LintOrchestrator",
    "ParsedPayload",
    "SemiObjectivePayload",
    "SubjectivePayload",
    "output_shape",
    "parse_payload",
    "EvaluatorFactory",
    "EvaluatorRegistry",
    "build_default_registry",
]
