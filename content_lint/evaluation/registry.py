"""
Evaluator registry.

Maps evaluator type names (as declared by rule definitions) to factories.
The registry is an explicit object built at startup and handed to the
orchestrator; nothing registers itself at import time.

Usage:
    registry = build_default_registry()
    registry.register("strict", StrictEvaluator)
    evaluator = registry.create(rule.evaluator, judge, rule, context)
"""

from collections.abc import Callable

from content_lint.core.exceptions import UnknownEvaluatorError
from content_lint.evaluation.evaluators import EvaluationContext, Evaluator, RuleEvaluator
from content_lint.evaluation.judge import JudgmentClient
from content_lint.models.rule import RuleDefinition

EvaluatorFactory = Callable[[JudgmentClient, RuleDefinition, EvaluationContext], Evaluator]

BASE_EVALUATOR = "base"


class EvaluatorRegistry:
    """Name -> evaluator factory mapping."""

    def __init__(self, factories: dict[str, EvaluatorFactory] | None = None) -> None:
        self._factories: dict[str, EvaluatorFactory] = dict(factories or {})

    def register(self, name: str, factory: EvaluatorFactory) -> None:
        """Register or replace the factory for an evaluator type."""
        self._factories[name] = factory

    def create(
        self,
        name: str,
        judge: JudgmentClient,
        rule: RuleDefinition,
        context: EvaluationContext,
    ) -> Evaluator:
        """
        Build an evaluator for a rule.

        Raises:
            UnknownEvaluatorError: When no factory is registered under name
        """
        factory = self._factories.get(name)
        if factory is None:
            raise UnknownEvaluatorError(name, self.names)
        return factory(judge, rule, context)

    @property
    def names(self) -> list[str]:
        return sorted(self._factories)

    def __contains__(self, name: object) -> bool:
        return name in self._factories


def build_default_registry() -> EvaluatorRegistry:
    """Registry with the built-in evaluator types."""
    return EvaluatorRegistry({BASE_EVALUATOR: RuleEvaluator})
