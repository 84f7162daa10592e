"""
Shared test fixtures for the linter test suite.

Provides: fake judgment clients, rule definitions, sample documents
Dependencies: pytest
System role: Test infrastructure and fixture management
"""

import asyncio
from collections.abc import Callable
from typing import Any

import pytest

from content_lint.configs.linter import LinterSettings
from content_lint.models import CriterionDefinition, EvaluationMode, RuleDefinition


class FakeJudge:
    """Judgment client returning canned responses, keyed by chunk text.

    ``responder`` receives the chunk text and returns the raw payload (dict,
    str or an exception instance to raise).
    """

    def __init__(self, responder: Callable[[str], Any], delay: float = 0.0) -> None:
        self.responder = responder
        self.delay = delay
        self.calls: list[str] = []
        self.active = 0
        self.max_active = 0

    async def judge(self, chunk_text: str, instructions: str, output_shape: dict) -> Any:
        self.calls.append(chunk_text)
        self.active += 1
        self.max_active = max(self.max_active, self.active)
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
            result = self.responder(chunk_text)
        finally:
            self.active -= 1
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def make_judge() -> type[FakeJudge]:
    """Factory for judges with a custom responder."""
    return FakeJudge


@pytest.fixture
def clean_judge() -> FakeJudge:
    """Judge that never reports a semi-objective violation."""
    return FakeJudge(lambda _: {"violations": []})


@pytest.fixture
def semi_objective_rule() -> RuleDefinition:
    return RuleDefinition(
        id="passive-voice",
        name="Passive voice",
        pack="Base",
        mode=EvaluationMode.SEMI_OBJECTIVE,
        instructions="Report passive voice.",
    )


@pytest.fixture
def subjective_rule() -> RuleDefinition:
    return RuleDefinition(
        id="clarity",
        name="Clarity",
        pack="Base",
        mode=EvaluationMode.SUBJECTIVE,
        criteria=[
            CriterionDefinition(name="Structure", weight=1),
            CriterionDefinition(name="Wording", weight=3),
        ],
        instructions="Rate clarity.",
    )


@pytest.fixture
def linter_settings() -> LinterSettings:
    """Settings independent of the environment and any .env file."""
    return LinterSettings(_env_file=None, concurrency=2, max_chunk_size=500)


@pytest.fixture
def sample_document() -> str:
    return (
        "# Getting started\n"
        "\n"
        "The installer was run by the user.\n"
        "Then the configuration file is edited.\n"
    )

