"""
Judgment service boundary.

The judge receives one chunk plus rule instructions and a JSON schema
describing the expected output, and returns whatever the service produced.
Validation happens afterwards, in payloads.parse_payload.

LLMJudge adapts any LangChain chat model to this contract; the model,
its credentials and any retry policy are configured by the caller.

Dependencies: langchain_core
System role: Adapter for the external LLM judgment call
"""

import json
import logging
from typing import Any, Protocol, runtime_checkable

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage

from content_lint.core.exceptions import JudgmentError
from content_lint.locate.line_numbering import prepend_line_numbers

logger = logging.getLogger(__name__)


@runtime_checkable
class JudgmentClient(Protocol):
    """Protocol for the external judgment call."""

    async def judge(
        self,
        chunk_text: str,
        instructions: str,
        output_shape: dict[str, Any],
    ) -> Any:
        """Judge one chunk; the result is validated by the caller."""
        ...


class LLMJudge:
    """LLM-as-judge over a LangChain chat model.

    Usage:
        judge = LLMJudge(ChatOpenAI(model="gpt-4o-mini", temperature=0))
        raw = await judge.judge(chunk.content, rule.instructions, output_shape(rule.mode))
    """

    def __init__(self, model: BaseChatModel, number_lines: bool = False) -> None:
        """
        Initialize judge.

        Args:
            model: Chat model used for every judgment
            number_lines: Prefix chunk lines with their numbers
        """
        self.model = model
        self.number_lines = number_lines
        logger.info(f"Initialized LLM judge with {type(model).__name__}")

    async def judge(
        self,
        chunk_text: str,
        instructions: str,
        output_shape: dict[str, Any],
    ) -> str:
        """
        Send one chunk for judgment.

        Returns:
            str: Raw response text

        Raises:
            JudgmentError: When the model call fails
        """
        messages = self._build_messages(chunk_text, instructions, output_shape)
        try:
            response = await self.model.ainvoke(messages)
        except Exception as e:
            raise JudgmentError(f"Judgment call failed: {type(e).__name__}: {e}") from e
        return self._response_text(response)

    def _build_messages(
        self,
        chunk_text: str,
        instructions: str,
        output_shape: dict[str, Any],
    ) -> list[BaseMessage]:
        content = prepend_line_numbers(chunk_text) if self.number_lines else chunk_text
        system = (
            f"{instructions.strip()}\n\n"
            "Respond in JSON format ONLY (no markdown, no extra text), "
            "matching this JSON schema:\n"
            f"{json.dumps(output_shape)}"
        )
        return [SystemMessage(content=system), HumanMessage(content=content)]

    @staticmethod
    def _response_text(response: BaseMessage) -> str:
        content = response.content
        if isinstance(content, str):
            return content
        # Multi-part content: keep the text parts only
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and part.get("type") == "text":
                parts.append(str(part.get("text", "")))
        return "".join(parts)
