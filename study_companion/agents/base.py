"""Base agent shared by the quiz, flashcard and exam specialists."""

import json
import logging
import re
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from study_companion.errors import ArtifactSchemaError, ResponseParseError
from study_companion.providers import ProviderClient

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

EXCERPT_LENGTH = 200

_CODE_FENCE = re.compile(r"^```(?:json)?\s*|\s*```$", re.IGNORECASE)


def strip_code_fences(text: str) -> str:
    """Remove a surrounding ```json ... ``` fence from a model reply."""
    return _CODE_FENCE.sub("", text.strip()).strip()


def source_excerpt(source_text: str) -> str:
    """First characters of the source text, used in artifact metadata."""
    if len(source_text) <= EXCERPT_LENGTH:
        return source_text
    return source_text[:EXCERPT_LENGTH] + "..."


def strip_quotes(text: str) -> str:
    """Trim whitespace and one pair of surrounding double quotes."""
    return re.sub(r'^"|"$', "", text.strip())


class BaseAgent(ABC):
    """
    Common plumbing for specialized agents.

    Subclasses build prompts and validate results; this class owns the
    provider call, JSON parsing and item validation.
    """

    def __init__(self, provider: ProviderClient, agent_name: str, personality: str):
        self.provider = provider
        self.agent_name = agent_name
        self.agent_personality = personality

    @abstractmethod
    def get_name(self) -> str:
        """Display name of the agent."""

    @abstractmethod
    def get_description(self) -> str:
        """One-line description of what the agent does."""

    def system_prompt(self, json_only: bool = True) -> str:
        """Build the agent's system prompt."""
        prompt = f"You are {self.agent_name}, a specialized AI agent. {self.agent_personality}"
        if json_only:
            prompt += (
                "\n\nIMPORTANT: Always respond with valid JSON only. "
                "No explanations, no markdown, just pure JSON."
            )
        return prompt

    async def call(self, prompt: str, max_tokens: int = 2000, json_only: bool = True) -> str:
        """Send a prompt through the provider client."""
        return await self.provider.call(prompt, max_tokens, self.system_prompt(json_only))

    def parse_json_response(self, response: str) -> Any:
        """
        Parse a model reply as JSON, tolerating a surrounding code fence.

        Raises:
            ResponseParseError: If the reply is not valid JSON
        """
        try:
            return json.loads(strip_code_fences(response))
        except json.JSONDecodeError as e:
            logger.error("%s: failed to parse JSON response: %s", self.agent_name, e)
            raise ResponseParseError(f"{self.agent_name}: Invalid JSON response from AI") from e

    def extract_items(self, payload: Any, key: str, expected: int, label: str) -> list[Any]:
        """
        Pull the item list out of a parsed payload and check its length.

        Args:
            payload: Parsed JSON reply
            key: Name of the list field ("questions" or "cards")
            expected: Requested number of items
            label: Human wording for the error, e.g. "question count in generated quiz"

        Raises:
            ArtifactSchemaError: If the list is missing or has the wrong length
        """
        items = payload.get(key) if isinstance(payload, dict) else None
        if not isinstance(items, list) or len(items) != expected:
            found = len(items) if isinstance(items, list) else 0
            logger.error(
                "%s: expected %d %s, got %d", self.agent_name, expected, key, found
            )
            raise ArtifactSchemaError(f"{self.agent_name}: Invalid {label}")
        return items

    def validate_items(self, items: list[Any], model: type[ModelT]) -> list[ModelT]:
        """
        Validate raw items against an item model.

        Raises:
            ArtifactSchemaError: If any item is missing fields or has invalid values
        """
        validated = []
        for index, item in enumerate(items):
            try:
                validated.append(model.model_validate(item))
            except ValidationError as e:
                first = e.errors()[0]
                location = ".".join(str(part) for part in first["loc"]) or "item"
                raise ArtifactSchemaError(
                    f"{self.agent_name}: Invalid item {index} ({location}: {first['msg']})"
                ) from e
        return validated

    @staticmethod
    def timestamp() -> datetime:
        return datetime.now()
