"""Provider client: one interchangeable generative backend behind a single call."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

import anthropic
import httpx
import openai
from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage, SystemMessage

from study_companion.config.settings import Settings
from study_companion.providers.mock import mock_response

logger = logging.getLogger(__name__)

DEFAULT_SYSTEM_PROMPT = (
    "You are an expert educational content creator. Generate high-quality, accurate educational content."
)


class ProviderKind(str, Enum):
    """Available backends, in selection order."""

    ANTHROPIC = "anthropic"
    OPENAI = "openai"
    MOCK = "mock"


class ProviderErrorKind(str, Enum):
    """Why a live provider call did not produce text."""

    NETWORK = "network"
    HTTP_STATUS = "http_status"
    EMPTY_RESPONSE = "empty_response"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True)
class ProviderOk:
    """Successful provider call."""

    text: str


@dataclass(frozen=True)
class ProviderErr:
    """Failed provider call."""

    kind: ProviderErrorKind
    message: str


ProviderResult = ProviderOk | ProviderErr


def select_provider(settings: Settings) -> ProviderKind:
    """Pick the backend: primary if keyed, else secondary if keyed, else mock."""
    if settings.anthropic_api_key:
        return ProviderKind.ANTHROPIC
    if settings.openai_api_key:
        return ProviderKind.OPENAI
    return ProviderKind.MOCK


def build_chat_model(kind: ProviderKind, settings: Settings) -> BaseChatModel | None:
    """
    Build the LangChain chat model for a live backend.

    Both SDK clients retry on their own by default; retries are disabled so a
    failure falls through to the mock responder on the first attempt.

    Returns:
        The chat model, or None for the mock backend
    """
    if kind is ProviderKind.ANTHROPIC:
        from langchain_anthropic import ChatAnthropic

        return ChatAnthropic(
            model=settings.anthropic_model,
            api_key=settings.anthropic_api_key,
            temperature=settings.temperature,
            max_retries=0,
        )

    if kind is ProviderKind.OPENAI:
        from langchain_openai import ChatOpenAI

        return ChatOpenAI(
            model=settings.openai_model,
            api_key=settings.openai_api_key,
            temperature=settings.temperature,
            max_retries=0,
        )

    return None


def message_text(content: Any) -> str:
    """Flatten LangChain message content (string or list of blocks) into text."""
    if isinstance(content, str):
        return content

    parts = []
    for block in content or []:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts)


def resolve_with_fallback(result: ProviderResult, prompt: str) -> str:
    """
    Turn a provider result into text, substituting the mock on failure.

    Args:
        result: Outcome of a provider call
        prompt: The prompt that was sent, used to pick the mock payload

    Returns:
        Provider text, or the mock responder's text when the call failed
    """
    if isinstance(result, ProviderOk):
        return result.text

    logger.warning(
        "Provider call failed (%s): %s - using mock response",
        result.kind.value,
        result.message,
    )
    return mock_response(prompt)


class ProviderClient:
    """
    Sends prompts to exactly one backend chosen at construction time.

    The choice is never re-evaluated per call. Live failures are reported as
    ProviderErr by ``complete`` and replaced with mock output by ``call``.
    """

    def __init__(self, settings: Settings, llm: BaseChatModel | None = None):
        self.kind = select_provider(settings)
        self.model_name = {
            ProviderKind.ANTHROPIC: settings.anthropic_model,
            ProviderKind.OPENAI: settings.openai_model,
            ProviderKind.MOCK: "mock",
        }[self.kind]
        self._llm = llm if llm is not None else build_chat_model(self.kind, settings)

        if self.kind is ProviderKind.MOCK:
            logger.info("No provider credentials configured - using deterministic mock responses")
        else:
            logger.info("Provider selected: %s (%s)", self.kind.value, self.model_name)

    @property
    def is_mock(self) -> bool:
        return self.kind is ProviderKind.MOCK

    async def complete(
        self,
        prompt: str,
        max_tokens: int,
        system_prompt: str = DEFAULT_SYSTEM_PROMPT,
    ) -> ProviderResult:
        """
        Send one prompt and report the outcome without raising.

        Args:
            prompt: User message content
            max_tokens: Token budget for the reply
            system_prompt: System instruction for the backend

        Returns:
            ProviderOk with the reply text, or ProviderErr describing the failure
        """
        if self._llm is None:
            return ProviderOk(text=mock_response(prompt))

        messages = [
            SystemMessage(content=system_prompt),
            HumanMessage(content=prompt),
        ]

        try:
            reply = await self._llm.ainvoke(messages, max_tokens=max_tokens)
        except (anthropic.APIStatusError, openai.APIStatusError) as e:
            return ProviderErr(
                kind=ProviderErrorKind.HTTP_STATUS,
                message=f"{self.kind.value} API error: {e.status_code}",
            )
        except (anthropic.APIConnectionError, openai.APIConnectionError, httpx.HTTPError) as e:
            return ProviderErr(kind=ProviderErrorKind.NETWORK, message=str(e))
        except Exception as e:
            logger.exception("Unexpected error from %s provider", self.kind.value)
            return ProviderErr(kind=ProviderErrorKind.UNEXPECTED, message=str(e))

        text = message_text(reply.content).strip()
        if not text:
            return ProviderErr(
                kind=ProviderErrorKind.EMPTY_RESPONSE,
                message=f"{self.kind.value} returned an empty response",
            )
        return ProviderOk(text=text)

    async def call(
        self,
        prompt: str,
        max_tokens: int,
        system_prompt: str = DEFAULT_SYSTEM_PROMPT,
    ) -> str:
        """Send one prompt; never fails, falling back to the mock responder."""
        result = await self.complete(prompt, max_tokens, system_prompt)
        return resolve_with_fallback(result, prompt)
