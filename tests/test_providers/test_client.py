"""Tests for the provider client and fallback policy."""

from unittest.mock import AsyncMock, MagicMock

import anthropic
import httpx
import pytest
from langchain_core.language_models import FakeListChatModel
from langchain_core.messages import AIMessage

from study_companion.config import Settings
from study_companion.providers import (
    ProviderClient,
    ProviderErr,
    ProviderErrorKind,
    ProviderKind,
    ProviderOk,
    resolve_with_fallback,
    select_provider,
)
from study_companion.providers.client import message_text
from study_companion.providers.mock import MOCK_MEMORY_TECHNIQUE, mock_response

PROMPT = "Suggest a memory technique for this term."


def failing_llm(error: Exception) -> MagicMock:
    """Chat model stand-in whose ainvoke raises the given error."""
    llm = MagicMock()
    llm.ainvoke = AsyncMock(side_effect=error)
    return llm


class TestSelectProvider:
    """Test backend selection order."""

    def test_primary_wins(self):
        """Test that the primary key is preferred."""
        settings = Settings(anthropic_api_key="a", openai_api_key="o", _env_file=None)

        assert select_provider(settings) is ProviderKind.ANTHROPIC

    def test_secondary_when_no_primary(self):
        """Test that the secondary key is used on its own."""
        settings = Settings(anthropic_api_key=None, openai_api_key="o", _env_file=None)

        assert select_provider(settings) is ProviderKind.OPENAI

    def test_mock_without_credentials(self, mock_settings: Settings):
        """Test that no credentials selects the mock."""
        assert select_provider(mock_settings) is ProviderKind.MOCK


class TestResolveWithFallback:
    """Test the substitution policy."""

    def test_ok_passes_through(self):
        """Test that successful text is returned unchanged."""
        assert resolve_with_fallback(ProviderOk(text="live"), PROMPT) == "live"

    def test_err_uses_mock(self):
        """Test that a failure is replaced with the mock response."""
        result = ProviderErr(kind=ProviderErrorKind.NETWORK, message="down")

        assert resolve_with_fallback(result, PROMPT) == mock_response(PROMPT)


class TestMessageText:
    """Test flattening of message content."""

    def test_string_content(self):
        """Test that string content is returned as is."""
        assert message_text("hello") == "hello"

    def test_block_content(self):
        """Test that text blocks are joined and other blocks skipped."""
        content = [
            {"type": "text", "text": "hel"},
            {"type": "tool_use", "id": "x"},
            {"type": "text", "text": "lo"},
        ]

        assert message_text(content) == "hello"


class TestProviderClient:
    """Test provider calls and failure reporting."""

    @pytest.mark.asyncio
    async def test_mock_provider_never_calls_model(self, mock_provider: ProviderClient):
        """Test that the mock backend answers locally."""
        result = await mock_provider.complete(PROMPT, max_tokens=100)

        assert mock_provider.is_mock
        assert result == ProviderOk(text=MOCK_MEMORY_TECHNIQUE)

    @pytest.mark.asyncio
    async def test_live_provider_returns_text(self, live_settings: Settings):
        """Test that a live reply is returned trimmed."""
        client = ProviderClient(live_settings, llm=FakeListChatModel(responses=["  answer  "]))

        result = await client.complete(PROMPT, max_tokens=100)

        assert client.kind is ProviderKind.ANTHROPIC
        assert result == ProviderOk(text="answer")

    @pytest.mark.asyncio
    async def test_passes_max_tokens(self, live_settings: Settings):
        """Test that the token budget is forwarded to the model."""
        llm = MagicMock()
        llm.ainvoke = AsyncMock(return_value=AIMessage(content="ok"))
        client = ProviderClient(live_settings, llm=llm)

        await client.complete(PROMPT, max_tokens=321, system_prompt="system")

        messages = llm.ainvoke.call_args.args[0]
        assert llm.ainvoke.call_args.kwargs["max_tokens"] == 321
        assert messages[0].content == "system"
        assert messages[1].content == PROMPT

    @pytest.mark.asyncio
    async def test_network_error(self, live_settings: Settings):
        """Test that transport failures become NETWORK errors."""
        client = ProviderClient(live_settings, llm=failing_llm(httpx.ConnectError("refused")))

        result = await client.complete(PROMPT, max_tokens=100)

        assert isinstance(result, ProviderErr)
        assert result.kind is ProviderErrorKind.NETWORK

    @pytest.mark.asyncio
    async def test_status_error(self, live_settings: Settings):
        """Test that non-2xx replies become HTTP_STATUS errors."""
        request = httpx.Request("POST", "https://api.anthropic.com/v1/messages")
        error = anthropic.InternalServerError(
            "server error",
            response=httpx.Response(500, request=request),
            body=None,
        )
        client = ProviderClient(live_settings, llm=failing_llm(error))

        result = await client.complete(PROMPT, max_tokens=100)

        assert result.kind is ProviderErrorKind.HTTP_STATUS
        assert "500" in result.message

    @pytest.mark.asyncio
    async def test_empty_reply(self, live_settings: Settings):
        """Test that an empty reply is reported as EMPTY_RESPONSE."""
        client = ProviderClient(live_settings, llm=FakeListChatModel(responses=["   "]))

        result = await client.complete(PROMPT, max_tokens=100)

        assert result.kind is ProviderErrorKind.EMPTY_RESPONSE

    @pytest.mark.asyncio
    async def test_unexpected_error(self, live_settings: Settings):
        """Test that any other exception becomes UNEXPECTED."""
        client = ProviderClient(live_settings, llm=failing_llm(RuntimeError("boom")))

        result = await client.complete(PROMPT, max_tokens=100)

        assert result == ProviderErr(kind=ProviderErrorKind.UNEXPECTED, message="boom")

    @pytest.mark.asyncio
    async def test_call_falls_back_to_mock(self, live_settings: Settings):
        """Test that call() substitutes the mock text on failure."""
        client = ProviderClient(live_settings, llm=failing_llm(httpx.ReadTimeout("slow")))

        assert await client.call(PROMPT, max_tokens=100) == MOCK_MEMORY_TECHNIQUE
