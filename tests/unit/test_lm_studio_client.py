# tests/unit/test_lm_studio_client.py
"""Unit tests for LMStudioClient."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from automation_advisor.errors import CollaboratorError
from automation_advisor.llm.lm_studio import LMStudioClient
from automation_advisor.models.plan import ChatMessage


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _make_client(**kwargs):
    """Create LMStudioClient with openai patched out."""
    with patch("automation_advisor.llm.lm_studio.AsyncOpenAI"):
        client = LMStudioClient(**kwargs)
    return client


def _make_chunk(content):
    """Build a mock streaming chunk with one delta."""
    delta = MagicMock()
    delta.content = content
    choice = MagicMock()
    choice.delta = delta
    chunk = MagicMock()
    chunk.choices = [choice]
    return chunk


def _make_stream(*parts):
    async def gen():
        for part in parts:
            yield _make_chunk(part)

    return gen()


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

class TestInit:
    def test_defaults(self):
        client = _make_client()
        assert client.base_url == "http://localhost:1234/v1"
        assert client.model == "local-model"
        assert client.chat_model == "local-model"

    def test_chat_model_override(self):
        client = _make_client(model="big", chat_model="small")
        assert client.chat_model == "small"

    def test_missing_openai_raises(self):
        with patch("automation_advisor.llm.lm_studio.AsyncOpenAI", None):
            with pytest.raises(ImportError, match="lm-studio"):
                LMStudioClient()


# ---------------------------------------------------------------------------
# generate / generate_plan
# ---------------------------------------------------------------------------

class TestGenerate:
    @pytest.mark.asyncio
    async def test_accumulates_stream(self):
        client = _make_client()
        client._client.chat.completions.create = AsyncMock(
            return_value=_make_stream("Hola ", None, "mundo")
        )

        result = await client.generate([{"role": "user", "content": "hi"}])

        assert result == "Hola mundo"
        kwargs = client._client.chat.completions.create.call_args.kwargs
        assert kwargs["stream"] is True
        assert kwargs["model"] == "local-model"

    @pytest.mark.asyncio
    async def test_chunk_without_choices_skipped(self):
        client = _make_client()
        empty = MagicMock()
        empty.choices = []

        async def gen():
            yield empty
            yield _make_chunk("ok")

        client._client.chat.completions.create = AsyncMock(return_value=gen())
        assert await client.generate([{"role": "user", "content": "hi"}]) == "ok"

    @pytest.mark.asyncio
    async def test_generate_plan(self):
        client = _make_client(model="qwen")
        client._client.chat.completions.create = AsyncMock(return_value=_make_stream("plan"))

        result = await client.generate_plan("prompt")

        assert result.text == "plan"
        assert result.sources == []
        assert result.model == "qwen"

    @pytest.mark.asyncio
    async def test_generate_plan_wraps_errors(self):
        client = _make_client()
        client._client.chat.completions.create = AsyncMock(side_effect=RuntimeError("boom"))

        with pytest.raises(CollaboratorError):
            await client.generate_plan("prompt")


# ---------------------------------------------------------------------------
# chat
# ---------------------------------------------------------------------------

class TestChat:
    @pytest.mark.asyncio
    async def test_conversation_uses_chat_model(self):
        client = _make_client(model="big", chat_model="small")
        client._client.chat.completions.create = AsyncMock(return_value=_make_stream("hola"))

        conversation = client.start_chat([ChatMessage(role="model", content="¡Hola!")])
        reply = await conversation.send_message("buenas")

        assert reply == "hola"
        kwargs = client._client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "small"
        assert kwargs["messages"] == [
            {"role": "assistant", "content": "¡Hola!"},
            {"role": "user", "content": "buenas"},
        ]


# ---------------------------------------------------------------------------
# health_check
# ---------------------------------------------------------------------------

class TestHealthCheck:
    @pytest.mark.asyncio
    async def test_ok(self):
        client = _make_client()
        response = MagicMock(status_code=200)
        with patch("automation_advisor.llm.lm_studio.httpx.AsyncClient") as mock_http:
            mock_http.return_value.__aenter__.return_value.get = AsyncMock(return_value=response)
            assert await client.health_check() is True

    @pytest.mark.asyncio
    async def test_unreachable(self):
        client = _make_client()
        with patch("automation_advisor.llm.lm_studio.httpx.AsyncClient") as mock_http:
            mock_http.return_value.__aenter__.side_effect = ConnectionError("refused")
            assert await client.health_check() is False
