"""Unit tests for OllamaLLM (agenerate, generate_structured) with LangChain clients mocked."""
from __future__ import annotations

import asyncio

import pytest
from pydantic import BaseModel
from unittest.mock import AsyncMock, MagicMock, patch

from infra.llm.ollama import OllamaLLM, DEFAULT_STRUCTURED_TIMEOUT


class SuggestionSchema(BaseModel):
    """Test schema: a list of study suggestions."""
    suggestions: list[str]


def _make_llm(text_llm=None, chat_llm=None, **kwargs):
    with patch("infra.llm.ollama.LangChainOllamaLLM", return_value=text_llm or MagicMock()), \
            patch("infra.llm.ollama.ChatOllama", return_value=chat_llm or MagicMock()):
        return OllamaLLM(model="test-model", **kwargs)


@pytest.mark.unit
class TestOllamaLLMGenerate:
    @pytest.mark.asyncio
    async def test_agenerate_returns_text(self):
        text_llm = MagicMock()
        text_llm.ainvoke = AsyncMock(return_value="Jambo! Let's simplify 3x + 5x.")
        llm = _make_llm(text_llm=text_llm)

        result = await llm.agenerate("Explain like terms")

        assert result == "Jambo! Let's simplify 3x + 5x."
        text_llm.ainvoke.assert_called_once_with("Explain like terms")

    @pytest.mark.asyncio
    async def test_agenerate_times_out(self):
        async def slow(_prompt):
            await asyncio.sleep(1)
            return "late"

        text_llm = MagicMock()
        text_llm.ainvoke = slow
        llm = _make_llm(text_llm=text_llm, timeout=0.01)

        with pytest.raises(asyncio.TimeoutError):
            await llm.agenerate("prompt")

    def test_generate_is_sync_invoke(self):
        text_llm = MagicMock()
        text_llm.invoke.return_value = "ok"
        assert _make_llm(text_llm=text_llm).generate("p") == "ok"

    @pytest.mark.asyncio
    async def test_stream_yields_text(self):
        async def chunks(_prompt):
            for piece in ("Ja", "mbo"):
                yield piece

        text_llm = MagicMock()
        text_llm.astream = chunks
        pieces = [p async for p in _make_llm(text_llm=text_llm).stream("hi")]
        assert "".join(pieces) == "Jambo"


@pytest.mark.unit
class TestOllamaLLMGenerateStructured:
    """Test generate_structured API with a mocked ChatOllama."""

    @pytest.mark.asyncio
    async def test_generate_structured_returns_schema_instance(self):
        expected = SuggestionSchema(suggestions=["Practice with flashcards"])
        mock_runnable = MagicMock()
        mock_runnable.ainvoke = AsyncMock(return_value=expected)
        mock_chat = MagicMock()
        mock_chat.with_structured_output.return_value = mock_runnable

        llm = _make_llm(chat_llm=mock_chat)
        result = await llm.generate_structured("Suggest activities", SuggestionSchema, timeout=10.0)

        assert result == expected
        mock_chat.with_structured_output.assert_called_once_with(SuggestionSchema)
        mock_runnable.ainvoke.assert_called_once_with("Suggest activities")

    @pytest.mark.asyncio
    async def test_dict_result_is_validated(self):
        mock_runnable = MagicMock()
        mock_runnable.ainvoke = AsyncMock(return_value={"suggestions": ["Try a related quiz"]})
        mock_chat = MagicMock()
        mock_chat.with_structured_output.return_value = mock_runnable

        result = await _make_llm(chat_llm=mock_chat).generate_structured("prompt", SuggestionSchema)

        assert isinstance(result, SuggestionSchema)
        assert result.suggestions == ["Try a related quiz"]

    @pytest.mark.asyncio
    async def test_timeout_raises_builtin_timeout_error(self):
        async def slow(_prompt):
            await asyncio.sleep(1)

        mock_runnable = MagicMock()
        mock_runnable.ainvoke = slow
        mock_chat = MagicMock()
        mock_chat.with_structured_output.return_value = mock_runnable

        with pytest.raises(TimeoutError):
            await _make_llm(chat_llm=mock_chat).generate_structured("prompt", SuggestionSchema, timeout=0.01)

    def test_default_timeout_is_positive(self):
        assert DEFAULT_STRUCTURED_TIMEOUT > 0
