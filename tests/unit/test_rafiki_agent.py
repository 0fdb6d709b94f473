"""Unit tests for the Rafiki tutor (LLM mocked)."""
import pytest
from unittest.mock import AsyncMock, MagicMock

from agents.rafiki_agent.agent import (
    DEFAULT_SUGGESTIONS,
    EMPTY_ANSWER,
    FALLBACK_REPLY,
    RafikiTutor,
    StudySuggestions,
)
from api.prompt_builders import build_rafiki_suggestions_prompt, build_rafiki_system_prompt


def _tutor(reply="Great question!", suggestions=None, reply_error=None, suggestions_error=None):
    llm = MagicMock()
    llm.agenerate = AsyncMock(return_value=reply, side_effect=reply_error)
    llm.generate_structured = AsyncMock(
        return_value=StudySuggestions(suggestions=suggestions or []),
        side_effect=suggestions_error,
    )
    tutor = RafikiTutor(
        llm=llm,
        build_system_prompt=build_rafiki_system_prompt,
        build_suggestions_prompt=build_rafiki_suggestions_prompt,
    )
    return tutor, llm


@pytest.mark.unit
class TestBuildPrompt:
    def test_includes_context_and_recent_history(self):
        tutor, _ = _tutor()
        history = [{"role": "user", "content": f"u{i}"} for i in range(8)]
        prompt = tutor.build_prompt("What is 2x + 3x?", {"subject": "Mathematics", "previous_messages": history})

        assert "Subject: Mathematics" in prompt
        assert "Student: u1" not in prompt
        assert "Student: u2" in prompt and "Student: u7" in prompt
        assert prompt.rstrip().endswith("Student: What is 2x + 3x?\nRafiki:")

    def test_assistant_turns_are_labelled_rafiki(self):
        tutor, _ = _tutor()
        prompt = tutor.build_prompt("next", {"previous_messages": [{"role": "assistant", "content": "Hello!"}]})
        assert "Rafiki: Hello!" in prompt


@pytest.mark.unit
class TestGenerateReply:
    @pytest.mark.asyncio
    async def test_reply_with_suggestions(self):
        tutor, llm = _tutor(reply="  5x  ", suggestions=["Do 5 practice problems", "  ", "Review like terms", "Extra", "More"])
        reply = await tutor.generate_reply("Simplify 2x + 3x", {"subject": "Mathematics"})

        assert reply.message == "5x"
        assert reply.suggestions == ["Do 5 practice problems", "Review like terms", "Extra"]
        llm.agenerate.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_llm_failure_falls_back(self):
        tutor, llm = _tutor(reply_error=ConnectionError("ollama down"))
        reply = await tutor.generate_reply("hello")

        assert reply.message == FALLBACK_REPLY
        assert reply.suggestions
        llm.generate_structured.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_suggestion_failure_uses_defaults(self):
        tutor, _ = _tutor(reply="Sure!", suggestions_error=TimeoutError("slow"))
        reply = await tutor.generate_reply("hello", {})
        assert reply.message == "Sure!"
        assert reply.suggestions == DEFAULT_SUGGESTIONS

    @pytest.mark.asyncio
    async def test_empty_answer(self):
        tutor, _ = _tutor(reply="   ", suggestions=["Try a related quiz"])
        reply = await tutor.generate_reply("hello")
        assert reply.message == EMPTY_ANSWER

    @pytest.mark.asyncio
    async def test_missing_structured_result_uses_defaults(self):
        tutor, llm = _tutor(reply="x = 3")
        llm.generate_structured.return_value = None
        reply = await tutor.generate_reply("solve 2x=6", {"subject": "Mathematics"})
        assert reply.message == "x = 3"
        assert reply.suggestions == DEFAULT_SUGGESTIONS
