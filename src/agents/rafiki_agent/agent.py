"""
Rafiki: the AI tutor behind the chat session ledger.

Contract: generate_reply(user_text, context) -> TutorReply(message, suggestions).
It never raises; any LLM failure becomes a friendly fallback reply.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Optional

from pydantic import BaseModel, Field

from agents.core.llm import LLM

logger = logging.getLogger("cbc_learning.rafiki")

FALLBACK_REPLY = "I'm having trouble right now. Please try asking your question again in a moment! 😊"
FALLBACK_REPLY_SUGGESTIONS = ["Try a different question", "Check your internet connection", "Refresh the page"]
DEFAULT_SUGGESTIONS = ["Practice with flashcards", "Try a related quiz", "Ask for more examples"]
EMPTY_ANSWER = "I'm sorry, I couldn't process that. Could you please try again?"


class TutorReply(BaseModel):
    message: str
    suggestions: list[str] = Field(default_factory=list)


class StudySuggestions(BaseModel):
    """Structured output schema for the suggestion call."""
    suggestions: list[str] = Field(default_factory=list)


def _default_system_prompt(context: Mapping[str, Any]) -> str:
    return f"You are Rafiki, a friendly tutor for Grade {context.get('grade') or '8'} students."


class RafikiTutor:
    def __init__(
        self,
        *,
        llm: LLM,
        name: str = "Rafiki",
        build_system_prompt: Optional[Callable[..., str]] = None,
        build_suggestions_prompt: Optional[Callable[..., str]] = None,
        max_history: int = 6,
        max_suggestions: int = 3,
    ):
        self.llm = llm
        self.name = name
        self.build_system_prompt = build_system_prompt
        self.build_suggestions_prompt = build_suggestions_prompt
        self.max_history = max_history
        self.max_suggestions = max_suggestions

    def build_prompt(self, user_text: str, context: Mapping[str, Any]) -> str:
        """System prompt, the recent transcript, then the new student turn."""
        if self.build_system_prompt is not None:
            system = self.build_system_prompt(
                subject=context.get("subject"),
                grade=context.get("grade"),
                current_topic=context.get("current_topic"),
                user_level=context.get("user_level"),
            )
        else:
            system = _default_system_prompt(context)
        lines = [system, ""]
        history = list(context.get("previous_messages") or [])[-self.max_history:]
        for m in history:
            speaker = self.name if m.get("role") == "assistant" else "Student"
            lines.append(f"{speaker}: {m.get('content', '')}")
        lines.append(f"Student: {user_text}")
        lines.append(f"{self.name}:")
        return "\n".join(lines)

    async def generate_reply(self, user_text: str, context: Optional[Mapping[str, Any]] = None) -> TutorReply:
        context = context or {}
        try:
            raw = await self.llm.agenerate(self.build_prompt(user_text, context))
        except Exception as e:
            logger.warning("rafiki reply failed, using fallback: %s", e)
            return TutorReply(message=FALLBACK_REPLY, suggestions=list(FALLBACK_REPLY_SUGGESTIONS))

        message = (raw or "").strip() or EMPTY_ANSWER
        suggestions = await self.generate_suggestions(user_text, context)
        return TutorReply(message=message, suggestions=suggestions)

    async def generate_suggestions(self, user_text: str, context: Mapping[str, Any]) -> list[str]:
        if self.build_suggestions_prompt is not None:
            prompt = self.build_suggestions_prompt(
                user_message=user_text,
                subject=context.get("subject"),
                current_topic=context.get("current_topic"),
                count=self.max_suggestions,
            )
        else:
            prompt = f"Suggest {self.max_suggestions} study activities for: {user_text}"
        try:
            result = await self.llm.generate_structured(prompt, StudySuggestions)
        except Exception as e:
            logger.warning("rafiki suggestions failed, using defaults: %s", e)
            return list(DEFAULT_SUGGESTIONS)
        if not isinstance(result, StudySuggestions):
            # function calling with no tool call comes back as None
            logger.warning("rafiki suggestions returned %s, using defaults", type(result).__name__)
            return list(DEFAULT_SUGGESTIONS)
        cleaned = [s.strip() for s in (result.suggestions or []) if isinstance(s, str) and s.strip()]
        return cleaned[: self.max_suggestions] or list(DEFAULT_SUGGESTIONS)
