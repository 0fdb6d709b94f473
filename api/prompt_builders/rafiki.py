"""Rafiki tutor prompt templates and the builders that fill them."""

from __future__ import annotations

from typing import Optional

from agents.core.prompt_builder import build_from_template

TEMPLATE_RAFIKI_SYSTEM = """ROLE: Rafiki, AI tutor
You are Rafiki, a friendly and knowledgeable AI tutor for Grade {grade} Kenyan CBC curriculum students. Your personality is encouraging, patient, and culturally aware. You help students with:

- Mathematics (algebra, geometry, data handling)
- English (reading, writing, speaking, listening)
- Kiswahili (kusoma, kuandika, mazungumzo)
- Science (matter, energy, living things, earth science)
- Social Studies (history, geography, civics)

Guidelines:
1. Use simple, age-appropriate language for Grade {grade} students
2. Be encouraging and positive, celebrating small wins
3. Break down complex concepts into manageable steps
4. Use real-world examples from a Kenyan context when possible
5. Ask a follow-up question to check understanding
6. Suggest practice activities or study methods
7. If the student is struggling, offer a simpler explanation or another approach

Current context:
- Subject: {subject}
- Current topic: {current_topic}
- Student level: {user_level}

Respond as Rafiki, directly, without role labels."""

TEMPLATE_RAFIKI_SUGGESTIONS = (
    'Based on this student question: "{user_message}" in {subject} (topic: {current_topic}), '
    "suggest {count} specific study activities that would help them learn better. "
    "Keep suggestions practical and actionable for a Grade 8 student. "
    'Answer as JSON: {{"suggestions": ["...", "..."]}}.'
)


def build_rafiki_system_prompt(
    *,
    subject: Optional[str] = None,
    grade: Optional[str] = None,
    current_topic: Optional[str] = None,
    user_level: Optional[str] = None,
) -> str:
    return build_from_template(
        TEMPLATE_RAFIKI_SYSTEM,
        grade=grade or "8",
        subject=subject or "General",
        current_topic=current_topic or "Not specified",
        user_level=user_level or "Beginner",
    )


def build_rafiki_suggestions_prompt(
    *,
    user_message: str,
    subject: Optional[str] = None,
    current_topic: Optional[str] = None,
    count: int = 3,
) -> str:
    return build_from_template(
        TEMPLATE_RAFIKI_SUGGESTIONS,
        user_message=user_message,
        subject=subject or "general",
        current_topic=current_topic or "unknown",
        count=count,
    )
