"""
Study content generator: flashcards and quiz questions for a topic, and
feedback on a single student answer.

Like the tutor it never raises. Generation failures give an empty list and a
failed evaluation gives a neutral, encouraging result.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from pydantic import BaseModel, Field

from agents.core.llm import LLM

logger = logging.getLogger("cbc_learning.study_content")

EVALUATION_FALLBACK_FEEDBACK = "I couldn't evaluate your answer right now. Please try again!"
EVALUATION_FALLBACK_SUGGESTIONS = ["Try again", "Ask for help"]
EVALUATION_DEFAULT_FEEDBACK = "Keep practicing!"
EVALUATION_DEFAULT_SUGGESTIONS = ["Review the concept", "Try similar problems"]


class GeneratedFlashcard(BaseModel):
    question: str
    answer: str
    explanation: str = ""


class FlashcardSet(BaseModel):
    flashcards: list[GeneratedFlashcard] = Field(default_factory=list)


class GeneratedQuestion(BaseModel):
    question: str
    options: list[str] = Field(default_factory=list)
    correct_answer: str
    explanation: str = ""


class QuestionSet(BaseModel):
    questions: list[GeneratedQuestion] = Field(default_factory=list)


class AnswerEvaluation(BaseModel):
    is_correct: bool = False
    score: int = 0
    feedback: str = ""
    suggestions: list[str] = Field(default_factory=list)


class StudyContentGenerator:
    def __init__(
        self,
        *,
        llm: LLM,
        build_flashcards_prompt: Callable[..., str],
        build_quiz_prompt: Callable[..., str],
        build_evaluation_prompt: Callable[..., str],
    ):
        self.llm = llm
        self.build_flashcards_prompt = build_flashcards_prompt
        self.build_quiz_prompt = build_quiz_prompt
        self.build_evaluation_prompt = build_evaluation_prompt

    async def _structured(self, prompt: str, schema: type[BaseModel], what: str) -> Optional[BaseModel]:
        try:
            result = await self.llm.generate_structured(prompt, schema)
        except Exception as e:
            logger.warning("%s failed: %s", what, e)
            return None
        if not isinstance(result, schema):
            logger.warning("%s returned %s", what, type(result).__name__)
            return None
        return result

    async def generate_flashcards(self, topic: str, subject: str, count: int = 10) -> list[GeneratedFlashcard]:
        prompt = self.build_flashcards_prompt(topic=topic, subject=subject, count=count)
        result = await self._structured(prompt, FlashcardSet, "flashcard generation")
        if result is None:
            return []
        cards = [c for c in result.flashcards if c.question.strip() and c.answer.strip()]
        return cards[:count]

    async def generate_quiz_questions(
        self,
        topic: str,
        subject: str,
        difficulty: str = "medium",
        count: int = 5,
    ) -> list[GeneratedQuestion]:
        prompt = self.build_quiz_prompt(topic=topic, subject=subject, difficulty=difficulty, count=count)
        result = await self._structured(prompt, QuestionSet, "quiz generation")
        if result is None:
            return []
        questions = [q for q in result.questions if q.question.strip() and q.correct_answer.strip()]
        return questions[:count]

    async def evaluate_answer(
        self,
        question: str,
        student_answer: str,
        correct_answer: str,
        subject: Optional[str] = None,
    ) -> AnswerEvaluation:
        prompt = self.build_evaluation_prompt(
            question=question,
            student_answer=student_answer,
            correct_answer=correct_answer,
            subject=subject,
        )
        result = await self._structured(prompt, AnswerEvaluation, "answer evaluation")
        if result is None:
            return AnswerEvaluation(
                is_correct=False,
                score=0,
                feedback=EVALUATION_FALLBACK_FEEDBACK,
                suggestions=list(EVALUATION_FALLBACK_SUGGESTIONS),
            )
        suggestions = [s.strip() for s in result.suggestions if s.strip()]
        return AnswerEvaluation(
            is_correct=result.is_correct,
            score=min(100, max(0, result.score)),
            feedback=result.feedback.strip() or EVALUATION_DEFAULT_FEEDBACK,
            suggestions=suggestions or list(EVALUATION_DEFAULT_SUGGESTIONS),
        )
