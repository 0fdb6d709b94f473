"""
Answer grading strategies, one per question type.

multiple_choice / true_false: exact match (case- and whitespace-sensitive).
short_answer: normalised match, or every rubric keyword present.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

MULTIPLE_CHOICE = "multiple_choice"
TRUE_FALSE = "true_false"
SHORT_ANSWER = "short_answer"

_WS = re.compile(r"\s+")


def normalize_answer(text: Optional[str]) -> str:
    return _WS.sub(" ", (text or "").strip()).casefold()


class Grader(ABC):
    """Contract for grading one answer against one question."""

    @abstractmethod
    def is_correct(self, answer: Optional[str], correct_answer: Optional[str], rubric: Any = None) -> bool:
        raise NotImplementedError


class ExactMatchGrader(Grader):
    def is_correct(self, answer, correct_answer, rubric=None) -> bool:
        if answer is None or correct_answer is None:
            return False
        return answer == correct_answer


class RubricGrader(Grader):
    """Free-text answers: forgiving on case/whitespace, keyword rubric when given."""

    def is_correct(self, answer, correct_answer, rubric=None) -> bool:
        if answer is None:
            return False
        given = normalize_answer(answer)
        if not given:
            return False
        if correct_answer is not None and given == normalize_answer(correct_answer):
            return True
        keywords = [normalize_answer(k) for k in (rubric or []) if isinstance(k, str) and k.strip()]
        if not keywords:
            return False
        return all(k in given for k in keywords)


class GraderRegistry:
    def __init__(self, default: Grader):
        self._graders: Dict[str, Grader] = {}
        self._default = default

    def register(self, question_type: str, grader: Grader) -> None:
        if question_type in self._graders:
            raise ValueError(f"Grader for {question_type} already registered")
        self._graders[question_type] = grader

    def get(self, question_type: Optional[str]) -> Grader:
        return self._graders.get(question_type or "", self._default)

    def list_types(self) -> list[str]:
        return list(self._graders.keys())


def build_grader_registry() -> GraderRegistry:
    exact = ExactMatchGrader()
    registry = GraderRegistry(default=exact)
    registry.register(MULTIPLE_CHOICE, exact)
    registry.register(TRUE_FALSE, exact)
    registry.register(SHORT_ANSWER, RubricGrader())
    return registry


_registry = build_grader_registry()


def grader_for(question_type: Optional[str]) -> Grader:
    return _registry.get(question_type)


def grade_question(question: Any, answer: Optional[str]) -> bool:
    """Grade one QuizQuestion/HomeworkQuestion-like object."""
    grader = grader_for(getattr(question, "question_type", None))
    return grader.is_correct(answer, getattr(question, "correct_answer", None), getattr(question, "rubric", None))
