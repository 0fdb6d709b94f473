"""
Requests and results for AI-generated study content and answer evaluation.
"""

from typing import Literal, Optional

from pydantic import Field

from api.schemas.base import CamelModel

Difficulty = Literal["easy", "medium", "hard"]


class GenerateFlashcardsRequest(CamelModel):
    count: int = Field(default=5, ge=1, le=20)


class GenerateQuizRequest(CamelModel):
    count: int = Field(default=5, ge=1, le=20)
    difficulty: Difficulty = "medium"


class EvaluateAnswerRequest(CamelModel):
    question: str = Field(min_length=1)
    student_answer: str
    correct_answer: str
    subject: Optional[str] = None


class GeneratedFlashcardResponse(CamelModel):
    question: str
    answer: str
    explanation: str = ""


class GeneratedQuestionResponse(CamelModel):
    question: str
    options: list[str]
    correct_answer: str
    explanation: str = ""


class AnswerEvaluationResponse(CamelModel):
    is_correct: bool
    score: int = Field(ge=0, le=100)
    feedback: str
    suggestions: list[str]
