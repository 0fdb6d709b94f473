"""
Quiz, question and attempt schemas.
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import Field

from api.schemas.base import CamelModel

QuestionType = Literal["multiple_choice", "true_false", "short_answer"]


class QuizResponse(CamelModel):
    id: int
    topic_id: Optional[int] = None
    title: str
    description: Optional[str] = None
    time_limit: Optional[int] = None
    passing_score: int = 70
    max_attempts: int = 3


class QuizQuestionResponse(CamelModel):
    id: int
    quiz_id: int
    question: str
    question_type: QuestionType
    options: Optional[list[str]] = None
    correct_answer: str
    explanation: Optional[str] = None
    points: int = 1
    order_index: int


class QuizWithQuestionsResponse(QuizResponse):
    questions: list[QuizQuestionResponse]


class SubmitQuizRequest(CamelModel):
    # JSON object keys are strings; question ids are matched as str(question.id)
    answers: dict[str, str]
    time_spent: int = Field(default=0, ge=0)


class QuizAttemptResponse(CamelModel):
    id: int
    user_id: int
    quiz_id: int
    score: Optional[int] = None
    answers: Optional[dict[str, str]] = None
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    time_spent: Optional[int] = None


class SubmitQuizResponse(CamelModel):
    attempt: QuizAttemptResponse
    score: int
    correct_answers: int
    total_questions: int
