"""
Quiz endpoints: browse quizzes, review attempts and submit answers for grading.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from api.config import get_db
from api.models.models import User
from api.schemas.quiz_schemas import (
    QuizAttemptResponse,
    QuizQuestionResponse,
    QuizResponse,
    QuizWithQuestionsResponse,
    SubmitQuizRequest,
    SubmitQuizResponse,
)
from api.services.quiz_service import QuizService
from api.utils.auth import get_current_user

quiz_routes = APIRouter()


@quiz_routes.get("/topics/{topic_id}/quizzes", response_model=list[QuizResponse])
def list_quizzes(
    topic_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> list[QuizResponse]:
    return [QuizResponse.model_validate(q) for q in QuizService(db).list_quizzes(topic_id)]


@quiz_routes.get("/quizzes/{quiz_id}", response_model=QuizWithQuestionsResponse)
def get_quiz(
    quiz_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> QuizWithQuestionsResponse:
    quiz, questions = QuizService(db).get_quiz_with_questions(quiz_id)
    base = QuizResponse.model_validate(quiz)
    questions = [QuizQuestionResponse.model_validate(q) for q in questions]
    return QuizWithQuestionsResponse(**base.model_dump(), questions=questions)


@quiz_routes.get("/quizzes/{quiz_id}/attempts", response_model=list[QuizAttemptResponse])
def list_attempts(
    quiz_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> list[QuizAttemptResponse]:
    attempts = QuizService(db).list_attempts(current_user.id, quiz_id)
    return [QuizAttemptResponse.model_validate(a) for a in attempts]


@quiz_routes.post("/quizzes/{quiz_id}/submit", response_model=SubmitQuizResponse)
def submit_quiz(
    quiz_id: int,
    request: SubmitQuizRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> SubmitQuizResponse:
    result = QuizService(db).submit_quiz(current_user.id, quiz_id, request.answers, request.time_spent)
    return SubmitQuizResponse(
        attempt=QuizAttemptResponse.model_validate(result.attempt),
        score=result.score,
        correct_answers=result.correct_answers,
        total_questions=result.total_questions,
    )
