"""
AI study content endpoints: generated flashcards and quiz questions for a
topic, and feedback on a single answer.
"""

from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from agents.study_content_agent.agent import StudyContentGenerator
from api.bootstrap import get_content_generator
from api.config import get_db
from api.models.models import User
from api.schemas.generation_schemas import (
    AnswerEvaluationResponse,
    EvaluateAnswerRequest,
    GeneratedFlashcardResponse,
    GeneratedQuestionResponse,
    GenerateFlashcardsRequest,
    GenerateQuizRequest,
)
from api.services.generation_service import GenerationService
from api.utils.auth import get_current_user

generation_routes = APIRouter()


@generation_routes.post("/topics/{topic_id}/generate-flashcards", response_model=list[GeneratedFlashcardResponse])
async def generate_flashcards(
    topic_id: int,
    request: Optional[GenerateFlashcardsRequest] = None,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
    generator: StudyContentGenerator = Depends(get_content_generator),
) -> list[GeneratedFlashcardResponse]:
    request = request or GenerateFlashcardsRequest()
    cards = await GenerationService(db, generator).generate_flashcards(topic_id, request.count)
    return [GeneratedFlashcardResponse.model_validate(c) for c in cards]


@generation_routes.post("/topics/{topic_id}/generate-quiz", response_model=list[GeneratedQuestionResponse])
async def generate_quiz(
    topic_id: int,
    request: Optional[GenerateQuizRequest] = None,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
    generator: StudyContentGenerator = Depends(get_content_generator),
) -> list[GeneratedQuestionResponse]:
    request = request or GenerateQuizRequest()
    questions = await GenerationService(db, generator).generate_quiz(topic_id, request.count, request.difficulty)
    return [GeneratedQuestionResponse.model_validate(q) for q in questions]


@generation_routes.post("/evaluate-answer", response_model=AnswerEvaluationResponse)
async def evaluate_answer(
    request: EvaluateAnswerRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
    generator: StudyContentGenerator = Depends(get_content_generator),
) -> AnswerEvaluationResponse:
    evaluation = await GenerationService(db, generator).evaluate_answer(
        request.question,
        request.student_answer,
        request.correct_answer,
        request.subject,
    )
    return AnswerEvaluationResponse.model_validate(evaluation)
