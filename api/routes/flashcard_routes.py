from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from api.config import get_db
from api.models.models import User
from api.schemas.flashcard_schemas import (
    FlashcardProgressRequest,
    FlashcardWithProgress,
    SuccessResponse,
)
from api.services.flashcard_service import FlashcardService
from api.utils.auth import get_current_user

flashcard_routes = APIRouter()


@flashcard_routes.get("/topics/{topic_id}/flashcards", response_model=list[FlashcardWithProgress])
def list_flashcards(
    topic_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> list[FlashcardWithProgress]:
    cards = FlashcardService(db).list_flashcards_with_progress(current_user.id, topic_id)
    return [FlashcardWithProgress(**c) for c in cards]


@flashcard_routes.post("/flashcards/{flashcard_id}/progress", response_model=SuccessResponse)
def mark_flashcard(
    flashcard_id: int,
    request: FlashcardProgressRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> SuccessResponse:
    FlashcardService(db).mark_flashcard_known(current_user.id, flashcard_id, request.is_known)
    return SuccessResponse(success=True)
