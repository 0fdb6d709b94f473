from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from api.config import get_db
from api.models.models import User
from api.schemas.progress_schemas import ProgressOverviewResponse, UserProgressResponse
from api.services.progress_service import ProgressService
from api.utils.auth import get_current_user

progress_routes = APIRouter()


@progress_routes.get("/progress", response_model=ProgressOverviewResponse)
def get_progress(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> ProgressOverviewResponse:
    """All topic progress rows for the learner plus their aggregate stats."""
    service = ProgressService(db)
    return ProgressOverviewResponse(
        progress=[UserProgressResponse.model_validate(p) for p in service.list_progress(current_user.id)],
        stats=service.compute_stats(current_user.id),
    )


@progress_routes.get("/progress/subjects/{subject_id}", response_model=list[UserProgressResponse])
def get_subject_progress(
    subject_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> list[UserProgressResponse]:
    rows = ProgressService(db).list_subject_progress(current_user.id, subject_id)
    return [UserProgressResponse.model_validate(p) for p in rows]
