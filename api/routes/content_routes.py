"""
Content hierarchy endpoints: subjects, strands (with unlock state) and topics.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from api.config import get_db
from api.models.models import User
from api.schemas.content_schemas import (
    StrandWithUnlockResponse,
    SubjectResponse,
    TopicResponse,
)
from api.services.content_service import ContentService
from api.services.progress_service import ProgressService
from api.utils.auth import get_current_user
from api.utils.errors import NotFoundError

content_routes = APIRouter()


@content_routes.get("/subjects", response_model=list[SubjectResponse])
def list_subjects(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> list[SubjectResponse]:
    return [SubjectResponse.model_validate(s) for s in ContentService(db).list_subjects()]


@content_routes.get("/subjects/{subject_id}", response_model=SubjectResponse)
def get_subject(
    subject_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> SubjectResponse:
    subject = ContentService(db).get_subject(subject_id)
    if subject is None:
        raise NotFoundError("Subject")
    return SubjectResponse.model_validate(subject)


@content_routes.get("/subjects/{subject_id}/strands", response_model=list[StrandWithUnlockResponse])
def list_strands(
    subject_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> list[StrandWithUnlockResponse]:
    """Strands in order, each with the learner's completed topic count and unlock state."""
    if ContentService(db).get_subject(subject_id) is None:
        raise NotFoundError("Subject")
    rows = ProgressService(db).strands_with_unlocks(current_user.id, subject_id)
    return [
        StrandWithUnlockResponse(
            id=s.id,
            subject_id=s.subject_id,
            name=s.name,
            description=s.description,
            order_index=s.order_index,
            total_topics=s.total_topics,
            completed_topics=completed,
            is_unlocked=unlocked,
        )
        for s, completed, unlocked in rows
    ]


@content_routes.get("/strands/{strand_id}/topics", response_model=list[TopicResponse])
def list_topics(
    strand_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> list[TopicResponse]:
    service = ContentService(db)
    if service.get_strand(strand_id) is None:
        raise NotFoundError("Strand")
    return [TopicResponse.model_validate(t) for t in service.list_topics(strand_id)]
