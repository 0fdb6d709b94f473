from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from api.config import get_db
from api.models.models import User
from api.schemas.homework_schemas import (
    GradeHomeworkRequest,
    HomeworkResponse,
    HomeworkSubmissionResponse,
    SubmitHomeworkRequest,
)
from api.services.homework_service import HomeworkService
from api.utils.auth import get_current_user, require_teacher
from api.utils.errors import NotFoundError

homework_routes = APIRouter()


@homework_routes.get("/topics/{topic_id}/homework", response_model=list[HomeworkResponse])
def list_topic_homework(
    topic_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> list[HomeworkResponse]:
    return [HomeworkResponse.model_validate(h) for h in HomeworkService(db).list_homework(topic_id)]


@homework_routes.get("/homework/active", response_model=list[HomeworkResponse])
def list_active_homework(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> list[HomeworkResponse]:
    return [HomeworkResponse.model_validate(h) for h in HomeworkService(db).list_active_homework()]


@homework_routes.get("/homework/{homework_id}/submission", response_model=HomeworkSubmissionResponse)
def get_submission(
    homework_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> HomeworkSubmissionResponse:
    submission = HomeworkService(db).get_submission(current_user.id, homework_id)
    if submission is None:
        raise NotFoundError("Submission")
    return HomeworkSubmissionResponse.model_validate(submission)


@homework_routes.post("/homework/{homework_id}/submit", response_model=HomeworkSubmissionResponse)
def submit_homework(
    homework_id: int,
    request: SubmitHomeworkRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> HomeworkSubmissionResponse:
    submission = HomeworkService(db).submit_homework(current_user.id, homework_id, request.answers)
    return HomeworkSubmissionResponse.model_validate(submission)


@homework_routes.post("/homework/submissions/{submission_id}/grade", response_model=HomeworkSubmissionResponse)
def grade_submission(
    submission_id: int,
    request: GradeHomeworkRequest,
    teacher: User = Depends(require_teacher),
    db: Session = Depends(get_db),
) -> HomeworkSubmissionResponse:
    """Teacher-only: score a learner's submission."""
    submission = HomeworkService(db).grade_submission(submission_id, request.score, request.feedback)
    return HomeworkSubmissionResponse.model_validate(submission)
