from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from api.schemas.base import CamelModel


class HomeworkResponse(CamelModel):
    id: int
    topic_id: Optional[int] = None
    title: str
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    max_score: int = 100
    teacher_instructions: Optional[str] = None
    created_by: Optional[str] = None
    is_active: bool = True


class SubmitHomeworkRequest(CamelModel):
    answers: dict[str, Any]


class GradeHomeworkRequest(CamelModel):
    score: int = Field(ge=0)
    feedback: Optional[str] = None


class HomeworkSubmissionResponse(CamelModel):
    id: int
    user_id: int
    homework_id: int
    answers: Optional[dict[str, Any]] = None
    score: Optional[int] = None
    feedback: Optional[str] = None
    submitted_at: Optional[datetime] = None
    graded_at: Optional[datetime] = None
    is_late: bool = False
