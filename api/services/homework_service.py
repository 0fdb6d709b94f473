"""
Homework service: active assignments, learner submissions and teacher grading.
"""

from datetime import datetime
from typing import Any, Mapping, Optional

from sqlalchemy.orm import Session as DBSession

from api.models.models import HomeworkAssignment, UserHomeworkSubmission
from api.utils.db import unit_of_work
from api.utils.errors import NotFoundError, ValidationFailure
from api.utils.logger import get_logger

logger = get_logger(__name__)


def is_late(due_date: Optional[datetime], submitted_at: datetime) -> bool:
    return due_date is not None and submitted_at > due_date


class HomeworkService:
    """Service for homework assignments and submissions."""

    def __init__(self, db: DBSession):
        self.db = db

    def list_homework(self, topic_id: int) -> list[HomeworkAssignment]:
        return (
            self.db.query(HomeworkAssignment)
            .filter(HomeworkAssignment.topic_id == topic_id, HomeworkAssignment.is_active.is_(True))
            .all()
        )

    def list_active_homework(self) -> list[HomeworkAssignment]:
        return (
            self.db.query(HomeworkAssignment)
            .filter(HomeworkAssignment.is_active.is_(True))
            .order_by(HomeworkAssignment.due_date.asc())
            .all()
        )

    def get_submission(self, user_id: int, homework_id: int) -> Optional[UserHomeworkSubmission]:
        return (
            self.db.query(UserHomeworkSubmission)
            .filter(
                UserHomeworkSubmission.user_id == user_id,
                UserHomeworkSubmission.homework_id == homework_id,
            )
            .first()
        )

    def submit_homework(
        self,
        user_id: int,
        homework_id: int,
        answers: Mapping[str, Any],
    ) -> UserHomeworkSubmission:
        """
        One submission per (user, homework). Resubmitting replaces the answers and
        clears any earlier grade.
        """
        homework = (
            self.db.query(HomeworkAssignment)
            .filter(HomeworkAssignment.id == homework_id, HomeworkAssignment.is_active.is_(True))
            .first()
        )
        if homework is None:
            raise NotFoundError("Homework")

        with unit_of_work(self.db):
            now = datetime.utcnow()
            submission = self.get_submission(user_id, homework_id)
            if submission is None:
                submission = UserHomeworkSubmission(user_id=user_id, homework_id=homework_id)
                self.db.add(submission)
            submission.answers = dict(answers or {})
            submission.submitted_at = now
            submission.is_late = is_late(homework.due_date, now)
            submission.score = None
            submission.feedback = None
            submission.graded_at = None
            self.db.flush()

        logger.info(
            "homework submitted user=%s homework=%s late=%s",
            user_id, homework_id, submission.is_late,
        )
        return submission

    def grade_submission(
        self,
        submission_id: int,
        score: int,
        feedback: Optional[str] = None,
    ) -> UserHomeworkSubmission:
        submission = (
            self.db.query(UserHomeworkSubmission)
            .filter(UserHomeworkSubmission.id == submission_id)
            .first()
        )
        if submission is None:
            raise NotFoundError("Submission")
        max_score = submission.homework.max_score if submission.homework and submission.homework.max_score else 100
        if score < 0 or score > max_score:
            raise ValidationFailure(
                "Invalid request data",
                errors=[{"loc": ["body", "score"], "msg": f"score must be between 0 and {max_score}"}],
            )

        with unit_of_work(self.db):
            submission.score = score
            submission.feedback = feedback
            submission.graded_at = datetime.utcnow()
            self.db.flush()

        logger.info("homework graded submission=%s score=%s", submission_id, score)
        return submission
