"""
Quiz service: listing quizzes, grading submissions and driving topic progress.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Mapping, Optional

from sqlalchemy.orm import Session as DBSession

from api.models.models import Quiz, QuizQuestion, UserQuizAttempt
from api.services.grading import grade_question
from api.services.progress_service import ProgressService
from api.utils.common import round_half_up
from api.utils.db import unit_of_work
from api.utils.errors import AttemptLimitReached, NotFoundError
from api.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_PASSING_SCORE = 70
DEFAULT_MAX_ATTEMPTS = 3


def score_percentage(correct: int, total: int) -> int:
    """round(correct / total * 100), half up; 0 for an empty quiz."""
    if total <= 0:
        return 0
    return round_half_up(correct / total * 100)


@dataclass
class QuizResult:
    attempt: UserQuizAttempt
    score: int
    correct_answers: int
    total_questions: int


class QuizService:
    """Service for quizzes and quiz attempts."""

    def __init__(self, db: DBSession):
        self.db = db
        self.progress = ProgressService(db)

    def list_quizzes(self, topic_id: int) -> list[Quiz]:
        return self.db.query(Quiz).filter(Quiz.topic_id == topic_id).all()

    def get_quiz(self, quiz_id: int) -> Optional[Quiz]:
        return self.db.query(Quiz).filter(Quiz.id == quiz_id).first()

    def get_quiz_with_questions(self, quiz_id: int) -> tuple[Quiz, list[QuizQuestion]]:
        quiz = self.get_quiz(quiz_id)
        if quiz is None:
            raise NotFoundError("Quiz")
        return quiz, self.get_questions(quiz_id)

    def get_questions(self, quiz_id: int) -> list[QuizQuestion]:
        return (
            self.db.query(QuizQuestion)
            .filter(QuizQuestion.quiz_id == quiz_id)
            .order_by(QuizQuestion.order_index.asc())
            .all()
        )

    def list_attempts(self, user_id: int, quiz_id: int) -> list[UserQuizAttempt]:
        return (
            self.db.query(UserQuizAttempt)
            .filter(UserQuizAttempt.user_id == user_id, UserQuizAttempt.quiz_id == quiz_id)
            .order_by(UserQuizAttempt.started_at.desc(), UserQuizAttempt.id.desc())
            .all()
        )

    def count_attempts(self, user_id: int, quiz_id: int) -> int:
        return (
            self.db.query(UserQuizAttempt)
            .filter(UserQuizAttempt.user_id == user_id, UserQuizAttempt.quiz_id == quiz_id)
            .count()
        )

    def submit_quiz(
        self,
        user_id: int,
        quiz_id: int,
        answers: Mapping[str, str],
        time_spent: int = 0,
    ) -> QuizResult:
        """
        Grade a submission, store it as a new attempt and, on a pass, mark the
        quiz's topic completed. Attempt and progress are written in one unit of work.
        """
        quiz = self.get_quiz(quiz_id)
        if quiz is None:
            raise NotFoundError("Quiz")

        max_attempts = quiz.max_attempts if quiz.max_attempts is not None else DEFAULT_MAX_ATTEMPTS
        if max_attempts > 0 and self.count_attempts(user_id, quiz_id) >= max_attempts:
            logger.info("quiz attempt rejected user=%s quiz=%s max_attempts=%s", user_id, quiz_id, max_attempts)
            raise AttemptLimitReached(quiz_id, max_attempts)

        questions = self.get_questions(quiz_id)
        answers = {str(k): v for k, v in (answers or {}).items()}
        correct = sum(1 for q in questions if grade_question(q, answers.get(str(q.id))))
        score = score_percentage(correct, len(questions))
        passing_score = quiz.passing_score if quiz.passing_score is not None else DEFAULT_PASSING_SCORE

        with unit_of_work(self.db):
            now = datetime.utcnow()
            attempt = UserQuizAttempt(
                user_id=user_id,
                quiz_id=quiz_id,
                score=score,
                answers=answers,
                time_spent=time_spent,
                completed_at=now,
            )
            self.db.add(attempt)
            self.db.flush()
            if score >= passing_score and quiz.topic_id is not None:
                self.progress.record_topic_completion(user_id, quiz.topic_id, True, score)

        self.db.refresh(attempt)
        logger.info(
            "quiz submitted user=%s quiz=%s score=%s correct=%s/%s",
            user_id, quiz_id, score, correct, len(questions),
        )
        return QuizResult(attempt, score, correct, len(questions))
