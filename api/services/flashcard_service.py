"""
Flashcard service: cards for a topic merged with the learner's review state.
"""

from datetime import datetime

from sqlalchemy.orm import Session as DBSession

from api.models.models import Flashcard, UserFlashcardProgress
from api.utils.db import unit_of_work
from api.utils.errors import NotFoundError
from api.utils.logger import get_logger

logger = get_logger(__name__)


class FlashcardService:
    """Service for flashcards and per-user review progress."""

    def __init__(self, db: DBSession):
        self.db = db

    def list_flashcards(self, topic_id: int) -> list[Flashcard]:
        return (
            self.db.query(Flashcard)
            .filter(Flashcard.topic_id == topic_id)
            .order_by(Flashcard.order_index.asc())
            .all()
        )

    def list_flashcards_with_progress(self, user_id: int, topic_id: int) -> list[dict]:
        """Each card as a dict with is_known/review_count for this user (False/0 if never reviewed)."""
        cards = self.list_flashcards(topic_id)
        if not cards:
            return []
        prog_by_card = {
            p.flashcard_id: p
            for p in self.db.query(UserFlashcardProgress)
            .filter(
                UserFlashcardProgress.user_id == user_id,
                UserFlashcardProgress.flashcard_id.in_([c.id for c in cards]),
            )
            .all()
        }
        out: list[dict] = []
        for c in cards:
            p = prog_by_card.get(c.id)
            out.append(
                {
                    "id": c.id,
                    "topic_id": c.topic_id,
                    "question": c.question,
                    "answer": c.answer,
                    "explanation": c.explanation,
                    "difficulty": c.difficulty,
                    "order_index": c.order_index,
                    "is_known": bool(p.is_known) if p else False,
                    "review_count": int(p.review_count) if p else 0,
                }
            )
        return out

    def mark_flashcard_known(self, user_id: int, flashcard_id: int, is_known: bool) -> UserFlashcardProgress:
        """
        Upsert review state for (user, card). Every call counts as one review,
        whatever the is_known value.
        """
        card = self.db.query(Flashcard).filter(Flashcard.id == flashcard_id).first()
        if card is None:
            raise NotFoundError("Flashcard")

        with unit_of_work(self.db):
            now = datetime.utcnow()
            progress = (
                self.db.query(UserFlashcardProgress)
                .filter(
                    UserFlashcardProgress.user_id == user_id,
                    UserFlashcardProgress.flashcard_id == flashcard_id,
                )
                .first()
            )
            if progress is None:
                progress = UserFlashcardProgress(
                    user_id=user_id,
                    flashcard_id=flashcard_id,
                    is_known=bool(is_known),
                    last_reviewed=now,
                    review_count=1,
                )
                self.db.add(progress)
            else:
                progress.is_known = bool(is_known)
                progress.last_reviewed = now
                progress.review_count = int(progress.review_count or 0) + 1
            self.db.flush()

        logger.debug(
            "flashcard reviewed user=%s card=%s known=%s count=%s",
            user_id, flashcard_id, is_known, progress.review_count,
        )
        return progress
