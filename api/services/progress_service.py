"""
Progress ledger: topic completion records, the XP event ledger, learner stats,
strand unlocking and the study streak.

Writes here only flush; the caller's unit of work commits.
"""

import math
from datetime import datetime
from typing import Iterable, Optional, Sequence

from sqlalchemy import func
from sqlalchemy.orm import Session as DBSession

from api.models.models import (
    Strand,
    Subject,
    Topic,
    User,
    UserProgress,
    XpEvent,
)
from api.schemas.progress_schemas import UserStats
from api.utils.common import round_half_up
from api.utils.logger import get_logger

logger = get_logger(__name__)

XP_PER_LEVEL = 500
STRAND_UNLOCK_RATIO = 0.8
SUBJECT_COMPLETION_RATIO = 0.9
DEFAULT_TOTAL_STRANDS = 20
DEFAULT_TOTAL_TOPICS = 5


def level_for_xp(total_xp: int) -> int:
    """Level 1 at 0 XP, +1 every 500 XP."""
    return max(int(total_xp or 0), 0) // XP_PER_LEVEL + 1


def strand_unlock_threshold(total_topics: Optional[int]) -> int:
    """Completed topics needed in a strand before the next one opens (ceil of 80%)."""
    total = DEFAULT_TOTAL_TOPICS if total_topics is None else total_topics
    # round() first so 0.8 * 5 == 4.000000000000001 does not ceil to 5
    return math.ceil(round(total * STRAND_UNLOCK_RATIO, 9))


def subject_completion_threshold(total_strands: Optional[int]) -> int:
    """Completed topics needed for a subject to count as completed (floor of 90%)."""
    total = DEFAULT_TOTAL_STRANDS if total_strands is None else total_strands
    # at least one completed topic, so tiny subjects are not complete by default
    return max(1, math.floor(round(total * SUBJECT_COMPLETION_RATIO, 9)))


def is_strand_unlocked(
    strand_order_index: int,
    strands: Sequence[Strand],
    completed_by_strand: dict[int, int],
) -> bool:
    """
    The first strand (lowest order_index) is always open. Any other strand is
    open iff the strand right before it has reached its unlock threshold.
    completed_by_strand maps strand id -> completed topic count for one user.
    """
    ordered = sorted(strands, key=lambda s: s.order_index)
    if not ordered or strand_order_index <= ordered[0].order_index:
        return True
    previous = None
    for s in ordered:
        if s.order_index >= strand_order_index:
            break
        previous = s
    if previous is None:
        return True
    completed = completed_by_strand.get(previous.id, 0)
    return completed >= strand_unlock_threshold(previous.total_topics)


def next_study_streak(streak: int, last_study: Optional[datetime], now: datetime) -> int:
    """Same day keeps the streak, the next day extends it, any gap restarts at 1."""
    if last_study is None:
        return 1
    gap = (now.date() - last_study.date()).days
    if gap <= 0:
        return max(streak, 1)
    if gap == 1:
        return streak + 1
    return 1


class ProgressService:
    """Service for per-topic progress, XP and derived learner stats."""

    def __init__(self, db: DBSession):
        self.db = db

    # --- writes ---

    def record_topic_completion(
        self,
        user_id: int,
        topic_id: int,
        is_completed: bool,
        score: Optional[int] = None,
    ) -> Optional[UserProgress]:
        """
        Upsert the (user, topic) progress row. A topic that does not resolve to a
        strand and subject is a silent no-op and returns None.
        Awards the topic's XP once, on the first completion.
        """
        topic = self.db.query(Topic).filter(Topic.id == topic_id).first()
        if topic is None:
            logger.info("progress skipped: topic %s not found", topic_id)
            return None
        strand = self.db.query(Strand).filter(Strand.id == topic.strand_id).first() if topic.strand_id else None
        if strand is None or strand.subject_id is None:
            logger.info("progress skipped: topic %s has no strand/subject", topic_id)
            return None

        now = datetime.utcnow()
        progress = (
            self.db.query(UserProgress)
            .filter(UserProgress.user_id == user_id, UserProgress.topic_id == topic_id)
            .first()
        )
        if progress is None:
            progress = UserProgress(user_id=user_id, topic_id=topic_id)
            self.db.add(progress)
        progress.subject_id = strand.subject_id
        progress.strand_id = strand.id
        progress.is_completed = bool(is_completed)
        progress.score = score
        progress.completed_at = now if is_completed else None
        progress.last_accessed = now
        self.db.flush()

        user = self.db.query(User).filter(User.id == user_id).first()
        if is_completed:
            self._award_topic_xp(user_id, topic)
        if user is not None:
            self._refresh_user_xp(user)
            self.record_study_activity(user, now)
        self.db.flush()
        return progress

    def _award_topic_xp(self, user_id: int, topic: Topic) -> Optional[XpEvent]:
        existing = (
            self.db.query(XpEvent)
            .filter(XpEvent.user_id == user_id, XpEvent.topic_id == topic.id)
            .first()
        )
        if existing is not None:
            return None
        xp = int(topic.xp_reward or 0)
        if xp <= 0:
            return None
        event = XpEvent(user_id=user_id, topic_id=topic.id, xp=xp, reason="topic_completed")
        self.db.add(event)
        self.db.flush()
        logger.info("xp awarded user=%s topic=%s xp=%s", user_id, topic.id, xp)
        return event

    def _refresh_user_xp(self, user: User) -> None:
        user.total_xp = self.total_xp(user.id)
        user.current_level = level_for_xp(user.total_xp)
        user.updated_at = datetime.utcnow()

    def record_study_activity(self, user: User, now: Optional[datetime] = None) -> None:
        now = now or datetime.utcnow()
        user.study_streak = next_study_streak(user.study_streak or 0, user.last_study_date, now)
        user.last_study_date = now

    # --- reads ---

    def total_xp(self, user_id: int) -> int:
        """Fold over the XP ledger."""
        total = self.db.query(func.coalesce(func.sum(XpEvent.xp), 0)).filter(XpEvent.user_id == user_id).scalar()
        return int(total or 0)

    def list_progress(self, user_id: int) -> list[UserProgress]:
        return self.db.query(UserProgress).filter(UserProgress.user_id == user_id).all()

    def list_subject_progress(self, user_id: int, subject_id: int) -> list[UserProgress]:
        return (
            self.db.query(UserProgress)
            .filter(UserProgress.user_id == user_id, UserProgress.subject_id == subject_id)
            .all()
        )

    def compute_stats(self, user_id: int) -> UserStats:
        user = self.db.query(User).filter(User.id == user_id).first()
        if user is None:
            return UserStats()

        progress = self.list_progress(user_id)
        scores = [p.score for p in progress if p.score is not None]
        average_score = round_half_up(sum(scores) / len(scores)) if scores else 0

        total_xp = self.total_xp(user_id)
        completed_subjects = 0
        for subject in self.db.query(Subject).all():
            completed = sum(1 for p in progress if p.subject_id == subject.id and p.is_completed)
            if completed >= subject_completion_threshold(subject.total_strands):
                completed_subjects += 1

        return UserStats(
            total_xp=total_xp,
            current_level=level_for_xp(total_xp),
            completed_subjects=completed_subjects,
            study_streak=int(user.study_streak or 0),
            average_score=average_score,
        )

    def completed_by_strand(self, user_id: int, strand_ids: Iterable[int]) -> dict[int, int]:
        ids = list(strand_ids)
        if not ids:
            return {}
        rows = (
            self.db.query(UserProgress.strand_id, func.count(UserProgress.id))
            .filter(
                UserProgress.user_id == user_id,
                UserProgress.is_completed.is_(True),
                UserProgress.strand_id.in_(ids),
            )
            .group_by(UserProgress.strand_id)
            .all()
        )
        return {int(sid): int(n) for sid, n in rows}

    def is_strand_unlocked(self, user_id: int, strand_order_index: int, strands: Sequence[Strand]) -> bool:
        counts = self.completed_by_strand(user_id, [s.id for s in strands])
        return is_strand_unlocked(strand_order_index, strands, counts)

    def strands_with_unlocks(self, user_id: int, subject_id: int) -> list[tuple[Strand, int, bool]]:
        """(strand, completed topic count, is_unlocked) in order for one subject."""
        strands = (
            self.db.query(Strand)
            .filter(Strand.subject_id == subject_id)
            .order_by(Strand.order_index.asc())
            .all()
        )
        counts = self.completed_by_strand(user_id, [s.id for s in strands])
        return [
            (s, counts.get(s.id, 0), is_strand_unlocked(s.order_index, strands, counts))
            for s in strands
        ]


