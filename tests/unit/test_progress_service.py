"""Unit tests for the progress ledger (in-memory DB, no LLM)."""
from datetime import datetime, timedelta

import pytest

from api.models.models import Strand, Subject, Topic, User, UserProgress, XpEvent
from api.services.progress_service import (
    ProgressService,
    is_strand_unlocked,
    level_for_xp,
    next_study_streak,
    strand_unlock_threshold,
    subject_completion_threshold,
)


@pytest.mark.unit
class TestLevelForXp:
    @pytest.mark.parametrize("xp,level", [(0, 1), (499, 1), (500, 2), (999, 2), (1250, 3)])
    def test_formula(self, xp, level):
        assert level_for_xp(xp) == level

    def test_monotonic(self):
        levels = [level_for_xp(xp) for xp in range(0, 5000, 25)]
        assert levels == sorted(levels)


@pytest.mark.unit
class TestThresholds:
    def test_strand_unlock_is_ceil_of_80_percent(self):
        assert strand_unlock_threshold(5) == 4
        assert strand_unlock_threshold(6) == 5
        assert strand_unlock_threshold(None) == 4

    def test_subject_completion_is_floor_of_90_percent(self):
        assert subject_completion_threshold(20) == 18
        assert subject_completion_threshold(5) == 4
        assert subject_completion_threshold(None) == 18

    @pytest.mark.parametrize("total_strands", [0, 1])
    def test_small_subject_needs_one_completed_topic(self, total_strands):
        assert subject_completion_threshold(total_strands) == 1

    def test_first_strand_always_unlocked(self):
        strands = [Strand(id=1, order_index=1, total_topics=5), Strand(id=2, order_index=2, total_topics=5)]
        assert is_strand_unlocked(1, strands, {}) is True
        assert is_strand_unlocked(2, strands, {}) is False
        assert is_strand_unlocked(2, strands, {1: 4}) is True


@pytest.mark.unit
class TestStudyStreak:
    now = datetime(2025, 3, 10, 9, 0)

    def test_first_activity_starts_at_one(self):
        assert next_study_streak(0, None, self.now) == 1

    def test_same_day_keeps_streak(self):
        assert next_study_streak(3, self.now - timedelta(hours=2), self.now) == 3

    def test_next_day_extends(self):
        assert next_study_streak(3, self.now - timedelta(days=1), self.now) == 4

    def test_gap_resets(self):
        assert next_study_streak(7, self.now - timedelta(days=3), self.now) == 1


@pytest.mark.unit
class TestRecordTopicCompletion:
    def test_completion_creates_row_and_awards_xp(self, db_session, student, curriculum):
        topic = curriculum["topics"][curriculum["strands"][0].id][0]
        progress = ProgressService(db_session).record_topic_completion(student.id, topic.id, True, 90)
        db_session.commit()

        assert progress.is_completed is True
        assert progress.score == 90
        assert progress.completed_at is not None
        assert progress.subject_id == curriculum["subject"].id
        assert progress.strand_id == curriculum["strands"][0].id
        db_session.refresh(student)
        assert student.total_xp == 25
        assert student.current_level == 1
        assert student.study_streak == 1

    def test_double_completion_awards_xp_once(self, db_session, student, curriculum):
        topic = curriculum["topics"][curriculum["strands"][0].id][0]
        service = ProgressService(db_session)
        service.record_topic_completion(student.id, topic.id, True, 80)
        service.record_topic_completion(student.id, topic.id, True, 100)
        db_session.commit()

        rows = db_session.query(UserProgress).filter_by(user_id=student.id, topic_id=topic.id).all()
        assert len(rows) == 1
        assert rows[0].score == 100
        assert db_session.query(XpEvent).filter_by(user_id=student.id).count() == 1
        db_session.refresh(student)
        assert student.total_xp == 25

    def test_incomplete_record_awards_nothing(self, db_session, student, curriculum):
        topic = curriculum["topics"][curriculum["strands"][0].id][0]
        progress = ProgressService(db_session).record_topic_completion(student.id, topic.id, False)
        db_session.commit()

        assert progress.is_completed is False
        assert progress.completed_at is None
        db_session.refresh(student)
        assert student.total_xp == 0

    def test_unknown_topic_is_noop(self, db_session, student):
        result = ProgressService(db_session).record_topic_completion(student.id, 9999, True, 100)
        assert result is None
        assert db_session.query(UserProgress).count() == 0

    def test_topic_without_strand_is_noop(self, db_session, student):
        orphan = Topic(strand_id=None, name="Orphan", order_index=1)
        db_session.add(orphan)
        db_session.commit()
        assert ProgressService(db_session).record_topic_completion(student.id, orphan.id, True) is None
        assert db_session.query(UserProgress).count() == 0


@pytest.mark.unit
class TestStrandUnlocks:
    def _complete(self, db_session, student, topics):
        service = ProgressService(db_session)
        for t in topics:
            service.record_topic_completion(student.id, t.id, True, 80)
        db_session.commit()
        return service

    def test_unlocks_at_four_of_five(self, db_session, student, curriculum):
        first, second = curriculum["strands"]
        service = self._complete(db_session, student, curriculum["topics"][first.id][:4])
        assert service.is_strand_unlocked(student.id, second.order_index, curriculum["strands"]) is True

    def test_locked_at_three_of_five(self, db_session, student, curriculum):
        first, second = curriculum["strands"]
        service = self._complete(db_session, student, curriculum["topics"][first.id][:3])
        assert service.is_strand_unlocked(student.id, second.order_index, curriculum["strands"]) is False

    def test_strands_with_unlocks_lists_counts_in_order(self, db_session, student, curriculum):
        first, second = curriculum["strands"]
        service = self._complete(db_session, student, curriculum["topics"][first.id][:2])
        rows = service.strands_with_unlocks(student.id, curriculum["subject"].id)
        assert [(s.id, n, unlocked) for s, n, unlocked in rows] == [
            (first.id, 2, True),
            (second.id, 0, False),
        ]


@pytest.mark.unit
class TestComputeStats:
    def test_unknown_user_gets_defaults(self, db_session):
        stats = ProgressService(db_session).compute_stats(12345)
        assert stats.model_dump() == {
            "total_xp": 0,
            "current_level": 1,
            "completed_subjects": 0,
            "study_streak": 0,
            "average_score": 0,
        }

    def test_average_score_rounds_half_up(self, db_session, student, curriculum):
        topics = curriculum["topics"][curriculum["strands"][0].id]
        service = ProgressService(db_session)
        service.record_topic_completion(student.id, topics[0].id, True, 80)
        service.record_topic_completion(student.id, topics[1].id, True, 75)
        db_session.commit()

        stats = service.compute_stats(student.id)
        assert stats.average_score == 78
        assert stats.total_xp == 50
        assert stats.study_streak == 1

    def _big_subject(self, db_session):
        subject = Subject(name="Science", code="SCI", total_strands=20)
        db_session.add(subject)
        db_session.flush()
        strand = Strand(subject_id=subject.id, name="Matter", order_index=1, total_topics=20)
        db_session.add(strand)
        db_session.flush()
        topics = [Topic(strand_id=strand.id, name=f"T{i}", order_index=i, xp_reward=10) for i in range(20)]
        db_session.add_all(topics)
        db_session.commit()
        return topics

    def test_subject_completed_at_18_of_20(self, db_session, student):
        topics = self._big_subject(db_session)
        service = ProgressService(db_session)
        for t in topics[:18]:
            service.record_topic_completion(student.id, t.id, True, 90)
        db_session.commit()
        assert service.compute_stats(student.id).completed_subjects == 1

    def test_subject_not_completed_at_17_of_20(self, db_session, student):
        topics = self._big_subject(db_session)
        service = ProgressService(db_session)
        for t in topics[:17]:
            service.record_topic_completion(student.id, t.id, True, 90)
        db_session.commit()
        assert service.compute_stats(student.id).completed_subjects == 0

    def test_level_follows_ledger(self, db_session, student, curriculum):
        topic = curriculum["topics"][curriculum["strands"][0].id][0]
        topic.xp_reward = 520
        db_session.commit()
        ProgressService(db_session).record_topic_completion(student.id, topic.id, True, 100)
        db_session.commit()
        user = db_session.query(User).filter_by(id=student.id).one()
        assert (user.total_xp, user.current_level) == (520, 2)
