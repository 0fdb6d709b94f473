"""Unit tests for the reference data seed."""
import pytest

from api.models.models import Flashcard, HomeworkAssignment, Quiz, QuizQuestion, Strand, Subject, Topic
from api.seed import seed_initial_data


@pytest.mark.unit
class TestSeed:
    def test_seeds_reference_data(self, db_session):
        assert seed_initial_data(db_session) is True

        assert {s.code for s in db_session.query(Subject).all()} == {"MATH", "ENG", "KIS", "SCI", "SS"}
        math = db_session.query(Subject).filter_by(code="MATH").one()
        assert [s.name for s in math.strands][2] == "Algebraic Expressions"
        assert db_session.query(Strand).count() == 5
        assert db_session.query(Topic).count() == 5
        assert db_session.query(Flashcard).count() == 4
        quiz = db_session.query(Quiz).one()
        assert quiz.passing_score == 70 and quiz.max_attempts == 3
        assert db_session.query(QuizQuestion).count() == 3
        homework = db_session.query(HomeworkAssignment).one()
        assert len(homework.questions) == 2

    def test_second_run_is_skipped(self, db_session):
        seed_initial_data(db_session)
        assert seed_initial_data(db_session) is False
        assert db_session.query(Subject).count() == 5
