"""
Pytest configuration and shared fixtures for the test suite.
Ensures proper Python path and provides common fixtures for unit and integration tests.
"""
import os
import sys
import tempfile
from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Add project root and src to Python path for imports
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))
src_path = project_root / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

# Settings are read at import time; keep tests off the real database and log dir
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SEED_ON_STARTUP", "false")
os.environ.setdefault("LOG_DIR", str(Path(tempfile.gettempdir()) / "cbc_learning_test_logs"))
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")


# ----- In-memory DB (for tests that need DB without touching real DB) -----
@pytest.fixture
def in_memory_engine():
    """One shared in-memory SQLite connection, usable from any thread."""
    return create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


@pytest.fixture
def session_factory(in_memory_engine):
    from api.config import Base
    import api.models  # noqa: F401
    Base.metadata.create_all(in_memory_engine)
    return sessionmaker(autocommit=False, autoflush=False, bind=in_memory_engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def student(db_session):
    """A registered Grade 8 student."""
    from api.models.models import User
    user = User(
        email="amani@example.com",
        hashed_password="not-a-real-hash",
        first_name="Amani",
        last_name="Otieno",
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def curriculum(db_session):
    """
    Mathematics with two ordered strands of five topics each (25 XP per topic).
    Returns a dict: subject, strands, topics (strand id -> topics in order).
    """
    from api.models.models import Strand, Subject, Topic
    subject = Subject(name="Mathematics", code="MATH", total_strands=20)
    db_session.add(subject)
    db_session.flush()

    strands = [
        Strand(subject_id=subject.id, name="Number Operations", order_index=1, total_topics=5),
        Strand(subject_id=subject.id, name="Algebraic Expressions", order_index=2, total_topics=5),
    ]
    db_session.add_all(strands)
    db_session.flush()

    topics = {}
    for strand in strands:
        topics[strand.id] = [
            Topic(strand_id=strand.id, name=f"{strand.name} {i}", order_index=i, xp_reward=25)
            for i in range(1, 6)
        ]
        db_session.add_all(topics[strand.id])
    db_session.commit()
    return {"subject": subject, "strands": strands, "topics": topics}


@pytest.fixture
def make_quiz(db_session):
    """Factory: make_quiz(topic, answers=["a", "b", ...], passing_score=70, max_attempts=3)."""
    from api.models.models import Quiz, QuizQuestion

    def _make(topic, answers, passing_score=70, max_attempts=3, question_type="multiple_choice"):
        quiz = Quiz(
            topic_id=topic.id if topic is not None else None,
            title="Practice quiz",
            passing_score=passing_score,
            max_attempts=max_attempts,
        )
        db_session.add(quiz)
        db_session.flush()
        db_session.add_all([
            QuizQuestion(
                quiz_id=quiz.id,
                question=f"Question {i}",
                question_type=question_type,
                options=[answer, "wrong"],
                correct_answer=answer,
                order_index=i,
            )
            for i, answer in enumerate(answers, start=1)
        ])
        db_session.commit()
        db_session.refresh(quiz)
        return quiz

    return _make


class FakeTutor:
    """Stands in for RafikiTutor; records the context of every call."""

    def __init__(self, replies=None):
        self.replies = list(replies or [])
        self.calls = []

    async def generate_reply(self, user_text, context=None):
        from agents.rafiki_agent.agent import TutorReply
        self.calls.append((user_text, dict(context or {})))
        message = self.replies.pop(0) if self.replies else f"reply to {user_text}"
        return TutorReply(message=message, suggestions=["Practice with flashcards"])


@pytest.fixture
def make_tutor():
    """Factory: make_tutor(replies=["a1", ...]) -> FakeTutor."""
    return FakeTutor


class FakeGenerator:
    """Stands in for StudyContentGenerator; returns canned content and records calls."""

    def __init__(self):
        self.calls = []

    async def generate_flashcards(self, topic, subject, count=10):
        from agents.study_content_agent.agent import GeneratedFlashcard
        self.calls.append(("flashcards", topic, subject, count))
        return [
            GeneratedFlashcard(question=f"{topic} card {i}", answer=f"answer {i}", explanation="tip")
            for i in range(1, count + 1)
        ]

    async def generate_quiz_questions(self, topic, subject, difficulty="medium", count=5):
        from agents.study_content_agent.agent import GeneratedQuestion
        self.calls.append(("quiz", topic, subject, difficulty, count))
        return [
            GeneratedQuestion(
                question=f"{topic} question {i}",
                options=["a", "b", "c", "d"],
                correct_answer="a",
                explanation="because",
            )
            for i in range(1, count + 1)
        ]

    async def evaluate_answer(self, question, student_answer, correct_answer, subject=None):
        from agents.study_content_agent.agent import AnswerEvaluation
        self.calls.append(("evaluate", question, student_answer, correct_answer, subject))
        correct = student_answer.strip().lower() == correct_answer.strip().lower()
        return AnswerEvaluation(
            is_correct=correct,
            score=100 if correct else 40,
            feedback="Well done!" if correct else "Nearly there!",
            suggestions=["Review like terms"],
        )


@pytest.fixture
def make_generator():
    """Factory: make_generator() -> FakeGenerator."""
    return FakeGenerator
