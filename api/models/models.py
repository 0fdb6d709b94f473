from api.config import Base
from sqlalchemy import (
    Column,
    Integer,
    String,
    JSON,
    DateTime,
    ForeignKey,
    Text,
    Boolean,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
from datetime import datetime


class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String)
    first_name = Column(String, nullable=True)
    last_name = Column(String, nullable=True)
    grade = Column(String, default="8")
    role = Column(String, default="student", nullable=False)  # student|teacher
    # Cached fold of xp_events; refreshed by the progress ledger, never incremented in place
    total_xp = Column(Integer, default=0, nullable=False)
    current_level = Column(Integer, default=1, nullable=False)
    study_streak = Column(Integer, default=0, nullable=False)
    last_study_date = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, nullable=False)


# --- Content hierarchy (seeded reference data) ---

class Subject(Base):
    __tablename__ = "subjects"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    code = Column(String, unique=True, nullable=False)
    description = Column(Text, nullable=True)
    icon_color = Column(String, default="#4A90E2")
    total_strands = Column(Integer, default=20)

    strands = relationship("Strand", backref="subject", order_by="Strand.order_index")


class Strand(Base):
    __tablename__ = "strands"
    id = Column(Integer, primary_key=True, index=True)
    subject_id = Column(Integer, ForeignKey("subjects.id"), index=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    order_index = Column(Integer, nullable=False)
    total_topics = Column(Integer, default=5)

    topics = relationship("Topic", backref="strand", order_by="Topic.order_index")


class Topic(Base):
    __tablename__ = "topics"
    id = Column(Integer, primary_key=True, index=True)
    strand_id = Column(Integer, ForeignKey("strands.id"), index=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    order_index = Column(Integer, nullable=False)
    xp_reward = Column(Integer, default=25)


# --- Progress ledger ---

class UserProgress(Base):
    __tablename__ = "user_progress"
    __table_args__ = (UniqueConstraint("user_id", "topic_id", name="uq_user_progress_user_topic"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), index=True, nullable=False)
    subject_id = Column(Integer, ForeignKey("subjects.id"), index=True)
    strand_id = Column(Integer, ForeignKey("strands.id"), index=True)
    topic_id = Column(Integer, ForeignKey("topics.id"), index=True, nullable=False)
    is_completed = Column(Boolean, default=False, nullable=False)
    completed_at = Column(DateTime, nullable=True)
    last_accessed = Column(DateTime, default=datetime.utcnow, nullable=False)
    score = Column(Integer, nullable=True)  # percentage


class XpEvent(Base):
    """Append-only XP ledger. One completion award per (user, topic)."""
    __tablename__ = "xp_events"
    __table_args__ = (UniqueConstraint("user_id", "topic_id", name="uq_xp_events_user_topic"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), index=True, nullable=False)
    topic_id = Column(Integer, ForeignKey("topics.id"), nullable=False)
    xp = Column(Integer, nullable=False)
    reason = Column(String, default="topic_completed", nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)


# --- Flashcards ---

class Flashcard(Base):
    __tablename__ = "flashcards"
    id = Column(Integer, primary_key=True, index=True)
    topic_id = Column(Integer, ForeignKey("topics.id"), index=True)
    question = Column(Text, nullable=False)
    answer = Column(Text, nullable=False)
    explanation = Column(Text, nullable=True)
    difficulty = Column(String, default="medium")  # easy|medium|hard
    order_index = Column(Integer, nullable=False)


class UserFlashcardProgress(Base):
    __tablename__ = "user_flashcard_progress"
    __table_args__ = (UniqueConstraint("user_id", "flashcard_id", name="uq_flashcard_progress_user_card"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), index=True, nullable=False)
    flashcard_id = Column(Integer, ForeignKey("flashcards.id"), index=True, nullable=False)
    is_known = Column(Boolean, default=False, nullable=False)
    last_reviewed = Column(DateTime, default=datetime.utcnow, nullable=False)
    review_count = Column(Integer, default=0, nullable=False)


# --- Quizzes ---

class Quiz(Base):
    __tablename__ = "quizzes"
    id = Column(Integer, primary_key=True, index=True)
    topic_id = Column(Integer, ForeignKey("topics.id"), index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    time_limit = Column(Integer, nullable=True)  # minutes
    passing_score = Column(Integer, default=70)
    max_attempts = Column(Integer, default=3)

    questions = relationship("QuizQuestion", backref="quiz", order_by="QuizQuestion.order_index")


class QuizQuestion(Base):
    __tablename__ = "quiz_questions"
    id = Column(Integer, primary_key=True, index=True)
    quiz_id = Column(Integer, ForeignKey("quizzes.id"), index=True)
    question = Column(Text, nullable=False)
    question_type = Column(String, nullable=False)  # multiple_choice|true_false|short_answer
    options = Column(JSON, nullable=True)  # list[str], multiple_choice only
    correct_answer = Column(Text, nullable=False)
    explanation = Column(Text, nullable=True)
    rubric = Column(JSON, nullable=True)  # list[str] keywords, short_answer only
    points = Column(Integer, default=1)
    order_index = Column(Integer, nullable=False)


class UserQuizAttempt(Base):
    __tablename__ = "user_quiz_attempts"
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), index=True, nullable=False)
    quiz_id = Column(Integer, ForeignKey("quizzes.id"), index=True, nullable=False)
    score = Column(Integer, nullable=True)
    answers = Column(JSON, nullable=True)  # {question_id: answer}
    started_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    completed_at = Column(DateTime, nullable=True)
    time_spent = Column(Integer, nullable=True)  # seconds


# --- Homework ---

class HomeworkAssignment(Base):
    __tablename__ = "homework_assignments"
    id = Column(Integer, primary_key=True, index=True)
    topic_id = Column(Integer, ForeignKey("topics.id"), index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    due_date = Column(DateTime, nullable=True)
    max_score = Column(Integer, default=100)
    teacher_instructions = Column(Text, nullable=True)
    created_by = Column(String, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)

    questions = relationship("HomeworkQuestion", backref="homework", order_by="HomeworkQuestion.order_index")


class HomeworkQuestion(Base):
    __tablename__ = "homework_questions"
    id = Column(Integer, primary_key=True, index=True)
    homework_id = Column(Integer, ForeignKey("homework_assignments.id"), index=True)
    question = Column(Text, nullable=False)
    question_type = Column(String, nullable=False)
    options = Column(JSON, nullable=True)
    correct_answer = Column(Text, nullable=True)
    rubric = Column(JSON, nullable=True)
    points = Column(Integer, default=10)
    order_index = Column(Integer, nullable=False)


class UserHomeworkSubmission(Base):
    __tablename__ = "user_homework_submissions"
    __table_args__ = (UniqueConstraint("user_id", "homework_id", name="uq_homework_submission_user_homework"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), index=True, nullable=False)
    homework_id = Column(Integer, ForeignKey("homework_assignments.id"), index=True, nullable=False)
    answers = Column(JSON, nullable=True)
    score = Column(Integer, nullable=True)
    feedback = Column(Text, nullable=True)
    submitted_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    graded_at = Column(DateTime, nullable=True)
    is_late = Column(Boolean, default=False, nullable=False)

    homework = relationship("HomeworkAssignment", foreign_keys=[homework_id])


# --- Rafiki chat ---

class ChatSession(Base):
    __tablename__ = "chat_sessions"
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), index=True, nullable=False)
    subject_id = Column(Integer, ForeignKey("subjects.id"), nullable=True)
    title = Column(String, nullable=True)
    messages = Column(JSON, nullable=False, default=list)  # list of {role, content, timestamp}
    started_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    last_message_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)

    user = relationship("User", backref="chat_sessions", foreign_keys=[user_id])
    subject = relationship("Subject", foreign_keys=[subject_id])
