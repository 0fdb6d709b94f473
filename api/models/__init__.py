"""
API data models. Single import surface for DB entities.

Content hierarchy: Subject, Strand, Topic
Progress ledger: UserProgress, XpEvent
Activities: Flashcard, UserFlashcardProgress, Quiz, QuizQuestion, UserQuizAttempt,
  HomeworkAssignment, HomeworkQuestion, UserHomeworkSubmission
Chat: ChatSession
"""

from api.models.models import (
    User,
    Subject,
    Strand,
    Topic,
    UserProgress,
    XpEvent,
    Flashcard,
    UserFlashcardProgress,
    Quiz,
    QuizQuestion,
    UserQuizAttempt,
    HomeworkAssignment,
    HomeworkQuestion,
    UserHomeworkSubmission,
    ChatSession,
)

__all__ = [
    "User",
    "Subject",
    "Strand",
    "Topic",
    "UserProgress",
    "XpEvent",
    "Flashcard",
    "UserFlashcardProgress",
    "Quiz",
    "QuizQuestion",
    "UserQuizAttempt",
    "HomeworkAssignment",
    "HomeworkQuestion",
    "UserHomeworkSubmission",
    "ChatSession",
]
