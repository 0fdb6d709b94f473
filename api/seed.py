"""
Reference data for a fresh database: the five Grade 8 subjects, the
Mathematics strands, the algebra topics and sample study material for
"Simplifying Expressions". Skipped entirely once any subject exists.
"""

from datetime import datetime, timedelta

from sqlalchemy.orm import Session

from api.models.models import (
    Flashcard,
    HomeworkAssignment,
    HomeworkQuestion,
    Quiz,
    QuizQuestion,
    Strand,
    Subject,
    Topic,
)
from api.utils.db import unit_of_work
from api.utils.logger import get_logger

logger = get_logger(__name__)

SUBJECTS = [
    ("Mathematics", "MATH", "Numbers, algebra, geometry, and data handling", "#4A90E2"),
    ("English", "ENG", "Reading, writing, speaking and listening", "#9B59B6"),
    ("Kiswahili", "KIS", "Kusoma, kuandika, mazungumzo na ufahamu", "#E74C3C"),
    ("Science", "SCI", "Matter, energy, living things, and earth science", "#27AE60"),
    ("Social Studies", "SS", "History, geography, civics and citizenship", "#F39C12"),
]

MATH_STRANDS = [
    ("Number Operations", "Basic arithmetic operations"),
    ("Fractions and Decimals", "Working with fractions and decimals"),
    ("Algebraic Expressions", "Introduction to algebra"),
    ("Geometry", "Shapes, angles, and measurements"),
    ("Data Handling", "Statistics and probability basics"),
]

ALGEBRA_TOPICS = [
    ("Variables and Constants", "Understanding variables and constants", 25),
    ("Simplifying Expressions", "Combining like terms", 30),
    ("Linear Equations", "Solving simple linear equations", 35),
    ("Substitution", "Substituting values in expressions", 30),
    ("Word Problems", "Applying algebra to real-world problems", 40),
]

FLASHCARDS = [
    ("Simplify: 3x + 5x - 2", "8x - 2", "Combine like terms: 3x + 5x = 8x"),
    ("Simplify: 2y + 7 - y + 3", "y + 10", "Combine like terms: 2y - y = y, and 7 + 3 = 10"),
    ("Simplify: 4a - 2a + 6b", "2a + 6b", "Combine like terms: 4a - 2a = 2a, 6b remains as is"),
    ("Simplify: 5x + 3y - 2x - y", "3x + 2y", "Combine like terms: 5x - 2x = 3x, 3y - y = 2y"),
]


def seed_initial_data(db: Session) -> bool:
    """Insert reference data once. Returns False when the database was already seeded."""
    if db.query(Subject).first() is not None:
        logger.info("seed skipped: subjects already present")
        return False

    with unit_of_work(db):
        subjects = [
            Subject(name=name, code=code, description=description, icon_color=color)
            for name, code, description, color in SUBJECTS
        ]
        db.add_all(subjects)
        db.flush()
        math = next(s for s in subjects if s.code == "MATH")

        strands = [
            Strand(subject_id=math.id, name=name, description=description, order_index=i)
            for i, (name, description) in enumerate(MATH_STRANDS, start=1)
        ]
        db.add_all(strands)
        db.flush()
        algebra = next(s for s in strands if s.name == "Algebraic Expressions")

        topics = [
            Topic(strand_id=algebra.id, name=name, description=description, order_index=i, xp_reward=xp)
            for i, (name, description, xp) in enumerate(ALGEBRA_TOPICS, start=1)
        ]
        db.add_all(topics)
        db.flush()
        simplify = next(t for t in topics if t.name == "Simplifying Expressions")

        db.add_all([
            Flashcard(topic_id=simplify.id, question=q, answer=a, explanation=e, order_index=i)
            for i, (q, a, e) in enumerate(FLASHCARDS, start=1)
        ])

        quiz = Quiz(
            topic_id=simplify.id,
            title="Simplifying Expressions Quiz",
            description="Test your understanding of combining like terms",
            time_limit=15,
            passing_score=70,
            max_attempts=3,
        )
        db.add(quiz)
        db.flush()
        db.add_all([
            QuizQuestion(
                quiz_id=quiz.id,
                question="Simplify: 7x + 2x - 3",
                question_type="multiple_choice",
                options=["9x - 3", "9x + 3", "5x - 3", "7x - 1"],
                correct_answer="9x - 3",
                explanation="Combine like terms: 7x + 2x = 9x",
                points=2,
                order_index=1,
            ),
            QuizQuestion(
                quiz_id=quiz.id,
                question="What is the coefficient of x in the expression 5x + 3y?",
                question_type="multiple_choice",
                options=["3", "5", "8", "1"],
                correct_answer="5",
                explanation="The coefficient is the number multiplying the variable",
                points=2,
                order_index=2,
            ),
            QuizQuestion(
                quiz_id=quiz.id,
                question="Explain what 'like terms' are.",
                question_type="short_answer",
                correct_answer="Terms with the same variable raised to the same power",
                rubric=["same variable", "power"],
                explanation="3x and 5x are like terms; 3x and 3y are not",
                points=2,
                order_index=3,
            ),
        ])

        homework = HomeworkAssignment(
            topic_id=simplify.id,
            title="Practice Simplifying Expressions",
            description="Complete the following algebraic expression problems",
            due_date=datetime.utcnow() + timedelta(days=7),
            max_score=100,
            teacher_instructions="Show all your working steps",
        )
        db.add(homework)
        db.flush()
        db.add_all([
            HomeworkQuestion(
                homework_id=homework.id,
                question="Simplify: 6m + 4 - 2m + 1",
                question_type="short_answer",
                correct_answer="4m + 5",
                order_index=1,
            ),
            HomeworkQuestion(
                homework_id=homework.id,
                question="True or false: 2x and 2x² are like terms.",
                question_type="true_false",
                options=["True", "False"],
                correct_answer="False",
                order_index=2,
            ),
        ])

    logger.info(
        "seeded %s subjects, %s strands, %s topics", len(subjects), len(strands), len(topics),
    )
    return True
