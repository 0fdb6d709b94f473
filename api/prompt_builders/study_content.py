"""Prompts for generated flashcards and quizzes and for answer evaluation."""

from __future__ import annotations

from typing import Optional

from agents.core.prompt_builder import build_from_template

TEMPLATE_FLASHCARDS = """Generate {count} educational flashcards for the Grade 8 CBC curriculum.

Subject: {subject}
Topic: {topic}

Each flashcard needs:
- a clear question or prompt
- a concise answer
- a brief explanation or learning tip

Answer as JSON: {{"flashcards": [{{"question": "...", "answer": "...", "explanation": "..."}}]}}"""

TEMPLATE_QUIZ = """Generate {count} multiple-choice quiz questions for the Grade 8 CBC curriculum.

Subject: {subject}
Topic: {topic}
Difficulty: {difficulty}

Each question needs:
- a clear, age-appropriate question
- 4 answer options
- the correct answer, copied exactly from the options
- a brief explanation

Answer as JSON: {{"questions": [{{"question": "...", "options": ["..."], "correct_answer": "...", "explanation": "..."}}]}}"""

TEMPLATE_EVALUATION = """Evaluate this Grade 8 student's answer.

Question: {question}
Student answer: {student_answer}
Correct answer: {correct_answer}
Subject: {subject}

Give is_correct (true or false), score (0 to 100), feedback (an encouraging message)
and suggestions (2 or 3 learning tips). Be encouraging and constructive.

Answer as JSON: {{"is_correct": false, "score": 0, "feedback": "...", "suggestions": ["..."]}}"""


def build_flashcards_prompt(*, topic: str, subject: str, count: int = 10) -> str:
    return build_from_template(TEMPLATE_FLASHCARDS, topic=topic, subject=subject, count=count)


def build_quiz_prompt(*, topic: str, subject: str, difficulty: str = "medium", count: int = 5) -> str:
    return build_from_template(TEMPLATE_QUIZ, topic=topic, subject=subject, difficulty=difficulty, count=count)


def build_evaluation_prompt(
    *,
    question: str,
    student_answer: str,
    correct_answer: str,
    subject: Optional[str] = None,
) -> str:
    return build_from_template(
        TEMPLATE_EVALUATION,
        question=question,
        student_answer=student_answer,
        correct_answer=correct_answer,
        subject=subject or "General",
    )
