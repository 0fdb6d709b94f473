"""
Generation service: resolves a topic to its strand and subject, then asks the
study content generator for flashcards or quiz questions about it. Generated
content is returned to the caller and never stored.
"""

from typing import Any, Optional, Protocol

from sqlalchemy.orm import Session as DBSession

from api.models.models import Subject, Topic
from api.services.content_service import ContentService
from api.utils.errors import NotFoundError
from api.utils.logger import get_logger, log_request

logger = get_logger(__name__)


class ContentGenerator(Protocol):
    async def generate_flashcards(self, topic: str, subject: str, count: int = 10) -> list[Any]: ...

    async def generate_quiz_questions(
        self, topic: str, subject: str, difficulty: str = "medium", count: int = 5
    ) -> list[Any]: ...

    async def evaluate_answer(
        self, question: str, student_answer: str, correct_answer: str, subject: Optional[str] = None
    ) -> Any: ...


class GenerationService:
    def __init__(self, db: DBSession, generator: ContentGenerator):
        self.db = db
        self.generator = generator

    def topic_with_subject(self, topic_id: int) -> tuple[Topic, Subject]:
        """Topic -> strand -> subject; raises NotFoundError at the first missing link."""
        content = ContentService(self.db)
        topic = self.db.query(Topic).filter(Topic.id == topic_id).first()
        if topic is None:
            raise NotFoundError("Topic")
        strand = content.get_strand(topic.strand_id) if topic.strand_id is not None else None
        if strand is None:
            raise NotFoundError("Strand")
        subject = content.get_subject(strand.subject_id) if strand.subject_id is not None else None
        if subject is None:
            raise NotFoundError("Subject")
        return topic, subject

    async def generate_flashcards(self, topic_id: int, count: int) -> list[Any]:
        topic, subject = self.topic_with_subject(topic_id)
        with log_request(logger, "generate.flashcards"):
            cards = await self.generator.generate_flashcards(topic.name, subject.name, count)
        logger.info("generated flashcards topic=%s requested=%s returned=%s", topic_id, count, len(cards))
        return cards

    async def generate_quiz(self, topic_id: int, count: int, difficulty: str) -> list[Any]:
        topic, subject = self.topic_with_subject(topic_id)
        with log_request(logger, "generate.quiz"):
            questions = await self.generator.generate_quiz_questions(topic.name, subject.name, difficulty, count)
        logger.info(
            "generated quiz questions topic=%s difficulty=%s requested=%s returned=%s",
            topic_id, difficulty, count, len(questions),
        )
        return questions

    async def evaluate_answer(
        self,
        question: str,
        student_answer: str,
        correct_answer: str,
        subject: Optional[str] = None,
    ) -> Any:
        with log_request(logger, "evaluate.answer"):
            return await self.generator.evaluate_answer(question, student_answer, correct_answer, subject)
