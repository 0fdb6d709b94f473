"""
Chat service: Rafiki chat sessions. Each session holds an append-only
transcript; every user turn is answered by the tutor collaborator.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional, Protocol

from sqlalchemy.orm import Session as DBSession

from api.models.models import ChatSession, Subject
from api.utils.common import iso_format, last_messages
from api.utils.db import unit_of_work
from api.utils.errors import NotFoundError
from api.utils.logger import get_logger, log_request

logger = get_logger(__name__)

DEFAULT_SESSION_TITLE = "Chat with Rafiki"
HISTORY_WINDOW = 6
GRADE = "8"
USER_LEVEL = "intermediate"


class Tutor(Protocol):
    async def generate_reply(self, user_text: str, context: Optional[dict] = None) -> Any: ...


@dataclass
class ChatTurn:
    user_message: dict
    ai_message: dict
    suggestions: list[str]


def chat_message(role: str, content: str, at: Optional[datetime] = None) -> dict:
    return {"role": role, "content": content, "timestamp": iso_format(at or datetime.utcnow())}


class ChatService:
    """Service for Rafiki chat sessions and their transcripts."""

    def __init__(self, db: DBSession, tutor: Optional[Tutor] = None):
        self.db = db
        self.tutor = tutor

    def list_sessions(self, user_id: int) -> list[ChatSession]:
        return (
            self.db.query(ChatSession)
            .filter(ChatSession.user_id == user_id)
            .order_by(ChatSession.last_message_at.desc(), ChatSession.id.desc())
            .all()
        )

    def get_session(self, user_id: int, session_id: int) -> Optional[ChatSession]:
        """Get a session by id if it belongs to the user."""
        return (
            self.db.query(ChatSession)
            .filter(ChatSession.id == session_id, ChatSession.user_id == user_id)
            .first()
        )

    def append_message(self, session: ChatSession, message: dict) -> None:
        """Append to the transcript. The JSON column is reassigned so the change is tracked."""
        session.messages = [*(session.messages or []), message]
        session.last_message_at = datetime.utcnow()
        self.db.flush()

    def _subject_name(self, subject_id: Optional[int]) -> Optional[str]:
        if subject_id is None:
            return None
        subject = self.db.query(Subject).filter(Subject.id == subject_id).first()
        return subject.name if subject else None

    async def _reply(self, text: str, context: dict):
        if self.tutor is None:
            raise RuntimeError("ChatService needs a tutor to answer messages")
        with log_request(logger, "rafiki.reply"):
            return await self.tutor.generate_reply(text, context)

    async def create_session(
        self,
        user_id: int,
        first_message: str,
        subject_id: Optional[int] = None,
        title: Optional[str] = None,
    ) -> ChatSession:
        """Open a session with the student's first message and Rafiki's answer."""
        subject_name = self._subject_name(subject_id)
        if subject_id is not None and subject_name is None:
            raise NotFoundError("Subject")

        with unit_of_work(self.db):
            session = ChatSession(
                user_id=user_id,
                subject_id=subject_id,
                title=title or DEFAULT_SESSION_TITLE,
                messages=[],
            )
            self.db.add(session)
            self.db.flush()
            self.append_message(session, chat_message("user", first_message))

        context = {
            "subject": subject_name,
            "grade": GRADE,
            "user_level": USER_LEVEL,
        }
        reply = await self._reply(first_message, context)

        with unit_of_work(self.db):
            self.append_message(session, chat_message("assistant", reply.message))

        self.db.refresh(session)
        logger.info("chat session created id=%s user=%s subject=%s", session.id, user_id, subject_id)
        return session

    async def post_message(self, user_id: int, session_id: int, message: str) -> ChatTurn:
        session = self.get_session(user_id, session_id)
        if session is None:
            raise NotFoundError("Chat session")

        previous = last_messages(session.messages, HISTORY_WINDOW)
        user_message = chat_message("user", message)
        with unit_of_work(self.db):
            self.append_message(session, user_message)

        context = {
            "subject": self._subject_name(session.subject_id),
            "grade": GRADE,
            "user_level": USER_LEVEL,
            "previous_messages": previous,
        }
        reply = await self._reply(message, context)

        ai_message = chat_message("assistant", reply.message)
        with unit_of_work(self.db):
            self.append_message(session, ai_message)

        return ChatTurn(user_message=user_message, ai_message=ai_message, suggestions=list(reply.suggestions or []))
