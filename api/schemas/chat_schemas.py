"""
Rafiki chat session and message schemas.
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

from api.schemas.base import CamelModel


class ChatMessage(BaseModel):
    """One transcript entry, stored as-is in ChatSession.messages."""
    role: Literal["user", "assistant"]
    content: str
    timestamp: str  # ISO 8601


class CreateChatSessionRequest(CamelModel):
    subject_id: Optional[int] = None
    title: Optional[str] = None
    message: str = Field(min_length=1)


class SendMessageRequest(CamelModel):
    message: str = Field(min_length=1)


class ChatSessionResponse(CamelModel):
    id: int
    user_id: int
    subject_id: Optional[int] = None
    title: Optional[str] = None
    messages: list[ChatMessage]
    started_at: Optional[datetime] = None
    last_message_at: Optional[datetime] = None
    is_active: bool = True


class SendMessageResponse(CamelModel):
    user_message: ChatMessage
    ai_message: ChatMessage
    suggestions: list[str]
