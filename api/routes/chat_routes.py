"""
Rafiki chat endpoints. Every user turn is answered by the tutor before the
response is returned.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from agents.rafiki_agent.agent import RafikiTutor
from api.bootstrap import get_tutor
from api.config import get_db
from api.models.models import User
from api.schemas.chat_schemas import (
    ChatMessage,
    ChatSessionResponse,
    CreateChatSessionRequest,
    SendMessageRequest,
    SendMessageResponse,
)
from api.services.chat_service import ChatService
from api.utils.auth import get_current_user
from api.utils.errors import NotFoundError

chat_routes = APIRouter()


@chat_routes.get("/chat/sessions", response_model=list[ChatSessionResponse])
def list_sessions(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> list[ChatSessionResponse]:
    sessions = ChatService(db).list_sessions(current_user.id)
    return [ChatSessionResponse.model_validate(s) for s in sessions]


@chat_routes.post("/chat/sessions", response_model=ChatSessionResponse)
async def create_session(
    request: CreateChatSessionRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
    tutor: RafikiTutor = Depends(get_tutor),
) -> ChatSessionResponse:
    session = await ChatService(db, tutor).create_session(
        current_user.id,
        request.message,
        subject_id=request.subject_id,
        title=request.title,
    )
    return ChatSessionResponse.model_validate(session)


@chat_routes.get("/chat/sessions/{session_id}", response_model=ChatSessionResponse)
def get_session(
    session_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> ChatSessionResponse:
    session = ChatService(db).get_session(current_user.id, session_id)
    if session is None:
        raise NotFoundError("Chat session")
    return ChatSessionResponse.model_validate(session)


@chat_routes.post("/chat/sessions/{session_id}/messages", response_model=SendMessageResponse)
async def send_message(
    session_id: int,
    request: SendMessageRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
    tutor: RafikiTutor = Depends(get_tutor),
) -> SendMessageResponse:
    turn = await ChatService(db, tutor).post_message(current_user.id, session_id, request.message)
    return SendMessageResponse(
        user_message=ChatMessage(**turn.user_message),
        ai_message=ChatMessage(**turn.ai_message),
        suggestions=turn.suggestions,
    )
