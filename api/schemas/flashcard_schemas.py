from typing import Optional

from api.schemas.base import CamelModel


class FlashcardWithProgress(CamelModel):
    id: int
    topic_id: Optional[int] = None
    question: str
    answer: str
    explanation: Optional[str] = None
    difficulty: Optional[str] = None
    order_index: int
    is_known: bool = False
    review_count: int = 0


class FlashcardProgressRequest(CamelModel):
    is_known: bool


class SuccessResponse(CamelModel):
    success: bool = True
