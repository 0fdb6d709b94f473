"""
Content hierarchy schemas: subjects, strands, topics.
"""

from typing import Optional

from api.schemas.base import CamelModel


class SubjectResponse(CamelModel):
    id: int
    name: str
    code: str
    description: Optional[str] = None
    icon_color: Optional[str] = None
    total_strands: Optional[int] = None


class StrandResponse(CamelModel):
    id: int
    subject_id: Optional[int] = None
    name: str
    description: Optional[str] = None
    order_index: int
    total_topics: Optional[int] = None


class StrandWithUnlockResponse(StrandResponse):
    """Strand plus the learner's standing in it (subject detail view)."""
    completed_topics: int = 0
    is_unlocked: bool = False


class TopicResponse(CamelModel):
    id: int
    strand_id: Optional[int] = None
    name: str
    description: Optional[str] = None
    order_index: int
    xp_reward: Optional[int] = None
