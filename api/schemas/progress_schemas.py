"""
Progress ledger schemas: per-topic progress rows and aggregate learner stats.
"""

from datetime import datetime
from typing import Optional

from api.schemas.base import CamelModel


class UserProgressResponse(CamelModel):
    id: int
    user_id: int
    subject_id: Optional[int] = None
    strand_id: Optional[int] = None
    topic_id: int
    is_completed: bool
    score: Optional[int] = None
    completed_at: Optional[datetime] = None
    last_accessed: Optional[datetime] = None


class UserStats(CamelModel):
    total_xp: int = 0
    current_level: int = 1
    completed_subjects: int = 0
    study_streak: int = 0
    average_score: int = 0


class ProgressOverviewResponse(CamelModel):
    """Body of GET /api/progress."""
    progress: list[UserProgressResponse]
    stats: UserStats
