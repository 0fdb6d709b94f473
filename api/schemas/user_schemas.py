from datetime import datetime
from typing import Optional

from api.schemas.base import CamelModel


class User(CamelModel):
    id: int
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    grade: Optional[str] = None
    role: str = "student"
    total_xp: int = 0
    current_level: int = 1
    study_streak: int = 0
    last_study_date: Optional[datetime] = None
