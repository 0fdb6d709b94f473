"""
Unit-of-work helper: services flush, the unit of work commits once.
"""

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.orm import Session

from api.utils.logger import get_logger

logger = get_logger(__name__)


@contextmanager
def unit_of_work(db: Session) -> Iterator[Session]:
    """
    Commit everything written inside the block, or roll all of it back.
      with unit_of_work(db):
          db.add(attempt)
          progress.record_topic_completion(...)
    """
    try:
        yield db
        db.commit()
    except Exception:
        logger.warning("unit of work rolled back", exc_info=True)
        db.rollback()
        raise
