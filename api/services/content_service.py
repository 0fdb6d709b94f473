"""
Content hierarchy reads: subjects, strands and topics (seeded reference data).
"""

from typing import Optional

from sqlalchemy.orm import Session as DBSession

from api.models.models import Strand, Subject, Topic


class ContentService:
    def __init__(self, db: DBSession):
        self.db = db

    def list_subjects(self) -> list[Subject]:
        return self.db.query(Subject).order_by(Subject.id.asc()).all()

    def get_subject(self, subject_id: int) -> Optional[Subject]:
        return self.db.query(Subject).filter(Subject.id == subject_id).first()

    def list_strands(self, subject_id: int) -> list[Strand]:
        return (
            self.db.query(Strand)
            .filter(Strand.subject_id == subject_id)
            .order_by(Strand.order_index.asc())
            .all()
        )

    def get_strand(self, strand_id: int) -> Optional[Strand]:
        return self.db.query(Strand).filter(Strand.id == strand_id).first()

    def list_topics(self, strand_id: int) -> list[Topic]:
        return (
            self.db.query(Topic)
            .filter(Topic.strand_id == strand_id)
            .order_by(Topic.order_index.asc())
            .all()
        )
