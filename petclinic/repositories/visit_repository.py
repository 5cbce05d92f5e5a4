"""
Visit repository for visit data access operations.
"""

import logging
from typing import List

from sqlalchemy.orm import Session

from petclinic.domain.entities import Visit
from petclinic.models import Visit as VisitModel
from .base_repository import BaseRepository
from .records import visit_from_record

logger = logging.getLogger(__name__)


class VisitRepository(BaseRepository[VisitModel]):
    """Repository for pet visits."""

    def __init__(self, db: Session):
        super().__init__(db, VisitModel, "Visit")

    def find_by_pet_id(self, pet_id: int) -> List[Visit]:
        """
        Get the visit history of a pet.

        Args:
            pet_id: Pet primary key

        Returns:
            Visits ordered by date, then ID
        """
        records = self.db.query(self.model).filter(
            self.model.pet_id == pet_id
        ).order_by(self.model.visit_date, self.model.id).all()
        return [visit_from_record(record) for record in records]

    def save(self, visit: Visit) -> Visit:
        """
        Insert a new visit or update an existing one.

        Args:
            visit: Visit entity with ``pet_id`` set; a new visit receives its generated ID

        Returns:
            The same visit entity

        Raises:
            NotFoundError: If an existing visit's ID is unknown
            DatabaseError: If the write fails
        """
        if visit.is_new:
            record = VisitModel()
            self.db.add(record)
        else:
            record = self.require_by_id(visit.id)

        record.pet_id = visit.pet_id
        record.visit_date = visit.date
        record.description = visit.description

        self.commit("Save visit")
        visit.id = record.id
        logger.info(f"Saved visit {visit.id} for pet {visit.pet_id}")
        return visit
