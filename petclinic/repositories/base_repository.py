"""
Base repository providing common data access operations.
"""

import logging
from typing import Generic, TypeVar, Type, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from petclinic.exceptions import DatabaseError, NotFoundError

T = TypeVar('T')

logger = logging.getLogger(__name__)


class BaseRepository(Generic[T]):
    """
    Generic base repository over one SQLAlchemy model.
    All specific repositories should inherit from this class.
    """

    def __init__(self, db: Session, model: Type[T], entity_name: str):
        """
        Initialize the repository.

        Args:
            db: SQLAlchemy database session
            model: SQLAlchemy model class
            entity_name: Human-readable entity name used in errors
        """
        self.db = db
        self.model = model
        self.entity_name = entity_name

    def get_by_id(self, id: int) -> Optional[T]:
        """
        Retrieve a record by its ID.

        Args:
            id: Primary key value

        Returns:
            Model instance or None if not found
        """
        return self.db.query(self.model).filter(self.model.id == id).first()

    def require_by_id(self, id: int) -> T:
        """
        Retrieve a record by its ID, failing when it does not exist.

        Args:
            id: Primary key value

        Returns:
            Model instance

        Raises:
            NotFoundError: If no record has this ID
        """
        record = self.get_by_id(id)
        if record is None:
            raise NotFoundError(self.entity_name, id)
        return record

    def commit(self, operation: str) -> None:
        """
        Commit the current unit of work.

        Args:
            operation: Description of the operation, used in errors

        Raises:
            DatabaseError: If the commit fails; the session is rolled back
        """
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"{operation} failed: {e}")
            raise DatabaseError(operation, str(e)) from e
