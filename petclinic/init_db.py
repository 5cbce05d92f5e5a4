"""
Database initialization: table creation and pet type reference data.
"""

import logging

from sqlalchemy.orm import Session

from petclinic.constants import DEFAULT_PET_TYPES
from petclinic.database import Base, engine, SessionLocal
from petclinic.models import PetType

logger = logging.getLogger(__name__)


def seed_pet_types(db: Session) -> int:
    """
    Insert the default pet types that are not present yet.

    Args:
        db: Database session

    Returns:
        Number of pet types added
    """
    existing = {name for (name,) in db.query(PetType.name).all()}
    missing = [name for name in DEFAULT_PET_TYPES if name not in existing]
    for name in missing:
        db.add(PetType(name=name))
    if missing:
        db.commit()
        logger.info(f"Seeded pet types: {', '.join(missing)}")
    return len(missing)


def init_database(seed: bool = True):
    """Create all tables and optionally seed the pet type reference data."""
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ready")

    if not seed:
        return

    db = SessionLocal()
    try:
        seed_pet_types(db)
    finally:
        db.close()
