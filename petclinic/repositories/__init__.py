"""
Repository layer for data access abstraction.

This package contains repository classes that encapsulate database queries
and hand out domain entities detached from the database session.
"""

from .base_repository import BaseRepository
from .owner_repository import OwnerRepository
from .pet_repository import PetRepository
from .visit_repository import VisitRepository

__all__ = [
    "BaseRepository",
    "OwnerRepository",
    "PetRepository",
    "VisitRepository",
]
