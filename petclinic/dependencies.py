"""
Dependency injection providers for FastAPI.

This module provides factory functions for creating repository and controller
instances per request. All of them share the request's database session.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from petclinic.controllers import OwnerController, PetController, VisitController
from petclinic.database import get_db
from petclinic.repositories import OwnerRepository, PetRepository, VisitRepository


def get_owner_repository(db: Session = Depends(get_db)) -> OwnerRepository:
    return OwnerRepository(db)


def get_pet_repository(db: Session = Depends(get_db)) -> PetRepository:
    return PetRepository(db)


def get_visit_repository(db: Session = Depends(get_db)) -> VisitRepository:
    return VisitRepository(db)


def get_owner_controller(
    owners: OwnerRepository = Depends(get_owner_repository),
    visits: VisitRepository = Depends(get_visit_repository),
) -> OwnerController:
    """
    Factory function for creating OwnerController instances.

    Args:
        owners: Owner repository (injected)
        visits: Visit repository (injected)

    Returns:
        OwnerController instance
    """
    return OwnerController(owners, visits)


def get_pet_controller(
    pets: PetRepository = Depends(get_pet_repository),
    owners: OwnerRepository = Depends(get_owner_repository),
) -> PetController:
    """
    Factory function for creating PetController instances.

    Args:
        pets: Pet repository (injected)
        owners: Owner repository (injected)

    Returns:
        PetController instance
    """
    return PetController(pets, owners)


def get_visit_controller(
    visits: VisitRepository = Depends(get_visit_repository),
    pets: PetRepository = Depends(get_pet_repository),
    owners: OwnerRepository = Depends(get_owner_repository),
) -> VisitController:
    """
    Factory function for creating VisitController instances.

    Args:
        visits: Visit repository (injected)
        pets: Pet repository (injected)
        owners: Owner repository (injected)

    Returns:
        VisitController instance
    """
    return VisitController(visits, pets, owners)
