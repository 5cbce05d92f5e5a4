"""
Owner repository for owner-specific data access operations.
"""

import logging
from typing import List

from sqlalchemy.orm import Session, selectinload

from petclinic.domain.entities import Owner, Pet
from petclinic.exceptions import NotFoundError
from petclinic.models import Owner as OwnerModel, Pet as PetModel, Visit as VisitModel
from .base_repository import BaseRepository
from .records import owner_from_record

logger = logging.getLogger(__name__)


def new_pet_record(pet: Pet) -> PetModel:
    """Build a pet row, with its unsaved visits, for insertion."""
    record = PetModel(
        name=pet.name,
        birth_date=pet.birth_date,
        type_id=pet.type.id if pet.type else None,
    )
    for visit in pet.visits:
        if visit.is_new:
            record.visits.append(VisitModel(visit_date=visit.date, description=visit.description))
    return record


class OwnerRepository(BaseRepository[OwnerModel]):
    """Repository for owners and the pets listed under them."""

    def __init__(self, db: Session):
        super().__init__(db, OwnerModel, "Owner")

    def _query_with_pets(self):
        return self.db.query(self.model).options(
            selectinload(self.model.pets).selectinload(PetModel.type)
        )

    def find_by_id(self, owner_id: int) -> Owner:
        """
        Load an owner with their pets.

        Args:
            owner_id: Owner primary key

        Returns:
            Owner entity; pets carry no visits

        Raises:
            NotFoundError: If the owner does not exist
        """
        record = self._query_with_pets().filter(self.model.id == owner_id).first()
        if record is None:
            raise NotFoundError(self.entity_name, owner_id)
        return owner_from_record(record)

    def find_by_last_name(self, last_name: str) -> List[Owner]:
        """
        Find owners whose last name starts with the given text.

        An empty string matches every owner.

        Args:
            last_name: Last name prefix

        Returns:
            Matching owners ordered by ID
        """
        records = self._query_with_pets().filter(
            self.model.last_name.startswith(last_name, autoescape=True)
        ).order_by(self.model.id).all()
        return [owner_from_record(record) for record in records]

    def save(self, owner: Owner) -> Owner:
        """
        Insert a new owner with their pets, or update an existing owner.

        Updating only touches the owner's own columns; pets are saved
        through the pet repository.

        Args:
            owner: Owner entity; a new owner receives its generated ID

        Returns:
            The same owner entity

        Raises:
            NotFoundError: If an existing owner's ID is unknown
            DatabaseError: If the write fails
        """
        new_pets = []
        if owner.is_new:
            record = OwnerModel()
            for pet in owner.pets:
                if pet.is_new:
                    pet_record = new_pet_record(pet)
                    record.pets.append(pet_record)
                    new_pets.append((pet, pet_record))
            self.db.add(record)
        else:
            record = self.require_by_id(owner.id)

        record.first_name = owner.first_name
        record.last_name = owner.last_name
        record.address = owner.address
        record.city = owner.city
        record.telephone = owner.telephone

        self.commit("Save owner")
        owner.id = record.id
        for pet, pet_record in new_pets:
            pet.id = pet_record.id
        logger.info(f"Saved owner {owner.id} ({owner.first_name} {owner.last_name})")
        return owner
