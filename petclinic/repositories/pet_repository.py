"""
Pet repository for pet and pet type data access operations.
"""

import logging
from typing import List

from sqlalchemy.orm import Session, selectinload

from petclinic.domain.entities import Pet, PetType
from petclinic.exceptions import NotFoundError
from petclinic.models import Pet as PetModel, PetType as PetTypeModel, Owner as OwnerModel
from .base_repository import BaseRepository
from .owner_repository import new_pet_record
from .records import owner_from_record, pet_from_record, pet_type_from_record

logger = logging.getLogger(__name__)


class PetRepository(BaseRepository[PetModel]):
    """Repository for pets and pet type reference data."""

    def __init__(self, db: Session):
        super().__init__(db, PetModel, "Pet")

    def find_by_id(self, pet_id: int) -> Pet:
        """
        Load a pet with its visits and its owner.

        The returned pet is the one listed in its owner's pet list, and
        points back at that owner.

        Args:
            pet_id: Pet primary key

        Returns:
            Pet entity

        Raises:
            NotFoundError: If the pet does not exist
        """
        record = self.db.query(self.model).options(
            selectinload(self.model.visits),
            selectinload(self.model.type),
            selectinload(self.model.owner).selectinload(OwnerModel.pets),
        ).filter(self.model.id == pet_id).first()
        if record is None:
            raise NotFoundError(self.entity_name, pet_id)

        owner = owner_from_record(record.owner)
        pet = next(p for p in owner.pets if p.id == record.id)
        pet.set_visits(pet_from_record(record).visits)
        return pet

    def find_pet_types(self) -> List[PetType]:
        """
        Get all pet types.

        Returns:
            Pet types ordered by name
        """
        records = self.db.query(PetTypeModel).order_by(PetTypeModel.name).all()
        return [pet_type_from_record(record) for record in records]

    def save(self, pet: Pet) -> Pet:
        """
        Insert a new pet or update an existing one.

        The owning owner is taken from ``pet.owner``. Updating an existing pet
        changes its name, birth date, type and owner; its visits are left as
        they are.

        Args:
            pet: Pet entity; a new pet receives its generated ID

        Returns:
            The same pet entity

        Raises:
            NotFoundError: If an existing pet's ID is unknown
            DatabaseError: If the write fails
        """
        if pet.is_new:
            record = new_pet_record(pet)
            self.db.add(record)
        else:
            record = self.require_by_id(pet.id)
            record.name = pet.name
            record.birth_date = pet.birth_date
            if pet.type is not None:
                record.type_id = pet.type.id

        if pet.owner is not None:
            record.owner_id = pet.owner.id

        self.commit("Save pet")
        pet.id = record.id
        logger.info(f"Saved pet {pet.id} ({pet.name}) for owner {record.owner_id}")
        return pet
