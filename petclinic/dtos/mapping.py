"""
Entity <-> DTO Mapping

Explicit, field-by-field conversions between the domain entities and the
form DTOs. Every function builds new objects and leaves its argument
untouched.

The Pet -> Owner back-reference is handled by two separate pairs of
functions:

- ``nested_pet_to_dto`` / ``nested_pet_to_entity`` convert a pet as part of
  its owner and never fill ``owner``. Owner conversions use these, so an
  owner-first conversion yields pets without an owner reference.
- ``pet_to_dto`` / ``pet_to_entity`` convert a pet on its own and, when the
  pet has an owner, convert that owner too and attach it. The owner's pets
  go through the nested variant, so the graph stays finite.
"""

import logging
from typing import Iterable, List, Optional

from petclinic.domain.entities import Owner, Pet, PetType, Visit
from petclinic.dtos.forms import OwnerDTO, PetDTO, PetTypeDTO, VisitDTO

logger = logging.getLogger(__name__)


# ============================================================
# PetType
# ============================================================

def pet_type_to_dto(pet_type: Optional[PetType]) -> Optional[PetTypeDTO]:
    if pet_type is None:
        return None
    return PetTypeDTO(id=pet_type.id, name=pet_type.name)


def pet_type_to_entity(pet_type_dto: Optional[PetTypeDTO]) -> Optional[PetType]:
    if pet_type_dto is None:
        return None
    return PetType(id=pet_type_dto.id, name=pet_type_dto.name)


def pet_types_to_dto(pet_types: Iterable[PetType]) -> List[PetTypeDTO]:
    """Convert pet type reference data, keeping the source order."""
    logger.debug("Converting pet type collection to DTO")
    return [pet_type_to_dto(pet_type) for pet_type in pet_types]


# ============================================================
# Visit
# ============================================================

def visit_to_dto(visit: Visit) -> VisitDTO:
    logger.debug(f"Converting visit to DTO: {visit}")
    return VisitDTO(id=visit.id, date=visit.date, description=visit.description)


def visit_to_entity(visit_dto: VisitDTO) -> Visit:
    logger.debug(f"Converting visit DTO to entity: {visit_dto}")
    return Visit(id=visit_dto.id, date=visit_dto.date, description=visit_dto.description)


# ============================================================
# Pet
# ============================================================

def nested_pet_to_dto(pet: Pet) -> PetDTO:
    """
    Convert a pet as part of its owner.

    The owner back-reference is left empty: the owner being converted is
    the pet's owner.
    """
    logger.debug(f"Converting nested pet to DTO: {pet}")
    return PetDTO(
        id=pet.id,
        name=pet.name,
        birth_date=pet.birth_date,
        type=pet_type_to_dto(pet.type),
        visits=[visit_to_dto(visit) for visit in pet.visits],
    )


def nested_pet_to_entity(pet_dto: PetDTO) -> Pet:
    """Convert a pet DTO as part of its owner, without an owner reference."""
    logger.debug(f"Converting nested pet DTO to entity: {pet_dto!r}")
    return Pet(
        id=pet_dto.id,
        name=pet_dto.name,
        birth_date=pet_dto.birth_date,
        type=pet_type_to_entity(pet_dto.type),
        visits=[visit_to_entity(visit_dto) for visit_dto in pet_dto.visits],
    )


def pet_to_dto(pet: Pet) -> PetDTO:
    """
    Convert a pet on its own.

    When the pet has an owner, the owner is converted as well and attached
    to the result.
    """
    logger.debug(f"Converting pet to DTO: {pet} (owner id: {pet.owner.id if pet.owner else None})")
    pet_dto = nested_pet_to_dto(pet)
    if pet.owner is not None:
        pet_dto.owner = owner_to_dto(pet.owner)
    return pet_dto


def pet_to_entity(pet_dto: PetDTO) -> Pet:
    """
    Convert a pet DTO on its own.

    When the DTO carries an owner, the owner is converted as well and
    attached to the result.
    """
    logger.debug(f"Converting pet DTO to entity: {pet_dto!r}")
    pet = nested_pet_to_entity(pet_dto)
    if pet_dto.owner is not None:
        pet.owner = owner_to_entity(pet_dto.owner)
    return pet


# ============================================================
# Owner
# ============================================================

def owner_to_dto(owner: Owner) -> OwnerDTO:
    logger.debug(f"Converting owner to DTO: {owner.first_name} {owner.last_name} ({len(owner.pets)} pets)")
    return OwnerDTO(
        id=owner.id,
        first_name=owner.first_name,
        last_name=owner.last_name,
        address=owner.address,
        city=owner.city,
        telephone=owner.telephone,
        pets=[nested_pet_to_dto(pet) for pet in owner.pets],
    )


def owner_to_entity(owner_dto: OwnerDTO) -> Owner:
    logger.debug(f"Converting owner DTO to entity: {owner_dto.first_name} {owner_dto.last_name} "
                 f"({len(owner_dto.pets)} pets)")
    return Owner(
        id=owner_dto.id,
        first_name=owner_dto.first_name,
        last_name=owner_dto.last_name,
        address=owner_dto.address,
        city=owner_dto.city,
        telephone=owner_dto.telephone,
        pets=[nested_pet_to_entity(pet_dto) for pet_dto in owner_dto.pets],
    )


def owners_to_dto(owners: Iterable[Owner]) -> List[OwnerDTO]:
    """Convert a collection of owners, keeping the source order."""
    logger.debug("Converting owner collection to DTO")
    return [owner_to_dto(owner) for owner in owners]
