"""
Translation from SQLAlchemy records to detached domain entities.
"""

from typing import Optional

from petclinic.domain.entities import Owner, Pet, PetType, Visit
from petclinic.models import (
    Owner as OwnerModel,
    Pet as PetModel,
    PetType as PetTypeModel,
    Visit as VisitModel,
)


def pet_type_from_record(record: Optional[PetTypeModel]) -> Optional[PetType]:
    if record is None:
        return None
    return PetType(id=record.id, name=record.name)


def visit_from_record(record: VisitModel) -> Visit:
    return Visit(
        id=record.id,
        date=record.visit_date,
        description=record.description,
        pet_id=record.pet_id,
    )


def pet_from_record(record: PetModel, with_visits: bool = True) -> Pet:
    pet = Pet(
        id=record.id,
        name=record.name,
        birth_date=record.birth_date,
        type=pet_type_from_record(record.type),
    )
    if with_visits:
        pet.set_visits([visit_from_record(visit) for visit in record.visits])
    return pet


def owner_from_record(record: OwnerModel) -> Owner:
    """
    Build an owner and its pets.

    Each pet points back at the owner. Visits are not loaded: callers that
    display them fetch them through the visit repository.
    """
    owner = Owner(
        id=record.id,
        first_name=record.first_name,
        last_name=record.last_name,
        address=record.address,
        city=record.city,
        telephone=record.telephone,
    )
    for pet_record in record.pets:
        pet = pet_from_record(pet_record, with_visits=False)
        pet.owner = owner
        owner.pets.append(pet)
    return owner
