"""
Pet controller: adding and editing the pets of an owner.
"""

import logging
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Tuple, Union

from petclinic.constants import ErrorCodes, Views
from petclinic.domain.entities import Owner, Pet
from petclinic.dtos import PetDTO, PetTypeDTO
from petclinic.dtos.mapping import owner_to_dto, pet_to_dto, pet_to_entity, pet_types_to_dto
from petclinic.repositories import OwnerRepository, PetRepository
from petclinic.web import BindingResult, Redirect, ViewResult, bind_form
from petclinic.web.validation import validate_pet

logger = logging.getLogger(__name__)


class PetTypeFormatter:
    """Turns the pet type name submitted by a form into the matching type."""

    def __init__(self, types: List[PetTypeDTO]):
        self.types = types

    def __call__(self, text: str) -> PetTypeDTO:
        for pet_type in self.types:
            if pet_type.name == text:
                return pet_type
        raise ValueError(f"type not found: {text}")


@dataclass
class PetFormContext:
    """Model attributes shared by every pet page: the owner and the pet types."""

    owner: Owner
    types: List[PetTypeDTO]


class PetController:

    def __init__(self, pets: PetRepository, owners: OwnerRepository):
        self.pets = pets
        self.owners = owners

    def load_context(self, owner_id: int) -> PetFormContext:
        """Resolve the owner in the path and the pet type reference data."""
        owner = self.owners.find_by_id(owner_id)
        types = pet_types_to_dto(self.pets.find_pet_types())
        return PetFormContext(owner=owner, types=types)

    def bind_pet(
        self, context: PetFormContext, data: Mapping[str, Any], into: Optional[PetDTO] = None
    ) -> Tuple[PetDTO, BindingResult]:
        return bind_form(PetDTO, data, "pet", into=into, converters={"type": PetTypeFormatter(context.types)})

    def _view(self, context: PetFormContext, pet_dto: PetDTO, result: Optional[BindingResult] = None) -> ViewResult:
        model = {"owner": owner_to_dto(context.owner), "types": context.types, "pet": pet_dto}
        return ViewResult(Views.PET_CREATE_OR_UPDATE_FORM, model, result)

    def init_creation_form(self, context: PetFormContext) -> ViewResult:
        pet = Pet()
        context.owner.add_pet(pet)
        return self._view(context, pet_to_dto(pet))

    def process_creation_form(
        self, context: PetFormContext, pet_dto: PetDTO, result: BindingResult
    ) -> Union[ViewResult, Redirect]:
        """
        Add a pet to the owner.

        The duplicate name check only looks at the owner's pets that have not
        been saved yet; a saved pet with the same name does not block it.
        """
        owner = context.owner
        validate_pet(pet_dto, result)
        pet = pet_to_entity(pet_dto)
        if pet.name and pet.is_new and owner.get_pet(pet.name, new_only=True) is not None:
            logger.info(f"Rejected duplicate pet name '{pet.name}' for owner {owner.id}")
            result.reject_value("name", ErrorCodes.DUPLICATE, "already exists")
        owner.add_pet(pet)

        if result.has_errors():
            return self._view(context, pet_to_dto(pet), result)

        self.pets.save(pet)
        return Redirect(f"/owners/{owner.id}")

    def init_update_form(self, context: PetFormContext, pet_id: int) -> ViewResult:
        pet = self.pets.find_by_id(pet_id)
        return self._view(context, pet_to_dto(pet))

    def process_update_form(
        self, context: PetFormContext, pet_id: int, pet_dto: PetDTO, result: BindingResult
    ) -> Union[ViewResult, Redirect]:
        """Save an edited pet; the pet updated is always the one in the path."""
        owner = context.owner
        pet_dto.id = pet_id
        validate_pet(pet_dto, result)
        pet = pet_to_entity(pet_dto)

        if result.has_errors():
            pet_dto.owner = owner_to_dto(owner)
            return self._view(context, pet_dto, result)

        owner.add_pet(pet)
        self.pets.save(pet)
        return Redirect(f"/owners/{owner.id}")
