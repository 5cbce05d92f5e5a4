"""
Visit controller: recording a new visit for a pet.
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Tuple, Union

from petclinic.constants import Views
from petclinic.domain.entities import Visit
from petclinic.dtos import PetDTO, VisitDTO
from petclinic.dtos.mapping import pet_to_dto, visit_to_dto, visit_to_entity
from petclinic.exceptions import NotFoundError
from petclinic.repositories import OwnerRepository, PetRepository, VisitRepository
from petclinic.web import BindingResult, Redirect, ViewResult, bind_form
from petclinic.web.validation import validate_visit

logger = logging.getLogger(__name__)


@dataclass
class VisitFormContext:
    """
    Model attributes prepared before any visit handler runs: the pet shown
    for context and the new visit the form binds to.
    """

    pet: PetDTO
    visit: VisitDTO


class VisitController:

    def __init__(self, visits: VisitRepository, pets: PetRepository, owners: OwnerRepository):
        self.visits = visits
        self.pets = pets
        self.owners = owners

    def load_pet_with_visit(self, owner_id: int, pet_id: int) -> VisitFormContext:
        """
        Runs before both visit handlers.

        Both path ids must resolve, and the pet must belong to the owner;
        otherwise NotFoundError is raised.

        The pet's visit history is always fetched fresh from the visit
        repository. The new visit is added to the pet after the pet has been
        converted, so the pet shows only its past visits.
        """
        owner = self.owners.find_by_id(owner_id)
        pet = self.pets.find_by_id(pet_id)
        if pet.owner is None or pet.owner.id != owner.id:
            logger.warning(f"Pet {pet_id} does not belong to owner {owner_id}")
            raise NotFoundError("Pet", pet_id, f"Pet '{pet_id}' not found for owner '{owner_id}'")
        pet.set_visits(self.visits.find_by_pet_id(pet_id))
        pet_dto = pet_to_dto(pet)

        visit = Visit()
        pet.add_visit(visit)
        return VisitFormContext(pet=pet_dto, visit=visit_to_dto(visit))

    def bind_visit(self, context: VisitFormContext, data: Mapping[str, Any]) -> Tuple[VisitDTO, BindingResult]:
        return bind_form(VisitDTO, data, "visit", into=context.visit)

    def init_new_visit_form(self, context: VisitFormContext) -> ViewResult:
        return ViewResult(Views.VISIT_CREATE_OR_UPDATE_FORM, {"pet": context.pet, "visit": context.visit})

    def process_new_visit_form(
        self, context: VisitFormContext, owner_id: int, pet_id: int, visit_dto: VisitDTO, result: BindingResult
    ) -> Union[ViewResult, Redirect]:
        validate_visit(visit_dto, result)
        if result.has_errors():
            return ViewResult(Views.VISIT_CREATE_OR_UPDATE_FORM, {"pet": context.pet, "visit": visit_dto}, result)

        visit = visit_to_entity(visit_dto)
        visit.pet_id = pet_id
        self.visits.save(visit)
        logger.info(f"Recorded visit {visit.id} for pet {pet_id} of owner {owner_id}")
        return Redirect(f"/owners/{owner_id}")
