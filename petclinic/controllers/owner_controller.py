"""
Owner controller: registering, finding, editing and showing owners.
"""

import logging
from typing import Union

from petclinic.constants import ErrorCodes, Views
from petclinic.dtos import OwnerDTO
from petclinic.dtos.mapping import owner_to_dto, owner_to_entity, owners_to_dto
from petclinic.repositories import OwnerRepository, VisitRepository
from petclinic.web import BindingResult, Redirect, ViewResult
from petclinic.web.validation import validate_owner

logger = logging.getLogger(__name__)


class OwnerController:

    def __init__(self, owners: OwnerRepository, visits: VisitRepository):
        self.owners = owners
        self.visits = visits

    def init_creation_form(self) -> ViewResult:
        return ViewResult(Views.OWNER_CREATE_OR_UPDATE_FORM, {"owner": OwnerDTO()})

    def process_creation_form(self, owner_dto: OwnerDTO, result: BindingResult) -> Union[ViewResult, Redirect]:
        """
        Register a new owner.

        On validation errors the submitted DTO is shown again as it was
        submitted, so no input is lost.
        """
        validate_owner(owner_dto, result)
        owner = owner_to_entity(owner_dto)
        if result.has_errors():
            return ViewResult(Views.OWNER_CREATE_OR_UPDATE_FORM, {"owner": owner_dto}, result)

        self.owners.save(owner)
        return Redirect(f"/owners/{owner.id}")

    def init_find_form(self) -> ViewResult:
        return ViewResult(Views.OWNER_FIND_FORM, {"owner": OwnerDTO()})

    def process_find_form(self, owner_dto: OwnerDTO, result: BindingResult) -> Union[ViewResult, Redirect]:
        """
        Search owners by last name.

        No last name lists every owner. A single match goes straight to that
        owner's page.
        """
        owner = owner_to_entity(owner_dto)
        last_name = (owner.last_name or "").strip()
        logger.info(f"Searching for owners with last name '{last_name}'")

        results = owners_to_dto(self.owners.find_by_last_name(last_name))
        if not results:
            result.reject_value("last_name", ErrorCodes.NOT_FOUND, "not found")
            return ViewResult(Views.OWNER_FIND_FORM, {"owner": owner_dto}, result)
        if len(results) == 1:
            return Redirect(f"/owners/{results[0].id}")
        return ViewResult(Views.OWNER_LIST, {"selections": results})

    def init_update_owner_form(self, owner_id: int) -> ViewResult:
        owner_dto = owner_to_dto(self.owners.find_by_id(owner_id))
        return ViewResult(Views.OWNER_CREATE_OR_UPDATE_FORM, {"owner": owner_dto})

    def process_update_owner_form(
        self, owner_dto: OwnerDTO, result: BindingResult, owner_id: int
    ) -> Union[ViewResult, Redirect]:
        """
        Save an edited owner. The owner updated is always the one named in
        the path, whatever ID the form carried.
        """
        validate_owner(owner_dto, result)
        owner = owner_to_entity(owner_dto)
        if result.has_errors():
            return ViewResult(Views.OWNER_CREATE_OR_UPDATE_FORM, {"owner": owner_dto}, result)

        owner.id = owner_id
        self.owners.save(owner)
        return Redirect(f"/owners/{owner_id}")

    def show_owner(self, owner_id: int) -> ViewResult:
        """
        Owner details page. Each pet's visit history is fetched explicitly,
        since pets loaded with their owner come without visits.
        """
        owner = self.owners.find_by_id(owner_id)
        for pet in owner.pets:
            pet.set_visits(self.visits.find_by_pet_id(pet.id))
        return ViewResult(Views.OWNER_DETAILS, {"owner": owner_to_dto(owner)})
