from typing import Any, Dict

from fastapi import APIRouter, Depends

from petclinic.controllers import PetController
from petclinic.dependencies import get_pet_controller
from petclinic.utils.error_handlers import handle_api_errors
from .responses import form_data, render

router = APIRouter(prefix="/owners/{owner_id}")


@router.get("/pets/new")
@handle_api_errors("Show new pet form")
def init_creation_form(owner_id: int, controller: PetController = Depends(get_pet_controller)):
    context = controller.load_context(owner_id)
    return render(controller.init_creation_form(context))


@router.post("/pets/new")
@handle_api_errors("Add pet")
def process_creation_form(
    owner_id: int,
    form: Dict[str, Any] = Depends(form_data),
    controller: PetController = Depends(get_pet_controller),
):
    """
    Add a pet to an owner.

    Form fields: name, birth_date (YYYY-MM-DD), type (pet type name)
    """
    context = controller.load_context(owner_id)
    pet_dto, result = controller.bind_pet(context, form)
    return render(controller.process_creation_form(context, pet_dto, result))


@router.get("/pets/{pet_id}/edit")
@handle_api_errors("Show edit pet form")
def init_update_form(owner_id: int, pet_id: int, controller: PetController = Depends(get_pet_controller)):
    context = controller.load_context(owner_id)
    return render(controller.init_update_form(context, pet_id))


@router.post("/pets/{pet_id}/edit")
@handle_api_errors("Update pet")
def process_update_form(
    owner_id: int,
    pet_id: int,
    form: Dict[str, Any] = Depends(form_data),
    controller: PetController = Depends(get_pet_controller),
):
    context = controller.load_context(owner_id)
    pet_dto, result = controller.bind_pet(context, form)
    return render(controller.process_update_form(context, pet_id, pet_dto, result))
