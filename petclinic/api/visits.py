from typing import Any, Dict

from fastapi import APIRouter, Depends

from petclinic.controllers import VisitController
from petclinic.dependencies import get_visit_controller
from petclinic.utils.error_handlers import handle_api_errors
from .responses import form_data, render

router = APIRouter()


@router.get("/owners/{owner_id}/pets/{pet_id}/visits/new")
@handle_api_errors("Show new visit form")
def init_new_visit_form(owner_id: int, pet_id: int, controller: VisitController = Depends(get_visit_controller)):
    context = controller.load_pet_with_visit(owner_id, pet_id)
    return render(controller.init_new_visit_form(context))


@router.post("/owners/{owner_id}/pets/{pet_id}/visits/new")
@handle_api_errors("Record visit")
def process_new_visit_form(
    owner_id: int,
    pet_id: int,
    form: Dict[str, Any] = Depends(form_data),
    controller: VisitController = Depends(get_visit_controller),
):
    """
    Record a visit for a pet.

    Form fields: date (YYYY-MM-DD, defaults to today), description
    """
    context = controller.load_pet_with_visit(owner_id, pet_id)
    visit_dto, result = controller.bind_visit(context, form)
    return render(controller.process_new_visit_form(context, owner_id, pet_id, visit_dto, result))
