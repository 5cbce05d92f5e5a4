from typing import Any, Dict

from fastapi import APIRouter, Depends, Request

from petclinic.controllers import OwnerController
from petclinic.dependencies import get_owner_controller
from petclinic.dtos import OwnerDTO
from petclinic.utils.error_handlers import handle_api_errors
from petclinic.web import bind_form
from .responses import form_data, render

router = APIRouter()


@router.get("/owners/new")
@handle_api_errors("Show new owner form")
def init_creation_form(controller: OwnerController = Depends(get_owner_controller)):
    return render(controller.init_creation_form())


@router.post("/owners/new")
@handle_api_errors("Create owner")
def process_creation_form(
    form: Dict[str, Any] = Depends(form_data),
    controller: OwnerController = Depends(get_owner_controller),
):
    owner_dto, result = bind_form(OwnerDTO, form, "owner")
    return render(controller.process_creation_form(owner_dto, result))


@router.get("/owners/find")
@handle_api_errors("Show find owners form")
def init_find_form(controller: OwnerController = Depends(get_owner_controller)):
    return render(controller.init_find_form())


@router.get("/owners")
@handle_api_errors("Find owners")
def process_find_form(request: Request, controller: OwnerController = Depends(get_owner_controller)):
    """
    Search owners by last name.

    Query parameters:
    - last_name: Last name prefix; omitted or blank lists every owner
    """
    owner_dto, result = bind_form(OwnerDTO, dict(request.query_params), "owner")
    return render(controller.process_find_form(owner_dto, result))


@router.get("/owners/{owner_id}/edit")
@handle_api_errors("Show edit owner form")
def init_update_owner_form(owner_id: int, controller: OwnerController = Depends(get_owner_controller)):
    return render(controller.init_update_owner_form(owner_id))


@router.post("/owners/{owner_id}/edit")
@handle_api_errors("Update owner")
def process_update_owner_form(
    owner_id: int,
    form: Dict[str, Any] = Depends(form_data),
    controller: OwnerController = Depends(get_owner_controller),
):
    owner_dto, result = bind_form(OwnerDTO, form, "owner")
    return render(controller.process_update_owner_form(owner_dto, result, owner_id))


@router.get("/owners/{owner_id}")
@handle_api_errors("Show owner")
def show_owner(owner_id: int, controller: OwnerController = Depends(get_owner_controller)):
    return render(controller.show_owner(owner_id))
