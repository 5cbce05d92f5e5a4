"""
Delivery of controller outcomes over HTTP.
"""

from typing import Any, Dict, Union

from fastapi import Request
from fastapi.responses import JSONResponse, RedirectResponse

from petclinic.constants import HTTPStatus
from petclinic.web import Redirect, ViewResult


async def form_data(request: Request) -> Dict[str, Any]:
    """Dependency returning the submitted form fields of a POST request."""
    form = await request.form()
    return dict(form)


def render(outcome: Union[ViewResult, Redirect]):
    """
    Turn a controller outcome into a response.

    A ViewResult becomes a JSON document naming the view with its model and
    field errors; a Redirect becomes a 302 response.
    """
    if isinstance(outcome, Redirect):
        return RedirectResponse(outcome.url, status_code=HTTPStatus.FOUND)
    return JSONResponse(outcome.to_dict(), status_code=HTTPStatus.OK)
