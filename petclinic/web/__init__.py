"""
Web helpers shared by the controllers: view results, form binding and
form validation.
"""

from .binding import BindingResult, FieldError, bind_form
from .view import Redirect, ViewResult

__all__ = [
    "BindingResult",
    "FieldError",
    "Redirect",
    "ViewResult",
    "bind_form",
]
