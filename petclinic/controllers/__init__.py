"""
Controllers for owners, pets and visits.

Controllers receive bound DTOs, talk to the repositories and decide which
page to show next. They know nothing about HTTP.
"""

from .owner_controller import OwnerController
from .pet_controller import PetController, PetFormContext
from .visit_controller import VisitController, VisitFormContext

__all__ = [
    "OwnerController",
    "PetController",
    "PetFormContext",
    "VisitController",
    "VisitFormContext",
]
