"""
Form validation rules for owners, pets and visits.

Each validator inspects a bound DTO and records field errors on the given
BindingResult. Fields that already failed binding are not reported twice.
"""

from typing import Optional

from petclinic.constants import ErrorCodes, FormRules
from petclinic.dtos import OwnerDTO, PetDTO, VisitDTO
from .binding import BindingResult

REQUIRED_MESSAGE = "is required"


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


def _require(result: BindingResult, field: str, value) -> bool:
    if result.has_field_errors(field):
        return False
    if value is None or (isinstance(value, str) and _is_blank(value)):
        result.reject_value(field, ErrorCodes.REQUIRED, REQUIRED_MESSAGE)
        return False
    return True


def validate_owner(owner: OwnerDTO, result: BindingResult) -> None:
    """
    Owner rules: names, address and city are required; the telephone is
    required and must be a number of at most ten digits.
    """
    for field in ("first_name", "last_name", "address", "city"):
        _require(result, field, getattr(owner, field))

    if _require(result, "telephone", owner.telephone):
        telephone = owner.telephone.strip()
        if not telephone.isdigit() or len(telephone) > FormRules.TELEPHONE_MAX_DIGITS:
            result.reject_value(
                "telephone",
                ErrorCodes.DIGITS,
                f"numeric value out of bounds (<{FormRules.TELEPHONE_MAX_DIGITS} digits>.<0 digits> expected)",
            )


def validate_pet(pet: PetDTO, result: BindingResult) -> None:
    """Pet rules: name and birth date are required; a new pet needs a type."""
    _require(result, "name", pet.name)
    if pet.is_new:
        _require(result, "type", pet.type)
    _require(result, "birth_date", pet.birth_date)


def validate_visit(visit: VisitDTO, result: BindingResult) -> None:
    """Visit rules: date and description are required."""
    _require(result, "date", visit.date)
    _require(result, "description", visit.description)
