"""
Data Transfer Objects (DTOs) Layer

This package contains the form-facing DTOs that decouple the web layer from
the domain entities, and the mapping functions that convert between them.

Structure:
- forms.py: OwnerDTO, PetDTO, VisitDTO and PetTypeDTO
- mapping.py: explicit entity <-> DTO conversions
"""

from .forms import OwnerDTO, PetDTO, PetTypeDTO, VisitDTO

__all__ = [
    "OwnerDTO",
    "PetDTO",
    "PetTypeDTO",
    "VisitDTO",
]
