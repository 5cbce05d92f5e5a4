"""
Form DTOs

DTOs bound from submitted forms and handed to views. Every field is optional
so that a half-filled form can be kept and shown again with its errors;
required-ness is enforced by the validators in ``petclinic.web.validation``.
"""

import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class PetTypeDTO(BaseModel):
    """Reference data entry for the pet type drop-down."""

    id: Optional[int] = Field(None, description="Pet type ID")
    name: Optional[str] = Field(None, description="Pet type name, e.g. 'cat'")

    class Config:
        """Pydantic configuration."""
        from_attributes = True


class VisitDTO(BaseModel):
    """
    Form DTO for a visit.

    Carries no reference to its pet; the pet is always taken from the
    request path.
    """

    id: Optional[int] = Field(None, description="Visit ID, assigned by the store")
    date: Optional[datetime.date] = Field(None, description="Date of the visit")
    description: Optional[str] = Field(None, description="What happened during the visit")

    class Config:
        """Pydantic configuration."""
        from_attributes = True


class PetDTO(BaseModel):
    """
    Form DTO for a pet.

    ``owner`` is only filled when the pet was converted on its own; a pet
    converted as part of its owner leaves it empty so the graph stays finite.
    """

    id: Optional[int] = Field(None, description="Pet ID, assigned by the store")
    name: Optional[str] = Field(None, description="Pet name")
    birth_date: Optional[datetime.date] = Field(None, description="Date of birth")
    type: Optional[PetTypeDTO] = Field(None, description="Kind of animal")
    owner: Optional["OwnerDTO"] = Field(None, description="Owning owner, when known", repr=False)
    visits: List[VisitDTO] = Field(default_factory=list, description="Visit history in date order")

    @property
    def is_new(self) -> bool:
        return self.id is None

    class Config:
        """Pydantic configuration."""
        from_attributes = True


class OwnerDTO(BaseModel):
    """Form DTO for an owner and the pets listed under them."""

    id: Optional[int] = Field(None, description="Owner ID, assigned by the store")
    first_name: Optional[str] = Field(None, description="First name")
    last_name: Optional[str] = Field(None, description="Last name")
    address: Optional[str] = Field(None, description="Street address")
    city: Optional[str] = Field(None, description="City")
    telephone: Optional[str] = Field(None, description="Telephone number, digits only")
    pets: List[PetDTO] = Field(default_factory=list, description="Pets in name order")

    @property
    def is_new(self) -> bool:
        return self.id is None

    class Config:
        """Pydantic configuration."""
        from_attributes = True


PetDTO.model_rebuild()
