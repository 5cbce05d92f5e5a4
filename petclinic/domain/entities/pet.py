"""
Pet and PetType entities.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional, TYPE_CHECKING

from .visit import Visit

if TYPE_CHECKING:
    from .owner import Owner


@dataclass
class PetType:
    """Reference data: the kind of animal (cat, dog, ...)."""

    id: Optional[int] = None
    name: Optional[str] = None


@dataclass
class Pet:
    """
    A pet and its visit history.

    ``owner`` is a navigational back-reference only; the owner's pet list is
    what records ownership. It is left out of equality and repr so that
    comparing or printing a pet never walks back into its owner.
    """

    id: Optional[int] = None
    name: Optional[str] = None
    birth_date: Optional[date] = None
    type: Optional[PetType] = None
    owner: Optional["Owner"] = field(default=None, compare=False, repr=False)
    visits: List[Visit] = field(default_factory=list)

    @property
    def is_new(self) -> bool:
        return self.id is None

    def add_visit(self, visit: Visit) -> None:
        visit.pet_id = self.id
        self.visits.append(visit)

    def set_visits(self, visits: List[Visit]) -> None:
        """Replace the visit history with an explicitly fetched one."""
        self.visits = list(visits)
