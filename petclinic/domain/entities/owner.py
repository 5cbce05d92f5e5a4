"""
Owner entity, the aggregate root of the clinic's records.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .pet import Pet


@dataclass
class Owner:
    id: Optional[int] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    telephone: Optional[str] = None
    pets: List[Pet] = field(default_factory=list)

    @property
    def is_new(self) -> bool:
        return self.id is None

    def add_pet(self, pet: Pet) -> None:
        """
        Make this owner the pet's owner.

        Only new pets are appended to the pet list; a persisted pet is
        already listed under its owner by the store.
        """
        if pet.is_new:
            self.pets.append(pet)
        pet.owner = self

    def get_pet(self, name: Optional[str], new_only: bool = False) -> Optional[Pet]:
        """
        Find a pet by name, ignoring case.

        Args:
            name: Pet name to look for
            new_only: Only consider pets that have not been saved yet

        Returns:
            Matching pet or None
        """
        if not name:
            return None
        wanted = name.lower()
        for pet in self.pets:
            if new_only and not pet.is_new:
                continue
            if pet.name and pet.name.lower() == wanted:
                return pet
        return None
