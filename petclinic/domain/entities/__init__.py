"""
Domain entities.

Plain objects shaped like the clinic's tables. Repositories hand these out
detached from any database session, so controllers can reshape them freely
without side effects on the store.
"""

from .owner import Owner
from .pet import Pet, PetType
from .visit import Visit

__all__ = [
    "Owner",
    "Pet",
    "PetType",
    "Visit",
]
