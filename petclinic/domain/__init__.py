"""
Domain Layer

This package contains the clinic's business entities, separated from
persistence concerns and infrastructure.

Structure:
- entities/: Owner, Pet, Visit and PetType with identity and lifecycle
"""
