"""
Pet clinic record-keeping backend.

Owners, their pets and the pets' visits, served as a FastAPI application
on top of a SQLAlchemy store.
"""

__version__ = "1.0.0"
