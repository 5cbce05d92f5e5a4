"""
Application exceptions.

Form input problems are not exceptions: they are collected as field errors
on a ``BindingResult``. The classes here cover lookups that fail, writes the
store refuses, and bad runtime configuration.
"""


class ApplicationError(Exception):
    """Base exception for all application errors"""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(ApplicationError):
    """Raised when a setting read from the environment is unusable"""

    def __init__(self, message: str, setting: str | None = None):
        details = {"setting": setting} if setting else {}
        super().__init__(message, details)


class NotFoundError(ApplicationError):
    """Raised when an entity referenced by id does not exist"""

    def __init__(self, entity: str, entity_id: int, message: str | None = None):
        details = {"entity": entity, "id": entity_id}
        msg = message or f"{entity} '{entity_id}' not found"
        super().__init__(msg, details)


class DatabaseError(ApplicationError):
    """Raised when the store rejects a write"""

    def __init__(self, operation: str, message: str):
        details = {"operation": operation}
        super().__init__(message, details)
