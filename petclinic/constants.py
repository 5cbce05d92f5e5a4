"""
Application-wide constants.

This module centralizes view names, form error codes and HTTP status codes
used throughout the application.
"""


class Views:
    """Logical view names returned by the controllers"""

    WELCOME = "welcome"
    OWNER_CREATE_OR_UPDATE_FORM = "owners/createOrUpdateOwnerForm"
    OWNER_FIND_FORM = "owners/findOwners"
    OWNER_LIST = "owners/ownersList"
    OWNER_DETAILS = "owners/ownerDetails"
    PET_CREATE_OR_UPDATE_FORM = "pets/createOrUpdatePetForm"
    VISIT_CREATE_OR_UPDATE_FORM = "pets/createOrUpdateVisitForm"


class ErrorCodes:
    """Field error codes attached to form fields"""

    REQUIRED = "required"
    TYPE_MISMATCH = "type_mismatch"
    DIGITS = "digits"
    DUPLICATE = "duplicate"
    NOT_FOUND = "not_found"


class FormRules:
    """Limits enforced on submitted form values"""

    TELEPHONE_MAX_DIGITS = 10

    # Fields that are never bound from submitted data
    DISALLOWED_FIELDS = frozenset({"id", "owner"})


# Reference data seeded into the pet type table
DEFAULT_PET_TYPES = ("bird", "cat", "dog", "hamster", "lizard", "snake")


class HTTPStatus:
    """HTTP status codes used throughout the application"""

    # Success
    OK = 200

    # Redirection
    FOUND = 302

    # Client Errors
    NOT_FOUND = 404

    # Server Errors
    INTERNAL_SERVER_ERROR = 500
