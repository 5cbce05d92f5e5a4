"""
Form binding.

Builds DTOs from submitted form fields and collects per-field errors, so a
form with bad input can be shown again with the user's values and the
reason each field was rejected.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel, ValidationError

from petclinic.constants import ErrorCodes, FormRules

logger = logging.getLogger(__name__)

D = TypeVar('D', bound=BaseModel)


@dataclass(frozen=True)
class FieldError:
    field: str
    code: str
    message: str


class BindingResult:
    """Errors collected while binding and validating one form object."""

    def __init__(self, object_name: str):
        self.object_name = object_name
        self._errors: List[FieldError] = []

    def reject_value(self, field: str, code: str, message: str) -> None:
        logger.debug(f"Rejected {self.object_name}.{field}: {code} ({message})")
        self._errors.append(FieldError(field, code, message))

    def has_errors(self) -> bool:
        return bool(self._errors)

    def has_field_errors(self, field: str) -> bool:
        return any(error.field == field for error in self._errors)

    def field_errors(self, field: Optional[str] = None) -> List[FieldError]:
        if field is None:
            return list(self._errors)
        return [error for error in self._errors if error.field == field]

    def to_dict(self) -> Dict[str, List[Dict[str, str]]]:
        errors: Dict[str, List[Dict[str, str]]] = {}
        for error in self._errors:
            errors.setdefault(error.field, []).append({"code": error.code, "message": error.message})
        return errors

    def __repr__(self) -> str:
        return f"BindingResult({self.object_name!r}, errors={self._errors!r})"


def bind_form(
    dto_class: Type[D],
    data: Mapping[str, Any],
    object_name: str,
    into: Optional[D] = None,
    converters: Optional[Dict[str, Callable[[str], Any]]] = None,
) -> Tuple[D, BindingResult]:
    """
    Bind submitted form fields onto a DTO.

    Fields listed in ``FormRules.DISALLOWED_FIELDS`` (``id`` and ``owner``)
    are never taken from the submission, and fields the DTO does not declare
    are ignored. Blank values bind as None. A value that cannot be converted
    to the field's type is rejected with ``type_mismatch`` and the field keeps
    its previous value.

    Args:
        dto_class: DTO class to build
        data: Submitted fields (form body or query parameters)
        object_name: Name of the form object, used in error reporting
        into: Existing DTO whose values are the starting point
        converters: Per-field functions turning submitted text into a value;
            raising ValueError rejects the field

    Returns:
        Tuple of (bound DTO, BindingResult holding any binding errors)
    """
    result = BindingResult(object_name)
    converters = converters or {}

    current: Dict[str, Any] = {}
    if into is not None:
        current = {name: getattr(into, name) for name in dto_class.model_fields}

    submitted: Dict[str, Any] = {}
    for name, raw in data.items():
        if name in FormRules.DISALLOWED_FIELDS:
            logger.warning(f"Ignoring disallowed field '{name}' submitted for {object_name}")
            continue
        if name not in dto_class.model_fields:
            continue
        value = raw.strip() if isinstance(raw, str) else raw
        if value == "":
            submitted[name] = None
            continue
        if name in converters:
            try:
                value = converters[name](value)
            except ValueError as e:
                result.reject_value(name, ErrorCodes.TYPE_MISMATCH, str(e))
                continue
        submitted[name] = value

    try:
        dto = dto_class.model_validate({**current, **submitted})
    except ValidationError as e:
        rejected = set()
        for error in e.errors():
            field = str(error["loc"][0]) if error["loc"] else object_name
            if field not in rejected:
                rejected.add(field)
                result.reject_value(field, ErrorCodes.TYPE_MISMATCH, error["msg"])
        accepted = {name: value for name, value in submitted.items() if name not in rejected}
        dto = dto_class.model_validate({**current, **accepted})

    return dto, result
