"""
Controller outcomes.

Controllers return either a ``ViewResult`` (a logical page plus the data it
shows) or a ``Redirect``. The HTTP layer decides how to deliver them.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from pydantic import BaseModel

from .binding import BindingResult


@dataclass
class ViewResult:
    view: str
    model: Dict[str, Any] = field(default_factory=dict)
    errors: Optional[BindingResult] = None

    @property
    def has_errors(self) -> bool:
        return self.errors is not None and self.errors.has_errors()

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize to a JSON-ready dict.

        DTOs and lists of DTOs in the model are dumped with pydantic.
        """
        return {
            "view": self.view,
            "model": {name: _dump(value) for name, value in self.model.items()},
            "errors": self.errors.to_dict() if self.errors else {},
        }


@dataclass(frozen=True)
class Redirect:
    url: str


def _dump(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, (list, tuple)):
        return [_dump(item) for item in value]
    return value
