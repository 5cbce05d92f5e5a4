"""
Visit entity.
"""

import datetime
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Visit:
    id: Optional[int] = None
    date: Optional[datetime.date] = field(default_factory=datetime.date.today)
    description: Optional[str] = None
    pet_id: Optional[int] = None

    @property
    def is_new(self) -> bool:
        return self.id is None
