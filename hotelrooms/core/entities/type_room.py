from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True)
class TypeRoom:
    id: int | None = None
    name: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None
