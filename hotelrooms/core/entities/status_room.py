from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True)
class StatusRoom:
    id: int | None = None
    description: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None
