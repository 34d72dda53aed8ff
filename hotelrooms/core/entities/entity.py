from __future__ import annotations

from datetime import datetime
from typing import Protocol


class Entity(Protocol):
    """
    Capability set the generic service relies on: an identifier and the insert timestamp.
    """
    id: int | None
    created_at: datetime | None
