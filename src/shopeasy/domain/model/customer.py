"""Customer entity. Read-only from the ordering flow's point of view."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass(frozen=True)
class Customer:

    id: int
    full_name: str
    email: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
