"""Database model for leaderboard users."""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow


class User(SQLModel, table=True):
    """Participant identified by a unique display name."""

    id: uuid.UUID = ORMField(default_factory=uuid.uuid4, primary_key=True, nullable=False)
    name: str = ORMField(index=True, unique=True)
    total_points: int = ORMField(default=0, nullable=False)
    created_at: datetime = ORMField(default_factory=utcnow)


__all__ = ["User"]
