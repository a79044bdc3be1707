"""Database model for the claim audit trail."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional

from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow


class ClaimHistory(SQLModel, table=True):
    """One row per successful point claim."""

    __tablename__ = "claim_history"

    id: Optional[int] = ORMField(default=None, primary_key=True)
    user_id: uuid.UUID = ORMField(foreign_key="user.id", index=True)
    points_claimed: int
    created_at: datetime = ORMField(default_factory=utcnow)


__all__ = ["ClaimHistory"]
