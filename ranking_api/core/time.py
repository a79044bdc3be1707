"""UTC timestamps for models and API payloads."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional


def utcnow() -> datetime:
    """Return the current UTC datetime."""
    return datetime.now(timezone.utc)


def isoformat_utc(value: Optional[datetime]) -> Optional[str]:
    """Render ``value`` as ISO 8601 with a ``Z`` suffix.

    SQLite hands back naive datetimes; those are already UTC.
    """

    if value is None:
        return None
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.isoformat() + "Z"


__all__ = ["isoformat_utc", "utcnow"]
