"""Leaderboard projection and user serialisation."""

from __future__ import annotations

from typing import Any, Dict, List

from sqlmodel import Session, select

from ..core.time import isoformat_utc
from ..models import User


def user_to_dict(user: User) -> Dict[str, Any]:
    """Serialise a user model to an API-friendly dict."""

    return {
        "id": str(user.id),
        "name": user.name,
        "totalPoints": user.total_points,
        "createdAt": isoformat_utc(user.created_at),
    }


def get_leaderboard(session: Session) -> List[Dict[str, Any]]:
    """Return every user ranked by descending points.

    Ranks are ``1..N`` with no gaps; equal scores keep registration order,
    then name order, so the same data always produces the same ranking.
    """

    users = session.exec(
        select(User).order_by(
            User.total_points.desc(), User.created_at.asc(), User.name.asc()
        )
    ).all()

    return [
        {
            "rank": index + 1,
            "name": user.name,
            "totalPoints": user.total_points,
            "id": str(user.id),
        }
        for index, user in enumerate(users)
    ]


__all__ = ["get_leaderboard", "user_to_dict"]
