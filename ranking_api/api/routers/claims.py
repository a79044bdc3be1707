"""Point claim endpoint."""

from __future__ import annotations

import random
import uuid
from typing import Any, Dict, Optional

from fastapi import APIRouter, BackgroundTasks, Body, Depends, HTTPException
from sqlmodel import Session

from ...core import get_session, setup_logger
from ...models import ClaimHistory, User
from ...services import LeaderboardBroadcaster, get_broadcaster, user_to_dict

logger = setup_logger(__name__)

router = APIRouter(prefix="/api", tags=["claims"])

MIN_POINTS = 1
MAX_POINTS = 10


def draw_points() -> int:
    """Uniform award between MIN_POINTS and MAX_POINTS inclusive."""

    return random.randint(MIN_POINTS, MAX_POINTS)


def _parse_user_id(raw: Any) -> Optional[uuid.UUID]:
    try:
        return uuid.UUID(str(raw))
    except (ValueError, TypeError):
        return None


@router.post("/claim")
def claim_points(
    background_tasks: BackgroundTasks,
    body: Optional[Dict[str, Any]] = Body(None),
    session: Session = Depends(get_session),
    broadcaster: LeaderboardBroadcaster = Depends(get_broadcaster),
) -> Dict[str, Any]:
    """Award a random number of points to a user and record the claim."""

    raw_user_id = (body or {}).get("userId")
    if not raw_user_id:
        raise HTTPException(400, "User ID is required")

    user_id = _parse_user_id(raw_user_id)
    if user_id is None:
        raise HTTPException(404, "User not found")

    try:
        user = session.get(User, user_id)
        if not user:
            raise HTTPException(404, "User not found")

        points = draw_points()

        # Evaluated by the database, so concurrent claims never overwrite each other.
        user.total_points = User.total_points + points
        session.add(user)
        session.commit()
        session.refresh(user)
        awarded_user = user_to_dict(user)

        # Separate commit: a failure here leaves the points already awarded.
        session.add(ClaimHistory(user_id=user.id, points_claimed=points))
        session.commit()
    except HTTPException:
        raise
    except Exception as exc:
        session.rollback()
        logger.exception("Claim error for user %s", user_id)
        raise HTTPException(500, "Error claiming points") from exc

    background_tasks.add_task(broadcaster.publish)

    return {
        "message": f"Awarded {points} points to {awarded_user['name']}",
        "pointsAwarded": points,
        "user": awarded_user,
    }


__all__ = ["draw_points", "router"]
