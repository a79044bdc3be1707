"""User registration and listing endpoints."""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, BackgroundTasks, Body, Depends, HTTPException
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from ...core import get_session, setup_logger
from ...models import User
from ...services import LeaderboardBroadcaster, get_broadcaster, user_to_dict

logger = setup_logger(__name__)

router = APIRouter(prefix="/api", tags=["users"])


def _normalize_user_name(raw: Any) -> str:
    if not isinstance(raw, str) or not raw.strip():
        raise HTTPException(400, "Name is required")
    return raw.strip()


@router.get("/users")
def list_users(session: Session = Depends(get_session)):
    """Get all users as stored."""

    try:
        users = session.exec(select(User)).all()
    except Exception as exc:
        logger.exception("Error fetching users")
        raise HTTPException(500, "Error fetching users") from exc
    return [user_to_dict(user) for user in users]


@router.post("/users", status_code=201)
def create_user(
    background_tasks: BackgroundTasks,
    body: Optional[Dict[str, Any]] = Body(None),
    session: Session = Depends(get_session),
    broadcaster: LeaderboardBroadcaster = Depends(get_broadcaster),
):
    """Register a user with zero points and announce the new leaderboard."""

    name = _normalize_user_name((body or {}).get("name"))

    user = User(name=name)
    try:
        session.add(user)
        session.commit()
        session.refresh(user)
    except IntegrityError as exc:
        session.rollback()
        raise HTTPException(409, "Error: This user name already exists.") from exc
    except Exception as exc:
        session.rollback()
        logger.exception("Error adding user %r", name)
        raise HTTPException(500, "Error adding user") from exc

    background_tasks.add_task(broadcaster.publish)
    return user_to_dict(user)


__all__ = ["router"]
