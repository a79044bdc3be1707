"""System-level API endpoints."""

from __future__ import annotations

from typing import Dict

from fastapi import APIRouter

router = APIRouter(tags=["system"])


@router.get("/")
def root() -> Dict[str, str]:
    """Confirm the server is live."""

    return {"message": "Welcome to the Random Ranking API!"}


@router.get("/health")
def health() -> Dict[str, str]:
    """Uptime check for external monitors."""

    return {"status": "UP"}


__all__ = ["router"]
