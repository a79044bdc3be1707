"""Realtime leaderboard channel."""

from __future__ import annotations

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect, status

from ...core import setup_logger
from ...services import LeaderboardBroadcaster, get_broadcaster

logger = setup_logger(__name__)

router = APIRouter(tags=["realtime"])


@router.websocket("/ws")
async def leaderboard_updates(
    websocket: WebSocket,
    broadcaster: LeaderboardBroadcaster = Depends(get_broadcaster),
) -> None:
    """Push ``leaderboardUpdate`` events; inbound messages are ignored."""

    if not websocket.app.state.settings.allows_origin(websocket.headers.get("origin")):
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    try:
        await broadcaster.connect(websocket)
        while True:
            await websocket.receive_text()
    except WebSocketDisconnect as exc:
        logger.debug("Realtime client closed with code %s", exc.code)
    finally:
        broadcaster.disconnect(websocket)


__all__ = ["router"]
