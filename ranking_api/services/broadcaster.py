"""Realtime leaderboard fan-out over WebSockets."""

from __future__ import annotations

from typing import Any, Dict, List, Set

from fastapi import WebSocket
from sqlalchemy.engine import Engine
from sqlmodel import Session
from starlette.concurrency import run_in_threadpool
from starlette.requests import HTTPConnection

from ..core.logging import setup_logger
from .leaderboard import get_leaderboard

logger = setup_logger(__name__)

LEADERBOARD_EVENT = "leaderboardUpdate"


class LeaderboardBroadcaster:
    """Tracks connected clients and pushes the ranked leaderboard to them.

    Delivery is fire-and-forget: a client that cannot be written to is
    dropped, and a client that was not connected at publish time simply
    waits for the next update.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine
        self._clients: Set[WebSocket] = set()

    @property
    def client_count(self) -> int:
        return len(self._clients)

    def snapshot(self) -> List[Dict[str, Any]]:
        with Session(self._engine) as session:
            return get_leaderboard(session)

    @staticmethod
    def message(leaderboard: List[Dict[str, Any]]) -> Dict[str, Any]:
        return {"event": LEADERBOARD_EVENT, "data": leaderboard}

    async def connect(self, websocket: WebSocket) -> None:
        """Accept a client and send it the current leaderboard only."""

        await websocket.accept()
        self._clients.add(websocket)
        logger.info("A user connected (%d connected)", len(self._clients))
        try:
            leaderboard = await run_in_threadpool(self.snapshot)
            await websocket.send_json(self.message(leaderboard))
        except Exception:
            self._clients.discard(websocket)
            raise

    def disconnect(self, websocket: WebSocket) -> None:
        self._clients.discard(websocket)
        logger.info("User disconnected (%d connected)", len(self._clients))

    async def publish(self) -> None:
        """Recompute the leaderboard and send it to every connected client."""

        if not self._clients:
            return

        try:
            payload = self.message(await run_in_threadpool(self.snapshot))
        except Exception:
            logger.exception("Could not compute leaderboard for broadcast")
            return

        for websocket in list(self._clients):
            try:
                await websocket.send_json(payload)
            except Exception as exc:
                logger.warning("Dropping realtime client after failed send: %s", exc)
                self._clients.discard(websocket)


def get_broadcaster(conn: HTTPConnection) -> LeaderboardBroadcaster:
    """FastAPI dependency returning the application's broadcaster."""

    return conn.app.state.broadcaster


__all__ = ["LEADERBOARD_EVENT", "LeaderboardBroadcaster", "get_broadcaster"]
