"""Database engine construction and session helpers."""

from __future__ import annotations

from typing import Iterator

from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine
from starlette.requests import HTTPConnection


def create_db_engine(database_url: str) -> Engine:
    """Create the engine shared by every request of one application."""

    if database_url.startswith("sqlite"):
        connect_args = {"check_same_thread": False}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            # One shared connection, otherwise each checkout sees a new empty database.
            return create_engine(
                database_url, connect_args=connect_args, poolclass=StaticPool
            )
        return create_engine(database_url, connect_args=connect_args)
    return create_engine(database_url, pool_pre_ping=True)


def get_session(conn: HTTPConnection) -> Iterator[Session]:
    """FastAPI dependency that yields a database session."""

    with Session(conn.app.state.engine) as session:
        yield session


__all__ = ["create_db_engine", "get_session"]
