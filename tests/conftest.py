"""Shared fixtures: an in-memory database and a running application."""

from __future__ import annotations

import os

# ranking_api.app builds a module-level app on import, which needs a database URL.
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlmodel import Session, SQLModel  # noqa: E402

from ranking_api.app import create_app  # noqa: E402
from ranking_api.core import Settings, create_db_engine  # noqa: E402
from ranking_api.models import User  # noqa: E402

FRONTEND_ORIGIN = "https://ranking.example.com"


@pytest.fixture
def settings() -> Settings:
    return Settings(database_url="sqlite://", frontend_origins=[FRONTEND_ORIGIN])


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def engine():
    engine = create_db_engine("sqlite://")
    SQLModel.metadata.create_all(engine)
    return engine


@pytest.fixture
def make_user(engine):
    def _make_user(name: str, total_points: int = 0) -> User:
        with Session(engine) as session:
            user = User(name=name, total_points=total_points)
            session.add(user)
            session.commit()
            session.refresh(user)
            return user

    return _make_user


def user_by_name(client: TestClient, name: str) -> dict:
    users = client.get("/api/users").json()
    return next(user for user in users if user["name"] == name)
