"""Initial data for an empty user table."""

from __future__ import annotations

from sqlalchemy.engine import Engine
from sqlmodel import Session, func, select

from ..core.logging import setup_logger
from ..models import User

logger = setup_logger(__name__)

SEED_USER_NAMES = (
    "Rahul",
    "Kamal",
    "Sanak",
    "Priya",
    "Amit",
    "Sunita",
    "Vikram",
    "Anjali",
    "Deepak",
    "Meera",
)


def seed_users(engine: Engine) -> int:
    """Insert the seed users when no user exists yet.

    Returns the number of users inserted. Errors are logged, never raised:
    the service keeps starting without seed data.
    """

    try:
        with Session(engine) as session:
            user_count = session.exec(select(func.count()).select_from(User)).one()
            if user_count:
                return 0

            logger.info("No users found, seeding database...")
            session.add_all([User(name=name) for name in SEED_USER_NAMES])
            session.commit()
    except Exception:
        logger.exception("Error seeding database")
        return 0

    logger.info("Database seeded with %d users.", len(SEED_USER_NAMES))
    return len(SEED_USER_NAMES)


__all__ = ["SEED_USER_NAMES", "seed_users"]
