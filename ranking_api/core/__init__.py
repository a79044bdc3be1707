"""Core configuration and infrastructure helpers."""

from .config import DEFAULT_PORT, LOCAL_DEV_ORIGIN, Settings, load_settings
from .database import create_db_engine, get_session
from .logging import set_log_level, setup_logger
from .time import isoformat_utc, utcnow

__all__ = [
    "DEFAULT_PORT",
    "LOCAL_DEV_ORIGIN",
    "Settings",
    "create_db_engine",
    "get_session",
    "isoformat_utc",
    "load_settings",
    "set_log_level",
    "setup_logger",
    "utcnow",
]
