"""Application settings and environment helpers."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from dotenv import load_dotenv

load_dotenv(override=False)


LOCAL_DEV_ORIGIN = "http://localhost:3000"
DEFAULT_PORT = 5001


def _require_env(name: str) -> str:
    """Return a required environment variable or raise an error."""

    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing required environment variable: {name}")
    return value


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be an integer") from exc


def _split_csv(raw: str | None) -> List[str]:
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


def _unique(values: Iterable[str]) -> List[str]:
    seen = set()
    ordered: List[str] = []
    for value in values:
        if value not in seen:
            seen.add(value)
            ordered.append(value)
    return ordered


@dataclass(frozen=True)
class Settings:
    """Runtime configuration for one application instance."""

    database_url: str
    port: int = DEFAULT_PORT
    host: str = "0.0.0.0"
    frontend_origins: List[str] = field(default_factory=list)
    log_level: str = "INFO"

    @property
    def allowed_origins(self) -> List[str]:
        return _unique([LOCAL_DEV_ORIGIN, *self.frontend_origins])

    def allows_origin(self, origin: Optional[str]) -> bool:
        """Requests without an Origin header (curl, server-to-server) always pass."""

        return not origin or origin in self.allowed_origins


def load_settings() -> Settings:
    """Build settings from the process environment.

    ``DATABASE_URL`` is mandatory; the service cannot start without it.
    """

    return Settings(
        database_url=_require_env("DATABASE_URL"),
        port=_env_int("PORT", DEFAULT_PORT),
        host=os.getenv("HOST", "0.0.0.0"),
        # FRONTEND_URL can contain a comma-separated list for multi-domain deploys.
        frontend_origins=_split_csv(os.getenv("FRONTEND_URL")),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )


__all__ = ["DEFAULT_PORT", "LOCAL_DEV_ORIGIN", "Settings", "load_settings"]
