"""
Configuration helpers for the Todo API.

Routers/services read settings through ``get_settings()`` instead of fetching
os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os

DEV_CORS_ORIGINS = (
    "http://localhost:8000",
    "http://127.0.0.1:8000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
)


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    log_level: str
    cors_origins: tuple[str, ...]
    seed_todos: bool

    @property
    def allowed_origins(self) -> list[str]:
        origins = set(self.cors_origins)
        if self.app_env != "prod":
            origins.update(DEV_CORS_ORIGINS)
        return sorted(origin for origin in origins if origin)


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    def _csv(value: str | None) -> tuple[str, ...]:
        if not value:
            return ()
        return tuple(item.strip().rstrip("/") for item in value.split(",") if item.strip())

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        cors_origins=_csv(os.getenv("CORS_ORIGINS")),
        seed_todos=_bool(os.getenv("SEED_TODOS"), False),
    )
