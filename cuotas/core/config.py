"""Configuration management for the dues service."""

import os
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


def _to_bool(value: str, *, default: bool = False) -> bool:
    lowered = value.strip().lower()
    if not lowered:
        return default
    return lowered in {"true", "1", "yes", "y", "on"}


def _normalize_database_url(url: str) -> str:
    # Render and Heroku publish the legacy scheme, which SQLAlchemy rejects.
    if url.startswith("postgres://"):
        return "postgresql+psycopg2://" + url[len("postgres://"):]
    return url


class Settings:
    PROJECT_NAME: str = os.getenv("PROJECT_NAME", "API de Cobro de Cuotas")
    DATABASE_URL: str = _normalize_database_url(
        os.getenv("DATABASE_URL", "sqlite:///./cuotas.db")
    )
    DATABASE_SSL: bool = _to_bool(os.getenv("DATABASE_SSL", "false"), default=False)
    DATABASE_POOL_SIZE: int = int(os.getenv("DATABASE_POOL_SIZE", "10"))
    DATABASE_MAX_OVERFLOW: int = int(os.getenv("DATABASE_MAX_OVERFLOW", "20"))

    CORS_ORIGINS: list[str] = [
        origin.strip()
        for origin in os.getenv("CORS_ORIGINS", "*").split(",")
        if origin.strip()
    ]

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    PORT: int = int(os.getenv("PORT", "3000"))


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()


__all__ = ["settings", "Settings", "get_settings"]
