"""Database configuration for the dues service."""

import logging

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker

from cuotas.core.config import settings

logger = logging.getLogger(__name__)


SUPPORTED_BACKENDS = {"postgresql", "sqlite"}


def ensure_supported_backend(url: str) -> str:
    """Return the backend name of ``url``, rejecting anything but PostgreSQL or SQLite.

    Batch payments rely on ``INSERT ... ON CONFLICT DO NOTHING``, which only
    these two dialects offer through SQLAlchemy.
    """

    backend = make_url(url).get_backend_name()
    if backend not in SUPPORTED_BACKENDS:
        raise RuntimeError(
            f"Unsupported database backend '{backend}'; use PostgreSQL or SQLite"
        )
    return backend


def _build_engine() -> Engine:
    url = settings.DATABASE_URL
    if ensure_supported_backend(url) == "sqlite":
        return create_engine(url, connect_args={"check_same_thread": False})

    connect_args = {"sslmode": "require"} if settings.DATABASE_SSL else {}
    return create_engine(
        url,
        pool_size=settings.DATABASE_POOL_SIZE,
        max_overflow=settings.DATABASE_MAX_OVERFLOW,
        pool_timeout=30,
        pool_recycle=1800,
        pool_pre_ping=True,
        connect_args=connect_args,
    )


engine = _build_engine()

if engine.dialect.name == "sqlite":

    @event.listens_for(engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        # ON DELETE CASCADE is ignored by SQLite unless this is on.
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def verify_database_connection() -> None:
    """Ensure the service can connect to the configured database."""

    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.exception("Database connection validation failed")
        raise RuntimeError("Failed to connect to the dues database") from exc


def init_db() -> None:
    """Create the ``socios`` and ``pagos`` tables when they are missing.

    Safe to run on every start; existing tables are left untouched.
    """

    # Registers the mapped tables on Base.metadata.
    from cuotas import models  # noqa: F401

    verify_database_connection()
    Base.metadata.create_all(bind=engine)
    logger.info("Database schema ready")


__all__ = [
    "Base",
    "SessionLocal",
    "SUPPORTED_BACKENDS",
    "engine",
    "ensure_supported_backend",
    "init_db",
    "verify_database_connection",
]
