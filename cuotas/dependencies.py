"""Common dependencies for the dues service."""

from collections.abc import Generator

from cuotas.core.database import SessionLocal


def get_db() -> Generator:
    """Provide a database session scoped to one request."""

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


__all__ = ["get_db"]
