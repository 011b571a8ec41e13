"""Data access helpers for members."""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from cuotas.models import Socio


def list_socios(db: Session) -> List[Socio]:
    return list(db.scalars(select(Socio).order_by(Socio.id.asc())))


def get_socio(db: Session, socio_id: int) -> Optional[Socio]:
    return db.get(Socio, socio_id)


def create_socio(db: Session, socio: Socio) -> Socio:
    db.add(socio)
    db.flush()
    return socio


def delete_socio(db: Session, socio_id: int) -> int:
    """Delete a member by id and return the number of affected rows.

    Payments go with it through the ``ON DELETE CASCADE`` foreign key.
    """

    result = db.execute(delete(Socio).where(Socio.id == socio_id))
    return result.rowcount


__all__ = ["create_socio", "delete_socio", "get_socio", "list_socios"]
