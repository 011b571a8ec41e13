"""Database helpers for payment persistence."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Iterable, List, Optional, Set

from sqlalchemy import delete, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

from cuotas.models import Pago

UNIQUE_PERIOD_COLUMNS = ["socio_id", "mes", "anio"]

_INSERT_BY_DIALECT = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def list_pagos_por_socio(db: Session, socio_id: int) -> List[Pago]:
    query = (
        select(Pago)
        .where(Pago.socio_id == socio_id)
        .order_by(Pago.anio.desc(), Pago.mes.desc())
    )
    return list(db.scalars(query))


def get_pago(db: Session, pago_id: int) -> Optional[Pago]:
    return db.get(Pago, pago_id)


def find_pago_del_periodo(
    db: Session,
    *,
    socio_id: int,
    mes: int,
    anio: int,
    excluir_id: Optional[int] = None,
) -> Optional[Pago]:
    """Return the payment occupying the (member, month, year) slot, if any."""

    query = select(Pago).where(
        Pago.socio_id == socio_id,
        Pago.mes == mes,
        Pago.anio == anio,
    )
    if excluir_id is not None:
        query = query.where(Pago.id != excluir_id)
    return db.scalars(query.limit(1)).first()


def meses_registrados(
    db: Session,
    *,
    socio_id: int,
    anio: int,
    meses: Optional[Iterable[int]] = None,
) -> Set[int]:
    query = select(Pago.mes).where(Pago.socio_id == socio_id, Pago.anio == anio)
    if meses is not None:
        query = query.where(Pago.mes.in_(list(meses)))
    return {int(mes) for mes in db.scalars(query)}


def create_pago(db: Session, pago: Pago) -> Pago:
    db.add(pago)
    db.flush()
    return pago


def insert_pagos_ignorando_duplicados(
    db: Session,
    *,
    socio_id: int,
    monto: Decimal,
    anio: int,
    meses: Iterable[int],
) -> List[Pago]:
    """Insert one payment per month in a single statement.

    Rows that collide with the unique (socio_id, mes, anio) constraint are
    skipped by the database. Only the rows actually inserted are returned.
    """

    hoy = date.today()
    rows = [
        {"socio_id": socio_id, "monto": monto, "fecha": hoy, "mes": mes, "anio": anio}
        for mes in meses
    ]
    if not rows:
        return []

    dialect = db.get_bind().dialect.name
    try:
        insert = _INSERT_BY_DIALECT[dialect]
    except KeyError as exc:
        raise NotImplementedError(f"Unsupported database dialect '{dialect}'") from exc

    statement = (
        insert(Pago)
        .values(rows)
        .on_conflict_do_nothing(index_elements=UNIQUE_PERIOD_COLUMNS)
        .returning(Pago)
    )
    inserted = list(db.scalars(statement))
    return sorted(inserted, key=lambda pago: pago.mes)


def save_pago(db: Session, pago: Pago) -> Pago:
    db.flush()
    return pago


def delete_pago(db: Session, pago_id: int) -> int:
    result = db.execute(delete(Pago).where(Pago.id == pago_id))
    return result.rowcount


__all__ = [
    "create_pago",
    "delete_pago",
    "find_pago_del_periodo",
    "get_pago",
    "insert_pagos_ignorando_duplicados",
    "list_pagos_por_socio",
    "meses_registrados",
    "save_pago",
]
