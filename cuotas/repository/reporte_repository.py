"""Aggregate queries behind the dues reports."""

from __future__ import annotations

from decimal import Decimal
from typing import Dict, List, Tuple

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from cuotas.models import Pago, Socio


def _to_decimal(amount: object) -> Decimal:
    if amount is None:
        return Decimal("0")
    if isinstance(amount, Decimal):
        return amount
    return Decimal(str(amount))


def fetch_total_recaudado(db: Session) -> Decimal:
    """Return the sum of every payment ever recorded."""

    amount = db.execute(select(func.coalesce(func.sum(Pago.monto), 0))).scalar()
    return _to_decimal(amount)


def fetch_totales_por_socio(db: Session) -> List[Dict[str, object]]:
    """Return every member with the total paid, zero when they never paid."""

    query = (
        select(
            Socio.id,
            Socio.nombre,
            func.coalesce(func.sum(Pago.monto), 0).label("total_pagado"),
        )
        .outerjoin(Pago, Pago.socio_id == Socio.id)
        .group_by(Socio.id, Socio.nombre)
        .order_by(Socio.id)
    )
    return [
        {
            "id": row.id,
            "nombre": row.nombre,
            "total_pagado": _to_decimal(row.total_pagado),
        }
        for row in db.execute(query)
    ]


def fetch_totales_mensuales(db: Session, *, anio: int) -> Dict[int, Decimal]:
    """Return ``{mes: total}`` for the months of ``anio`` that have payments."""

    query = (
        select(Pago.mes, func.coalesce(func.sum(Pago.monto), 0).label("total"))
        .where(Pago.anio == anio)
        .group_by(Pago.mes)
        .order_by(Pago.mes)
    )
    return {int(row.mes): _to_decimal(row.total) for row in db.execute(query)}


def fetch_meses_pagados_por_socio(db: Session, *, anio: int) -> Dict[int, int]:
    """Return ``{socio_id: distinct months paid}`` for ``anio``."""

    query = (
        select(Pago.socio_id, func.count(Pago.mes.distinct()).label("pagados"))
        .where(Pago.anio == anio)
        .group_by(Pago.socio_id)
    )
    return {int(row.socio_id): int(row.pagados) for row in db.execute(query)}


def fetch_socios(db: Session) -> List[Tuple[int, str]]:
    query = select(Socio.id, Socio.nombre).order_by(Socio.id)
    return [(row.id, row.nombre) for row in db.execute(query)]


def fetch_totales_socio_mes(db: Session, *, anio: int) -> Dict[Tuple[int, int], Decimal]:
    """Return ``{(socio_id, mes): total}`` for ``anio``."""

    query = (
        select(
            Pago.socio_id,
            Pago.mes,
            func.coalesce(func.sum(Pago.monto), 0).label("total"),
        )
        .where(Pago.anio == anio)
        .group_by(Pago.socio_id, Pago.mes)
    )
    return {
        (int(row.socio_id), int(row.mes)): _to_decimal(row.total)
        for row in db.execute(query)
    }


__all__ = [
    "fetch_meses_pagados_por_socio",
    "fetch_socios",
    "fetch_total_recaudado",
    "fetch_totales_mensuales",
    "fetch_totales_por_socio",
    "fetch_totales_socio_mes",
]
