"""Read-only reports computed from the payment history."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from cuotas.repository import (
    fetch_meses_pagados_por_socio,
    fetch_socios,
    fetch_total_recaudado,
    fetch_totales_mensuales,
    fetch_totales_por_socio,
    fetch_totales_socio_mes,
    meses_registrados,
)
from cuotas.schemas import (
    EstadoAnualSocio,
    EstadoMes,
    FilaReportePagos,
    RecaudacionMensual,
    TotalPorSocio,
    TotalRecaudado,
)
from cuotas.services.errors import storage_error

logger = logging.getLogger(__name__)

MESES = [
    "Enero",
    "Febrero",
    "Marzo",
    "Abril",
    "Mayo",
    "Junio",
    "Julio",
    "Agosto",
    "Septiembre",
    "Octubre",
    "Noviembre",
    "Diciembre",
]

ESTADO_AL_DIA = "Al día"
ESTADO_PENDIENTE = "Pendiente"
TOTAL_GENERAL = "Total general"


class ReporteService:
    """Encapsulates the dues reports. None of them write."""

    def __init__(self, db: Session) -> None:
        self._db = db

    def total_recaudado(self) -> TotalRecaudado:
        try:
            total = fetch_total_recaudado(self._db)
        except SQLAlchemyError as exc:
            logger.exception("Unable to compute total collected")
            raise storage_error(exc) from exc
        return TotalRecaudado(total=total)

    def totales_por_socio(self) -> List[TotalPorSocio]:
        try:
            rows = fetch_totales_por_socio(self._db)
        except SQLAlchemyError as exc:
            logger.exception("Unable to compute member totals")
            raise storage_error(exc) from exc
        return [TotalPorSocio(**row) for row in rows]

    def cuotas_pendientes(self, socio_id: int, anio: int) -> List[EstadoMes]:
        try:
            pagados = meses_registrados(self._db, socio_id=socio_id, anio=anio)
        except SQLAlchemyError as exc:
            logger.exception("Unable to compute pending months of member %s", socio_id)
            raise storage_error(exc) from exc

        return [
            EstadoMes(mes=nombre, numeroMes=numero, pagado=numero in pagados)
            for numero, nombre in enumerate(MESES, start=1)
        ]

    def recaudacion_mensual(self, anio: int) -> List[RecaudacionMensual]:
        try:
            totales = fetch_totales_mensuales(self._db, anio=anio)
        except SQLAlchemyError as exc:
            logger.exception("Unable to compute monthly collection for %s", anio)
            raise storage_error(exc) from exc

        # The aggregate only has rows for months with payments.
        return [
            RecaudacionMensual(mes=nombre, total=totales.get(numero, Decimal("0")))
            for numero, nombre in enumerate(MESES, start=1)
        ]

    def estado_anual(self, anio: int) -> List[EstadoAnualSocio]:
        try:
            socios = fetch_socios(self._db)
            pagados_por_socio = fetch_meses_pagados_por_socio(self._db, anio=anio)
        except SQLAlchemyError as exc:
            logger.exception("Unable to compute annual status for %s", anio)
            raise storage_error(exc) from exc

        reporte = []
        for socio_id, nombre in socios:
            pagados = pagados_por_socio.get(socio_id, 0)
            reporte.append(
                EstadoAnualSocio(
                    id=socio_id,
                    nombre=nombre,
                    pagados=pagados,
                    pendientes=len(MESES) - pagados,
                    estado=ESTADO_AL_DIA if pagados == len(MESES) else ESTADO_PENDIENTE,
                )
            )
        return reporte

    def reporte_pagos(self, anio: int) -> List[FilaReportePagos]:
        """Member by month matrix of amounts for ``anio`` plus a grand total row.

        Months come from the ``mes``/``anio`` columns, never from ``fecha``.
        """

        try:
            socios = fetch_socios(self._db)
            totales = fetch_totales_socio_mes(self._db, anio=anio)
        except SQLAlchemyError as exc:
            logger.exception("Unable to compute payments matrix for %s", anio)
            raise storage_error(exc) from exc

        cero = Decimal("0")
        columnas_total = {nombre: cero for nombre in MESES}
        filas = []
        for socio_id, nombre in socios:
            meses = {
                nombre_mes: totales.get((socio_id, numero), cero)
                for numero, nombre_mes in enumerate(MESES, start=1)
            }
            for nombre_mes, monto in meses.items():
                columnas_total[nombre_mes] += monto
            filas.append(
                FilaReportePagos(
                    id=socio_id,
                    nombre=nombre,
                    meses=meses,
                    total=sum(meses.values(), cero),
                )
            )

        filas.append(
            FilaReportePagos(
                id=None,
                nombre=TOTAL_GENERAL,
                meses=columnas_total,
                total=sum(columnas_total.values(), cero),
            )
        )
        return filas


__all__ = ["MESES", "ReporteService"]
