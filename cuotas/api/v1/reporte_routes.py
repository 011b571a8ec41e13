"""API routes for the dues reports."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from cuotas.dependencies import get_db
from cuotas.schemas import (
    EstadoAnualSocio,
    EstadoMes,
    FilaReportePagos,
    RecaudacionMensual,
    TotalPorSocio,
    TotalRecaudado,
)
from cuotas.services import ReporteService

router = APIRouter(tags=["reportes"])


@router.get("/reportes/total", response_model=TotalRecaudado)
def get_total_recaudado(db: Session = Depends(get_db)) -> TotalRecaudado:
    """Return the sum of every payment recorded."""

    service = ReporteService(db)
    return service.total_recaudado()


@router.get("/reportes/socios", response_model=List[TotalPorSocio])
def get_totales_por_socio(db: Session = Depends(get_db)) -> List[TotalPorSocio]:
    service = ReporteService(db)
    return service.totales_por_socio()


@router.get("/cuotas-pendientes/{socio_id}/{anio}", response_model=List[EstadoMes])
def get_cuotas_pendientes(
    socio_id: int,
    anio: int,
    db: Session = Depends(get_db),
) -> List[EstadoMes]:
    """Return the twelve months of ``anio`` flagged as paid or unpaid."""

    service = ReporteService(db)
    return service.cuotas_pendientes(socio_id, anio)


@router.get("/reporte-mensual/{anio}", response_model=List[RecaudacionMensual])
def get_recaudacion_mensual(anio: int, db: Session = Depends(get_db)) -> List[RecaudacionMensual]:
    service = ReporteService(db)
    return service.recaudacion_mensual(anio)


@router.get("/reporte-anual/{anio}", response_model=List[EstadoAnualSocio])
def get_estado_anual(anio: int, db: Session = Depends(get_db)) -> List[EstadoAnualSocio]:
    service = ReporteService(db)
    return service.estado_anual(anio)


@router.get("/reporte-pagos/{anio}", response_model=List[FilaReportePagos])
def get_reporte_pagos(anio: int, db: Session = Depends(get_db)) -> List[FilaReportePagos]:
    """Return the member by month matrix of amounts, ending with the grand total."""

    service = ReporteService(db)
    return service.reporte_pagos(anio)


__all__ = ["router"]
