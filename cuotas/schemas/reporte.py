"""Response models for the dues reports."""

from __future__ import annotations

from typing import Dict, Optional

from pydantic import BaseModel, Field

from cuotas.schemas.common import Money


class TotalRecaudado(BaseModel):
    total: Money


class TotalPorSocio(BaseModel):
    id: int
    nombre: str
    total_pagado: Money


class EstadoMes(BaseModel):
    """Paid flag for one calendar month of a member's year."""

    mes: str
    numeroMes: int = Field(..., ge=1, le=12)
    pagado: bool


class RecaudacionMensual(BaseModel):
    mes: str
    total: Money


class EstadoAnualSocio(BaseModel):
    id: int
    nombre: str
    pagados: int = Field(..., ge=0, le=12)
    pendientes: int = Field(..., ge=0, le=12)
    estado: str


class FilaReportePagos(BaseModel):
    """One row of the member by month matrix.

    The grand total row has no ``id``.
    """

    id: Optional[int] = None
    nombre: str
    meses: Dict[str, Money]
    total: Money


__all__ = [
    "EstadoAnualSocio",
    "EstadoMes",
    "FilaReportePagos",
    "RecaudacionMensual",
    "TotalPorSocio",
    "TotalRecaudado",
]
