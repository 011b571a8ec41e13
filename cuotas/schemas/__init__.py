"""Schemas exposed by the dues service."""

from cuotas.schemas.pago import (
    Mensaje,
    PagoCreate,
    PagoResponse,
    PagosSinCambios,
    PagoUpdate,
)
from cuotas.schemas.reporte import (
    EstadoAnualSocio,
    EstadoMes,
    FilaReportePagos,
    RecaudacionMensual,
    TotalPorSocio,
    TotalRecaudado,
)
from cuotas.schemas.socio import SocioCreate, SocioResponse

__all__ = [
    "EstadoAnualSocio",
    "EstadoMes",
    "FilaReportePagos",
    "Mensaje",
    "PagoCreate",
    "PagoResponse",
    "PagoUpdate",
    "PagosSinCambios",
    "RecaudacionMensual",
    "SocioCreate",
    "SocioResponse",
    "TotalPorSocio",
    "TotalRecaudado",
]
