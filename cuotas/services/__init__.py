"""Service layer for the dues service."""

from .pago_service import PagoService
from .reporte_service import ReporteService
from .socio_service import SocioService

__all__ = ["PagoService", "ReporteService", "SocioService"]
