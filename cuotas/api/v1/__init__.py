"""Version 1 API routes for the dues service."""

from fastapi import APIRouter

from .pago_routes import router as pago_router
from .reporte_routes import router as reporte_router
from .socio_routes import router as socio_router

router = APIRouter()
router.include_router(socio_router)
router.include_router(pago_router)
router.include_router(reporte_router)

__all__ = ["router", "pago_router", "reporte_router", "socio_router"]
