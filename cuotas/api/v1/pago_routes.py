"""API routes for payment operations."""

from __future__ import annotations

from typing import List, Union

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from cuotas.dependencies import get_db
from cuotas.schemas import (
    Mensaje,
    PagoCreate,
    PagoResponse,
    PagosSinCambios,
    PagoUpdate,
)
from cuotas.services import PagoService

router = APIRouter(prefix="/pagos", tags=["pagos"])


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=Union[PagoResponse, List[PagoResponse], PagosSinCambios],
)
def create_pago(payload: PagoCreate, response: Response, db: Session = Depends(get_db)):
    """Record a single month (``mes``) or several months at once (``meses``)."""

    service = PagoService(db)
    result = service.registrar_pago(payload)
    if isinstance(result, PagosSinCambios):
        response.status_code = status.HTTP_200_OK
    return result


@router.put("/{pago_id}", response_model=PagoResponse)
def update_pago(
    pago_id: int,
    payload: PagoUpdate,
    db: Session = Depends(get_db),
) -> PagoResponse:
    service = PagoService(db)
    return service.actualizar_pago(pago_id, payload)


@router.delete("/{pago_id}", response_model=Mensaje)
def delete_pago(pago_id: int, db: Session = Depends(get_db)) -> Mensaje:
    service = PagoService(db)
    service.eliminar_pago(pago_id)
    return Mensaje(mensaje="Pago eliminado")


@router.get("/{socio_id}", response_model=List[PagoResponse])
def list_pagos_de_socio(socio_id: int, db: Session = Depends(get_db)) -> List[PagoResponse]:
    service = PagoService(db)
    return service.list_pagos_de_socio(socio_id)


__all__ = ["router"]
