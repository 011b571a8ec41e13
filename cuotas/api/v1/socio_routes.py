"""API routes for member operations."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from cuotas.dependencies import get_db
from cuotas.schemas import Mensaje, SocioCreate, SocioResponse
from cuotas.services import SocioService

router = APIRouter(prefix="/socios", tags=["socios"])


@router.get("", response_model=list[SocioResponse])
def list_socios(db: Session = Depends(get_db)):
    service = SocioService(db)
    return service.list_socios()


@router.post("", response_model=SocioResponse, status_code=status.HTTP_201_CREATED)
def create_socio(socio_in: SocioCreate, db: Session = Depends(get_db)):
    service = SocioService(db)
    return service.create_socio(socio_in)


@router.delete("/{socio_id}", response_model=Mensaje)
def delete_socio(socio_id: int, db: Session = Depends(get_db)):
    service = SocioService(db)
    service.delete_socio(socio_id)
    return Mensaje(mensaje="Socio eliminado")
