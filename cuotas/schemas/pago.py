"""Pydantic models for payment resources."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from cuotas.schemas.common import Money

NumeroMes = Annotated[int, Field(ge=1, le=12)]


class PagoCreate(BaseModel):
    """Payment request body.

    ``meses`` records several months at once; ``mes`` records a single one.
    Exactly one of them must be sent.
    """

    socio_id: int
    monto: Decimal
    anio: int
    mes: Optional[NumeroMes] = None
    meses: Optional[List[NumeroMes]] = None

    @model_validator(mode="after")
    def _check_months(self) -> "PagoCreate":
        if self.meses is None and self.mes is None:
            raise ValueError("Debe indicar 'mes' o 'meses'")
        if self.meses is not None and self.mes is not None:
            raise ValueError("Indique 'mes' o 'meses', no ambos")
        if self.meses is not None and not self.meses:
            raise ValueError("La lista de meses no puede estar vacía")
        return self

    @property
    def es_lote(self) -> bool:
        return self.meses is not None


class PagoUpdate(BaseModel):
    socio_id: int
    monto: Decimal
    mes: NumeroMes
    anio: int


class PagoResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    socio_id: int
    monto: Money
    fecha: date
    mes: int
    anio: int


class PagosSinCambios(BaseModel):
    """Returned when every requested month was already paid."""

    mensaje: str
    pagos: List[PagoResponse] = []


class Mensaje(BaseModel):
    mensaje: str


__all__ = [
    "Mensaje",
    "PagoCreate",
    "PagoResponse",
    "PagoUpdate",
    "PagosSinCambios",
]
