"""HTTP errors raised by the service layer."""

from __future__ import annotations

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from cuotas.core.error_handlers import database_error_message
from cuotas.models.pago import UNIQUE_PERIOD_CONSTRAINT

PAGO_DUPLICADO = "Ya existe un pago para este mes y año"
SOCIO_NO_ENCONTRADO = "Socio no encontrado"
PAGO_NO_ENCONTRADO = "Pago no encontrado"

# SQLite reports the columns of the violated constraint, not its name.
_SQLITE_UNIQUE_PERIOD = "UNIQUE constraint failed: pagos.socio_id, pagos.mes, pagos.anio"


def storage_error(exc: SQLAlchemyError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=database_error_message(exc),
    )


def not_found(message: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=message)


def duplicate_payment() -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=PAGO_DUPLICADO)


def is_duplicate_period(exc: IntegrityError) -> bool:
    """Tell whether ``exc`` is a violation of the one-payment-per-period constraint."""

    diag = getattr(exc.orig, "diag", None)
    if diag is not None and getattr(diag, "constraint_name", None):
        return diag.constraint_name == UNIQUE_PERIOD_CONSTRAINT

    message = database_error_message(exc)
    return UNIQUE_PERIOD_CONSTRAINT in message or _SQLITE_UNIQUE_PERIOD in message


__all__ = [
    "PAGO_DUPLICADO",
    "PAGO_NO_ENCONTRADO",
    "SOCIO_NO_ENCONTRADO",
    "duplicate_payment",
    "is_duplicate_period",
    "not_found",
    "storage_error",
]
