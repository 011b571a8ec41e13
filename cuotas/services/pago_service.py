"""Business logic for recording and maintaining dues payments."""

from __future__ import annotations

import logging
from typing import List, Union

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from cuotas.models import Pago
from cuotas.repository import (
    create_pago,
    delete_pago,
    find_pago_del_periodo,
    get_pago,
    get_socio,
    insert_pagos_ignorando_duplicados,
    list_pagos_por_socio,
    meses_registrados,
    save_pago,
)
from cuotas.schemas import PagoCreate, PagosSinCambios, PagoUpdate
from cuotas.services.errors import (
    PAGO_NO_ENCONTRADO,
    SOCIO_NO_ENCONTRADO,
    duplicate_payment,
    is_duplicate_period,
    not_found,
    storage_error,
)

logger = logging.getLogger(__name__)

MESES_YA_PAGADOS = "Todos los meses seleccionados ya están pagados"


class PagoService:
    """Records payments while keeping one payment per member, month and year.

    The unique constraint on ``pagos`` is the authority; the lookups done
    here only answer the common case without a failed write.
    """

    def __init__(self, db: Session):
        self.db = db

    def list_pagos_de_socio(self, socio_id: int) -> List[Pago]:
        try:
            return list_pagos_por_socio(self.db, socio_id)
        except SQLAlchemyError as exc:
            logger.exception("Failed to list payments of member %s", socio_id)
            raise storage_error(exc) from exc

    def registrar_pago(
        self, payload: PagoCreate
    ) -> Union[Pago, List[Pago], PagosSinCambios]:
        if payload.es_lote:
            return self.registrar_meses(payload)
        return self.registrar_mes(payload)

    def registrar_mes(self, payload: PagoCreate) -> Pago:
        try:
            self._ensure_socio(payload.socio_id)
            existente = find_pago_del_periodo(
                self.db,
                socio_id=payload.socio_id,
                mes=payload.mes,
                anio=payload.anio,
            )
            if existente is not None:
                raise duplicate_payment()

            pago = Pago(
                socio_id=payload.socio_id,
                monto=payload.monto,
                mes=payload.mes,
                anio=payload.anio,
            )
            create_pago(self.db, pago)
            self.db.commit()
            self.db.refresh(pago)
        except SQLAlchemyError as exc:
            self.db.rollback()
            if isinstance(exc, IntegrityError) and is_duplicate_period(exc):
                # Lost the race against an identical concurrent request.
                raise duplicate_payment() from exc
            logger.exception("Failed to record payment")
            raise storage_error(exc) from exc

        logger.info(
            "Payment %s recorded for member %s (%s/%s)",
            pago.id,
            pago.socio_id,
            pago.mes,
            pago.anio,
        )
        return pago

    def registrar_meses(self, payload: PagoCreate) -> Union[List[Pago], PagosSinCambios]:
        solicitados = list(dict.fromkeys(payload.meses or []))
        try:
            self._ensure_socio(payload.socio_id)
            existentes = meses_registrados(
                self.db,
                socio_id=payload.socio_id,
                anio=payload.anio,
                meses=solicitados,
            )
            pendientes = [mes for mes in solicitados if mes not in existentes]
            if not pendientes:
                return PagosSinCambios(mensaje=MESES_YA_PAGADOS)

            insertados = insert_pagos_ignorando_duplicados(
                self.db,
                socio_id=payload.socio_id,
                monto=payload.monto,
                anio=payload.anio,
                meses=pendientes,
            )
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Failed to record payments for member %s", payload.socio_id)
            raise storage_error(exc) from exc

        if not insertados:
            return PagosSinCambios(mensaje=MESES_YA_PAGADOS)

        logger.info(
            "Recorded %d payment(s) for member %s in %s: months %s",
            len(insertados),
            payload.socio_id,
            payload.anio,
            [pago.mes for pago in insertados],
        )
        return insertados

    def actualizar_pago(self, pago_id: int, payload: PagoUpdate) -> Pago:
        try:
            pago = get_pago(self.db, pago_id)
            if pago is None:
                raise not_found(PAGO_NO_ENCONTRADO)
            self._ensure_socio(payload.socio_id)

            ocupado = find_pago_del_periodo(
                self.db,
                socio_id=payload.socio_id,
                mes=payload.mes,
                anio=payload.anio,
                excluir_id=pago_id,
            )
            if ocupado is not None:
                raise duplicate_payment()

            for field, value in payload.model_dump().items():
                setattr(pago, field, value)
            save_pago(self.db, pago)
            self.db.commit()
            self.db.refresh(pago)
        except SQLAlchemyError as exc:
            self.db.rollback()
            if isinstance(exc, IntegrityError) and is_duplicate_period(exc):
                raise duplicate_payment() from exc
            logger.exception("Failed to update payment %s", pago_id)
            raise storage_error(exc) from exc

        logger.info("Payment %s updated", pago_id)
        return pago

    def eliminar_pago(self, pago_id: int) -> None:
        try:
            deleted = delete_pago(self.db, pago_id)
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Failed to delete payment %s", pago_id)
            raise storage_error(exc) from exc

        if not deleted:
            raise not_found(PAGO_NO_ENCONTRADO)
        logger.info("Payment %s deleted", pago_id)

    def _ensure_socio(self, socio_id: int) -> None:
        if get_socio(self.db, socio_id) is None:
            raise not_found(SOCIO_NO_ENCONTRADO)


__all__ = ["MESES_YA_PAGADOS", "PagoService"]
