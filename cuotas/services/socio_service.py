"""Business logic for member operations."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from cuotas.models import Socio
from cuotas.repository import (
    create_socio as repo_create_socio,
    delete_socio as repo_delete_socio,
    list_socios as repo_list_socios,
)
from cuotas.schemas import SocioCreate
from cuotas.services.errors import SOCIO_NO_ENCONTRADO, not_found, storage_error

logger = logging.getLogger(__name__)


class SocioService:
    """Service layer encapsulating member operations."""

    def __init__(self, db: Session):
        self.db = db

    def list_socios(self) -> list[Socio]:
        try:
            return repo_list_socios(self.db)
        except SQLAlchemyError as exc:
            logger.exception("Failed to list members")
            raise storage_error(exc) from exc

    def create_socio(self, socio_in: SocioCreate) -> Socio:
        try:
            socio = Socio(**socio_in.model_dump())
            repo_create_socio(self.db, socio)
            self.db.commit()
            self.db.refresh(socio)
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Failed to create member")
            raise storage_error(exc) from exc

        logger.info("Member %s created", socio.id)
        return socio

    def delete_socio(self, socio_id: int) -> None:
        try:
            deleted = repo_delete_socio(self.db, socio_id)
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Failed to delete member %s", socio_id)
            raise storage_error(exc) from exc

        if not deleted:
            raise not_found(SOCIO_NO_ENCONTRADO)
        logger.info("Member %s deleted along with its payments", socio_id)


__all__ = ["SocioService"]
