"""Exception handlers that render every failure as ``{"error": message}``."""
from __future__ import annotations

import logging
from typing import Any, Sequence

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

MENSAJE_ERROR_INTERNO = "Error interno del servidor"


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _detail_to_message(detail: Any) -> str:
    if detail is None:
        return "Ocurrió un error"
    if isinstance(detail, dict):
        return str(detail.get("detail") or "; ".join(f"{k}: {v}" for k, v in detail.items()))
    if isinstance(detail, (list, tuple)):
        return "; ".join(_detail_to_message(item) for item in detail)
    return str(detail)


def _validation_message(errors: Sequence[dict]) -> str:
    # Drop the "body"/"path" prefix so the message names the field itself.
    parts = []
    for error in errors:
        field = ".".join(str(loc) for loc in error.get("loc", ()) if loc not in ("body", "path"))
        text = error.get("msg", "Dato inválido")
        parts.append(f"{field}: {text}" if field else text)
    return "; ".join(parts) or "Solicitud inválida"


def database_error_message(exc: SQLAlchemyError) -> str:
    """Return the driver message behind a SQLAlchemy error."""
    driver_error = getattr(exc, "orig", None)
    return str(driver_error if driver_error is not None else exc)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers on ``app``.

    Validation problems become 400 rather than FastAPI's 422, and database
    errors that escape the services become 500 with the driver message.
    """

    @app.exception_handler(HTTPException)
    async def handle_http_exception(request: Request, exc: HTTPException) -> JSONResponse:
        response = _error_response(exc.status_code, _detail_to_message(exc.detail))
        response.headers.update(exc.headers or {})
        return response

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return _error_response(status.HTTP_400_BAD_REQUEST, _validation_message(exc.errors()))

    @app.exception_handler(SQLAlchemyError)
    async def handle_database_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        logger.exception("Database error on %s %s", request.method, request.url.path)
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, database_error_message(exc)
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, MENSAJE_ERROR_INTERNO)


__all__ = ["MENSAJE_ERROR_INTERNO", "database_error_message", "register_exception_handlers"]
