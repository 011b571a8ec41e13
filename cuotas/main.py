"""Entry point for the dues service."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from cuotas.api import v1_router
from cuotas.core.config import settings
from cuotas.core.database import init_db
from cuotas.core.error_handlers import register_exception_handlers
from cuotas.core.logging import configure_logging

configure_logging(settings.LOG_LEVEL)
init_db()

app = FastAPI(title=settings.PROJECT_NAME)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials="*" not in settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(v1_router)


@app.get("/", response_class=PlainTextResponse)
def index() -> str:
    return "API de Cobro de Cuotas con PostgreSQL 🚀"


@app.get("/health")
def health_check():
    return {"status": "ok"}


__all__ = ["app"]
