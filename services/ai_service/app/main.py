"""AI Service — FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI

from app.core.config import settings
from app.routers import health

from englishai.logging import setup_logging
from englishai.middleware import RequestContextMiddleware
from englishai.reporter import build_status_reporter


def create_app() -> FastAPI:
    setup_logging(
        log_level=settings.log_level,
        json_logs=settings.json_logs,
        service_name=settings.service_name,
    )

    application = FastAPI(
        title="English AI AI Service",
        version="0.1.0",
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )
    application.state.status_reporter = build_status_reporter(settings)

    application.add_middleware(RequestContextMiddleware)
    application.include_router(health.router)

    return application


app = create_app()
