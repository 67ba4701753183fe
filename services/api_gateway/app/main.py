"""API Gateway — FastAPI application factory.

Central entry-point for browser clients. Reports its own status as the
aggregate of the AI and writing services it fronts.
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import ApiGatewaySettings, settings as default_settings
from app.core.events import lifespan
from app.routers import health

from englishai.aggregator import Probe
from englishai.logging import setup_logging
from englishai.middleware import RequestContextMiddleware
from englishai.reporter import build_status_reporter


def create_app(
    settings: ApiGatewaySettings | None = None,
    *,
    probe: Probe | None = None,
) -> FastAPI:
    settings = settings or default_settings
    setup_logging(
        log_level=settings.log_level,
        json_logs=settings.json_logs,
        service_name=settings.service_name,
    )

    application = FastAPI(
        title="English AI API Gateway",
        version="0.1.0",
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )
    application.state.settings = settings
    application.state.status_reporter = build_status_reporter(settings, probe)

    # CORS for the web frontend
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    application.add_middleware(RequestContextMiddleware)

    application.include_router(health.router)

    return application


app = create_app()
