"""API Gateway — application lifespan (startup / shutdown hooks)."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

log = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Log the probed dependencies on startup."""
    registry = app.state.status_reporter.aggregator.registry
    log.info(
        "api_gateway starting up",
        dependencies=[d.name for d in registry],
        deadline_ms=app.state.status_reporter.aggregator.deadline_ms,
    )

    yield

    log.info("api_gateway shutting down")
