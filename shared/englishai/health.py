"""Reusable status router.

Exposes ``/`` (summary) and ``/health`` (status only), plus ``/health/live``
(liveness, no probes) and ``/health/ready`` (full per-service detail, 503
when every dependency is down). Each request runs one aggregation cycle
through the ``StatusReporter`` stored on ``app.state.status_reporter``.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Request, Response, status

from englishai.models import OverallStatus
from englishai.reporter import StatusReporter


def get_status_reporter(request: Request) -> StatusReporter:
    return request.app.state.status_reporter


def create_health_router() -> APIRouter:
    """Build the unauthenticated status router shared by every service."""
    router = APIRouter(tags=["health"])

    @router.get("/", summary="Service summary")
    async def root(
        reporter: StatusReporter = Depends(get_status_reporter),
    ) -> dict[str, str]:
        report = await reporter.report()
        return report.summary

    @router.get("/health", summary="Aggregated status")
    async def health(
        reporter: StatusReporter = Depends(get_status_reporter),
    ) -> dict[str, str]:
        report = await reporter.report()
        return report.health

    @router.get("/health/live", summary="Liveness probe")
    async def liveness() -> dict[str, str]:
        return {"status": "alive"}

    @router.get("/health/ready", summary="Readiness probe")
    async def readiness(
        response: Response,
        reporter: StatusReporter = Depends(get_status_reporter),
    ) -> dict[str, Any]:
        report = await reporter.report()
        if report.status is OverallStatus.DOWN:
            response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return report.detail()

    return router
