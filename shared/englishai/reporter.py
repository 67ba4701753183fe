"""Formats aggregated health for the ``/`` and ``/health`` endpoints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import structlog

from englishai.aggregator import HealthAggregator, Probe, reduce_status
from englishai.config import BaseServiceSettings
from englishai.models import AggregateStatus, OverallStatus, ProbeResult, ProbeStatus
from englishai.probe import ServiceProbe
from englishai.registry import ProbeRegistry

logger = structlog.get_logger()


@dataclass(frozen=True)
class StatusReport:
    """Both response views, derived from one aggregation cycle."""

    service: str
    message: str
    aggregate: AggregateStatus

    @property
    def status(self) -> OverallStatus:
        return self.aggregate.overall

    @property
    def summary(self) -> dict[str, str]:
        return {
            "service": self.service,
            "status": self.status.value,
            "message": self.message,
        }

    @property
    def health(self) -> dict[str, str]:
        return {"status": self.status.value}

    def detail(self) -> dict[str, Any]:
        return {"service": self.service, **self.aggregate.model_dump(mode="json")}


class StatusReporter:
    """Runs one aggregation per ``report`` call and words the result.

    Args:
        display_name: Human-readable service name, e.g. ``"API Gateway"``.
        aggregator: Aggregator over this service's dependencies.
        product: Product name prefixed to messages.
    """

    def __init__(
        self,
        display_name: str,
        aggregator: HealthAggregator,
        *,
        product: str = "English AI",
    ) -> None:
        self.display_name = display_name
        self.aggregator = aggregator
        self.product = product

    async def report(self) -> StatusReport:
        try:
            aggregate = await self.aggregator.aggregate()
        except Exception:
            logger.exception("health_aggregation_failed")
            aggregate = self._failed_aggregate()
            if aggregate.overall is OverallStatus.DOWN:
                return StatusReport(
                    service=self.display_name,
                    message=f"{self.product} {self.display_name} is unavailable: health check failed",
                    aggregate=aggregate,
                )

        return StatusReport(
            service=self.display_name,
            message=self.message_for(aggregate),
            aggregate=aggregate,
        )

    def _failed_aggregate(self) -> AggregateStatus:
        """One UNKNOWN result per registered service when no cycle could run."""
        results = tuple(
            ProbeResult(
                service=d.name,
                status=ProbeStatus.UNKNOWN,
                latency_ms=0.0,
                detail="health check failed",
            )
            for d in self.aggregator.registry.list()
        )
        return AggregateStatus(overall=reduce_status(results), results=results)

    def message_for(self, aggregate: AggregateStatus) -> str:
        label = f"{self.product} {self.display_name}"
        failing = ", ".join(aggregate.failing())
        if aggregate.overall is OverallStatus.UP:
            return f"{label} is running"
        if aggregate.overall is OverallStatus.DEGRADED:
            return f"{label} is running with degraded dependencies: {failing}"
        return f"{label} is unavailable: {failing}"


def build_status_reporter(
    settings: BaseServiceSettings,
    probe: Probe | None = None,
) -> StatusReporter:
    """Register the configured dependencies and wire up a reporter.

    Raises:
        DuplicateServiceError: Two configured dependencies share a name.
    """
    registry = ProbeRegistry.from_descriptors(settings.service_descriptors())
    aggregator = HealthAggregator(
        registry,
        probe or ServiceProbe(),
        deadline_ms=settings.health_deadline_ms,
    )
    return StatusReporter(settings.display_name, aggregator)
