"""Concurrent, deadline-bounded health aggregation.

Every call to ``HealthAggregator.aggregate`` starts one asyncio task per
registered service, waits for all of them up to a single deadline, and
reduces the results into an ``AggregateStatus``. Probes still running when
the deadline fires are cancelled and recorded as ``TIMEOUT``.
"""

from __future__ import annotations

import asyncio
import time
from collections.abc import Sequence
from typing import Protocol

import structlog

from englishai.models import (
    AggregateStatus,
    OverallStatus,
    ProbeResult,
    ProbeStatus,
    ServiceDescriptor,
)
from englishai.registry import ProbeRegistry

logger = structlog.get_logger()

DEFAULT_DEADLINE_MS = 2000


class Probe(Protocol):
    async def check(self, descriptor: ServiceDescriptor) -> ProbeResult: ...


def reduce_status(results: Sequence[ProbeResult]) -> OverallStatus:
    """UP if everything is up (vacuously for no results), DOWN if nothing is, else DEGRADED."""
    up = sum(1 for r in results if r.status is ProbeStatus.UP)
    if up == len(results):
        return OverallStatus.UP
    if up == 0:
        return OverallStatus.DOWN
    return OverallStatus.DEGRADED


class HealthAggregator:
    """Fans probes out over a ``ProbeRegistry`` snapshot.

    Args:
        registry: Services to probe. Only read, never modified.
        probe: Object with an async ``check(descriptor)`` method.
        deadline_ms: Default aggregate deadline for ``aggregate``.
    """

    def __init__(
        self,
        registry: ProbeRegistry,
        probe: Probe,
        *,
        deadline_ms: int = DEFAULT_DEADLINE_MS,
    ) -> None:
        if deadline_ms <= 0:
            raise ValueError("deadline_ms must be positive")
        self.registry = registry
        self.probe = probe
        self.deadline_ms = deadline_ms

    async def aggregate(self, deadline_ms: int | None = None) -> AggregateStatus:
        if deadline_ms is None:
            deadline_ms = self.deadline_ms
        elif deadline_ms <= 0:
            raise ValueError("deadline_ms must be positive")
        descriptors = self.registry.list()
        started = time.perf_counter()

        results = await self._fan_out(descriptors, deadline_ms)
        status = AggregateStatus(overall=reduce_status(results), results=tuple(results))

        logger.info(
            "health_aggregated",
            overall=status.overall.value,
            services=len(results),
            failing=status.failing(),
            elapsed_ms=round((time.perf_counter() - started) * 1000, 1),
        )
        return status

    async def _fan_out(
        self,
        descriptors: Sequence[ServiceDescriptor],
        deadline_ms: int,
    ) -> list[ProbeResult]:
        if not descriptors:
            return []

        tasks = [
            asyncio.create_task(self.probe.check(d), name=f"probe:{d.name}")
            for d in descriptors
        ]
        try:
            _, pending = await asyncio.wait(tasks, timeout=deadline_ms / 1000)
        finally:
            # Abandon stragglers; their eventual outcome is discarded.
            for task in tasks:
                if not task.done():
                    task.cancel()

        # Collected by registration position, never by completion order.
        results: list[ProbeResult] = []
        for descriptor, task in zip(descriptors, tasks):
            if task in pending:
                results.append(
                    ProbeResult(
                        service=descriptor.name,
                        status=ProbeStatus.TIMEOUT,
                        latency_ms=float(deadline_ms),
                        detail=f"no result within aggregate deadline of {deadline_ms}ms",
                    )
                )
            elif task.cancelled() or task.exception() is not None:
                exc = asyncio.CancelledError() if task.cancelled() else task.exception()
                logger.warning(
                    "probe_raised",
                    target=descriptor.name,
                    error=f"{type(exc).__name__}: {exc}",
                )
                results.append(
                    ProbeResult(
                        service=descriptor.name,
                        status=ProbeStatus.UNKNOWN,
                        latency_ms=0.0,
                        detail=f"{type(exc).__name__}: {exc}",
                    )
                )
            else:
                results.append(task.result())
        return results
