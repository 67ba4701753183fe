"""In-memory probe doubles for aggregator, reporter and API tests."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass

from englishai.models import ProbeResult, ProbeStatus, ServiceDescriptor


@dataclass
class Behaviour:
    status: ProbeStatus = ProbeStatus.UP
    delay: float = 0.0
    error: Exception | None = None


UP = Behaviour()
DOWN = Behaviour(status=ProbeStatus.DOWN)
HANG = Behaviour(delay=3600)


class FakeProbe:
    """Answers ``check`` from a name -> ``Behaviour`` table."""

    def __init__(self, behaviours: dict[str, Behaviour] | None = None) -> None:
        self.behaviours = behaviours or {}
        self.calls: list[str] = []
        self.cancelled: list[str] = []

    async def check(self, descriptor: ServiceDescriptor) -> ProbeResult:
        self.calls.append(descriptor.name)
        behaviour = self.behaviours.get(descriptor.name, UP)
        try:
            if behaviour.delay:
                await asyncio.sleep(behaviour.delay)
        except asyncio.CancelledError:
            self.cancelled.append(descriptor.name)
            raise
        if behaviour.error is not None:
            raise behaviour.error
        return ProbeResult(
            service=descriptor.name,
            status=behaviour.status,
            latency_ms=behaviour.delay * 1000,
        )


def descriptor(name: str, timeout_ms: int = 500) -> ServiceDescriptor:
    return ServiceDescriptor(
        name=name,
        endpoint=f"http://{name}.internal/health",
        timeout_ms=timeout_ms,
    )
