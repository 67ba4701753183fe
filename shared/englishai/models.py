"""Pydantic models for service descriptors and health results."""

from __future__ import annotations

import enum
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, PositiveInt


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ProbeStatus(str, enum.Enum):
    """Outcome of a single probe."""

    UP = "UP"
    DOWN = "DOWN"
    TIMEOUT = "TIMEOUT"
    UNKNOWN = "UNKNOWN"


class OverallStatus(str, enum.Enum):
    """Reduced status across every registered service."""

    UP = "UP"
    DEGRADED = "DEGRADED"
    DOWN = "DOWN"


# ── Registration ──────────────────────────────


class ServiceDescriptor(BaseModel):
    """A backend service the gateway probes."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, max_length=100)
    endpoint: str = Field(..., min_length=1, description="Absolute URL probed with GET")
    timeout_ms: PositiveInt = 1000


# ── Results ───────────────────────────────────


class ProbeResult(BaseModel):
    """Result of one probe invocation. Replaced, never mutated."""

    model_config = ConfigDict(frozen=True)

    service: str
    status: ProbeStatus
    latency_ms: float = Field(..., ge=0)
    checked_at: datetime = Field(default_factory=utcnow)
    detail: str | None = None


class AggregateStatus(BaseModel):
    """Point-in-time status of every registered service, in registration order."""

    model_config = ConfigDict(frozen=True)

    overall: OverallStatus
    results: tuple[ProbeResult, ...] = ()
    generated_at: datetime = Field(default_factory=utcnow)

    def failing(self) -> list[str]:
        """Names of services whose probe did not come back UP."""
        return [r.service for r in self.results if r.status is not ProbeStatus.UP]
