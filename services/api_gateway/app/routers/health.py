"""API Gateway — status endpoints aggregated over the backend services."""

from __future__ import annotations

from englishai.health import create_health_router

# Public and unauthenticated; every request probes ai and writing afresh.
router = create_health_router()
