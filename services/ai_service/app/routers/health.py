"""AI Service — status endpoints.

No dependencies are registered by default, so the service reports UP while
it is serving; extra ones can be added through DOWNSTREAM_SERVICES.
"""

from __future__ import annotations

from englishai.health import create_health_router

router = create_health_router()
