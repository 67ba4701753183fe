"""API Gateway — environment-based configuration."""

from __future__ import annotations

from pydantic import PositiveInt

from englishai.config import BaseServiceSettings
from englishai.models import ServiceDescriptor


class ApiGatewaySettings(BaseServiceSettings):
    """Settings specific to the API Gateway."""

    service_name: str = "api_gateway"
    service_port: int = 8080
    display_name: str = "API Gateway"

    # Downstream health endpoints (resolved via Docker network)
    ai_service_url: str = "http://ai_service:8081/health"
    writing_service_url: str = "http://writing_service:8082/health"
    probe_timeout_ms: PositiveInt = 1500

    def service_descriptors(self) -> list[ServiceDescriptor]:
        return [
            ServiceDescriptor(
                name="ai",
                endpoint=self.ai_service_url,
                timeout_ms=self.probe_timeout_ms,
            ),
            ServiceDescriptor(
                name="writing",
                endpoint=self.writing_service_url,
                timeout_ms=self.probe_timeout_ms,
            ),
            *self.downstream_services,
        ]


settings = ApiGatewaySettings()
