"""Writing Service — environment-based configuration."""

from __future__ import annotations

from englishai.config import BaseServiceSettings


class WritingServiceSettings(BaseServiceSettings):
    """Settings specific to the Writing Service."""

    service_name: str = "writing_service"
    service_port: int = 8082
    display_name: str = "Writing Service"


settings = WritingServiceSettings()
