"""AI Service — environment-based configuration."""

from __future__ import annotations

from englishai.config import BaseServiceSettings


class AiServiceSettings(BaseServiceSettings):
    """Settings specific to the AI Service."""

    service_name: str = "ai_service"
    service_port: int = 8081
    display_name: str = "AI Service"


settings = AiServiceSettings()
