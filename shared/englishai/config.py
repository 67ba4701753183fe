"""Base configuration using Pydantic Settings.

All service-specific settings inherit from ``BaseServiceSettings``.
Values are loaded from environment variables and .env files.
"""

from __future__ import annotations

from pydantic import Field, PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict

from englishai.models import ServiceDescriptor


class BaseServiceSettings(BaseSettings):
    """Common settings shared across all English AI services."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── General ───────────────────────────────
    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"
    service_name: str = "englishai"
    service_port: int = 8080
    display_name: str = "Service"

    # ── Health ────────────────────────────────
    health_deadline_ms: PositiveInt = 2000
    # JSON list in DOWNSTREAM_SERVICES, e.g. [{"name": "tts", "endpoint": "http://tts:8090/health"}]
    downstream_services: list[ServiceDescriptor] = Field(default_factory=list)

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def json_logs(self) -> bool:
        return self.is_production

    def service_descriptors(self) -> list[ServiceDescriptor]:
        """Dependencies to register at startup, in probe order."""
        return list(self.downstream_services)
