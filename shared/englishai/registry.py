"""Registry of backend services known to a process."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

import structlog

from englishai.errors import DuplicateServiceError
from englishai.models import ServiceDescriptor

logger = structlog.get_logger()


class ProbeRegistry:
    """Ordered set of ``ServiceDescriptor`` keyed by name.

    Populated at startup and read-only afterwards; ``list`` hands out an
    immutable snapshot so concurrent aggregation cycles need no locking.
    """

    def __init__(self) -> None:
        self._services: dict[str, ServiceDescriptor] = {}

    @classmethod
    def from_descriptors(cls, descriptors: Iterable[ServiceDescriptor]) -> ProbeRegistry:
        registry = cls()
        for descriptor in descriptors:
            registry.register(descriptor)
        return registry

    def register(self, descriptor: ServiceDescriptor) -> None:
        if descriptor.name in self._services:
            raise DuplicateServiceError(descriptor.name)
        self._services[descriptor.name] = descriptor
        logger.info(
            "service_registered",
            target=descriptor.name,
            endpoint=descriptor.endpoint,
            timeout_ms=descriptor.timeout_ms,
        )

    def list(self) -> tuple[ServiceDescriptor, ...]:
        """Descriptors in registration order."""
        return tuple(self._services.values())

    def get(self, name: str) -> ServiceDescriptor | None:
        return self._services.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._services

    def __iter__(self) -> Iterator[ServiceDescriptor]:
        return iter(self.list())

    def __len__(self) -> int:
        return len(self._services)
