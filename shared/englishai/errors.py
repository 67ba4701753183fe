"""Exceptions raised while registering and probing services."""

from __future__ import annotations


class HealthError(Exception):
    """Base class for health-layer errors."""


class DuplicateServiceError(HealthError):
    """A service with the same name is already registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"service {name!r} is already registered")
        self.name = name


class ProbeTimeoutError(HealthError):
    """The probe did not get a response within the service timeout."""

    def __init__(self, service: str, timeout_ms: int) -> None:
        super().__init__(f"{service} did not respond within {timeout_ms}ms")
        self.service = service
        self.timeout_ms = timeout_ms


class ProbeNetworkError(HealthError):
    """The probe could not obtain a usable response.

    ``malformed`` is set when the peer answered but the response could not
    be read (protocol or decoding error).
    """

    def __init__(self, service: str, reason: str, *, malformed: bool = False) -> None:
        super().__init__(f"{service}: {reason}")
        self.service = service
        self.reason = reason
        self.malformed = malformed
