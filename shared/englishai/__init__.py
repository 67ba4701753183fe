"""English AI shared health and service utilities."""

from englishai.aggregator import HealthAggregator, reduce_status
from englishai.config import BaseServiceSettings
from englishai.errors import (
    DuplicateServiceError,
    HealthError,
    ProbeNetworkError,
    ProbeTimeoutError,
)
from englishai.logging import setup_logging
from englishai.models import (
    AggregateStatus,
    OverallStatus,
    ProbeResult,
    ProbeStatus,
    ServiceDescriptor,
)
from englishai.probe import ServiceProbe
from englishai.registry import ProbeRegistry
from englishai.reporter import StatusReport, StatusReporter, build_status_reporter

__all__ = [
    "AggregateStatus",
    "BaseServiceSettings",
    "DuplicateServiceError",
    "HealthAggregator",
    "HealthError",
    "OverallStatus",
    "ProbeNetworkError",
    "ProbeRegistry",
    "ProbeResult",
    "ProbeStatus",
    "ProbeTimeoutError",
    "ServiceDescriptor",
    "ServiceProbe",
    "StatusReport",
    "StatusReporter",
    "build_status_reporter",
    "reduce_status",
    "setup_logging",
]
