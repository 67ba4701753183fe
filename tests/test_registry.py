"""Tests for ProbeRegistry."""

from __future__ import annotations

import pytest

from englishai.errors import DuplicateServiceError
from englishai.models import ServiceDescriptor
from englishai.registry import ProbeRegistry

from tests.fakes import descriptor


class TestRegister:
    def test_list_preserves_registration_order(self) -> None:
        registry = ProbeRegistry()
        for name in ("writing", "ai", "tts"):
            registry.register(descriptor(name))

        assert [d.name for d in registry.list()] == ["writing", "ai", "tts"]
        assert len(registry) == 3

    def test_duplicate_name_rejected_and_registry_unchanged(self) -> None:
        registry = ProbeRegistry()
        original = descriptor("ai", timeout_ms=500)
        registry.register(original)

        with pytest.raises(DuplicateServiceError) as exc_info:
            registry.register(descriptor("ai", timeout_ms=900))

        assert exc_info.value.name == "ai"
        assert registry.list() == (original,)
        assert registry.get("ai").timeout_ms == 500

    def test_from_descriptors_fails_on_duplicates(self) -> None:
        with pytest.raises(DuplicateServiceError):
            ProbeRegistry.from_descriptors([descriptor("ai"), descriptor("ai")])

    def test_list_is_a_snapshot(self) -> None:
        registry = ProbeRegistry.from_descriptors([descriptor("ai")])
        snapshot = registry.list()
        registry.register(descriptor("writing"))

        assert len(snapshot) == 1
        assert len(registry.list()) == 2

    def test_membership_and_lookup(self, two_service_registry: ProbeRegistry) -> None:
        assert "ai" in two_service_registry
        assert "tts" not in two_service_registry
        assert two_service_registry.get("tts") is None
        assert [d.name for d in two_service_registry] == ["ai", "writing"]


class TestServiceDescriptor:
    def test_default_timeout(self) -> None:
        d = ServiceDescriptor(name="ai", endpoint="http://ai/health")
        assert d.timeout_ms == 1000

    def test_rejects_non_positive_timeout(self) -> None:
        with pytest.raises(ValueError):
            ServiceDescriptor(name="ai", endpoint="http://ai/health", timeout_ms=0)

    def test_rejects_empty_name(self) -> None:
        with pytest.raises(ValueError):
            ServiceDescriptor(name="", endpoint="http://ai/health")

    def test_is_immutable(self) -> None:
        d = descriptor("ai")
        with pytest.raises(ValueError):
            d.name = "writing"
