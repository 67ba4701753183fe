"""Shared fixtures."""

from __future__ import annotations

import os

import pytest

# Keep test runs independent of a developer's .env / shell
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from englishai.registry import ProbeRegistry

from tests.fakes import descriptor


@pytest.fixture
def two_service_registry() -> ProbeRegistry:
    return ProbeRegistry.from_descriptors([descriptor("ai"), descriptor("writing")])
