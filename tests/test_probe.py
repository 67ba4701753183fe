"""Tests for ServiceProbe against an in-process httpx transport."""

from __future__ import annotations

import asyncio

import httpx
import pytest

from englishai.models import ProbeStatus
from englishai.probe import ServiceProbe

from tests.fakes import descriptor


def probe_answering(handler) -> tuple[ServiceProbe, list[httpx.Request]]:
    seen: list[httpx.Request] = []

    async def record(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        result = handler(request)
        if asyncio.iscoroutine(result):
            result = await result
        return result

    return ServiceProbe(transport=httpx.MockTransport(record)), seen


class TestResponses:
    @pytest.mark.asyncio
    async def test_success_is_up(self) -> None:
        probe, seen = probe_answering(lambda r: httpx.Response(200, json={"status": "UP"}))

        result = await probe.check(descriptor("ai"))

        assert result.service == "ai"
        assert result.status == ProbeStatus.UP
        assert result.latency_ms >= 0
        assert result.detail is None
        assert len(seen) == 1
        assert str(seen[0].url) == "http://ai.internal/health"
        assert seen[0].method == "GET"

    @pytest.mark.asyncio
    async def test_any_content_counts_as_up(self) -> None:
        probe, _ = probe_answering(lambda r: httpx.Response(200, text="not json"))

        result = await probe.check(descriptor("ai"))

        assert result.status == ProbeStatus.UP

    @pytest.mark.asyncio
    @pytest.mark.parametrize("code", [404, 500, 503])
    async def test_error_status_is_down(self, code: int) -> None:
        probe, seen = probe_answering(lambda r: httpx.Response(code))

        result = await probe.check(descriptor("writing"))

        assert result.status == ProbeStatus.DOWN
        assert result.detail == f"HTTP {code}"
        assert len(seen) == 1  # no retries


    @pytest.mark.asyncio
    async def test_redirect_is_up_without_following(self) -> None:
        probe, seen = probe_answering(
            lambda r: httpx.Response(302, headers={"Location": "/actuator/health"})
        )

        result = await probe.check(descriptor("ai"))

        assert result.status == ProbeStatus.UP
        assert [str(r.url) for r in seen] == ["http://ai.internal/health"]

    @pytest.mark.asyncio
    async def test_not_modified_is_up(self) -> None:
        probe, seen = probe_answering(lambda r: httpx.Response(304))

        result = await probe.check(descriptor("ai"))

        assert result.status == ProbeStatus.UP
        assert len(seen) == 1


class TestFailures:
    @pytest.mark.asyncio
    async def test_connection_refused_is_down(self) -> None:
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        probe, _ = probe_answering(refuse)

        result = await probe.check(descriptor("ai"))

        assert result.status == ProbeStatus.DOWN
        assert "ConnectError" in result.detail

    @pytest.mark.asyncio
    async def test_protocol_error_is_unknown(self) -> None:
        def garble(request: httpx.Request) -> httpx.Response:
            raise httpx.RemoteProtocolError("illegal header", request=request)

        probe, _ = probe_answering(garble)

        result = await probe.check(descriptor("ai"))

        assert result.status == ProbeStatus.UNKNOWN
        assert "malformed" in result.detail

    @pytest.mark.asyncio
    async def test_unexpected_error_is_unknown(self) -> None:
        def explode(request: httpx.Request) -> httpx.Response:
            raise RuntimeError("boom")

        probe, _ = probe_answering(explode)

        result = await probe.check(descriptor("ai"))

        assert result.status == ProbeStatus.UNKNOWN
        assert result.detail == "RuntimeError: boom"

    @pytest.mark.asyncio
    async def test_httpx_timeout_is_timeout(self) -> None:
        def slow(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("read timed out", request=request)

        probe, _ = probe_answering(slow)

        result = await probe.check(descriptor("ai", timeout_ms=250))

        assert result.status == ProbeStatus.TIMEOUT

    @pytest.mark.asyncio
    async def test_no_response_within_timeout(self) -> None:
        async def never(request: httpx.Request) -> httpx.Response:
            await asyncio.sleep(10)
            return httpx.Response(200)

        probe, _ = probe_answering(never)

        loop = asyncio.get_running_loop()
        started = loop.time()
        result = await probe.check(descriptor("writing", timeout_ms=100))
        elapsed = loop.time() - started

        assert result.status == ProbeStatus.TIMEOUT
        assert 90 <= result.latency_ms < 1000
        assert elapsed < 1.0
