"""Single-service health probe over HTTP."""

from __future__ import annotations

import asyncio
import time

import httpx
import structlog

from englishai.errors import ProbeNetworkError, ProbeTimeoutError
from englishai.models import ProbeResult, ProbeStatus, ServiceDescriptor

logger = structlog.get_logger()


class ServiceProbe:
    """Issues one ``GET`` to a service endpoint and classifies the outcome.

    ``check`` never raises: timeouts, connection failures and unreadable
    responses all come back as a ``ProbeResult``. There are no retries here;
    a failed probe is final for the aggregation cycle that issued it.

    Args:
        transport: Optional httpx transport, e.g. ``httpx.MockTransport`` to
            answer probes in-process.
        headers: Extra headers sent with every probe request.
    """

    def __init__(
        self,
        transport: httpx.AsyncBaseTransport | None = None,
        *,
        headers: dict[str, str] | None = None,
    ) -> None:
        self._transport = transport
        self._headers = {"User-Agent": "englishai-health-probe", **(headers or {})}

    async def check(self, descriptor: ServiceDescriptor) -> ProbeResult:
        started = time.perf_counter()
        try:
            response = await asyncio.wait_for(
                self._fetch(descriptor),
                timeout=descriptor.timeout_ms / 1000,
            )
        except asyncio.TimeoutError:
            exc = ProbeTimeoutError(descriptor.name, descriptor.timeout_ms)
            return self._result(descriptor, ProbeStatus.TIMEOUT, started, str(exc))
        except ProbeTimeoutError as exc:
            return self._result(descriptor, ProbeStatus.TIMEOUT, started, str(exc))
        except ProbeNetworkError as exc:
            status = ProbeStatus.UNKNOWN if exc.malformed else ProbeStatus.DOWN
            return self._result(descriptor, status, started, exc.reason)
        except Exception as exc:
            logger.exception("probe_unexpected_error", target=descriptor.name)
            return self._result(
                descriptor,
                ProbeStatus.UNKNOWN,
                started,
                f"{type(exc).__name__}: {exc}",
            )

        # Redirects are not followed; any answer below 400 means the service responded.
        if response.status_code < 400:
            return self._result(descriptor, ProbeStatus.UP, started)
        return self._result(
            descriptor,
            ProbeStatus.DOWN,
            started,
            f"HTTP {response.status_code}",
        )

    async def _fetch(self, descriptor: ServiceDescriptor) -> httpx.Response:
        """Perform the request, translating httpx failures to probe errors."""
        timeout = httpx.Timeout(descriptor.timeout_ms / 1000)
        try:
            async with httpx.AsyncClient(
                timeout=timeout,
                transport=self._transport,
                headers=self._headers,
            ) as client:
                return await client.get(descriptor.endpoint)
        except httpx.TimeoutException as exc:
            raise ProbeTimeoutError(descriptor.name, descriptor.timeout_ms) from exc
        except (httpx.ProtocolError, httpx.DecodingError) as exc:
            raise ProbeNetworkError(
                descriptor.name, f"malformed response: {exc}", malformed=True
            ) from exc
        except httpx.TransportError as exc:
            raise ProbeNetworkError(
                descriptor.name, f"{type(exc).__name__}: {exc}"
            ) from exc

    @staticmethod
    def _result(
        descriptor: ServiceDescriptor,
        status: ProbeStatus,
        started: float,
        detail: str | None = None,
    ) -> ProbeResult:
        latency_ms = (time.perf_counter() - started) * 1000
        if status is not ProbeStatus.UP:
            logger.warning(
                "probe_failed",
                target=descriptor.name,
                endpoint=descriptor.endpoint,
                status=status.value,
                latency_ms=round(latency_ms, 1),
                detail=detail,
            )
        return ProbeResult(
            service=descriptor.name,
            status=status,
            latency_ms=latency_ms,
            detail=detail,
        )
