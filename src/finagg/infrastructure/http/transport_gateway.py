"""HTTP transport for the aggregator service.

Wraps a single httpx.AsyncClient. Every call gets the same timeout and two
log records (request and outcome). A response that arrives is always
returned as-is whatever its status code; only calls that never produce a
response are turned into TransportError.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, Mapping

import httpx

from finagg.domain.integration.exceptions import TransportError, TransportErrorKind

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0
SAME_ORIGIN_LABEL = "(same-origin)"


class HttpTransportGateway:
    """Thin async HTTP gateway with a fixed timeout."""

    def __init__(
        self,
        base_url: str = "",
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def base_label(self) -> str:
        return self._base_url or SAME_ORIGIN_LABEL

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                headers={"Content-Type": "application/json"},
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> HttpTransportGateway:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def send(
        self,
        method: str,
        path: str,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
    ) -> httpx.Response:
        """Send a request and return whatever response comes back.

        Raises TransportError when the timeout expires or the service
        cannot be reached.
        """
        method = method.upper()
        query = {k: v for k, v in (params or {}).items() if v is not None}
        logger.debug("%s %s%s", method, self.base_label, path)

        started = time.perf_counter()
        try:
            # httpx applies its timeout per phase; this bounds the whole call
            async with asyncio.timeout(self._timeout):
                response = await self._get_client().request(
                    method,
                    path,
                    params=query or None,
                    json=json,
                )
        except (httpx.TimeoutException, TimeoutError) as e:
            logger.warning(
                "%s %s timed out after %.1fs: %s",
                method,
                path,
                self._timeout,
                e,
            )
            raise TransportError(
                TransportErrorKind.TIMEOUT,
                details={"method": method, "path": path, "timeout": self._timeout},
            ) from e
        except httpx.TransportError as e:
            logger.warning(
                "%s %s failed (%s): %s",
                method,
                path,
                type(e).__name__,
                e,
            )
            raise TransportError(
                TransportErrorKind.UNREACHABLE,
                details={"method": method, "path": path, "reason": str(e)},
            ) from e

        elapsed_ms = (time.perf_counter() - started) * 1000
        if response.is_error:
            logger.warning(
                "%s %s -> %d (%.0f ms): %s",
                method,
                path,
                response.status_code,
                elapsed_ms,
                response.text[:200] if response.text else "no body",
            )
        else:
            logger.debug(
                "%s %s -> %d (%.0f ms)",
                method,
                path,
                response.status_code,
                elapsed_ms,
            )
        return response
