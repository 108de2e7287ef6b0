"""Tests for HttpTransportGateway."""

import asyncio
import logging
import time

import httpx
import pytest

from finagg.domain.integration.exceptions import TransportError, TransportErrorKind
from finagg.infrastructure.http import HttpTransportGateway


def _gateway(handler, base_url: str = "http://backend.test") -> HttpTransportGateway:
    return HttpTransportGateway(
        base_url=base_url,
        timeout=10.0,
        transport=httpx.MockTransport(handler),
    )


class TestHttpTransportGatewayInit:
    def test_default_timeout_is_ten_seconds(self):
        assert HttpTransportGateway().timeout == 10.0

    def test_base_url_trailing_slash_removed(self):
        gateway = HttpTransportGateway(base_url="http://backend.test/")

        assert gateway.base_url == "http://backend.test"

    def test_empty_base_url_is_same_origin(self):
        assert HttpTransportGateway(base_url="").base_label == "(same-origin)"


class TestSend:
    @pytest.mark.asyncio
    async def test_returns_response(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"status": "healthy"})

        async with _gateway(handler) as gateway:
            response = await gateway.send("get", "/health")

        assert response.status_code == 200
        assert seen[0].method == "GET"
        assert str(seen[0].url) == "http://backend.test/health"

    @pytest.mark.asyncio
    async def test_error_status_is_passed_through(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, json={"success": False, "message": "boom"})

        async with _gateway(handler) as gateway:
            response = await gateway.send("POST", "/api/accounts/acc-1/refresh")

        assert response.status_code == 500
        assert response.json()["message"] == "boom"

    @pytest.mark.asyncio
    async def test_none_params_are_dropped(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"success": True})

        async with _gateway(handler) as gateway:
            await gateway.send(
                "GET",
                "/api/transactions",
                params={"account_id": "acc-1", "type": None, "limit": 10},
            )

        assert dict(seen[0].url.params) == {"account_id": "acc-1", "limit": "10"}

    @pytest.mark.asyncio
    async def test_timeout_raises_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        async with _gateway(handler) as gateway:
            with pytest.raises(TransportError) as exc_info:
                await gateway.send("GET", "/api/accounts")

        assert exc_info.value.kind == TransportErrorKind.TIMEOUT
        assert exc_info.value.details["path"] == "/api/accounts"

    @pytest.mark.asyncio
    async def test_connection_failure_is_unreachable(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with _gateway(handler) as gateway:
            with pytest.raises(TransportError) as exc_info:
                await gateway.send("GET", "/api/accounts")

        assert exc_info.value.kind == TransportErrorKind.UNREACHABLE

    @pytest.mark.asyncio
    async def test_logs_request_and_outcome(self, caplog):
        caplog.set_level(logging.DEBUG, logger="finagg")

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"success": True})

        async with _gateway(handler) as gateway:
            await gateway.send("GET", "/api/accounts")

        messages = [
            r.getMessage() for r in caplog.records if r.name.startswith("finagg")
        ]
        assert "GET http://backend.test/api/accounts" in messages
        assert any("-> 200" in m for m in messages)

    @pytest.mark.asyncio
    async def test_close_is_idempotent(self):
        gateway = _gateway(lambda request: httpx.Response(200))
        await gateway.send("GET", "/health")

        await gateway.close()
        await gateway.close()


class TestWholeCallTimeout:
    @pytest.mark.asyncio
    async def test_slow_body_stream_times_out(self):
        async def trickle():
            for _ in range(10):
                await asyncio.sleep(0.1)
                yield b" "

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=trickle())

        gateway = HttpTransportGateway(
            base_url="http://backend.test",
            timeout=0.3,
            transport=httpx.MockTransport(handler),
        )
        started = time.perf_counter()
        async with gateway:
            with pytest.raises(TransportError) as exc_info:
                await gateway.send("GET", "/health")

        assert exc_info.value.kind == TransportErrorKind.TIMEOUT
        assert time.perf_counter() - started < 0.9

    @pytest.mark.asyncio
    async def test_local_server_dripping_bytes_times_out(self):
        async def handle(reader, writer):
            await reader.readuntil(b"\r\n\r\n")
            writer.write(
                b"HTTP/1.1 200 OK\r\n"
                b"Content-Type: application/json\r\n"
                b"Content-Length: 64\r\n\r\n"
            )
            try:
                for chunk in (b'{"status"', b': "ok",', b' "a": 1', b", "):
                    await writer.drain()
                    await asyncio.sleep(0.25)
                    writer.write(chunk)
            except ConnectionError:
                pass
            finally:
                writer.close()

        server = await asyncio.start_server(handle, "127.0.0.1", 0)
        port = server.sockets[0].getsockname()[1]
        try:
            gateway = HttpTransportGateway(
                base_url=f"http://127.0.0.1:{port}",
                timeout=0.5,
                transport=httpx.AsyncHTTPTransport(),
            )
            started = time.perf_counter()
            async with gateway:
                with pytest.raises(TransportError) as exc_info:
                    await gateway.send("GET", "/health")
            elapsed = time.perf_counter() - started
        finally:
            server.close()
            await server.wait_closed()

        assert exc_info.value.kind == TransportErrorKind.TIMEOUT
        assert elapsed < 0.9
