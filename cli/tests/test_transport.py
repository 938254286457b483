from __future__ import annotations

import asyncio

import httpx
import pytest

from ccm_client.config_types import ClientConfig
from ccm_client.errors import ApiError, AuthError, NetworkError, NotFoundError
from ccm_client.transport import Transport


def _request(status_code: int, body: str = "") -> httpx.Response | Exception:
    def _handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, text=body)

    async def _run():
        t = Transport(ClientConfig(), http_transport=httpx.MockTransport(_handler))
        try:
            return await t.request("GET", "http://cfg.test/config/p/e/k")
        finally:
            await t.aclose()

    try:
        return asyncio.run(_run())
    except Exception as e:
        return e


def test_success_returns_response() -> None:
    r = _request(200, "value")
    assert isinstance(r, httpx.Response)
    assert r.text == "value"


def test_404_maps_to_not_found() -> None:
    e = _request(404, "Key not found")
    assert isinstance(e, NotFoundError)
    assert e.status_code == 404
    assert e.details == "Key not found"
    assert str(e) == "GET http://cfg.test/config/p/e/k failed with 404"


@pytest.mark.parametrize("status_code", [401, 403])
def test_auth_statuses_map_to_auth_error(status_code: int) -> None:
    e = _request(status_code)
    assert isinstance(e, AuthError)
    assert e.details is None


def test_server_error_maps_to_api_error() -> None:
    e = _request(503, "x" * 2000)
    assert type(e) is ApiError
    assert len(e.details) == 1000


def test_request_error_maps_to_network_error() -> None:
    def _handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    async def _run():
        t = Transport(ClientConfig(), http_transport=httpx.MockTransport(_handler))
        try:
            await t.request("GET", "http://cfg.test/config/p/e/k")
        finally:
            await t.aclose()

    with pytest.raises(NetworkError) as exc:
        asyncio.run(_run())
    assert isinstance(exc.value.__cause__, httpx.ReadTimeout)


def test_user_agent_header_is_sent() -> None:
    seen = {}

    def _handler(request: httpx.Request) -> httpx.Response:
        seen["ua"] = request.headers.get("User-Agent")
        return httpx.Response(200)

    async def _run():
        t = Transport(ClientConfig(user_agent="ccm-cli/9.9.9"), http_transport=httpx.MockTransport(_handler))
        try:
            await t.request("GET", "http://cfg.test/")
        finally:
            await t.aclose()

    asyncio.run(_run())
    assert seen["ua"] == "ccm-cli/9.9.9"


def test_no_timeout_by_default() -> None:
    t = Transport(ClientConfig())
    timeout = t._client.timeout
    assert (timeout.connect, timeout.read, timeout.write, timeout.pool) == (None, None, None, None)
    asyncio.run(t.aclose())


def test_timeout_is_passed_through() -> None:
    t = Transport(ClientConfig(timeout_s=3.0))
    timeout = t._client.timeout
    assert (timeout.connect, timeout.read, timeout.write, timeout.pool) == (3.0, 3.0, 3.0, 3.0)
    asyncio.run(t.aclose())


def test_invalid_url_maps_to_network_error(monkeypatch) -> None:
    t = Transport(ClientConfig())

    async def _bad_request(*_args, **_kwargs):
        raise httpx.InvalidURL("Invalid non-printable ASCII character in URL")

    monkeypatch.setattr(t._client, "request", _bad_request)

    async def _run():
        try:
            await t.request("GET", "http://cfg.test/config/p/e/\x00")
        finally:
            await t.aclose()

    with pytest.raises(NetworkError) as exc:
        asyncio.run(_run())
    assert isinstance(exc.value.__cause__, httpx.InvalidURL)
