from __future__ import annotations

import httpx
import pytest


class FakeConfigService:
    """In-memory stand-in for the configuration service, keyed by URL path."""

    def __init__(self) -> None:
        self.store: dict[str, str] = {}
        self.requests: list[httpx.Request] = []
        self.fail_with: int | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_with is not None:
            return httpx.Response(self.fail_with, text="boom")
        path = request.url.path
        if request.method == "GET":
            if path not in self.store:
                return httpx.Response(404, text="Key not found")
            return httpx.Response(200, text=self.store[path])
        if request.method == "PUT":
            self.store[path] = request.content.decode("utf-8")
            return httpx.Response(200, text="Configuration updated successfully")
        return httpx.Response(405)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def fake_service() -> FakeConfigService:
    return FakeConfigService()
