from __future__ import annotations

import httpx

from .config_types import ClientConfig
from .errors import ApiError, AuthError, NetworkError, NotFoundError


class Transport:
    def __init__(self, cfg: ClientConfig, *, http_transport: httpx.AsyncBaseTransport | None = None):
        self._cfg = cfg
        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(cfg.timeout_s),
            headers={"User-Agent": cfg.user_agent},
            follow_redirects=True,
            transport=http_transport,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def request(
            self,
            method: str,
            url: str,
            *,
            content: str | None = None,
            headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        try:
            r = await self._client.request(method, url, content=content, headers=headers)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise NetworkError(f"{method} {url} failed: {e}") from e

        if r.status_code >= 400:
            msg = f"{method} {url} failed with {r.status_code}"
            details = r.text[:1000] if r.text else None

            if r.status_code == 404:
                raise NotFoundError(r.status_code, msg, details)
            if r.status_code in (401, 403):
                raise AuthError(r.status_code, msg, details)
            raise ApiError(r.status_code, msg, details)

        return r
