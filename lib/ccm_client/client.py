from __future__ import annotations

import logging
from dataclasses import replace

import httpx

from .config_types import DEFAULT_BASE_URL, DEFAULT_ENVIRONMENT, DEFAULT_PROJECT, ClientConfig
from .errors import CcmClientError, NotFoundError
from .transport import Transport

logger = logging.getLogger(__name__)


class ConfigClient:
    """Reads and writes string entries addressed by (project, environment, key).

    Every call is a fresh round trip; nothing is cached between calls.
    """

    def __init__(
            self,
            base_url: str = DEFAULT_BASE_URL,
            *,
            timeout_s: float | None = None,
            user_agent: str | None = None,
            http_transport: httpx.AsyncBaseTransport | None = None,
    ):
        cfg = ClientConfig(base_url=base_url, timeout_s=timeout_s)
        if user_agent:
            cfg = replace(cfg, user_agent=user_agent)
        self._cfg = cfg
        self._t = Transport(cfg, http_transport=http_transport)

    @property
    def base_url(self) -> str:
        return self._cfg.base_url

    async def aclose(self) -> None:
        await self._t.aclose()

    async def __aenter__(self) -> "ConfigClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    def entry_url(self, key: str, project: str = DEFAULT_PROJECT, environment: str = DEFAULT_ENVIRONMENT) -> str:
        # segments are interpolated as-is, no escaping
        return f"{self._cfg.base_url}/{project}/{environment}/{key}"

    async def get(
            self,
            key: str,
            default_value: str,
            project: str = DEFAULT_PROJECT,
            environment: str = DEFAULT_ENVIRONMENT,
    ) -> str:
        """Return the live value of an entry, or ``default_value`` when the service answers 404.

        Any other failure is logged and re-raised.
        """
        url = self.entry_url(key, project, environment)
        try:
            r = await self._t.request("GET", url)
        except NotFoundError:
            logger.warning('Key "%s" not found. Returning default value: %s', key, default_value)
            return default_value
        except CcmClientError as e:
            logger.error("Error fetching configuration: %s", e)
            raise
        return r.text

    async def set(
            self,
            key: str,
            value: str,
            project: str = DEFAULT_PROJECT,
            environment: str = DEFAULT_ENVIRONMENT,
    ) -> None:
        url = self.entry_url(key, project, environment)
        try:
            await self._t.request("PUT", url, content=value, headers={"Content-Type": "text/plain"})
        except CcmClientError as e:
            logger.error("Error updating configuration: %s", e)
            raise
        logger.info("Configuration updated: %s = %s", key, value)
