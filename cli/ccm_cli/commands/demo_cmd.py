from __future__ import annotations

import asyncio

import typer
from ccm_client import CcmClientError, ConfigClient

from .. import console
from ..config import load_config
from ..http import make_client

DEMO_URL = "http://localhost:2021/paulservice"
DEMO_URL_DEFAULT = "http://default.api.example.com"
DEMO_TIMEOUT = "1000"
DEMO_TIMEOUT_DEFAULT = "5000"


async def run_demo(client: ConfigClient) -> dict[str, str]:
    """Walk through a set/get sequence against the default scope and return what was read back."""
    await client.set("app.endpoint.url", DEMO_URL)
    console.ok("Configuration updated successfully.")

    await client.set("app.endpoint.timeout", DEMO_TIMEOUT)
    console.ok("Configuration updated successfully.")

    timeout = await client.get("app.endpoint.timeout", DEMO_TIMEOUT_DEFAULT)
    console.info(f"Timeout: {timeout}")

    url = await client.get("app.endpoint.url", DEMO_URL_DEFAULT)
    console.info(f"URL: {url}")

    await client.set("app.endpoint.url", DEMO_URL)
    console.ok("Configuration updated successfully.")

    updated_url = await client.get("app.endpoint.url", DEMO_URL_DEFAULT)
    console.info(f"Updated URL: {updated_url}")

    return {"timeout": timeout, "url": url, "updated_url": updated_url}


async def _run(client: ConfigClient) -> dict[str, str]:
    async with client:
        return await run_demo(client)


def demo(
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    """Run the example set/get sequence against the configuration service."""
    client = make_client(load_config(), base_url_override=base_url)
    try:
        asyncio.run(_run(client))
    except CcmClientError as e:
        console.err(f"Error in demo: {e}")
        raise typer.Exit(code=1)
