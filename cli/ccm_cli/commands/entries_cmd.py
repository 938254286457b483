from __future__ import annotations

import asyncio

import typer
from ccm_client import CcmClientError, ConfigClient

from .. import console
from ..config import AppConfig, ProfileNotFoundError, apply_profile, load_config
from ..http import make_client


def _effective_config(profile: str | None) -> AppConfig:
    try:
        return apply_profile(load_config(), profile)
    except ProfileNotFoundError:
        console.err(f"Unknown profile: {profile}")
        raise typer.Exit(code=2)


async def _get(client: ConfigClient, key: str, default: str, project: str, environment: str) -> str:
    async with client:
        return await client.get(key, default, project, environment)


async def _set(client: ConfigClient, key: str, value: str, project: str, environment: str) -> None:
    async with client:
        await client.set(key, value, project, environment)


def get_entry(
        key: str = typer.Argument(..., help="Entry key, e.g. app.endpoint.url."),
        default: str = typer.Option("", "--default", "-d", help="Value printed when the key does not exist."),
        project: str | None = typer.Option(None, "--project", "-p", help="Project scope."),
        environment: str | None = typer.Option(None, "--env", "-e", help="Environment scope."),
        profile: str | None = typer.Option(None, "--profile", help="Settings profile to use."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print the entry as JSON."),
):
    cfg = _effective_config(profile)
    project = project or cfg.project
    environment = environment or cfg.environment
    client = make_client(cfg, base_url_override=base_url)
    try:
        value = asyncio.run(_get(client, key, default, project, environment))
    except CcmClientError as e:
        console.err(f"Failed to fetch {key}: {e}")
        raise typer.Exit(code=2)

    if json_out:
        console.print_json({"project": project, "environment": environment, "key": key, "value": value})
        return
    console.value(value)


def set_entry(
        key: str = typer.Argument(..., help="Entry key, e.g. app.endpoint.url."),
        value: str = typer.Argument(..., help="New value (stored as plain text)."),
        project: str | None = typer.Option(None, "--project", "-p", help="Project scope."),
        environment: str | None = typer.Option(None, "--env", "-e", help="Environment scope."),
        profile: str | None = typer.Option(None, "--profile", help="Settings profile to use."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    cfg = _effective_config(profile)
    project = project or cfg.project
    environment = environment or cfg.environment
    client = make_client(cfg, base_url_override=base_url)
    try:
        asyncio.run(_set(client, key, value, project, environment))
    except CcmClientError as e:
        console.err(f"Failed to update {key}: {e}")
        raise typer.Exit(code=2)
    console.ok(f"{project}/{environment}/{key} updated.")
