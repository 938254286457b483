from __future__ import annotations

import os

import typer

from .. import console
from ..config import (
    AppConfig,
    ProfileConfig,
    config_path,
    default_config,
    load_config,
    normalize_base_url,
    save_config,
)

app = typer.Typer(help="Manage local CLI settings (~/.config/ccm/config.toml).")

SETTING_KEYS = ("base_url", "project", "environment", "timeout_s")


@app.command("init")
def init_settings(
        force: bool = typer.Option(False, "--force", help="Overwrite existing config."),
        base_url: str = typer.Option(
            ...,
            "--base-url",
            prompt="Config service base URL",
            help="Config service base URL like http://localhost:8080/config",
        ),
):
    path = config_path()
    if os.path.exists(path) and not force:
        console.info(f"Config already exists: {path}")
        console.info("Use --force to overwrite.")
        return

    cfg = default_config()
    cfg.base_url = normalize_base_url(base_url, warn=True)
    if not cfg.base_url:
        console.err("Base URL cannot be empty.")
        raise typer.Exit(code=2)
    saved = save_config(cfg)
    console.ok(f"Config written: {saved}")


def _fmt_timeout(timeout_s: float | None, unset: str) -> str:
    return unset if timeout_s is None else f"{timeout_s:g}s"


@app.command("show")
def show_settings():
    cfg = load_config()
    timeout = _fmt_timeout(cfg.timeout_s, "none")
    console.out.print(
        f"base_url={cfg.base_url} project={cfg.project} environment={cfg.environment} timeout={timeout}",
        markup=False,
        highlight=False,
    )
    for name, prof in sorted(cfg.profiles.items()):
        console.out.print(
            f"profile {name}: base_url={prof.base_url or '-'} project={prof.project or '-'} "
            f"environment={prof.environment or '-'} timeout={_fmt_timeout(prof.timeout_s, '-')}",
            markup=False,
            highlight=False,
        )


@app.command("get")
def get_setting(
        key: str = typer.Argument(..., help="Setting key (base_url, project, environment, timeout_s)."),
):
    cfg = load_config()
    k = key.strip().lower()
    if k not in SETTING_KEYS:
        console.err(f"Unknown setting: {key}")
        raise typer.Exit(code=2)
    value = getattr(cfg, k)
    console.value("" if value is None else str(value))


@app.command("set")
def set_setting(
        base_url: str | None = typer.Option(None, "--base-url", help="Set config service base URL."),
        project: str | None = typer.Option(None, "--project", help="Set default project."),
        environment: str | None = typer.Option(None, "--env", help="Set default environment."),
        timeout_s: float | None = typer.Option(None, "--timeout", help="Request timeout in seconds (0 disables)."),
        profile: str | None = typer.Option(None, "--profile", help="Write into [profiles.NAME] instead of the defaults."),
):
    cfg = load_config()
    target: AppConfig | ProfileConfig = cfg
    if profile is not None:
        name = profile.strip()
        if not name:
            console.err("Profile name cannot be empty.")
            raise typer.Exit(code=2)
        target = cfg.profiles.setdefault(name, ProfileConfig())

    if base_url is not None:
        normalized = normalize_base_url(base_url, warn=True)
        if not normalized:
            console.err("Base URL cannot be empty.")
            raise typer.Exit(code=2)
        target.base_url = normalized
    if project is not None and project.strip():
        target.project = project.strip()
    if environment is not None and environment.strip():
        target.environment = environment.strip()
    if timeout_s is not None:
        target.timeout_s = timeout_s if timeout_s > 0 else None
    saved = save_config(cfg)
    if profile is not None:
        console.ok(f"Profile {profile.strip()} updated: {saved}")
    else:
        console.ok(f"Settings updated: {saved}")
