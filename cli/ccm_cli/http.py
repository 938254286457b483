from __future__ import annotations

from importlib import metadata

from ccm_client import ConfigClient

from .config import AppConfig, normalize_base_url, resolve_base_url


def cli_version() -> str:
    try:
        return metadata.version("ccm-client")
    except metadata.PackageNotFoundError:
        return "0.0.0"


def make_client(cfg: AppConfig, *, base_url_override: str | None = None) -> ConfigClient:
    base_url = normalize_base_url(base_url_override, warn=True) if base_url_override else resolve_base_url(cfg)
    return ConfigClient(base_url, timeout_s=cfg.timeout_s, user_agent=f"ccm-cli/{cli_version()}")
