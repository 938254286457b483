from __future__ import annotations

import os
import sys
import tomllib
from dataclasses import dataclass, field, replace
from typing import Any

import tomli_w
from platformdirs import user_config_dir
from ccm_client.config_types import DEFAULT_BASE_URL, DEFAULT_ENVIRONMENT, DEFAULT_PROJECT

from . import console

APP_NAME = "ccm"
CONFIG_FILENAME = "config.toml"
ENV_BASE_URL = "CCM_BASE_URL"

_WARNED_BASE_URL_SCHEME = False


class ProfileNotFoundError(KeyError):
    """No [profiles.<name>] table with that name."""


@dataclass
class ProfileConfig:
    base_url: str | None = None
    project: str | None = None
    environment: str | None = None
    timeout_s: float | None = None


@dataclass
class AppConfig:
    base_url: str = DEFAULT_BASE_URL
    project: str = DEFAULT_PROJECT
    environment: str = DEFAULT_ENVIRONMENT
    timeout_s: float | None = None
    profiles: dict[str, ProfileConfig] = field(default_factory=dict)


def config_path() -> str:
    return os.path.join(user_config_dir(APP_NAME), CONFIG_FILENAME)


def default_config() -> AppConfig:
    return AppConfig()


def normalize_base_url(raw: str | None, *, warn: bool = False) -> str:
    value = (raw or "").strip()
    if not value:
        return ""
    value = value.rstrip("/")
    lowered = value.lower()
    if lowered.startswith("http://") or lowered.startswith("https://"):
        return value

    host = value.split("/", 1)[0]
    host = host.split(":", 1)[0].lower()
    if host in {"localhost", "127.0.0.1", "0.0.0.0"}:
        scheme = "http://"
    else:
        scheme = "https://"

    normalized = f"{scheme}{value}"
    if warn:
        _warn_missing_scheme(normalized)
    return normalized


def _warn_missing_scheme(normalized: str) -> None:
    global _WARNED_BASE_URL_SCHEME
    if _WARNED_BASE_URL_SCHEME:
        return
    if not (sys.stderr.isatty() or sys.stdout.isatty()):
        return
    console.warn(f"base_url missing scheme, assuming {normalized}")
    _WARNED_BASE_URL_SCHEME = True


def _parse_timeout(raw: Any) -> float | None:
    if raw is None or isinstance(raw, bool):
        return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    return value if value > 0 else None


def _parse_str(raw: Any) -> str | None:
    value = str(raw or "").strip()
    return value or None


def to_toml(cfg: AppConfig) -> dict[str, Any]:
    return _prune_none(
        {
            "base_url": cfg.base_url,
            "project": cfg.project,
            "environment": cfg.environment,
            "timeout_s": cfg.timeout_s,
            "profiles": {
                name: {
                    "base_url": p.base_url,
                    "project": p.project,
                    "environment": p.environment,
                    "timeout_s": p.timeout_s,
                }
                for name, p in cfg.profiles.items()
            },
        }
    )


def _prune_none(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _prune_none(v) for k, v in value.items() if v is not None}
    return value


def from_toml(data: dict[str, Any]) -> AppConfig:
    cfg = default_config()
    base_url = normalize_base_url(_parse_str(data.get("base_url")), warn=True)
    if base_url:
        cfg.base_url = base_url
    cfg.project = _parse_str(data.get("project")) or cfg.project
    cfg.environment = _parse_str(data.get("environment")) or cfg.environment
    cfg.timeout_s = _parse_timeout(data.get("timeout_s"))

    profiles_raw = data.get("profiles") or {}
    if isinstance(profiles_raw, dict):
        for name, prof in profiles_raw.items():
            if not isinstance(prof, dict):
                continue
            cfg.profiles[str(name)] = ProfileConfig(
                base_url=normalize_base_url(_parse_str(prof.get("base_url")), warn=True) or None,
                project=_parse_str(prof.get("project")),
                environment=_parse_str(prof.get("environment")),
                timeout_s=_parse_timeout(prof.get("timeout_s")),
            )
    return cfg


def load_config() -> AppConfig:
    path = config_path()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
        return from_toml(data)
    except FileNotFoundError:
        return default_config()


def apply_profile(cfg: AppConfig, profile: str | None) -> AppConfig:
    if not profile:
        return cfg
    prof = cfg.profiles.get(profile)
    if prof is None:
        raise ProfileNotFoundError(profile)
    return replace(
        cfg,
        base_url=prof.base_url or cfg.base_url,
        project=prof.project or cfg.project,
        environment=prof.environment or cfg.environment,
        timeout_s=prof.timeout_s if prof.timeout_s is not None else cfg.timeout_s,
    )


def resolve_base_url(cfg: AppConfig) -> str:
    env_value = os.getenv(ENV_BASE_URL, "").strip()
    if env_value:
        return normalize_base_url(env_value)
    return cfg.base_url


def save_config(cfg: AppConfig) -> str:
    path = config_path()
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "wb") as f:
        f.write(tomli_w.dumps(to_toml(cfg)).encode("utf-8"))
    os.chmod(path, 0o600)
    return path
