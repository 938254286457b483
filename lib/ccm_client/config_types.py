from __future__ import annotations
from dataclasses import dataclass

DEFAULT_BASE_URL = "http://localhost:8080/config"
DEFAULT_PROJECT = "myapp"
DEFAULT_ENVIRONMENT = "dev"


@dataclass(frozen=True)
class ClientConfig:
    base_url: str = DEFAULT_BASE_URL
    # None means no timeout at all
    timeout_s: float | None = None
    user_agent: str = "ccm-client/0.1.0"
