from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    api_base_url: str = os.getenv("THUNDER_API_BASE_URL", "https://thunderinsights.dk/api/v1")
    asset_base_url: str = os.getenv("THUNDER_ASSET_BASE_URL", "https://thunderinsights.dk")
    http_timeout_s: float = float(os.getenv("THUNDER_HTTP_TIMEOUT", "10"))
    log_level: str = os.getenv("THUNDER_LOG_LEVEL", "INFO")


def get_settings() -> Settings:
    return Settings()
