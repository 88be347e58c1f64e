"""Settings do SDK."""

from __future__ import annotations

from stark_sdk.config.settings.api import (
    API_VERSION,
    MAX_PAGE_SIZE,
    PRODUCTION_URL,
    SANDBOX_URL,
    SDK_VERSION,
    ApiSettings,
    Environment,
    Language,
    get_api_settings,
)

__all__ = [
    "API_VERSION",
    "MAX_PAGE_SIZE",
    "PRODUCTION_URL",
    "SANDBOX_URL",
    "SDK_VERSION",
    "ApiSettings",
    "Environment",
    "Language",
    "get_api_settings",
]
