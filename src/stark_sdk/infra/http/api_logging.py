"""Helpers de logging para chamadas à API (sem chaves nem payloads)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from stark_sdk.utils.errors import ApiError

logger = logging.getLogger(__name__)


def log_api_error(
    error: ApiError,
    method: str,
    path: str,
) -> None:
    """Loga erro da API sem expor dados sensíveis."""
    extra: dict[str, object] = {
        "method": method,
        "path": path,
        "status_code": error.status_code,
        "error_type": type(error).__name__,
    }
    codes = getattr(error, "codes", None)
    if codes:
        extra["error_codes"] = codes
    logger.warning("stark_api_error", extra=extra)


def log_success(
    method: str,
    path: str,
    status_code: int,
    elapsed_ms: float | None = None,
) -> None:
    """Loga sucesso sem expor dados sensíveis."""
    extra: dict[str, object] = {
        "method": method,
        "path": path,
        "status_code": status_code,
    }
    if elapsed_ms is not None:
        extra["elapsed_ms"] = elapsed_ms
    logger.debug("stark_api_success", extra=extra)
