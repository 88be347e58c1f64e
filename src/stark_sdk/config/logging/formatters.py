"""Formatter JSON dos logs do SDK."""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Ordem de saída dos campos fixos no JSON
LOG_FIELD_ORDER: tuple[str, ...] = (
    "asctime",
    "levelname",
    "name",
    "service",
    "request_id",
    "message",
)

REQUIRED_LOG_FIELDS = frozenset(LOG_FIELD_ORDER)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria o formatter JSON usado por `configure_logging`.

    Campos passados via `extra` (method, path, status_code, ...) são
    anexados após os campos fixos. Exemplo:

        {"asctime": "...", "level": "DEBUG", "logger": "stark_sdk.rest.request",
         "service": "stark_sdk", "request_id": "0b6a...",
         "message": "stark_api_success", "method": "GET", "path": "boleto/1"}
    """
    return JsonFormatter(
        " ".join(f"%({name})s" for name in LOG_FIELD_ORDER),
        rename_fields=FIELD_RENAME_MAP,
        json_ensure_ascii=False,
    )
