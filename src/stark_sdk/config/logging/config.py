"""Configuração opcional de logging JSON.

O SDK só emite records via `logging.getLogger(__name__)`. Quem usa o SDK
chama `configure_logging` uma vez, na inicialização, se quiser a saída JSON
com `request_id` e `service`.

Uso:
    from stark_sdk.config.logging import configure_logging

    configure_logging(level="DEBUG", service_name="billing-worker")
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from stark_sdk.config.logging.filters import RequestIdFilter, SensitiveDataFilter
from stark_sdk.config.logging.formatters import create_json_formatter
from stark_sdk.observability import get_request_id

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset(logging.getLevelNamesMapping()) - {"NOTSET", "WARN", "FATAL"}

DEFAULT_SERVICE_NAME = "stark_sdk"


def _resolve_level(level: str) -> int:
    name = level.upper()
    if name not in VALID_LOG_LEVELS:
        allowed = ", ".join(sorted(VALID_LOG_LEVELS))
        raise ValueError(f"Nível de log inválido: {level}. Válidos: {allowed}")
    return logging.getLevelNamesMapping()[name]


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    request_id_getter: Callable[[], str] | None = None,
) -> None:
    """Instala um único handler JSON no logger raiz.

    Args:
        level: DEBUG, INFO, WARNING, ERROR ou CRITICAL (sem diferenciar caixa).
        service_name: Valor do campo `service` em todo log.
        request_id_getter: Fonte do `request_id`. Padrão: o ContextVar que o
            SDK preenche a cada requisição.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    numeric_level = _resolve_level(level)

    handler = logging.StreamHandler()
    handler.setLevel(numeric_level)
    handler.addFilter(SensitiveDataFilter())
    handler.addFilter(RequestIdFilter(service_name, request_id_getter or get_request_id))
    handler.setFormatter(create_json_formatter())

    root = logging.getLogger()
    root.setLevel(numeric_level)
    # Um handler só: chamar de novo não duplica as linhas
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Atalho para `logging.getLogger(name)`."""
    return logging.getLogger(name)
