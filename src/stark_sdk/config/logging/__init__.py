"""Configuração de logging estruturado.

Uso:
    from stark_sdk.config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="billing")
    logger = get_logger(__name__)
    logger.info("boletos_criados", extra={"count": 3})
"""

from stark_sdk.config.logging.config import configure_logging, get_logger
from stark_sdk.config.logging.filters import RequestIdFilter, SensitiveDataFilter
from stark_sdk.config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "RequestIdFilter",
    "SensitiveDataFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
