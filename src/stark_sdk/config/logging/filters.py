"""Filters que enriquecem e sanitizam os records de log do SDK."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

# Atributos de record que nunca podem sair em claro
SENSITIVE_FIELDS = frozenset(
    {
        "private_key",
        "access_signature",
        "signature",
        "body",
    }
)

REDACTED = "[redacted]"


class RequestIdFilter(logging.Filter):
    """Preenche `request_id` (chamada HTTP corrente) e `service`.

    Um `request_id` passado explicitamente via `extra` tem precedência.
    """

    def __init__(
        self,
        service_name: str,
        request_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self.service_name = service_name
        self.request_id_getter = request_id_getter

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "request_id", None):
            getter = self.request_id_getter
            record.request_id = getter() if getter is not None else ""
        record.service = self.service_name
        return True


class SensitiveDataFilter(logging.Filter):
    """Mascara credenciais e corpos de requisição enviados via `extra`."""

    def filter(self, record: logging.LogRecord) -> bool:
        for name in SENSITIVE_FIELDS.intersection(record.__dict__):
            setattr(record, name, REDACTED)
        return True
