"""Identificador de requisição para rastreamento de chamadas à API.

Cada chamada HTTP feita pelo SDK roda com um request_id próprio, injetado
nos logs pelo RequestIdFilter. Usa ContextVar para ser thread-safe.

Uso:
    from stark_sdk.observability import get_request_id, set_request_id

    token = set_request_id()
    try:
        # executar requisição
    finally:
        reset_request_id(token)
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

_request_id: ContextVar[str] = ContextVar("stark_request_id", default="")


def get_request_id() -> str:
    """Retorna o request_id do contexto atual (string vazia se não definido)."""
    return _request_id.get()


def set_request_id(request_id: str | None = None) -> Token[str]:
    """Define o request_id no contexto atual.

    Args:
        request_id: ID a definir. Se None, gera um novo UUID.

    Returns:
        Token para reset posterior via reset_request_id().
    """
    return _request_id.set(request_id or generate_request_id())


def reset_request_id(token: Token[str]) -> None:
    """Restaura o request_id ao valor anterior."""
    _request_id.reset(token)


def generate_request_id() -> str:
    return str(uuid.uuid4())
