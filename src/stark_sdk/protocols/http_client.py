"""Protocolo HTTP usado pela camada REST.

Permite injetar qualquer cliente com a mesma assinatura (ex: fakes em testes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    import httpx


class HttpClientProtocol(Protocol):
    """Contrato mínimo para o cliente HTTP do SDK."""

    def request(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        content: bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response: ...

    def close(self) -> None: ...
