"""Cliente HTTP base do SDK (síncrono, sem retry implícito)."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import httpx

from stark_sdk.utils.errors import TransportError

if TYPE_CHECKING:
    from types import TracebackType

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 15.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpClient:
    """Cliente HTTP simples sobre um pool `httpx.Client`.

    Falhas de transporte viram TransportError; respostas HTTP (qualquer
    status) são devolvidas para a camada REST classificar.
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._client = httpx.Client(
            timeout=httpx.Timeout(self._config.timeout_seconds),
            headers=self._config.default_headers,
            verify=self._config.verify_ssl,
            transport=transport,
        )

    def request(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        content: bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        try:
            return self._client.request(
                method,
                url,
                params=params,
                content=content,
                headers=headers,
            )
        except httpx.TimeoutException as exc:
            logger.warning("http_timeout", extra={"method": method})
            raise TransportError("http_timeout") from exc
        except httpx.TransportError as exc:
            logger.warning("http_connection_error", extra={"method": method})
            raise TransportError("http_connection_error") from exc

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> HttpClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()
