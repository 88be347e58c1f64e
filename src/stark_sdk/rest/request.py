"""Execução de requisições assinadas à API.

Cada requisição leva os headers de autenticação:
- Access-Id: identificação do usuário (project/{id}, organization/{id}, ...)
- Access-Time: timestamp unix em segundos
- Access-Signature: ECDSA-SHA256 de "{Access-Id}:{Access-Time}:{body}"
"""

from __future__ import annotations

import json
import logging
import time
from typing import TYPE_CHECKING, Any

from stark_sdk.infra.crypto import sign_message
from stark_sdk.infra.http import build_api_error, log_api_error, log_success
from stark_sdk.observability import reset_request_id, set_request_id
from stark_sdk.utils.errors import DeserializationError

if TYPE_CHECKING:
    import httpx

    from stark_sdk.context import StarkContext

logger = logging.getLogger(__name__)


def build_headers(
    context: StarkContext,
    body: str,
    access_time: str | None = None,
) -> dict[str, str]:
    """Monta headers de autenticação e de conteúdo para uma requisição."""
    user = context.user
    access_time = access_time or str(time.time())
    message = f"{user.access_id}:{access_time}:{body}"
    return {
        "Access-Id": user.access_id,
        "Access-Time": access_time,
        "Access-Signature": sign_message(user.signing_key, message),
        "Content-Type": "application/json",
        "User-Agent": context.settings.user_agent,
        "Accept-Language": context.settings.language,
    }


def fetch(
    context: StarkContext,
    method: str,
    path: str,
    *,
    payload: dict[str, Any] | None = None,
    query: dict[str, Any] | None = None,
    not_found: bool = False,
) -> httpx.Response:
    """Executa requisição assinada e valida o status.

    Args:
        context: StarkContext com usuário, settings e cliente HTTP
        method: GET, POST, PATCH ou DELETE
        path: Path relativo à URL versionada (ex: boleto/123)
        payload: Corpo JSON (None para requisições sem corpo)
        query: Parâmetros de query string
        not_found: 4xx vira ResourceNotFoundError (buscas por id)

    Returns:
        Response 2xx

    Raises:
        TransportError: Falha de rede
        ApiInputError / ResourceNotFoundError / InternalServerError /
        UnknownApiError: Status não-2xx
    """
    url = context.settings.base_url(context.user.environment) + path
    body = json.dumps(payload, separators=(",", ":")) if payload is not None else ""
    headers = build_headers(context, body)

    token = set_request_id()
    started = time.perf_counter()
    try:
        response = context.http_client.request(
            method,
            url,
            params=query or None,
            content=body.encode("utf-8") if payload is not None else None,
            headers=headers,
        )
        elapsed_ms = round((time.perf_counter() - started) * 1000, 2)

        if not 200 <= response.status_code < 300:
            error = build_api_error(
                response.status_code,
                _safe_json(response),
                raw_text=response.text,
                not_found=not_found,
            )
            log_api_error(error, method, path)
            raise error

        log_success(method, path, response.status_code, elapsed_ms)
        return response
    finally:
        reset_request_id(token)


def parse_json(response: httpx.Response) -> dict[str, Any]:
    """Decodifica o corpo JSON de uma resposta 2xx.

    Raises:
        DeserializationError: Se JSON inválido ou não for objeto
    """
    try:
        data = response.json()
    except ValueError as exc:
        logger.error("stark_api_invalid_json", extra={"status_code": response.status_code})
        raise DeserializationError("Response JSON inválido") from exc

    if not isinstance(data, dict):
        raise DeserializationError("Response JSON deve ser um objeto")
    return data


def _safe_json(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None
