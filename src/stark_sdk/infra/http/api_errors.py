"""Erros e helpers de parsing para respostas de erro da API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from stark_sdk.utils.errors import (
    ApiError,
    ApiInputError,
    InternalServerError,
    ResourceNotFoundError,
    UnknownApiError,
)


@dataclass(frozen=True)
class ApiErrorDetail:
    """Um item de `{"errors": [...]}` retornado pela API."""

    code: str
    message: str


def parse_api_errors(response_data: Any) -> list[ApiErrorDetail]:
    """Extrai a lista de erros do response da API.

    Args:
        response_data: JSON do response (qualquer formato)

    Returns:
        Lista de ApiErrorDetail (vazia se não houver erros reconhecíveis)
    """
    if not isinstance(response_data, dict):
        return []
    raw_errors = response_data.get("errors")
    if not isinstance(raw_errors, list):
        return []

    details: list[ApiErrorDetail] = []
    for item in raw_errors:
        if not isinstance(item, dict):
            continue
        details.append(
            ApiErrorDetail(
                code=str(item.get("code", "unknown")),
                message=str(item.get("message", "Erro desconhecido")),
            )
        )
    return details


def build_api_error(
    status_code: int,
    response_data: Any,
    *,
    raw_text: str = "",
    not_found: bool = False,
) -> ApiError:
    """Classifica uma resposta não-2xx no erro tipado correspondente.

    - 500: InternalServerError
    - 4xx com lista de erros: ApiInputError (ResourceNotFoundError se
      `not_found`, usado em buscas por id)
    - 4xx sem corpo reconhecível em buscas por id: ResourceNotFoundError
    - demais: UnknownApiError
    """
    if status_code == 500:
        return InternalServerError()

    details = parse_api_errors(response_data)
    is_client_error = 400 <= status_code < 500
    if is_client_error and not_found:
        if not details:
            details = [ApiErrorDetail(code="notFound", message=f"HTTP {status_code}")]
        return ResourceNotFoundError(details, status_code=status_code)
    if is_client_error and details:
        return ApiInputError(details, status_code=status_code)

    return UnknownApiError(raw_text or f"HTTP {status_code}", status_code=status_code)
