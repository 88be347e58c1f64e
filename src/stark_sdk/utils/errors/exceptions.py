"""Exceções do SDK.

Taxonomia:
- entrada local inválida (antes de qualquer chamada de rede)
- falha de transporte (timeout, conexão recusada)
- erro reportado pela API (4xx/5xx com corpo estruturado)
- resposta que não pode ser desserializada
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from stark_sdk.infra.http.api_errors import ApiErrorDetail


class StarkSdkError(Exception):
    """Base para todos os erros levantados pelo SDK."""


class InvalidInputError(StarkSdkError, ValueError):
    """Entrada local inválida (campo desconhecido, tipo errado, filtro inválido)."""


class InvalidUserError(InvalidInputError):
    """Credencial ausente, mal formada ou do tipo errado para a operação."""


class InvalidKeyError(InvalidUserError):
    """Chave privada não pôde ser carregada ou não é secp256k1."""


class TransportError(StarkSdkError):
    """Falha de rede antes de obter resposta da API."""


class DeserializationError(StarkSdkError):
    """Resposta da API com JSON inválido ou formato inesperado."""


class ApiError(StarkSdkError):
    """Erro reportado pela API com status HTTP."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ApiInputError(ApiError):
    """Erro 4xx com lista estruturada de códigos/mensagens."""

    def __init__(
        self,
        errors: list[ApiErrorDetail],
        status_code: int | None = 400,
    ) -> None:
        summary = ", ".join(f"{error.code}: {error.message}" for error in errors)
        super().__init__(summary or "api_input_error", status_code=status_code)
        self.errors = errors

    @property
    def codes(self) -> list[str]:
        return [error.code for error in self.errors]


class ResourceNotFoundError(ApiInputError):
    """Entidade ou artefato inexistente para o id informado."""


class InternalServerError(ApiError):
    """Erro 500 da API."""

    def __init__(self, message: str = "Houston, we have a problem.") -> None:
        super().__init__(message, status_code=500)


class UnknownApiError(ApiError):
    """Status HTTP inesperado sem corpo de erro reconhecível."""
