"""Contexto explícito de acesso à API.

Reúne credencial, settings e cliente HTTP. É passado para toda operação;
não existe usuário padrão global.

Uso:
    from stark_sdk import Project, create_context

    project = Project(environment="sandbox", id="5656565656565656", private_key=pem)
    with create_context(project) as context:
        boletos = boleto.create(context, [...])
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from stark_sdk.config.settings import ApiSettings, get_api_settings
from stark_sdk.domain.user import User
from stark_sdk.infra.http import HttpClient, HttpClientConfig
from stark_sdk.utils.errors import InvalidInputError, InvalidUserError

if TYPE_CHECKING:
    from types import TracebackType

    import httpx

    from stark_sdk.protocols import HttpClientProtocol


@dataclass(frozen=True)
class StarkContext:
    """Credencial + settings + cliente HTTP usados por uma chamada."""

    user: User
    settings: ApiSettings
    http_client: HttpClientProtocol

    def with_user(self, user: User) -> StarkContext:
        """Mesmo pool HTTP e settings, outra credencial."""
        if not isinstance(user, User):
            raise InvalidUserError(f"user inválido: {type(user).__name__}")
        return replace(self, user=user)

    def close(self) -> None:
        self.http_client.close()

    def __enter__(self) -> StarkContext:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()


def create_context(
    user: User,
    settings: ApiSettings | None = None,
    http_client: HttpClientProtocol | None = None,
    transport: httpx.BaseTransport | None = None,
) -> StarkContext:
    """Factory do StarkContext com defaults carregados do ambiente.

    Args:
        user: Project ou Organization
        settings: ApiSettings opcional. Se None, carrega do ambiente.
        http_client: Cliente HTTP pronto (ignora `transport`)
        transport: Transport httpx customizado (ex: MockTransport em testes)

    Raises:
        InvalidUserError: Se user não é Project/Organization
        InvalidInputError: Se settings inválidas
    """
    if not isinstance(user, User):
        raise InvalidUserError(f"user inválido: {type(user).__name__}")

    api_settings = settings or get_api_settings()
    errors = api_settings.validate()
    if errors:
        raise InvalidInputError("; ".join(errors))

    client = http_client or HttpClient(
        HttpClientConfig(timeout_seconds=api_settings.request_timeout_seconds),
        transport=transport,
    )
    return StarkContext(user=user, settings=api_settings, http_client=client)
