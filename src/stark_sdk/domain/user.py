"""Credenciais de acesso à API.

Não existe usuário padrão global: cada chamada recebe o usuário via
StarkContext.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import Any

from stark_sdk.infra.crypto import load_private_key
from stark_sdk.utils.errors import InvalidUserError

_ENVIRONMENTS = frozenset({"production", "sandbox"})


@dataclass(frozen=True)
class User(ABC):
    """Base abstrata de Project e Organization.

    Attributes:
        environment: Ambiente da API (production|sandbox)
        id: Id do projeto/organização
        private_key: Chave privada secp256k1 em PEM (validada na construção)
    """

    environment: str
    id: str
    private_key: str = field(repr=False)
    _signing_key: Any = field(init=False, repr=False, compare=False, default=None)

    def __post_init__(self) -> None:
        if self.environment not in _ENVIRONMENTS:
            raise InvalidUserError(
                f"environment inválido: {self.environment}. Use production ou sandbox"
            )
        if not self.id or not str(self.id).strip():
            raise InvalidUserError("id do usuário é obrigatório")
        object.__setattr__(self, "_signing_key", load_private_key(self.private_key))

    @property
    @abstractmethod
    def access_id(self) -> str:
        """Valor do header Access-Id."""

    @property
    def signing_key(self) -> Any:
        """Chave privada carregada, usada para assinar requisições."""
        return self._signing_key


@dataclass(frozen=True)
class Project(User):
    """Projeto: credencial de integração de um workspace."""

    @property
    def access_id(self) -> str:
        return f"project/{self.id}"


@dataclass(frozen=True)
class Organization(User):
    """Organização: acessa todos os seus workspaces.

    Operações de workspace específico exigem `workspace_id`
    (use `with_workspace`).
    """

    workspace_id: str | None = None

    @property
    def access_id(self) -> str:
        if self.workspace_id:
            return f"organization/{self.id}/workspace/{self.workspace_id}"
        return f"organization/{self.id}"

    def with_workspace(self, workspace_id: str | None) -> Organization:
        """Retorna cópia da organização apontando para outro workspace."""
        return replace(self, workspace_id=workspace_id)
