"""Mapeamento entre recursos Python e o formato da API.

- nome do recurso (PascalCase) -> endpoint e chaves JSON
- entidades -> JSON camelCase
- JSON da API -> entidades
- filtros -> query string
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from stark_sdk.domain.resource import FROM_API_CONTEXT_KEY
from stark_sdk.utils.errors import DeserializationError

if TYPE_CHECKING:
    from collections.abc import Collection

    from stark_sdk.domain.resource import Query

ModelT = TypeVar("ModelT", bound=BaseModel)

_WORD_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def endpoint(resource_name: str) -> str:
    """`BoletoLog` -> `boleto/log`, `Invoice` -> `invoice`."""
    kebab = _WORD_BOUNDARY.sub("-", resource_name).lower()
    return kebab.replace("-log", "/log")


def last_name(resource_name: str) -> str:
    """Chave JSON de uma entidade: `BoletoLog` -> `log`."""
    return _WORD_BOUNDARY.split(resource_name)[-1].lower()


def last_name_plural(resource_name: str) -> str:
    """Chave JSON de uma lista: `BoletoLog` -> `logs`."""
    name = last_name(resource_name)
    if name.endswith("s"):
        return name
    if name.endswith("y") and name[-2:-1] not in ("a", "e", "i", "o", "u"):
        return f"{name[:-1]}ies"
    return f"{name}s"


@dataclass(frozen=True)
class ResourceSpec(Generic[ModelT]):
    """Modelo + nome de um recurso da API."""

    model: type[ModelT]
    name: str

    @property
    def endpoint(self) -> str:
        return endpoint(self.name)

    @property
    def last_name(self) -> str:
        return last_name(self.name)

    @property
    def last_name_plural(self) -> str:
        return last_name_plural(self.name)


def to_api_json(entity: BaseModel) -> dict[str, Any]:
    """Serializa entidade em JSON camelCase sem campos nulos."""
    return entity.model_dump(mode="json", by_alias=True, exclude_none=True)


def from_api_json(model: type[ModelT], data: Any) -> ModelT:
    """Desserializa JSON da API ignorando campos que o SDK não conhece.

    Raises:
        DeserializationError: Se o JSON não corresponde ao schema
    """
    if not isinstance(data, dict):
        raise DeserializationError(
            f"Esperado objeto JSON para {model.__name__}, recebido {type(data).__name__}"
        )
    try:
        return model.model_validate(data, context={FROM_API_CONTEXT_KEY: True})
    except ValidationError as exc:
        raise DeserializationError(f"Resposta inválida para {model.__name__}: {exc}") from exc


def _cast_query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple, set)):
        return ",".join(str(item) for item in value)
    return str(value)


def cast_query(
    filters: Query | None,
    exclude: Collection[str] = (),
) -> dict[str, str]:
    """Converte filtros tipados em parâmetros de query string camelCase."""
    if filters is None:
        return {}
    raw = filters.model_dump(
        mode="json",
        by_alias=True,
        exclude_none=True,
        exclude=set(exclude),
    )
    return {key: _cast_query_value(value) for key, value in raw.items()}
