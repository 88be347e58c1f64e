"""Base dos modelos de domínio.

Entidades são imutáveis e rejeitam campos desconhecidos vindos do chamador:
construção inválida levanta InvalidInputError (nunca ValidationError cru).
Campos desconhecidos vindos da API (que evolui) são ignorados quando a
validação roda com o contexto `from_api`.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date  # noqa: TC003 - usado em runtime pelo schema do Pydantic
from typing import Any, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    model_validator,
)
from pydantic.alias_generators import to_camel

from stark_sdk.utils.errors import InvalidInputError

FROM_API_CONTEXT_KEY = "from_api"

ModelT = TypeVar("ModelT", bound=BaseModel)


class SubResource(BaseModel):
    """Registro tipado sem identidade própria (ex: Invoice.Payment)."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise InvalidInputError(f"{type(self).__name__} inválido: {exc}") from exc

    @model_validator(mode="before")
    @classmethod
    def _ignore_unknown_api_fields(cls, data: Any, info: ValidationInfo) -> Any:
        context = info.context or {}
        if not context.get(FROM_API_CONTEXT_KEY) or not isinstance(data, Mapping):
            return data
        known: set[str] = set()
        for name, field in cls.model_fields.items():
            known.add(name)
            if field.alias:
                known.add(field.alias)
        return {key: value for key, value in data.items() if key in known}


class Resource(SubResource):
    """Entidade com id atribuído pelo servidor (None até a criação)."""

    id: str | None = Field(default=None, description="Id único retornado pela API.")


class Query(BaseModel):
    """Base dos filtros de listagem (limit + filtros específicos)."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    limit: int | None = Field(
        default=None,
        ge=1,
        description="Máximo de objetos retornados. Sem limite se None.",
    )

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise InvalidInputError(f"Filtro {type(self).__name__} inválido: {exc}") from exc



class DateRangeQuery(Query):
    """Filtros com intervalo de datas de criação."""

    after: date | None = Field(default=None, description="Criados a partir desta data.")
    before: date | None = Field(default=None, description="Criados até esta data.")


def build_model(model: type[ModelT], value: ModelT | Mapping[str, Any] | None) -> ModelT:
    """Converte entrada do chamador no modelo tipado, validando localmente.

    Raises:
        InvalidInputError: Campo desconhecido, tipo errado ou entrada de tipo
            não suportado. Nada é enviado à API nesse caso.
    """
    if value is None:
        value = {}
    if isinstance(value, model):
        return value
    if not isinstance(value, Mapping):
        raise InvalidInputError(
            f'Tipo "{type(value).__name__}" não suportado, use {model.__name__} ou um mapping'
        )
    try:
        return model.model_validate(value)
    except ValidationError as exc:
        raise InvalidInputError(f"{model.__name__} inválido: {exc}") from exc
