"""Operações REST genéricas reutilizadas por todos os recursos.

Cada recurso declara um ResourceSpec (modelo + nome) e delega para estas
funções; nenhuma delas faz retry ou rollback.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from stark_sdk.rest.api import ModelT, ResourceSpec, cast_query, from_api_json, to_api_json
from stark_sdk.rest.generator import ResourceStream
from stark_sdk.rest.request import fetch, parse_json
from stark_sdk.utils.errors import DeserializationError, InvalidInputError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pydantic import BaseModel

    from stark_sdk.context import StarkContext
    from stark_sdk.domain.resource import Query

logger = logging.getLogger(__name__)


def _id_path(resource: ResourceSpec[Any], id: str) -> str:
    if not isinstance(id, str) or not id.strip():
        raise InvalidInputError(f"id inválido para {resource.name}: {id!r}")
    return f"{resource.endpoint}/{quote(id.strip(), safe='')}"


def _single(resource: ResourceSpec[ModelT], data: dict[str, Any]) -> ModelT:
    if resource.last_name not in data:
        raise DeserializationError(f'Resposta sem a chave "{resource.last_name}"')
    return from_api_json(resource.model, data[resource.last_name])


def _many(resource: ResourceSpec[ModelT], data: dict[str, Any]) -> list[ModelT]:
    raw_items = data.get(resource.last_name_plural)
    if not isinstance(raw_items, list):
        raise DeserializationError(f'Resposta sem a lista "{resource.last_name_plural}"')
    return [from_api_json(resource.model, item) for item in raw_items]


def _fetch_page(
    context: StarkContext,
    resource: ResourceSpec[ModelT],
    params: dict[str, str],
    cursor: str | None,
    limit: int,
) -> tuple[list[ModelT], str | None]:
    query: dict[str, Any] = {**params, "limit": limit}
    if cursor:
        query["cursor"] = cursor
    data = parse_json(fetch(context, "GET", resource.endpoint, query=query))
    cursor_value = data.get("cursor")
    if cursor_value is not None and not isinstance(cursor_value, str):
        raise DeserializationError("cursor deve ser string")
    return _many(resource, data), cursor_value or None


def get_id(context: StarkContext, resource: ResourceSpec[ModelT], id: str) -> ModelT:
    """GET {endpoint}/{id}. 4xx vira ResourceNotFoundError."""
    path = _id_path(resource, id)
    return _single(resource, parse_json(fetch(context, "GET", path, not_found=True)))


def get_list(
    context: StarkContext,
    resource: ResourceSpec[ModelT],
    filters: Query | None = None,
) -> ResourceStream[ModelT]:
    """Listagem preguiçosa; nenhuma requisição até o primeiro next()."""
    params = cast_query(filters, exclude={"limit"})

    def fetch_page(cursor: str | None, size: int) -> tuple[list[ModelT], str | None]:
        return _fetch_page(context, resource, params, cursor, size)

    return ResourceStream(
        fetch_page,
        limit=filters.limit if filters is not None else None,
        page_size=context.settings.page_size,
    )


def get_page(
    context: StarkContext,
    resource: ResourceSpec[ModelT],
    filters: Query | None = None,
    cursor: str | None = None,
) -> tuple[list[ModelT], str | None]:
    """Uma página da listagem: (entidades, cursor da próxima ou None)."""
    page_size = context.settings.page_size
    limit = page_size
    if filters is not None and filters.limit is not None:
        limit = min(filters.limit, page_size)
    params = cast_query(filters, exclude={"limit"})
    return _fetch_page(context, resource, params, cursor, limit)


def post(
    context: StarkContext,
    resource: ResourceSpec[ModelT],
    entities: Sequence[ModelT],
) -> list[ModelT]:
    """POST em lote; retorna as cópias criadas na mesma ordem."""
    if not entities:
        raise InvalidInputError(f"Lista de {resource.name} vazia")
    payload = {resource.last_name_plural: [to_api_json(entity) for entity in entities]}
    data = parse_json(fetch(context, "POST", resource.endpoint, payload=payload))
    created = _many(resource, data)
    logger.info(
        "stark_resources_created",
        extra={"resource": resource.name, "count": len(created)},
    )
    return created


def post_single(
    context: StarkContext,
    resource: ResourceSpec[ModelT],
    entity: BaseModel,
) -> ModelT:
    """POST de uma entidade com corpo simples (sem lista)."""
    data = parse_json(fetch(context, "POST", resource.endpoint, payload=to_api_json(entity)))
    return _single(resource, data)


def patch_id(
    context: StarkContext,
    resource: ResourceSpec[ModelT],
    id: str,
    patch: BaseModel,
) -> ModelT:
    """PATCH {endpoint}/{id} com os campos não nulos de `patch`."""
    path = _id_path(resource, id)
    return _single(resource, parse_json(fetch(context, "PATCH", path, payload=to_api_json(patch))))


def delete_id(context: StarkContext, resource: ResourceSpec[ModelT], id: str) -> ModelT:
    """DELETE {endpoint}/{id}; retorna o último estado da entidade."""
    path = _id_path(resource, id)
    return _single(resource, parse_json(fetch(context, "DELETE", path)))


def get_content(
    context: StarkContext,
    resource: ResourceSpec[Any],
    id: str,
    sub_resource_name: str,
    params: dict[str, str] | None = None,
) -> bytes:
    """GET binário (pdf, qrcode). Id ou artefato inexistente: ResourceNotFoundError."""
    path = f"{_id_path(resource, id)}/{sub_resource_name}"
    response = fetch(context, "GET", path, query=params, not_found=True)
    return response.content


def get_subresource(
    context: StarkContext,
    resource: ResourceSpec[Any],
    id: str,
    sub_resource: ResourceSpec[ModelT],
) -> ModelT:
    """GET {endpoint}/{id}/{sub} -> `{sub: {...}}`."""
    path = f"{_id_path(resource, id)}/{sub_resource.endpoint}"
    return _single(sub_resource, parse_json(fetch(context, "GET", path, not_found=True)))
