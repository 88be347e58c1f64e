"""Operações de Boleto: create, get, query, page, pdf, delete."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from stark_sdk import rest
from stark_sdk.domain.boleto import Boleto, BoletoPdfLayout, BoletoQuery
from stark_sdk.domain.resource import build_model
from stark_sdk.rest.api import ResourceSpec
from stark_sdk.utils.errors import InvalidInputError

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from stark_sdk.context import StarkContext
    from stark_sdk.rest.generator import ResourceStream

RESOURCE = ResourceSpec(model=Boleto, name="Boleto")

_PDF_LAYOUTS = ("default", "booklet")


def create(
    context: StarkContext,
    boletos: Iterable[Boleto | Mapping[str, Any]],
) -> list[Boleto]:
    """Envia boletos para criação.

    Mapeamentos são validados localmente antes de qualquer requisição;
    campo desconhecido levanta InvalidInputError.

    Returns:
        Boletos criados (com id, line, bar_code, ...) na mesma ordem
    """
    entities = [build_model(Boleto, boleto) for boleto in boletos]
    return rest.post(context, RESOURCE, entities)


def get(context: StarkContext, id: str) -> Boleto:
    return rest.get_id(context, RESOURCE, id)


def query(
    context: StarkContext,
    filters: BoletoQuery | Mapping[str, Any] | None = None,
) -> ResourceStream[Boleto]:
    """Itera boletos (mais recentes primeiro) buscando páginas sob demanda.

    Filtros: limit, after, before, status, tags, ids.
    """
    return rest.get_list(context, RESOURCE, build_model(BoletoQuery, filters))


def page(
    context: StarkContext,
    filters: BoletoQuery | Mapping[str, Any] | None = None,
    cursor: str | None = None,
) -> tuple[list[Boleto], str | None]:
    return rest.get_page(context, RESOURCE, build_model(BoletoQuery, filters), cursor)


def pdf(
    context: StarkContext,
    id: str,
    layout: BoletoPdfLayout | None = None,
) -> bytes:
    """PDF do boleto. `layout`: "default" ou "booklet"."""
    params: dict[str, str] = {}
    if layout is not None:
        if layout not in _PDF_LAYOUTS:
            raise InvalidInputError(f"layout inválido: {layout}")
        params["layout"] = layout
    return rest.get_content(context, RESOURCE, id, "pdf", params)


def delete(context: StarkContext, id: str) -> Boleto:
    """Cancela o boleto; retorna o último estado conhecido."""
    return rest.delete_id(context, RESOURCE, id)
