"""Logs de Boleto: um registro por mudança de estado, gerado pela API."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from stark_sdk import rest
from stark_sdk.domain.boleto import BoletoLog, BoletoLogQuery
from stark_sdk.domain.resource import build_model
from stark_sdk.rest.api import ResourceSpec

if TYPE_CHECKING:
    from collections.abc import Mapping

    from stark_sdk.context import StarkContext
    from stark_sdk.rest.generator import ResourceStream

RESOURCE = ResourceSpec(model=BoletoLog, name="BoletoLog")


def get(context: StarkContext, id: str) -> BoletoLog:
    return rest.get_id(context, RESOURCE, id)


def query(
    context: StarkContext,
    filters: BoletoLogQuery | Mapping[str, Any] | None = None,
) -> ResourceStream[BoletoLog]:
    """Filtros: limit, after, before, types, boleto_ids."""
    return rest.get_list(context, RESOURCE, build_model(BoletoLogQuery, filters))


def page(
    context: StarkContext,
    filters: BoletoLogQuery | Mapping[str, Any] | None = None,
    cursor: str | None = None,
) -> tuple[list[BoletoLog], str | None]:
    return rest.get_page(context, RESOURCE, build_model(BoletoLogQuery, filters), cursor)
