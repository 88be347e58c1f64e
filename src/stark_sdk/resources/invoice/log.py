"""Logs de Invoice."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from stark_sdk import rest
from stark_sdk.domain.invoice import InvoiceLog, InvoiceLogQuery
from stark_sdk.domain.resource import build_model
from stark_sdk.rest.api import ResourceSpec

if TYPE_CHECKING:
    from collections.abc import Mapping

    from stark_sdk.context import StarkContext
    from stark_sdk.rest.generator import ResourceStream

RESOURCE = ResourceSpec(model=InvoiceLog, name="InvoiceLog")


def get(context: StarkContext, id: str) -> InvoiceLog:
    return rest.get_id(context, RESOURCE, id)


def query(
    context: StarkContext,
    filters: InvoiceLogQuery | Mapping[str, Any] | None = None,
) -> ResourceStream[InvoiceLog]:
    return rest.get_list(context, RESOURCE, build_model(InvoiceLogQuery, filters))


def page(
    context: StarkContext,
    filters: InvoiceLogQuery | Mapping[str, Any] | None = None,
    cursor: str | None = None,
) -> tuple[list[InvoiceLog], str | None]:
    return rest.get_page(context, RESOURCE, build_model(InvoiceLogQuery, filters), cursor)
