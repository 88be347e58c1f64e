"""Operações de Invoice: create, get, query, page, update, pdf, qrcode, payment."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from stark_sdk import rest
from stark_sdk.domain.invoice import Invoice, InvoicePayment, InvoiceQuery, InvoiceUpdate
from stark_sdk.domain.resource import build_model
from stark_sdk.rest.api import ResourceSpec
from stark_sdk.utils.errors import InvalidInputError

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from stark_sdk.context import StarkContext
    from stark_sdk.rest.generator import ResourceStream

RESOURCE = ResourceSpec(model=Invoice, name="Invoice")
PAYMENT_RESOURCE = ResourceSpec(model=InvoicePayment, name="Payment")


def create(
    context: StarkContext,
    invoices: Iterable[Invoice | Mapping[str, Any]],
) -> list[Invoice]:
    """Envia invoices para criação; retorna as cópias criadas na mesma ordem."""
    entities = [build_model(Invoice, invoice) for invoice in invoices]
    return rest.post(context, RESOURCE, entities)


def get(context: StarkContext, id: str) -> Invoice:
    return rest.get_id(context, RESOURCE, id)


def query(
    context: StarkContext,
    filters: InvoiceQuery | Mapping[str, Any] | None = None,
) -> ResourceStream[Invoice]:
    """Itera invoices. Filtros: limit, after, before, status, tags, ids."""
    return rest.get_list(context, RESOURCE, build_model(InvoiceQuery, filters))


def page(
    context: StarkContext,
    filters: InvoiceQuery | Mapping[str, Any] | None = None,
    cursor: str | None = None,
) -> tuple[list[Invoice], str | None]:
    return rest.get_page(context, RESOURCE, build_model(InvoiceQuery, filters), cursor)


def update(
    context: StarkContext,
    id: str,
    patch: InvoiceUpdate | Mapping[str, Any],
) -> Invoice:
    """Altera status, amount, due e/ou expiration.

    Campos não informados permanecem como estão no servidor.

    Returns:
        Invoice atualizada (nova instância)
    """
    return rest.patch_id(context, RESOURCE, id, build_model(InvoiceUpdate, patch))


def pdf(context: StarkContext, id: str) -> bytes:
    return rest.get_content(context, RESOURCE, id, "pdf")


def qrcode(context: StarkContext, id: str, size: int | None = None) -> bytes:
    """PNG do QR code. `size`: pixels por módulo do QR code."""
    params: dict[str, str] = {}
    if size is not None:
        if isinstance(size, bool) or not isinstance(size, int) or size < 1:
            raise InvalidInputError(f"size inválido: {size!r}")
        params["size"] = str(size)
    return rest.get_content(context, RESOURCE, id, "qrcode", params)


def payment(context: StarkContext, id: str) -> InvoicePayment:
    """Dados do pagamento de uma invoice paga."""
    return rest.get_subresource(context, RESOURCE, id, PAYMENT_RESOURCE)
