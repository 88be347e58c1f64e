"""Invoices, seus logs e pagamentos."""

from stark_sdk.resources.invoice import log
from stark_sdk.resources.invoice.operations import (
    PAYMENT_RESOURCE,
    RESOURCE,
    create,
    get,
    page,
    payment,
    pdf,
    qrcode,
    query,
    update,
)

__all__ = [
    "PAYMENT_RESOURCE",
    "RESOURCE",
    "create",
    "get",
    "log",
    "page",
    "payment",
    "pdf",
    "qrcode",
    "query",
    "update",
]
