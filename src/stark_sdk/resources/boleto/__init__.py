"""Boletos e seus logs."""

from stark_sdk.resources.boleto import log
from stark_sdk.resources.boleto.operations import (
    RESOURCE,
    create,
    delete,
    get,
    page,
    pdf,
    query,
)

__all__ = ["RESOURCE", "create", "delete", "get", "log", "page", "pdf", "query"]
