"""Modelos de domínio (entidades imutáveis e filtros de listagem)."""

from stark_sdk.domain.boleto import (
    Boleto,
    BoletoDescription,
    BoletoDiscount,
    BoletoLog,
    BoletoLogQuery,
    BoletoPdfLayout,
    BoletoQuery,
)
from stark_sdk.domain.invoice import (
    Invoice,
    InvoiceDescription,
    InvoiceDiscount,
    InvoiceLog,
    InvoiceLogQuery,
    InvoicePayment,
    InvoiceQuery,
    InvoiceUpdate,
)
from stark_sdk.domain.resource import Query, Resource, SubResource, build_model
from stark_sdk.domain.user import Organization, Project, User
from stark_sdk.domain.workspace import Workspace, WorkspaceQuery

__all__ = [
    "Boleto",
    "BoletoDescription",
    "BoletoDiscount",
    "BoletoLog",
    "BoletoLogQuery",
    "BoletoPdfLayout",
    "BoletoQuery",
    "Invoice",
    "InvoiceDescription",
    "InvoiceDiscount",
    "InvoiceLog",
    "InvoiceLogQuery",
    "InvoicePayment",
    "InvoiceQuery",
    "InvoiceUpdate",
    "Organization",
    "Project",
    "Query",
    "Resource",
    "SubResource",
    "User",
    "Workspace",
    "WorkspaceQuery",
    "build_model",
]
