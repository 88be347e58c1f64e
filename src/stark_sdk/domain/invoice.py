"""Modelos de Invoice (cobrança Pix)."""

from __future__ import annotations

from pydantic import Field, model_validator

from stark_sdk.domain.resource import DateRangeQuery, Resource, SubResource


class InvoiceDescription(SubResource):
    """Par chave/valor exibido na cobrança."""

    key: str = Field(..., description='ex: "Some supplies"')
    value: str | None = None


class InvoiceDiscount(SubResource):
    """Desconto aplicado até uma data/hora."""

    percentage: float = Field(..., description="Percentual de desconto. ex: 2.5")
    due: str = Field(..., description="Data/hora limite do desconto (ISO).")


class Invoice(Resource):
    """Cobrança Pix.

    Valores calculados (`nominal_amount`, `fine_amount`, ...), `brcode`,
    `status`, `fee`, `pdf`, `link`, `created` e `updated` vêm da API.
    """

    amount: int = Field(..., ge=0, description="Valor em centavos.")
    tax_id: str = Field(..., description="CPF ou CNPJ do pagador.")
    name: str = Field(..., description="Nome do pagador.")
    due: str | None = Field(default=None, description="Vencimento (datetime ISO).")
    expiration: int | None = Field(
        default=None,
        ge=0,
        description="Segundos após o vencimento até expirar.",
    )
    fine: float | None = Field(default=None, ge=0)
    interest: float | None = Field(default=None, ge=0)
    discounts: list[InvoiceDiscount] | None = None
    descriptions: list[InvoiceDescription] | None = None
    tags: list[str] | None = None

    nominal_amount: int | None = None
    fine_amount: int | None = None
    interest_amount: int | None = None
    discount_amount: int | None = None
    brcode: str | None = None
    status: str | None = None
    fee: int | None = None
    pdf: str | None = None
    link: str | None = None
    created: str | None = None
    updated: str | None = None


class InvoicePayment(SubResource):
    """Dados do pagamento de uma Invoice paga."""

    name: str | None = None
    tax_id: str | None = None
    bank_code: str | None = None
    branch_code: str | None = None
    account_number: str | None = None
    account_type: str | None = None
    amount: int | None = None
    end_to_end_id: str | None = None
    method: str | None = None


class InvoiceLog(Resource):
    """Registro de mudança de estado de uma Invoice."""

    created: str | None = None
    type: str | None = None
    errors: list[str] | None = None
    invoice: Invoice | None = None


class InvoiceUpdate(SubResource):
    """Alteração parcial de uma Invoice. Campos ausentes não mudam."""

    status: str | None = Field(default=None, description='ex: "canceled"')
    amount: int | None = Field(default=None, ge=0)
    due: str | None = None
    expiration: int | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def _require_some_field(self) -> InvoiceUpdate:
        if all(getattr(self, name) is None for name in type(self).model_fields):
            raise ValueError("InvoiceUpdate requer ao menos um campo")
        return self


class InvoiceQuery(DateRangeQuery):
    """Filtros de listagem de invoices."""

    status: str | None = None
    tags: list[str] | None = None
    ids: list[str] | None = None


class InvoiceLogQuery(DateRangeQuery):
    """Filtros de listagem de logs de invoice."""

    types: list[str] | None = None
    invoice_ids: list[str] | None = None
