"""Modelos de Boleto.

Criar um Boleto localmente não o envia à API; `resources.boleto.create`
envia a lista e retorna as cópias preenchidas pelo servidor.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from stark_sdk.domain.resource import DateRangeQuery, Resource, SubResource

BoletoPdfLayout = Literal["default", "booklet"]


class BoletoDescription(SubResource):
    """Descrição de parte do valor do boleto."""

    text: str = Field(..., description='Texto da descrição. ex: "Taxes"')
    amount: int | None = Field(default=None, description="Valor em centavos. ex: 120")


class BoletoDiscount(SubResource):
    """Desconto aplicado até uma data."""

    percentage: float = Field(..., description="Percentual de desconto. ex: 2.5")
    date: str = Field(..., description='Data limite do desconto. ex: "2020-03-12"')


class Boleto(Resource):
    """Boleto bancário.

    Campos `fee`, `line`, `bar_code`, `status` e `created` são preenchidos
    apenas pela API.
    """

    amount: int = Field(
        ...,
        ge=200,
        description="Valor em centavos, mínimo 200 (R$ 2,00). ex: 1234 (= R$ 12.34)",
    )
    name: str = Field(..., description="Nome completo do pagador.")
    tax_id: str = Field(..., description="CPF ou CNPJ do pagador, com ou sem formatação.")
    street_line_1: str = Field(..., description="Endereço principal do pagador.")
    street_line_2: str = Field(..., description="Complemento do endereço.")
    district: str = Field(..., description="Bairro.")
    city: str = Field(..., description="Cidade.")
    state_code: str = Field(..., description="UF. ex: GO")
    zip_code: str = Field(..., description="CEP. ex: 01311-200")
    due: str | None = Field(default=None, description="Vencimento ISO. Padrão: hoje + 2 dias.")
    fine: float | None = Field(default=None, ge=0, description="Multa por atraso em %.")
    interest: float | None = Field(default=None, ge=0, description="Juros mensais em %.")
    overdue_limit: int | None = Field(
        default=None,
        ge=0,
        le=59,
        description="Dias aceitando pagamento após o vencimento (máx 59).",
    )
    descriptions: list[BoletoDescription] | None = None
    discounts: list[BoletoDiscount] | None = None
    tags: list[str] | None = None

    fee: int | None = None
    line: str | None = None
    bar_code: str | None = None
    status: str | None = None
    created: str | None = None


class BoletoLog(Resource):
    """Registro de mudança de estado de um Boleto. Criado apenas pela API."""

    created: str | None = None
    type: str | None = Field(default=None, description='Evento. ex: "registered" ou "paid"')
    errors: list[str] | None = None
    boleto: Boleto | None = None


class BoletoQuery(DateRangeQuery):
    """Filtros de listagem de boletos."""

    status: str | None = Field(default=None, description='ex: "paid" ou "registered"')
    tags: list[str] | None = None
    ids: list[str] | None = None


class BoletoLogQuery(DateRangeQuery):
    """Filtros de listagem de logs de boleto."""

    types: list[str] | None = None
    boleto_ids: list[str] | None = None
