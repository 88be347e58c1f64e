"""Testes das operações de Invoice, InvoiceLog e Invoice.Payment."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from stark_sdk.domain import Invoice, InvoiceUpdate
from stark_sdk.resources import invoice
from stark_sdk.utils.errors import InvalidInputError, ResourceNotFoundError

if TYPE_CHECKING:
    from collections.abc import Callable

    from stark_sdk.context import StarkContext


def test_create_returns_server_fields(
    context: StarkContext,
    fake_api: Any,
    invoice_kwargs: dict[str, Any],
    invoice_json: dict[str, Any],
) -> None:
    fake_api.add("POST", "invoice", json_body={"invoices": [invoice_json]})

    created = invoice.create(context, [Invoice(**invoice_kwargs)])

    assert created[0].id == invoice_json["id"]
    assert created[0].brcode == invoice_json["brcode"]
    sent = fake_api.last_json()["invoices"][0]
    assert sent["taxId"] == invoice_kwargs["tax_id"]
    assert "brcode" not in sent


def test_get_unknown_id(context: StarkContext) -> None:
    with pytest.raises(ResourceNotFoundError):
        invoice.get(context, "0")


def test_update_leaves_other_fields_unchanged(
    context: StarkContext,
    fake_api: Any,
    invoice_factory: Callable[..., dict[str, Any]],
) -> None:
    original = invoice_factory(id="1")
    fake_api.add("GET", "invoice/1", json_body={"invoice": original})
    fake_api.add("PATCH", "invoice/1", json_body={"invoice": {**original, "amount": 100}})

    before = invoice.get(context, "1")
    updated = invoice.update(context, "1", {"amount": 100})

    assert fake_api.last_json() == {"amount": 100}
    assert updated.amount == 100
    assert updated.due == before.due
    assert updated.expiration == before.expiration
    assert updated.name == before.name
    assert before.amount == original["amount"]


def test_update_to_canceled(
    context: StarkContext,
    fake_api: Any,
    invoice_factory: Callable[..., dict[str, Any]],
) -> None:
    fake_api.add("PATCH", "invoice/1", json_body={"invoice": invoice_factory(status="canceled")})
    updated = invoice.update(context, "1", InvoiceUpdate(status="canceled"))
    assert updated.status == "canceled"


def test_empty_update_fails_locally(context: StarkContext, fake_api: Any) -> None:
    with pytest.raises(InvalidInputError):
        invoice.update(context, "1", {})
    assert fake_api.requests == []


def test_query_with_limit(
    context: StarkContext,
    fake_api: Any,
    invoice_factory: Callable[..., dict[str, Any]],
) -> None:
    fake_api.add(
        "GET",
        "invoice",
        json_body={"invoices": [invoice_factory(id="1"), invoice_factory(id="2")]},
    )
    items = list(invoice.query(context, {"limit": 2, "status": "paid"}))
    assert [item.id for item in items] == ["1", "2"]
    assert fake_api.requests[0].url.params["status"] == "paid"


def test_page(context: StarkContext, fake_api: Any) -> None:
    fake_api.add("GET", "invoice", json_body={"invoices": [], "cursor": None})
    assert invoice.page(context, cursor="abc") == ([], None)
    assert fake_api.requests[0].url.params["cursor"] == "abc"


def test_pdf(context: StarkContext, fake_api: Any) -> None:
    fake_api.add("GET", "invoice/1/pdf", content=b"%PDF-1.4 invoice")
    assert invoice.pdf(context, "1").startswith(b"%PDF")


class TestQrcode:
    def test_returns_png_bytes_with_size(self, context: StarkContext, fake_api: Any) -> None:
        png = b"\x89PNG\r\n\x1a\n"
        fake_api.add("GET", "invoice/1/qrcode", content=png)
        assert invoice.qrcode(context, "1", size=15) == png
        assert fake_api.requests[0].url.params["size"] == "15"

    @pytest.mark.parametrize("size", [0, -1, "10", True])
    def test_invalid_size(self, context: StarkContext, fake_api: Any, size: Any) -> None:
        with pytest.raises(InvalidInputError):
            invoice.qrcode(context, "1", size=size)
        assert fake_api.requests == []

    def test_unknown_id(self, context: StarkContext) -> None:
        with pytest.raises(ResourceNotFoundError):
            invoice.qrcode(context, "0")


def test_payment(context: StarkContext, fake_api: Any) -> None:
    fake_api.add(
        "GET",
        "invoice/1/payment",
        json_body={
            "payment": {
                "name": "Tony Stark",
                "taxId": "012.345.678-90",
                "bankCode": "20018183",
                "amount": 400000,
                "endToEndId": "E20018183202201201450u34sDGd1",
                "method": "pix",
                "extraField": 1,
            }
        },
    )
    payment = invoice.payment(context, "1")
    assert payment.bank_code == "20018183"
    assert payment.end_to_end_id.startswith("E2001")


def test_payment_of_unpaid_invoice(context: StarkContext, fake_api: Any) -> None:
    fake_api.add(
        "GET",
        "invoice/1/payment",
        status=400,
        json_body={"errors": [{"code": "invalidInvoice", "message": "not paid"}]},
    )
    with pytest.raises(ResourceNotFoundError) as exc_info:
        invoice.payment(context, "1")
    assert exc_info.value.codes == ["invalidInvoice"]


def test_log_query(
    context: StarkContext,
    fake_api: Any,
    invoice_factory: Callable[..., dict[str, Any]],
) -> None:
    log_json = {"id": "9", "type": "paid", "errors": [], "invoice": invoice_factory(id="1")}
    fake_api.add("GET", "invoice/log", json_body={"logs": [log_json]})
    logs = list(invoice.log.query(context, {"invoice_ids": ["1"]}))
    assert logs[0].invoice is not None
    assert logs[0].invoice.id == "1"
    assert fake_api.requests[0].url.params["invoiceIds"] == "1"


def test_log_get(context: StarkContext, fake_api: Any) -> None:
    fake_api.add("GET", "invoice/log/9", json_body={"log": {"id": "9", "type": "created"}})
    assert invoice.log.get(context, "9").type == "created"


def test_query_date_range_limit_one_then_get(
    context: StarkContext,
    fake_api: Any,
    invoice_factory: Callable[..., dict[str, Any]],
) -> None:
    fake_api.add(
        "GET",
        "invoice",
        json_body={"invoices": [invoice_factory(id="7")], "cursor": "more"},
    )
    fake_api.add("GET", "invoice/7", json_body={"invoice": invoice_factory(id="7")})

    filters = {"after": "2019-04-01", "before": "2030-04-30", "limit": 1}
    invoices = list(invoice.query(context, filters))

    assert len(invoices) == 1
    assert invoice.get(context, invoices[0].id).id == invoices[0].id
    params = fake_api.requests[0].url.params
    assert (params["after"], params["before"], params["limit"]) == ("2019-04-01", "2030-04-30", "1")
