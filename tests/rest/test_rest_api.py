"""Testes para nomes de recurso, serialização e query string."""

from __future__ import annotations

from datetime import date

import pytest

from stark_sdk.domain.boleto import Boleto, BoletoLog, BoletoLogQuery, BoletoQuery
from stark_sdk.rest.api import (
    ResourceSpec,
    cast_query,
    endpoint,
    from_api_json,
    last_name,
    last_name_plural,
    to_api_json,
)
from stark_sdk.utils.errors import DeserializationError


@pytest.mark.parametrize(
    ("name", "expected_endpoint", "expected_last", "expected_plural"),
    [
        ("Boleto", "boleto", "boleto", "boletos"),
        ("BoletoLog", "boleto/log", "log", "logs"),
        ("Invoice", "invoice", "invoice", "invoices"),
        ("InvoiceLog", "invoice/log", "log", "logs"),
        ("Workspace", "workspace", "workspace", "workspaces"),
        ("Payment", "payment", "payment", "payments"),
        ("BrcodePayment", "brcode-payment", "payment", "payments"),
        ("Policy", "policy", "policy", "policies"),
    ],
)
def test_resource_naming(
    name: str,
    expected_endpoint: str,
    expected_last: str,
    expected_plural: str,
) -> None:
    assert endpoint(name) == expected_endpoint
    assert last_name(name) == expected_last
    assert last_name_plural(name) == expected_plural


def test_resource_spec_properties() -> None:
    spec = ResourceSpec(model=BoletoLog, name="BoletoLog")
    assert (spec.endpoint, spec.last_name, spec.last_name_plural) == ("boleto/log", "log", "logs")


def test_to_api_json_uses_camel_case_and_drops_nulls(boleto_kwargs: dict) -> None:
    payload = to_api_json(Boleto(**boleto_kwargs, overdue_limit=5))
    assert payload["taxId"] == boleto_kwargs["tax_id"]
    assert payload["streetLine1"] == boleto_kwargs["street_line_1"]
    assert payload["overdueLimit"] == 5
    assert "id" not in payload
    assert "barCode" not in payload


def test_from_api_json_ignores_unknown_fields(boleto_json: dict) -> None:
    data = {**boleto_json, "workspaceId": "123", "ourNumber": "10001"}
    boleto = from_api_json(Boleto, data)
    assert boleto.id == boleto_json["id"]
    assert boleto.bar_code == boleto_json["barCode"]


def test_from_api_json_ignores_unknown_nested_fields(boleto_json: dict) -> None:
    log_json = {
        "id": "1",
        "type": "registered",
        "errors": [],
        "created": "2020-03-10T10:30:00+00:00",
        "boleto": {**boleto_json, "transactionIds": ["9"]},
    }
    log = from_api_json(BoletoLog, log_json)
    assert log.boleto is not None
    assert log.boleto.id == boleto_json["id"]


def test_from_api_json_type_mismatch_is_deserialization_error(boleto_json: dict) -> None:
    with pytest.raises(DeserializationError):
        from_api_json(Boleto, {**boleto_json, "amount": "lots"})


def test_from_api_json_requires_object() -> None:
    with pytest.raises(DeserializationError):
        from_api_json(Boleto, ["not", "an", "object"])


class TestCastQuery:
    def test_none_is_empty(self) -> None:
        assert cast_query(None) == {}

    def test_dates_lists_and_camel_case(self) -> None:
        filters = BoletoLogQuery(
            limit=3,
            after=date(2019, 4, 1),
            before="2030-04-30",
            types=["paid", "registered"],
            boleto_ids=["1", "2"],
        )
        assert cast_query(filters, exclude={"limit"}) == {
            "after": "2019-04-01",
            "before": "2030-04-30",
            "types": "paid,registered",
            "boletoIds": "1,2",
        }

    def test_limit_kept_unless_excluded(self) -> None:
        assert cast_query(BoletoQuery(limit=7)) == {"limit": "7"}
