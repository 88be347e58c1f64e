"""Configuração do pytest para o stark-sdk."""

from __future__ import annotations

import json
import sys
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import httpx
import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from stark_sdk.config.settings import ApiSettings  # noqa: E402
from stark_sdk.context import StarkContext, create_context  # noqa: E402
from stark_sdk.domain.user import Organization, Project  # noqa: E402
from stark_sdk.infra.crypto import create_key_pair  # noqa: E402

API_PREFIX = "/v2/"

Responder = Callable[[httpx.Request], httpx.Response]


class FakeApi:
    """API falsa baseada em httpx.MockTransport.

    Rotas são registradas por (método, path relativo a /v2/). Cada rota tem
    uma fila de respostas; a última se repete quando a fila acaba.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._routes: dict[tuple[str, str], list[Responder]] = {}

    def add(
        self,
        method: str,
        path: str,
        *,
        status: int = 200,
        json_body: Any = None,
        content: bytes | None = None,
    ) -> None:
        def responder(request: httpx.Request) -> httpx.Response:
            if content is not None:
                return httpx.Response(status, content=content)
            return httpx.Response(status, json=json_body)

        self.add_responder(method, path, responder)

    def add_responder(self, method: str, path: str, responder: Responder) -> None:
        self._routes.setdefault((method, API_PREFIX + path), []).append(responder)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        queue = self._routes.get((request.method, request.url.path))
        if not queue:
            return httpx.Response(
                404,
                json={"errors": [{"code": "routeNotFound", "message": request.url.path}]},
            )
        responder = queue.pop(0) if len(queue) > 1 else queue[0]
        return responder(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def last_json(self) -> Any:
        return json.loads(self.requests[-1].content)


@pytest.fixture(scope="session")
def key_pair() -> tuple[str, str]:
    return create_key_pair()


@pytest.fixture(scope="session")
def private_key_pem(key_pair: tuple[str, str]) -> str:
    return key_pair[0]


@pytest.fixture(scope="session")
def public_key_pem(key_pair: tuple[str, str]) -> str:
    return key_pair[1]


@pytest.fixture
def project(private_key_pem: str) -> Project:
    return Project(environment="sandbox", id="9999999999999999", private_key=private_key_pem)


@pytest.fixture
def organization(private_key_pem: str) -> Organization:
    return Organization(environment="sandbox", id="8888888888888888", private_key=private_key_pem)


@pytest.fixture
def fake_api() -> FakeApi:
    return FakeApi()


@pytest.fixture
def settings() -> ApiSettings:
    return ApiSettings()


@pytest.fixture
def context(
    project: Project,
    fake_api: FakeApi,
    settings: ApiSettings,
) -> Iterator[StarkContext]:
    with create_context(project, settings=settings, transport=fake_api.transport) as ctx:
        yield ctx


@pytest.fixture
def org_context(
    organization: Organization,
    fake_api: FakeApi,
    settings: ApiSettings,
) -> Iterator[StarkContext]:
    with create_context(organization, settings=settings, transport=fake_api.transport) as ctx:
        yield ctx


BOLETO_KWARGS: dict[str, Any] = {
    "amount": 400000,
    "name": "Iron Bank S.A.",
    "tax_id": "20.018.183/0001-80",
    "street_line_1": "Av. Faria Lima, 1844",
    "street_line_2": "CJ 13",
    "district": "Itaim Bibi",
    "city": "São Paulo",
    "state_code": "SP",
    "zip_code": "01500-000",
}

INVOICE_KWARGS: dict[str, Any] = {
    "amount": 400000,
    "tax_id": "20.018.183/0001-80",
    "name": "Iron Bank S.A.",
    "due": "2030-04-30T10:00:00.000+00:00",
    "expiration": 123456789,
    "fine": 2.0,
    "interest": 1.3,
}


def make_boleto_json(id: str = "5656565656565656", **overrides: Any) -> dict[str, Any]:
    data = {
        "id": id,
        "amount": 400000,
        "name": "Iron Bank S.A.",
        "taxId": "20.018.183/0001-80",
        "streetLine1": "Av. Faria Lima, 1844",
        "streetLine2": "CJ 13",
        "district": "Itaim Bibi",
        "city": "São Paulo",
        "stateCode": "SP",
        "zipCode": "01500-000",
        "due": "2030-04-30",
        "fine": 2.5,
        "interest": 1.3,
        "overdueLimit": 59,
        "descriptions": [],
        "discounts": [],
        "tags": ["iron"],
        "fee": 0,
        "line": "34191.09008 63571.277308 71444.640008 5 81960000000062",
        "barCode": "34195819600000000621090063571277307144464000",
        "status": "registered",
        "created": "2020-03-10T10:30:00.000000+00:00",
        "workspaceId": "5078376503050240",
    }
    data.update(overrides)
    return data


def make_invoice_json(id: str = "4545454545454545", **overrides: Any) -> dict[str, Any]:
    data = {
        "id": id,
        "amount": 400000,
        "taxId": "20.018.183/0001-80",
        "name": "Iron Bank S.A.",
        "due": "2030-04-30T10:00:00.000000+00:00",
        "expiration": 123456789,
        "fine": 2.0,
        "interest": 1.3,
        "discounts": [],
        "descriptions": [{"key": "Some supplies", "value": "100000"}],
        "tags": [],
        "nominalAmount": 400000,
        "fineAmount": 0,
        "interestAmount": 0,
        "discountAmount": 0,
        "brcode": "00020101021226890014br.gov.bcb.pix",
        "status": "created",
        "fee": 0,
        "pdf": "https://invoice.starkbank.com/pdf/4545454545454545",
        "link": "https://invoice.starkbank.com/4545454545454545",
        "created": "2020-03-10T10:30:00.000000+00:00",
        "updated": "2020-03-10T10:30:00.000000+00:00",
        "transactionIds": [],
    }
    data.update(overrides)
    return data


@pytest.fixture
def boleto_kwargs() -> dict[str, Any]:
    return dict(BOLETO_KWARGS)


@pytest.fixture
def invoice_kwargs() -> dict[str, Any]:
    return dict(INVOICE_KWARGS)


@pytest.fixture
def boleto_json() -> dict[str, Any]:
    return make_boleto_json()


@pytest.fixture
def invoice_json() -> dict[str, Any]:
    return make_invoice_json()


@pytest.fixture
def boleto_factory() -> Callable[..., dict[str, Any]]:
    return make_boleto_json


@pytest.fixture
def invoice_factory() -> Callable[..., dict[str, Any]]:
    return make_invoice_json
