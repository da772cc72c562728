from __future__ import annotations

from typing import Any, Optional

import pytest
from fastapi.testclient import TestClient

from app_server import create_app
from pix_shop.config import Config
from pix_shop.payments.base import ProviderChargeResult, ProviderError
from pix_shop.payments.mock_pix import MockPixProvider
from pix_shop.payments.service import PixPaymentService


class FakeMercadoPago:
    name = "mercadopago"

    def __init__(self, result: Optional[ProviderChargeResult] = None, error: Optional[Exception] = None):
        self.result = result
        self.error = error
        self.calls: list[dict[str, Any]] = []

    def create_pix_payment(self, *, amount, description, payer) -> ProviderChargeResult:
        self.calls.append({"amount": amount, "description": description, "payer": payer})
        if self.error is not None:
            raise self.error
        return self.result


class CountingMock(MockPixProvider):
    calls = 0

    def create_pix_payment(self, *, amount, description):
        self.calls += 1
        return super().create_pix_payment(amount=amount, description=description)


@pytest.fixture
def mock_cfg() -> Config:
    return Config(port=4000, host="127.0.0.1", mp_access_token="")


@pytest.fixture
def mp_cfg() -> Config:
    return Config(port=4000, host="127.0.0.1", mp_access_token="TEST-token")


@pytest.fixture
def counting_mock() -> CountingMock:
    return CountingMock()


@pytest.fixture
def mock_client(mock_cfg, counting_mock):
    pay = PixPaymentService(mock=counting_mock, provider=None)
    with TestClient(create_app(mock_cfg, pay)) as client:
        yield client


def make_mp_client(cfg: Config, provider: FakeMercadoPago, mock: MockPixProvider) -> TestClient:
    pay = PixPaymentService(mock=mock, provider=provider)
    return TestClient(create_app(cfg, pay))


@pytest.fixture
def provider_error() -> ProviderError:
    return ProviderError("MP API error: 401 unauthorized", status_code=401, body="unauthorized")
