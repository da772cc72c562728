from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Protocol

PIX_DATA_URL_PREFIX = "data:image/png;base64,"


class PixShopError(Exception):
    """Base class for errors raised by the payment flow."""


class ValidationError(PixShopError):
    pass


class ProviderError(PixShopError):
    """The payment provider refused the charge or answered with something unusable."""

    def __init__(self, message: str, *, status_code: Optional[int] = None, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


@dataclass(frozen=True)
class PaymentRequest:
    amount: Any = 1.0
    description: Any = "Compra PIX"
    payer: Any = None


@dataclass(frozen=True)
class ProviderChargeResult:
    qr_text: Optional[str]
    qr_image_base64: Optional[str]
    raw: Any


@dataclass(frozen=True)
class MockChargeResult:
    payload: str
    qr_image_data_url: str
    transaction_id: str


class PixProvider(Protocol):
    name: str

    def create_pix_payment(self, *, amount: Any, description: Any, payer: Any) -> ProviderChargeResult:
        ...


class MockProvider(Protocol):
    name: str

    def create_pix_payment(self, *, amount: Any, description: Any) -> MockChargeResult:
        ...
