from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Optional

from .base import (
    MockProvider,
    PaymentRequest,
    PixProvider,
    ProviderError,
    ValidationError,
)
from .utils import to_data_url

logger = logging.getLogger(__name__)

AMOUNT_ERROR = "amount must be > 0"


def parse_payment_request(body: Any) -> PaymentRequest:
    """Apply defaults to a raw JSON body and check the amount.

    ``description`` and ``payer`` are passed through untouched, whatever
    JSON type they have.
    """
    if not isinstance(body, dict):
        body = {}

    amount = body.get("amount", 1.0)
    if isinstance(amount, bool):
        raise ValidationError(AMOUNT_ERROR)
    try:
        value = float(amount)
    except (TypeError, ValueError, OverflowError):
        raise ValidationError(AMOUNT_ERROR)
    if not math.isfinite(value) or value <= 0:
        raise ValidationError(AMOUNT_ERROR)

    return PaymentRequest(
        amount=amount,
        description=body.get("description", "Compra PIX"),
        payer=body.get("payer"),
    )


@dataclass
class PixPaymentService:
    mock: MockProvider
    provider: Optional[PixProvider] = None  # None -> mock only

    def create_payment(self, request: PaymentRequest) -> dict:
        if self.provider is not None:
            try:
                mp = self.provider.create_pix_payment(
                    amount=request.amount,
                    description=request.description,
                    payer=request.payer,
                )
            except ProviderError as e:
                # provider down: serve the mock, the caller never sees the error
                logger.error("%s error: %s", self.provider.name, e)
            else:
                return {
                    "success": True,
                    "provider": "mercadopago",
                    "qr_base64": to_data_url(mp.qr_image_base64),
                    "payload": mp.qr_text or None,
                    "raw": mp.raw,
                }

        mock = self.mock.create_pix_payment(amount=request.amount, description=request.description)
        logger.info("%s PIX charge created: txid=%s", self.mock.name, mock.transaction_id)
        return {
            "success": True,
            "provider": "mock",
            "qr_base64": mock.qr_image_data_url,
            "payload": mock.payload,
            "txid": mock.transaction_id,
            "expires_at": None,
        }
