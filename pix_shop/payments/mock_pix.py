from __future__ import annotations

import base64
import uuid
from dataclasses import dataclass
from io import BytesIO
from typing import Any

import qrcode

from .base import PIX_DATA_URL_PREFIX, MockChargeResult

MOCK_MERCHANT = "pix-shop-demo"
MOCK_PIX_KEY = "00000000-0000-0000-0000-000000000000"


def payload_text(value: Any) -> str:
    # 1.0 -> "1", ["a", "b"] -> "a,b"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join(payload_text(x) for x in value)
    return str(value)


def render_qr_data_url(text: str) -> str:
    img = qrcode.make(text)
    buf = BytesIO()
    img.save(buf, format="PNG")
    return PIX_DATA_URL_PREFIX + base64.b64encode(buf.getvalue()).decode("ascii")


@dataclass
class MockPixProvider:
    """A no-network PIX provider for offline testing.

    The payload is human readable and NOT a valid BR Code; it only exists so
    the client has something to scan.
    """

    name: str = "mock"

    def build_payload(self, *, txid: str, amount: Any, description: Any) -> str:
        return (
            f"PIX|merchant:{MOCK_MERCHANT}|txid:{txid}|amount:{payload_text(amount)}"
            f"|desc:{payload_text(description or 'Compra')}|key:{MOCK_PIX_KEY}"
        )

    def create_pix_payment(self, *, amount: Any, description: Any) -> MockChargeResult:
        txid = str(uuid.uuid4())
        payload = self.build_payload(txid=txid, amount=amount, description=description)
        return MockChargeResult(
            payload=payload,
            qr_image_data_url=render_qr_data_url(payload),
            transaction_id=txid,
        )
