# pix_shop/payments/utils.py
from __future__ import annotations

from typing import Optional

from .base import PIX_DATA_URL_PREFIX


def to_data_url(qr_base64: Optional[str]) -> Optional[str]:
    # MercadoPago usually sends qr_code_base64 without the data-url prefix
    if qr_base64 and not qr_base64.startswith("data:"):
        return PIX_DATA_URL_PREFIX + qr_base64
    return qr_base64 or None
