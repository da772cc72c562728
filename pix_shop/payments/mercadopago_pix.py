from __future__ import annotations

import json
import urllib.error
import urllib.request
from dataclasses import dataclass
from typing import Any, Optional

from .base import ProviderChargeResult, ProviderError

DEFAULT_DESCRIPTION = "Compra via PIX"
DEFAULT_PAYER = {"email": "customer@example.com"}


def _object_field(obj: dict, key: str) -> dict:
    value = obj.get(key) or {}
    if not isinstance(value, dict):
        raise ProviderError(f"MercadoPago: {key} is not an object: {str(value)[:200]}", body=str(obj)[:500])
    return value


def _text_field(obj: dict, key: str) -> Optional[str]:
    value = obj.get(key)
    if value is not None and not isinstance(value, str):
        raise ProviderError(f"MercadoPago: {key} is not a string: {str(value)[:200]}")
    return value


@dataclass
class MercadoPagoPixProvider:
    access_token: str
    api_base: str = "https://api.mercadopago.com"
    name: str = "mercadopago"

    def _request(self, *, method: str, path: str, payload: Optional[dict] = None) -> Any:
        url = self.api_base.rstrip("/") + path
        data = None
        if payload is not None:
            data = json.dumps(payload).encode("utf-8")

        req = urllib.request.Request(
            url,
            data=data,
            method=method,
            headers={
                "Authorization": f"Bearer {self.access_token}",
                "Content-Type": "application/json",
            },
        )
        try:
            with urllib.request.urlopen(req) as resp:
                status = resp.status
                raw = resp.read()
        except urllib.error.HTTPError as e:
            err = e.read().decode("utf-8", errors="ignore")
            raise ProviderError(f"MP API error: {e.code} {err}", status_code=e.code, body=err) from e
        except (urllib.error.URLError, OSError) as e:
            raise ProviderError(f"MP API unreachable: {e}") from e

        try:
            body = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ProviderError(
                f"MercadoPago: response is not UTF-8: {raw[:100]!r}", status_code=status
            ) from e

        try:
            return json.loads(body)
        except json.JSONDecodeError as e:
            raise ProviderError(
                f"MercadoPago: invalid JSON response: {body[:500]}", status_code=status, body=body
            ) from e

    def create_pix_payment(self, *, amount: Any, description: Any, payer: Any) -> ProviderChargeResult:
        try:
            transaction_amount = float(amount)
        except (TypeError, ValueError, OverflowError) as e:
            raise ProviderError(f"MercadoPago: bad transaction_amount: {str(amount)[:50]}") from e

        j = self._request(
            method="POST",
            path="/v1/payments",
            payload={
                "transaction_amount": transaction_amount,
                "description": description or DEFAULT_DESCRIPTION,
                "payment_method_id": "pix",
                "payer": payer or DEFAULT_PAYER,
            },
        )
        if not isinstance(j, dict):
            raise ProviderError(f"MercadoPago: unexpected response: {str(j)[:500]}", body=str(j))

        # point_of_interaction.transaction_data may be missing or null
        poi = _object_field(j, "point_of_interaction")
        tx = _object_field(poi, "transaction_data")

        return ProviderChargeResult(
            qr_text=_text_field(tx, "qr_code"),
            qr_image_base64=_text_field(tx, "qr_code_base64"),
            raw=j,
        )
