from __future__ import annotations

import json
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from pix_shop.config import Config, load_config
from pix_shop.payments.base import ValidationError
from pix_shop.payments.mercadopago_pix import MercadoPagoPixProvider
from pix_shop.payments.mock_pix import MockPixProvider
from pix_shop.payments.service import PixPaymentService, parse_payment_request

logger = logging.getLogger(__name__)


def build_payment_service(cfg: Config) -> PixPaymentService:
    mp_provider = (
        MercadoPagoPixProvider(access_token=cfg.mp_access_token, api_base=cfg.mp_api_base)
        if cfg.provider_enabled
        else None
    )
    return PixPaymentService(mock=MockPixProvider(), provider=mp_provider)


def create_app(cfg: Config, pay: Optional[PixPaymentService] = None) -> FastAPI:
    pay = pay or build_payment_service(cfg)

    app = FastAPI(title="PIX Shop backend")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(cfg.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.cfg = cfg
    app.state.pay = pay

    @app.get("/")
    def root():
        return {"ok": True}

    @app.post("/create-payment")
    async def create_payment(request: Request):
        try:
            raw = await request.body()
            try:
                body = json.loads(raw) if raw else {}
            except ValueError:
                body = {}

            try:
                payment_request = parse_payment_request(body)
            except ValidationError as e:
                return JSONResponse(status_code=400, content={"error": str(e)})

            # blocking provider call, keep it off the event loop
            return await run_in_threadpool(pay.create_payment, payment_request)
        except Exception as e:
            logger.exception("Unhandled error in /create-payment")
            return JSONResponse(status_code=500, content={"error": "internal_error", "details": str(e)})

    return app


cfg = load_config()
logging.basicConfig(level=cfg.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
app = create_app(cfg)


if __name__ == "__main__":
    import uvicorn
    logger.info("PIX-shop backend listening on http://localhost:%s", cfg.port)
    uvicorn.run(app, host=cfg.host, port=cfg.port, log_level=cfg.log_level.lower())
