import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Config:
    port: int
    host: str

    # Payments (MercadoPago Pix); empty token means mock-only
    mp_access_token: str
    mp_api_base: str = "https://api.mercadopago.com"

    cors_origins: tuple[str, ...] = ("*",)
    log_level: str = "INFO"

    @property
    def provider_enabled(self) -> bool:
        return bool(self.mp_access_token)


def load_config() -> Config:
    raw_port = os.getenv("PORT", "4000").strip() or "4000"
    if not raw_port.isdigit():
        raise RuntimeError(f"PORT must be a number, got: {raw_port!r}")

    host = os.getenv("HOST", "0.0.0.0").strip() or "0.0.0.0"

    mp_access_token = os.getenv("MP_ACCESS_TOKEN", "").strip()
    mp_api_base = os.getenv("MP_API_BASE", "https://api.mercadopago.com").strip().rstrip("/")

    cors_origins: list[str] = []
    raw_origins = os.getenv("CORS_ORIGINS", "*").strip()
    for x in raw_origins.split(","):
        x = x.strip()
        if x:
            cors_origins.append(x)
    if not cors_origins:
        cors_origins = ["*"]

    log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"

    return Config(
        port=int(raw_port),
        host=host,
        mp_access_token=mp_access_token,
        mp_api_base=mp_api_base or "https://api.mercadopago.com",
        cors_origins=tuple(cors_origins),
        log_level=log_level,
    )
