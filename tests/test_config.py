import pytest

from pix_shop.config import load_config


@pytest.fixture
def clean_env(monkeypatch):
    for key in ("PORT", "HOST", "MP_ACCESS_TOKEN", "MP_API_BASE", "CORS_ORIGINS", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


def test_defaults_run_mock_only(clean_env):
    cfg = load_config()

    assert cfg.port == 4000
    assert cfg.host == "0.0.0.0"
    assert cfg.mp_access_token == ""
    assert cfg.provider_enabled is False
    assert cfg.mp_api_base == "https://api.mercadopago.com"
    assert cfg.cors_origins == ("*",)
    assert cfg.log_level == "INFO"


def test_reads_environment(clean_env):
    clean_env.setenv("PORT", "8080")
    clean_env.setenv("MP_ACCESS_TOKEN", "  APP_USR-1  ")
    clean_env.setenv("CORS_ORIGINS", "https://shop.example.com, http://localhost:3000,")
    clean_env.setenv("LOG_LEVEL", "debug")

    cfg = load_config()

    assert cfg.port == 8080
    assert cfg.mp_access_token == "APP_USR-1"
    assert cfg.provider_enabled is True
    assert cfg.cors_origins == ("https://shop.example.com", "http://localhost:3000")
    assert cfg.log_level == "DEBUG"


def test_bad_port_fails_fast(clean_env):
    clean_env.setenv("PORT", "forty")

    with pytest.raises(RuntimeError, match="PORT"):
        load_config()
