import pytest
from pydantic import ValidationError

from assemblyai_client.config import (
    BASE_URL_V1,
    BASE_URL_V2,
    DEFAULT_TIMEOUT_SECONDS,
    ClientConfig,
    load_config,
)


def test_load_config_defaults(monkeypatch):
    monkeypatch.setenv("ASSEMBLYAI_API_KEY", "key-123")
    monkeypatch.delenv("ASSEMBLYAI_BASE_URL", raising=False)
    monkeypatch.delenv("ASSEMBLYAI_TIMEOUT", raising=False)

    config = load_config()

    assert config.api_key == "key-123"
    assert config.base_url == BASE_URL_V2
    assert config.timeout == DEFAULT_TIMEOUT_SECONDS == 60.0


def test_load_config_overrides(monkeypatch):
    monkeypatch.setenv("ASSEMBLYAI_API_KEY", "key-123")
    monkeypatch.setenv("ASSEMBLYAI_BASE_URL", "http://localhost:9000/v2")
    monkeypatch.setenv("ASSEMBLYAI_TIMEOUT", "15")

    config = load_config()

    assert config.base_url == "http://localhost:9000/v2"
    assert config.timeout == 15.0


def test_load_config_missing_key_fails(monkeypatch):
    monkeypatch.delenv("ASSEMBLYAI_API_KEY", raising=False)

    with pytest.raises(ValueError, match="ASSEMBLYAI_API_KEY"):
        load_config()


def test_load_config_blank_key_fails(monkeypatch):
    monkeypatch.setenv("ASSEMBLYAI_API_KEY", "   ")

    with pytest.raises(ValueError, match="ASSEMBLYAI_API_KEY"):
        load_config()


def test_config_rejects_non_positive_timeout():
    with pytest.raises(ValidationError):
        ClientConfig(api_key="key", timeout=0)


def test_config_immutable():
    config = ClientConfig(api_key="key")

    with pytest.raises(ValidationError):
        config.api_key = "other"


def test_legacy_base_url_constant():
    assert BASE_URL_V1 == "https://api.assemblyai.com/v1"
    assert BASE_URL_V2 == "https://api.assemblyai.com/v2"
