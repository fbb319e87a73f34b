import pytest
from pydantic import ValidationError

from ai_chat.core.config import Settings


def test_cors_origins_accepts_comma_separated_value(monkeypatch) -> None:
    monkeypatch.setenv("CORS_ORIGINS", "http://a.com, http://b.com,")
    settings = Settings()
    assert settings.cors_origin_list == ["http://a.com", "http://b.com"]


def test_cors_origins_default_is_local_dev(monkeypatch) -> None:
    monkeypatch.delenv("CORS_ORIGINS", raising=False)
    assert Settings().cors_origin_list == ["http://localhost:5173", "http://localhost:3000"]


def test_log_level_is_normalized(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", " debug ")
    assert Settings().log_level == "DEBUG"


def test_invalid_log_level_names_the_setting(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "LOUD")
    with pytest.raises(ValidationError, match="LOG_LEVEL"):
        Settings()
