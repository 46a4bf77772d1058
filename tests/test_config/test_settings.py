"""Testes das settings e da validação no bootstrap."""

from __future__ import annotations

import pytest

from app.bootstrap import validate_runtime_settings
from config.settings import (
    DEFAULT_WEBHOOK_PATH,
    TOPGG_API_BASE_URL,
    TopggSettings,
    get_base_settings,
    get_topgg_settings,
)


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Settings são cacheadas com lru_cache; cada teste lê o próprio ambiente."""
    get_base_settings.cache_clear()
    get_topgg_settings.cache_clear()
    yield
    get_base_settings.cache_clear()
    get_topgg_settings.cache_clear()


class TestTopggSettings:
    def test_defaults(self) -> None:
        settings = TopggSettings()

        assert settings.webhook_path == DEFAULT_WEBHOOK_PATH
        assert settings.api_base_url == TOPGG_API_BASE_URL

    def test_loads_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TOPGG_WEBHOOK_PASSWORD", "pw")
        monkeypatch.setenv("TOPGG_WEBHOOK_PATH", "/votes")
        monkeypatch.setenv("TOPGG_MAX_RETRIES", "0")

        settings = get_topgg_settings()

        assert settings.webhook_password == "pw"
        assert settings.webhook_path == "/votes"
        assert settings.max_retries == 0
        assert get_topgg_settings() is settings

    def test_validate_reports_errors(self) -> None:
        errors = TopggSettings(webhook_path="votes", bot_id="abc", max_retries=-1).validate()

        assert "TOPGG_WEBHOOK_PASSWORD não configurado" in errors
        assert any("TOPGG_WEBHOOK_PATH" in error for error in errors)
        assert any("TOPGG_BOT_ID" in error for error in errors)
        assert any("TOPGG_MAX_RETRIES" in error for error in errors)

    def test_validate_ok(self) -> None:
        assert TopggSettings(webhook_password="pw", bot_id="123").validate() == []


class TestBaseSettings:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("prod", "production"), ("stage", "staging"), ("anything", "development")],
    )
    def test_environment_aliases(
        self, monkeypatch: pytest.MonkeyPatch, raw: str, expected: str
    ) -> None:
        monkeypatch.setenv("ENVIRONMENT", raw)
        assert get_base_settings().environment == expected


class TestValidateRuntimeSettings:
    def test_development_only_warns(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "development")
        monkeypatch.delenv("TOPGG_WEBHOOK_PASSWORD", raising=False)

        validate_runtime_settings()

    def test_production_fails_fast(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.delenv("TOPGG_WEBHOOK_PASSWORD", raising=False)

        with pytest.raises(RuntimeError, match="TOPGG_WEBHOOK_PASSWORD"):
            validate_runtime_settings()

    def test_production_with_password_passes(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("TOPGG_WEBHOOK_PASSWORD", "pw")
        monkeypatch.delenv("TOPGG_WEBHOOK_PATH", raising=False)
        monkeypatch.delenv("TOPGG_BOT_ID", raising=False)

        validate_runtime_settings()
