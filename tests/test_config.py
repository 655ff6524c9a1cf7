"""Tests for message_center.config."""

from __future__ import annotations

from message_center.config import ClientSettings, Settings


class TestSettings:
    def test_defaults(self):
        cfg = Settings()
        assert cfg.port == 3001
        assert cfg.api_prefix == "/api"
        assert cfg.log_level == "INFO"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("MESSAGE_CENTER_PORT", "8080")
        monkeypatch.setenv("MESSAGE_CENTER_LOG_JSON", "false")
        cfg = Settings()
        assert cfg.port == 8080
        assert cfg.log_json is False


class TestClientSettings:
    def test_defaults(self):
        cfg = ClientSettings()
        assert cfg.base_url == "http://localhost:3001/api"
        assert cfg.timeout_seconds == 10.0
        assert cfg.fetch_cooldown_ms == 100
        assert cfg.search_debounce_ms == 300
        assert cfg.scroll_throttle_ms == 200
        assert cfg.scroll_threshold_px == 100

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("MESSAGE_CENTER_CLIENT_BASE_URL", "http://api:9000/api")
        assert ClientSettings().base_url == "http://api:9000/api"
