"""Unit tests for oakwire_api.config."""

import pytest

from oakwire_api.config import ServerConfig, get_server_config


class TestGetServerConfig:
    def test_reads_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OAKWIRE_API_KEY", "my-secret-key")
        monkeypatch.delenv("OAKWIRE_SERVER_HOST", raising=False)
        monkeypatch.delenv("OAKWIRE_SERVER_PORT", raising=False)
        monkeypatch.delenv("OAKWIRE_AUDIT_ENABLED", raising=False)

        cfg = get_server_config()

        assert isinstance(cfg, ServerConfig)
        assert cfg.api_key == "my-secret-key"
        assert cfg.host == "0.0.0.0"
        assert cfg.port == 8730
        assert cfg.audit_enabled is True

    def test_custom_values(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OAKWIRE_API_KEY", "key-123")
        monkeypatch.setenv("OAKWIRE_SERVER_HOST", "127.0.0.1")
        monkeypatch.setenv("OAKWIRE_SERVER_PORT", "9000")
        monkeypatch.setenv("OAKWIRE_AUDIT_ENABLED", "false")

        cfg = get_server_config()

        assert cfg.host == "127.0.0.1"
        assert cfg.port == 9000
        assert cfg.audit_enabled is False

    def test_raises_on_missing_api_key(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("OAKWIRE_API_KEY", raising=False)

        with pytest.raises(KeyError):
            get_server_config()
