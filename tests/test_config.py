# tests/test_config.py
"""Tests for configuration loading."""

from webanalyse.config import Config, default_worker_count
from webanalyse.constants import FETCH_TIMEOUT_SECONDS, PROBE_TIMEOUT_SECONDS


class TestConfig:
    """Test cases for Config."""

    def test_defaults(self):
        config = Config()
        assert config.host == "localhost"
        assert config.port == 8080
        assert config.fetch_timeout == FETCH_TIMEOUT_SECONDS
        assert config.probe_timeout == PROBE_TIMEOUT_SECONDS
        assert config.max_workers == default_worker_count()
        assert config.max_workers >= 1

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("WEBANALYSE_HOST", "0.0.0.0")
        monkeypatch.setenv("WEBANALYSE_PORT", "9000")
        monkeypatch.setenv("USER_AGENT", "EnvBot/1.0")
        monkeypatch.setenv("PROBE_TIMEOUT", "2.5")
        monkeypatch.setenv("MAX_WORKERS", "6")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        config = Config.from_env()

        assert config.host == "0.0.0.0"
        assert config.port == 9000
        assert config.user_agent == "EnvBot/1.0"
        assert config.probe_timeout == 2.5
        assert config.max_workers == 6
        assert config.log_level == "DEBUG"

    def test_invalid_numbers_keep_defaults(self, monkeypatch):
        monkeypatch.setenv("WEBANALYSE_PORT", "not-a-port")
        monkeypatch.setenv("FETCH_TIMEOUT", "")
        monkeypatch.setenv("MAX_WORKERS", "many")

        config = Config.from_env()

        assert config.port == 8080
        assert config.fetch_timeout == FETCH_TIMEOUT_SECONDS
        assert config.max_workers == default_worker_count()

    def test_worker_count_is_clamped(self):
        assert Config(max_workers=0).max_workers == 1
        assert Config(max_workers=-3).max_workers == 1

    def test_to_dict(self):
        assert Config(port=1234).to_dict()["port"] == 1234
