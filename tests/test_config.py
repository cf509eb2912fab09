"""Tests for settings and logging setup."""

import logging

from rideshare.config import Settings, configure_logging


class TestSettings:
    def test_defaults(self):
        s = Settings()
        assert s.platform_fee == 1.65
        assert s.driver_share == 0.80
        assert s.data_directory == "./support"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("RIDESHARE_PLATFORM_FEE", "2.0")
        monkeypatch.setenv("RIDESHARE_DATA_DIRECTORY", "/srv/rides")
        s = Settings()
        assert s.platform_fee == 2.0
        assert s.data_directory == "/srv/rides"


class TestConfigureLogging:
    def test_uses_settings_level(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
        configure_logging()
        assert calls == [{"level": "INFO"}]

    def test_explicit_level_wins(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
        configure_logging("DEBUG")
        assert calls == [{"level": "DEBUG"}]
