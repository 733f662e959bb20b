"""Tests for environment-driven configuration."""

import sys

from sanitize_filename.config import Config
from sanitize_filename import Options


class TestConfig:
    def test_defaults(self):
        config = Config()
        assert config.replacement == ""
        assert config.truncate is True
        assert config.windows is None
        assert config.log_level == "WARNING"

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("SANITIZE_REPLACEMENT", "_")
        monkeypatch.setenv("SANITIZE_TRUNCATE", "false")
        monkeypatch.setenv("SANITIZE_WINDOWS", "TRUE")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        config = Config()

        assert config.replacement == "_"
        assert config.truncate is False
        assert config.windows is True
        assert config.log_level == "DEBUG"

    def test_env_file_overrides(self, monkeypatch, tmp_path):
        # Registered with monkeypatch so the values loaded below are undone
        monkeypatch.setenv("SANITIZE_REPLACEMENT", "-")
        monkeypatch.setenv("SANITIZE_WINDOWS", "")
        env_file = tmp_path / ".env"
        env_file.write_text("SANITIZE_REPLACEMENT=+\nSANITIZE_WINDOWS=false\n", encoding="utf-8")

        config = Config(env_file=str(env_file))

        assert config.replacement == "+"
        assert config.windows is False

    def test_options_follow_host_when_unset(self, monkeypatch):
        monkeypatch.setattr(sys, "platform", "win32")
        assert Config().options() == Options(truncate=True, windows=True, replacement="")

    def test_configured_windows_beats_host(self, monkeypatch):
        monkeypatch.setattr(sys, "platform", "win32")
        monkeypatch.setenv("SANITIZE_WINDOWS", "false")
        assert Config().options().windows is False

    def test_arguments_beat_configuration(self, monkeypatch):
        monkeypatch.setenv("SANITIZE_REPLACEMENT", "_")
        monkeypatch.setenv("SANITIZE_TRUNCATE", "false")
        monkeypatch.setenv("SANITIZE_WINDOWS", "false")

        options = Config().options(replacement="", windows=True, truncate=True)

        assert options == Options(truncate=True, windows=True, replacement="")
