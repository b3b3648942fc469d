"""Unit tests for tvpromo.config."""

from pathlib import Path

import pytest

from tvpromo import ConfigurationError, load_settings


class TestLoadSettings:

    def test_reads_required_values(self):
        settings = load_settings({"YT_API_KEY": "KEY", "TVPROMO_OUTPUT_DIR": "/tmp/posts"})
        assert settings.youtube_api_key == "KEY"
        assert settings.output_dir == Path("/tmp/posts")
        assert settings.log_level == "WARNING"

    def test_log_level_normalized(self):
        settings = load_settings(
            {"YT_API_KEY": "KEY", "TVPROMO_OUTPUT_DIR": "out", "TVPROMO_LOG_LEVEL": " debug "}
        )
        assert settings.log_level == "DEBUG"

    def test_missing_api_key(self):
        with pytest.raises(ConfigurationError, match="YT_API_KEY"):
            load_settings({"TVPROMO_OUTPUT_DIR": "out"})

    def test_missing_output_dir(self):
        with pytest.raises(ConfigurationError, match="TVPROMO_OUTPUT_DIR"):
            load_settings({"YT_API_KEY": "KEY"})

    def test_blank_value_counts_as_missing(self):
        with pytest.raises(ConfigurationError, match="YT_API_KEY"):
            load_settings({"YT_API_KEY": "   ", "TVPROMO_OUTPUT_DIR": "out"})

    def test_defaults_to_os_environ(self, monkeypatch):
        monkeypatch.setenv("YT_API_KEY", "ENVKEY")
        monkeypatch.setenv("TVPROMO_OUTPUT_DIR", "envout")
        monkeypatch.delenv("TVPROMO_LOG_LEVEL", raising=False)
        settings = load_settings()
        assert settings.youtube_api_key == "ENVKEY"
        assert settings.output_dir == Path("envout")
