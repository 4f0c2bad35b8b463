"""Tests for configuration loading."""

import json

import pytest

from jmail.config.config_loader import ConfigError, ConfigLoader
from jmail.config.decoder_config import AppConfig, CharsetConfig, DecoderConfig, LoggingConfig


class TestConfigModels:
    """Test config validation."""

    def test_defaults(self):
        config = AppConfig()

        assert config.decoding.output_encoding == "utf-8"
        assert config.decoding.transcode_errors == "strict"
        assert config.decoding.charsets.iso2022jp_codec == "iso2022_jp_ext"
        assert config.logging.level == "WARNING"

    def test_unknown_codec_rejected(self):
        with pytest.raises(ValueError):
            CharsetConfig(eucjp_codec="no-such-codec")

    def test_invalid_error_policy_rejected(self):
        with pytest.raises(ValueError):
            DecoderConfig(transcode_errors="backslashreplace")

    def test_log_level_is_upper_cased(self):
        assert LoggingConfig(level="debug").level == "DEBUG"

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValueError):
            LoggingConfig(level="chatty")


class TestConfigLoader:
    """Test loading config files."""

    def test_load_custom_file(self, tmp_path):
        config_file = tmp_path / "jmail.json"
        config_file.write_text(
            json.dumps({"decoding": {"transcode_errors": "replace"}, "logging": {"level": "info"}}),
            encoding="utf-8",
        )

        config = ConfigLoader(config_file).load_app_config()

        assert config.decoding.transcode_errors == "replace"
        assert config.logging.level == "INFO"

    def test_missing_custom_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ConfigLoader(tmp_path / "missing.json").load_app_config()

    def test_invalid_json(self, tmp_path):
        config_file = tmp_path / "broken.json"
        config_file.write_text("{not json", encoding="utf-8")

        with pytest.raises(ConfigError):
            ConfigLoader(config_file).load_app_config()

    def test_invalid_values(self, tmp_path):
        config_file = tmp_path / "bad.json"
        config_file.write_text(json.dumps({"decoding": {"output_encoding": "klingon"}}), encoding="utf-8")

        with pytest.raises(ConfigError):
            ConfigLoader(config_file).load_app_config()

    def test_defaults_without_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HOME", str(tmp_path))

        config = ConfigLoader().load_app_config()

        assert config == AppConfig()

    def test_reload(self, tmp_path):
        config_file = tmp_path / "jmail.json"
        config_file.write_text(json.dumps({"logging": {"level": "ERROR"}}), encoding="utf-8")
        loader = ConfigLoader(config_file)
        assert loader.load_app_config().logging.level == "ERROR"

        config_file.write_text(json.dumps({"logging": {"level": "DEBUG"}}), encoding="utf-8")

        assert loader.load_app_config().logging.level == "ERROR"
        assert loader.reload().logging.level == "DEBUG"
