"""Tests for YAML configuration loading."""

import pytest

from biotools import config as config_module
from biotools.config import BiotoolsConfig, load_config


class TestLoadConfig:

    def test_full_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "api_base_url: http://localhost:8000/\n"
            "timeout_sec: 5\n"
            "output_format: json\n"
            "log_level: info\n"
            "unused_key: 1\n"
        )
        cfg = load_config(path)
        assert cfg == BiotoolsConfig(
            api_base_url="http://localhost:8000",
            timeout_sec=5.0,
            output_format="json",
            log_level="INFO",
        )

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(path) == BiotoolsConfig()

    def test_blank_url_is_none(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("api_base_url: '  '\n")
        assert load_config(path).api_base_url is None

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_missing_default_file(self, tmp_path, monkeypatch):
        monkeypatch.setattr(
            config_module, "DEFAULT_CONFIG_PATH", tmp_path / "none.yaml"
        )
        assert load_config() == BiotoolsConfig()

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ValueError):
            load_config(path)

    def test_invalid_output_format(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("output_format: xml\n")
        with pytest.raises(ValueError, match="output_format"):
            load_config(path)


class TestOverride:

    def test_none_values_ignored(self):
        cfg = BiotoolsConfig(api_base_url="http://a").override(
            api_base_url=None, output_format="json"
        )
        assert cfg.api_base_url == "http://a"
        assert cfg.output_format == "json"


class TestInvalidValues:

    def test_numeric_url_coerced(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("api_base_url: 8000\n")
        assert load_config(path).api_base_url == "8000"

    def test_yaml_syntax_error(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("api_base_url: [unclosed\n")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_config(path)

    def test_unknown_log_level(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("log_level: BASIC_FORMAT\n")
        with pytest.raises(ValueError, match="log_level"):
            load_config(path)

    def test_log_level_case_insensitive(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("log_level: debug\n")
        assert load_config(path).log_level == "DEBUG"
