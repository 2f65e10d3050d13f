"""
Tests for configuration models and loading.
"""

import json

import pytest
import yaml
from pydantic import ValidationError

from graphql_fetch.config import ConfigLoader, FetchConfig, LoggingConfig, LogLevel


class TestFetchConfig:
    """Test FetchConfig."""

    def test_defaults(self):
        config = FetchConfig()

        assert config.uri == "/graphql"
        assert config.base_url is None
        assert config.custom_fetch is None
        assert config.construct_options is None
        assert config.timeout == 30.0

    def test_rejects_empty_uri(self):
        with pytest.raises(ValidationError):
            FetchConfig(uri="  ")

    def test_rejects_non_callable_fetch(self):
        with pytest.raises(ValidationError):
            FetchConfig(custom_fetch="fetch")

    def test_rejects_unknown_fields(self):
        with pytest.raises(ValidationError):
            FetchConfig(endpoint="https://api.example.com/graphql")

    def test_rejects_non_positive_timeout(self):
        with pytest.raises(ValidationError):
            FetchConfig(timeout=0)


class TestConfigLoader:
    """Test ConfigLoader."""

    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch):
        for name in ("URI", "BASE_URL", "TIMEOUT", "USER_AGENT", "LOG_LEVEL", "LOG_STRUCTURED"):
            monkeypatch.delenv(f"GRAPHQL_FETCH_{name}", raising=False)

    def test_json_file(self, tmp_path):
        path = tmp_path / "graphql_fetch.json"
        path.write_text(json.dumps({"uri": "https://api.example.com/graphql", "timeout": 10}))

        config, logging_config = ConfigLoader().load(path)

        assert config.uri == "https://api.example.com/graphql"
        assert config.timeout == 10
        assert logging_config == LoggingConfig()

    def test_yaml_file_with_logging(self, tmp_path):
        path = tmp_path / "graphql_fetch.yaml"
        path.write_text(
            yaml.safe_dump(
                {
                    "base_url": "https://api.example.com",
                    "headers": {"X-Client": "tests"},
                    "logging": {"level": "DEBUG", "enable_structured": True},
                }
            )
        )

        config, logging_config = ConfigLoader().load(path)

        assert config.base_url == "https://api.example.com"
        assert config.headers == {"X-Client": "tests"}
        assert logging_config.level == LogLevel.DEBUG
        assert logging_config.enable_structured is True

    def test_environment_overrides_file(self, tmp_path, monkeypatch):
        path = tmp_path / "graphql_fetch.json"
        path.write_text(json.dumps({"uri": "https://file.example.com/graphql", "timeout": 10}))
        monkeypatch.setenv("GRAPHQL_FETCH_URI", "https://env.example.com/graphql")
        monkeypatch.setenv("GRAPHQL_FETCH_TIMEOUT", "2.5")
        monkeypatch.setenv("GRAPHQL_FETCH_LOG_LEVEL", "WARNING")

        config, logging_config = ConfigLoader().load(path)

        assert config.uri == "https://env.example.com/graphql"
        assert config.timeout == 2.5
        assert logging_config.level == LogLevel.WARNING

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ConfigLoader().load(tmp_path / "missing.json")

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / "config.ini"
        path.write_text("[graphql]")

        with pytest.raises(ValueError, match="Unsupported"):
            ConfigLoader().load(path)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json")

        with pytest.raises(ValueError, match="Failed to parse"):
            ConfigLoader().load(path)

    def test_no_sources(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        loader = ConfigLoader()
        loader.config_paths = [tmp_path / "absent.yaml"]

        config, _ = loader.load()

        assert config == FetchConfig()

    @pytest.mark.parametrize(
        "value,expected",
        [("true", True), ("off", False), ("3", 3), ("1.5", 1.5), ("abc", "abc")],
    )
    def test_convert_env_value(self, value, expected):
        assert ConfigLoader()._convert_env_value(value) == expected
