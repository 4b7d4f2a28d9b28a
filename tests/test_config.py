"""
Configuration tests.

Tests loading from JSON, environment overrides and client construction
from configuration.
"""

import json
import logging
from unittest.mock import patch

import pytest
import requests  # type: ignore

from conftest import make_response
from seacloud.api import SeacloudAPI
from seacloud.core import Config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ("SEACLOUD_CONFIG_FILE", "SEACLOUD_BASE_URL", "SEACLOUD_TIMEOUT",
                "SEACLOUD_USERNAME", "SEACLOUD_PASSWORD"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "api": {"base_url": "https://file.test", "timeout": 10, "verify_ssl": False},
        "authentication": {"username": "file-user", "password": "file-pass"},
    }))
    return path


@pytest.mark.unit
class TestConfig:
    """Test configuration loading."""

    def test_defaults_without_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        config = Config(load_env_file=False)

        assert config.api_base_url == "https://api.seacloud.no"
        assert config.api_timeout is None
        assert config.api_verify_ssl is True
        assert not config.has_credentials

    def test_explicit_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Config(str(tmp_path / "missing.json"), load_env_file=False)

    def test_loads_json_file(self, config_file):
        config = Config(str(config_file), load_env_file=False)

        assert config.api_base_url == "https://file.test"
        assert config.api_timeout == 10
        assert config.api_verify_ssl is False
        assert config.auth_username == "file-user"
        assert config.get("authentication.password") == "file-pass"
        assert config.get("api.missing", "fallback") == "fallback"

    def test_environment_overrides_file(self, config_file, monkeypatch):
        monkeypatch.setenv("SEACLOUD_BASE_URL", "https://env.test")
        monkeypatch.setenv("SEACLOUD_USERNAME", "env-user")
        monkeypatch.setenv("SEACLOUD_TIMEOUT", "2.5")

        config = Config(str(config_file), load_env_file=False)

        assert config.api_base_url == "https://env.test"
        assert config.auth_username == "env-user"
        assert config.auth_password == "file-pass"
        assert config.api_timeout == 2.5

    def test_invalid_timeout_rejected(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"api": {"timeout": "soon"}}))

        with pytest.raises(ValueError):
            Config(str(path), load_env_file=False)


@pytest.mark.unit
class TestClientFromConfig:
    """Test building a client from configuration."""

    def test_from_config_authenticates(self, config_file):
        config = Config(str(config_file), load_env_file=False)

        with patch.object(
            requests.Session, "request",
            return_value=make_response(body={"idToken": "A", "refreshToken": "B"})
        ) as mock_request:
            client = SeacloudAPI.from_config(config)

        kwargs = mock_request.call_args.kwargs
        assert kwargs["url"] == "https://file.test/authenticate"
        assert kwargs["json"] == {"username": "file-user", "password": "file-pass"}
        assert kwargs["timeout"] == 10
        assert kwargs["verify"] is False
        assert client.id_token == "A"

    def test_from_config_logs_timed_connection(self, config_file, caplog):
        config = Config(str(config_file), load_env_file=False)

        with caplog.at_level(logging.INFO, logger="seacloud"):
            with patch.object(
                requests.Session, "request",
                return_value=make_response(body={"idToken": "A", "refreshToken": "B"})
            ):
                SeacloudAPI.from_config(config)

        assert "Starting connecting to https://file.test" in caplog.text
        assert "Completed connecting to https://file.test" in caplog.text

    def test_from_config_logs_failed_connection(self, config_file, caplog):
        config = Config(str(config_file), load_env_file=False)

        with caplog.at_level(logging.INFO, logger="seacloud"):
            with patch.object(
                requests.Session, "request",
                return_value=make_response(status_code=401, body={})
            ):
                with pytest.raises(requests.exceptions.HTTPError):
                    SeacloudAPI.from_config(config)

        assert "Failed connecting to https://file.test" in caplog.text

    def test_from_config_requires_credentials(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        with pytest.raises(ValueError):
            SeacloudAPI.from_config(Config(load_env_file=False))
