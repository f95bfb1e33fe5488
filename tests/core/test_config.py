"""
Tests for configuration management.
"""

import json
import pytest

from catalyst.core import config


@pytest.fixture
def config_files(tmp_path, monkeypatch):
    """
    Point the config loader at temporary default and user files.
    """
    default_path = tmp_path / "default_config.json"
    user_path = tmp_path / "user" / "config.json"

    default_path.write_text(json.dumps({
        "retry": {"max_retries": 5, "initial_delay": 1.0},
        "image_generation": {"project_id": "default-project", "proxy_url": None},
        "logging": {"level": "INFO"}
    }))

    monkeypatch.setattr(config, "DEFAULT_CONFIG_PATH", str(default_path))
    monkeypatch.setattr(config, "USER_CONFIG_PATH", str(user_path))
    monkeypatch.delenv("GOOGLE_CLOUD_PROJECT", raising=False)
    monkeypatch.delenv("CATALYST_PROXY_URL", raising=False)
    config.get_config(reload=True)

    yield default_path, user_path

    monkeypatch.undo()
    config.get_config(reload=True)


class TestConfig:
    """
    Tests for the configuration hierarchy.
    """

    def test_dot_notation(self, config_files):
        assert config.get_config_value("retry.max_retries") == 5
        assert config.get_config_value("retry.missing", "fallback") == "fallback"
        assert config.get_config_value("nope.nested.key", 3) == 3

    def test_null_value_yields_default(self, config_files):
        assert config.get_config_value("image_generation.proxy_url", "http://default") == "http://default"

    def test_user_config_is_deep_merged(self, config_files):
        _, user_path = config_files
        user_path.parent.mkdir(parents=True)
        user_path.write_text(json.dumps({"retry": {"max_retries": 2}}))

        config.get_config(reload=True)

        assert config.get_config_value("retry.max_retries") == 2
        assert config.get_config_value("retry.initial_delay") == 1.0

    def test_environment_overrides(self, config_files, monkeypatch):
        monkeypatch.setenv("GOOGLE_CLOUD_PROJECT", "env-project")
        monkeypatch.setenv("CATALYST_PROXY_URL", "http://localhost:3001")

        config.get_config(reload=True)

        assert config.get_config_value("image_generation.project_id") == "env-project"
        assert config.get_config_value("image_generation.proxy_url") == "http://localhost:3001"

    def test_runtime_override_is_not_saved(self, config_files):
        _, user_path = config_files

        config.set_config_value("text_generation.model", "gemini-test")

        assert config.get_config_value("text_generation.model") == "gemini-test"
        assert not user_path.exists()

    def test_saved_override_persists(self, config_files):
        _, user_path = config_files

        config.set_config_value("proxy.port", 4000, save=True)

        assert json.loads(user_path.read_text())["proxy"]["port"] == 4000
        assert config.get_config(reload=True)["proxy"]["port"] == 4000

    def test_deep_merge(self):
        base = {"a": {"b": 1, "c": 2}, "d": 1}
        config.deep_merge(base, {"a": {"c": 3}, "e": 4})

        assert base == {"a": {"b": 1, "c": 3}, "d": 1, "e": 4}
