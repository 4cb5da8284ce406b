"""Tests for settings loading (.env files, env vars, error translation)."""

from __future__ import annotations

import pytest

from core.config import get_user_env_file, load_settings, write_user_env_vars
from core.errors import ConfigError, ConfigMissingError


def test_loads_from_environment(api_env):
    settings = load_settings()

    assert settings.host == "internal.example"
    assert settings.url == "https://api.example.com/v1/packages"
    assert settings.verify_tls is False
    assert settings.timeout_seconds is None


def test_missing_both_variables():
    with pytest.raises(ConfigMissingError) as exc_info:
        load_settings()

    assert sorted(exc_info.value.names) == ["API_HOST", "API_URL"]
    assert "API_HOST must be set in .env file" in str(exc_info.value)


def test_empty_value_counts_as_missing(monkeypatch):
    monkeypatch.setenv("API_HOST", "internal.example")
    monkeypatch.setenv("API_URL", "")

    with pytest.raises(ConfigMissingError) as exc_info:
        load_settings()

    assert exc_info.value.names == ["API_URL"]


def test_project_env_file_is_read(isolated_env):
    (isolated_env / ".env").write_text(
        "API_HOST=from-file\nAPI_URL=https://file.example/api\n",
        encoding="utf-8",
    )

    settings = load_settings()

    assert settings.host == "from-file"
    assert settings.url == "https://file.example/api"


def test_environment_beats_env_file(isolated_env, monkeypatch):
    (isolated_env / ".env").write_text(
        "API_HOST=from-file\nAPI_URL=https://file.example/api\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("API_HOST", "from-env")

    assert load_settings().host == "from-env"


def test_user_env_file_is_read():
    write_user_env_vars({"API_HOST": "user-host", "API_URL": "https://user.example"})

    settings = load_settings()

    assert settings.host == "user-host"
    assert settings.url == "https://user.example"


def test_invalid_timeout_is_a_config_error(api_env, monkeypatch):
    monkeypatch.setenv("API_TIMEOUT_SECONDS", "0")

    with pytest.raises(ConfigError) as exc_info:
        load_settings()

    assert not isinstance(exc_info.value, ConfigMissingError)
    assert "API_TIMEOUT_SECONDS" in str(exc_info.value)


def test_verify_tls_from_env_and_override(api_env, monkeypatch):
    monkeypatch.setenv("API_VERIFY_TLS", "true")

    assert load_settings().verify_tls is True
    assert load_settings(verify_tls=False).verify_tls is False


def test_write_user_env_vars_merges_existing(isolated_env):
    env_path = write_user_env_vars({"API_HOST": "one"})
    write_user_env_vars({"API_URL": "https://two.example"})

    assert env_path == get_user_env_file()
    assert str(env_path).startswith(str(isolated_env / "xdg"))
    content = env_path.read_text(encoding="utf-8")
    assert "API_HOST=one" in content
    assert "API_URL=https://two.example" in content
