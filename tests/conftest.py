"""Shared fixtures.

Every test runs in an empty temporary working directory with a private
XDG config dir, so neither a developer's `.env` nor their user config can
leak into settings.
"""

from __future__ import annotations

from typing import Sequence

import pytest

from core.config import AppSettings
from core.domain.models import ConfigType, Platform

BASE_URL = "https://api.example.com/v1/packages"
HOST = "internal.example"

_API_VARS = (
    "API_HOST",
    "API_URL",
    "API_VERIFY_TLS",
    "API_TIMEOUT_SECONDS",
    "API_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    for name in _API_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def api_env(monkeypatch):
    monkeypatch.setenv("API_HOST", HOST)
    monkeypatch.setenv("API_URL", BASE_URL)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(host=HOST, url=BASE_URL, _env_file=None)


class ScriptedPrompter:
    """Answers prompts from a script and records which ones were shown."""

    def __init__(
        self,
        *,
        token: str = "Bearer test-token",
        platforms: Sequence[Platform] = (Platform.MAC,),
        config_type: ConfigType | None = None,
        search_package: str = "",
        confirm: bool = True,
    ) -> None:
        self.token = token
        self.platforms = list(platforms)
        self.config_type = config_type
        self.search_package = search_package
        self.confirm = confirm
        self.asked: list[str] = []

    def ask_token(self) -> str:
        self.asked.append("token")
        return self.token

    def ask_platforms(self) -> list[Platform]:
        self.asked.append("platforms")
        return list(self.platforms)

    def ask_config_type(self) -> ConfigType | None:
        self.asked.append("config_type")
        return self.config_type

    def ask_search_package(self) -> str:
        self.asked.append("search_package")
        return self.search_package

    def confirm_send(self) -> bool:
        self.asked.append("confirm")
        return self.confirm
