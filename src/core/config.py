"""Core configuration.

Why here:
- Centralises environment variables (pydantic-settings) without polluting the CLI.
- Lets adapters (HTTP) read configuration consistently.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.errors import ConfigError, ConfigMissingError

ENV_PREFIX = "API_"
APP_DIR_NAME = "api-request-tool"


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / APP_DIR_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_DIR_NAME

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_DIR_NAME
    return Path.home() / ".config" / APP_DIR_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def default_env_files() -> tuple[str, ...]:
    # Project first (dev), then the global user config.
    return (".env", str(get_user_env_file()))


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str], *, env_path: Path | None = None) -> Path:
    """Write or update variables in the user's global .env."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# api-request-tool user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Central application configuration.

    `host` and `url` map to `API_HOST` and `API_URL`. Both are required: there
    is no sensible default for the endpoint a request goes to.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        extra="ignore",
        case_sensitive=False,
        frozen=True,
        env_file=(".env",),
        env_file_encoding="utf-8",
    )

    host: str = Field(
        ...,
        min_length=1,
        description="Value sent in the Host header.",
    )
    url: str = Field(
        ...,
        min_length=1,
        description="Base URL the query parameters are appended to.",
    )
    verify_tls: bool = Field(
        default=False,
        description="Validate TLS certificates. Disabled by default for internal/test endpoints.",
    )
    timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Request timeout in seconds. No timeout when unset.",
    )
    log_level: str = Field(
        default="WARNING",
        min_length=1,
        description="Root log level (DEBUG, INFO, WARNING, ...).",
    )


def _env_name(loc: tuple[Any, ...]) -> str:
    field = str(loc[0]) if loc else "?"
    return f"{ENV_PREFIX}{field.upper()}"


def load_settings(
    *,
    env_file: Path | str | tuple[str, ...] | None = None,
    **overrides: Any,
) -> AppSettings:
    """Build `AppSettings`, translating validation failures into domain errors.

    A missing or empty `API_HOST`/`API_URL` raises `ConfigMissingError`; any
    other invalid value raises `ConfigError`.
    """

    env_files = env_file if env_file is not None else default_env_files()
    try:
        return AppSettings(_env_file=env_files, **overrides)
    except ValidationError as exc:
        missing: list[str] = []
        invalid: list[str] = []
        for error in exc.errors():
            name = _env_name(tuple(error.get("loc", ())))
            if error.get("type") in {"missing", "string_too_short"}:
                missing.append(name)
            else:
                invalid.append(f"{name}: {error.get('msg')}")
        if missing and not invalid:
            raise ConfigMissingError(missing) from exc
        raise ConfigError("; ".join(invalid + [f"{m} must be set" for m in missing])) from exc
