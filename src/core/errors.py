"""Domain errors.

Only these are caught by the CLI and turned into messages and exit codes.
Transport errors (httpx) and prompt errors propagate untouched.
"""

from __future__ import annotations

from typing import Sequence


class RequestToolError(Exception):
    """Base class for errors the CLI reports without a traceback."""


class ConfigError(RequestToolError):
    """Configuration is present but invalid."""


class ConfigMissingError(ConfigError):
    """One or more required environment variables are absent or empty."""

    def __init__(self, names: Sequence[str]) -> None:
        self.names = list(names)
        super().__init__("; ".join(f"{name} must be set in .env file" for name in self.names))


class SelectionValidationError(RequestToolError):
    """The user's answers cannot produce a request."""


class NoPlatformSelectedError(SelectionValidationError):
    def __init__(self) -> None:
        super().__init__("You must select at least one platform")
