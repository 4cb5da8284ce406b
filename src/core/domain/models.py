"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation and self-documenting fields (Field) without coupling the
  core to I/O libraries.
- Platforms and config types are closed enums, so invalid values cannot be
  represented at all.

Note:
- These models describe *what* a request is, not *how* it is sent.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


class Platform(str, Enum):
    """Target platforms. Declaration order is the canonical query order."""

    WINDOWS = "windows"
    MAC = "mac"
    LINUX = "linux"

    @classmethod
    def canonical(cls, platforms: Iterable["Platform"]) -> list["Platform"]:
        """Deduplicate and sort into declaration order."""

        chosen = set(platforms)
        return [p for p in cls if p in chosen]


class ConfigType(str, Enum):
    """Optional classification parameter. Absence is modelled as `None`."""

    COMPUTER = "computer"
    USER = "user"


class Selections(BaseModel):
    """The user's aggregated prompt answers.

    Why it is frozen:
    - Built once by the prompt sequence, then read by the URL builder and the
      summary printer; nothing mutates it afterwards.
    """

    model_config = ConfigDict(frozen=True)

    auth_token: str = Field(
        default="",
        description="Literal value for the Authorization header (may be empty).",
    )
    platforms: list[Platform] = Field(
        ...,
        min_length=1,
        description="Selected platforms, deduplicated and in canonical order.",
    )
    config_type: ConfigType | None = Field(
        default=None,
        description="Config type, or None to omit the parameter.",
    )
    search_package: str | None = Field(
        default=None,
        description="Search term, or None to omit the parameter.",
    )

    @field_validator("platforms")
    @classmethod
    def _canonical_platforms(cls, value: list[Platform]) -> list[Platform]:
        return Platform.canonical(value)

    @field_validator("search_package")
    @classmethod
    def _empty_search_is_none(cls, value: str | None) -> str | None:
        return value or None


class ApiRequest(BaseModel):
    """A fully assembled GET request, derived from settings + selections."""

    model_config = ConfigDict(frozen=True)

    method: str = Field(default="GET", description="Always GET.")
    url: str = Field(..., min_length=1, description="Base URL plus encoded query.")
    headers: dict[str, str] = Field(
        default_factory=dict,
        description="Ordered headers: Authorization, Accept, Host.",
    )


class ApiResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    status_code: int = Field(..., description="HTTP status code.")
    reason: str = Field(default="", description="Reason phrase (e.g. 'OK').")
    body: str = Field(default="", description="Decoded response body.")

    @property
    def status_line(self) -> str:
        return f"{self.status_code} {self.reason}".strip()
