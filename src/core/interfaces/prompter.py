"""Contract for the interactive prompt sequence.

Why Protocol:
- A structural contract (duck typing) with no rigid inheritance.
- The questionary adapter and the scripted test prompter are interchangeable,
  so the pipeline can be tested without a terminal.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import ConfigType, Platform


@runtime_checkable
class SelectionPrompter(Protocol):
    """Minimal contract for collecting a request's parameters.

    Design rules:
    - Every method blocks until the user answers.
    - Interrupts and closed input streams propagate as exceptions.
    """

    def ask_token(self) -> str:
        """Free-text authorization token; empty is allowed."""

        ...

    def ask_platforms(self) -> list[Platform]:
        """Multi-select; may return an empty list."""

        ...

    def ask_config_type(self) -> ConfigType | None:
        """Single-select; `None` means the parameter is omitted."""

        ...

    def ask_search_package(self) -> str:
        ...

    def confirm_send(self) -> bool:
        ...
