"""Interactive prompts (questionary).

`unsafe_ask` is used everywhere: questionary's plain `ask` turns Ctrl-C into
`None`, whereas an interrupt here has to end the program.
"""

from __future__ import annotations

from typing import Any

import questionary

from core.domain.models import ConfigType, Platform
from core.interfaces.prompter import SelectionPrompter

NO_CONFIG_TYPE = "None"


class QuestionaryPrompter(SelectionPrompter):
    """Terminal implementation of `SelectionPrompter`.

    `prompt_kwargs` (e.g. prompt_toolkit `input`/`output`) are forwarded to
    every question.
    """

    def __init__(self, **prompt_kwargs: Any) -> None:
        self._prompt_kwargs = prompt_kwargs

    def ask_token(self) -> str:
        return questionary.text("Enter your authorization token", **self._prompt_kwargs).unsafe_ask()

    def ask_platforms(self) -> list[Platform]:
        values = questionary.checkbox(
            "Select platforms (Space to select, Enter to confirm)",
            choices=[p.value for p in Platform],
            **self._prompt_kwargs,
        ).unsafe_ask()
        return [Platform(v) for v in values or []]

    def ask_config_type(self) -> ConfigType | None:
        choice = questionary.select(
            "Select config type",
            choices=[NO_CONFIG_TYPE] + [c.value for c in ConfigType],
            default=NO_CONFIG_TYPE,
            **self._prompt_kwargs,
        ).unsafe_ask()
        if choice == NO_CONFIG_TYPE:
            return None
        return ConfigType(choice)

    def ask_search_package(self) -> str:
        return (
            questionary.text("Enter search package (press Enter to skip)", **self._prompt_kwargs).unsafe_ask()
            or ""
        )

    def confirm_send(self) -> bool:
        return bool(
            questionary.confirm("Do you want to send this request?", **self._prompt_kwargs).unsafe_ask()
        )
