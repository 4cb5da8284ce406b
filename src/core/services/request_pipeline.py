"""Request orchestration utilities.

The CLI delegates the prompt -> build -> send flow to these helpers so the
pipeline can be driven by a scripted prompter in tests, and side-effects
(printing separators, panels) stay in the UI layer via hooks.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Callable

from adapters.http_client import send_request
from core.config import AppSettings
from core.domain.models import ApiRequest, ApiResponse, Selections
from core.errors import NoPlatformSelectedError
from core.interfaces.prompter import SelectionPrompter

_LOGGER = logging.getLogger(__name__)


@dataclass
class PipelineHooks:
    """Optional callbacks for UI layers."""

    step_done: Callable[[], None] | None = None


def _step_done(hooks: PipelineHooks | None) -> None:
    if hooks and hooks.step_done:
        hooks.step_done()


def collect_selections(
    prompter: SelectionPrompter,
    hooks: PipelineHooks | None = None,
) -> Selections:
    """Run the four prompts in their fixed order.

    Raises `NoPlatformSelectedError` straight after the platform prompt if
    nothing was chosen; the remaining prompts are not shown.
    """

    auth_token = prompter.ask_token()
    _step_done(hooks)

    platforms = prompter.ask_platforms()
    if not platforms:
        raise NoPlatformSelectedError()
    _step_done(hooks)

    config_type = prompter.ask_config_type()
    _step_done(hooks)

    search_package = prompter.ask_search_package()

    selections = Selections(
        auth_token=auth_token,
        platforms=platforms,
        config_type=config_type,
        search_package=search_package,
    )
    _LOGGER.debug(
        "Collected selections platforms=%s config_type=%s search_package=%r",
        [p.value for p in selections.platforms],
        selections.config_type.value if selections.config_type else None,
        selections.search_package,
    )
    return selections


def execute(request: ApiRequest, settings: AppSettings) -> ApiResponse:
    """Send the request on a fresh event loop and wait for the response."""

    return asyncio.run(send_request(request, settings))
