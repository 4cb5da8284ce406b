"""Tests for prompt sequencing and the sync execute wrapper."""

from __future__ import annotations

import httpx
import pytest
import respx

from conftest import ScriptedPrompter
from core.domain.models import ApiRequest, ConfigType, Platform
from core.errors import NoPlatformSelectedError
from core.interfaces.prompter import SelectionPrompter
from core.services.request_pipeline import PipelineHooks, collect_selections, execute


def test_scripted_prompter_satisfies_protocol():
    assert isinstance(ScriptedPrompter(), SelectionPrompter)


def test_prompts_run_in_fixed_order_with_separators():
    prompter = ScriptedPrompter(
        platforms=[Platform.LINUX, Platform.WINDOWS],
        config_type=ConfigType.USER,
        search_package="7zip",
    )
    steps: list[str] = []

    selections = collect_selections(prompter, PipelineHooks(step_done=lambda: steps.append("sep")))

    assert prompter.asked == ["token", "platforms", "config_type", "search_package"]
    assert steps == ["sep", "sep", "sep"]
    assert selections.platforms == [Platform.WINDOWS, Platform.LINUX]
    assert selections.config_type is ConfigType.USER
    assert selections.search_package == "7zip"


def test_empty_search_becomes_none():
    selections = collect_selections(ScriptedPrompter(search_package=""))
    assert selections.search_package is None


def test_no_platforms_stops_the_sequence():
    prompter = ScriptedPrompter(platforms=[])

    with pytest.raises(NoPlatformSelectedError, match="at least one platform"):
        collect_selections(prompter)

    assert prompter.asked == ["token", "platforms"]


@respx.mock
def test_execute_runs_the_request(settings):
    respx.get("https://api.example.com/v1/packages").mock(
        return_value=httpx.Response(200, text="ok")
    )

    response = execute(ApiRequest(url="https://api.example.com/v1/packages"), settings)

    assert response.body == "ok"
