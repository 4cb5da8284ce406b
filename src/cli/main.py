"""CLI entrypoint (Typer).

Running `api-request-tool` with no subcommand starts the interactive flow:
prompt -> build -> summary -> confirm -> send -> print.
"""

from __future__ import annotations

import os
import sys
from typing import Optional

import typer
from rich.console import Console
from rich.text import Text

from adapters.prompts import QuestionaryPrompter
from cli.ui_components import (
    print_banner,
    print_request_summary,
    print_response,
    print_separator,
)
from core.config import load_settings, write_user_env_vars
from core.errors import ConfigError, SelectionValidationError
from core.logging import configure_logging
from core.services.request_pipeline import PipelineHooks, collect_selections, execute
from core.services.url_builder import build_request

app = typer.Typer(
    name="api-request-tool",
    help="Interactively build, review and send a single GET request.",
    add_completion=False,
)

_console = Console()


def _print_error(message: str) -> None:
    _console.print()
    _console.print(Text(f"Error: {message}", style="bold red"), soft_wrap=True)


def _run_request(*, verify_tls: bool | None, wait: bool, verbose: bool) -> None:
    overrides = {} if verify_tls is None else {"verify_tls": verify_tls}
    try:
        settings = load_settings(**overrides)
    except ConfigError as exc:
        _print_error(str(exc))
        raise typer.Exit(code=1) from exc

    configure_logging("DEBUG" if verbose else settings.log_level)
    print_banner(_console)

    prompter = QuestionaryPrompter()
    hooks = PipelineHooks(step_done=lambda: print_separator(_console))
    try:
        selections = collect_selections(prompter, hooks)
    except SelectionValidationError as exc:
        _print_error(str(exc))
        raise typer.Exit(code=1) from exc

    request = build_request(settings, selections)

    print_separator(_console)
    print_request_summary(_console, request=request, selections=selections, settings=settings)
    print_separator(_console)

    if not prompter.confirm_send():
        _console.print("Request cancelled")
        return

    _console.print("Sending GET request...")
    _console.print()
    response = execute(request, settings)
    print_response(_console, response)

    if wait:
        _console.print()
        try:
            _console.input("Press Enter to exit...")
        except EOFError:
            # Closed stdin just means there is nobody to wait for.
            _console.print()


_VERIFY_OPTION = typer.Option(
    None,
    "--verify-tls/--insecure",
    help="Validate TLS certificates. Defaults to API_VERIFY_TLS (off).",
    show_default=False,
)
_WAIT_OPTION = typer.Option(True, "--wait/--no-wait", help="Wait for Enter before exiting.")
_VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr.")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verify_tls: Optional[bool] = _VERIFY_OPTION,
    wait: bool = _WAIT_OPTION,
    verbose: bool = _VERBOSE_OPTION,
) -> None:
    """Interactively build, review and send a single GET request."""

    if ctx.invoked_subcommand is None:
        _run_request(verify_tls=verify_tls, wait=wait, verbose=verbose)


@app.command()
def request(
    verify_tls: Optional[bool] = _VERIFY_OPTION,
    wait: bool = _WAIT_OPTION,
    verbose: bool = _VERBOSE_OPTION,
) -> None:
    """Run the interactive request flow."""

    _run_request(verify_tls=verify_tls, wait=wait, verbose=verbose)


@app.command()
def configure() -> None:
    """Store API_HOST and API_URL in the user config .env.

    Lets the tool run from any directory without a project-local .env.
    """

    host = typer.prompt("API host", default=os.environ.get("API_HOST", ""), show_default=True).strip()
    url = typer.prompt("API base URL", default=os.environ.get("API_URL", ""), show_default=True).strip()

    if not host or not url:
        raise typer.BadParameter("API host and API base URL are required")

    env_path = write_user_env_vars({"API_HOST": host, "API_URL": url})
    _console.print(f"[green]Saved API config to:[/green] {env_path}", soft_wrap=True)


def run() -> None:
    # Windows terminals default to cp1252; the banner and JSON bodies may not fit it.
    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")
    app()
