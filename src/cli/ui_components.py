"""UI components for the CLI (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- Everything user-supplied (token, URL, body) is rendered as plain `Text`,
  never as markup, so brackets in JSON or tokens print literally.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from core.config import AppSettings
from core.domain.models import ApiRequest, ApiResponse, Selections
from core.services.formatting import format_body

SEPARATOR = "========================================"


def print_banner(console: Console) -> None:
    title = Text("API REQUEST TOOL", style="bold cyan")
    subtitle = Text("Prompt • Build • Confirm • Send", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def print_separator(console: Console) -> None:
    console.print()
    console.print(SEPARATOR, style="dim", markup=False, highlight=False)
    console.print()


def _line(console: Console, label: str, value: str) -> None:
    console.print(
        Text.assemble((f"{label}: ", "bold"), value),
        soft_wrap=True,
        highlight=False,
    )


def print_request_summary(
    console: Console,
    *,
    request: ApiRequest,
    selections: Selections,
    settings: AppSettings,
) -> None:
    """Render the assembled request for review before the confirmation gate."""

    console.print(Text("REQUEST SUMMARY", style="bold"))
    console.print("--------------", markup=False, highlight=False)
    _line(console, "Method", request.method)
    _line(console, "URL", request.url)

    console.print()
    console.print(Text("Headers:", style="bold"))
    for name, value in request.headers.items():
        _line(console, name, value)

    console.print()
    platforms = ", ".join(f'"{p.value}"' for p in selections.platforms)
    _line(console, "Selected Platforms", f"[{platforms}]")
    if selections.config_type is not None:
        _line(console, "Config Type", selections.config_type.value)
    if selections.search_package:
        _line(console, "Search Package", selections.search_package)

    if not settings.verify_tls:
        console.print()
        console.print(
            Text("Warning: TLS certificate verification is disabled (--insecure).", style="yellow"),
            soft_wrap=True,
        )


def print_response(console: Console, response: ApiResponse) -> None:
    console.print(Text("RESPONSE DETAILS", style="bold"))
    console.print("---------------", markup=False, highlight=False)
    _line(console, "Status", response.status_line)

    console.print()
    console.print(Text("Response Body:", style="bold"))
    console.print(Text(format_body(response.body)), soft_wrap=True, highlight=False)
