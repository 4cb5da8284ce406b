"""Logging setup.

Modules log through `logging.getLogger(__name__)`; this installs one Rich
handler on stderr so log lines never interleave with the stdout summary.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: str | int = "WARNING") -> None:
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
    )
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
    # httpx/httpcore are chatty at DEBUG; keep them one notch quieter.
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(max(level, logging.INFO))
