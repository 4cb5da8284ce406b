"""Response body formatting."""

from __future__ import annotations

import json


def _reject_constant(name: str) -> float:
    # NaN/Infinity are not JSON; such bodies are shown raw.
    raise ValueError(f"non-standard JSON constant {name}")


def format_body(text: str) -> str:
    """Pretty-print `text` when it is JSON, otherwise return it unchanged.

    Malformed JSON is not an error here: the raw text is the fallback. So is
    JSON nested too deeply to decode.
    """

    try:
        payload = json.loads(text, parse_constant=_reject_constant)
        return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True)
    except (ValueError, RecursionError):
        return text
