from __future__ import annotations

"""Minimal tracing helpers (Explain Mode).

Enable with the --explain CLI flag to emit terse, readable lines whenever
the fretboard is regenerated or a selection is resolved.
"""

import json
from typing import Any, Dict

_ENABLED = False


def enable(flag: bool = True) -> None:
    global _ENABLED
    _ENABLED = bool(flag)


def enabled() -> bool:
    return _ENABLED


def trace(event: str, payload: Dict[str, Any] | None = None) -> None:
    if not _ENABLED:
        return
    data = payload or {}
    # one line JSON; enums and other non-JSON values fall back to str()
    print(f"[EXPLAIN] {event} :: {json.dumps(data, separators=(',',':'), default=str)}")
