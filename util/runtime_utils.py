"""Runtime timing helpers for console logs."""

from __future__ import annotations

import time


def format_duration(seconds: float) -> str:
    seconds = max(0.0, float(seconds))
    m, s = divmod(seconds, 60.0)
    if m >= 1:
        return f"{int(m)}m{s:05.2f}s"
    return f"{s:.2f}s"


def elapsed_since(started: float) -> str:
    """Human readable time since a ``time.monotonic()`` reading."""
    return format_duration(time.monotonic() - started)
