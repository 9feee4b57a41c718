"""Append-only debug log shared by the flow controller and the TUI."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from pizzaria import config


def log_debug(event: str, /, **fields: object) -> None:
    """Write one `<timestamp> <event> key=value ...` line to the debug log."""
    parts = [event]
    parts.extend(f"{key}={value!r}" for key, value in fields.items())
    try:
        ts = datetime.now(timezone.utc).isoformat()
        path = Path(config.DEBUG_LOG_PATH)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a", encoding="utf-8") as fh:
            fh.write(f"{ts} {' '.join(parts)}\n")
    except OSError:
        # Logging must never interfere with the order flow.
        return
