from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional


def _ensure_parent_dir(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def log_command(
    *,
    command: str,
    status: str = "ok",
    message: Optional[str] = None,
    extras: Optional[Dict[str, Any]] = None,
) -> None:
    """Append a single JSON line describing an executed command if tracing is enabled.

    Controlled by COMMAND_TRACE / COMMAND_LOG_PATH in config/settings.py
    """
    from config.settings import get_settings
    settings = get_settings()
    if not settings.command_trace:
        return

    log_path = Path(settings.command_log_path)
    _ensure_parent_dir(log_path)

    payload: Dict[str, Any] = {
        "ts": datetime.now(timezone.utc).isoformat(),
        "command": command,
        "status": status,
        "message": message,
    }
    if extras:
        payload.update(extras)

    with log_path.open("a", encoding="utf-8") as f:
        f.write(json.dumps(payload, ensure_ascii=False, default=str) + "\n")
