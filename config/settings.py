from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv


DEFAULT_USER_GUIDE_URL = "https://ay2324s1-cs2103t-t17-2.github.io/tp/UserGuide.html"


def _load_env() -> None:
    # Centralized dotenv loading; safe if .env missing
    load_dotenv()


def _as_bool(value: str | None) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    # Core/runtime
    db_path: str
    run_env: str

    log_level: str

    # Help
    user_guide_url: str = DEFAULT_USER_GUIDE_URL

    # Command tracing
    command_trace: bool = False
    command_log_path: str = "logs/commands.jsonl"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_env()
    return Settings(
        db_path=os.getenv("DB_PATH", "linkmein.db"),
        run_env=os.getenv("RUN_ENV", "local"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        user_guide_url=os.getenv("USER_GUIDE_URL", DEFAULT_USER_GUIDE_URL),
        command_trace=_as_bool(os.getenv("COMMAND_TRACE", "false")),
        command_log_path=os.getenv("COMMAND_LOG_PATH", "logs/commands.jsonl"),
    )
