from __future__ import annotations

import os
from dataclasses import dataclass


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value >= 0 else default


@dataclass(frozen=True)
class Settings:
    # Logging (always stderr)
    log_level: str

    # On-disk formatting
    json_indent: int
    sort_keys: bool


def get_settings() -> Settings:
    log_level = (os.getenv("KEEBOX_LOG_LEVEL") or "WARNING").strip().upper()

    json_indent = _env_int("KEEBOX_JSON_INDENT", 2)
    sort_keys = _env_bool("KEEBOX_SORT_KEYS", True)

    return Settings(
        log_level=log_level,
        json_indent=json_indent,
        sort_keys=sort_keys,
    )
