"""Runtime configuration loaded from environment variables."""

from __future__ import annotations

import os


def env_int(name: str, default: int, minimum: int = 1) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value >= minimum else default


def env_str(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


MAX_PAGES = env_int("RESUME_MAX_PAGES", 200, minimum=1)
MAX_BODY_BYTES = env_int("RESUME_MAX_BODY_BYTES", 16 * 1024 * 1024, minimum=1024)
DEFAULT_PAPER_SIZE = env_str("RESUME_PAPER_SIZE", "a4")
LOG_LEVEL = env_str("RESUME_LOG_LEVEL", "WARNING").upper()
