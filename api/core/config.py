"""
Environment-driven settings.

Every value is read on call so tests can monkeypatch `os.environ`.
"""

from __future__ import annotations

import os

DEFAULT_CORS_ORIGINS = ("http://localhost:5173", "http://127.0.0.1:5173")


def env_str(name: str, default: str) -> str:
    return os.environ.get(name, default).strip() or default


def env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def log_level() -> str:
    return env_str("LOG_LEVEL", "INFO").upper()


def server_host() -> str:
    return env_str("HOST", "0.0.0.0")


def server_port() -> int:
    return env_int("PORT", 3000)


def cors_origins() -> list[str]:
    raw = os.environ.get("CORS_ORIGINS", "").strip()
    if not raw:
        return list(DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]
