"""
Environment-based settings.

Each setting is a small function so tests can monkeypatch the environment
without reloading modules.
"""

from __future__ import annotations

import os


def env_str(name: str, default: str = "") -> str:
    return os.environ.get(name, default).strip() or default


def env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def env_list(name: str, default: list[str]) -> list[str]:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return list(default)
    return [item.strip() for item in raw.split(",") if item.strip()]


def log_level() -> str:
    return env_str("LOG_LEVEL", "INFO").upper()


def cors_origins() -> list[str]:
    return env_list("CORS_ORIGINS", ["http://localhost:5173", "http://127.0.0.1:5173"])


def public_daycare_id() -> str:
    return env_str("PUBLIC_DAYCARE_ID", "PUBLIC")


def bootstrap_admin() -> tuple[str, str] | None:
    email = env_str("ADMIN_EMAIL")
    password = os.environ.get("ADMIN_PASSWORD", "")
    if not email or not password:
        return None
    return email, password
