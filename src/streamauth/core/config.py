from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8001
LOG_LEVELS = ("critical", "error", "warning", "info", "debug")


def _env(name: str, default: str | None = None) -> str | None:
    v = os.getenv(name)
    if v is None or v == "":
        return default
    return v


def _parse_port(value: str) -> int:
    try:
        port = int(value)
    except ValueError:
        raise ValueError(f"Invalid port: {value!r}")
    if not 0 <= port <= 65535:
        raise ValueError(f"Port out of range: {port}")
    return port


def _parse_log_level(value: str) -> str:
    level = value.lower()
    if level not in LOG_LEVELS:
        raise ValueError(f"Invalid log level: {value!r} (expected one of {', '.join(LOG_LEVELS)})")
    return level


@dataclass(frozen=True)
class Settings:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = "info"
    access_log: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            host=_env("STREAMAUTH_HOST", DEFAULT_HOST) or DEFAULT_HOST,
            port=_parse_port(_env("STREAMAUTH_PORT", str(DEFAULT_PORT)) or str(DEFAULT_PORT)),
            log_level=_parse_log_level(_env("STREAMAUTH_LOG_LEVEL", "info") or "info"),
            access_log=_env("STREAMAUTH_ACCESS_LOG", "0") in {"1", "true", "True", "yes"},
        )
