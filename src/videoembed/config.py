"""Runtime settings, read once from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from . import __version__

load_dotenv()


@dataclass(frozen=True)
class Settings:
    http_timeout: Optional[float]
    user_agent: str
    log_level: str


def _optional_float(name: str) -> Optional[float]:
    raw = os.getenv(name)
    if raw in (None, "", "None"):
        return None
    try:
        return float(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be a number of seconds, got {raw!r}") from exc


def _build_settings() -> Settings:
    return Settings(
        http_timeout=_optional_float("VIDEOEMBED_HTTP_TIMEOUT"),
        user_agent=os.getenv("VIDEOEMBED_USER_AGENT", f"videoembed/{__version__}"),
        log_level=os.getenv("VIDEOEMBED_LOG_LEVEL", "INFO").upper(),
    )


settings = _build_settings()
