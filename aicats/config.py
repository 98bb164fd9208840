from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from aicats._version import __version__

DEFAULT_API_URL = "https://api.ai-cats.net/v1"


def _as_timeout(value: str | None) -> float | None:
    """Parse a positive number of seconds; anything else disables the timeout."""

    if value is None:
        return None
    try:
        seconds = float(value.strip())
    except (TypeError, ValueError):
        return None
    return seconds if seconds > 0 else None


def _normalise_url(value: str | None) -> str:
    v = (value or "").strip()
    if not v:
        return DEFAULT_API_URL
    return v.rstrip("/")


@dataclass(frozen=True)
class Settings:
    api_url: str = DEFAULT_API_URL
    timeout: float | None = None
    proxy: str | None = None
    user_agent: str = f"aicats-python/{__version__}"

    @classmethod
    def from_env(cls) -> "Settings":
        def _get(name: str) -> str | None:
            v = os.getenv(name)
            if v is None or not v.strip():
                return None
            return v.strip()

        return cls(
            api_url=_normalise_url(_get("AICATS_API_URL")),
            timeout=_as_timeout(_get("AICATS_TIMEOUT")),
            proxy=_get("AICATS_PROXY"),
            user_agent=_get("AICATS_USER_AGENT") or f"aicats-python/{__version__}",
        )


@lru_cache()
def get_settings() -> Settings:
    return Settings.from_env()
